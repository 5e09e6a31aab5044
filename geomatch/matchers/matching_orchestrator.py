# geomatch/matchers/matching_orchestrator.py

import random
from typing import Any, Dict, Iterable, List, Optional, Sequence

from loguru import logger

from geomatch.assembler import assemble_candidate
from geomatch.matchers.distance import haversine_km
from geomatch.matchers.predicate import provider_accepts_request, provider_in_range, service_radius_of
from geomatch.matchers.ranking import rank_by_distance
from geomatch.models import (
    Coordinate,
    MatchCandidate,
    Provider,
    ServiceRequest,
    check_candidate_shape,
)
from geomatch.records import provider_from_record


def match_provider_records(
    origin: Coordinate,
    records: Sequence[Dict[str, Any]],
    radius: Optional[float] = None,
    categories: Optional[Iterable[str]] = None,
    rng: Optional[random.Random] = None,
) -> List[MatchCandidate]:
    """
    Run raw provider records through distance, predicate, ranking and assembly.

    This is the single pipeline behind every data source, so live and synthetic
    searches cannot drift apart.

    Args:
        origin (Coordinate): Search origin.
        records (Sequence[Dict[str, Any]]): Raw registry records.
        radius (Optional[float]): Searcher's radius in km.
        categories (Optional[Iterable[str]]): Wanted service categories.
        rng (Optional[random.Random]): Source for synthetic display fields.

    Returns:
        List[MatchCandidate]: Qualifying providers, nearest first.
    """
    categories = list(categories) if categories else None

    scored = []
    for record in records:
        provider = provider_from_record(record)
        distance = haversine_km(origin, provider.location)
        if provider_in_range(provider, distance, radius, categories):
            scored.append(((provider, record), distance))

    ranked = rank_by_distance(scored)
    candidates = [
        assemble_candidate(provider, distance, record, rng)
        for (provider, record), distance in ranked
    ]
    for candidate in candidates:
        check_candidate_shape(candidate.to_dict())

    logger.debug(
        f"🔎 {len(candidates)}/{len(records)} providers matched around "
        f"({origin.lat:.5f}, {origin.lng:.5f}) radius={radius} categories={categories}"
    )
    return candidates


def find_opportunities(provider: Provider, requests: Sequence[ServiceRequest]) -> List[ServiceRequest]:
    """
    List the requests a provider can take, nearest first.

    Args:
        provider (Provider): Provider browsing for work.
        requests (Sequence[ServiceRequest]): Snapshot of current requests.

    Returns:
        List[ServiceRequest]: Pending, unassigned requests in the provider's
                              categories and service radius.
    """
    scored = []
    for request in requests:
        distance = haversine_km(provider.location, request.origin)
        if provider_accepts_request(provider, request, distance):
            scored.append((request, distance))
    return [request for request, _ in rank_by_distance(scored)]


def find_matches(request: ServiceRequest, providers: Sequence[Provider]) -> List[Provider]:
    """Providers whose own radius covers the request and who offer its category, nearest first."""
    scored = []
    for provider in providers:
        if request.category not in provider.services:
            continue
        distance = haversine_km(request.origin, provider.location)
        if distance <= service_radius_of(provider):
            scored.append((provider, distance))
    return [provider for provider, _ in rank_by_distance(scored)]
