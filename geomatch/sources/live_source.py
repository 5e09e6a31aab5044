import time
from typing import Iterable, List, Optional

from loguru import logger

from geomatch.clients import RegistryClient
from geomatch.config import REGISTRY_IN_RANGE_PATH
from geomatch.errors import SearchFailedError
from geomatch.matchers.matching_orchestrator import match_provider_records
from geomatch.models import Coordinate, MatchCandidate
from geomatch.sources.base import ProviderSource


def build_in_range_params(
    origin: Coordinate,
    radius: Optional[float] = None,
    categories: Optional[Iterable[str]] = None,
) -> List[tuple]:
    """
    Query string for the registry range endpoint.
    `radius` is sent only when given; each category becomes its own `services` pair.
    """
    params = [("lat", str(origin.lat)), ("lng", str(origin.lng))]
    if radius is not None:
        params.append(("radius", str(radius)))
    for category in categories or ():
        params.append(("services", category))
    return params


class LiveProviderSource(ProviderSource):
    """Searches the remote provider registry, one round trip per call."""

    name = "live"

    async def search(
        self,
        origin: Coordinate,
        radius: Optional[float] = None,
        categories: Optional[Iterable[str]] = None,
    ) -> List[MatchCandidate]:
        categories = list(categories) if categories else None
        params = build_in_range_params(origin, radius, categories)

        start = time.perf_counter()
        try:
            registry_client = RegistryClient()
            records = await registry_client.get_json(REGISTRY_IN_RANGE_PATH, params=params)
        except Exception as e:
            logger.warning(f"⚠️ Provider search failed around ({origin.lat}, {origin.lng}): {e}")
            raise SearchFailedError("Failed to get service providers in range") from e

        if not isinstance(records, list):
            logger.warning(f"⚠️ Unexpected registry payload type: {type(records).__name__}")
            raise SearchFailedError("Failed to get service providers in range")

        bad = [type(r).__name__ for r in records if not isinstance(r, dict)]
        if bad:
            logger.warning(f"⚠️ Registry returned non-object provider records: {bad}")
            raise SearchFailedError("Malformed provider record from registry")

        duration = time.perf_counter() - start
        logger.debug(f"✅ Registry returned {len(records)} providers in {duration:.2f}s")

        try:
            return match_provider_records(origin, records, radius, categories)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise SearchFailedError(f"Malformed provider record from registry: {e}") from e
