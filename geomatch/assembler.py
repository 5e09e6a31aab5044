"""
Result assembly: turns a matched provider and its distance into a MatchCandidate.
"""
import random
from typing import Any, Dict, Optional

from geomatch.models import MatchCandidate, Provider
from geomatch.records import extra_fields


def default_description(provider: Provider) -> str:
    services = ", ".join(provider.services).lower()
    return f"Professional {services} services. Contact for detailed consultation."


def synthetic_rating(rng) -> float:
    """Display rating in [4.2, 4.8)."""
    return 4.2 + rng.random() * 0.6


def synthetic_reviews(rng) -> int:
    """Display review count in [50, 250)."""
    return rng.randrange(50, 250)


def synthetic_price(rng) -> str:
    """Hourly price band such as "€52-78/hour"."""
    low = 40 + rng.randrange(40)
    high = 60 + rng.randrange(40)
    return f"€{low}-{high}/hour"


def assemble_candidate(
    provider: Provider,
    distance_km: float,
    record: Optional[Dict[str, Any]] = None,
    rng: Optional[random.Random] = None,
) -> MatchCandidate:
    """
    Combine a provider with its distance and display fields.

    Display fields published in the raw record win; the synthetic generators
    only fill what is missing. Identity fields come straight from the provider
    and are never rewritten.

    Args:
        provider (Provider): Matched provider.
        distance_km (float): Full-precision distance from the search origin.
        record (Optional[Dict[str, Any]]): Raw record the provider was parsed from.
        rng (Optional[random.Random]): Source for synthetic display fields.

    Returns:
        MatchCandidate: Candidate with distance rounded to one decimal.
    """
    record = record or {}
    rng = rng or random

    rating = record.get("rating")
    reviews = record.get("reviews")
    price = record.get("price")

    return MatchCandidate(
        provider=provider,
        distance_km=round(distance_km, 1),
        display_name=provider.name or provider.email,
        description=provider.description or default_description(provider),
        rating=float(rating) if rating is not None else synthetic_rating(rng),
        reviews=int(reviews) if reviews is not None else synthetic_reviews(rng),
        price=price if price is not None else synthetic_price(rng),
        extras=extra_fields(record),
    )
