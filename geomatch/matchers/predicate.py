from typing import Iterable, Optional

from geomatch.config import DEFAULT_SEARCH_RADIUS_KM, DEFAULT_SERVICE_RADIUS_KM
from geomatch.models import PENDING, Provider, ServiceRequest


def service_radius_of(provider: Provider) -> float:
    """Radius the provider is willing to travel, falling back to the registry default."""
    if provider.service_radius_km is None:
        return DEFAULT_SERVICE_RADIUS_KM
    return provider.service_radius_km


def offers_any(provider: Provider, categories: Optional[Iterable[str]]) -> bool:
    """
    True when the provider offers at least one of the wanted categories.
    A missing or empty filter matches every provider.
    """
    wanted = set(categories or ())
    if not wanted:
        return True
    return not wanted.isdisjoint(provider.services)


def provider_in_range(
    provider: Provider,
    distance_km: float,
    search_radius_km: Optional[float] = None,
    categories: Optional[Iterable[str]] = None,
) -> bool:
    """
    Client-seeks-providers predicate.

    The provider must sit inside the searcher's radius AND inside its own service
    radius, and must offer one of the requested categories when a filter is given.
    Both radius boundaries are inclusive.

    Args:
        provider (Provider): Candidate provider.
        distance_km (float): Full-precision distance between search origin and provider.
        search_radius_km (Optional[float]): Searcher's radius, DEFAULT_SEARCH_RADIUS_KM if None.
        categories (Optional[Iterable[str]]): Wanted service categories.

    Returns:
        bool: True if the provider qualifies.
    """
    if search_radius_km is None:
        search_radius_km = DEFAULT_SEARCH_RADIUS_KM

    if distance_km > search_radius_km:
        return False
    if not offers_any(provider, categories):
        return False
    return distance_km <= service_radius_of(provider)


def provider_accepts_request(
    provider: Provider,
    request: ServiceRequest,
    distance_km: float,
) -> bool:
    """
    Provider-seeks-requests predicate.

    A request is an opportunity when it is still pending and unassigned, its
    category is one the provider offers, and it lies within the provider's radius.
    """
    if request.status != PENDING or request.assigned_provider_id:
        return False
    if request.category not in provider.services:
        return False
    return distance_km <= service_radius_of(provider)
