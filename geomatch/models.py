"""
Typed data models for the geo-proximity matching engine.
All data structures shared between matchers, sources and the CLI are defined here.
"""
import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from geomatch.errors import ContractViolationError

PENDING = "pending"
ACCEPTED = "accepted"
COMPLETED = "completed"
REQUEST_STATUSES = (PENDING, ACCEPTED, COMPLETED)


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees."""
    lat: float
    lng: float


@dataclass(frozen=True)
class Provider:
    """A registered Casco Giallo as published by the provider registry."""
    id: str
    email: str
    location: Coordinate
    name: Optional[str] = None
    phone: Optional[str] = None
    street: Optional[str] = None
    service_radius_km: Optional[float] = None  # None -> DEFAULT_SERVICE_RADIUS_KM
    services: Tuple[str, ...] = ()
    description: Optional[str] = None


@dataclass(frozen=True)
class ServiceRequest:
    """A client's posted need for a service at a given location."""
    id: str
    client_id: str
    client_name: str
    category: str
    description: str
    origin: Coordinate
    created_at: datetime
    status: str = PENDING
    address: Optional[str] = None
    matches: Tuple[str, ...] = ()
    assigned_provider_id: Optional[str] = None
    assigned_provider_name: Optional[str] = None


# Keys of MatchCandidate.to_dict(); every data source must emit exactly these.
CANDIDATE_FIELDS = (
    "id",
    "name",
    "display_name",
    "email",
    "phone",
    "street",
    "latitude",
    "longitude",
    "service_radius_km",
    "services",
    "description",
    "distance_km",
    "rating",
    "reviews",
    "price",
    "extras",
)


@dataclass
class MatchCandidate:
    """Ranked search result: a provider, its distance from the origin and display fields."""
    provider: Provider
    distance_km: float  # rounded to one decimal
    display_name: str
    description: str
    rating: float
    reviews: int
    price: str
    extras: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        p = self.provider
        return {
            "id": p.id,
            "name": p.name,
            "display_name": self.display_name,
            "email": p.email,
            "phone": p.phone,
            "street": p.street,
            "latitude": p.location.lat,
            "longitude": p.location.lng,
            "service_radius_km": p.service_radius_km,
            "services": list(p.services),
            "description": self.description,
            "distance_km": self.distance_km,
            "rating": self.rating,
            "reviews": self.reviews,
            "price": self.price,
            "extras": copy.deepcopy(self.extras),
        }


def check_candidate_shape(candidate: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fail fast when a serialized candidate does not carry exactly CANDIDATE_FIELDS.

    Returns:
        Dict[str, Any]: The candidate, unchanged.
    """
    keys = set(candidate)
    expected = set(CANDIDATE_FIELDS)
    if keys != expected:
        missing = sorted(expected - keys)
        unexpected = sorted(keys - expected)
        raise ContractViolationError(
            f"Candidate shape mismatch. Missing: {missing}, unexpected: {unexpected}"
        )
    return candidate
