"""
Conversion between raw registry records (the provider registry's JSON wire
format) and the typed models, plus CSV loaders for fixtures and search queries.
"""
import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pandas as pd

from geomatch.models import Coordinate, PENDING, Provider, ServiceRequest

# Wire keys mapped onto Provider fields
PROVIDER_KEYS = (
    "id",
    "fullName",
    "phoneNumber",
    "email",
    "street",
    "latitude",
    "longitude",
    "serviceRadius",
    "services",
    "description",
)

# Display fields the registry may or may not publish
DISPLAY_KEYS = ("rating", "reviews", "price")


def _split_services(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    return [str(s) for s in value]


def provider_from_record(record: Dict[str, Any]) -> Provider:
    """
    Build a Provider from a raw registry record.

    Args:
        record (Dict[str, Any]): Record such as
            {"id": 151, "fullName": "...", "email": "...", "latitude": 41.88,
             "longitude": 12.48, "serviceRadius": 10, "services": ["Plumbing"]}.

    Returns:
        Provider: Typed provider. Ids are normalised to strings.
    """
    radius = record.get("serviceRadius")
    return Provider(
        id=str(record["id"]),
        name=record.get("fullName"),
        email=record.get("email") or "",
        phone=record.get("phoneNumber"),
        street=record.get("street"),
        location=Coordinate(lat=float(record["latitude"]), lng=float(record["longitude"])),
        service_radius_km=float(radius) if radius is not None else None,
        services=tuple(_split_services(record.get("services"))),
        description=record.get("description"),
    )


def extra_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    """Raw fields that neither the Provider mapping nor the display fields consume."""
    consumed = set(PROVIDER_KEYS) | set(DISPLAY_KEYS)
    return {k: copy.deepcopy(v) for k, v in record.items() if k not in consumed}


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        return datetime.now(timezone.utc)
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def request_from_record(record: Dict[str, Any]) -> ServiceRequest:
    """Build a ServiceRequest from a raw request record as served by the requests API."""
    location = record["location"]
    return ServiceRequest(
        id=str(record["id"]),
        client_id=str(record.get("clientId", "")),
        client_name=record.get("clientName", ""),
        category=record["category"],
        description=record.get("description", ""),
        origin=Coordinate(lat=float(location["lat"]), lng=float(location["lng"])),
        address=record.get("address"),
        status=record.get("status", PENDING),
        created_at=_parse_timestamp(record.get("createdAt")),
        matches=tuple(str(m) for m in record.get("matches") or ()),
        assigned_provider_id=record.get("assignedCGId"),
        assigned_provider_name=record.get("assignedCGName"),
    )


def _clean_row(row: pd.Series) -> Dict[str, Any]:
    """Convert a pandas row to a plain dict, turning NaN into None."""
    out = {}
    for col in row.index:
        val = row[col]
        out[col] = None if pd.isna(val) else val
    return out


def load_provider_records_from_csv(file_path: str, nrows: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Load raw provider records from CSV.

    Columns follow the registry wire format; `services` holds a comma-separated
    list (e.g. "Plumbing,Electrical").
    """
    df = pd.read_csv(file_path, nrows=nrows, dtype={"id": str, "phoneNumber": str}, float_precision="round_trip")
    records = []
    for _, row in df.iterrows():
        record = _clean_row(row)
        record["services"] = _split_services(record.get("services"))
        if record.get("serviceRadius") is not None:
            record["serviceRadius"] = float(record["serviceRadius"])
        records.append(record)
    return records


def load_search_queries_from_csv(file_path: str, nrows: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Load search queries (lat, lng, optional radius, optional comma-separated services).

    Returns:
        List[Dict[str, Any]]: [{"origin": Coordinate, "radius": float | None,
                                "categories": List[str] | None}, ...]
    """
    df = pd.read_csv(file_path, nrows=nrows, float_precision="round_trip")
    queries = []
    for _, row in df.iterrows():
        values = _clean_row(row)
        radius = values.get("radius")
        services = _split_services(values.get("services"))
        queries.append({
            "origin": Coordinate(lat=float(values["lat"]), lng=float(values["lng"])),
            "radius": float(radius) if radius is not None else None,
            "categories": services or None,
        })
    return queries
