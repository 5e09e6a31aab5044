import random
from datetime import datetime, timezone

from geomatch.matchers.distance import haversine_km
from geomatch.matchers.matching_orchestrator import (
    find_matches,
    find_opportunities,
    match_provider_records,
)
from geomatch.matchers.ranking import rank_by_distance
from geomatch.models import Coordinate, MatchCandidate, ServiceRequest
from geomatch.records import provider_from_record
from tests.factories import provider_record

ROME = Coordinate(lat=41.9028, lng=12.4964)


def test_nearby_provider_is_matched_with_rounded_distance():
    """
    A provider 1.5 km from central Rome, radius 10 km, default 50 km search.
    """
    records = [provider_record("cg-5", 41.9109, 12.4818, radius=10)]

    result = match_provider_records(ROME, records, radius=50, rng=random.Random(1))

    assert len(result) == 1
    assert isinstance(result[0], MatchCandidate)
    assert result[0].provider.id == "cg-5"
    assert result[0].distance_km == 1.5


def test_provider_outside_its_own_radius_is_excluded():
    """8 km away, inside the 50 km search but beyond the provider's 5 km."""
    record = provider_record("far", ROME.lat + 0.072, ROME.lng, radius=5)
    distance = haversine_km(ROME, provider_from_record(record).location)
    assert 7.9 < distance < 8.1

    assert match_provider_records(ROME, [record], radius=50) == []


def test_category_filter_excludes_other_trades():
    records = [provider_record("sparky", ROME.lat, ROME.lng, services=["Electrical"])]
    assert match_provider_records(ROME, records, categories=["Plumbing"]) == []
    assert len(match_provider_records(ROME, records, categories=["Plumbing", "Electrical"])) == 1


def test_equal_distances_keep_fixture_order():
    origin = Coordinate(lat=41.9, lng=0.0)
    b = provider_record("B", 41.9, 0.03)
    a = provider_record("A", 41.9, -0.03)

    forward = match_provider_records(origin, [b, a])
    backward = match_provider_records(origin, [a, b])

    assert [c.provider.id for c in forward] == ["B", "A"]
    assert [c.provider.id for c in backward] == ["A", "B"]


def test_results_are_sorted_by_full_precision_distance():
    """1.04 km and 1.01 km both round to 1.0 but must still rank nearest first."""
    origin = Coordinate(lat=0.0, lng=0.0)
    km = 1 / 111.195
    records = [
        provider_record("p-104", 1.04 * km, 0.0),
        provider_record("p-300", 3.0 * km, 0.0),
        provider_record("p-101", 1.01 * km, 0.0),
    ]

    result = match_provider_records(origin, records)

    assert [c.provider.id for c in result] == ["p-101", "p-104", "p-300"]
    assert [c.distance_km for c in result] == [1.0, 1.0, 3.0]


def test_empty_directory_gives_empty_result():
    assert match_provider_records(ROME, []) == []


def test_rank_by_distance_is_stable():
    scored = [("x", 2.0), ("y", 1.0), ("z", 2.0), ("w", 1.0)]
    assert [item for item, _ in rank_by_distance(scored)] == ["y", "w", "x", "z"]


def _request(rid, lat, lng, category="Plumbing", status="pending"):
    return ServiceRequest(
        id=rid,
        client_id="client-2",
        client_name="Giulia Bianchi",
        category=category,
        description="Needs work",
        origin=Coordinate(lat, lng),
        created_at=datetime(2024, 1, 16, 11, 0, tzinfo=timezone.utc),
        status=status,
    )


def test_find_opportunities_filters_and_ranks_requests():
    provider = provider_from_record(
        provider_record("cg-5", 41.9109, 12.4818, radius=15, services=["Plumbing", "Electrical"])
    )
    requests = [
        _request("far-away", 45.4642, 9.19),
        _request("close", 41.9110, 12.4820),
        _request("wrong-trade", 41.9110, 12.4820, category="Gardening"),
        _request("taken", 41.9110, 12.4820, status="accepted"),
        _request("mid", 41.95, 12.50),
    ]

    result = find_opportunities(provider, requests)

    assert [r.id for r in result] == ["close", "mid"]


def test_find_matches_uses_provider_radius_and_category():
    request = _request("req-1", ROME.lat, ROME.lng, category="Cleaning")
    providers = [
        provider_from_record(provider_record("near-cleaner", 41.90, 12.49, radius=5, services=["Cleaning"])),
        provider_from_record(provider_record("far-cleaner", 42.30, 12.49, radius=5, services=["Cleaning"])),
        provider_from_record(provider_record("near-painter", 41.90, 12.49, radius=5, services=["Painting"])),
        provider_from_record(provider_record("wide-cleaner", 42.0, 12.49, radius=20, services=["Cleaning"])),
    ]

    result = find_matches(request, providers)

    assert [p.id for p in result] == ["near-cleaner", "wide-cleaner"]
