import pytest

from geomatch.matchers.distance import haversine_km
from geomatch.models import Coordinate

ROME = Coordinate(lat=41.9028, lng=12.4964)
MILAN = Coordinate(lat=45.4642, lng=9.1900)
SYDNEY = Coordinate(lat=-33.8688, lng=151.2093)


def test_distance_to_self_is_zero():
    assert haversine_km(ROME, ROME) == 0
    assert haversine_km(SYDNEY, SYDNEY) == 0


@pytest.mark.parametrize("a,b", [(ROME, MILAN), (MILAN, SYDNEY), (ROME, Coordinate(41.9109, 12.4818))])
def test_distance_is_symmetric(a, b):
    assert haversine_km(a, b) == haversine_km(b, a)
    assert haversine_km(a, b) > 0


def test_rome_to_milan():
    """Known city pair, roughly 477 km apart."""
    assert haversine_km(ROME, MILAN) == pytest.approx(477, abs=3)


def test_one_degree_of_latitude():
    d = haversine_km(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
    assert d == pytest.approx(111.195, abs=0.01)
