from math import atan2, cos, radians, sin, sqrt

from geomatch.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometres between two coordinates."""
    d_lat = radians(b.lat - a.lat)
    d_lng = radians(b.lng - a.lng)

    value = (
        sin(d_lat / 2) ** 2
        + cos(radians(a.lat)) * cos(radians(b.lat)) * sin(d_lng / 2) ** 2
    )

    arc = 2 * atan2(sqrt(value), sqrt(1 - value))
    return EARTH_RADIUS_KM * arc
