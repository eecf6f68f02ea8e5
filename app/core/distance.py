"""Great-circle distance and distance ranking of permit offices."""

from collections.abc import Iterable
from math import asin, cos, radians, sin, sqrt

from app.models.geocoding import GeoPoint
from app.models.permit_office import PermitOffice, RankedOffice

EARTH_RADIUS_MILES = 3959


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great circle distance between two points in miles."""
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * asin(sqrt(min(1.0, a)))

    return EARTH_RADIUS_MILES * c


def _distance_key(office: RankedOffice) -> tuple[bool, float]:
    # Unknown distances sort after every known one.
    if office.distance_miles is None:
        return (True, 0.0)
    return (False, office.distance_miles)


def rank_by_distance(
    offices: Iterable[PermitOffice], point: GeoPoint | None
) -> list[RankedOffice]:
    """Attach distances from ``point`` and sort nearest first.

    Without a point the input order is kept and every distance is None.
    Offices lacking coordinates are kept, ranked after all measured ones.
    """
    ranked = []
    for office in offices:
        distance = None
        if point is not None and office.has_coordinates:
            distance = distance_miles(
                point.latitude, point.longitude, office.latitude, office.longitude
            )
        data = office.model_dump(exclude={"distance_miles"})
        ranked.append(RankedOffice(**data, distance_miles=distance))

    if point is not None:
        ranked.sort(key=_distance_key)
    return ranked
