"""Great-circle distance between two coordinates (haversine)."""

from __future__ import annotations

import enum
import math
from typing import Union

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371


class DistanceUnit(str, enum.Enum):
    KILOMETERS = "km"
    METERS = "m"
    MILES = "mile"


def _round_half_up(value: float, digits: int = 0) -> float:
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    # math.sin/cos raise on inf, which a difference of two huge finite values can reach.
    if not all(math.isfinite(value) for value in (d_lat, d_lon, lat1, lat2)):
        return math.nan

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Float error can push a just past 1 for antipodal points.
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS,
) -> Union[int, float]:
    """
    Distance between two points, rounded for display.

    Meters come back as a whole number; kilometers and miles are rounded to
    two decimal places. Raises ValueError for an unknown unit string.
    """
    unit = DistanceUnit(unit)
    km = haversine_km(lat1, lon1, lat2, lon2)

    if unit is DistanceUnit.METERS:
        meters = _round_half_up(km * 1000)
        return int(meters) if math.isfinite(meters) else meters
    if unit is DistanceUnit.MILES:
        return _round_half_up(km * KM_TO_MILES, 2)
    return _round_half_up(km, 2)


__all__ = ["DistanceUnit", "EARTH_RADIUS_KM", "distance", "haversine_km"]
