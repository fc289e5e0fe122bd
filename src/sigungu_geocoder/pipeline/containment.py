"""Ray-casting point-in-polygon test over district geometries."""

from __future__ import annotations

from sigungu_geocoder.data.geometry import Coordinate, Geometry, MultiPolygon, Polygon, Ring


def ring_contains(point: Coordinate, ring: Ring) -> bool:
    """
    Cast a ray eastward from the point and count edge crossings.

    An odd number of crossings means the point is inside. Points lying
    exactly on an edge or vertex get whatever verdict the arithmetic gives.
    """
    x, y = point.longitude, point.latitude
    inside = False

    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > y) != (yj > y) and x < xj + (xi - xj) * (y - yj) / (yi - yj):
            inside = not inside
        j = i

    return inside


def contains(point: Coordinate, geometry: Geometry) -> bool:
    if isinstance(geometry, Polygon):
        return ring_contains(point, geometry.ring)
    if isinstance(geometry, MultiPolygon):
        return any(ring_contains(point, part.ring) for part in geometry.parts)
    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")


__all__ = ["contains", "ring_contains"]
