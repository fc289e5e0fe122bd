"""Plain value types for coordinates and district boundary shapes."""

from __future__ import annotations

from typing import NamedTuple, Sequence, Tuple, Union


class Coordinate(NamedTuple):
    longitude: float
    latitude: float


# Outer boundary loop; the last vertex implicitly connects back to the first.
Ring = Sequence[Tuple[float, float]]


class Polygon(NamedTuple):
    """A single outer ring. Holes are not modeled."""

    ring: Ring


class MultiPolygon(NamedTuple):
    """Disjoint parts of one region, e.g. a mainland district plus its islands."""

    parts: Tuple[Polygon, ...]


Geometry = Union[Polygon, MultiPolygon]


def polygon(*points: Tuple[float, float]) -> Polygon:
    return Polygon(tuple(points))


def multipolygon(*parts: Polygon) -> MultiPolygon:
    return MultiPolygon(tuple(parts))


__all__ = ["Coordinate", "Geometry", "MultiPolygon", "Polygon", "Ring", "multipolygon", "polygon"]
