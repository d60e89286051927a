"""Pure construction of geometry values from sketch coordinates."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from mapdraw.api.draw import DrawMode, GeometryFunction
from mapdraw.api.geometry import (
    Circle,
    Coordinate,
    Geometry,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
    as_coordinate,
)


def close_ring(ring: Sequence[Coordinate]) -> Ring:
    """Return `ring` with its first vertex repeated at the end when missing."""
    closed = tuple(as_coordinate(coordinate) for coordinate in ring)
    if closed and closed[0] != closed[-1]:
        closed = (*closed, closed[0])
    return closed


def circle_from_points(center: Coordinate, edge: Coordinate) -> Circle:
    """Circle centered on `center` passing through `edge`."""
    cx, cy = as_coordinate(center)
    ex, ey = as_coordinate(edge)
    return Circle(center=(cx, cy), radius=math.hypot(ex - cx, ey - cy))


def build_geometry(mode: DrawMode, coordinates: Sequence[Coordinate]) -> Geometry:
    """Default vertex-to-geometry mapping for a draw mode.

    Polygon rings are closed on output, so a preview built from an open
    sketch ring is already a valid polygon.
    """
    if not coordinates:
        raise ValueError("coordinates must not be empty")
    if mode == DrawMode.POINT:
        return Point(as_coordinate(coordinates[-1]))
    if mode == DrawMode.LINE_STRING:
        return LineString(tuple(as_coordinate(coordinate) for coordinate in coordinates))
    if mode == DrawMode.POLYGON:
        return Polygon((close_ring(coordinates),))
    if mode == DrawMode.CIRCLE:
        return circle_from_points(coordinates[0], coordinates[-1])
    raise ValueError(f"unsupported draw mode: {mode}")


def to_multi(kind: GeometryKind, geometry: Geometry) -> Geometry:
    """Wrap a finished single-part geometry into the configured multi kind."""
    if kind == GeometryKind.MULTI_POINT and isinstance(geometry, Point):
        return MultiPoint((geometry.coordinates,))
    if kind == GeometryKind.MULTI_LINE_STRING and isinstance(geometry, LineString):
        return MultiLineString((geometry.coordinates,))
    if kind == GeometryKind.MULTI_POLYGON and isinstance(geometry, Polygon):
        return MultiPolygon((geometry.coordinates,))
    return geometry


def regular_polygon(
    center: Coordinate,
    edge: Coordinate,
    sides: int,
    angle: float | None = None,
) -> Polygon:
    """Closed regular polygon on the circle through `edge`.

    The first vertex sits at `angle` (radians) when given, otherwise on the
    bearing from `center` to `edge`.
    """
    if sides < 3:
        raise ValueError("sides must be >= 3")
    cx, cy = as_coordinate(center)
    ex, ey = as_coordinate(edge)
    dx = ex - cx
    dy = ey - cy
    radius = math.hypot(dx, dy)
    start = math.atan2(dy, dx) if angle is None else float(angle)
    steps = np.arange(sides + 1) % sides
    angles = start + steps * (2.0 * math.pi / sides)
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)
    ring = tuple((float(x), float(y)) for x, y in zip(xs, ys, strict=True))
    return Polygon((ring,))


def create_regular_polygon(sides: int = 32, angle: float | None = None) -> GeometryFunction:
    """Geometry function rendering circle-mode sketches as regular polygons."""
    if sides < 3:
        raise ValueError("sides must be >= 3")

    def geometry_function(coordinates: Sequence[Coordinate]) -> Geometry:
        return regular_polygon(coordinates[0], coordinates[-1], sides, angle)

    return geometry_function


__all__ = [
    "build_geometry",
    "circle_from_points",
    "close_ring",
    "create_regular_polygon",
    "regular_polygon",
    "to_multi",
]
