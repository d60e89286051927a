"""Geometry construction helpers."""

from mapdraw.geometry.builder import (
    build_geometry,
    circle_from_points,
    close_ring,
    create_regular_polygon,
    regular_polygon,
    to_multi,
)

__all__ = [
    "build_geometry",
    "circle_from_points",
    "close_ring",
    "create_regular_polygon",
    "regular_polygon",
    "to_multi",
]
