"""Public geometry value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

Coordinate: TypeAlias = tuple[float, float]
Ring: TypeAlias = tuple[Coordinate, ...]


class GeometryKind(StrEnum):
    """Geometry kinds a draw interaction can produce."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    CIRCLE = "Circle"


def as_coordinate(value: object) -> Coordinate:
    """Normalize a two-item sequence into a float coordinate tuple."""
    x, y = value  # type: ignore[misc]
    return (float(x), float(y))


@dataclass(frozen=True, slots=True)
class Point:
    """Single position."""

    coordinates: Coordinate

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POINT


@dataclass(frozen=True, slots=True)
class LineString:
    """Ordered vertex sequence."""

    coordinates: tuple[Coordinate, ...]

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.LINE_STRING


@dataclass(frozen=True, slots=True)
class Polygon:
    """Polygon made of linear rings; the first ring is the exterior."""

    coordinates: tuple[Ring, ...]

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POLYGON

    @property
    def exterior(self) -> Ring:
        return self.coordinates[0] if self.coordinates else ()


@dataclass(frozen=True, slots=True)
class MultiPoint:
    coordinates: tuple[Coordinate, ...]

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.MULTI_POINT


@dataclass(frozen=True, slots=True)
class MultiLineString:
    coordinates: tuple[tuple[Coordinate, ...], ...]

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.MULTI_LINE_STRING


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    coordinates: tuple[tuple[Ring, ...], ...]

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.MULTI_POLYGON


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle described by center and radius in map units."""

    center: Coordinate
    radius: float

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.CIRCLE


Geometry: TypeAlias = Point | LineString | Polygon | MultiPoint | MultiLineString | MultiPolygon | Circle


__all__ = [
    "Circle",
    "Coordinate",
    "Geometry",
    "GeometryKind",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Ring",
    "as_coordinate",
]
