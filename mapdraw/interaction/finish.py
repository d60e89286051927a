"""Click-tolerance and finish-condition hit testing in device pixels."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

import numpy as np

from mapdraw.api.draw import DrawMode
from mapdraw.api.geometry import Coordinate
from mapdraw.api.input_events import Pixel


class GestureKind(StrEnum):
    PLACE = "place"
    FINISH = "finish"
    DRAG = "drag"


@dataclass(frozen=True, slots=True)
class GestureOutcome:
    """Classification of one down/up gesture."""

    kind: GestureKind
    finish_coordinate: Coordinate | None = None


def pixel_distance(a: Pixel, b: Pixel) -> float:
    return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def classify_gesture(down: Pixel, up: Pixel, click_tolerance: float) -> GestureKind:
    """PLACE when the pointer stayed within tolerance between down and up."""
    if pixel_distance(down, up) <= click_tolerance:
        return GestureKind.PLACE
    return GestureKind.DRAG


def finish_candidates(
    mode: DrawMode,
    coordinates: Sequence[Coordinate],
    min_points: int,
) -> tuple[Coordinate, ...]:
    """Coordinates a click may land on to finish the sketch.

    `coordinates` includes the trailing floating vertex, so a sketch becomes
    finishable once it holds more than `min_points` entries.
    """
    if len(coordinates) <= min_points:
        return ()
    if mode == DrawMode.LINE_STRING:
        return (coordinates[-2],)
    if mode == DrawMode.POLYGON:
        return (coordinates[0], coordinates[-2])
    return ()


def distinct_vertices(coordinates: Sequence[Coordinate]) -> list[Coordinate]:
    """Drop consecutive repeats, e.g. a vertex confirmed twice on one pixel."""
    distinct: list[Coordinate] = []
    for coordinate in coordinates:
        if not distinct or distinct[-1] != coordinate:
            distinct.append(coordinate)
    return distinct


def has_finishable_extent(mode: DrawMode, coordinates: Sequence[Coordinate]) -> bool:
    """Whether committed vertices span a non-degenerate geometry.

    Lines need two distinct vertices, polygon rings three (a closing repeat
    of the first vertex does not count) and circles a non-zero radius.
    """
    distinct = distinct_vertices(coordinates)
    if mode == DrawMode.LINE_STRING:
        return len(distinct) >= 2
    if mode == DrawMode.POLYGON:
        if len(distinct) > 1 and distinct[0] == distinct[-1]:
            distinct.pop()
        return len(distinct) >= 3
    if mode == DrawMode.CIRCLE:
        return len(coordinates) >= 2 and coordinates[0] != coordinates[-1]
    return len(distinct) >= 1


class FinishEvaluator:
    """Tests pixels against finish candidates through the host projection."""

    def __init__(
        self,
        to_pixel: Callable[[Coordinate], Pixel],
        *,
        click_tolerance: float,
        snap_tolerance: float,
    ) -> None:
        self._to_pixel = to_pixel
        self._click_tolerance = float(click_tolerance)
        self._snap_tolerance = float(snap_tolerance)

    def match(self, pixel: Pixel, candidates: Sequence[Coordinate]) -> Coordinate | None:
        """Return the first candidate within snap tolerance of `pixel`."""
        if not candidates:
            return None
        projected = np.asarray([self._to_pixel(candidate) for candidate in candidates], dtype=float)
        distances = np.hypot(projected[:, 0] - float(pixel[0]), projected[:, 1] - float(pixel[1]))
        hits = np.flatnonzero(distances <= self._snap_tolerance)
        if hits.size == 0:
            return None
        return candidates[int(hits[0])]

    def evaluate(
        self,
        down: Pixel,
        up: Pixel,
        candidates: Sequence[Coordinate],
    ) -> GestureOutcome:
        if classify_gesture(down, up, self._click_tolerance) is GestureKind.DRAG:
            return GestureOutcome(GestureKind.DRAG)
        finish_coordinate = self.match(up, candidates)
        if finish_coordinate is not None:
            return GestureOutcome(GestureKind.FINISH, finish_coordinate)
        return GestureOutcome(GestureKind.PLACE)
