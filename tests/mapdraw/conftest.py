from __future__ import annotations

import pytest

from mapdraw.api.draw import DrawOptions
from mapdraw.api.geometry import Coordinate, GeometryKind
from mapdraw.api.input_events import (
    NO_MODIFIERS,
    Modifiers,
    Pixel,
    PointerDown,
    PointerDrag,
    PointerMove,
    PointerUp,
)
from mapdraw.interaction.draw import DrawInteraction
from mapdraw.runtime.timers import DeferredTimers
from mapdraw.store.vector_source import VectorSource

SHIFT = Modifiers(shift=True)


class FakeHost:
    """Identity-scale projection with the y axis flipped, like a map view."""

    def __init__(self) -> None:
        self.overlays: list[object] = []
        self.calls: list[str] = []
        self.render_requests = 0
        self.zooms: list[tuple[float, Coordinate | None, float]] = []

    def coordinate_from_pixel(self, pixel: Pixel) -> Coordinate:
        return (float(pixel[0]), -float(pixel[1]))

    def pixel_from_coordinate(self, coordinate: Coordinate) -> Pixel:
        return (float(coordinate[0]), -float(coordinate[1]))

    def attach_overlay(self, overlay: object) -> None:
        self.calls.append("attach")
        self.overlays.append(overlay)

    def detach_overlay(self, overlay: object) -> None:
        self.calls.append("detach")
        self.overlays.remove(overlay)

    def request_render(self) -> None:
        self.calls.append("render")
        self.render_requests += 1

    def zoom_by_delta(
        self,
        delta: float,
        *,
        anchor: Coordinate | None,
        duration_seconds: float,
    ) -> None:
        self.zooms.append((delta, anchor, duration_seconds))


def click(
    interaction: DrawInteraction,
    x: float,
    y: float,
    *,
    modifiers: Modifiers = NO_MODIFIERS,
) -> bool:
    """Simulate move, down and up at the same pixel."""
    interaction.handle_event(PointerMove(x, y, modifiers))
    interaction.handle_event(PointerDown(x, y, modifiers))
    return interaction.handle_event(PointerUp(x, y, modifiers))


def freehand_stroke(interaction: DrawInteraction, points: list[Pixel]) -> None:
    """Simulate a shift-held press, drag through `points` and release."""
    first_x, first_y = points[0]
    interaction.handle_event(PointerDown(first_x, first_y, SHIFT))
    for x, y in points[1:]:
        interaction.handle_event(PointerDrag(x, y, SHIFT))
    last_x, last_y = points[-1]
    interaction.handle_event(PointerUp(last_x, last_y, SHIFT))


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def source() -> VectorSource:
    return VectorSource()


@pytest.fixture
def timers() -> DeferredTimers:
    return DeferredTimers()


@pytest.fixture
def make_draw(host: FakeHost, source: VectorSource):
    def _make(kind: GeometryKind | str, **overrides: object) -> DrawInteraction:
        interaction = DrawInteraction(DrawOptions(kind=GeometryKind(kind), **overrides), sink=source)
        interaction.set_host(host)
        return interaction

    return _make
