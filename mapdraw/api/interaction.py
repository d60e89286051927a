"""Public interaction, host and sink contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mapdraw.api.geometry import Coordinate, Geometry, LineString, Point
from mapdraw.api.input_events import MapInputEvent, Pixel

if TYPE_CHECKING:
    from mapdraw.interaction.router import InteractionRouter
    from mapdraw.store.vector_source import VectorSource


@dataclass(slots=True)
class Feature:
    """Geometry plus identity and attributes, as committed to a sink.

    The geometry value itself is immutable; `properties` stays writable so
    draw-end observers can finish setting up the feature before it is added.
    """

    geometry: Geometry
    geometry_name: str = "geometry"
    id: str | None = None
    properties: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SketchSnapshot:
    """Read-only overlay payload for one render of the sketch."""

    sketch: Geometry | None = None
    outline: LineString | None = None
    cursor: Point | None = None

    @property
    def empty(self) -> bool:
        return self.sketch is None and self.outline is None and self.cursor is None


EMPTY_SNAPSHOT = SketchSnapshot()


class SketchPhase(StrEnum):
    IDLE = "idle"
    DRAWING = "drawing"
    FINISHING = "finishing"


@dataclass(frozen=True, slots=True)
class DrawStartEvent:
    """A sketch entered drawing mode."""

    feature_id: str
    geometry: Geometry


@dataclass(frozen=True, slots=True)
class DrawEndEvent:
    """A sketch finished; `feature` is not yet in the sink."""

    feature: Feature


@dataclass(frozen=True, slots=True)
class ActiveChangedEvent:
    """Interaction activation toggled."""

    active: bool


@runtime_checkable
class MapHost(Protocol):
    """Rendering surface an interaction attaches to."""

    def coordinate_from_pixel(self, pixel: Pixel) -> Coordinate:
        """Convert device pixel to map coordinate."""

    def pixel_from_coordinate(self, coordinate: Coordinate) -> Pixel:
        """Convert map coordinate to device pixel."""

    def attach_overlay(self, overlay: object) -> None:
        """Start compositing an overlay above the map."""

    def detach_overlay(self, overlay: object) -> None:
        """Stop compositing an overlay."""

    def request_render(self) -> None:
        """Schedule a repaint."""


@runtime_checkable
class ZoomHost(Protocol):
    """Host whose view can be zoomed by a relative delta."""

    def coordinate_from_pixel(self, pixel: Pixel) -> Coordinate:
        """Convert device pixel to map coordinate."""

    def zoom_by_delta(
        self,
        delta: float,
        *,
        anchor: Coordinate | None,
        duration_seconds: float,
    ) -> None:
        """Animate a relative zoom, optionally around an anchor."""


class FeatureSink(Protocol):
    """Append-only store receiving finished features."""

    def add_feature(self, feature: Feature) -> None:
        """Append one feature."""


class Interaction(Protocol):
    """Event-consuming controller composed by a host in priority order."""

    @property
    def active(self) -> bool:
        """Return whether the interaction handles events."""

    def set_active(self, active: bool) -> None:
        """Toggle activation."""

    def set_host(self, host: MapHost | None) -> None:
        """Attach to or detach from a host surface."""

    def handle_event(self, event: MapInputEvent) -> bool:
        """Handle one event; return True when it was consumed."""


MAP_HOST_METHODS: tuple[str, ...] = (
    "coordinate_from_pixel",
    "pixel_from_coordinate",
    "attach_overlay",
    "detach_overlay",
    "request_render",
)
ZOOM_HOST_METHODS: tuple[str, ...] = ("coordinate_from_pixel", "zoom_by_delta")


def create_interaction_router(host: MapHost) -> InteractionRouter:
    """Create default priority router bound to `host`."""
    from mapdraw.interaction.router import InteractionRouter

    return InteractionRouter(host)


def create_vector_source() -> VectorSource:
    """Create default in-memory commit sink."""
    from mapdraw.store.vector_source import VectorSource

    return VectorSource()


__all__ = [
    "ActiveChangedEvent",
    "DrawEndEvent",
    "DrawStartEvent",
    "EMPTY_SNAPSHOT",
    "Feature",
    "FeatureSink",
    "Interaction",
    "MAP_HOST_METHODS",
    "MapHost",
    "SketchPhase",
    "SketchSnapshot",
    "ZOOM_HOST_METHODS",
    "ZoomHost",
    "create_interaction_router",
    "create_vector_source",
]
