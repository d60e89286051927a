"""Public draw-interaction options and factory."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

from mapdraw.api.geometry import Coordinate, Geometry, GeometryKind
from mapdraw.api.input_events import Modifiers, no_modifier_keys, shift_key_only

if TYPE_CHECKING:
    from mapdraw.api.events import EventBus
    from mapdraw.api.interaction import FeatureSink
    from mapdraw.interaction.draw import DrawInteraction
    from mapdraw.runtime.config import InteractionDefaults

GeometryFunction: TypeAlias = Callable[[Sequence[Coordinate]], Geometry]
ModifierPredicate: TypeAlias = Callable[[Modifiers], bool]


class DrawMode(StrEnum):
    """Vertex-accumulation strategy shared by single and multi kinds."""

    POINT = "point"
    LINE_STRING = "line_string"
    POLYGON = "polygon"
    CIRCLE = "circle"


_MODES: dict[GeometryKind, DrawMode] = {
    GeometryKind.POINT: DrawMode.POINT,
    GeometryKind.MULTI_POINT: DrawMode.POINT,
    GeometryKind.LINE_STRING: DrawMode.LINE_STRING,
    GeometryKind.MULTI_LINE_STRING: DrawMode.LINE_STRING,
    GeometryKind.POLYGON: DrawMode.POLYGON,
    GeometryKind.MULTI_POLYGON: DrawMode.POLYGON,
    GeometryKind.CIRCLE: DrawMode.CIRCLE,
}

# Committed vertices needed before a finish click is honored.
DEFAULT_MIN_POINTS: dict[DrawMode, int] = {
    DrawMode.POINT: 1,
    DrawMode.LINE_STRING: 2,
    DrawMode.POLYGON: 3,
    DrawMode.CIRCLE: 2,
}


def draw_mode_for(kind: GeometryKind | str) -> DrawMode:
    """Resolve the accumulation mode for a geometry kind."""
    return _MODES[GeometryKind(kind)]


@dataclass(frozen=True, slots=True)
class DrawOptions:
    """Construction-time configuration of one draw interaction."""

    kind: GeometryKind
    click_tolerance: float = 6.0
    snap_tolerance: float | None = None
    geometry_name: str = "geometry"
    geometry_function: GeometryFunction | None = None
    condition: ModifierPredicate = no_modifier_keys
    freehand_condition: ModifierPredicate = shift_key_only
    min_points: int | None = None
    max_points: int | None = None
    freehand_min_distance: float = 1.0
    trace_input: bool = False

    @classmethod
    def from_defaults(
        cls,
        kind: GeometryKind | str,
        defaults: InteractionDefaults | None = None,
        **overrides: object,
    ) -> DrawOptions:
        """Build options seeded from environment-derived defaults."""
        if defaults is None:
            from mapdraw.runtime.config import load_interaction_defaults

            defaults = load_interaction_defaults()
        options = cls(
            kind=GeometryKind(kind),
            click_tolerance=defaults.click_tolerance,
            snap_tolerance=defaults.snap_tolerance,
            freehand_min_distance=defaults.freehand_min_distance,
            trace_input=defaults.trace_input,
        )
        return replace(options, **overrides) if overrides else options

    @property
    def mode(self) -> DrawMode:
        return draw_mode_for(self.kind)

    @property
    def effective_snap_tolerance(self) -> float:
        return self.click_tolerance if self.snap_tolerance is None else self.snap_tolerance


def create_draw_interaction(
    options: DrawOptions,
    *,
    sink: FeatureSink | None = None,
    event_bus: EventBus | None = None,
) -> DrawInteraction:
    """Create default draw-interaction implementation."""
    from mapdraw.interaction.draw import DrawInteraction

    return DrawInteraction(options, sink=sink, event_bus=event_bus)


__all__ = [
    "DEFAULT_MIN_POINTS",
    "DrawMode",
    "DrawOptions",
    "GeometryFunction",
    "ModifierPredicate",
    "create_draw_interaction",
    "draw_mode_for",
]
