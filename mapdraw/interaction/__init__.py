"""Interaction controllers consuming host input events."""

from mapdraw.interaction.draw import DrawInteraction
from mapdraw.interaction.finish import (
    FinishEvaluator,
    GestureKind,
    GestureOutcome,
    classify_gesture,
    distinct_vertices,
    finish_candidates,
    has_finishable_extent,
)
from mapdraw.interaction.overlay import SketchOverlay
from mapdraw.interaction.router import InteractionRouter
from mapdraw.interaction.wheel_zoom import WheelZoomInteraction

__all__ = [
    "DrawInteraction",
    "FinishEvaluator",
    "GestureKind",
    "GestureOutcome",
    "InteractionRouter",
    "SketchOverlay",
    "WheelZoomInteraction",
    "classify_gesture",
    "distinct_vertices",
    "finish_candidates",
    "has_finishable_extent",
]
