"""Interactive map sketching: pointer gestures in, committed geometries out."""

from mapdraw.api.draw import DrawOptions, create_draw_interaction
from mapdraw.api.geometry import GeometryKind
from mapdraw.api.interaction import (
    DrawEndEvent,
    DrawStartEvent,
    Feature,
    create_interaction_router,
    create_vector_source,
)

__all__ = [
    "DrawEndEvent",
    "DrawOptions",
    "DrawStartEvent",
    "Feature",
    "GeometryKind",
    "create_draw_interaction",
    "create_interaction_router",
    "create_vector_source",
]
