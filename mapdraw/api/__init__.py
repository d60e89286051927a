"""Public mapdraw API contracts."""

from mapdraw.api.draw import (
    DrawMode,
    DrawOptions,
    GeometryFunction,
    ModifierPredicate,
    create_draw_interaction,
    draw_mode_for,
)
from mapdraw.api.events import EventBus, Subscription, create_event_bus
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
)
from mapdraw.api.input_events import (
    DoubleClick,
    MapInputEvent,
    Modifiers,
    Pixel,
    PointerDown,
    PointerDrag,
    PointerMove,
    PointerUp,
    WheelScroll,
    no_modifier_keys,
    shift_key_only,
)
from mapdraw.api.interaction import (
    ActiveChangedEvent,
    DrawEndEvent,
    DrawStartEvent,
    Feature,
    FeatureSink,
    Interaction,
    MapHost,
    SketchPhase,
    SketchSnapshot,
    ZoomHost,
    create_interaction_router,
    create_vector_source,
)
from mapdraw.api.logging import LoggingConfig, configure_logging
from mapdraw.api.wheel_zoom import WheelZoomOptions, create_wheel_zoom_interaction

__all__ = [
    "ActiveChangedEvent",
    "Circle",
    "Coordinate",
    "DoubleClick",
    "DrawEndEvent",
    "DrawMode",
    "DrawOptions",
    "DrawStartEvent",
    "EventBus",
    "Feature",
    "FeatureSink",
    "Geometry",
    "GeometryFunction",
    "GeometryKind",
    "Interaction",
    "LineString",
    "LoggingConfig",
    "MapHost",
    "MapInputEvent",
    "Modifiers",
    "ModifierPredicate",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Pixel",
    "Point",
    "PointerDown",
    "PointerDrag",
    "PointerMove",
    "PointerUp",
    "Polygon",
    "SketchPhase",
    "SketchSnapshot",
    "Subscription",
    "WheelScroll",
    "WheelZoomOptions",
    "ZoomHost",
    "configure_logging",
    "create_draw_interaction",
    "create_event_bus",
    "create_interaction_router",
    "create_vector_source",
    "create_wheel_zoom_interaction",
    "draw_mode_for",
    "no_modifier_keys",
    "shift_key_only",
]
