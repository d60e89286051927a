"""Sketch state machine turning pointer gestures into committed features."""

from __future__ import annotations

import logging
from collections.abc import Callable
from uuid import uuid4

from mapdraw.api.draw import DEFAULT_MIN_POINTS, DrawMode, DrawOptions, draw_mode_for
from mapdraw.api.events import EventBus, Subscription, TEvent
from mapdraw.api.geometry import (
    Coordinate,
    Geometry,
    GeometryKind,
    LineString,
    Point,
    Polygon,
    as_coordinate,
)
from mapdraw.api.input_events import (
    DoubleClick,
    MapInputEvent,
    Pixel,
    PointerDown,
    PointerDrag,
    PointerMove,
    PointerUp,
    WheelScroll,
)
from mapdraw.api.interaction import (
    MAP_HOST_METHODS,
    ActiveChangedEvent,
    DrawEndEvent,
    DrawStartEvent,
    Feature,
    FeatureSink,
    MapHost,
    SketchPhase,
    SketchSnapshot,
)
from mapdraw.geometry.builder import build_geometry, to_multi
from mapdraw.interaction.finish import (
    FinishEvaluator,
    GestureKind,
    finish_candidates,
    has_finishable_extent,
    pixel_distance,
)
from mapdraw.interaction.overlay import SketchOverlay
from mapdraw.runtime.errors import DrawConfigurationError, log_ignored_event, require_capabilities
from mapdraw.runtime.events import RuntimeEventBus

_LOG = logging.getLogger("mapdraw.interaction")

_FREEHAND_MODES = frozenset({DrawMode.LINE_STRING, DrawMode.POLYGON})
# Committed vertices a finished geometry needs to be non-degenerate.
_FINISH_MINIMUM: dict[DrawMode, int] = {
    DrawMode.POINT: 1,
    DrawMode.LINE_STRING: 2,
    DrawMode.POLYGON: 3,
    DrawMode.CIRCLE: 2,
}


class DrawInteraction:
    """Interactive sketch controller for one geometry kind.

    Vertices are accepted on pointer-up when the gesture stayed within the
    click tolerance; larger gestures are left to other interactions (map
    panning). The sketch always carries a trailing floating vertex that
    follows the pointer. Finishing publishes `DrawEndEvent` to every
    subscriber before the feature is handed to the sink.
    """

    def __init__(
        self,
        options: DrawOptions,
        *,
        sink: FeatureSink | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._options = options
        self._kind = _resolve_kind(options.kind)
        self._mode = draw_mode_for(self._kind)
        self._min_points, self._max_points = _resolve_point_limits(options, self._mode)
        if options.click_tolerance < 0.0:
            raise DrawConfigurationError("click_tolerance must be >= 0")
        if options.effective_snap_tolerance < 0.0:
            raise DrawConfigurationError("snap_tolerance must be >= 0")
        if options.freehand_min_distance < 0.0:
            raise DrawConfigurationError("freehand_min_distance must be >= 0")
        if not options.geometry_name.strip():
            raise DrawConfigurationError("geometry_name must not be empty")
        if sink is not None and not callable(getattr(sink, "add_feature", None)):
            raise DrawConfigurationError("sink must provide add_feature()")
        self._sink = sink
        self._bus: EventBus = event_bus if event_bus is not None else RuntimeEventBus()
        self._overlay = SketchOverlay()
        self._host: MapHost | None = None
        self._evaluator: FinishEvaluator | None = None
        self._active = True
        self._phase = SketchPhase.IDLE
        self._coordinates: list[Coordinate] = []
        self._finish_coordinate: Coordinate | None = None
        self._sketch_id: str | None = None
        self._template: Feature | None = None
        self._cursor: Coordinate | None = None
        self._down_pixel: Pixel | None = None
        self._freehand = False
        self._freehand_started_sketch = False
        self._trace_log = logging.getLogger("mapdraw.inputtrace") if options.trace_input else None

    @property
    def options(self) -> DrawOptions:
        return self._options

    @property
    def kind(self) -> GeometryKind:
        return self._kind

    @property
    def mode(self) -> DrawMode:
        return self._mode

    @property
    def phase(self) -> SketchPhase:
        return self._phase

    @property
    def active(self) -> bool:
        return self._active

    @property
    def host(self) -> MapHost | None:
        return self._host

    @property
    def sketch_coordinates(self) -> tuple[Coordinate, ...]:
        return tuple(self._coordinates)

    @property
    def finish_coordinate(self) -> Coordinate | None:
        return self._finish_coordinate

    @property
    def freehand(self) -> bool:
        return self._freehand

    def subscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> Subscription:
        """Observe draw lifecycle events; delivery follows registration order."""
        return self._bus.subscribe(event_type, handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._bus.unsubscribe(subscription)

    def set_active(self, active: bool) -> None:
        """Toggle activation; deactivating discards any sketch in progress."""
        active = bool(active)
        if active == self._active:
            return
        self._active = active
        self._update_state()
        self._bus.publish(ActiveChangedEvent(active=active))

    def set_host(self, host: MapHost | None) -> None:
        """Attach to a host surface, or detach (aborting the sketch) with None."""
        if host is not None:
            require_capabilities(host, MAP_HOST_METHODS, role="draw")
        self._host = host
        self._evaluator = None
        if host is not None:
            self._evaluator = FinishEvaluator(
                host.pixel_from_coordinate,
                click_tolerance=self._options.click_tolerance,
                snap_tolerance=self._options.effective_snap_tolerance,
            )
        self._down_pixel = None
        self._freehand = False
        self._freehand_started_sketch = False
        self._update_state()

    def abort(self) -> None:
        """Discard the sketch without notifying observers or touching the sink."""
        if self._phase is SketchPhase.IDLE:
            return
        if self._phase is SketchPhase.FINISHING:
            _LOG.debug("abort ignored while finishing sketch id=%s", self._sketch_id)
            return
        _LOG.debug("draw aborted id=%s", self._sketch_id)
        self._reset_sketch()

    def extend(self, target: Feature | LineString) -> None:
        """Resume drawing from the end of an existing line."""
        geometry = target.geometry if isinstance(target, Feature) else target
        if self._mode is not DrawMode.LINE_STRING:
            raise DrawConfigurationError(
                f"extend requires a line kind, interaction draws {self._kind.value}"
            )
        if not isinstance(geometry, LineString):
            raise DrawConfigurationError(
                f"extend expects a LineString, got {type(geometry).__name__}"
            )
        if not geometry.coordinates:
            raise DrawConfigurationError("extend expects a LineString with at least one vertex")
        if not self._active:
            log_ignored_event(_LOG, "extend on inactive interaction", target)
            return
        if self._phase is not SketchPhase.IDLE:
            self.abort()
        coordinates = [as_coordinate(coordinate) for coordinate in geometry.coordinates]
        last = coordinates[-1]
        self._template = target if isinstance(target, Feature) else None
        self._coordinates = [*coordinates, last]
        self._finish_coordinate = last
        self._enter_drawing()

    def finish_drawing(self) -> Feature | None:
        """Finish the current sketch and commit it.

        Returns the committed feature, or None when there is nothing to
        finish or the sketch does not have enough vertices yet.
        """
        if self._phase is not SketchPhase.DRAWING:
            _LOG.debug("finish ignored in phase %s", self._phase.value)
            return None
        coordinates = list(self._coordinates)
        if self._mode in _FREEHAND_MODES:
            coordinates.pop()
        if len(coordinates) < _FINISH_MINIMUM[self._mode]:
            _LOG.debug(
                "finish deferred id=%s vertices=%d needed=%d",
                self._sketch_id,
                len(coordinates),
                _FINISH_MINIMUM[self._mode],
            )
            return None
        if not has_finishable_extent(self._mode, coordinates):
            _LOG.debug("finish deferred id=%s: degenerate %s", self._sketch_id, self._mode.value)
            return None
        geometry = to_multi(self._kind, self._build(coordinates))
        template = self._template
        feature = Feature(
            geometry=geometry,
            geometry_name=template.geometry_name if template is not None else self._options.geometry_name,
            id=self._sketch_id,
            properties=dict(template.properties) if template is not None else {},
        )
        self._phase = SketchPhase.FINISHING
        self._coordinates = coordinates
        self._freehand = False
        _LOG.debug("draw finished id=%s kind=%s", feature.id, self._kind.value)
        try:
            self._bus.publish(DrawEndEvent(feature=feature))
            if self._sink is not None:
                self._sink.add_feature(feature)
        finally:
            self._reset_sketch()
        return feature

    def handle_event(self, event: MapInputEvent) -> bool:
        """Handle one input event; return True when it was consumed."""
        if not self._active or self._host is None:
            log_ignored_event(_LOG, "interaction inactive or detached", event)
            return False
        if self._phase is SketchPhase.FINISHING:
            log_ignored_event(_LOG, "sketch is finishing", event)
            return False
        if self._trace_log is not None:
            self._trace_log.info(
                "draw_event type=%s phase=%s freehand=%s",
                type(event).__name__,
                self._phase.value,
                self._freehand,
            )
        match event:
            case PointerMove():
                return self._handle_move(event)
            case PointerDrag():
                return self._handle_drag(event)
            case PointerDown():
                return self._handle_down(event)
            case PointerUp():
                return self._handle_up(event)
            case DoubleClick():
                return True
            case WheelScroll():
                return False
        log_ignored_event(_LOG, "unsupported event type", event)
        return False

    def _handle_move(self, event: PointerMove) -> bool:
        if self._freehand:
            self._append_freehand(event.pixel)
            return True
        self._track_pointer(event.pixel)
        return False

    def _handle_drag(self, event: PointerDrag) -> bool:
        if self._freehand:
            self._append_freehand(event.pixel)
            return True
        return False

    def _handle_down(self, event: PointerDown) -> bool:
        modifiers = event.modifiers
        if self._options.condition(modifiers):
            self._down_pixel = event.pixel
            return False
        if self._mode in _FREEHAND_MODES and self._options.freehand_condition(modifiers):
            self._down_pixel = event.pixel
            self._freehand = True
            if self._phase is SketchPhase.IDLE:
                self._start_drawing(self._coordinate_at(event.pixel))
                self._freehand_started_sketch = True
            return True
        self._down_pixel = None
        log_ignored_event(_LOG, "modifiers rejected by click and freehand conditions", event)
        return False

    def _handle_up(self, event: PointerUp) -> bool:
        down = self._down_pixel
        was_freehand = self._freehand
        started_on_down = self._freehand_started_sketch
        self._down_pixel = None
        self._freehand = False
        self._freehand_started_sketch = False
        evaluator = self._evaluator
        if down is None or evaluator is None:
            log_ignored_event(_LOG, "no matching pointer down", event)
            return was_freehand
        candidates = self._candidates() if self._phase is SketchPhase.DRAWING else ()
        outcome = evaluator.evaluate(down, event.pixel, candidates)
        if outcome.kind is GestureKind.DRAG:
            _LOG.debug("gesture exceeded click tolerance; no vertex added")
            return was_freehand
        if started_on_down and len(self._coordinates) == 2:
            # Freehand press without movement already placed the first vertex.
            return True
        self._track_pointer(event.pixel)
        if self._phase is SketchPhase.IDLE:
            self._start_drawing(self._coordinate_at(event.pixel))
            if self._mode is DrawMode.POINT:
                self.finish_drawing()
            return True
        if self._mode is DrawMode.CIRCLE:
            self.finish_drawing()
            return True
        if outcome.kind is GestureKind.FINISH:
            self._finish_coordinate = outcome.finish_coordinate
            # A degenerate finish keeps drawing without stacking another duplicate.
            self.finish_drawing()
            return True
        self._add_vertex(self._coordinates[-1])
        return True

    def _track_pointer(self, pixel: Pixel) -> None:
        coordinate = self._coordinate_at(pixel)
        if self._phase is SketchPhase.IDLE:
            self._cursor = coordinate
            self._refresh_overlay()
            return
        if self._mode is DrawMode.POINT:
            return
        if self._mode is DrawMode.POLYGON and self._evaluator is not None:
            snapped = self._evaluator.match(pixel, self._candidates())
            if snapped is not None:
                coordinate = snapped
        self._coordinates[-1] = coordinate
        self._refresh_overlay()

    def _append_freehand(self, pixel: Pixel) -> None:
        if self._phase is not SketchPhase.DRAWING or self._host is None:
            return
        coordinate = self._coordinate_at(pixel)
        self._coordinates[-1] = coordinate
        last_committed = self._coordinates[-2] if len(self._coordinates) > 1 else None
        if last_committed is not None:
            moved = pixel_distance(pixel, self._host.pixel_from_coordinate(last_committed))
            if moved < self._options.freehand_min_distance or moved == 0.0:
                self._refresh_overlay()
                return
        self._add_vertex(coordinate)

    def _start_drawing(self, coordinate: Coordinate) -> None:
        self._template = None
        self._finish_coordinate = coordinate
        if self._mode is DrawMode.POINT:
            self._coordinates = [coordinate]
        else:
            self._coordinates = [coordinate, coordinate]
        self._enter_drawing()

    def _enter_drawing(self) -> None:
        self._sketch_id = uuid4().hex
        self._phase = SketchPhase.DRAWING
        self._cursor = None
        geometry = self._build(self._coordinates)
        self._refresh_overlay(geometry)
        _LOG.debug(
            "draw started id=%s kind=%s vertices=%d",
            self._sketch_id,
            self._kind.value,
            len(self._coordinates),
        )
        self._bus.publish(DrawStartEvent(feature_id=self._sketch_id, geometry=geometry))

    def _add_vertex(self, coordinate: Coordinate) -> None:
        self._finish_coordinate = coordinate
        self._coordinates.append(coordinate)
        done = self._max_points is not None and len(self._coordinates) > self._max_points
        if done and self._mode is DrawMode.POLYGON:
            self._finish_coordinate = self._coordinates[0]
        self._refresh_overlay()
        if done:
            self.finish_drawing()

    def _candidates(self) -> tuple[Coordinate, ...]:
        return finish_candidates(self._mode, self._coordinates, self._min_points)

    def _coordinate_at(self, pixel: Pixel) -> Coordinate:
        host = self._host
        if host is None:
            raise RuntimeError("draw interaction is not attached to a host")
        return as_coordinate(host.coordinate_from_pixel(pixel))

    def _build(self, coordinates: list[Coordinate]) -> Geometry:
        geometry_function = self._options.geometry_function
        if geometry_function is not None:
            return geometry_function(tuple(coordinates))
        return build_geometry(self._mode, coordinates)

    def _refresh_overlay(self, geometry: Geometry | None = None) -> None:
        if self._phase is SketchPhase.IDLE:
            cursor = Point(self._cursor) if self._cursor is not None else None
            self._overlay.show(SketchSnapshot(cursor=cursor))
            return
        if geometry is None:
            geometry = self._build(self._coordinates)
        outline: LineString | None = None
        if self._mode is DrawMode.POLYGON:
            outline = LineString(tuple(self._coordinates))
        elif isinstance(geometry, Polygon):
            outline = LineString(geometry.exterior)
        cursor = None if self._mode is DrawMode.POINT else Point(self._coordinates[-1])
        self._overlay.show(SketchSnapshot(sketch=geometry, outline=outline, cursor=cursor))

    def _reset_sketch(self) -> None:
        self._coordinates = []
        self._finish_coordinate = None
        self._sketch_id = None
        self._template = None
        self._freehand = False
        self._freehand_started_sketch = False
        self._phase = SketchPhase.IDLE
        self._overlay.clear()

    def _update_state(self) -> None:
        if self._host is None or not self._active:
            self.abort()
            self._cursor = None
            self._overlay.clear()
        self._overlay.set_host(self._host if self._active else None)


def _resolve_kind(kind: object) -> GeometryKind:
    try:
        return GeometryKind(kind)
    except ValueError as exc:
        raise DrawConfigurationError(f"unknown geometry kind: {kind!r}") from exc


def _resolve_point_limits(options: DrawOptions, mode: DrawMode) -> tuple[int, int | None]:
    if mode is DrawMode.CIRCLE:
        return DEFAULT_MIN_POINTS[mode], 2
    if mode is DrawMode.POINT:
        return DEFAULT_MIN_POINTS[mode], 1
    min_points = DEFAULT_MIN_POINTS[mode] if options.min_points is None else options.min_points
    if min_points < _FINISH_MINIMUM[mode]:
        raise DrawConfigurationError(
            f"min_points must be >= {_FINISH_MINIMUM[mode]} for {mode.value}"
        )
    max_points = options.max_points
    if max_points is not None and max_points < min_points:
        raise DrawConfigurationError("max_points must be >= min_points")
    return min_points, max_points
