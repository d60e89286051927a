from __future__ import annotations

from mapdraw.api.geometry import GeometryKind, LineString
from mapdraw.api.input_events import PointerDown, PointerDrag, PointerMove, PointerUp
from mapdraw.api.interaction import DrawStartEvent, SketchPhase
from tests.mapdraw.conftest import SHIFT, click, freehand_stroke


def test_freehand_line_appends_vertex_per_drag(make_draw, source) -> None:
    draw = make_draw(GeometryKind.LINE_STRING)

    freehand_stroke(draw, [(0, 0), (10, 0), (20, 0), (30, 0)])

    assert draw.phase is SketchPhase.DRAWING
    assert not draw.freehand
    assert draw.sketch_coordinates[:-1] == ((0.0, 0.0), (10.0, 0.0), (20.0, 0.0), (30.0, 0.0))

    feature = draw.finish_drawing()

    assert feature is not None
    assert feature.geometry == LineString(((0.0, 0.0), (10.0, 0.0), (20.0, 0.0), (30.0, 0.0)))
    assert source.features == (feature,)


def test_freehand_events_are_consumed(make_draw) -> None:
    draw = make_draw(GeometryKind.LINE_STRING)

    assert draw.handle_event(PointerDown(0, 0, SHIFT)) is True
    assert draw.handle_event(PointerDrag(10, 0, SHIFT)) is True
    assert draw.handle_event(PointerMove(20, 0, SHIFT)) is True
    assert draw.handle_event(PointerUp(20, 0, SHIFT)) is True


def test_drag_without_freehand_is_not_consumed(make_draw) -> None:
    draw = make_draw(GeometryKind.LINE_STRING)
    draw.handle_event(PointerDown(0, 0))

    assert draw.handle_event(PointerDrag(40, 0)) is False
    assert draw.handle_event(PointerUp(40, 0)) is False
    assert draw.phase is SketchPhase.IDLE


def test_freehand_skips_moves_below_min_distance(make_draw) -> None:
    draw = make_draw(GeometryKind.LINE_STRING, freehand_min_distance=5.0)

    freehand_stroke(draw, [(0, 0), (2, 0), (4, 0), (6, 0), (8, 0), (12, 0)])

    assert draw.sketch_coordinates[:-1] == ((0.0, 0.0), (6.0, 0.0), (12.0, 0.0))


def test_freehand_skips_zero_distance_moves(make_draw) -> None:
    draw = make_draw(GeometryKind.LINE_STRING, freehand_min_distance=0.0)

    freehand_stroke(draw, [(0, 0), (10, 0), (10, 0), (20, 0)])

    assert draw.sketch_coordinates[:-1] == ((0.0, 0.0), (10.0, 0.0), (20.0, 0.0))


def test_freehand_polygon_ring(make_draw, source) -> None:
    draw = make_draw(GeometryKind.POLYGON)

    freehand_stroke(draw, [(0, 0), (20, 0), (20, 20), (0, 20)])
    feature = draw.finish_drawing()

    assert feature is not None
    assert feature.geometry.exterior == (
        (0.0, 0.0),
        (20.0, 0.0),
        (20.0, -20.0),
        (0.0, -20.0),
        (0.0, 0.0),
    )


def test_freehand_press_without_movement_places_single_vertex(make_draw) -> None:
    draw = make_draw(GeometryKind.LINE_STRING)
    starts: list[DrawStartEvent] = []
    draw.subscribe(DrawStartEvent, starts.append)

    draw.handle_event(PointerDown(5, 5, SHIFT))
    draw.handle_event(PointerUp(5, 5, SHIFT))

    assert draw.sketch_coordinates == ((5.0, -5.0), (5.0, -5.0))
    assert len(starts) == 1


def test_freehand_continues_existing_click_sketch(make_draw) -> None:
    draw = make_draw(GeometryKind.LINE_STRING)
    click(draw, 0, 0)

    freehand_stroke(draw, [(10, 0), (20, 0), (30, 0)])

    assert draw.sketch_coordinates[:-1] == ((0.0, 0.0), (20.0, 0.0), (30.0, 0.0))


def test_freehand_is_rejected_for_circles(make_draw, source) -> None:
    draw = make_draw(GeometryKind.CIRCLE)

    assert draw.handle_event(PointerDown(0, 0, SHIFT)) is False
    assert draw.handle_event(PointerUp(0, 0, SHIFT)) is False
    assert draw.phase is SketchPhase.IDLE
    assert len(source) == 0
