from __future__ import annotations

import pytest

from mapdraw import (
    DrawEndEvent,
    DrawOptions,
    DrawStartEvent,
    GeometryKind,
    create_draw_interaction,
    create_interaction_router,
    create_vector_source,
)
from mapdraw.api.geometry import LineString, Point, Polygon
from mapdraw.api.input_events import Modifiers, PointerDown, PointerDrag, PointerMove, PointerUp
from mapdraw.api.interaction import SketchPhase
from tests.mapdraw.conftest import FakeHost

SHIFT = Modifiers(shift=True)


def _setup(kind: GeometryKind, **overrides: object):
    host = FakeHost()
    source = create_vector_source()
    draw = create_draw_interaction(DrawOptions(kind=kind, **overrides), sink=source)
    router = create_interaction_router(host)
    router.add(draw)
    return host, source, draw, router


def _click(router, x: float, y: float) -> None:
    router.dispatch(PointerMove(x, y))
    router.dispatch(PointerDown(x, y))
    router.dispatch(PointerUp(x, y))


def test_point_commit_through_router() -> None:
    _host, source, _draw, router = _setup(GeometryKind.POINT)

    _click(router, 10, 20)

    assert [feature.geometry for feature in source] == [Point((10.0, -20.0))]


def test_drag_between_clicks_adds_no_vertex() -> None:
    _host, _source, draw, router = _setup(GeometryKind.LINE_STRING)
    _click(router, 0, 0)

    router.dispatch(PointerDown(10, 0))
    router.dispatch(PointerDrag(40, 0))
    router.dispatch(PointerUp(40, 0))

    assert len(draw.sketch_coordinates) == 2
    assert draw.phase is SketchPhase.DRAWING


def test_polygon_closure_sequence() -> None:
    _host, source, _draw, router = _setup(GeometryKind.POLYGON)

    for x, y in [(10, 20), (30, 20), (40, 10), (10, 20)]:
        _click(router, x, y)

    assert source.features[0].geometry == Polygon(
        (((10.0, -20.0), (30.0, -20.0), (40.0, -10.0), (10.0, -20.0)),)
    )


@pytest.mark.parametrize(
    ("kind", "clicks"),
    [
        (GeometryKind.POINT, [(10, 20)]),
        (GeometryKind.MULTI_POINT, [(10, 20)]),
        (GeometryKind.LINE_STRING, [(10, 20), (30, 20), (30, 20)]),
        (GeometryKind.MULTI_LINE_STRING, [(10, 20), (30, 20), (30, 20)]),
        (GeometryKind.POLYGON, [(10, 20), (30, 20), (40, 10), (10, 20)]),
        (GeometryKind.MULTI_POLYGON, [(10, 20), (30, 20), (40, 10), (10, 20)]),
        (GeometryKind.CIRCLE, [(10, 20), (30, 20)]),
    ],
)
def test_draw_end_observers_complete_before_commit(kind, clicks) -> None:
    _host, source, draw, router = _setup(kind)
    sizes_during_end: list[int] = []
    starts: list[DrawStartEvent] = []
    draw.subscribe(DrawStartEvent, starts.append)
    draw.subscribe(DrawEndEvent, lambda _event: sizes_during_end.append(len(source)))

    for x, y in clicks:
        _click(router, x, y)

    assert sizes_during_end == [0]
    assert len(source) == 1
    assert len(starts) == 1


def test_freehand_line_sequence() -> None:
    _host, source, draw, router = _setup(GeometryKind.LINE_STRING)

    router.dispatch(PointerDown(0, 0, SHIFT))
    for x in (5, 10, 15):
        router.dispatch(PointerDrag(x, 0, SHIFT))
    router.dispatch(PointerUp(15, 0, SHIFT))
    draw.finish_drawing()

    assert source.features[0].geometry == LineString(
        ((0.0, 0.0), (5.0, 0.0), (10.0, 0.0), (15.0, 0.0))
    )


def test_deactivation_aborts_and_reactivation_starts_clean() -> None:
    host, source, draw, router = _setup(GeometryKind.LINE_STRING)
    ends: list[DrawEndEvent] = []
    draw.subscribe(DrawEndEvent, ends.append)
    _click(router, 0, 0)
    _click(router, 10, 0)

    draw.set_active(False)

    assert ends == []
    assert len(source) == 0
    assert host.overlays == []

    draw.set_active(True)
    _click(router, 50, 50)

    assert draw.sketch_coordinates == ((50.0, -50.0), (50.0, -50.0))


def test_extend_existing_line_sequence() -> None:
    _host, _source, draw, _router = _setup(GeometryKind.LINE_STRING)
    starts: list[DrawStartEvent] = []
    draw.subscribe(DrawStartEvent, starts.append)

    draw.extend(LineString(((0.0, 0.0), (1.0, 1.0), (2.0, 0.0))))

    assert draw.sketch_coordinates == ((0.0, 0.0), (1.0, 1.0), (2.0, 0.0), (2.0, 0.0))
    assert len(starts) == 1
