from __future__ import annotations

from mapdraw.api.draw import DrawMode
from mapdraw.interaction.finish import (
    FinishEvaluator,
    GestureKind,
    classify_gesture,
    distinct_vertices,
    finish_candidates,
    has_finishable_extent,
)
from tests.mapdraw.conftest import FakeHost


def _evaluator(tolerance: float = 6.0, snap: float | None = None) -> FinishEvaluator:
    host = FakeHost()
    return FinishEvaluator(
        host.pixel_from_coordinate,
        click_tolerance=tolerance,
        snap_tolerance=tolerance if snap is None else snap,
    )


def test_classify_gesture_inside_tolerance_is_place() -> None:
    assert classify_gesture((0.0, 0.0), (4.0, 4.0), 6.0) is GestureKind.PLACE
    assert classify_gesture((0.0, 0.0), (6.0, 0.0), 6.0) is GestureKind.PLACE


def test_classify_gesture_outside_tolerance_is_drag() -> None:
    assert classify_gesture((0.0, 0.0), (5.0, 5.0), 6.0) is GestureKind.DRAG


def test_finish_candidates_need_more_than_min_points() -> None:
    coords = [(0.0, 0.0), (1.0, 0.0)]

    assert finish_candidates(DrawMode.LINE_STRING, coords, 2) == ()
    assert finish_candidates(DrawMode.LINE_STRING, [*coords, (1.0, 0.0)], 2) == ((1.0, 0.0),)


def test_finish_candidates_polygon_uses_first_and_last_committed() -> None:
    coords = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (5.0, 5.0)]

    assert finish_candidates(DrawMode.POLYGON, coords, 3) == ((0.0, 0.0), (10.0, 10.0))


def test_finish_candidates_empty_for_point_and_circle() -> None:
    coords = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]

    assert finish_candidates(DrawMode.POINT, coords, 1) == ()
    assert finish_candidates(DrawMode.CIRCLE, coords, 2) == ()


def test_match_projects_candidates_to_pixels() -> None:
    evaluator = _evaluator()

    assert evaluator.match((10.0, 20.0), [(10.0, -20.0)]) == (10.0, -20.0)
    assert evaluator.match((10.0, -20.0), [(10.0, -20.0)]) is None


def test_match_returns_first_hit() -> None:
    evaluator = _evaluator()
    candidates = [(0.0, 0.0), (1.0, 0.0)]

    assert evaluator.match((0.5, 0.0), candidates) == (0.0, 0.0)
    assert evaluator.match((0.5, 0.0), []) is None


def test_evaluate_reports_finish_on_candidate_hit() -> None:
    evaluator = _evaluator()

    outcome = evaluator.evaluate((30.0, 20.0), (31.0, 21.0), [(30.0, -20.0)])

    assert outcome.kind is GestureKind.FINISH
    assert outcome.finish_coordinate == (30.0, -20.0)


def test_evaluate_drag_wins_over_candidate_hit() -> None:
    evaluator = _evaluator()

    outcome = evaluator.evaluate((0.0, 0.0), (30.0, 20.0), [(30.0, -20.0)])

    assert outcome.kind is GestureKind.DRAG
    assert outcome.finish_coordinate is None


def test_evaluate_uses_separate_snap_tolerance() -> None:
    evaluator = _evaluator(tolerance=2.0, snap=15.0)

    outcome = evaluator.evaluate((10.0, 0.0), (10.0, 0.0), [(0.0, 0.0)])

    assert outcome.kind is GestureKind.FINISH


def test_distinct_vertices_drops_consecutive_repeats() -> None:
    a, b = (0.0, 0.0), (1.0, 0.0)

    assert distinct_vertices([a, a, b, b, a]) == [a, b, a]
    assert distinct_vertices([]) == []


def test_has_finishable_extent_line_needs_two_distinct_vertices() -> None:
    a, b = (10.0, -20.0), (30.0, -20.0)

    assert not has_finishable_extent(DrawMode.LINE_STRING, [a, a])
    assert has_finishable_extent(DrawMode.LINE_STRING, [a, a, b])


def test_has_finishable_extent_polygon_ignores_closing_repeat() -> None:
    a, b, c = (0.0, 0.0), (10.0, 0.0), (10.0, 10.0)

    assert not has_finishable_extent(DrawMode.POLYGON, [a, a, a])
    assert not has_finishable_extent(DrawMode.POLYGON, [a, b, a])
    assert has_finishable_extent(DrawMode.POLYGON, [a, b, b, c])


def test_has_finishable_extent_circle_needs_radius() -> None:
    center = (0.0, 0.0)

    assert not has_finishable_extent(DrawMode.CIRCLE, [center, center])
    assert has_finishable_extent(DrawMode.CIRCLE, [center, (0.0, 5.0)])
    assert has_finishable_extent(DrawMode.POINT, [center])
