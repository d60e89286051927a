from __future__ import annotations

import pytest

from mapdraw.api.geometry import Point
from mapdraw.api.interaction import Feature, create_vector_source
from mapdraw.store.vector_source import FeatureAddedEvent, VectorSource


def test_add_feature_appends_in_order() -> None:
    source = VectorSource()
    first = Feature(geometry=Point((0.0, 0.0)), id="a")
    second = Feature(geometry=Point((1.0, 1.0)), id="b")

    source.add_feature(first)
    source.add_feature(second)

    assert source.features == (first, second)
    assert len(source) == 2
    assert list(source) == [first, second]
    assert source.get_feature_by_id("b") is second
    assert source.get_feature_by_id("missing") is None


def test_feature_added_event_fires_after_append() -> None:
    source = VectorSource()
    seen: list[tuple[int, int]] = []
    subscription = source.on_feature_added(lambda event: seen.append((event.index, len(source))))

    source.add_feature(Feature(geometry=Point((0.0, 0.0))))
    source.unsubscribe(subscription)
    source.add_feature(Feature(geometry=Point((1.0, 1.0))))

    assert seen == [(0, 1)]


def test_add_feature_rejects_non_feature() -> None:
    with pytest.raises(TypeError):
        VectorSource().add_feature(Point((0.0, 0.0)))  # type: ignore[arg-type]


def test_factory_returns_empty_source() -> None:
    source = create_vector_source()

    assert isinstance(source, VectorSource)
    assert len(source) == 0
    assert FeatureAddedEvent.__name__ == "FeatureAddedEvent"
