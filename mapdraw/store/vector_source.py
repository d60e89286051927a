"""In-memory append-only feature store."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from mapdraw.api.events import EventBus, Subscription
from mapdraw.api.interaction import Feature
from mapdraw.runtime.events import RuntimeEventBus


@dataclass(frozen=True, slots=True)
class FeatureAddedEvent:
    """A feature was appended at `index`."""

    feature: Feature
    index: int


class VectorSource:
    """Commit sink keeping features in insertion order."""

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self._features: list[Feature] = []
        self._bus: EventBus = event_bus if event_bus is not None else RuntimeEventBus()

    @property
    def features(self) -> tuple[Feature, ...]:
        return tuple(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(tuple(self._features))

    def add_feature(self, feature: Feature) -> None:
        if not isinstance(feature, Feature):
            raise TypeError(f"expected Feature, got {type(feature).__name__}")
        self._features.append(feature)
        self._bus.publish(FeatureAddedEvent(feature=feature, index=len(self._features) - 1))

    def get_feature_by_id(self, feature_id: str) -> Feature | None:
        for feature in self._features:
            if feature.id == feature_id:
                return feature
        return None

    def on_feature_added(self, handler: Callable[[FeatureAddedEvent], None]) -> Subscription:
        return self._bus.subscribe(FeatureAddedEvent, handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._bus.unsubscribe(subscription)
