"""Public notification bus contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


class EventBus(Protocol):
    """Synchronous in-process pub/sub contract."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event to every matching handler and return invocation count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from mapdraw.runtime.events import RuntimeEventBus

    return RuntimeEventBus()


__all__ = ["EventBus", "Subscription", "create_event_bus"]
