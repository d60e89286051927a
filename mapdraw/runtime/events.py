"""Synchronous notification bus used by interactions and sources."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from mapdraw.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]

_LOG = logging.getLogger("mapdraw.events")


@dataclass(frozen=True, slots=True)
class _Registration:
    subscription: Subscription
    event_type: type[object]
    handler: EventHandler


class RuntimeEventBus:
    """In-process pub/sub delivering in registration order.

    Registrations live in one list ordered by `subscribe` calls. `publish`
    delivers to a snapshot of the matching registrations, so handlers added
    or removed during delivery take effect on the next publish. Handler
    exceptions propagate to the publisher.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._registrations: list[_Registration] = []

    @property
    def subscription_count(self) -> int:
        return len(self._registrations)

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for an event type."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        subscription = Subscription(self._next_id)
        self._next_id += 1
        self._registrations.append(_Registration(subscription, event_type, handler))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._registrations = [
            registration
            for registration in self._registrations
            if registration.subscription != subscription
        ]

    def publish(self, event: object) -> int:
        """Deliver one event to every matching handler and return the count."""
        snapshot = self._matching(event)
        for registration in snapshot:
            registration.handler(event)
        if snapshot:
            _LOG.debug("published %s to %d handler(s)", type(event).__name__, len(snapshot))
        return len(snapshot)

    def _matching(self, event: object) -> tuple[_Registration, ...]:
        return tuple(
            registration
            for registration in self._registrations
            if isinstance(event, registration.event_type)
        )


EventBus = RuntimeEventBus
