"""Deferred one-shot callbacks driven by an explicit clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

TimerCallback = Callable[[], None]


@dataclass(slots=True)
class _Timer:
    timer_id: int
    due_seconds: float
    callback: TimerCallback
    cancelled: bool = False


class DeferredTimers:
    """Timer queue advanced by the host loop instead of a background thread."""

    def __init__(self, *, start_seconds: float = 0.0) -> None:
        self._now_seconds = float(start_seconds)
        self._next_timer_id = 1
        self._timers: dict[int, _Timer] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def pending_count(self) -> int:
        """Return count of timers that will still fire."""
        return sum(1 for timer in self._timers.values() if not timer.cancelled)

    def call_later(self, delay_seconds: float, callback: TimerCallback) -> int:
        """Schedule a one-shot callback after delay."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        timer_id = self._next_timer_id
        self._next_timer_id += 1
        due_seconds = self._now_seconds + delay_seconds
        self._timers[timer_id] = _Timer(timer_id=timer_id, due_seconds=due_seconds, callback=callback)
        heappush(self._queue, (due_seconds, timer_id))
        return timer_id

    def cancel(self, timer_id: int | None) -> None:
        """Cancel a pending timer; unknown or fired ids are ignored."""
        if timer_id is None:
            return
        timer = self._timers.get(timer_id)
        if timer is not None:
            timer.cancelled = True

    def advance(self, delta_seconds: float) -> int:
        """Advance the clock and run due callbacks."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds` in due order."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, timer_id = heappop(self._queue)
            timer = self._timers.pop(timer_id, None)
            if timer is None or timer.cancelled:
                continue
            timer.callback()
            executed += 1
        return executed
