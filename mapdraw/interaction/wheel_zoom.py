"""Wheel-zoom controller coalescing bursts of wheel deltas."""

from __future__ import annotations

import logging

from mapdraw.api.geometry import Coordinate, as_coordinate
from mapdraw.api.input_events import MapInputEvent, WheelScroll
from mapdraw.api.interaction import ZOOM_HOST_METHODS, ZoomHost
from mapdraw.api.wheel_zoom import WheelZoomOptions
from mapdraw.runtime.errors import DrawConfigurationError, log_ignored_event, require_capabilities
from mapdraw.runtime.timers import DeferredTimers

_LOG = logging.getLogger("mapdraw.interaction.wheel")


class WheelZoomInteraction:
    """Accumulates wheel deltas and issues one clamped zoom per burst.

    The first wheel event of a burst opens a quiet-period window; later events
    re-arm the timer for whatever is left of that window, so a continuous
    scroll zooms at most once per window.
    """

    def __init__(self, timers: DeferredTimers, options: WheelZoomOptions | None = None) -> None:
        options = options or WheelZoomOptions()
        if options.max_delta <= 0.0:
            raise DrawConfigurationError("max_delta must be > 0")
        if options.duration_seconds < 0.0 or options.quiet_period_seconds < 0.0:
            raise DrawConfigurationError("durations must be >= 0")
        self._timers = timers
        self._options = options
        self._use_anchor = options.use_anchor
        self._host: ZoomHost | None = None
        self._active = True
        self._delta = 0.0
        self._last_anchor: Coordinate | None = None
        self._start_seconds: float | None = None
        self._timer_id: int | None = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def host(self) -> ZoomHost | None:
        return self._host

    @property
    def pending_delta(self) -> float:
        return self._delta

    def set_active(self, active: bool) -> None:
        self._active = bool(active)
        if not self._active:
            self._reset()

    def set_host(self, host: ZoomHost | None) -> None:
        if host is not None:
            require_capabilities(host, ZOOM_HOST_METHODS, role="wheel zoom")
        self._reset()
        self._host = host

    def set_mouse_anchor(self, use_anchor: bool) -> None:
        """Zoom around the pointer position, or around the view center when off."""
        self._use_anchor = bool(use_anchor)
        if not self._use_anchor:
            self._last_anchor = None

    def handle_event(self, event: MapInputEvent) -> bool:
        if not isinstance(event, WheelScroll):
            return False
        if not self._active or self._host is None:
            log_ignored_event(_LOG, "interaction inactive or detached", event)
            return False
        if self._use_anchor:
            self._last_anchor = as_coordinate(self._host.coordinate_from_pixel(event.pixel))
        self._delta += float(event.delta_y)
        now = self._timers.now_seconds
        if self._start_seconds is None:
            self._start_seconds = now
        time_left = max(self._options.quiet_period_seconds - (now - self._start_seconds), 0.0)
        self._timers.cancel(self._timer_id)
        self._timer_id = self._timers.call_later(time_left, self._do_zoom)
        return True

    def _do_zoom(self) -> None:
        host = self._host
        max_delta = self._options.max_delta
        delta = min(max(self._delta, -max_delta), max_delta)
        anchor = self._last_anchor
        self._timer_id = None
        self._reset()
        if host is None or delta == 0.0:
            return
        _LOG.debug("wheel zoom delta=%.3f anchor=%s", -delta, anchor)
        host.zoom_by_delta(-delta, anchor=anchor, duration_seconds=self._options.duration_seconds)

    def _reset(self) -> None:
        self._timers.cancel(self._timer_id)
        self._timer_id = None
        self._delta = 0.0
        self._last_anchor = None
        self._start_seconds = None
