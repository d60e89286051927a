"""Overlay binding that exposes the in-progress sketch to a host."""

from __future__ import annotations

from mapdraw.api.interaction import EMPTY_SNAPSHOT, MapHost, SketchSnapshot


class SketchOverlay:
    """Holds the latest sketch snapshot and keeps the host informed.

    Owned by a draw interaction; hosts read `snapshot` while compositing.
    """

    def __init__(self) -> None:
        self._host: MapHost | None = None
        self._snapshot = EMPTY_SNAPSHOT

    @property
    def host(self) -> MapHost | None:
        return self._host

    @property
    def snapshot(self) -> SketchSnapshot:
        return self._snapshot

    @property
    def visible(self) -> bool:
        return self._host is not None and not self._snapshot.empty

    def set_host(self, host: MapHost | None) -> None:
        """Move the overlay to `host`, or detach it when `host` is None."""
        if host is self._host:
            return
        previous = self._host
        self._host = None
        if previous is not None:
            previous.detach_overlay(self)
            previous.request_render()
        if host is not None:
            self._host = host
            host.attach_overlay(self)
            host.request_render()

    def show(self, snapshot: SketchSnapshot) -> None:
        self._snapshot = snapshot
        if self._host is not None:
            self._host.request_render()

    def clear(self) -> None:
        if self._snapshot.empty:
            return
        self.show(EMPTY_SNAPSHOT)
