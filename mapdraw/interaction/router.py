"""Priority-ordered dispatch of input events across interactions."""

from __future__ import annotations

import logging

from mapdraw.api.input_events import MapInputEvent
from mapdraw.api.interaction import Interaction, MapHost

_LOG = logging.getLogger("mapdraw.interaction.router")


class InteractionRouter:
    """Offers each event to interactions, newest first, until one consumes it."""

    def __init__(self, host: MapHost) -> None:
        self._host = host
        self._interactions: list[Interaction] = []

    @property
    def host(self) -> MapHost:
        return self._host

    @property
    def interactions(self) -> tuple[Interaction, ...]:
        return tuple(self._interactions)

    def add(self, interaction: Interaction) -> None:
        """Bind an interaction to the host at the highest priority."""
        if interaction in self._interactions:
            return
        interaction.set_host(self._host)
        self._interactions.append(interaction)

    def remove(self, interaction: Interaction) -> None:
        """Detach an interaction; an in-progress sketch is aborted."""
        if interaction not in self._interactions:
            return
        self._interactions.remove(interaction)
        interaction.set_host(None)

    def dispatch(self, event: MapInputEvent) -> bool:
        """Return True when some interaction consumed the event."""
        for interaction in reversed(tuple(self._interactions)):
            if not interaction.active:
                continue
            if interaction.handle_event(event):
                _LOG.debug("%s consumed by %s", type(event).__name__, type(interaction).__name__)
                return True
        return False
