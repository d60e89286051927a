"""Runtime support modules."""

from mapdraw.runtime.config import InteractionDefaults, load_interaction_defaults
from mapdraw.runtime.errors import DrawConfigurationError, HostCapabilityError, MapDrawError
from mapdraw.runtime.events import EventBus
from mapdraw.runtime.logging import configure_logging, setup_logging
from mapdraw.runtime.timers import DeferredTimers

__all__ = [
    "DeferredTimers",
    "DrawConfigurationError",
    "EventBus",
    "HostCapabilityError",
    "InteractionDefaults",
    "MapDrawError",
    "configure_logging",
    "load_interaction_defaults",
    "setup_logging",
]
