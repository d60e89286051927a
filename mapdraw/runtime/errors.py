"""Exception types and logging helpers for tolerated input."""

from __future__ import annotations

import logging


class MapDrawError(Exception):
    """Base class for errors raised by mapdraw."""


class DrawConfigurationError(MapDrawError, ValueError):
    """Invalid options or an operation incompatible with the configured kind."""


class HostCapabilityError(MapDrawError, RuntimeError):
    """Host surface is missing a method the interaction depends on."""


def require_capabilities(host: object, names: tuple[str, ...], *, role: str) -> None:
    """Fail fast when `host` lacks any callable in `names`."""
    missing = [name for name in names if not callable(getattr(host, name, None))]
    if missing:
        raise HostCapabilityError(f"{role} host is missing required methods: {', '.join(missing)}")


def log_ignored_event(logger: logging.Logger, reason: str, event: object) -> None:
    """Record an input event dropped as a protocol violation."""
    logger.debug("ignored %s: %s", type(event).__name__, reason)
