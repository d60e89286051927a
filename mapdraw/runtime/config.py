"""Environment-sourced interaction defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_CLICK_TOLERANCE = 6.0
DEFAULT_FREEHAND_MIN_DISTANCE = 1.0
DEFAULT_WHEEL_DURATION_MS = 250.0
DEFAULT_WHEEL_QUIET_MS = 80.0
DEFAULT_WHEEL_MAX_DELTA = 1.0


@dataclass(frozen=True, slots=True)
class InteractionDefaults:
    """Immutable defaults handed to option objects at construction time."""

    click_tolerance: float = DEFAULT_CLICK_TOLERANCE
    snap_tolerance: float | None = None
    freehand_min_distance: float = DEFAULT_FREEHAND_MIN_DISTANCE
    wheel_duration_seconds: float = DEFAULT_WHEEL_DURATION_MS / 1000.0
    wheel_quiet_period_seconds: float = DEFAULT_WHEEL_QUIET_MS / 1000.0
    wheel_max_delta: float = DEFAULT_WHEEL_MAX_DELTA
    trace_input: bool = False


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(name: str, default: float, *, env: Mapping[str, str] | None = None) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return float(default)
    try:
        return float(raw.strip())
    except ValueError:
        return float(default)


def _optional_float(name: str, *, env: Mapping[str, str] | None = None) -> float | None:
    raw = _raw(name, env=env)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw.strip())
    except ValueError:
        return None


def load_interaction_defaults(env: Mapping[str, str] | None = None) -> InteractionDefaults:
    """Load immutable interaction defaults from env vars.

    Negative or unparsable values fall back to the built-in defaults.
    """
    click_tolerance = _float("MAPDRAW_CLICK_TOLERANCE", DEFAULT_CLICK_TOLERANCE, env=env)
    snap_tolerance = _optional_float("MAPDRAW_SNAP_TOLERANCE", env=env)
    freehand_min_distance = _float(
        "MAPDRAW_FREEHAND_MIN_DISTANCE", DEFAULT_FREEHAND_MIN_DISTANCE, env=env
    )
    duration_ms = _float("MAPDRAW_WHEEL_DURATION_MS", DEFAULT_WHEEL_DURATION_MS, env=env)
    quiet_ms = _float("MAPDRAW_WHEEL_QUIET_MS", DEFAULT_WHEEL_QUIET_MS, env=env)
    max_delta = _float("MAPDRAW_WHEEL_MAX_DELTA", DEFAULT_WHEEL_MAX_DELTA, env=env)
    return InteractionDefaults(
        click_tolerance=click_tolerance if click_tolerance >= 0.0 else DEFAULT_CLICK_TOLERANCE,
        snap_tolerance=snap_tolerance if snap_tolerance is None or snap_tolerance >= 0.0 else None,
        freehand_min_distance=(
            freehand_min_distance
            if freehand_min_distance >= 0.0
            else DEFAULT_FREEHAND_MIN_DISTANCE
        ),
        wheel_duration_seconds=(duration_ms if duration_ms >= 0.0 else DEFAULT_WHEEL_DURATION_MS)
        / 1000.0,
        wheel_quiet_period_seconds=(quiet_ms if quiet_ms >= 0.0 else DEFAULT_WHEEL_QUIET_MS)
        / 1000.0,
        wheel_max_delta=max_delta if max_delta > 0.0 else DEFAULT_WHEEL_MAX_DELTA,
        trace_input=_flag("MAPDRAW_TRACE_INPUT", False, env=env),
    )


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("MAPDRAW_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()
