"""Public wheel-zoom options and factory."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mapdraw.interaction.wheel_zoom import WheelZoomInteraction
    from mapdraw.runtime.config import InteractionDefaults
    from mapdraw.runtime.timers import DeferredTimers


@dataclass(frozen=True, slots=True)
class WheelZoomOptions:
    """Wheel accumulation and zoom animation settings."""

    duration_seconds: float = 0.25
    quiet_period_seconds: float = 0.08
    max_delta: float = 1.0
    use_anchor: bool = True

    @classmethod
    def from_defaults(
        cls,
        defaults: InteractionDefaults | None = None,
        **overrides: object,
    ) -> WheelZoomOptions:
        if defaults is None:
            from mapdraw.runtime.config import load_interaction_defaults

            defaults = load_interaction_defaults()
        options = cls(
            duration_seconds=defaults.wheel_duration_seconds,
            quiet_period_seconds=defaults.wheel_quiet_period_seconds,
            max_delta=defaults.wheel_max_delta,
        )
        return replace(options, **overrides) if overrides else options


def create_wheel_zoom_interaction(
    timers: DeferredTimers,
    options: WheelZoomOptions | None = None,
) -> WheelZoomInteraction:
    """Create default wheel-zoom implementation."""
    from mapdraw.interaction.wheel_zoom import WheelZoomInteraction

    return WheelZoomInteraction(timers, options)


__all__ = ["WheelZoomOptions", "create_wheel_zoom_interaction"]
