"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Pixel: TypeAlias = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Modifier-key state captured with a pointer event."""

    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    meta: bool = False

    @property
    def any(self) -> bool:
        return self.shift or self.alt or self.ctrl or self.meta


NO_MODIFIERS = Modifiers()


@dataclass(frozen=True, slots=True)
class PointerMove:
    """Pointer moved without a tracked button press."""

    x: float
    y: float
    modifiers: Modifiers = NO_MODIFIERS

    @property
    def pixel(self) -> Pixel:
        return (float(self.x), float(self.y))


@dataclass(frozen=True, slots=True)
class PointerDown:
    """Primary button pressed."""

    x: float
    y: float
    modifiers: Modifiers = NO_MODIFIERS

    @property
    def pixel(self) -> Pixel:
        return (float(self.x), float(self.y))


@dataclass(frozen=True, slots=True)
class PointerDrag:
    """Pointer moved while the primary button is held."""

    x: float
    y: float
    modifiers: Modifiers = NO_MODIFIERS

    @property
    def pixel(self) -> Pixel:
        return (float(self.x), float(self.y))


@dataclass(frozen=True, slots=True)
class PointerUp:
    """Primary button released."""

    x: float
    y: float
    modifiers: Modifiers = NO_MODIFIERS

    @property
    def pixel(self) -> Pixel:
        return (float(self.x), float(self.y))


@dataclass(frozen=True, slots=True)
class DoubleClick:
    """Host-synthesized double click."""

    x: float
    y: float
    modifiers: Modifiers = NO_MODIFIERS

    @property
    def pixel(self) -> Pixel:
        return (float(self.x), float(self.y))


@dataclass(frozen=True, slots=True)
class WheelScroll:
    """Mouse wheel event in device coordinates."""

    x: float
    y: float
    delta_y: float

    @property
    def pixel(self) -> Pixel:
        return (float(self.x), float(self.y))


PointerEvent: TypeAlias = PointerMove | PointerDown | PointerDrag | PointerUp | DoubleClick
MapInputEvent: TypeAlias = PointerEvent | WheelScroll


def no_modifier_keys(modifiers: Modifiers) -> bool:
    """Default click condition: accept only unmodified presses."""
    return not modifiers.any


def shift_key_only(modifiers: Modifiers) -> bool:
    """Default freehand condition: shift held and nothing else."""
    return modifiers.shift and not (modifiers.alt or modifiers.ctrl or modifiers.meta)


__all__ = [
    "DoubleClick",
    "MapInputEvent",
    "Modifiers",
    "NO_MODIFIERS",
    "Pixel",
    "PointerDown",
    "PointerDrag",
    "PointerEvent",
    "PointerMove",
    "PointerUp",
    "WheelScroll",
    "no_modifier_keys",
    "shift_key_only",
]
