"""Keyboard and mouse button state, and the fixed-rate tick clock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator

__all__ = [
    "NS_PER_SECOND",
    "TICKRATE",
    "NS_PER_TICK",
    "Button",
    "ButtonSet",
    "TickClock",
]

NS_PER_SECOND = 1_000_000_000
TICKRATE = 60
NS_PER_TICK = NS_PER_SECOND // TICKRATE


@dataclass
class Button:
    """One key or mouse button.

    ``pressed`` is true for the one frame update after the button went down,
    ``pressed_tick`` for the one tick after it went down.
    """

    down: bool = False
    last: bool = False
    last_tick: bool = False
    pressed: bool = False
    pressed_tick: bool = False

    def tick(self) -> None:
        """Advance the per-tick edge detection."""
        self.pressed_tick = self.down and not self.last_tick
        self.last_tick = self.down

    def update(self) -> None:
        """Advance the per-frame edge detection."""
        self.pressed = self.down and not self.last
        self.last = self.down


class ButtonSet:
    """Buttons keyed by a non-negative code, created on first use."""

    def __init__(self) -> None:
        self._buttons: Dict[int, Button] = {}

    def __getitem__(self, key: int) -> Button:
        if key < 0:
            raise KeyError(key)
        return self._buttons.setdefault(key, Button())

    def __len__(self) -> int:
        return len(self._buttons)

    def __iter__(self) -> Iterator[int]:
        return iter(self._buttons)

    def press(self, key: int) -> None:
        """Mark a button as held; negative codes are ignored."""
        if key >= 0:
            self[key].down = True

    def release(self, key: int) -> None:
        """Mark a button as released; negative codes are ignored."""
        if key >= 0:
            self[key].down = False

    def tick(self) -> None:
        """Advance every button's per-tick state."""
        for button in self._buttons.values():
            button.tick()

    def update(self) -> None:
        """Advance every button's per-frame state."""
        for button in self._buttons.values():
            button.update()


@dataclass
class TickClock:
    """Converts frame durations into whole fixed-length ticks."""

    ns_per_tick: int = NS_PER_TICK
    remainder: int = 0

    def advance(self, frame_delta: int) -> int:
        """Add a frame's duration in nanoseconds; returns the ticks to run."""
        if frame_delta < 0:
            raise ValueError("frame delta must not be negative")
        tick_time = frame_delta + self.remainder
        # A tick runs only while strictly more than one tick's time is pending.
        ticks = max(0, (tick_time - 1) // self.ns_per_tick)
        self.remainder = tick_time - ticks * self.ns_per_tick
        return ticks