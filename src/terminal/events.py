"""Event dataclasses produced by the input event source."""

from __future__ import annotations

from dataclasses import dataclass, field

MODIFIER_CTRL = "ctrl"
MODIFIER_ALT = "alt"
MODIFIER_SHIFT = "shift"


@dataclass(frozen=True)
class KeyPress:
    """A decoded key with its active modifiers."""
    code: str
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_modifiers(self) -> bool:
        return bool(self.modifiers)


@dataclass(frozen=True)
class KeyPressedEvent:
    """Event emitted as soon as a key press is read from the terminal."""
    key: KeyPress


@dataclass(frozen=True)
class TickEvent:
    """Event emitted once per tick period, independent of key activity."""


TimerEvent = KeyPressedEvent | TickEvent
