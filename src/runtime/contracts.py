"""Protocols describing terminal capabilities the session loop depends on."""

from __future__ import annotations

from typing import Protocol


class InputModeLike(Protocol):
    """Raw keyboard input mode that can be switched on and restored."""
    def enable(self) -> None:
        ...

    def disable(self) -> None:
        ...
