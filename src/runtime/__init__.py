"""Countdown runtime: command interpretation, rendering, and the session loop."""

from .commands import (
    Command,
    ContinueCommand,
    QuitCommand,
    QuitWithErrorCommand,
    command_for_event,
    interpret,
)
from .loop import SessionLoop, SessionResult, SessionState
from .render import DisplayStyle, build_frame, compose_clock, render_frame

__all__ = [
    "Command",
    "ContinueCommand",
    "QuitCommand",
    "QuitWithErrorCommand",
    "command_for_event",
    "interpret",
    "DisplayStyle",
    "build_frame",
    "compose_clock",
    "render_frame",
    "SessionLoop",
    "SessionResult",
    "SessionState",
]
