"""Map timer events pulled from the event channel to loop control commands."""

from __future__ import annotations

from dataclasses import dataclass

from terminal import ChannelDisconnected, EventChannel, KeyPressedEvent, TimerEvent
from terminal.events import MODIFIER_CTRL

DISCONNECTED_MESSAGE = "event source disconnected"


@dataclass(frozen=True)
class ContinueCommand:
    """Keep counting down."""


@dataclass(frozen=True)
class QuitCommand:
    """Stop the session without an error."""


@dataclass(frozen=True)
class QuitWithErrorCommand:
    """Stop the session and report ``message`` to the caller."""
    message: str


Command = ContinueCommand | QuitCommand | QuitWithErrorCommand


def command_for_event(event: TimerEvent) -> Command:
    if not isinstance(event, KeyPressedEvent):
        return ContinueCommand()

    key = event.key
    if key.code == "q" and not key.modifiers:
        return QuitCommand()
    if key.code == "c" and MODIFIER_CTRL in key.modifiers:
        return QuitCommand()
    return ContinueCommand()


def interpret(channel: EventChannel) -> Command:
    """Consume at most one event without blocking and decode it."""
    try:
        event = channel.try_receive()
    except ChannelDisconnected:
        return QuitWithErrorCommand(DISCONNECTED_MESSAGE)

    if event is None:
        return ContinueCommand()
    return command_for_event(event)
