"""Terminal input, raw-mode control, and render surface."""

from .channel import ChannelDisconnected, EventChannel
from .errors import TerminalError, TerminalIOError
from .events import (
    MODIFIER_ALT,
    MODIFIER_CTRL,
    MODIFIER_SHIFT,
    KeyPress,
    KeyPressedEvent,
    TickEvent,
    TimerEvent,
)
from .input_source import (
    DEFAULT_TICK_SECONDS,
    InputEventSource,
    KeyPoller,
    StdinKeyPoller,
)
from .keys import decode_key, split_key
from .raw_mode import RawMode
from .surface import ConsoleSurface, RenderSurface

__all__ = [
    # Events
    "KeyPress",
    "KeyPressedEvent",
    "TickEvent",
    "TimerEvent",
    "MODIFIER_ALT",
    "MODIFIER_CTRL",
    "MODIFIER_SHIFT",
    "decode_key",
    "split_key",
    # Channel
    "EventChannel",
    "ChannelDisconnected",
    # Input
    "DEFAULT_TICK_SECONDS",
    "InputEventSource",
    "KeyPoller",
    "StdinKeyPoller",
    # Terminal
    "RawMode",
    "ConsoleSurface",
    "RenderSurface",
    "TerminalError",
    "TerminalIOError",
]
