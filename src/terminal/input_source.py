"""Background thread that turns terminal input and a fixed tick into events."""

from __future__ import annotations

import logging
import os
import select
import sys
import threading
import time
from typing import Callable, Optional, Protocol, TextIO

from .channel import EventChannel
from .events import KeyPress, KeyPressedEvent, TickEvent
from .keys import split_key

DEFAULT_TICK_SECONDS = 0.2
_READ_CHUNK_BYTES = 32


class KeyPoller(Protocol):
    def poll(self, timeout: float) -> Optional[KeyPress]:
        """Wait up to ``timeout`` seconds and return one key press, if any."""
        ...


class StdinKeyPoller:
    """Reads key presses from a terminal file descriptor with ``select``.

    One read may return several keys, so leftover bytes are buffered and
    handed out one key per call before the descriptor is polled again.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._fd = (stream or sys.stdin).fileno()
        self._pending = b""

    def poll(self, timeout: float) -> Optional[KeyPress]:
        if not self._pending:
            readable, _, _ = select.select([self._fd], [], [], max(0.0, timeout))
            if not readable:
                return None
            data = os.read(self._fd, _READ_CHUNK_BYTES)
            if not data:
                raise EOFError("terminal input closed")
            self._pending = data

        key, used = split_key(self._pending)
        self._pending = self._pending[used:]
        return key


class InputEventSource:
    """Producer side of the event channel, run on its own daemon thread.

    Each cycle blocks on the poller for whatever time remains until the next
    tick, forwards a key press immediately, and emits a tick whenever the tick
    period has elapsed. The loop ends once the channel refuses an event or
    the poller fails; the sender side is always closed on the way out.
    """

    def __init__(
        self,
        channel: EventChannel,
        poller: KeyPoller,
        *,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[logging.Logger] = None,
    ):
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be greater than zero")

        self._channel = channel
        self._poller = poller
        self._tick_seconds = float(tick_seconds)
        self._clock = clock
        self._logger = logger or logging.getLogger("input")
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            self._logger.warning("Input event source is already running")
            return

        self._thread = threading.Thread(
            target=self.run, daemon=True, name="input-event-source"
        )
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout=timeout)

    def run(self) -> None:
        self._logger.debug("Input event source started (tick=%ss)", self._tick_seconds)
        try:
            self._loop()
        except (OSError, EOFError) as error:
            self._logger.error("Input polling failed: %s", error)
        finally:
            self._channel.close_sender()
            self._logger.debug("Input event source stopped")

    def _loop(self) -> None:
        last_tick = self._clock()
        while True:
            elapsed = self._clock() - last_tick
            timeout = max(0.0, self._tick_seconds - elapsed)

            key = self._poller.poll(timeout)
            if key is not None and not self._channel.send(KeyPressedEvent(key)):
                return

            if self._clock() - last_tick >= self._tick_seconds:
                if not self._channel.send(TickEvent()):
                    return
                last_tick = self._clock()
