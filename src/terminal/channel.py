"""Single-producer/single-consumer event channel with close detection."""

from __future__ import annotations

import threading
from queue import Empty, Queue
from typing import Optional

from .events import TimerEvent


class ChannelDisconnected(Exception):
    """Raised when the channel is drained and its producer has gone away."""


class EventChannel:
    """Unbounded FIFO carrying timer events from the input thread to the loop.

    Either side can close its end. Once the receiver is closed, ``send``
    refuses new events. Once the sender is closed, ``try_receive`` keeps
    delivering queued events and then raises ``ChannelDisconnected``.
    """

    def __init__(self):
        self._queue: Queue[TimerEvent] = Queue()
        self._sender_closed = threading.Event()
        self._receiver_closed = threading.Event()

    @property
    def is_sender_closed(self) -> bool:
        return self._sender_closed.is_set()

    @property
    def is_receiver_closed(self) -> bool:
        return self._receiver_closed.is_set()

    def send(self, event: TimerEvent) -> bool:
        if self._receiver_closed.is_set() or self._sender_closed.is_set():
            return False
        self._queue.put_nowait(event)
        return True

    def try_receive(self) -> Optional[TimerEvent]:
        try:
            return self._queue.get_nowait()
        except Empty:
            pass

        if not self._sender_closed.is_set():
            return None

        # An event may have been queued right before the sender closed.
        try:
            return self._queue.get_nowait()
        except Empty:
            raise ChannelDisconnected("event source disconnected") from None

    def close_sender(self) -> None:
        self._sender_closed.set()

    def close_receiver(self) -> None:
        self._receiver_closed.set()
