"""Session loop driving the countdown schedule, rendering, and terminal cleanup."""

from __future__ import annotations

import enum
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from glyphs import GlyphAtlas
from pomodoro import TOTAL_INTERVALS, IntervalState
from terminal import EventChannel, RenderSurface

from .commands import (
    Command,
    ContinueCommand,
    QuitCommand,
    QuitWithErrorCommand,
    interpret,
)
from .contracts import InputModeLike
from .render import DEFAULT_FRAME_PAUSE_SECONDS, DisplayStyle, render_frame

DEFAULT_STEP_SECONDS = 1.0


class SessionState(enum.Enum):
    RUNNING = "running"
    CLEANING_UP = "cleaning_up"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class SessionResult:
    """Outcome of a finished session; ``error`` is set for QuitWithError."""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SessionLoop:
    """Counts down a fixed number of alternating work/break intervals.

    Every iteration renders the current value and interprets at most one
    event. The value drops by one each time ``step_seconds`` of clock time
    has passed; ``step_seconds=0`` steps once per rendered frame. Terminal
    cleanup runs exactly once however the session ends.
    """

    def __init__(
        self,
        surface: RenderSurface,
        input_mode: InputModeLike,
        channel: EventChannel,
        atlas: GlyphAtlas,
        *,
        interval_state: Optional[IntervalState] = None,
        total_intervals: int = TOTAL_INTERVALS,
        style: DisplayStyle = DisplayStyle(),
        step_seconds: float = DEFAULT_STEP_SECONDS,
        frame_pause_seconds: float = DEFAULT_FRAME_PAUSE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[logging.Logger] = None,
    ):
        if total_intervals < 0:
            raise ValueError("total_intervals must not be negative")
        if step_seconds < 0:
            raise ValueError("step_seconds must not be negative")

        self._surface = surface
        self._input_mode = input_mode
        self._channel = channel
        self._atlas = atlas
        self._logger = logger or logging.getLogger("session")
        self._interval_state = interval_state or IntervalState()
        self._total_intervals = total_intervals
        self._style = style
        self._step_seconds = float(step_seconds)
        self._frame_pause_seconds = frame_pause_seconds
        self._clock = clock

        self._state = SessionState.RUNNING
        self._seconds_remaining = self._interval_state.duration_seconds()
        self._completed_intervals = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def interval_state(self) -> IntervalState:
        return self._interval_state

    @property
    def seconds_remaining(self) -> int:
        return self._seconds_remaining

    @property
    def completed_intervals(self) -> int:
        return self._completed_intervals

    def run(self) -> SessionResult:
        error: Optional[str] = None
        with self._terminal_session():
            error = self._run_schedule()
        return SessionResult(error=error)

    @contextmanager
    def _terminal_session(self) -> Iterator[None]:
        self._state = SessionState.RUNNING
        body_failed = False
        try:
            self._input_mode.enable()
            self._surface.clear()
            self._surface.show_cursor(False)
            yield
        except BaseException:
            body_failed = True
            raise
        finally:
            self._state = SessionState.CLEANING_UP
            cleanup_error = self._cleanup()
            self._state = SessionState.TERMINATED
            if cleanup_error is not None and not body_failed:
                raise cleanup_error

    def _cleanup(self) -> Optional[Exception]:
        """Attempt every restore step; return the first failure, if any."""
        self._channel.close_receiver()

        first_error: Optional[Exception] = None
        steps: tuple[tuple[str, Callable[[], None]], ...] = (
            ("restore input mode", self._input_mode.disable),
            ("show cursor", lambda: self._surface.show_cursor(True)),
            ("clear terminal", self._surface.clear),
        )
        for name, step in steps:
            try:
                step()
            except Exception as error:
                self._logger.error("Cleanup step '%s' failed: %s", name, error)
                if first_error is None:
                    first_error = error
        return first_error

    def _run_schedule(self) -> Optional[str]:
        for number in range(1, self._total_intervals + 1):
            self._logger.info(
                "%s started (%d/%d, %ss)",
                self._interval_state.label(),
                number,
                self._total_intervals,
                self._interval_state.duration_seconds(),
            )
            command = self._count_down()

            if isinstance(command, QuitWithErrorCommand):
                self._logger.error("Session aborted: %s", command.message)
                return command.message
            if isinstance(command, QuitCommand):
                self._logger.info("Session stopped by user")
                return None

            self._completed_intervals += 1
            self._interval_state.toggle()

        self._logger.info("Schedule completed (%d intervals)", self._total_intervals)
        return None

    def _count_down(self) -> Optional[Command]:
        """Run one interval; return the quit command that ended it early, if any."""
        label = self._interval_state.label()
        seconds = self._interval_state.duration_seconds()
        last_step = self._clock()

        while True:
            self._seconds_remaining = seconds
            render_frame(
                self._surface,
                seconds,
                self._atlas,
                label,
                self._style,
                pause_seconds=self._frame_pause_seconds,
            )

            command = interpret(self._channel)
            if not isinstance(command, ContinueCommand):
                return command

            if self._clock() - last_step < self._step_seconds:
                continue
            if seconds == 0:
                return None
            seconds -= 1
            last_step += self._step_seconds
