"""Work/break interval toggle owned by the session loop."""

from __future__ import annotations

import enum
import logging
from typing import Optional

from .constants import BREAK_LABEL, BREAK_SECONDS, WORK_LABEL, WORK_SECONDS


class Interval(enum.Enum):
    """The two phases of the schedule, each with a fixed length and label."""

    WORK = "work"
    BREAK = "break"

    @property
    def duration_seconds(self) -> int:
        return WORK_SECONDS if self is Interval.WORK else BREAK_SECONDS

    @property
    def label(self) -> str:
        return WORK_LABEL if self is Interval.WORK else BREAK_LABEL

    def toggled(self) -> "Interval":
        return Interval.BREAK if self is Interval.WORK else Interval.WORK


class IntervalState:
    """Mutable holder for the current interval; only ``toggle`` changes it."""

    def __init__(
        self,
        initial: Interval = Interval.WORK,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._current = initial
        self._logger = logger or logging.getLogger("pomodoro")

    def current(self) -> Interval:
        return self._current

    def duration_seconds(self) -> int:
        return self._current.duration_seconds

    def label(self) -> str:
        return self._current.label

    def toggle(self) -> None:
        previous = self._current
        self._current = previous.toggled()
        self._logger.debug(
            "Interval switched: %s -> %s (%ss)",
            previous.value,
            self._current.value,
            self._current.duration_seconds,
        )
