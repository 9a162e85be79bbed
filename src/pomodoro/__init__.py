from .constants import (
    BREAK_LABEL,
    BREAK_SECONDS,
    INTERVAL_PAIRS,
    TOTAL_INTERVALS,
    WORK_LABEL,
    WORK_SECONDS,
)
from .interval import Interval, IntervalState

__all__ = [
    "BREAK_LABEL",
    "BREAK_SECONDS",
    "INTERVAL_PAIRS",
    "TOTAL_INTERVALS",
    "WORK_LABEL",
    "WORK_SECONDS",
    "Interval",
    "IntervalState",
]
