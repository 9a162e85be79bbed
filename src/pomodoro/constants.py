"""Interval lengths, labels, and schedule constants for the countdown display."""

from __future__ import annotations

WORK_SECONDS = 25 * 60
BREAK_SECONDS = 5 * 60

WORK_LABEL = "Work Interval"
BREAK_LABEL = "Break Interval"

INTERVAL_PAIRS = 5
TOTAL_INTERVALS = INTERVAL_PAIRS * 2
