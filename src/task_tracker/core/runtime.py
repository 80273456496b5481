# src/task_tracker/core/runtime.py

"""Default clock and id source used outside of tests."""

from __future__ import annotations

import time
from datetime import UTC, datetime


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class TimestampIdGenerator:
    """
    Millisecond-timestamp ids ("1718000000123").

    Two calls inside the same millisecond (or after the wall clock stepped back)
    get last + 1, so ids stay strictly increasing for the life of the instance.
    """

    def __init__(self) -> None:
        self._last = 0

    def new_id(self) -> str:
        ms = time.time_ns() // 1_000_000
        if ms <= self._last:
            ms = self._last + 1
        self._last = ms
        return str(ms)
