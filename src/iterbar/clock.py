"""Monotonic stopwatch used for elapsed time and redraw throttling."""

from __future__ import annotations

import time
from typing import Callable

Timer = Callable[[], float]


class Chronometer:
    """Stopwatch over a monotonic timer.

    The timer defaults to ``time.monotonic`` so wall-clock adjustments never
    show up as negative or inflated durations. Tests inject a fake timer.
    """

    def __init__(self, timer: Timer = time.monotonic):
        self._timer = timer
        self._start = timer()

    def reset(self) -> float:
        """Rebase to now and return the seconds since the previous reset."""
        previous = self._start
        self._start = self._timer()
        return self._start - previous

    def peek(self) -> float:
        """Seconds since the last reset, without rebasing."""
        return self._timer() - self._start
