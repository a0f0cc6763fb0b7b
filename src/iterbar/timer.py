"""Progress driven by wall time instead of discrete elements."""

from __future__ import annotations

import time
from collections.abc import Iterator
from typing import Optional

from .clock import Timer
from .config import DisplayConfig
from .cursor import ProgressCursor
from .engine import OutputSink, ProgressEngine

# Step count behind the fraction; 0.1% granularity.
TIMER_RESOLUTION = 1000


class _Ticks:
    """Restartable source yielding elapsed seconds until the duration is up."""

    def __init__(self, owner: TimerProgress):
        self._owner = owner

    def __iter__(self) -> Iterator[float]:
        owner = self._owner
        while True:
            elapsed = owner.elapsed
            if elapsed >= owner.duration:
                owner.manually_set_progress(1.0)
                return
            owner.manually_set_progress(elapsed / owner.duration)
            yield elapsed


class TimerProgress(ProgressEngine[float]):
    """Bar that fills over ``duration`` seconds.

    Iterating yields the elapsed seconds on each pass of the loop and stops
    once ``duration`` has passed. The loop body decides the pacing::

        for elapsed in TimerProgress(2.0):
            time.sleep(0.03)

    A duration of 0 or less finishes immediately at 100%.
    """

    def __init__(
        self,
        duration: float,
        *,
        config: Optional[DisplayConfig] = None,
        stream: Optional[OutputSink] = None,
        timer: Timer = time.monotonic,
    ):
        self.duration = duration
        super().__init__(
            _Ticks(self), total=TIMER_RESOLUTION, config=config, stream=stream, timer=timer
        )
        self._first_step = True

    def start_traversal(self) -> ProgressCursor[float]:
        self._first_step = True
        return super().start_traversal()

    def update(self, finished: bool = False) -> None:
        """Redraw at most once per ``min_interval``, plus the first and final lines.

        The step count is overwritten from the clock before each step, so it
        cannot drive the redraw decision: it sits at 0 for the first instants
        and at the total for the last ones.
        """
        if finished:
            super().update(finished=True)
            return
        if self._first_step or self._refresh.peek() > self._min_interval:
            self._refresh.reset()
            self.print_progress()
        self._first_step = False
        self._iterations_done += 1
        self._suffix.clear()
