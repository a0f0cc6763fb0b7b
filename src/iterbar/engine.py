"""Progress engine: step accounting, redraw throttling and line rendering.

The engine wraps any iterable. Each ``iter(engine)`` starts a fresh
traversal and hands back a ``ProgressCursor`` which reports every completed
step through ``update()``. ``update()`` decides whether to redraw:

* always on the first step of a traversal (initial 0% line),
* always when nothing remains (final line),
* otherwise only if ``min_interval`` seconds passed since the last redraw.

Rendering never raises. A sink that fails to write is reported once through
the ``iterbar.engine`` logger and iteration carries on.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable
from enum import Enum
from typing import Any, Generic, Optional, Protocol, TypeVar

from . import render
from .clock import Chronometer, Timer
from .config import DisplayConfig
from .cursor import ProgressCursor
from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class OutputSink(Protocol):
    """Anything a progress line can be written to."""

    def write(self, text: str, /) -> Any: ...

    def flush(self) -> Any: ...


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class ProgressEngine(Generic[T]):
    """Progress bar over an arbitrary iterable with an optional total.

    This is also the raw-iterator adapter: ``source`` may be a one-shot
    iterator, in which case ``total`` is whatever the caller declares (or
    ``None`` for an unbounded stream, which shows 0% until the end).

    Args:
        source: Iterable re-entered with ``iter()`` on every traversal
        total: Step count used as the denominator, ``None`` if unknown
        config: Prefix, bar width and redraw interval
        stream: Output sink, ``sys.stderr`` when omitted
        timer: Monotonic clock for elapsed time and throttling
    """

    def __init__(
        self,
        source: Iterable[T],
        total: Optional[int] = None,
        *,
        config: Optional[DisplayConfig] = None,
        stream: Optional[OutputSink] = None,
        timer: Timer = time.monotonic,
    ):
        config = config or DisplayConfig()
        self._source = source
        self._total = total
        self._iterations_done = 0
        self._state = EngineState.IDLE

        self._chronometer = Chronometer(timer)
        self._refresh = Chronometer(timer)
        self._suffix: list[str] = []

        self._stream: OutputSink = stream if stream is not None else sys.stderr
        self._prefix = config.prefix
        self._bar_width = config.bar_width
        self._min_interval = config.min_interval
        self._line_width = 1
        self._sink_failed = False

    # -- traversal ---------------------------------------------------------

    def start_traversal(self) -> ProgressCursor[T]:
        """Reset counters and stopwatches and return a cursor at the start."""
        self._chronometer.reset()
        self._refresh.reset()
        self._iterations_done = 0
        self._state = EngineState.RUNNING
        logger.debug("Traversal started (total=%s)", self._total)
        return ProgressCursor(iter(self._source), self)

    def __iter__(self) -> ProgressCursor[T]:
        return self.start_traversal()

    def update(self, finished: bool = False) -> None:
        """Account for one completed step, redrawing if due.

        ``finished`` marks the end of the traversal: the final line is
        always drawn and the count is not advanced past the last element.
        """
        if (
            self._refresh.peek() > self._min_interval
            or self._iterations_done == 0
            or finished
            or self.iterations_left == 0
        ):
            self._refresh.reset()
            self.print_progress()

        if finished:
            if self._state is EngineState.RUNNING:
                logger.debug(
                    "Traversal finished: %d steps in %.3fs",
                    self._iterations_done,
                    self._chronometer.peek(),
                )
            self._state = EngineState.IDLE
        else:
            self._iterations_done += 1
        self._suffix.clear()

    # -- manual control ----------------------------------------------------

    def append_to_suffix(self, value: object) -> ProgressEngine[T]:
        """Show ``str(value)`` after the timing text on the next redraw."""
        self._suffix.append(str(value))
        return self

    def manually_set_progress(self, fraction: float) -> None:
        """Override the step count with ``fraction`` of the total.

        ``fraction`` is clamped to [0, 1]. With an unknown total the count
        becomes 0.
        """
        fraction = min(1.0, max(0.0, fraction))
        self._iterations_done = render.round_half_away(fraction * (self._total or 0))

    def advance(self, amount: int = 1) -> None:
        """Add ``amount`` steps without waiting for the cursor."""
        self._iterations_done += amount

    # -- configuration -----------------------------------------------------

    def configure(self, config: DisplayConfig) -> None:
        self._prefix = config.prefix
        self._bar_width = config.bar_width
        self._min_interval = config.min_interval

    def set_stream(self, stream: OutputSink) -> None:
        self._stream = stream
        self._sink_failed = False

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    def set_bar_width(self, width: int) -> None:
        self._bar_width = width

    def set_min_interval(self, seconds: float) -> None:
        self._min_interval = seconds

    # -- state -------------------------------------------------------------

    @property
    def total(self) -> Optional[int]:
        return self._total

    @property
    def iterations_done(self) -> int:
        return self._iterations_done

    @property
    def iterations_left(self) -> Optional[int]:
        if self._total is None:
            return None
        return self._total - self._iterations_done

    @property
    def elapsed(self) -> float:
        """Seconds since the current traversal started."""
        return self._chronometer.peek()

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def bar_width(self) -> int:
        return self._bar_width

    @property
    def min_interval(self) -> float:
        return self._min_interval

    @property
    def stream(self) -> OutputSink:
        return self._stream

    @property
    def suffix(self) -> str:
        return "".join(self._suffix)

    # -- rendering ---------------------------------------------------------

    def completion(self) -> float:
        return render.completion_ratio(self._iterations_done, self._total)

    def print_progress(self) -> None:
        """Redraw the line in place and flush the sink."""
        complete = self.completion()
        elapsed = self._chronometer.peek()
        eta = render.estimate_remaining(elapsed, complete)

        line = render.format_line(self._prefix, complete, elapsed, eta, self._bar_width)
        line += self.suffix
        # Blank out leftovers of a longer previous line.
        self._line_width = max(self._line_width, len(line))

        try:
            self._stream.write(render.pad_to(line, self._line_width))
            self._stream.flush()
        except (OSError, ValueError) as exc:
            if not self._sink_failed:
                logger.warning("Progress output failed, continuing without it: %s", exc)
            self._sink_failed = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(done={self._iterations_done}, "
            f"total={self._total}, state={self._state.value})"
        )
