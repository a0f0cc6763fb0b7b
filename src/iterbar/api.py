"""
iterbar public entry points.

Usage:
    from iterbar import tqdm, trange

    for item in tqdm(items, prefix="loading "):
        process(item)

    for i in trange(100, 5000):
        work(i)

``tqdm`` picks the adapter from how the sequence is passed:

    - a mutable collection (list, dict, set) is borrowed, mutable
    - any other collection (tuple, str, range, frozenset) is borrowed, read-only
    - a one-shot iterable (generator, iterator) is taken over by the adapter
    - an explicit ``total`` wraps the iterable lazily as a raw iterator
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Any, Optional, TypeVar, Union

from .adapters import (
    BorrowImmutableProgress,
    BorrowMutableProgress,
    OwningProgress,
    is_mutable,
    is_transient,
)
from .clock import Timer
from .config import DisplayConfig
from .engine import OutputSink, ProgressEngine
from .int_range import IntRange
from .timer import TimerProgress

T = TypeVar("T")

Progress = Union[ProgressEngine[T], OwningProgress[T]]


def _resolve_config(config: Optional[DisplayConfig], display: dict[str, Any]) -> DisplayConfig:
    config = config or DisplayConfig()
    overrides = {k: v for k, v in display.items() if v is not None}
    unknown = set(overrides) - set(DisplayConfig.__dataclass_fields__)
    if unknown:
        raise TypeError(f"unexpected display option(s): {', '.join(sorted(unknown))}")
    return replace(config, **overrides) if overrides else config


def tqdm(
    sequence: Iterable[T],
    total: Optional[int] = None,
    *,
    config: Optional[DisplayConfig] = None,
    stream: Optional[OutputSink] = None,
    timer: Timer = time.monotonic,
    **display: Any,
) -> Progress[T]:
    """Wrap ``sequence`` in a progress bar.

    Args:
        sequence: Collection or iterable to traverse
        total: Declared step count; when given, ``sequence`` is wrapped
            lazily as a raw iterator with that total
        config: Display configuration, defaults to ``DisplayConfig()``
        stream: Output sink, ``sys.stderr`` when omitted
        timer: Monotonic clock
        **display: ``prefix``, ``bar_width`` or ``min_interval`` overrides

    Returns:
        The adapter matching how ``sequence`` was passed
    """
    resolved = _resolve_config(config, display)
    options = {"config": resolved, "stream": stream, "timer": timer}

    if total is not None:
        return ProgressEngine(sequence, total, **options)
    if is_transient(sequence):
        return OwningProgress(sequence, **options)
    if is_mutable(sequence):
        return BorrowMutableProgress(sequence, **options)  # type: ignore[arg-type]
    return BorrowImmutableProgress(sequence, **options)  # type: ignore[arg-type]


def tqdm_iter(
    iterator: Iterator[T] | Iterable[T],
    total: Optional[int] = None,
    *,
    config: Optional[DisplayConfig] = None,
    stream: Optional[OutputSink] = None,
    timer: Timer = time.monotonic,
    **display: Any,
) -> ProgressEngine[T]:
    """Wrap a raw iterator without materializing it.

    With ``total=None`` the stream is unbounded: the bar stays at 0% and the
    final line is drawn when the iterator runs out.
    """
    resolved = _resolve_config(config, display)
    return ProgressEngine(iterator, total, config=resolved, stream=stream, timer=timer)


def trange(
    start: int,
    stop: Optional[int] = None,
    *,
    config: Optional[DisplayConfig] = None,
    stream: Optional[OutputSink] = None,
    timer: Timer = time.monotonic,
    **display: Any,
) -> OwningProgress[int]:
    """Progress over ``[start, stop)``, or ``[0, start)`` with one argument."""
    resolved = _resolve_config(config, display)
    return OwningProgress(IntRange(start, stop), config=resolved, stream=stream, timer=timer)


def tqdm_timer(
    duration: float,
    *,
    config: Optional[DisplayConfig] = None,
    stream: Optional[OutputSink] = None,
    timer: Timer = time.monotonic,
    **display: Any,
) -> TimerProgress:
    """Progress that fills over ``duration`` seconds of wall time."""
    resolved = _resolve_config(config, display)
    return TimerProgress(duration, config=resolved, stream=stream, timer=timer)
