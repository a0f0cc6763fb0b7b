"""Counting cursor: turns each step of an iterator into a progress update."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .engine import ProgressEngine

T = TypeVar("T")


class ProgressCursor(Iterator[T]):
    """Iterator over a wrapped position that notifies its engine on each step.

    Every call to ``__next__`` is the loop's natural "reached the end?" check.
    A successful step means the previous element's work is complete, so the
    engine is told via ``update()``. Exhaustion sends exactly one
    ``update(finished=True)`` so the engine can draw the final line.
    Values pass through untouched.

    The engine is not owned: both cursor and engine belong to the same
    adapter, and the cursor is only created by ``ProgressEngine``.
    """

    def __init__(self, position: Iterator[T], engine: ProgressEngine):
        self._position = position
        self._engine = engine
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once the end marker has been reached."""
        return self._exhausted

    def __iter__(self) -> ProgressCursor[T]:
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        try:
            value = next(self._position)
        except StopIteration:
            self._exhausted = True
            self._engine.update(finished=True)
            raise
        self._engine.update()
        return value

    def __length_hint__(self) -> int:
        left = self._engine.iterations_left
        if self._exhausted or left is None:
            return 0
        return max(0, left)
