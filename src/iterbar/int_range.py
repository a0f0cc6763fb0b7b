"""Lazy integer intervals for progress over bare numeric ranges.

``IntRange`` stands in for a collection of consecutive integers without
materializing any storage, so ``trange(100, 5000)`` can be wrapped by the
same adapters as a list. ``IntPosition`` is the position type it walks.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional, Union, overload


class IntPosition:
    """A position over the integers.

    Supports dereference (``value``), advance, decrement, offset by a delta,
    difference between two positions and equality.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def advance(self) -> IntPosition:
        self._value += 1
        return self

    def retreat(self) -> IntPosition:
        self._value -= 1
        return self

    def __iadd__(self, delta: int) -> IntPosition:
        self._value += delta
        return self

    def __add__(self, delta: int) -> IntPosition:
        return IntPosition(self._value + delta)

    def __sub__(self, other: IntPosition) -> int:
        return self._value - other._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntPosition):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"IntPosition({self._value})"


class _IntRangeIterator(Iterator[int]):
    """Walks a position from ``first`` up to (not including) ``last``."""

    def __init__(self, first: IntPosition, last: IntPosition):
        self._current = IntPosition(first.value)
        self._last = last

    def __next__(self) -> int:
        if self._current == self._last:
            raise StopIteration
        value = self._current.value
        self._current.advance()
        return value

    def __length_hint__(self) -> int:
        return max(0, self._last - self._current)


class IntRange(Sequence[int]):
    """Consecutive integers ``[start, stop)``; ``IntRange(stop)`` starts at 0.

    Restartable: every ``iter()`` begins again at ``start``. An interval with
    ``stop <= start`` is empty.
    """

    def __init__(self, start: int, stop: Optional[int] = None):
        if stop is None:
            start, stop = 0, start
        self._start = start
        # Empty intervals collapse onto start so begin() == end().
        self._stop = max(start, stop)

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def begin(self) -> IntPosition:
        return IntPosition(self._start)

    def end(self) -> IntPosition:
        return IntPosition(self._stop)

    def __iter__(self) -> Iterator[int]:
        return _IntRangeIterator(self.begin(), self.end())

    def __len__(self) -> int:
        return self.end() - self.begin()

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> IntRange: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[int, IntRange]:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("IntRange slices must have step 1")
            return IntRange(self._start + start, self._start + stop)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("IntRange index out of range")
        return self._start + index

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._start <= value < self._stop

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntRange):
            return NotImplemented
        return (self._start, self._stop) == (other._start, other._stop)

    def __hash__(self) -> int:
        return hash((self._start, self._stop))

    def __repr__(self) -> str:
        return f"IntRange({self._start}, {self._stop})"
