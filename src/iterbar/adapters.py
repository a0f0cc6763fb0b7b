"""Ownership adapters over the progress engine.

Three ways to hand a sequence to a progress bar:

* ``BorrowMutableProgress``: the caller keeps a mutable collection and the
  adapter reads it on every traversal.
* ``BorrowImmutableProgress``: same, but the adapter only exposes a
  read-only view of the collection.
* ``OwningProgress``: the caller gives the value away (typically a
  generator or a freshly built collection) and the adapter keeps it.

Borrowing adapters refuse one-shot iterables. An iterator is used up by the
first traversal, so borrowing it would leave the adapter pointing at
nothing; ``OwningProgress`` materializes it instead.
"""

from __future__ import annotations

import time
from collections.abc import (
    Collection,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    MutableSequence,
    MutableSet,
    Sequence,
)
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar, Union

from .clock import Timer
from .config import DisplayConfig
from .cursor import ProgressCursor
from .engine import EngineState, OutputSink, ProgressEngine
from .exceptions import TransientSequenceError

T = TypeVar("T")

MutableCollection = Union[MutableSequence[T], MutableMapping[T, Any], MutableSet[T]]


def is_transient(value: object) -> bool:
    """True for iterables that can only be traversed once."""
    return isinstance(value, Iterator) or not isinstance(value, Collection)


def is_mutable(value: object) -> bool:
    return isinstance(value, (MutableSequence, MutableMapping, MutableSet))


class SequenceView(Sequence[T]):
    """Read-only window onto a sequence owned by someone else."""

    __slots__ = ("_data",)

    def __init__(self, data: Sequence[T]):
        self._data = data

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SequenceView({self._data!r})"


class CollectionView(Collection[T]):
    """Read-only window onto a set-like or other unordered collection."""

    __slots__ = ("_data",)

    def __init__(self, data: Collection[T]):
        self._data = data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __repr__(self) -> str:
        return f"CollectionView({self._data!r})"


def readonly_view(collection: Collection[T]) -> Collection[T]:
    if isinstance(collection, Mapping):
        return MappingProxyType(collection)
    if isinstance(collection, Sequence):
        return SequenceView(collection)
    return CollectionView(collection)


class BorrowMutableProgress(ProgressEngine[T]):
    """Progress over a mutable collection the caller keeps alive.

    ``sequence`` is the caller's own object, so elements can be modified in
    place while iterating::

        data = [1, 2, 3]
        bar = BorrowMutableProgress(data)
        for i, _ in enumerate(bar):
            data[i] *= 2
    """

    def __init__(
        self,
        collection: MutableCollection[T],
        *,
        config: Optional[DisplayConfig] = None,
        stream: Optional[OutputSink] = None,
        timer: Timer = time.monotonic,
    ):
        if is_transient(collection):
            raise TransientSequenceError(type(self).__name__, collection)
        if not is_mutable(collection):
            raise TypeError(
                f"{type(self).__name__} needs a mutable collection, "
                f"got {type(collection).__name__}; use BorrowImmutableProgress"
            )
        super().__init__(
            collection, total=len(collection), config=config, stream=stream, timer=timer
        )

    @property
    def sequence(self) -> MutableCollection[T]:
        return self._source


class BorrowImmutableProgress(ProgressEngine[T]):
    """Progress over a collection the caller keeps alive, read-only.

    ``sequence`` is a read-only view: a ``MappingProxyType`` for mappings,
    a ``SequenceView`` for sequences, a ``CollectionView`` otherwise.
    """

    def __init__(
        self,
        collection: Collection[T],
        *,
        config: Optional[DisplayConfig] = None,
        stream: Optional[OutputSink] = None,
        timer: Timer = time.monotonic,
    ):
        if is_transient(collection):
            raise TransientSequenceError(type(self).__name__, collection)
        super().__init__(
            collection, total=len(collection), config=config, stream=stream, timer=timer
        )
        self._view = readonly_view(collection)

    @property
    def sequence(self) -> Collection[T]:
        return self._view


class OwningProgress(Generic[T]):
    """Progress over a value whose ownership moves into the adapter.

    One-shot iterables are materialized into a list so the adapter has
    stable storage it can traverse again. Collections are kept as given.
    A borrowing engine is then built over the adapter's own storage and
    every operation is delegated to it.
    """

    def __init__(
        self,
        value: Iterable[T],
        *,
        config: Optional[DisplayConfig] = None,
        stream: Optional[OutputSink] = None,
        timer: Timer = time.monotonic,
    ):
        storage: Collection[T] = list(value) if is_transient(value) else value  # type: ignore[assignment]
        self._storage = storage
        engine_type = BorrowMutableProgress if is_mutable(storage) else BorrowImmutableProgress
        self._engine: ProgressEngine[T] = engine_type(
            storage, config=config, stream=stream, timer=timer
        )

    @property
    def sequence(self) -> Collection[T]:
        return self._storage

    @property
    def engine(self) -> ProgressEngine[T]:
        return self._engine

    def start_traversal(self) -> ProgressCursor[T]:
        return self._engine.start_traversal()

    def __iter__(self) -> ProgressCursor[T]:
        return self._engine.start_traversal()

    def update(self, finished: bool = False) -> None:
        self._engine.update(finished)

    def append_to_suffix(self, value: object) -> OwningProgress[T]:
        self._engine.append_to_suffix(value)
        return self

    def manually_set_progress(self, fraction: float) -> None:
        self._engine.manually_set_progress(fraction)

    def advance(self, amount: int = 1) -> None:
        self._engine.advance(amount)

    def configure(self, config: DisplayConfig) -> None:
        self._engine.configure(config)

    def set_stream(self, stream: OutputSink) -> None:
        self._engine.set_stream(stream)

    def set_prefix(self, prefix: str) -> None:
        self._engine.set_prefix(prefix)

    def set_bar_width(self, width: int) -> None:
        self._engine.set_bar_width(width)

    def set_min_interval(self, seconds: float) -> None:
        self._engine.set_min_interval(seconds)

    @property
    def total(self) -> Optional[int]:
        return self._engine.total

    @property
    def iterations_done(self) -> int:
        return self._engine.iterations_done

    @property
    def iterations_left(self) -> Optional[int]:
        return self._engine.iterations_left

    @property
    def elapsed(self) -> float:
        return self._engine.elapsed

    @property
    def state(self) -> EngineState:
        return self._engine.state

    @property
    def prefix(self) -> str:
        return self._engine.prefix

    @property
    def bar_width(self) -> int:
        return self._engine.bar_width

    @property
    def min_interval(self) -> float:
        return self._engine.min_interval

    @property
    def stream(self) -> OutputSink:
        return self._engine.stream

    @property
    def suffix(self) -> str:
        return self._engine.suffix

    def completion(self) -> float:
        return self._engine.completion()

    def print_progress(self) -> None:
        self._engine.print_progress()

    def __repr__(self) -> str:
        return f"OwningProgress({self._engine!r})"
