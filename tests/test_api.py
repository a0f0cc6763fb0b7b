"""Tests for the public entry points and end-to-end behavior."""

import pytest

from iterbar import (
    BorrowImmutableProgress,
    BorrowMutableProgress,
    DisplayConfig,
    OwningProgress,
    ProgressEngine,
    TimerProgress,
    TransientSequenceError,
    tqdm,
    tqdm_iter,
    tqdm_timer,
    trange,
)


class TestDispatch:
    """tqdm() picks the adapter from how the sequence is passed."""

    def test_list_is_borrowed_mutable(self, sink):
        assert isinstance(tqdm([1, 2], stream=sink), BorrowMutableProgress)

    def test_tuple_is_borrowed_read_only(self, sink):
        assert isinstance(tqdm((1, 2), stream=sink), BorrowImmutableProgress)

    def test_range_is_borrowed_read_only(self, sink):
        assert isinstance(tqdm(range(3), stream=sink), BorrowImmutableProgress)

    def test_generator_is_owned(self, sink):
        assert isinstance(tqdm((x for x in range(3)), stream=sink), OwningProgress)

    def test_explicit_total_is_raw(self, sink):
        bar = tqdm([1, 2, 3], total=10, stream=sink)
        assert type(bar) is ProgressEngine
        assert bar.total == 10


class TestDisplayOptions:
    """Tests for config and keyword overrides."""

    def test_keyword_overrides(self, sink):
        bar = tqdm([1], prefix="p ", bar_width=5, min_interval=1.0, stream=sink)
        assert (bar.prefix, bar.bar_width, bar.min_interval) == ("p ", 5, 1.0)

    def test_config_then_overrides(self, sink):
        config = DisplayConfig(prefix="cfg ", bar_width=12)
        bar = tqdm([1], config=config, bar_width=3, stream=sink)
        assert bar.prefix == "cfg "
        assert bar.bar_width == 3

    def test_unknown_option_rejected(self, sink):
        with pytest.raises(TypeError, match="colour"):
            tqdm([1], colour="red", stream=sink)


class TestEndToEnd:
    """Full traversals through the public API."""

    def test_five_elements_reach_hundred_percent(self, sink, fake_timer, split_frames):
        bar = tqdm([1, 2, 3, 4, 5], stream=sink, timer=fake_timer)
        assert list(bar) == [1, 2, 3, 4, 5]
        last = split_frames(sink.getvalue())[-1]
        assert "100.0%" in last
        assert "[" + "#" * 30 + "]" in last

    def test_trange_counts_4900_steps(self, sink, fake_timer):
        bar = trange(100, 5000, stream=sink, timer=fake_timer)
        values = list(bar)
        assert values == list(range(100, 5000))
        assert bar.iterations_done == 4900

    def test_trange_single_argument(self, sink):
        assert list(trange(5, stream=sink)) == [0, 1, 2, 3, 4]

    def test_generator_with_suffix(self, sink, fake_timer, split_frames):
        bar = tqdm((x for x in range(3)), stream=sink, timer=fake_timer)
        for value in bar:
            bar.append_to_suffix(value)
            fake_timer.advance(1.0)
        frames = split_frames(sink.getvalue())
        assert frames[1].rstrip().endswith("0")
        assert frames[3].startswith("{100.0%}")

    def test_borrowing_from_transient_fails(self):
        with pytest.raises(TransientSequenceError):
            BorrowMutableProgress(x for x in range(3))


class TestTqdmIter:
    """Tests for the raw iterator entry point."""

    def test_lazy(self, sink):
        pulled = []

        def numbers():
            for i in range(5):
                pulled.append(i)
                yield i

        cursor = iter(tqdm_iter(numbers(), stream=sink))
        next(cursor)
        assert pulled == [0]

    def test_unbounded_counts_steps(self, sink):
        bar = tqdm_iter(iter("abcd"), stream=sink)
        assert list(bar) == ["a", "b", "c", "d"]
        assert bar.total is None
        assert bar.iterations_done == 4

    def test_declared_total(self, sink, split_frames):
        bar = tqdm_iter(iter(range(4)), total=4, stream=sink)
        list(bar)
        assert "{100.0%}" in split_frames(sink.getvalue())[-1]

    def test_tqdm_with_total_is_lazy(self, sink):
        pulled = []

        def numbers():
            for i in range(3):
                pulled.append(i)
                yield i

        bar = tqdm(numbers(), total=3, stream=sink)
        assert pulled == []
        assert list(bar) == [0, 1, 2]


class TestTqdmTimer:
    def test_returns_timer_progress(self, sink):
        bar = tqdm_timer(1.5, prefix="t ", stream=sink)
        assert isinstance(bar, TimerProgress)
        assert bar.duration == 1.5
        assert bar.prefix == "t "
