"""Shared test fixtures for iterbar tests."""

import io
import logging

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class FakeTimer:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def frames(output: str) -> list:
    """Split sink output into the individual redraws (without the leading \\r)."""
    return output.split("\r")[1:]


@pytest.fixture
def fake_timer():
    """A clock that only moves when the test says so."""
    return FakeTimer()


@pytest.fixture
def sink():
    """In-memory output stream."""
    return io.StringIO()


@pytest.fixture
def split_frames():
    """Helper turning sink output into a list of redraws."""
    return frames


@pytest.fixture(autouse=True)
def reset_iterbar_logger():
    """Undo setup_logging() so later tests see records through caplog."""
    yield
    logger = logging.getLogger("iterbar")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
