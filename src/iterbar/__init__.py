"""
iterbar - progress bars for plain iteration

Wraps a collection, an integer range or an iterator so that each step of a
``for`` loop redraws a one-line progress display (percentage, bar, elapsed
and estimated remaining seconds, optional suffix) on stderr. The values
produced by iteration are left untouched.
"""

__version__ = "0.3.0"

from .adapters import BorrowImmutableProgress, BorrowMutableProgress, OwningProgress
from .api import tqdm, tqdm_iter, tqdm_timer, trange
from .clock import Chronometer
from .config import DisplayConfig, load_config
from .engine import EngineState, ProgressEngine
from .exceptions import IterbarError, TransientSequenceError
from .int_range import IntRange
from .timer import TimerProgress

__all__ = [
    "tqdm",  # Main entry point
    "tqdm_iter",
    "trange",
    "tqdm_timer",
    "ProgressEngine",
    "EngineState",
    "BorrowMutableProgress",
    "BorrowImmutableProgress",
    "OwningProgress",
    "TimerProgress",
    "IntRange",
    "Chronometer",
    "DisplayConfig",
    "load_config",
    "IterbarError",
    "TransientSequenceError",
]
