"""Exception hierarchy for iterbar."""

from .base import IterbarError
from .config import ConfigurationError, InvalidConfigError
from .usage import TransientSequenceError

__all__ = [
    "IterbarError",
    "ConfigurationError",
    "InvalidConfigError",
    "TransientSequenceError",
]
