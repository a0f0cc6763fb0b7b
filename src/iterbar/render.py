"""Pure formatting of a single progress line.

Layout::

    <prefix>{ 42.0%} [############                  ] ( 1.3s < 1.8s) <suffix>

The engine owns the state; everything here is a function of its arguments.
"""

from __future__ import annotations

import math

# Keeps the completion ratio finite when the total is zero.
EPSILON = 1e-13

FILL_CHAR = "#"
EMPTY_CHAR = " "


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's ``round`` rounds halves to even, which would make a bar of width
    5 at 50% show 2 cells instead of 3.
    """
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def completion_ratio(done: int, total: int | None) -> float:
    """``done / total``, epsilon-guarded; an unknown total reads as infinite.

    Not clamped: more steps than ``total`` give a ratio above 1.
    """
    denominator = math.inf if total is None else total + EPSILON
    return done / denominator


def estimate_remaining(elapsed: float, completion: float) -> float:
    """ETA in seconds; ``inf`` before anything has completed."""
    if completion == 0:
        return math.inf
    return elapsed / completion - elapsed


def format_bar(completion: float, width: int) -> str:
    """Bracketed bar of ``width`` cells; overshoot shows a full bar."""
    width = max(0, width)
    filled = round_half_away(min(max(completion * width, 0.0), float(width)))
    return "[" + FILL_CHAR * filled + EMPTY_CHAR * (width - filled) + "]"


def format_line(
    prefix: str,
    completion: float,
    elapsed: float,
    eta: float,
    bar_width: int,
) -> str:
    """Progress line without the suffix, starting with a carriage return."""
    return (
        f"\r{prefix}{{{100 * completion:4.1f}%}} "
        f"{format_bar(completion, bar_width)} "
        f"({elapsed:4.1f}s < {eta:.1f}s) "
    )


def pad_to(text: str, width: int) -> str:
    """Right-pad ``text`` with blanks to ``width`` characters."""
    return text + " " * max(0, width - len(text))
