"""Adapter misuse errors raised at construction time."""

from .base import IterbarError


class TransientSequenceError(IterbarError, TypeError):
    """Raised when a borrowing adapter is handed a one-shot iterable.

    A borrowing adapter re-reads the caller's collection on every traversal.
    Iterators and generators are consumed by the first pass, so the adapter
    would be left pointing at storage that no longer holds the values. Pass
    the iterable to ``tqdm()`` or ``OwningProgress`` instead, which take
    ownership of it.
    """

    def __init__(self, adapter: str, value: object):
        type_name = type(value).__name__
        super().__init__(
            f"{adapter} cannot borrow a one-shot {type_name}; "
            f"pass it to tqdm() or OwningProgress to transfer ownership",
            details={"adapter": adapter, "type": type_name},
        )
        self.adapter = adapter
        self.value_type = type(value)
