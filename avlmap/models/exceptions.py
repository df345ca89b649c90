"""
Custom exceptions for the ordered map.
"""

from typing import Any


class AVLError(Exception):
    """Base class for recoverable errors raised by the ordered map."""


class UnsupportedValueError(AVLError, TypeError):
    """
    Raised when a host value cannot be mapped into an OrderedValue.

    Only numbers (int, float) and text (str) are accepted. Booleans and NaN
    are rejected because they have no place in the total order.
    """

    def __init__(self, value: Any, reason: str | None = None):
        """
        Initialize unsupported value error.

        Args:
            value: The offending host value.
            reason: Optional explanation appended to the message.
        """
        self.value = value
        message = f"Cannot use {value!r} ({type(value).__name__}) as an ordered value"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedPairError(AVLError, ValueError):
    """
    Raised by bulk insertion when an item is not a (key, value) pair.

    Pairs before the malformed one have already been inserted.
    """

    def __init__(self, index: int, pair: Any):
        self.index = index
        self.pair = pair
        super().__init__(
            f"Malformed pair at index {index}: expected (key, value), got {pair!r}"
        )


class TreeInvariantError(AssertionError):
    """
    Raised when the tree structure is corrupted.

    This is a programming error, not a runtime condition: a stale height or a
    broken ordering invalidates every later O(log N) guarantee, so it is never
    caught inside the library.
    """
