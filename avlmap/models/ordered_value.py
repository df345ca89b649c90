"""
OrderedValue and ValueKind for keys and values stored in the tree.
"""

import functools
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from avlmap.models.exceptions import UnsupportedValueError


class ValueKind(IntEnum):
    """Variant tag. The numeric tag values fix the cross-kind order."""

    NUMBER = 0
    TEXT = 1


class Ordering(IntEnum):
    """Result of comparing two ordered values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@functools.total_ordering
@dataclass(frozen=True)
class OrderedValue:
    """
    A number or a text string under a single total order.

    Attributes:
        kind: Which variant this value holds.
        data: The wrapped int, float or str.

    Numbers order numerically, text orders lexicographically, and every
    number sorts before every text value.
    """

    kind: ValueKind
    data: int | float | str

    def __post_init__(self) -> None:
        """Reject data that does not belong to the declared kind."""
        if not isinstance(self.kind, ValueKind):
            raise UnsupportedValueError(self.kind, "kind must be a ValueKind")
        if self.kind == ValueKind.TEXT:
            if not isinstance(self.data, str):
                raise UnsupportedValueError(self.data, "expected a str")
            return
        if isinstance(self.data, bool) or not isinstance(self.data, (int, float)):
            raise UnsupportedValueError(self.data, "expected an int or float")
        if isinstance(self.data, float) and math.isnan(self.data):
            raise UnsupportedValueError(self.data, "NaN has no position in the order")

    @classmethod
    def number(cls, data: int | float) -> "OrderedValue":
        return cls(kind=ValueKind.NUMBER, data=data)

    @classmethod
    def text(cls, data: str) -> "OrderedValue":
        return cls(kind=ValueKind.TEXT, data=data)

    @classmethod
    def of(cls, data: Any) -> "OrderedValue":
        """
        Map a host value into the variant.

        Args:
            data: An int, float, str or an existing OrderedValue.

        Returns:
            The corresponding OrderedValue.

        Raises:
            UnsupportedValueError: For bool, NaN and any other type.
        """
        if isinstance(data, OrderedValue):
            return data
        if isinstance(data, str):
            return cls.text(data)
        return cls.number(data)

    def is_number(self) -> bool:
        return self.kind == ValueKind.NUMBER

    def is_text(self) -> bool:
        return self.kind == ValueKind.TEXT

    def unwrap(self) -> int | float | str:
        """Return the wrapped host value."""
        return self.data

    def compare(self, other: "OrderedValue") -> Ordering:
        return compare(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrderedValue):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __str__(self) -> str:
        return str(self.data)


def compare(a: OrderedValue, b: OrderedValue) -> Ordering:
    """
    Compare two ordered values.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER.
    """
    if a.kind != b.kind:
        # Numbers always sort before text.
        return Ordering.LESS if a.kind < b.kind else Ordering.GREATER
    if a.data < b.data:
        return Ordering.LESS
    if a.data > b.data:
        return Ordering.GREATER
    return Ordering.EQUAL
