"""
Tests for data models: OrderedValue, compare, and exceptions.
"""

import itertools

import pytest

from avlmap.models.exceptions import (
    AVLError,
    MalformedPairError,
    TreeInvariantError,
    UnsupportedValueError,
)
from avlmap.models.ordered_value import OrderedValue, Ordering, ValueKind, compare


class TestOrderedValue:
    """Tests for OrderedValue construction and conversion."""

    def test_number_value(self):
        """Test creating a numeric value."""
        value = OrderedValue.number(5)
        assert value.kind == ValueKind.NUMBER
        assert value.is_number()
        assert not value.is_text()
        assert value.unwrap() == 5

    def test_text_value(self):
        """Test creating a text value."""
        value = OrderedValue.text("five")
        assert value.kind == ValueKind.TEXT
        assert value.is_text()
        assert value.unwrap() == "five"

    def test_of_maps_host_values(self):
        """Test mapping host values into the variant."""
        assert OrderedValue.of(7) == OrderedValue.number(7)
        assert OrderedValue.of(2.5) == OrderedValue.number(2.5)
        assert OrderedValue.of("x") == OrderedValue.text("x")

    def test_of_passes_through_ordered_values(self):
        """Test that an existing OrderedValue is returned unchanged."""
        value = OrderedValue.text("same")
        assert OrderedValue.of(value) is value

    @pytest.mark.parametrize("bad", [True, None, [1], b"bytes", float("nan")])
    def test_of_rejects_unsupported(self, bad):
        """Test that values outside the variant are rejected."""
        with pytest.raises(UnsupportedValueError):
            OrderedValue.of(bad)

    def test_typed_constructors_reject_wrong_kind(self):
        """Test that number() and text() check their argument type."""
        with pytest.raises(UnsupportedValueError):
            OrderedValue.number("5")
        with pytest.raises(UnsupportedValueError):
            OrderedValue.text(5)

    @pytest.mark.parametrize(
        "kind, data",
        [
            (ValueKind.NUMBER, float("nan")),
            (ValueKind.NUMBER, True),
            (ValueKind.NUMBER, "5"),
            (ValueKind.TEXT, 5),
            (0, 5),
        ],
    )
    def test_constructor_validates(self, kind, data):
        """Test that direct construction applies the same checks as number() and text()."""
        with pytest.raises(UnsupportedValueError):
            OrderedValue(kind, data)

    def test_constructor_accepts_valid_data(self):
        """Test that direct construction equals the typed constructors."""
        assert OrderedValue(ValueKind.NUMBER, 2) == OrderedValue.number(2)
        assert OrderedValue(ValueKind.TEXT, "b") == OrderedValue.text("b")

    def test_immutable(self):
        """Test that values cannot be mutated."""
        value = OrderedValue.number(1)
        with pytest.raises(AttributeError):
            value.data = 2

    def test_hash_consistent_with_equality(self):
        """Test that equal numbers of different host types hash together."""
        assert OrderedValue.number(1) == OrderedValue.number(1.0)
        assert len({OrderedValue.number(1), OrderedValue.number(1.0)}) == 1

    def test_str(self):
        """Test display rendering."""
        assert str(OrderedValue.number(42)) == "42"
        assert str(OrderedValue.text("abc")) == "abc"


class TestCompare:
    """Tests for the total order."""

    def test_numbers_order_numerically(self):
        """Test numeric ordering, not textual."""
        assert compare(OrderedValue.number(2), OrderedValue.number(10)) == Ordering.LESS
        assert compare(OrderedValue.number(10), OrderedValue.number(2)) == Ordering.GREATER
        assert compare(OrderedValue.number(-1.5), OrderedValue.number(-1)) == Ordering.LESS

    def test_text_orders_lexicographically(self):
        """Test lexicographic ordering of text."""
        assert compare(OrderedValue.text("10"), OrderedValue.text("9")) == Ordering.LESS
        assert compare(OrderedValue.text("Z"), OrderedValue.text("a")) == Ordering.LESS
        assert compare(OrderedValue.text("ab"), OrderedValue.text("a")) == Ordering.GREATER

    def test_equal(self):
        """Test equal values compare EQUAL."""
        assert compare(OrderedValue.number(3), OrderedValue.number(3.0)) == Ordering.EQUAL
        assert compare(OrderedValue.text("k"), OrderedValue.text("k")) == Ordering.EQUAL

    def test_numbers_before_text(self):
        """Test the fixed cross-kind order."""
        assert compare(OrderedValue.number(5), OrderedValue.text("a")) == Ordering.LESS
        assert compare(OrderedValue.text("a"), OrderedValue.number(5)) == Ordering.GREATER
        assert compare(OrderedValue.number(10**9), OrderedValue.text("")) == Ordering.LESS

    def test_method_matches_function(self):
        """Test OrderedValue.compare delegates to compare."""
        a, b = OrderedValue.number(1), OrderedValue.text("1")
        assert a.compare(b) == compare(a, b) == Ordering.LESS

    def test_sorted_mixed(self, mixed_keys):
        """Test rich comparisons sort mixed values."""
        shuffled = [mixed_keys[i] for i in (4, 0, 5, 2, 3, 1)]
        assert sorted(shuffled) == mixed_keys

    def test_transitive_and_antisymmetric(self, mixed_keys):
        """Test order consistency across every triple of a mixed set."""
        for a, b, c in itertools.product(mixed_keys, repeat=3):
            assert compare(a, b) == -compare(b, a)
            if compare(a, b) == Ordering.LESS and compare(b, c) == Ordering.LESS:
                assert compare(a, c) == Ordering.LESS

    def test_no_implicit_coercion(self):
        """Test that raw host values are not compared with OrderedValues."""
        assert OrderedValue.number(5) != 5
        with pytest.raises(TypeError):
            OrderedValue.number(5) < 5


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_malformed_pair_error(self):
        """Test MalformedPairError carries its position."""
        error = MalformedPairError(3, (1,))
        assert error.index == 3
        assert error.pair == (1,)
        assert "index 3" in str(error)
        assert isinstance(error, ValueError)
        assert isinstance(error, AVLError)

    def test_unsupported_value_error(self):
        """Test UnsupportedValueError is a TypeError with context."""
        error = UnsupportedValueError(None, "expected a str")
        assert error.value is None
        assert "NoneType" in str(error)
        assert "expected a str" in str(error)
        assert isinstance(error, TypeError)

    def test_invariant_error_is_assertion(self):
        """Test TreeInvariantError is not a recoverable library error."""
        assert issubclass(TreeInvariantError, AssertionError)
        assert not issubclass(TreeInvariantError, AVLError)
