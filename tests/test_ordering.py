"""
Tests for the recursive ordering relation.
"""

import pytest

from surreals import Surreal, le, compare, sorted_unique
from surreals.ordering import ge, eq, ne, lt, gt, greatest, least


class TestOrderingRelation:
    """Tests for <= and the relations derived from it."""

    def test_zero_is_reflexive(self):
        """Test that 0 <= 0 with no options to inspect."""
        zero = Surreal()
        assert le(zero, zero)
        assert eq(zero, zero)
        assert not lt(zero, zero)

    def test_integer_ordering(self):
        """Test that integers keep their natural order."""
        numbers = [Surreal.from_int(n) for n in range(-4, 5)]
        for i in range(len(numbers) - 1):
            assert lt(numbers[i], numbers[i + 1])
            assert le(numbers[i], numbers[i + 1])
            assert not le(numbers[i + 1], numbers[i])
            assert gt(numbers[i + 1], numbers[i])
            assert ne(numbers[i], numbers[i + 1])

    def test_dyadic_ordering(self):
        """Test ordering across fractions of both signs."""
        values = [-2.5, -1.0, -0.75, -0.125, 0.0, 0.375, 0.5, 1.25, 3.0]
        numbers = [Surreal.from_float(v) for v in values]
        for i, a in enumerate(numbers):
            for j, b in enumerate(numbers):
                assert le(a, b) == (values[i] <= values[j])
                assert compare(a, b) == (values[i] > values[j]) - (values[i] < values[j])

    def test_equivalence_of_distinct_forms(self):
        """Test that {-1 | 1} and { | } are equal without being identical."""
        one = Surreal.from_int(1)
        zero_like = Surreal([-one], [one])
        assert eq(zero_like, Surreal())
        assert ge(zero_like, Surreal()) and le(zero_like, Surreal())
        assert compare(zero_like, Surreal()) == 0

    def test_operators_match_functions(self):
        """Test that the Surreal comparison operators use the same relation."""
        a = Surreal.from_float(0.5)
        b = Surreal.from_int(1)
        assert a < b and a <= b and b > a and b >= a and a != b
        assert not (a == b)

    def test_comparison_with_native_numbers(self):
        """Test that ints and floats are coerced."""
        two = Surreal.from_int(2)
        assert two == 2
        assert two < 2.5
        assert two > -1
        assert 3 > two
        assert two != 3

    def test_unsupported_comparison(self):
        """Test that comparing with a string raises TypeError."""
        with pytest.raises(TypeError):
            Surreal() < "0"
        assert (Surreal() == "0") is False

    def test_non_finite_comparison(self):
        """Test that nan and infinities are unequal and unordered."""
        one = Surreal.from_int(1)
        for x in (float("nan"), float("inf"), float("-inf")):
            assert (one == x) is False
            assert (one != x) is True
            with pytest.raises(TypeError):
                one < x

    def test_deep_numbers_compare(self):
        """Test comparisons of numbers built by long bisections."""
        a = Surreal.from_float(0.1)
        b = Surreal.from_float(0.1000000000000001)
        assert a.depth > 50
        assert a < b
        assert a == Surreal.from_float(0.1)


class TestOrderedCollections:
    """Tests for sorting and deduplicating numbers."""

    def test_sorted_unique(self):
        """Test ascending order and deduplication by value."""
        numbers = [Surreal.from_int(n) for n in (3, -1, 0, 3, 2, -1)]
        result = sorted_unique(numbers)
        assert [n.value for n in result] == [-1, 0, 2, 3]

    def test_sorted_unique_empty(self):
        """Test the empty collection."""
        assert sorted_unique([]) == ()

    def test_greatest_and_least(self):
        """Test extremal elements."""
        numbers = [Surreal.from_float(v) for v in (0.5, -1.5, 2.0, 0.25)]
        assert greatest(numbers).value == 2
        assert least(numbers).value == -1.5
        assert greatest([]) is None
        assert least([]) is None
