"""
Tests for finite surreal number construction and structure.
"""

import pytest
from fractions import Fraction

from surreals import Surreal, InvalidConstructionError, format_verbose


class TestConstruction:
    """Tests for building numbers from option sets."""

    def test_zero(self):
        """Test that zero has empty sides."""
        zero = Surreal()
        assert zero.left == ()
        assert zero.right == ()
        assert zero.depth == 0
        assert format_verbose(zero) == "{ | }"
        assert Surreal.zero().is_identical(zero)

    def test_one_and_minus_one(self):
        """Test the day-1 numbers."""
        zero = Surreal()
        one = Surreal([zero], [])
        minus_one = Surreal([], [zero])

        assert Surreal.from_int(1) == one
        assert Surreal.from_int(1).is_identical(one)
        assert Surreal.from_int(-1).is_identical(minus_one)
        assert format_verbose(one) == "{ { | } | }"
        assert format_verbose(minus_one) == "{ | { | } }"

    def test_pseudo_number_rejected(self, ints):
        """Test that {5 | 3} cannot be built."""
        five = Surreal.from_int(5)
        with pytest.raises(InvalidConstructionError):
            Surreal([five], [ints[3]])

    def test_equal_options_rejected(self, ints):
        """Test that {0 | 0} is a pseudo-number."""
        with pytest.raises(InvalidConstructionError):
            Surreal([ints[0]], [ints[0]])

    def test_rejected_before_simplify(self, ints):
        """Test that validation sees options simplification would drop."""
        with pytest.raises(InvalidConstructionError):
            Surreal([ints[0], ints[2]], [ints[1], ints[3]], simplify=True)

    def test_options_sorted_and_deduplicated(self, ints):
        """Test that sides are ascending and unique by value."""
        number = Surreal([ints[2], ints[-1], ints[1], ints[2]], [])
        assert [n.value for n in number.left] == [-1, 1, 2]
        assert number.term_count == 3

    def test_first_equivalent_option_kept(self, ints):
        """Test that the first supplied of two equivalent options survives."""
        other_one = Surreal([ints[0]], [ints[2]])
        assert other_one == ints[1]

        number = Surreal([ints[1], other_one], [])
        assert len(number.left) == 1
        assert number.left[0] is ints[1]

    def test_simplify_keeps_extremes(self, ints):
        """Test that simplify keeps the greatest left and least right option."""
        full = Surreal([ints[-1], ints[0], ints[1]], [ints[3], ints[2]])
        simple = Surreal([ints[-1], ints[0], ints[1]], [ints[3], ints[2]], simplify=True)

        assert simple.left[0] is ints[1]
        assert simple.right[0] is ints[2]
        assert simple.term_count == 2
        assert full.term_count == 5
        assert full == simple

    def test_between(self, ints):
        """Test the {a | b} constructor."""
        half = Surreal.between(ints[0], ints[1])
        assert half.value == Fraction(1, 2)
        assert float(half) == 0.5

    def test_between_requires_strict_order(self, ints):
        """Test that {a | b} needs a < b."""
        with pytest.raises(InvalidConstructionError):
            Surreal.between(ints[1], ints[0])
        with pytest.raises(InvalidConstructionError):
            Surreal.between(ints[1], Surreal([ints[0]], [ints[2]]))

    def test_from_value(self):
        """Test dispatch on native types."""
        assert Surreal.from_value(3) == 3
        assert Surreal.from_value(-0.25).value == Fraction(-1, 4)
        number = Surreal.from_int(2)
        assert Surreal.from_value(number) is number
        with pytest.raises(TypeError):
            Surreal.from_value("2")
        with pytest.raises(TypeError):
            Surreal.from_value(True)


class TestStructure:
    """Tests for derived properties."""

    def test_depth_of_integers(self):
        """Test that integer n is born on day |n|."""
        for n in range(-6, 7):
            assert Surreal.from_int(n).depth == abs(n)

    def test_depth_of_mixed_options(self, ints):
        """Test that depth follows the deepest option."""
        number = Surreal([ints[-1]], [ints[3]])
        assert number.depth == 4

    def test_exact_value(self, ints):
        """Test the simplicity rule for non-canonical forms."""
        assert Surreal([ints[-1]], [ints[1]]).value == 0
        assert Surreal([ints[0]], [Surreal.from_int(5)]).value == 1
        assert Surreal([ints[1]], [ints[2]]).value == Fraction(3, 2)
        assert Surreal([], [ints[-2]]).value == -3

    def test_is_identical(self, ints):
        """Test structural versus numeric equality."""
        zero_like = Surreal([ints[-1]], [ints[1]])
        assert zero_like == ints[0]
        assert not zero_like.is_identical(ints[0])
        assert Surreal.from_int(2).is_identical(ints[2])

    def test_hash_follows_equivalence(self, ints):
        """Test that equivalent numbers can key a dict."""
        zero_like = Surreal([ints[-1]], [ints[1]])
        table = {ints[0]: "zero"}
        assert table[zero_like] == "zero"
        assert hash(Surreal.from_int(5)) == hash(5)

    def test_depth_of_deep_integers(self):
        """Test that depth is available for integers hundreds of days deep."""
        assert Surreal.from_int(300).depth == 300
        assert Surreal.from_int(-450).depth == 450

    def test_simplify_keeps_first_extreme(self, ints):
        """Test that simplify keeps the first supplied of equivalent extremes."""
        other_one = Surreal([ints[0]], [ints[2]])
        number = Surreal([ints[-1], ints[1], other_one], [ints[3], Surreal.from_int(3)], simplify=True)
        assert number.left[0] is ints[1]
        assert number.right[0] is ints[3]

    def test_str_and_repr(self, ints):
        """Test the default text forms."""
        assert str(ints[1]) == "{ 0.000000 | }"
        assert repr(ints[0]) == "Surreal({ | })"
