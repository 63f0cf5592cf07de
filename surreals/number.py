"""
Finite Surreal Numbers

A surreal number is a pair of sets of surreal numbers born on earlier days:

    x = { L | R }

Examples:
- 0  = { | }
- 1  = { 0 | },   2 = { 1 | },   -1 = { | 0 }
- 1/2 = { 0 | 1 }

The value of x depends only on the greatest element of L and the least
element of R, but arithmetic produces numbers with many options. The
construction keeps those options (deduplicated by value) unless asked to
simplify, and the canonical tables in `canonical.py` keep the size of
repeated results under control.

Validity: no element of R may be <= any element of L. Violations are
pseudo-numbers and are rejected when the number is built.
"""

from __future__ import annotations
from fractions import Fraction
from functools import cached_property
from typing import Iterable, Tuple, Optional, TYPE_CHECKING

from . import ordering
from .errors import SurrealError, InvalidConstructionError

if TYPE_CHECKING:
    from .conversion import ConversionConfig
    from .lazy import LazySurreal


class Surreal:
    """
    A finite surreal number { left | right }.

    Instances are immutable. `left` and `right` are tuples sorted in
    ascending order and unique by value. Equality is numeric equivalence,
    not structure: {-1 | 1} == { | }. Use `is_identical` for structure.
    """

    def __init__(
        self,
        left: Iterable[Surreal] = (),
        right: Iterable[Surreal] = (),
        simplify: bool = False
    ):
        left = tuple(left)
        right = tuple(right)

        # Must run before simplification drops any option
        for yr in right:
            for xl in left:
                if yr <= xl:
                    raise InvalidConstructionError(
                        f"Bad input sets: right option {yr} <= left option {xl}"
                    )

        if simplify:
            left = (ordering.greatest(left),) if left else ()
            right = (ordering.least(right),) if right else ()
        else:
            left = ordering.sorted_unique(left)
            right = ordering.sorted_unique(right)

        self._left: Tuple[Surreal, ...] = left
        self._right: Tuple[Surreal, ...] = right

        # Options are complete, so the day is known without recursing
        self._depth = 0
        for child in left + right:
            self._depth = max(self._depth, child.depth + 1)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Surreal:
        """{ | }"""
        return cls()

    @classmethod
    def between(cls, lower: Surreal, upper: Surreal) -> Surreal:
        """Create { lower | upper }; requires lower < upper."""
        if not lower < upper:
            raise InvalidConstructionError(
                f"Bad input numbers: {lower} is not less than {upper}"
            )
        return cls((lower,), (upper,))

    @classmethod
    def from_int(cls, n: int) -> Surreal:
        """Create integer n by nesting zero |n| times."""
        from .conversion import int_to_surreal
        return int_to_surreal(n)

    @classmethod
    def from_float(cls, x: float, config: Optional[ConversionConfig] = None) -> Surreal:
        """Create the dyadic number whose float value is x."""
        from .conversion import float_to_surreal
        return float_to_surreal(x, config)

    @classmethod
    def from_lazy(cls, lazy: LazySurreal) -> Surreal:
        """
        Convert a lazy number whose sides are all finite.

        Takes the last generated element of each side (the greatest left,
        the least right) and recurses. Raises InfiniteSetError if a side at
        any depth is infinite.
        """
        from .lazy import lazy_to_surreal
        return lazy_to_surreal(lazy)

    @classmethod
    def from_value(cls, value) -> Surreal:
        """Create a Surreal from a Surreal, LazySurreal, int or float."""
        from .lazy import LazySurreal

        if isinstance(value, Surreal):
            return value
        if isinstance(value, LazySurreal):
            return cls.from_lazy(value)
        if isinstance(value, bool):
            raise TypeError("bool is not a surreal number")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        raise TypeError(f"Cannot build a surreal number from {type(value).__name__}")

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def left(self) -> Tuple[Surreal, ...]:
        return self._left

    @property
    def right(self) -> Tuple[Surreal, ...]:
        return self._right

    @property
    def term_count(self) -> int:
        """Number of options; the size measure used for canonical forms."""
        return len(self._left) + len(self._right)

    @property
    def depth(self) -> int:
        """
        Day on which the number is born (for this representation).

        depth({ | }) = 0
        depth({ L | R }) = 1 + max depth over L and R
        """
        return self._depth

    @cached_property
    def value(self) -> Fraction:
        """Exact dyadic value (simplest number between the extremal options)."""
        from .conversion import exact_value
        return exact_value(self)

    def is_identical(self, other: Surreal) -> bool:
        """Structural equality: same options, recursively."""
        if self is other:
            return True
        if len(self._left) != len(other.left) or len(self._right) != len(other.right):
            return False
        pairs = zip(self._left + self._right, other.left + other.right)
        return all(a.is_identical(b) for a, b in pairs)

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce(other) -> Optional[Surreal]:
        if isinstance(other, Surreal):
            return other
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Surreal.from_value(other)
        return None

    @staticmethod
    def _comparable(other) -> Optional[Surreal]:
        # nan and the infinities have no finite surreal counterpart
        try:
            return Surreal._coerce(other)
        except SurrealError:
            return None

    def __le__(self, other) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return ordering.le(self, other)

    def __ge__(self, other) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return ordering.ge(self, other)

    def __lt__(self, other) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return ordering.lt(self, other)

    def __gt__(self, other) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return ordering.gt(self, other)

    def __eq__(self, other) -> bool:
        other = self._comparable(other)
        if other is None:
            return NotImplemented
        return self is other or ordering.eq(self, other)

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Equivalent numbers share their exact value, so they hash alike
        return hash(self.value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __neg__(self) -> Surreal:
        from .arithmetic import negate
        return negate(self)

    def __pos__(self) -> Surreal:
        return self

    def __add__(self, other) -> Surreal:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import get_arithmetic
        return get_arithmetic().add(self, other)

    def __radd__(self, other) -> Surreal:
        return self.__add__(other)

    def __sub__(self, other) -> Surreal:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import get_arithmetic
        return get_arithmetic().subtract(self, other)

    def __rsub__(self, other) -> Surreal:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import get_arithmetic
        return get_arithmetic().subtract(other, self)

    def __mul__(self, other) -> Surreal:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import get_arithmetic
        return get_arithmetic().multiply(self, other)

    def __rmul__(self, other) -> Surreal:
        return self.__mul__(other)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_float(self, config: Optional[ConversionConfig] = None) -> float:
        """Float value by the recursive midpoint rule."""
        from .conversion import to_float
        return to_float(self, config)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        from .formatting import format_hybrid
        return format_hybrid(self)

    def __repr__(self) -> str:
        return f"Surreal({self})"
