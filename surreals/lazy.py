"""
Lazy (Possibly Infinite) Surreal Numbers

A LazySurreal holds its left and right sets as generating functions
instead of materialized tuples, which allows infinite sides:

- ω   = { 0, 1, 2, 3, ... | }
- -ω  = { | ..., -3, -2, -1, 0 }
- ε   = { 0 | ..., 1/8, 1/4, 1/2, 1 }

Each side has a signed size: a non-negative size is an exact count, a
negative size (INFINITE) means infinitely many elements. Generated
elements are memoized per instance.

Generators are trusted, not checked:
1. the left generator yields non-strictly ascending values
2. the right generator yields non-strictly descending values
3. every right value exceeds every left value

A LazySurreal whose sides are finite at every depth converts back to a
finite Surreal. `convert` reports failure as a Conversion value;
`to_surreal` raises it. There is no arithmetic on lazy numbers.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from .number import Surreal
from .errors import SurrealError, InvalidConstructionError, InfiniteSetError
from .conversion import ConversionConfig


_logger = logging.getLogger(__name__)

INFINITE = -1

Generator = Callable[[int], "LazySurreal"]
SideSource = Union[Generator, Sequence["LazySurreal"], None]


def _constant(value: LazySurreal) -> Generator:
    """Generator returning the same element for every index."""
    def generate(n: int) -> LazySurreal:
        return value
    return generate


class LazySide:
    """
    One side of a lazy number: generator, size and index -> value memo.

    `source` may be a callable `int -> LazySurreal`, a finite sequence of
    LazySurreal (its length is the default size) or None for an empty side.
    """

    def __init__(self, source: SideSource = None, size: Optional[int] = None):
        if source is None:
            self._generator: Optional[Generator] = None
            self.size = 0 if size is None else size
        elif callable(source):
            self._generator = source
            self.size = INFINITE if size is None else size
        else:
            items = tuple(source)
            self._generator = items.__getitem__
            self.size = len(items) if size is None else size
        self._cache: Dict[int, LazySurreal] = {}

    @property
    def is_infinite(self) -> bool:
        return self.size < 0

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def generated(self) -> int:
        """Number of elements materialized so far."""
        return len(self._cache)

    def get(self, n: int) -> LazySurreal:
        """Element n, generated on first access and memoized."""
        if n in self._cache:
            return self._cache[n]
        if self._generator is None:
            raise IndexError(f"Element {n} requested from an absent side")
        _logger.debug("generating element %d", n)
        result = self._generator(n)
        self._cache[n] = result
        return result


class LazySurreal:
    """A surreal number with lazily generated, possibly infinite sides."""

    def __init__(
        self,
        left: SideSource = None,
        right: SideSource = None,
        sizes: Optional[Tuple[int, int]] = None
    ):
        left_size, right_size = sizes if sizes is not None else (None, None)
        self.left = LazySide(left, left_size)
        self.right = LazySide(right, right_size)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_surreal(cls, number: Surreal) -> LazySurreal:
        """
        Wrap a finite number.

        Each non-empty side becomes a size-1 generator returning the
        extremal option (greatest left, least right), converted recursively.
        """
        left = None
        right = None
        if number.left:
            left = _constant(cls.from_surreal(number.left[-1]))
        if number.right:
            right = _constant(cls.from_surreal(number.right[0]))
        return cls(left, right, (int(left is not None), int(right is not None)))

    @classmethod
    def from_int(cls, n: int) -> LazySurreal:
        return cls.from_surreal(Surreal.from_int(n))

    @classmethod
    def from_float(cls, x: float, config: Optional[ConversionConfig] = None) -> LazySurreal:
        return cls.from_surreal(Surreal.from_float(x, config))

    @classmethod
    def from_value(cls, value) -> LazySurreal:
        if isinstance(value, LazySurreal):
            return value
        return cls.from_surreal(Surreal.from_value(value))

    @classmethod
    def omega(cls) -> LazySurreal:
        """ω = { 0, 1, 2, ... | }"""
        return cls(lambda n: cls.from_int(n), None, (INFINITE, 0))

    @classmethod
    def negative_omega(cls) -> LazySurreal:
        """-ω = { | ..., -2, -1, 0 }"""
        return cls(None, lambda n: cls.from_int(-n), (0, INFINITE))

    @classmethod
    def epsilon(cls) -> LazySurreal:
        """ε = { 0 | ..., 1/4, 1/2, 1 }, smaller than every positive dyadic."""
        return cls([cls()], lambda n: cls.from_float(2.0 ** -n), (1, INFINITE))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def left_size(self) -> int:
        return self.left.size

    @property
    def right_size(self) -> int:
        return self.right.size

    @property
    def is_finite(self) -> bool:
        """True if neither side is infinite at this level."""
        return not (self.left.is_infinite or self.right.is_infinite)

    def get_left(self, n: int) -> LazySurreal:
        return self.left.get(n)

    def get_right(self, n: int) -> LazySurreal:
        return self.right.get(n)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert(self) -> Conversion:
        """Finite form as a Conversion result, never raising."""
        return convert(self)

    def to_surreal(self) -> Surreal:
        """Finite form; raises InfiniteSetError for infinite sides."""
        return lazy_to_surreal(self)

    def to_float(self, config: Optional[ConversionConfig] = None) -> float:
        """Float value, or nan when the number has an infinite side."""
        result = convert(self)
        if isinstance(result.error, InfiniteSetError):
            _logger.debug("no float value: %s", result.error)
            return float("nan")
        return result.unwrap().to_float(config)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        from .formatting import format_lazy
        return format_lazy(self)

    def __repr__(self) -> str:
        return f"LazySurreal({self})"


@dataclass(frozen=True)
class Conversion:
    """
    Outcome of converting a lazy number to a finite one.

    Exactly one of `number` and `error` is set. The recursive conversion
    passes a failed Conversion straight back up instead of raising, and
    `unwrap` turns it into an exception at the public boundary.
    """
    number: Optional[Surreal] = None
    error: Optional[SurrealError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Surreal:
        if self.error is not None:
            raise self.error
        return self.number


def convert(lazy: LazySurreal) -> Conversion:
    """
    Convert a lazy number to a finite Surreal without raising.

    The last element of each side is its extremal one (greatest left,
    least right). The first infinite side reached by the recursion, or the
    first pair of sides violating the order, ends the conversion.
    """
    if lazy.left.is_infinite or lazy.right.is_infinite:
        return Conversion(error=InfiniteSetError(
            f"Infinite set encountered (sizes {lazy.left_size}, {lazy.right_size})"
        ))

    left = []
    right = []
    if lazy.left_size > 0:
        result = convert(lazy.get_left(lazy.left_size - 1))
        if not result.ok:
            return result
        left.append(result.number)
    if lazy.right_size > 0:
        result = convert(lazy.get_right(lazy.right_size - 1))
        if not result.ok:
            return result
        right.append(result.number)

    try:
        return Conversion(number=Surreal(left, right, simplify=True))
    except InvalidConstructionError as e:
        return Conversion(error=e)


def lazy_to_surreal(lazy: LazySurreal) -> Surreal:
    """Finite form of a lazy number; raises the error that stopped the conversion."""
    return convert(lazy).unwrap()


if __name__ == "__main__":
    print("=== Lazy Surreal Numbers ===\n")

    print(f"zero:   {LazySurreal()}")
    print(f"two:    {LazySurreal.from_int(2)}")
    print(f"omega:  {LazySurreal.omega()}")
    print(f"-omega: {LazySurreal.negative_omega()}")

    from .formatting import format_lazy
    print(f"epsilon (depth 1): {format_lazy(LazySurreal.epsilon(), 5, 1)}")

    print(f"\nfloat(omega) = {float(LazySurreal.omega())}")
    print(f"float(2.25)  = {float(LazySurreal.from_float(2.25))}")
