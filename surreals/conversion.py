"""
Numeric Conversion for Finite Surreal Numbers

Every finite surreal number is a dyadic rational p / 2^k. This module
converts between surreal numbers and native numbers:

1. Integers: n is zero nested |n| times ({0|} = 1, {{0|}|} = 2, {|0} = -1)
2. Floats -> Surreal: bisection between floor and ceiling until the
   midpoint equals the input in the working precision
3. Surreal -> float: recursive midpoint rule over the extremal options
4. Surreal -> exact Fraction: the simplicity rule (simplest dyadic strictly
   between the greatest left and the least right option)

The working precision is a numpy floating type. The default is float64 so
that `float(Surreal.from_float(x)) == x` for every finite Python float; the
`single()` preset reproduces 32-bit behaviour.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterable, Optional, Type
import math

import numpy as np

from .number import Surreal
from .errors import InvalidConstructionError


@dataclass(frozen=True)
class ConversionConfig:
    """Floating-point settings for surreal <-> float conversion."""
    dtype: Type[np.floating] = np.float64

    @classmethod
    def single(cls) -> ConversionConfig:
        """32-bit floats."""
        return cls(dtype=np.float32)

    @classmethod
    def double(cls) -> ConversionConfig:
        """64-bit floats (default)."""
        return cls(dtype=np.float64)


DEFAULT_CONFIG = ConversionConfig()


def int_to_surreal(n: int) -> Surreal:
    """
    Build integer n.

    A positive integer N is born on day N and holds a single zero at depth
    N, always on the left. Negative integers nest on the right.
    """
    result = Surreal()
    if n > 0:
        for _ in range(n):
            result = Surreal((result,), ())
    elif n < 0:
        for _ in range(-n):
            result = Surreal((), (result,))
    return result


def float_to_surreal(x: float, config: Optional[ConversionConfig] = None) -> Surreal:
    """
    Build the dyadic surreal number whose float value is x.

    Integral inputs go through `int_to_surreal`. Otherwise the algorithm keeps
    three floats (floor, ceil, mid) and their surreal counterparts. While mid
    differs from x, mid replaces whichever bound lies on the wrong side of x
    and a new mid is built one day later between the remaining bound and the
    old mid. Each step adds one day to the result; the number of steps is
    bounded by the mantissa width of the working precision.
    """
    config = config or DEFAULT_CONFIG
    target = config.dtype(x)

    if not np.isfinite(target):
        raise InvalidConstructionError(f"Cannot build a finite surreal number from {x!r}")

    float_floor = np.floor(target)
    float_ceil = np.ceil(target)

    if float_floor == float_ceil:
        return int_to_surreal(int(float_floor))

    two = config.dtype(2)
    float_mid = (float_floor + float_ceil) / two
    sur_floor = int_to_surreal(int(float_floor))
    sur_ceil = int_to_surreal(int(float_ceil))
    sur_mid = Surreal((sur_floor,), (sur_ceil,))

    while float_mid != target:
        if target < float_mid:
            float_ceil = float_mid
            float_mid = (float_floor + float_ceil) / two
            sur_ceil = sur_mid
            sur_mid = Surreal((sur_floor,), (sur_ceil,))
        else:
            float_floor = float_mid
            float_mid = (float_floor + float_ceil) / two
            sur_floor = sur_mid
            sur_mid = Surreal((sur_floor,), (sur_ceil,))

    return sur_mid


def _float_value(number: Surreal, dtype: Type[np.floating], memo: Dict[int, np.floating]) -> np.floating:
    # Options are shared between numbers; memo is keyed by object identity
    key = id(number)
    if key in memo:
        return memo[key]

    lefts = [_float_value(child, dtype, memo) for child in number.left]
    rights = [_float_value(child, dtype, memo) for child in number.right]
    one = dtype(1)

    if not lefts:
        result = dtype(0) if not rights else min(rights) - one
    elif not rights:
        result = max(lefts) + one
    else:
        result = (max(lefts) + min(rights)) / dtype(2)

    memo[key] = result
    return result


def to_float(number: Surreal, config: Optional[ConversionConfig] = None) -> float:
    """
    Float value of a finite surreal number.

    { | }      -> 0
    { | R }    -> min(R) - 1
    { L | }    -> max(L) + 1
    { L | R }  -> (max(L) + min(R)) / 2
    """
    config = config or DEFAULT_CONFIG
    return float(_float_value(number, config.dtype, {}))


def float_values(numbers: Iterable[Surreal], config: Optional[ConversionConfig] = None) -> np.ndarray:
    """Float values of a collection of numbers as a 1-D array."""
    config = config or DEFAULT_CONFIG
    memo: Dict[int, np.floating] = {}
    return np.array([_float_value(n, config.dtype, memo) for n in numbers], dtype=config.dtype)


def simplest_between(lower: Optional[Fraction], upper: Optional[Fraction]) -> Fraction:
    """
    Simplest dyadic rational strictly inside (lower, upper).

    None stands for an unbounded side. "Simplest" means earliest born: an
    integer of least magnitude if the interval holds one, otherwise the
    dyadic with the smallest denominator.
    """
    if lower is not None and upper is not None and not lower < upper:
        raise InvalidConstructionError(f"Empty interval ({lower}, {upper})")

    # Zero, then integers moving outward
    if (lower is None or lower < 0) and (upper is None or upper > 0):
        return Fraction(0)
    if lower is not None and lower >= 0:
        candidate = Fraction(math.floor(lower) + 1)
        if upper is None or candidate < upper:
            return candidate
    if upper is not None and upper <= 0:
        candidate = Fraction(math.ceil(upper) - 1)
        if lower is None or candidate > lower:
            return candidate

    # Both bounds lie within one unit interval
    denominator = 2
    while True:
        numerator = math.floor(lower * denominator) + 1
        candidate = Fraction(numerator, denominator)
        if candidate < upper:
            return candidate
        denominator *= 2


def exact_value(number: Surreal) -> Fraction:
    """Exact dyadic value of a finite surreal number."""
    lower = number.left[-1].value if number.left else None
    upper = number.right[0].value if number.right else None
    return simplest_between(lower, upper)
