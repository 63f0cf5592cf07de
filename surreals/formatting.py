"""
Text forms of surreal numbers.

Verbose form uses only brackets and separators:
    0 -> "{ | }",  1 -> "{ { | } | }",  -1 -> "{ | { | } }"

Hybrid form prints the outer levels as brackets and everything below the
cutoff depth as a float with six decimals:
    format_hybrid(1/2) -> "{ 0.000000 | 1.000000 }"

Lazy numbers additionally take a width: an infinite side prints `width`
generated terms and an ellipsis ("{ 0.000000 1.000000 ... | }").
"""

from __future__ import annotations
from typing import Callable, List

from .number import Surreal
from .lazy import LazySurreal


DEFAULT_WIDTH = 5
DEFAULT_DEPTH = 0


def _float_text(value: float) -> str:
    return f"{value:f}"


def _bracket(left: List[str], right: List[str]) -> str:
    parts = ["{"] + left + ["|"] + right + ["}"]
    return " ".join(parts)


def format_verbose(number: Surreal) -> str:
    """Fully expanded bracket form."""
    return _bracket(
        [format_verbose(x) for x in number.left],
        [format_verbose(x) for x in number.right],
    )


def format_hybrid(number: Surreal, depth: int = DEFAULT_DEPTH) -> str:
    """Bracket form down to `depth` levels, floats below."""
    def term(x: Surreal) -> str:
        if depth > 0:
            return format_hybrid(x, depth - 1)
        return _float_text(x.to_float())

    return _bracket([term(x) for x in number.left], [term(x) for x in number.right])


def _lazy_sides(number: LazySurreal, width: int, term: Callable[[LazySurreal], str]) -> str:
    left: List[str] = []
    if number.left_size > 0:
        left = [term(number.get_left(i)) for i in range(number.left_size)]
    elif number.left_size < 0 and width > 0:
        left = [term(number.get_left(i)) for i in range(width)] + ["..."]

    # Right side reads from the largest index down, so values ascend on the page
    right: List[str] = []
    if number.right_size > 0:
        right = [term(number.get_right(i)) for i in reversed(range(number.right_size))]
    elif number.right_size < 0 and width > 0:
        right = ["..."] + [term(number.get_right(i)) for i in reversed(range(width))]

    return _bracket(left, right)


def format_lazy(number: LazySurreal, width: int = DEFAULT_WIDTH, depth: int = DEFAULT_DEPTH) -> str:
    """Hybrid form of a lazy number, materializing at most `width` terms per infinite side."""
    def term(x: LazySurreal) -> str:
        if depth > 0:
            return format_lazy(x, width, depth - 1)
        return _float_text(x.to_float())

    return _lazy_sides(number, width, term)


def format_lazy_verbose(number: LazySurreal, width: int = DEFAULT_WIDTH) -> str:
    """Verbose form of a lazy number."""
    return _lazy_sides(number, width, lambda x: format_lazy_verbose(x, width))
