"""
Ordering Relation for Surreal Numbers

Every comparison is derived from a single recursive predicate:

    a <= b  unless  some left option xl of a has b <= xl,
            or      some right option yr of b has yr <= a

The recursion always descends into options, which are born on earlier days,
so it terminates. The derived relations are:
- a >= b  :=  b <= a
- a == b  :=  a <= b and b <= a
- a < b   :=  not (b <= a)
- a > b   :=  not (a <= b)

The functions only read `.left` and `.right`, so they work on any object
shaped like a finite surreal number.

One comparison revisits the same pair of options many times, and numbers
built by bisection or arithmetic share option objects, so results are
memoized by object identity for the duration of a single top-level call.
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import Dict, Iterable, Tuple, Optional, TypeVar


T = TypeVar('T')

Memo = Dict[Tuple[int, int], bool]


def _le(a, b, memo: Memo) -> bool:
    key = (id(a), id(b))
    if key in memo:
        return memo[key]
    result = True
    for xl in a.left:
        if _le(b, xl, memo):
            result = False
            break
    if result:
        for yr in b.right:
            if _le(yr, a, memo):
                result = False
                break
    memo[key] = result
    return result


def le(a, b) -> bool:
    """Recursive less-than-or-equal."""
    return _le(a, b, {})


def ge(a, b) -> bool:
    return le(b, a)


def eq(a, b) -> bool:
    memo: Memo = {}
    return _le(a, b, memo) and _le(b, a, memo)


def ne(a, b) -> bool:
    return not eq(a, b)


def lt(a, b) -> bool:
    return not le(b, a)


def gt(a, b) -> bool:
    return not le(a, b)


def compare(a, b) -> int:
    """Three-way comparison: -1 if a < b, 0 if equivalent, 1 if a > b."""
    memo: Memo = {}
    if not _le(b, a, memo):
        return -1
    if not _le(a, b, memo):
        return 1
    return 0


def sorted_unique(items: Iterable[T]) -> Tuple[T, ...]:
    """
    Sort numbers ascending and drop equivalent duplicates.

    Of several equivalent numbers the first one supplied is kept, so the
    representation that was inserted first survives.
    """
    ordered = sorted(items, key=cmp_to_key(compare))
    unique = []
    for item in ordered:
        if unique and compare(unique[-1], item) == 0:
            continue
        unique.append(item)
    return tuple(unique)


def greatest(items: Iterable[T]) -> Optional[T]:
    """Greatest element, or None for an empty collection."""
    best = None
    for item in items:
        if best is None or lt(best, item):
            best = item
    return best


def least(items: Iterable[T]) -> Optional[T]:
    """Least element, or None for an empty collection."""
    best = None
    for item in items:
        if best is None or lt(item, best):
            best = item
    return best
