"""
Genesis: generating surreal numbers day by day

Day 0 knows only { | }. Each following day builds new numbers from the
ones already known:

SIMPLE mode
- { A | } and { | A } for every known A
- { A | B } for every known pair A < B

FULL mode, additionally
- -A for every known A
- A + B and A * B for every known pair A < B

In SIMPLE mode the known set after day d holds 2^(d+1) - 1 numbers:
1, 3, 7, 15, ... FULL mode goes through the canonical tables and gets
expensive quickly past day 3.
"""

from __future__ import annotations
import logging
from enum import IntEnum
from typing import Iterator, Sequence, Tuple

from .number import Surreal
from . import ordering


_logger = logging.getLogger(__name__)


class GenesisMode(IntEnum):
    """Which constructions are tried each day."""
    SIMPLE = 0
    FULL = 1


def next_day(known: Sequence[Surreal], mode: GenesisMode = GenesisMode.SIMPLE) -> Tuple[Surreal, ...]:
    """Known numbers after one more day of construction."""
    known = ordering.sorted_unique(known)
    found = list(known)

    for a in known:
        found.append(Surreal((a,), (), simplify=True))
        found.append(Surreal((), (a,), simplify=True))
        if mode == GenesisMode.FULL:
            found.append(-a)

    # sorted_unique leaves every pair with a < b
    for i, a in enumerate(known):
        for b in known[i + 1:]:
            found.append(Surreal.between(a, b))
            if mode == GenesisMode.FULL:
                found.append(a * b)
                found.append(a + b)

    return ordering.sorted_unique(found)


def genesis(days: int, mode: GenesisMode = GenesisMode.SIMPLE) -> Iterator[Tuple[int, Tuple[Surreal, ...]]]:
    """Yield (day, known numbers) for day 0 through `days`."""
    known: Tuple[Surreal, ...] = (Surreal.zero(),)
    yield 0, known
    for day in range(1, days + 1):
        known = next_day(known, mode)
        _logger.info("day %d: %d known numbers", day, len(known))
        yield day, known


def numbers_born_by(day: int, mode: GenesisMode = GenesisMode.SIMPLE) -> Tuple[Surreal, ...]:
    """Every number constructed by the end of `day`."""
    *_, (_, known) = genesis(day, mode)
    return known


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    for day, known in genesis(3):
        print(f"Day {day}: {len(known)} numbers")
        for number in known:
            print(f"   {float(number):>8}  = {number}")
