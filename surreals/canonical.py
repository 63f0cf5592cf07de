"""
Canonical Result Tables

Recursive arithmetic keeps producing numbers that are equivalent but
structurally larger than ones already seen ({-1 | 1} instead of { | }).
A CanonicalTable memoizes results by operand pair and, on every miss,
scans its entries for an equivalent value with fewer options:

- raw result has MORE options than an equivalent entry: use the entry, stop
- raw result has FEWER options: overwrite the entry, keep scanning
- same number of options: use the entry, stop

The scan is linear in the table size. Tables only grow; nothing is evicted.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterator, Optional, Tuple

from .number import Surreal


_logger = logging.getLogger(__name__)

Key = Tuple[Surreal, Surreal]


class CanonicalTable:
    """Memo table from an unordered operand pair to its canonical result."""

    def __init__(self, name: str = "table"):
        self.name = name
        self._entries: Dict[Key, Surreal] = {}

    @staticmethod
    def key(a: Surreal, b: Surreal) -> Key:
        """Order-normalized key, so (a, b) and (b, a) share one entry."""
        if b < a:
            return (b, a)
        return (a, b)

    def lookup(self, a: Surreal, b: Surreal) -> Optional[Surreal]:
        """Cached result for the pair, or None."""
        return self._entries.get(self.key(a, b))

    def canonicalize(self, result: Surreal) -> Surreal:
        """Replace result by the simplest equivalent value in the table."""
        size = result.term_count
        for key, cached in self._entries.items():
            if result != cached:
                continue
            cached_size = cached.term_count
            if size < cached_size:
                # Earlier callers may already hold the larger representation
                _logger.debug(
                    "%s: replacing %d-term entry with %d-term equivalent",
                    self.name, cached_size, size,
                )
                self._entries[key] = result
                continue
            return cached
        return result

    def store(self, a: Surreal, b: Surreal, result: Surreal) -> Surreal:
        """Insert the result unless the pair already has one; return the stored value."""
        return self._entries.setdefault(self.key(a, b), result)

    def clear(self) -> None:
        self._entries.clear()

    def items(self) -> Iterator[Tuple[Key, Surreal]]:
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pair: Key) -> bool:
        return self.key(*pair) in self._entries

    def __repr__(self) -> str:
        return f"CanonicalTable({self.name!r}, {len(self)} entries)"
