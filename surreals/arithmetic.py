"""
Surreal Arithmetic

Negation, addition and multiplication are defined recursively on options:

    -x    = { -xR | -xL }
    x + y = { xL + y, x + yL | xR + y, x + yR }
    x * y = { xL*y + x*yL - xL*yL,  xR*y + x*yR - xR*yR
            | xL*y + x*yR - xL*yR,  xR*y + x*yL - xR*yL }

Every recursive call is on operands born on earlier days. Without
memoization the work is exponential in depth, so addition and
multiplication go through a CanonicalTable each: lookup, compute,
canonicalize against the table, store.

A process-wide SurrealArithmetic instance backs the Surreal operators.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .number import Surreal
from .canonical import CanonicalTable


_logger = logging.getLogger(__name__)


def negate(number: Surreal) -> Surreal:
    """Swap and negate the sides; no table needed."""
    return Surreal(
        [negate(xr) for xr in number.right],
        [negate(xl) for xl in number.left],
    )


class SurrealArithmetic:
    """
    Arithmetic context owning the addition and multiplication tables.

    The tables grow for the lifetime of the context. Access is not
    synchronized: a context must not be shared between threads.
    """

    def __init__(self):
        self.additions = CanonicalTable("addition")
        self.multiplications = CanonicalTable("multiplication")

    def clear(self) -> None:
        """Drop every memoized result."""
        self.additions.clear()
        self.multiplications.clear()

    # ------------------------------------------------------------------
    # Operations on numbers
    # ------------------------------------------------------------------

    def add(self, a: Surreal, b: Surreal) -> Surreal:
        """x + y = { xL + y, x + yL | xR + y, x + yR }"""
        cached = self.additions.lookup(a, b)
        if cached is not None:
            return cached

        _logger.debug("addition miss (%d entries)", len(self.additions))

        left = self._add_each(a.left, b) + self._add_each(b.left, a)
        right = self._add_each(a.right, b) + self._add_each(b.right, a)

        result = self.additions.canonicalize(Surreal(left, right))
        return self.additions.store(a, b, result)

    def subtract(self, a: Surreal, b: Surreal) -> Surreal:
        return self.add(a, negate(b))

    def multiply(self, a: Surreal, b: Surreal) -> Surreal:
        """
        x * y over matched option pairs:

        left  = xL*y + x*yL - xL*yL  and  xR*y + x*yR - xR*yR
        right = xL*y + x*yR - xL*yR  and  xR*y + x*yL - xR*yL
        """
        cached = self.multiplications.lookup(a, b)
        if cached is not None:
            return cached

        _logger.debug("multiplication miss (%d entries)", len(self.multiplications))

        left = (self._product_terms(a.left, b.left, a, b) +
                self._product_terms(a.right, b.right, a, b))
        right = (self._product_terms(a.left, b.right, a, b) +
                 self._product_terms(a.right, b.left, a, b))

        result = self.multiplications.canonicalize(Surreal(left, right))
        return self.multiplications.store(a, b, result)

    # ------------------------------------------------------------------
    # Operations on option sets
    # ------------------------------------------------------------------

    def _add_each(self, options: Iterable[Surreal], number: Surreal) -> List[Surreal]:
        """{ x + number : x in options }"""
        return [self.add(x, number) for x in options]

    def _product_terms(
        self,
        a_options: Iterable[Surreal],
        b_options: Iterable[Surreal],
        a: Surreal,
        b: Surreal
    ) -> List[Surreal]:
        """{ xa*b + a*xb - xa*xb : xa in a_options, xb in b_options }"""
        terms = []
        for xa in a_options:
            xa_b = self.multiply(xa, b)
            for xb in b_options:
                a_xb = self.multiply(a, xb)
                both = negate(self.multiply(xa, xb))
                terms.append(self.add(self.add(xa_b, a_xb), both))
        return terms

    def __repr__(self) -> str:
        return (f"SurrealArithmetic(additions={len(self.additions)}, "
                f"multiplications={len(self.multiplications)})")


_default: Optional[SurrealArithmetic] = None


def get_arithmetic() -> SurrealArithmetic:
    """The process-wide arithmetic context, created on first use."""
    global _default
    if _default is None:
        _default = SurrealArithmetic()
    return _default


def set_arithmetic(context: SurrealArithmetic) -> SurrealArithmetic:
    """Install a context for the Surreal operators; returns the previous one."""
    global _default
    previous = get_arithmetic()
    _default = context
    return previous


def reset_arithmetic() -> None:
    """Clear the tables of the process-wide context."""
    get_arithmetic().clear()


def add(a: Surreal, b: Surreal) -> Surreal:
    return get_arithmetic().add(a, b)


def subtract(a: Surreal, b: Surreal) -> Surreal:
    return get_arithmetic().subtract(a, b)


def multiply(a: Surreal, b: Surreal) -> Surreal:
    return get_arithmetic().multiply(a, b)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    print("=== Surreal Arithmetic ===\n")

    two = Surreal.from_int(2)
    three = Surreal.from_int(3)
    half = Surreal.from_float(0.5)

    print(f"2 + 3   = {float(two + three)}   {two + three}")
    print(f"2 * 3   = {float(two * three)}   {two * three}")
    print(f"1/2 * 1/2 = {float(half * half)}   {half * half}")
    print(f"2 - 3   = {float(two - three)}   {two - three}")

    context = get_arithmetic()
    print(f"\nTables: {context}")
    for (a, b), result in context.multiplications.items():
        print(f"   {float(a)} * {float(b)} = {result}")
