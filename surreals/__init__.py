"""
Surreals: Conway's surreal numbers, constructed and computed recursively

A surreal number is a pair of sets of earlier surreal numbers { L | R }.
Starting from { | } = 0 this generates the integers, the dyadic rationals
and, with infinite sets, transfinite and infinitesimal quantities.

This package provides:
- Surreal: finite numbers with validated construction, ordering and arithmetic
- SurrealArithmetic: the memo tables that keep arithmetic results canonical
- ConversionConfig: float precision for surreal <-> float conversion
- LazySurreal: numbers with generated, possibly infinite, left/right sets
- Genesis: day-by-day generation of all numbers reachable from 0

Example usage:
    from surreals import Surreal, LazySurreal, format_verbose

    two = Surreal.from_int(2)
    half = Surreal.from_float(0.5)
    print(two * half == 1)           # True
    print(float(two + half))         # 2.5
    print(format_verbose(Surreal.from_int(1)))   # { { | } | }

    omega = LazySurreal.omega()
    print(omega)   # { 0.000000 1.000000 2.000000 3.000000 4.000000 ... | }
"""

__version__ = "0.1.0"

from .errors import (
    SurrealError,
    InvalidConstructionError,
    InfiniteSetError,
)

from .number import Surreal

from .ordering import (
    le,
    compare,
    sorted_unique,
)

from .canonical import CanonicalTable

from .arithmetic import (
    SurrealArithmetic,
    get_arithmetic,
    set_arithmetic,
    reset_arithmetic,
)

from .conversion import (
    ConversionConfig,
    simplest_between,
    float_values,
)

from .lazy import (
    LazySurreal,
    LazySide,
    Conversion,
    INFINITE,
)

from .formatting import (
    format_verbose,
    format_hybrid,
    format_lazy,
    format_lazy_verbose,
)

from .genesis import (
    GenesisMode,
    genesis,
    next_day,
    numbers_born_by,
)

__all__ = [
    # Errors
    "SurrealError",
    "InvalidConstructionError",
    "InfiniteSetError",
    # Finite numbers
    "Surreal",
    "le",
    "compare",
    "sorted_unique",
    # Arithmetic
    "CanonicalTable",
    "SurrealArithmetic",
    "get_arithmetic",
    "set_arithmetic",
    "reset_arithmetic",
    # Conversion
    "ConversionConfig",
    "simplest_between",
    "float_values",
    # Lazy numbers
    "LazySurreal",
    "LazySide",
    "Conversion",
    "INFINITE",
    # Display
    "format_verbose",
    "format_hybrid",
    "format_lazy",
    "format_lazy_verbose",
    # Genesis
    "GenesisMode",
    "genesis",
    "next_day",
    "numbers_born_by",
]
