#!/usr/bin/env python3
"""
Surreals Complete Demo

Demonstrates all features of the surreals package:
1. Construction and the recursive ordering
2. Arithmetic through the canonical tables
3. Conversion between surreal and native numbers
4. Lazy infinite numbers (ω, -ω, ε)
5. Genesis: numbers born day by day
"""

import sys
sys.path.insert(0, '.')

import logging

print("""
╔══════════════════════════════════════════════════════════════════════════════╗
║                                                                              ║
║                       S U R R E A L   N U M B E R S                          ║
║                                                                              ║
║                 x = { L | R }   built from nothing, day by day               ║
║                                                                              ║
╚══════════════════════════════════════════════════════════════════════════════╝
""")

logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: CONSTRUCTION AND ORDERING
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 1: CONSTRUCTION AND ORDERING")
print("═" * 80)

from surreals import Surreal, InvalidConstructionError, format_verbose

print("""
Every surreal number is a pair of sets of earlier numbers. Day 0 has only
the empty pair { | }; everything else is built from it:
  0 = { | }    1 = { 0 | }    -1 = { | 0 }    1/2 = { 0 | 1 }
""")

zero = Surreal.zero()
one = Surreal.from_int(1)
minus_one = Surreal.from_int(-1)
half = Surreal.between(zero, one)

print("  Numbers and Their Verbose Forms:")
print("  " + "-" * 50)
for name, number in [("0", zero), ("1", one), ("-1", minus_one), ("1/2", half)]:
    print(f"  {name:6} = {format_verbose(number):30} (day {number.depth})")

print("\n  Equivalence is not identity:")
print("  " + "-" * 50)
other_zero = Surreal((minus_one,), (one,))
print(f"  {{-1 | 1}} == {{ | }}          : {other_zero == zero}")
print(f"  {{-1 | 1}} is_identical {{ | }} : {other_zero.is_identical(zero)}")

print("\n  Ordering (derived from a single recursive <=):")
print("  " + "-" * 50)
comparisons = [
    (minus_one, zero, "-1 < 0"),
    (zero, half, "0 < 1/2"),
    (half, one, "1/2 < 1"),
]
for a, b, desc in comparisons:
    result = "✓" if a < b else "✗"
    print(f"  {result} {desc}")

print("\n  Pseudo-numbers are rejected:")
try:
    Surreal((one,), (zero,))
except InvalidConstructionError as e:
    print(f"  {{1 | 0}} -> {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: ARITHMETIC
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 2: ARITHMETIC")
print("═" * 80)

from surreals import get_arithmetic

print("""
Sums and products are defined recursively on the options. Results are
memoized per operand pair and replaced by the simplest equivalent value
already seen, which keeps repeated arithmetic from blowing up.
""")

two = Surreal.from_int(2)
three = Surreal.from_int(3)
quarter = Surreal.from_float(0.25)

print("  Operations:")
print("  " + "-" * 50)
for desc, result in [
    ("2 + 3", two + three),
    ("2 - 3", two - three),
    ("2 * 3", two * three),
    ("1/2 * 1/2", half * half),
    ("1/4 + 1/2", quarter + half),
    ("-(1/2)", -half),
]:
    print(f"  {desc:12} = {float(result):8}   {result}")

print(f"\n  Tables: {get_arithmetic()}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: CONVERSION
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 3: CONVERSION")
print("═" * 80)

from surreals import ConversionConfig, float_values

print("""
Floats are built by bisection between floor and ceiling: every binary digit
after the point costs one more day.
""")

print("  Float Round Trips:")
print("  " + "-" * 50)
for x in [0.5, 0.375, -2.625, 0.1]:
    number = Surreal.from_float(x)
    print(f"  {x:8} -> day {number.depth:3}, back to {float(number)!r}, exact {number.value}")

single = Surreal.from_float(0.1, ConversionConfig.single())
print(f"\n  0.1 at 32 bits: day {single.depth}, value {single.to_float(ConversionConfig.single())!r}")

print(f"\n  As an array: {float_values([minus_one, zero, half, one, two])}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: LAZY INFINITE NUMBERS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 4: LAZY INFINITE NUMBERS")
print("═" * 80)

from surreals import LazySurreal, InfiniteSetError, format_lazy

print("""
Sides given as generators may be infinite. Only the terms that are printed
or converted are ever generated.
""")

omega = LazySurreal.omega()
print(f"  ω       = {omega}")
print(f"  -ω      = {LazySurreal.negative_omega()}")
print(f"  ε       = {LazySurreal.epsilon()}")
print(f"  ω (d=1) = {format_lazy(omega, 3, 1)}")
print(f"\n  float(ω) = {float(omega)}")
try:
    omega.to_surreal()
except InfiniteSetError as e:
    print(f"  ω.to_surreal() -> {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: GENESIS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 5: GENESIS")
print("═" * 80)

from surreals import genesis

for day, known in genesis(3):
    values = " ".join(f"{float(n):g}" for n in known)
    print(f"  Day {day}: {len(known):3} numbers   {values}")


print("\n" + "═" * 80)
print("  DEMO COMPLETE")
print("═" * 80 + "\n")
