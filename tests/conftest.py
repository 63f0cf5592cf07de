"""
Shared fixtures for the surreal number tests.
"""

import pytest

from surreals import Surreal, SurrealArithmetic, set_arithmetic


@pytest.fixture
def arithmetic():
    """A fresh arithmetic context installed for the duration of one test."""
    context = SurrealArithmetic()
    previous = set_arithmetic(context)
    yield context
    set_arithmetic(previous)


@pytest.fixture
def ints():
    """Integers -3..3 as surreal numbers, keyed by value."""
    return {n: Surreal.from_int(n) for n in range(-3, 4)}
