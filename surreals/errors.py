"""
Error types raised by the surreal number engine.

Neither error is retried:
- InvalidConstructionError: a right option is <= a left option (pseudo-number),
  or a {a | b} pair with a not strictly less than b
- InfiniteSetError: a lazy number with an infinite side was asked to become
  finite; carried in a Conversion result until unwrapped
"""


class SurrealError(ValueError):
    """Base class for surreal number errors."""


class InvalidConstructionError(SurrealError):
    """Attempt to build an ill-formed number."""


class InfiniteSetError(SurrealError):
    """An infinite left or right set was met while converting to a finite number."""
