"""Error types for the animation core."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a caller breaks a precondition of a core operation.

    These are programming errors at the call site (a non-positive modulus,
    a negative delta time, an empty cell group), never recoverable runtime
    conditions.
    """
