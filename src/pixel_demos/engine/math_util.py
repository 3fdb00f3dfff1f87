"""Integer helpers shared by the animation and scroll code."""

from __future__ import annotations

from pixel_demos.types import InvalidArgument


def repeat(value: int, modulus: int) -> int:
    """Wrap value into the range [0, modulus).

    Negative values wrap from the top, so repeat(-1, 8) is 7.

    Args:
        value: Index to wrap.
        modulus: Length of the cycle. Must be positive.

    Returns:
        The non-negative remainder of value modulo modulus.

    Raises:
        InvalidArgument: If modulus is zero or negative.
    """
    if modulus <= 0:
        raise InvalidArgument(f"modulus must be positive, got {modulus}")
    # % floors for ints, so the sign follows the modulus
    return value % modulus
