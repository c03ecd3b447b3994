"""
Numeric helpers: tolerance comparison, wrap-around modulus and power-of-two rounding.

These are the small scalar building blocks used by the rest of the package and
by callers that index into circular buffers or size power-of-two tables.
"""

import math

from sequtils.utils.errors import InvalidArgumentError


def almost_equals(a: float, b: float, tolerance: float) -> bool:
    """
    Compare two numbers with an absolute tolerance.

    **Conceptual**: Floating point arithmetic rarely produces bit-exact results,
    so "equal" usually means "close enough". This answers "does b fall within
    tolerance of a?".

    **Mathematical**:
        a - tolerance <= b <= a + tolerance
    i.e. b lies in the closed interval [a - tolerance, a + tolerance].

    **Edge cases**:
    - tolerance = 0 reduces to exact equality.
    - A negative tolerance is not rejected; the interval is then empty and the
      result is always False.

    Args:
        a: Reference value.
        b: Value being compared.
        tolerance: Allowed absolute distance (expected to be non-negative).

    Returns:
        True iff b is in [a - tolerance, a + tolerance].
    """
    return a - tolerance <= b <= a + tolerance


def wrap_mod(a: float, b: float) -> float:
    """
    Compute a "wrap around" modulus that is never negative.

    **Conceptual**: Useful for indexing circular structures: stepping backwards
    from index 0 of a length-5 array should land on index 4, not -1.

    **Mathematical**:
        ((a mod b) + b) mod b
    The result is always in [0, b) regardless of the sign of a.

    **Edge cases**:
    - b <= 0 has no [0, b) interval and raises InvalidArgumentError instead of
      failing inside the arithmetic.

    Args:
        a: Dividend (any sign).
        b: Modulus, must be positive.

    Returns:
        Value in [0, b).

    Raises:
        InvalidArgumentError: If b <= 0.
    """
    if b <= 0:
        raise InvalidArgumentError(f"wrap_mod requires a positive modulus, got b={b}")
    return ((a % b) + b) % b


def next_power_of_two(x: float) -> int:
    """
    Round x up to the next power of two.

    Returns the smallest power of two that is >= x, found by doubling from 1.
    Non-positive inputs return 1 (the smallest power of two), so
    next_power_of_two(0) == 1. Infinite and NaN inputs have no power of two
    and raise InvalidArgumentError.

    Examples:
        >>> next_power_of_two(5)
        8
        >>> next_power_of_two(16)
        16
    """
    # ints are always finite; math.isfinite would overflow converting huge ones
    if isinstance(x, float) and not math.isfinite(x):
        raise InvalidArgumentError(f"next_power_of_two requires a finite number, got {x}")
    result = 1
    # Doubling scan; also handles non-integer x such as 2.5 -> 4
    while result < x:
        result <<= 1
    return result
