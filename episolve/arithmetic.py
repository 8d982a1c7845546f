"""Digit reversal and fast exponentiation."""

from __future__ import annotations

_INT32_MAX = 2**31 - 1


def reverse_digits(x: int) -> int:
    """Return ``x`` with its decimal digits reversed, keeping the sign.

    Raises ValueError for zero and OverflowError when the result exceeds 32 bits.
    """
    if x == 0:
        raise ValueError("are you kidding me , want to reverse 0 ?")

    remaining = abs(x)
    result = 0
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        if result > (_INT32_MAX - digit) // 10:
            raise OverflowError("integer overflow during reversal")
        result = result * 10 + digit
    return -result if x < 0 else result


def power(x: float, y: int) -> float:
    """Raise ``x`` to the integer power ``y`` by repeated squaring.

    Raises ValueError for 0 ** 0 and ZeroDivisionError for zero to a negative power.
    """
    if x == 0:
        if y == 0:
            raise ValueError("hold up rasing 0 to zero ? drunk ?")
        if y < 0:
            raise ZeroDivisionError("raising zero to a negative value")
        return 0.0

    base = float(x)
    exponent = y
    if exponent < 0:
        exponent = -exponent
        base = 1.0 / base

    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        exponent >>= 1
        base *= base
    return result