"""Arithmetic and bit tricks built from shifts and masks alone."""

from __future__ import annotations

_UINT32_MAX = (1 << 32) - 1
_UINT64_MASK = (1 << 64) - 1


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value}")


def bitwise_divide(x: int, y: int) -> int:
    """Return ``x // y`` for unsigned 32-bit integers using shifts and subtraction.

    Raises ZeroDivisionError when ``y`` is zero.
    """
    _check_range("x", x, 32)
    _check_range("y", y, 32)
    if y == 0:
        raise ZeroDivisionError("Division by zero mate !")

    result = 0
    power = 32
    y_power = y << power
    while x >= y:
        while y_power > x:
            y_power >>= 1
            power -= 1
        if power >= 32:
            raise OverflowError("power overflow")
        result += 1 << power
        x -= y_power
    return result


def bitwise_add(a: int, b: int) -> int:
    """Add two unsigned 64-bit integers bit by bit, wrapping on overflow."""
    _check_range("a", a, 64)
    _check_range("b", b, 64)
    rest_a, rest_b = a, b
    carry_in, k, total = 0, 1, 0
    while rest_a or rest_b:
        ak = a & k
        bk = b & k
        carry_out = (ak & bk) | (ak & carry_in) | (bk & carry_in)
        total |= ak ^ bk ^ carry_in
        carry_in = (carry_out << 1) & _UINT64_MASK
        k = (k << 1) & _UINT64_MASK
        rest_a >>= 1
        rest_b >>= 1
    return total | carry_in


def bitwise_multiply(x: int, y: int) -> int:
    """Multiply two unsigned 64-bit integers with shifts and additions, wrapping on overflow."""
    _check_range("x", x, 64)
    _check_range("y", y, 64)
    total = 0
    while x:
        if x & 1:
            total = bitwise_add(total, y)
        x >>= 1
        y = (y << 1) & _UINT64_MASK
    return total


def reverse_bits(x: int) -> int:
    """Reverse the order of the 64 bits of an unsigned integer."""
    _check_range("x", x, 64)
    result = 0
    for i in range(64):
        result |= ((x >> i) & 1) << (63 - i)
    return result