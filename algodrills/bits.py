"""Bit manipulation and number-base exercises on integers."""

from __future__ import annotations

from math import prod

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT_BITS = 32
_INT32_MASK = (1 << INT_BITS) - 1


def _require_int32(n: int) -> None:
    if not INT32_MIN <= n <= INT32_MAX:
        raise ValueError(f"{n} does not fit in a 32-bit signed integer")


def _complement(n: int) -> int:
    if n < 0:
        raise ValueError("complement is defined for non-negative integers only")
    if n == 0:
        return 1
    mask = (1 << n.bit_length()) - 1
    return ~n & mask


def bitwise_complement(n: int) -> int:
    """Flip every bit of n up to its highest set bit; the complement of 0 is 1."""
    return _complement(n)


def find_complement(num: int) -> int:
    """Flip every bit of num up to its highest set bit; the complement of 0 is 1."""
    return _complement(num)


def hamming_weight(n: int) -> int:
    """Count the set bits in the 32-bit two's complement form of n."""
    _require_int32(n)
    return (n & _INT32_MASK).bit_count()


def is_power_of_two(n: int) -> bool:
    """Tell whether n is a positive integer with exactly one set bit."""
    return n > 0 and n & (n - 1) == 0


def to_base7(num: int) -> str:
    """Return the base-7 representation of num, with a leading '-' if negative."""
    if num == 0:
        return "0"
    digits: list[str] = []
    remaining = abs(num)
    while remaining:
        remaining, digit = divmod(remaining, 7)
        digits.append(str(digit))
    text = "".join(reversed(digits))
    return f"-{text}" if num < 0 else text


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign.

    Returns 0 when the result does not fit in a 32-bit signed integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def _signed_digits(n: int) -> list[int]:
    sign = -1 if n < 0 else 1
    return [sign * int(ch) for ch in str(abs(n))] if n else []


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of n minus their sum.

    Digits of a negative number carry its sign; 0 has no digits, so gives 1.
    """
    digits = _signed_digits(n)
    return prod(digits) - sum(digits)


def decimal_to_binary(n: int) -> str:
    """Return the 32-character two's complement binary string of n."""
    _require_int32(n)
    return format(n & _INT32_MASK, f"0{INT_BITS}b")


def binary_to_decimal(bits: str) -> int:
    """Read a binary string as an unsigned number; any character but '1' counts as 0."""
    value = 0
    for ch in bits:
        value = value * 2 + (ch == "1")
    return value


def even_odd(n: int) -> str:
    """Return "Even" or "Odd" by looking at the least significant bit of n."""
    lsb = n & 1
    if lsb == 0:
        return "Even"
    return "Odd"