"""Integer helpers: rounding divisions, logarithms, sequences and small predicates."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import accumulate

_DIGITS = frozenset("0123456789")


def _check_divisor(div: int) -> None:
    if div == 0:
        raise ZeroDivisionError("division by zero in integer arithmetic")


def ceil_div(n: int, div: int) -> int:
    """Return ``n / div`` rounded up, for non-negative ``n``."""
    _check_divisor(div)
    return 0 if n == 0 else 1 + (n - 1) // div


def round_div(n: int, div: int) -> int:
    """Return ``n / div`` rounded to the nearest integer (halves round up)."""
    _check_divisor(div)
    return (n + div // 2) // div


def lower_approx(n: int, mul: int) -> int:
    """Return the largest multiple of ``mul`` not greater than ``n``."""
    _check_divisor(mul)
    return (n // mul) * mul


def upper_approx(n: int, mul: int) -> int:
    """Return the smallest multiple of ``mul`` not less than ``n``."""
    return ceil_div(n, mul) * mul


def power(n: int, exp: int) -> int:
    """Return ``n`` raised to the non-negative integer ``exp``."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return n**exp


def _check_log_args(n: int, base: int) -> None:
    if n <= 0:
        raise ValueError("logarithm argument must be positive")
    if base < 2:
        raise ValueError("logarithm base must be at least 2")


def log_floor(n: int, base: int) -> int:
    """Return the floor of the base-``base`` logarithm of ``n``."""
    _check_log_args(n, base)
    result = 0
    while n >= base:
        n = max(1, n // base)
        result += 1
    return result


def log2_floor(n: int) -> int:
    """Return the floor of the base-2 logarithm of ``n``."""
    return log_floor(n, 2)


def roundup_pow2(n: int) -> int:
    """Return the smallest power of two not less than ``n``."""
    if n < 0:
        raise ValueError("argument must be non-negative")
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def ceil_log2(n: int) -> int:
    """Return the ceiling of the base-2 logarithm of ``n``."""
    return log2_floor(roundup_pow2(n))


def ceil_log(n: int, base: int) -> int:
    """Return the ceiling of the base-``base`` logarithm of ``n``."""
    floor_log = log_floor(n, base)
    return floor_log if base**floor_log == n else floor_log + 1


def product_sequence(low: int, high: int) -> int:
    """Return the product ``low * (low + 1) * ... * high``."""
    if low > high:
        raise ValueError("low must not exceed high")
    return math.prod(range(low, high + 1))


def binomial_coeff(n: int, k: int) -> int:
    """Return the binomial coefficient ``C(n, k)``."""
    if n < 0 or k < 0 or k > n:
        raise ValueError("binomial coefficient requires 0 <= k <= n")
    smaller, larger = min(k, n - k), max(k, n - k)
    if smaller == 0:
        return 1
    return product_sequence(larger + 1, n) // math.factorial(smaller)


def geometric_serie(n: int, high: int) -> int:
    """Return ``n**0 + n**1 + ... + n**high``."""
    if n == 1:
        raise ValueError("geometric series ratio must differ from 1")
    if high < 0:
        raise ValueError("upper index must be non-negative")
    return (n ** (high + 1) - 1) // (n - 1)


def inclusive_prefix_sum(values: Iterable[int]) -> list[int]:
    """Return the running sums of ``values``."""
    return list(accumulate(values))


def exclusive_prefix_sum(values: Iterable[int]) -> list[int]:
    """Return the running sums of ``values`` preceded by zero.

    The result has one more item than the input; its last item is the total.
    """
    return list(accumulate(values, initial=0))


def is_vectorizable(*args: int) -> bool:
    """Tell whether fields of the given byte sizes fit one vector load.

    All sizes must be equal, sum to at most 16 bytes, and be at most four.
    """
    if not args:
        raise ValueError("at least one size is required")
    return len(set(args)) == 1 and sum(args) <= 16 and len(args) <= 4


def is_integer(text: str) -> bool:
    """Tell whether ``text`` is made of decimal digits only."""
    return set(text) <= _DIGITS


def is_aligned(address: int, byte_size: int) -> bool:
    """Tell whether ``address`` is a multiple of ``byte_size``."""
    _check_divisor(byte_size)
    return address % byte_size == 0