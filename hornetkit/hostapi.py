"""Host-side array primitives: filling, copying, random fill, scans and comparison."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any, TypeVar

from hornetkit.numeric import exclusive_prefix_sum

T = TypeVar("T")

_INT32_MAX = 2**31 - 1


def _check_count(num_items: int) -> None:
    if num_items < 0:
        raise ValueError("num_items must be non-negative")


def zeros(num_items: int = 1) -> list[int]:
    """Return ``num_items`` integers with every byte cleared."""
    _check_count(num_items)
    return [0] * num_items


def ones(num_items: int = 1) -> list[int]:
    """Return ``num_items`` signed integers with every byte set to 0xFF.

    A signed integer whose bytes are all 0xFF reads as -1.
    """
    _check_count(num_items)
    return [-1] * num_items


def copy_array(values: Sequence[T], num_items: int | None = None) -> list[T]:
    """Return a copy of the first ``num_items`` items of ``values`` (all by default)."""
    if num_items is None:
        return list(values)
    _check_count(num_items)
    if num_items > len(values):
        raise IndexError(
            f"cannot copy {num_items} items from a sequence of {len(values)}"
        )
    return list(values[:num_items])


def generate_randoms(
    num_items: int = 1,
    low: int = 0,
    high: int = _INT32_MAX,
    seed: int | None = None,
) -> list[int]:
    """Return ``num_items`` integers drawn uniformly from ``[low, high]``.

    Without a ``seed`` the generator is seeded from the current time.
    """
    _check_count(num_items)
    if low > high:
        raise ValueError("low must not exceed high")
    rng = random.Random(time.time_ns() if seed is None else seed)
    return [rng.randint(low, high) for _ in range(num_items)]


def excl_prefixsum(values: Iterable[int]) -> list[int]:
    """Return the exclusive prefix sum: same length as ``values``, starting at zero."""
    return exclusive_prefix_sum(values)[:-1]


def reduce(values: Iterable[Any]) -> Any:
    """Return the sum of ``values`` (zero when empty)."""
    return sum(values)


def equal(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """Tell whether ``first`` matches the leading items of ``second``.

    ``second`` must hold at least as many items as ``first``; if it is
    shorter the ranges are not equal.
    """
    expected = list(first)
    leading = list(islice(second, len(expected)))
    return leading == expected