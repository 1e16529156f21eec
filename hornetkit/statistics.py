"""Summary statistics over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _as_list(values: Iterable[float]) -> list[float]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values``."""
    items = _as_list(values)
    return sum(items) / len(items)


def std_deviation(values: Iterable[float]) -> float:
    """Return the population standard deviation of ``values``.

    Computed as ``sqrt(n * sum(x**2) - sum(x)**2) / n``.
    """
    items = _as_list(values)
    count = len(items)
    total = sum(items)
    total_sq = sum(x * x for x in items)
    spread = count * total_sq - total * total
    # Rounding can leave a tiny negative residue for constant float input.
    return math.sqrt(max(spread, 0)) / count


def gini_coefficient(values: Iterable[float]) -> float:
    """Return the Gini coefficient of ``values``, clamped to be non-negative.

    Zero denotes total equality; values close to one denote the dominance
    of a single item.
    """
    items = sorted(_as_list(values))
    size = len(items)
    total = sum(items)
    if total == 0:
        raise ValueError("the values must not sum to zero")
    weighted = sum(rank * x for rank, x in enumerate(items, start=1))
    result = (2 * weighted) / (size * total) - (size + 1) / size
    return max(result, 0.0)