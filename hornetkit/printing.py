"""Text rendering of numbers, arrays, matrices and bit patterns."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import Any, TextIO


def format_number(num: float, precision: int = 2) -> str:
    """Return ``num`` with thousands separators.

    Floating-point values are rounded to two decimals (halves away from
    zero) and the fractional part is cut to ``precision`` digits.
    """
    if precision < 0:
        raise ValueError("precision must be non-negative")
    if isinstance(num, float):
        if not math.isfinite(num):
            return str(num)
        scaled = math.floor(abs(num) * 100 + 0.5) / 100
        text = f"{math.copysign(scaled, num):.6f}"
    else:
        text = str(int(num))
    sign = "-" if text.startswith("-") else ""
    integer, dot, fraction = text.lstrip("-").partition(".")
    grouped = f"{int(integer):,}"
    fraction = fraction[:precision] if dot else ""
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def format_array(values: Sequence[Any], title: str = "", sep: str = " ") -> str:
    """Return ``title`` followed by every value, each one trailed by ``sep``."""
    body = "".join(f"{value}{sep}" for value in values) if values else "<empty>"
    return f"{title}{body}\n\n"


def print_array(
    values: Sequence[Any],
    title: str = "",
    sep: str = " ",
    file: TextIO | None = None,
) -> None:
    """Write :func:`format_array` output to ``file`` (standard output by default)."""
    print(format_array(values, title, sep), end="", file=file or sys.stdout)


def format_matrix(
    matrix: Sequence[Any],
    rows: int,
    cols: int,
    ld: int | None = None,
    title: str = "",
    column_major: bool = False,
) -> str:
    """Return a flat matrix as right-aligned columns.

    ``ld`` is the leading dimension: the stride between rows (row-major) or
    columns (column-major). It defaults to the packed layout.
    """
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must be non-negative")
    if ld is None:
        ld = rows if column_major else cols
    if ld < (rows if column_major else cols):
        raise ValueError("leading dimension is smaller than the matrix")

    def at(i: int, j: int) -> Any:
        return matrix[j * ld + i] if column_major else matrix[i * ld + j]

    cells = [[str(at(i, j)) for j in range(cols)] for i in range(rows)]
    widths = [max((len(row[j]) for row in cells), default=0) for j in range(cols)]
    lines = [title + "\n"] if title else []
    for row in cells:
        lines.append(
            "".join(cell.rjust(width + 2) for cell, width in zip(row, widths)) + "\n"
        )
    lines.append("\n")
    return "".join(lines)


def print_matrix(
    matrix: Sequence[Any],
    rows: int,
    cols: int,
    ld: int | None = None,
    title: str = "",
    column_major: bool = False,
    file: TextIO | None = None,
) -> None:
    """Write :func:`format_matrix` output to ``file`` (standard output by default)."""
    text = format_matrix(matrix, rows, cols, ld, title, column_major)
    print(text, end="", file=file or sys.stdout)


def format_bits(value: int, width: int = 32) -> str:
    """Return the ``width`` low bits of ``value``, least significant first."""
    if width <= 0:
        raise ValueError("width must be positive")
    return "".join("1" if value >> i & 1 else "0" for i in range(width))


def format_bit_array(words: Sequence[int], size: int, word_bits: int = 32) -> str:
    """Return the first ``size`` bits of ``words``, one space-separated group per word.

    Bits within a word are listed least significant first.
    """
    if word_bits <= 0:
        raise ValueError("word_bits must be positive")
    if size < 0:
        raise ValueError("size must be non-negative")
    if size > len(words) * word_bits:
        raise IndexError("size exceeds the bits available in words")
    groups = []
    for start in range(0, size, word_bits):
        word = words[start // word_bits]
        count = min(word_bits, size - start)
        groups.append("".join("1" if word >> j & 1 else "0" for j in range(count)))
    return " ".join(groups)