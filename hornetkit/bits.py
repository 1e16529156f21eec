"""Bit-packed boolean matrices and dense row-addressed matrices."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator, MutableSequence
from typing import Any

from hornetkit.numeric import ceil_div, ceil_log2

_WORD_BITS = 32


class BitRef:
    """A reference to one bit inside a list of 32-bit words."""

    __slots__ = ("_words", "_index", "_mask")

    def __init__(self, words: MutableSequence[int], index: int, mask: int) -> None:
        self._words = words
        self._index = index
        self._mask = mask

    def set(self, value: bool) -> BitRef:
        """Set or clear the referenced bit and return this reference."""
        if value:
            self._words[self._index] |= self._mask
        else:
            self._words[self._index] &= ~self._mask
        return self

    def __bool__(self) -> bool:
        return bool(self._words[self._index] & self._mask)

    def __repr__(self) -> str:
        return f"BitRef({bool(self)})"


class BitRow:
    """A view of one row of a bit-packed matrix, starting at word ``offset``."""

    __slots__ = ("_words", "_offset")

    def __init__(self, words: MutableSequence[int], offset: int) -> None:
        self._words = words
        self._offset = offset

    def _ref(self, index: int) -> BitRef:
        if index < 0:
            raise IndexError("bit index must be non-negative")
        word_index = self._offset + index // _WORD_BITS
        if word_index >= len(self._words):
            raise IndexError("bit index out of range")
        return BitRef(self._words, word_index, 1 << (index % _WORD_BITS))

    def __getitem__(self, index: int) -> BitRef:
        return self._ref(index)

    def __setitem__(self, index: int, value: bool) -> None:
        self._ref(index).set(value)


class BitMatrix:
    """A boolean matrix packing each row into 32-bit words.

    Every row occupies a power-of-two number of words.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        self._shift = ceil_log2(ceil_div(cols, _WORD_BITS))
        self._words = [0] * (rows << self._shift)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _check_row(self, row_index: int) -> None:
        if not 0 <= row_index < self._rows:
            raise IndexError(f"row index {row_index} out of range")

    def __getitem__(self, row_index: int) -> BitRow:
        self._check_row(row_index)
        return BitRow(self._words, row_index << self._shift)

    def reset(self) -> None:
        """Clear every bit."""
        self._words[:] = [0] * len(self._words)

    def row_reset(self, row_index: int) -> None:
        """Clear every bit of one row."""
        self._check_row(row_index)
        start = row_index << self._shift
        end = (row_index + 1) << self._shift
        self._words[start:end] = [0] * (end - start)

    def nnz(self) -> int:
        """Return the number of set bits."""
        return sum(word.bit_count() for word in self._words)

    def copy(self) -> BitMatrix:
        """Return an independent copy of the matrix."""
        result = BitMatrix.__new__(BitMatrix)
        result._rows = self._rows
        result._cols = self._cols
        result._shift = self._shift
        result._words = list(self._words)
        return result

    def render(self, title: str = "") -> str:
        """Return the matrix as text: a header, rows of 0/1 and the set-bit count."""
        lines = [f"{title}  ({self._rows} x {self._cols})\n\n"]
        count = 0
        for i in range(self._rows):
            row = self[i]
            bits = [bool(row[j]) for j in range(self._cols)]
            count += sum(bits)
            lines.append("".join(f"{int(bit)} " for bit in bits) + "\n")
        lines.append(f"\nnnz: {count}\n\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()


class Matrix:
    """A dense row-addressed matrix; indexing yields a mutable row."""

    def __init__(self, rows: int, cols: int, fill: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._cols = cols
        self._data = [[fill] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def cols(self) -> int:
        return self._cols

    def __getitem__(self, row_index: int) -> list[Any]:
        if not 0 <= row_index < len(self._data):
            raise IndexError(f"row index {row_index} out of range")
        return self._data[row_index]

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self._data)

    def copy(self) -> Matrix:
        """Return an independent deep copy of the matrix."""
        result = Matrix(0, self._cols)
        result._data = _copy.deepcopy(self._data)
        return result

    def render(self) -> str:
        """Return the matrix as text, one space-separated row per line."""
        body = "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self._data
        )
        return body + "\n"

    def __str__(self) -> str:
        return self.render()