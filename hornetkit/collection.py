"""A fixed-capacity collection and a bounded view over a sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Collection(Generic[T]):
    """A list with a fixed maximum size.

    ``+=`` appends one element, or every element of another ``Collection``.
    Exceeding the capacity raises ``OverflowError``.
    """

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError("max_size must be non-negative")
        self._max_size = max_size
        self._items: list[T] = []

    @property
    def max_size(self) -> int:
        return self._max_size

    def _check_room(self, extra: int) -> None:
        if len(self._items) + extra > self._max_size:
            raise OverflowError(
                f"collection capacity {self._max_size} would be exceeded"
            )

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iadd__(self, other: Any) -> Collection[T]:
        if isinstance(other, Collection):
            additions = list(other._items)
            self._check_room(len(additions))
            self._items.extend(additions)
        else:
            self._check_room(1)
            self._items.append(other)
        return self

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def assign(self, other: Iterable[T]) -> Collection[T]:
        """Replace the contents with those of ``other``."""
        items = list(other)
        if len(items) > self._max_size:
            raise OverflowError(
                f"collection capacity {self._max_size} would be exceeded"
            )
        self._items = items
        return self

    def __repr__(self) -> str:
        return f"Collection(max_size={self._max_size}, items={self._items!r})"


class ArrayWrapper(Generic[T]):
    """An iterable view over the first ``size`` items of a sequence."""

    def __init__(self, data: Sequence[T], size: int) -> None:
        if not 0 <= size <= len(data):
            raise ValueError("size must lie between 0 and the length of data")
        self._data = data
        self._size = size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for index in range(self._size):
            yield self._data[index]

    def __reversed__(self) -> Iterator[T]:
        for index in reversed(range(self._size)):
            yield self._data[index]