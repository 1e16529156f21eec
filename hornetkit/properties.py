"""Flag sets built from strongly typed enumerations, and batch generation options."""

from __future__ import annotations

import enum
from typing import ClassVar


class PropertyClass:
    """A set of flags taken from one enumeration, combined with bitwise operators.

    Subclasses set ``enum_type`` to restrict the accepted enumeration.
    A property built without a value is undefined (no flags set).
    """

    enum_type: ClassVar[type[enum.Enum] | None] = None

    def __init__(self, value: enum.Enum | None = None) -> None:
        self._state = 0
        if value is not None:
            self._state = self._flag_value(value)

    @classmethod
    def _flag_value(cls, value: enum.Enum) -> int:
        expected = cls.enum_type
        if expected is None:
            if not isinstance(value, enum.Enum):
                raise TypeError(f"expected an enumeration member, got {value!r}")
        elif not isinstance(value, expected):
            raise TypeError(
                f"expected a member of {expected.__name__}, got {value!r}"
            )
        return int(value.value)

    def _check_same_kind(self, other: object) -> PropertyClass:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        return other  # type: ignore[return-value]

    def _is_non_compatible(self) -> bool:
        """Tell whether the current flags contradict each other."""
        return False

    def _validate(self) -> None:
        if self._is_non_compatible():
            raise ValueError(f"incompatible properties: {self!r}")

    def __or__(self, other: PropertyClass) -> PropertyClass:
        """Return a new property holding the flags of both operands."""
        other = self._check_same_kind(other)
        result = type(self)()
        result._state = self._state | other._state
        result._validate()
        return result

    def __and__(self, other: PropertyClass) -> bool:
        """Tell whether the two properties share at least one flag."""
        other = self._check_same_kind(other)
        return bool(self._state & other._state)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: PropertyClass) -> PropertyClass:
        """Add the flags of ``other`` to this property."""
        other = self._check_same_kind(other)
        self._state |= other._state
        self._validate()
        return self

    def __isub__(self, other: PropertyClass) -> PropertyClass:
        """Remove the flags of ``other`` from this property."""
        other = self._check_same_kind(other)
        self._state &= ~other._state
        return self

    def is_undefined(self) -> bool:
        """Tell whether no flag is set."""
        return self._state == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state:#x})"


class BatchGenEnum(enum.IntFlag):
    """Options for generating a batch of edges."""

    WEIGHTED = 1
    PRINT = 2
    UNIQUE = 4


class BatchGenProperty(PropertyClass):
    """A combination of :class:`BatchGenEnum` options."""

    enum_type = BatchGenEnum


class BatchGenType(enum.Enum):
    """Whether a generated batch inserts or removes edges."""

    INSERT = enum.auto()
    REMOVE = enum.auto()


WEIGHTED = BatchGenProperty(BatchGenEnum.WEIGHTED)
PRINT = BatchGenProperty(BatchGenEnum.PRINT)
UNIQUE = BatchGenProperty(BatchGenEnum.UNIQUE)