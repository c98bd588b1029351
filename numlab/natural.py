"""Natural numbers carrying a set of flagged properties."""

from __future__ import annotations

import enum
import functools


class NaturalProp(enum.IntFlag):
    """Properties a natural number may be flagged with."""

    ODD = 1
    PRIME = 2
    PERFECT = 4
    TAXICAB = 8


@functools.total_ordering
class Natural:
    """A positive integer; values below 1 are raised to 1."""

    __slots__ = ("_value", "properties")

    def __init__(self, value: int, properties: NaturalProp = NaturalProp(0)) -> None:
        if isinstance(value, Natural):
            value = value.value
        self._value = max(int(value), 1)
        self.properties = NaturalProp(properties)

    @property
    def value(self) -> int:
        return self._value

    def set_property(self, prop: NaturalProp) -> None:
        """Flag this number with ``prop``."""
        self.properties |= prop

    def clear_property(self, prop: NaturalProp) -> None:
        """Remove ``prop`` from this number's flags."""
        self.properties &= ~prop

    def has_property(self, prop: NaturalProp) -> bool:
        """Return whether every flag in ``prop`` is set."""
        return (self.properties & prop) == prop

    @staticmethod
    def _coerce(other: object) -> Natural | None:
        if isinstance(other, Natural):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Natural(other)
        return None

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Natural({self._value})"