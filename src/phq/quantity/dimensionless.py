"""Dimensionless scalar quantities: a bare number with the quantity text forms."""

from __future__ import annotations

from typing import Any, Optional

from phq.core.utils import Precision, print_number
from phq.quantity.base import is_number


class DimensionlessScalar:
    """A number without unit. All text forms print the bare number."""

    __slots__ = ("_value",)

    number_type: type = float

    def __init__(self, value: Any = 0.0) -> None:
        if not is_number(value):
            raise TypeError(f"{type(self).__name__} needs a real number, got {value!r}")
        self._value = self.number_type(value)

    @classmethod
    def create(cls, value: Any):
        return cls(value)

    @classmethod
    def zero(cls):
        return cls(0)

    @property
    def value(self) -> Any:
        return self._value

    def print(self, precision: Optional[Precision] = None) -> str:
        return print_number(self._value, precision)

    def json(self) -> str:
        return print_number(self._value)

    def xml(self) -> str:
        return print_number(self._value)

    def yaml(self) -> str:
        return print_number(self._value)

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.print()!r})"

    def __float__(self) -> float:
        return float(self._value)

    # --- Arithmetic ---
    def _same_kind(self, other: Any) -> bool:
        return isinstance(other, DimensionlessScalar) and type(other) is type(self)

    def __add__(self, other: Any):
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self._value + other._value)

    def __sub__(self, other: Any):
        if not self._same_kind(other):
            return NotImplemented
        return type(self)(self._value - other._value)

    def __mul__(self, other: Any):
        if not is_number(other):
            return NotImplemented
        return type(self)(self._value * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any):
        if is_number(other):
            if other == 0:
                raise ZeroDivisionError(f"{type(self).__name__} divided by zero.")
            return type(self)(self._value / other)
        if self._same_kind(other):
            if other._value == 0:
                raise ZeroDivisionError(f"{type(self).__name__} divided by a zero {type(other).__name__}.")
            return self._value / other._value
        return NotImplemented

    def __neg__(self):
        return type(self)(-self._value)

    def __abs__(self):
        return type(self)(abs(self._value))

    def __eq__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(self._value == other._value)  # type: ignore[attr-defined]

    def __lt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(self._value < other._value)

    def __le__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(self._value <= other._value)

    def __gt__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(self._value > other._value)

    def __ge__(self, other: Any) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(self._value >= other._value)

    def __hash__(self) -> int:
        return hash(self._value)


class ReynoldsNumber(DimensionlessScalar):
    __slots__ = ()


class MachNumber(DimensionlessScalar):
    __slots__ = ()


class PrandtlNumber(DimensionlessScalar):
    __slots__ = ()


__all__ = ["DimensionlessScalar", "ReynoldsNumber", "MachNumber", "PrandtlNumber"]
