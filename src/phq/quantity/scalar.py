"""Scalar quantities: one number in the category's standard unit."""

from __future__ import annotations

from typing import Any

from phq.quantity.base import DimensionalQuantity


class DimensionalScalar(DimensionalQuantity):
    """Generic scalar quantity; subscript with a category, e.g. ``DimensionalScalar[Length]``."""

    __slots__ = ()

    # Ordering compares standard-unit payloads of the same kind.
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

    def __abs__(self):
        return type(self).create(abs(self._value))

    def __float__(self) -> float:
        return float(self._value)


__all__ = ["DimensionalScalar"]
