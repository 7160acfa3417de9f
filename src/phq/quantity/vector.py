"""Vector quantities: a `Vector` payload in the category's standard unit."""

from __future__ import annotations

from phq.core.values import Vector
from phq.quantity.base import DimensionalQuantity


class DimensionalVector(DimensionalQuantity):
    """Generic three-dimensional vector quantity, e.g. ``DimensionalVector[Force]``."""

    __slots__ = ()
    _payload = Vector

    def magnitude(self):
        return self.scalar_class().create(self._value.magnitude())

    def direction(self) -> Vector:
        """Unit vector along the quantity; the zero vector for a zero quantity."""
        return self._value.direction()

    def __abs__(self):
        return self.magnitude()

    @property
    def x(self):
        return self.scalar_class().create(self._value[0])

    @property
    def y(self):
        return self.scalar_class().create(self._value[1])

    @property
    def z(self):
        return self.scalar_class().create(self._value[2])


__all__ = ["DimensionalVector"]
