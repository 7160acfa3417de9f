"""Tensor quantities: symmetric dyads and general dyads."""

from __future__ import annotations

from phq.core.values import Dyad, SymmetricDyad
from phq.quantity.base import DimensionalQuantity


class _DyadicQuantity(DimensionalQuantity):
    __slots__ = ()

    def trace(self):
        return self.scalar_class().create(self._value.trace())


class DimensionalSymmetricDyad(_DyadicQuantity):
    """Generic symmetric 3x3 tensor quantity, e.g. ``DimensionalSymmetricDyad[Pressure]``."""

    __slots__ = ()
    _payload = SymmetricDyad


class DimensionalDyad(_DyadicQuantity):
    """Generic 3x3 tensor quantity, e.g. ``DimensionalDyad[Frequency]``."""

    __slots__ = ()
    _payload = Dyad

    def transpose(self):
        return type(self).create(self._value.transpose())


__all__ = ["DimensionalSymmetricDyad", "DimensionalDyad"]
