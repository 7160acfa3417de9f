"""
phq.quantity
============

Quantity classes. The generic shapes (`DimensionalScalar`, `DimensionalVector`,
`DimensionalSymmetricDyad`, `DimensionalDyad`) are bound to a unit category by
subscription or by the named subclasses in :mod:`phq.quantity.named`.
"""

from phq.quantity.base import DimensionalQuantity
from phq.quantity.dimensionless import DimensionlessScalar, MachNumber, PrandtlNumber, ReynoldsNumber
from phq.quantity.dyad import DimensionalDyad, DimensionalSymmetricDyad
from phq.quantity.named import *  # noqa: F401,F403
from phq.quantity.named import __all__ as _NAMED
from phq.quantity.scalar import DimensionalScalar
from phq.quantity.vector import DimensionalVector

__all__ = [
    "DimensionalQuantity",
    "DimensionalScalar",
    "DimensionalVector",
    "DimensionalSymmetricDyad",
    "DimensionalDyad",
    "DimensionlessScalar",
    "ReynoldsNumber",
    "MachNumber",
    "PrandtlNumber",
    *_NAMED,
]
