"""
phq.core.values
===============

Plain (unitless) multi-component values: :class:`Vector`, :class:`SymmetricDyad`
and :class:`Dyad`. They are the payloads of vector and dyadic quantities.

Each value is an immutable tuple subclass of fixed length, so it hashes and
compares by value. Tuple concatenation and repetition are blocked; ``+``/``-``
act component-wise and ``*``/``/`` scale by a number.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar, Iterable, Optional, Tuple

from phq.core.utils import Precision, json_object, print_components, print_number, xml_elements, yaml_object


def _is_number(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


class _Components(tuple):
    """Fixed-length tuple of numbers with component-wise algebra."""

    __slots__ = ()

    LABELS: ClassVar[Tuple[str, ...]] = ()
    # Components per printed row, e.g. (3, 2, 1) prints "(xx, xy, xz; yy, yz; zz)".
    GROUPS: ClassVar[Tuple[int, ...]] = ()

    def __new__(cls, *components: Any):
        if len(components) == 1 and not _is_number(components[0]):
            components = tuple(components[0])
        if len(components) != len(cls.LABELS):
            raise ValueError(
                f"{cls.__name__} needs {len(cls.LABELS)} components, got {len(components)}."
            )
        for c in components:
            if not _is_number(c):
                raise TypeError(f"{cls.__name__} components must be real numbers, got {c!r}")
        return tuple.__new__(cls, components)

    @classmethod
    def zero(cls):
        return cls((0.0,) * len(cls.LABELS))

    # --- Algebra ---
    def __add__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(a + b for a, b in zip(self, other))

    def __sub__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(a - b for a, b in zip(self, other))

    def __radd__(self, other: Any):
        return NotImplemented

    def __mul__(self, other: Any):
        if not _is_number(other):
            return NotImplemented
        return type(self)(a * other for a in self)

    __rmul__ = __mul__

    def __truediv__(self, other: Any):
        if not _is_number(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError(f"{type(self).__name__} divided by zero.")
        return type(self)(a / other for a in self)

    def __neg__(self):
        return type(self)(-a for a in self)

    def __pos__(self):
        return self

    # --- Accessors ---
    def __getattr__(self, name: str) -> Any:
        try:
            return self[self.LABELS.index(name)]
        except ValueError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None

    # --- Text forms ---
    def print(self, precision: Optional[Precision] = None) -> str:
        return print_components(self, self.GROUPS, precision)

    def _pairs(self, precision: Optional[Precision]):
        return [(label, print_number(v, precision)) for label, v in zip(self.LABELS, self)]

    def json(self, precision: Optional[Precision] = None) -> str:
        return json_object(self._pairs(precision))

    def xml(self, precision: Optional[Precision] = None) -> str:
        return xml_elements(self._pairs(precision))

    def yaml(self, precision: Optional[Precision] = None) -> str:
        return yaml_object(self._pairs(precision))

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.print()}"


class Vector(_Components):
    """Three-dimensional Euclidean vector ``(x, y, z)``."""

    __slots__ = ()
    LABELS = ("x", "y", "z")
    GROUPS = (3,)

    def magnitude(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def direction(self) -> "Vector":
        """Unit vector along ``self``; the zero vector has no direction and maps to itself."""
        m = self.magnitude()
        if m == 0:
            return Vector.zero()
        return self / m

    def dot(self, other: "Vector") -> float:
        return sum(a * b for a, b in zip(self, other, strict=True))

    def cross(self, other: "Vector") -> "Vector":
        ax, ay, az = self
        bx, by, bz = other
        return Vector(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


class SymmetricDyad(_Components):
    """Symmetric 3x3 tensor stored as ``(xx, xy, xz, yy, yz, zz)``."""

    __slots__ = ()
    LABELS = ("xx", "xy", "xz", "yy", "yz", "zz")
    GROUPS = (3, 2, 1)

    def trace(self) -> float:
        return self[0] + self[3] + self[5]

    def dot(self, vector: Vector) -> Vector:
        xx, xy, xz, yy, yz, zz = self
        x, y, z = vector
        return Vector(xx * x + xy * y + xz * z, xy * x + yy * y + yz * z, xz * x + yz * y + zz * z)


class Dyad(_Components):
    """General 3x3 tensor stored row by row."""

    __slots__ = ()
    LABELS = ("xx", "xy", "xz", "yx", "yy", "yz", "zx", "zy", "zz")
    GROUPS = (3, 3, 3)

    def trace(self) -> float:
        return self[0] + self[4] + self[8]

    def transpose(self) -> "Dyad":
        return Dyad(self[i + 3 * j] for i in range(3) for j in range(3))

    def dot(self, vector: Vector) -> Vector:
        return Vector(sum(self[3 * row + k] * vector[k] for k in range(3)) for row in range(3))


__all__ = ["Vector", "SymmetricDyad", "Dyad"]
