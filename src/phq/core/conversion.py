"""
phq.core.conversion
===================

Conversion constants and transforms.

A *transform* converts a number between one unit variant and its category's
standard unit, in both directions. There are three kinds:

- :class:`Identity` belongs to the standard variant and returns its input
  untouched;
- :class:`Scale` multiplies by a constant factor;
- :class:`Affine` shifts by an offset and then scales (temperatures).

Factors are :class:`Constant` objects. A constant is written as a decimal
literal, evaluated in ``numpy.longdouble``, and cast once per number type it is
used with. The factor therefore never carries less precision than the caller's
own number type. Transforms accept Python numbers, numpy scalars and numpy
arrays, and keep the caller's precision.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol, Union, runtime_checkable

import numpy as np

NumberType = type
Numeric = Union[int, float, np.floating, np.ndarray]


def number_type_of(value: Any) -> NumberType:
    """Return the floating type that ``value``'s arithmetic should use."""
    if isinstance(value, np.ndarray):
        if np.issubdtype(value.dtype, np.floating):
            return value.dtype.type
        return np.float64
    if isinstance(value, np.floating):
        return type(value)
    return float


class Constant:
    """A conversion constant held in long double precision.

    Build constants from decimal strings (or integers) and combine them with
    ``*``, ``/`` and integer ``**``. Python floats are rejected because they
    would already be rounded to double precision.
    """

    __slots__ = ("_value", "_text", "_cache")

    def __init__(self, value: "str | int | Constant | np.longdouble", text: str | None = None) -> None:
        if isinstance(value, Constant):
            v, t = value._value, value._text
        elif isinstance(value, str):
            v, t = np.longdouble(value), value
        elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            v, t = np.longdouble(str(int(value))), str(int(value))
        elif isinstance(value, np.longdouble):
            v, t = value, repr(value)
        else:
            raise TypeError(
                f"Constant needs a decimal string, an int or a long double, got {type(value).__name__}"
            )
        self._value: np.longdouble = v
        self._text: str = text or t
        self._cache: Dict[NumberType, Any] = {}

    @property
    def value(self) -> np.longdouble:
        return self._value

    def as_type(self, number_type: NumberType = float) -> Any:
        """The constant cast to ``number_type`` (``float``, ``np.float32``, ...)."""
        cached = self._cache.get(number_type)
        if cached is None:
            cached = float(self._value) if number_type is float else number_type(self._value)
            self._cache[number_type] = cached
        return cached

    # --- Algebra ---
    @staticmethod
    def _coerce(other: Any) -> "Constant | None":
        if isinstance(other, Constant):
            return other
        if isinstance(other, (str, int, np.integer)) and not isinstance(other, bool):
            return Constant(other)
        return None

    def __mul__(self, other: Any) -> "Constant":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Constant(self._value * o._value, f"{self._text}*{o._text}")

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Constant":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o._value == 0:
            raise ZeroDivisionError(f"Constant {self._text} divided by zero constant {o._text}")
        return Constant(self._value / o._value, f"{self._text}/({o._text})")

    def __rtruediv__(self, other: Any) -> "Constant":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __pow__(self, n: int) -> "Constant":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be an int, got {type(n).__name__}")
        return Constant(self._value ** n, f"({self._text})^{n}")

    def __neg__(self) -> "Constant":
        return Constant(-self._value, f"-({self._text})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constant):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        return f"Constant({self._text})"


ONE = Constant("1")
ZERO = Constant("0")


@runtime_checkable
class Transform(Protocol):
    """Conversion between one unit variant and the standard unit."""

    @property
    def is_identity(self) -> bool: ...

    def to_standard(self, x: Numeric) -> Numeric: ...
    def from_standard(self, x: Numeric) -> Numeric: ...

    # Mutating forms for floating-point numpy arrays.
    def to_standard_in_place(self, array: np.ndarray) -> None: ...
    def from_standard_in_place(self, array: np.ndarray) -> None: ...


@dataclass(frozen=True, slots=True)
class Identity:
    """Transform of the standard unit itself."""

    @property
    def is_identity(self) -> bool:
        return True

    @property
    def factor(self) -> Constant:
        return ONE

    def to_standard(self, x: Numeric) -> Numeric:
        return x

    def from_standard(self, x: Numeric) -> Numeric:
        return x

    def to_standard_in_place(self, array: np.ndarray) -> None:
        return None

    def from_standard_in_place(self, array: np.ndarray) -> None:
        return None


def _as_constant(value: Any) -> Constant:
    c = Constant._coerce(value)
    if c is None:
        raise TypeError(f"Expected a Constant, decimal string or int, got {type(value).__name__}")
    return c


@dataclass(frozen=True, slots=True)
class Scale:
    """``standard = value * factor``."""

    factor: Constant

    def __post_init__(self) -> None:
        factor = _as_constant(self.factor)
        if not (factor.value > 0 and np.isfinite(factor.value)):
            raise ValueError(f"Scale factor must be positive and finite, got {factor!r}")
        object.__setattr__(self, "factor", factor)

    @property
    def is_identity(self) -> bool:
        return False

    def to_standard(self, x: Numeric) -> Numeric:
        return x * self.factor.as_type(number_type_of(x))

    def from_standard(self, x: Numeric) -> Numeric:
        return x / self.factor.as_type(number_type_of(x))

    def to_standard_in_place(self, array: np.ndarray) -> None:
        np.multiply(array, self.factor.as_type(array.dtype.type), out=array)

    def from_standard_in_place(self, array: np.ndarray) -> None:
        np.divide(array, self.factor.as_type(array.dtype.type), out=array)


@dataclass(frozen=True, slots=True)
class Affine:
    """``standard = (value + offset) * factor``."""

    factor: Constant
    offset: Constant

    def __post_init__(self) -> None:
        factor = _as_constant(self.factor)
        if not (factor.value > 0 and np.isfinite(factor.value)):
            raise ValueError(f"Affine factor must be positive and finite, got {factor!r}")
        object.__setattr__(self, "factor", factor)
        object.__setattr__(self, "offset", _as_constant(self.offset))

    @property
    def is_identity(self) -> bool:
        return False

    def to_standard(self, x: Numeric) -> Numeric:
        t = number_type_of(x)
        return (x + self.offset.as_type(t)) * self.factor.as_type(t)

    def from_standard(self, x: Numeric) -> Numeric:
        t = number_type_of(x)
        return x / self.factor.as_type(t) - self.offset.as_type(t)

    def to_standard_in_place(self, array: np.ndarray) -> None:
        t = array.dtype.type
        np.add(array, self.offset.as_type(t), out=array)
        np.multiply(array, self.factor.as_type(t), out=array)

    def from_standard_in_place(self, array: np.ndarray) -> None:
        t = array.dtype.type
        np.divide(array, self.factor.as_type(t), out=array)
        np.subtract(array, self.offset.as_type(t), out=array)


def compose(source: Transform, target: Transform, number_type: NumberType = float) -> Callable[[Any], Any]:
    """Build the function converting ``source``'s unit into ``target``'s unit.

    The input is cast to ``number_type`` first, so every pair of transforms
    returns that type. Two linear transforms fold into one factor computed in
    long double, so the result is rounded once.
    """
    def cast(x: Any) -> Any:
        if isinstance(x, np.ndarray):
            return x.astype(number_type, copy=False)
        return number_type(x)

    if source is target or (source.is_identity and target.is_identity):
        return cast

    linear = (Identity, Scale)
    if isinstance(source, linear) and isinstance(target, linear):
        ratio = (source.factor / target.factor).as_type(number_type)
        return lambda x: cast(x) * ratio

    return lambda x: target.from_standard(source.to_standard(cast(x)))


__all__ = [
    "Constant",
    "ONE",
    "ZERO",
    "Transform",
    "Identity",
    "Scale",
    "Affine",
    "compose",
    "number_type_of",
]
