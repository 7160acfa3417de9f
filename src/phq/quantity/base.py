"""
phq.quantity.base
=================

Defines `DimensionalQuantity`, the common base of every quantity class.

A quantity is a number (or a `Vector` / dyad of numbers) stored in the standard
unit of one unit category, together with that category. The category is bound
to the class, not to the instance:

- generic classes (`DimensionalScalar`, `DimensionalVector`, ...) are
  specialised by subscription, e.g. ``DimensionalScalar[EnergyFlux]`` or
  ``DimensionalScalar[EnergyFlux, numpy.float32]``;
- named classes bind a category when they are declared,
  ``class Length(DimensionalScalar, category=units.Length)``.

Binding resolves the category's conversion table once. Constructing a quantity
from a value in some unit therefore costs a single ``to_standard`` call, and
arithmetic works directly on the stored standard-unit payload.
"""

from __future__ import annotations

import numbers
import threading
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type

from phq.core.conversion import Transform
from phq.core.unit_system import UnitSystem
from phq.core.utils import Precision, json_object, print_number, xml_elements, yaml_object
from phq.exceptions import UnitMismatchError, UnknownUnitError
from phq.units.category import UnitEnum
from phq.units.registry import DEFAULT_REGISTRY, static_convert

_specialize_lock = threading.Lock()

# (left class, right class) -> result class
_PRODUCTS: Dict[Tuple[type, type], type] = {}
_QUOTIENTS: Dict[Tuple[type, type], type] = {}


def is_number(x: Any) -> bool:
    """Real numbers, numpy floating/integer scalars included; bools excluded."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


class DimensionalQuantity:
    """Base class of quantities whose payload is stored in a standard unit."""

    __slots__ = ("_value",)

    category: ClassVar[Optional[Type[UnitEnum]]] = None
    number_type: ClassVar[type] = float

    # Payload type for multi-component quantities; None for scalars.
    _payload: ClassVar[Optional[type]] = None
    _standard: ClassVar[Optional[UnitEnum]] = None
    _transforms: ClassVar[Mapping[UnitEnum, Transform]] = {}
    _scalar: ClassVar[Optional[type]] = None
    _specializations: ClassVar[Dict[Tuple[Any, Any], type]] = {}
    # True for classes made by subscription, e.g. DimensionalScalar[Length].
    _generic: ClassVar[bool] = False

    def __init_subclass__(
        cls,
        category: Optional[Type[UnitEnum]] = None,
        number_type: Optional[type] = None,
        scalar: Optional[type] = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls._specializations = {}
        cls._generic = False
        if number_type is not None:
            cls.number_type = number_type
        if scalar is not None:
            cls._scalar = scalar
        if category is not None:
            cls._bind(category)

    @classmethod
    def _bind(cls, category: Type[UnitEnum]) -> None:
        if not (isinstance(category, type) and issubclass(category, UnitEnum)):
            raise TypeError(f"{cls.__name__}: category must be a UnitEnum subclass, got {category!r}")
        cls.category = category
        cls._transforms = DEFAULT_REGISTRY.transforms(category)
        cls._standard = DEFAULT_REGISTRY.standard(category)

    def __class_getitem__(cls, item: Any) -> type:
        if cls.category is not None:
            raise TypeError(f"{cls.__name__} is already bound to {cls.category.__name__}.")
        category, number_type = item if isinstance(item, tuple) else (item, None)
        key = (category, number_type)
        with _specialize_lock:
            specialised = cls._specializations.get(key)
            if specialised is None:
                label = category.__name__ if number_type is None else f"{category.__name__}, {number_type.__name__}"
                specialised = type(cls)(
                    f"{cls.__name__}[{label}]",
                    (cls,),
                    {"__slots__": (), "__module__": cls.__module__},
                    category=category,
                    number_type=number_type,
                )
                specialised._generic = True
                cls._specializations[key] = specialised
        return specialised

    # --- Construction ---
    def __init__(self, value: Any, unit: Any) -> None:
        transform = self._transform(unit)
        payload = self._coerce(value)
        if not transform.is_identity:
            payload = self._apply(payload, transform.to_standard)
        self._value = payload

    @classmethod
    def create(cls, value: Any):
        """Build a quantity from a value already expressed in the standard unit."""
        cls._require_category()
        obj = cls.__new__(cls)
        obj._value = cls._coerce(value)
        return obj

    @classmethod
    def zero(cls):
        return cls.create(0 if cls._payload is None else cls._payload.zero())

    @classmethod
    def _require_category(cls) -> None:
        if cls.category is None:
            raise TypeError(
                f"{cls.__name__} is generic; bind a category first, e.g. {cls.__name__}[Length]."
            )

    @classmethod
    def scalar_class(cls) -> type:
        """Scalar quantity class of the same category, used for magnitudes and components.

        Named classes may declare it (``scalar=ForceScalar``); otherwise it is
        ``DimensionalScalar`` of the same category and number type.
        """
        cls._require_category()
        if cls._scalar is not None:
            return cls._scalar
        from phq.quantity.scalar import DimensionalScalar
        if cls.number_type is float:
            return DimensionalScalar[cls.category]
        return DimensionalScalar[cls.category, cls.number_type]

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        if cls._payload is None:
            if not is_number(value):
                raise TypeError(f"{cls.__name__} needs a real number, got {value!r}")
            return cls.number_type(value)
        if is_number(value):
            raise TypeError(f"{cls.__name__} needs {cls._payload.__name__} components, got {value!r}")
        return cls._payload(cls.number_type(c) for c in cls._payload(value))

    @classmethod
    def _apply(cls, payload: Any, fn: Any) -> Any:
        if cls._payload is None:
            return fn(payload)
        return cls._payload(fn(c) for c in payload)

    @classmethod
    def _resolve_unit(cls, unit: Any) -> UnitEnum:
        """Map ``None``, a unit system, a spelling or a variant onto a variant of the category."""
        cls._require_category()
        if unit is None:
            return cls._standard
        if isinstance(unit, UnitSystem):
            return DEFAULT_REGISTRY.consistent_unit(cls.category, unit)
        if isinstance(unit, str):
            parsed = DEFAULT_REGISTRY.parse(cls.category, unit)
            if parsed is None:
                raise UnknownUnitError(unit)
            return parsed
        if type(unit) is not cls.category:
            raise UnitMismatchError(
                f"{cls.__name__} holds {cls.category.__name__} values; {unit!r} is not one of its units."
            )
        return unit

    @classmethod
    def _transform(cls, unit: Any) -> Transform:
        return cls._transforms[cls._resolve_unit(unit)]

    # --- Values ---
    @property
    def value(self) -> Any:
        """The payload in the category's standard unit."""
        return self._value

    def value_in(self, unit: Any) -> Any:
        transform = self._transform(unit)
        if transform.is_identity:
            return self._value
        return self._apply(self._value, transform.from_standard)

    def static_value(self, unit: Any) -> Any:
        """Like :meth:`value_in`, through the cached composed conversion."""
        return static_convert(self._value, self._standard, self._resolve_unit(unit), self.number_type)

    def to(self, unit: Any = None) -> Tuple[Any, UnitEnum]:
        """Return ``(value, unit)``; without a unit, use the configured unit system."""
        if unit is None:
            from phq.config import get_settings
            unit = get_settings().unit_system
        unit = self._resolve_unit(unit)
        return self.value_in(unit), unit

    # --- Text forms ---
    def _text(self, value: Any, precision: Optional[Precision], form: str) -> str:
        if self._payload is None:
            return print_number(value, precision)
        return getattr(value, form)(precision)

    def print(self, unit: Any = None, precision: Optional[Precision] = None) -> str:
        unit = self._resolve_unit(unit)
        return f"{self._text(self.value_in(unit), precision, 'print')} {DEFAULT_REGISTRY.abbreviation(unit)}"

    def json(self, unit: Any = None) -> str:
        unit = self._resolve_unit(unit)
        return json_object([
            ("value", self._text(self.value_in(unit), None, "json")),
            ("unit", f'"{DEFAULT_REGISTRY.abbreviation(unit)}"'),
        ])

    def xml(self, unit: Any = None) -> str:
        unit = self._resolve_unit(unit)
        return xml_elements([
            ("value", self._text(self.value_in(unit), None, "xml")),
            ("unit", DEFAULT_REGISTRY.abbreviation(unit)),
        ])

    def yaml(self, unit: Any = None) -> str:
        unit = self._resolve_unit(unit)
        return yaml_object([
            ("value", self._text(self.value_in(unit), None, "yaml")),
            ("unit", f'"{DEFAULT_REGISTRY.abbreviation(unit)}"'),
        ])

    def __str__(self) -> str:
        return self.print()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.print()!r})"

    def __format__(self, spec: str) -> str:
        """
        Format specifiers
        -----------------
        "" (empty)
            Same as ``print()``.
        "json", "xml", "yaml"
            The corresponding text form in the standard unit.
        any unit spelling of the category, e.g. ``"km"``
            ``print()`` in that unit.

        >>> f"{Length(1500.0, units.Length.Metre):km}"
        '1.500000000000000 km'
        """
        spec = (spec or "").strip()
        if not spec:
            return self.print()
        if spec in ("json", "xml", "yaml"):
            return getattr(self, spec)()
        return self.print(spec)

    # --- Arithmetic on the standard payload ---
    def _result_class(self, other: Any) -> Optional[type]:
        """Class of ``self + other``; None when the two are different kinds.

        A quantity combines with its own class, and a generic specialisation
        such as ``DimensionalScalar[Length]`` combines with a named class of
        the same category and shape. The named class wins.
        """
        if not isinstance(other, DimensionalQuantity):
            return None
        mine, theirs = type(self), type(other)
        if mine is theirs:
            return mine
        if other.category is not self.category or other._payload is not self._payload:
            return None
        if theirs._generic:
            return mine
        if mine._generic:
            return theirs
        return None

    def _same_kind(self, other: Any) -> bool:
        return self._result_class(other) is not None

    def __add__(self, other: Any):
        result = self._result_class(other)
        if result is None:
            return NotImplemented
        return result.create(self._value + other._value)

    def __sub__(self, other: Any):
        result = self._result_class(other)
        if result is None:
            return NotImplemented
        return result.create(self._value - other._value)

    def __mul__(self, other: Any):
        if is_number(other):
            return type(self).create(self._value * other)
        product = _PRODUCTS.get((type(self), type(other)))
        if product is None:
            return NotImplemented
        return product.create(self._value * _payload_of(other))

    def __rmul__(self, other: Any):
        if is_number(other):
            return type(self).create(other * self._value)
        product = _PRODUCTS.get((type(other), type(self)))
        if product is None:
            return NotImplemented
        return product.create(_payload_of(other) * self._value)

    def __truediv__(self, other: Any):
        if is_number(other):
            if other == 0:
                raise ZeroDivisionError(f"{type(self).__name__} divided by zero.")
            return type(self).create(self._value / other)
        if self._payload is None and self._same_kind(other):
            if other._value == 0:
                raise ZeroDivisionError(f"{type(self).__name__} divided by a zero {type(other).__name__}.")
            return self._value / other._value
        quotient = _QUOTIENTS.get((type(self), type(other)))
        if quotient is None:
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError(f"{type(self).__name__} divided by a zero {type(other).__name__}.")
        return quotient.create(self._value / other._value)

    def __neg__(self):
        return type(self).create(-self._value)

    def __pos__(self):
        return self

    def __eq__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return bool(self._value == other._value)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._value)


def _payload_of(x: Any) -> Any:
    return x._value if isinstance(x, DimensionalQuantity) else x


def relate(product: type, left: type, right: type) -> None:
    """Declare ``left * right -> product`` for two quantity classes.

    The product is registered in both operand orders. The quotients
    ``product / left -> right`` and ``product / right -> left`` are registered
    when the divisor is a scalar quantity and the result a quantity class.
    Payloads are multiplied in standard units, so the three standard units
    must be coherent.
    ``right`` may also be a plain value type such as ``Vector``, e.g.
    ``relate(Velocity, Speed, Vector)``.
    """
    for key in ((left, right), (right, left)):
        known = _PRODUCTS.get(key)
        if known is not None and known is not product:
            raise ValueError(
                f"{key[0].__name__} * {key[1].__name__} already gives {known.__name__}, not {product.__name__}."
            )
        _PRODUCTS[key] = product
    for divisor, result in ((left, right), (right, left)):
        if not _is_scalar_quantity(divisor) or not issubclass(result, DimensionalQuantity):
            continue
        key = (product, divisor)
        known = _QUOTIENTS.get(key)
        if known is not None and known is not result:
            raise ValueError(
                f"{product.__name__} / {divisor.__name__} already gives {known.__name__}, not {result.__name__}."
            )
        _QUOTIENTS[key] = result


def _is_scalar_quantity(cls: type) -> bool:
    return issubclass(cls, DimensionalQuantity) and cls._payload is None


__all__ = ["DimensionalQuantity", "is_number", "relate"]
