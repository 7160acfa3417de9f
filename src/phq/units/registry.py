"""
phq.units.registry
==================

The units registry: every table the conversion engine reads.

Key points
----------
- Encapsulates all tables in a `UnitsRegistry` class (thread-safe registration).
- Data-driven: categories are registered from `CategoryDefinition` records
  (see :mod:`phq.units.catalog`), validated on the way in.
- Every conversion pivots through the category's standard unit, so a category
  holds one transform per variant.
- Clear public API: `register`, `definition`, `abbreviation`, `parse`,
  `convert`, `convert_in_place`, `consistent_unit`, `related_unit_system`.
- Easily testable: build an isolated registry with
  :func:`_bootstrap_default_registry` or register definitions by hand.

The module also exposes the default registry's methods as plain functions,
together with :func:`static_convert`, whose composed conversions are cached.
"""
from __future__ import annotations

import logging
import threading
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Type

import numpy as np

from phq.core import enumeration
from phq.core.conversion import Transform, compose, number_type_of
from phq.core.dimensions import Dimensions
from phq.core.enumeration import EnumerationTable
from phq.core.unit_system import UnitSystem
from phq.exceptions import RegistrationError, UnitMismatchError, UnknownCategoryError, UnknownUnitError
from phq.units.category import CategoryDefinition, UnitEnum, derived_spellings

logger = logging.getLogger(__name__)


def _map(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply ``fn`` to a number, a numpy array or each item of a list/tuple.

    Always returns a new object; the input is never modified.
    """
    if isinstance(value, np.ndarray):
        if not np.issubdtype(value.dtype, np.floating):
            value = value.astype(np.float64)
        result = fn(value)
        return result.copy() if result is value else result
    if isinstance(value, (list, tuple)):
        return type(value)(fn(item) for item in value)
    return fn(value)


class UnitsRegistry:
    """Thread-safe registry of unit categories.

    Registration takes the lock; lookups and conversions read dicts that are
    never mutated in place after a category is registered.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._definitions: Dict[Type[UnitEnum], CategoryDefinition] = {}
        self._tables: Dict[Type[UnitEnum], EnumerationTable] = {}
        self._transforms: Dict[Type[UnitEnum], Mapping[UnitEnum, Transform]] = {}

    def __contains__(self, category: object) -> bool:
        return category in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    # -------------------------- registration --------------------------------
    def register(self, definition: CategoryDefinition, replace: bool = False) -> None:
        """Validate ``definition`` and register its category.

        Raises `RegistrationError` when the definition is incomplete or
        inconsistent, or when the category already exists and ``replace`` is
        False.
        """
        category = definition.category
        if not (isinstance(category, type) and issubclass(category, UnitEnum)):
            raise RegistrationError(f"{category!r} is not a UnitEnum subclass.")

        name = category.__name__
        members = list(category)
        self._check_members(name, category, "conversions", definition.conversions)
        missing = [m.name for m in members if m not in definition.conversions]
        if missing:
            raise RegistrationError(f"{name}: no conversion for {', '.join(missing)}.")

        if not isinstance(definition.standard, category):
            raise RegistrationError(f"{name}: standard {definition.standard!r} is not a member.")
        for unit, transform in definition.conversions.items():
            if not isinstance(transform, Transform):
                raise RegistrationError(f"{name}: conversion for {unit.name} is not a transform.")
        if not definition.conversions[definition.standard].is_identity:
            raise RegistrationError(
                f"{name}: the standard unit {definition.standard.name} must convert by identity."
            )

        if not isinstance(definition.dimensions, Dimensions):
            raise RegistrationError(f"{name}: dimensions must be a Dimensions instance.")

        systems = [s.name for s in UnitSystem if s not in definition.consistent_units]
        if systems:
            raise RegistrationError(f"{name}: no consistent unit for {', '.join(systems)}.")
        for system, unit in definition.consistent_units.items():
            if not isinstance(system, UnitSystem):
                raise RegistrationError(f"{name}: {system!r} is not a unit system.")
            if not isinstance(unit, category):
                raise RegistrationError(f"{name}: consistent unit {unit!r} is not a member.")

        self._check_members(name, category, "related unit systems", definition.related_unit_systems)
        for unit, system in definition.related_unit_systems.items():
            if definition.consistent_units.get(system) is not unit:
                raise RegistrationError(
                    f"{name}: {unit.name} is related to {system!r} but is not its consistent unit."
                )

        self._check_members(name, category, "spellings", definition.spellings)
        table = EnumerationTable(
            category,
            definition.abbreviations,
            definition.spellings,
            derived=derived_spellings(definition.abbreviations),
        )

        with self._lock:
            if category in self._definitions and not replace:
                raise RegistrationError(f"Unit category '{name}' is already registered.")
            self._definitions[category] = definition
            self._tables[category] = table
            self._transforms[category] = MappingProxyType(dict(definition.conversions))
        logger.debug("Registered unit category %s (%d units).", name, len(members))

    @staticmethod
    def _check_members(name: str, category: type, what: str, table: Mapping[Any, Any]) -> None:
        strays = [repr(key) for key in table if not isinstance(key, category)]
        if strays:
            raise RegistrationError(f"{name}: {what} keys {', '.join(strays)} are not members.")

    # --------------------------- lookups ------------------------------------
    def definition(self, category: Type[UnitEnum]) -> CategoryDefinition:
        try:
            return self._definitions[category]
        except KeyError:
            raise UnknownCategoryError(category) from None

    def categories(self) -> Tuple[Type[UnitEnum], ...]:
        return tuple(self._definitions)

    def all(self) -> Mapping[Type[UnitEnum], CategoryDefinition]:
        with self._lock:
            return dict(self._definitions)

    def transforms(self, category: Type[UnitEnum]) -> Mapping[UnitEnum, Transform]:
        """The read-only ``{unit: transform}`` table of ``category``."""
        try:
            return self._transforms[category]
        except KeyError:
            raise UnknownCategoryError(category) from None

    def transform(self, unit: UnitEnum) -> Transform:
        try:
            return self.transforms(type(unit))[unit]
        except KeyError:
            raise UnknownUnitError(unit) from None

    def standard(self, category: Type[UnitEnum]) -> UnitEnum:
        return self.definition(category).standard

    def related_dimensions(self, category: Type[UnitEnum]) -> Dimensions:
        return self.definition(category).dimensions

    def categories_with_dimensions(self, dimensions: Dimensions) -> Tuple[Type[UnitEnum], ...]:
        return tuple(c for c, d in self._definitions.items() if d.dimensions == dimensions)

    def abbreviation(self, unit: Any) -> str:
        """Canonical text of ``unit``.

        Works for unit variants and for the library's other printable
        enumerations (unit systems, precisions).
        """
        table = self._tables.get(type(unit))
        if table is not None:
            return table.abbreviation(unit)
        return enumeration.abbreviation(unit)

    def parse(self, category: type, text: str) -> Optional[Any]:
        """Return the member of ``category`` spelled by ``text``, or ``None``."""
        table = self._tables.get(category)
        if table is not None:
            return table.parse(text)
        try:
            return enumeration.parse_enumeration(category, text)
        except UnknownCategoryError:
            return None

    def spellings(self, category: Type[UnitEnum]) -> Mapping[str, UnitEnum]:
        try:
            return self._tables[category].spellings()
        except KeyError:
            raise UnknownCategoryError(category) from None

    def consistent_unit(self, category: Type[UnitEnum], system: UnitSystem) -> Optional[UnitEnum]:
        return self.definition(category).consistent_units.get(system)

    def related_unit_system(self, unit: UnitEnum) -> Optional[UnitSystem]:
        return self.definition(type(unit)).related_unit_systems.get(unit)

    # -------------------------- conversions ---------------------------------
    def to_standard(self, value: Any, unit: UnitEnum) -> Any:
        transform = self.transform(unit)
        if transform.is_identity:
            return _map(value, lambda x: x)
        return _map(value, transform.to_standard)

    def from_standard(self, value: Any, unit: UnitEnum) -> Any:
        transform = self.transform(unit)
        if transform.is_identity:
            return _map(value, lambda x: x)
        return _map(value, transform.from_standard)

    def _resolve_target(self, source: UnitEnum, target: Any) -> UnitEnum:
        category = type(source)
        if isinstance(target, UnitSystem):
            return self.definition(category).consistent_units[target]
        if type(target) is not category:
            raise UnitMismatchError(
                f"Cannot convert {category.__name__}.{source.name} into {target!r}: "
                "the units belong to different categories."
            )
        return target

    def convert(self, value: Any, source: UnitEnum, target: Any) -> Any:
        """Convert ``value`` from ``source`` into ``target``.

        ``target`` is a variant of the same category or a `UnitSystem`, in which
        case the category's consistent unit for that system is used. ``value``
        may be a number, a numpy array, or a list/tuple of numbers (including
        the tuple-based `Vector` and dyad values). A new object is returned.
        """
        target = self._resolve_target(source, target)
        to = self.transform(source)
        back = self.transform(target)
        if source is target:
            return _map(value, lambda x: x)
        if to.is_identity:
            return _map(value, back.from_standard)
        if back.is_identity:
            return _map(value, to.to_standard)
        return _map(value, lambda x: back.from_standard(to.to_standard(x)))

    def convert_in_place(self, array: np.ndarray, source: UnitEnum, target: Any) -> None:
        """Convert a floating-point numpy array in place."""
        if not isinstance(array, np.ndarray) or not np.issubdtype(array.dtype, np.floating):
            raise TypeError("convert_in_place needs a floating-point numpy array.")
        target = self._resolve_target(source, target)
        if source is target:
            return
        self.transform(source).to_standard_in_place(array)
        self.transform(target).from_standard_in_place(array)


# ---------------------------------------------------------------------------
# Bootstrap the default registry with the catalog
# ---------------------------------------------------------------------------

def _bootstrap_default_registry(definitions: Iterable[CategoryDefinition] | None = None) -> UnitsRegistry:
    from phq.units import catalog

    reg = UnitsRegistry()
    for definition in catalog.DEFINITIONS if definitions is None else definitions:
        reg.register(definition)
    logger.debug("Bootstrapped units registry with %d categories.", len(reg))
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


# ---------------------------------------------------------------------------
# Module-level API over the default registry
# ---------------------------------------------------------------------------

def register(definition: CategoryDefinition, replace: bool = False) -> None:
    DEFAULT_REGISTRY.register(definition, replace=replace)
    _static_conversion.cache_clear()


def abbreviation(unit: Any) -> str:
    return DEFAULT_REGISTRY.abbreviation(unit)


def parse(category: type, text: str) -> Optional[Any]:
    return DEFAULT_REGISTRY.parse(category, text)


def standard(category: Type[UnitEnum]) -> UnitEnum:
    return DEFAULT_REGISTRY.standard(category)


def related_dimensions(category: Type[UnitEnum]) -> Dimensions:
    return DEFAULT_REGISTRY.related_dimensions(category)


def consistent_unit(category: Type[UnitEnum], system: UnitSystem) -> Optional[UnitEnum]:
    return DEFAULT_REGISTRY.consistent_unit(category, system)


def related_unit_system(unit: UnitEnum) -> Optional[UnitSystem]:
    return DEFAULT_REGISTRY.related_unit_system(unit)


def to_standard(value: Any, unit: UnitEnum) -> Any:
    return DEFAULT_REGISTRY.to_standard(value, unit)


def from_standard(value: Any, unit: UnitEnum) -> Any:
    return DEFAULT_REGISTRY.from_standard(value, unit)


def convert(value: Any, source: UnitEnum, target: Any) -> Any:
    return DEFAULT_REGISTRY.convert(value, source, target)


def convert_in_place(array: np.ndarray, source: UnitEnum, target: Any) -> None:
    DEFAULT_REGISTRY.convert_in_place(array, source, target)


@lru_cache(maxsize=1024)
def _static_conversion(source: UnitEnum, target: UnitEnum, number_type: type) -> Callable[[Any], Any]:
    return compose(
        DEFAULT_REGISTRY.transform(source),
        DEFAULT_REGISTRY.transform(target),
        number_type,
    )


def static_convert(value: Any, source: UnitEnum, target: Any, number_type: type | None = None) -> Any:
    """Convert with a composed conversion cached per (source, target, number type).

    Two scale conversions fold into a single factor computed in long double,
    so results may differ from :func:`convert` in the last bit.
    """
    target = DEFAULT_REGISTRY._resolve_target(source, target)
    if number_type is None:
        if isinstance(value, (np.ndarray, np.floating)):
            number_type = number_type_of(value)
        else:
            from phq.config import get_settings
            number_type = get_settings().number_type
    return _map(value, _static_conversion(source, target, number_type))


__all__ = [
    "UnitsRegistry",
    "DEFAULT_REGISTRY",
    "register",
    "abbreviation",
    "parse",
    "standard",
    "related_dimensions",
    "consistent_unit",
    "related_unit_system",
    "to_standard",
    "from_standard",
    "convert",
    "convert_in_place",
    "static_convert",
]
