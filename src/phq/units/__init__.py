"""
phq.units
=========

Unit categories and the conversion API.

The category enumerations are plain data and import eagerly. The registry
functions (``convert``, ``parse``, ...) resolve lazily so that importing a
category does not build the default registry.
"""

from typing import Any

from phq.core.unit_system import STANDARD_UNIT_SYSTEM, UnitSystem
from phq.units.catalog import *  # noqa: F401,F403
from phq.units.catalog import __all__ as _CATEGORY_NAMES
from phq.units.category import CategoryDefinition, UnitEnum

_REGISTRY_NAMES = (
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
)


def __getattr__(name: str) -> Any:
    """Lazy access to the registry and its module-level functions."""
    if name in _REGISTRY_NAMES:
        from phq.units import registry
        return getattr(registry, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_REGISTRY_NAMES))


__all__ = [
    "UnitEnum",
    "CategoryDefinition",
    "UnitSystem",
    "STANDARD_UNIT_SYSTEM",
    *[name for name in _CATEGORY_NAMES if name != "DEFINITIONS"],
    *_REGISTRY_NAMES,
]
