"""
phq: physical quantities over a table-driven unit-conversion engine.

phq groups units into categories (Length, Pressure, ElectricCharge, ...). Each
category has one standard unit, a dimension signature, abbreviations and
spellings, and a transform from every unit to the standard one. Quantities
store their value in the standard unit and convert only when built from, or
rendered in, another unit.

This module exposes a minimal, stable public API. The quantity classes and the
units registry are imported lazily to avoid import-time side effects.
"""

import logging
from importlib import metadata as _metadata
from pathlib import Path as _Path
from typing import Any

from phq.config import configure, get_settings, override, reset
from phq.core.dimensions import Dimensions
from phq.core.unit_system import UnitSystem
from phq.core.utils import Precision, print_number
from phq.core.values import Dyad, SymmetricDyad, Vector
from phq.exceptions import PhQError, RegistrationError, UnitMismatchError, UnknownCategoryError, UnknownUnitError

__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("phq")
except _metadata.PackageNotFoundError:
    import tomllib
    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

logging.getLogger(__name__).addHandler(logging.NullHandler())

_LAZY_MODULES = {
    "units": "phq.units",
    "quantity": "phq.quantity",
}
_LAZY_FUNCTIONS = (
    "abbreviation",
    "parse",
    "convert",
    "convert_in_place",
    "static_convert",
    "to_standard",
    "from_standard",
    "standard",
    "related_dimensions",
    "consistent_unit",
    "related_unit_system",
)


def __getattr__(name: str) -> Any:
    """Lazy access to subpackages, registry functions and quantity classes."""
    import importlib

    if name in _LAZY_MODULES:
        return importlib.import_module(_LAZY_MODULES[name])
    if name in _LAZY_FUNCTIONS:
        return getattr(importlib.import_module("phq.units.registry"), name)
    quantity = importlib.import_module("phq.quantity")
    if name in quantity.__all__:
        return getattr(quantity, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__license__",
    "Dimensions",
    "UnitSystem",
    "Precision",
    "print_number",
    "Vector",
    "SymmetricDyad",
    "Dyad",
    "PhQError",
    "RegistrationError",
    "UnitMismatchError",
    "UnknownCategoryError",
    "UnknownUnitError",
    "configure",
    "get_settings",
    "override",
    "reset",
    *_LAZY_MODULES,
    *_LAZY_FUNCTIONS,
]
