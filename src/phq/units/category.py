"""
phq.units.category
==================

Building blocks for unit categories.

A unit *category* is an :class:`UnitEnum` subclass whose members are the
category's unit variants. A :class:`CategoryDefinition` holds everything the
registry needs to know about one category:

- the standard variant, which is the conversion pivot;
- the dimension signature;
- abbreviations and spellings;
- one transform per variant;
- the consistent variant for each unit system;
- the variants that are the preferred choice of a unit system.

Definitions are plain data. Validation happens when a definition is registered
(see :mod:`phq.units.registry`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Type, Union

from phq.core.conversion import Affine, Constant, Identity, Scale, Transform
from phq.core.dimensions import Dimensions
from phq.core.unit_system import UnitSystem


class UnitEnum(Enum):
    """Base class of every unit category enumeration.

    Members print as their abbreviation: ``str(Length.Metre) == "m"``.
    """

    @property
    def abbreviation(self) -> str:
        # Local import keeps the catalog importable before the registry exists.
        from phq.units.registry import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.abbreviation(self)

    @classmethod
    def parse(cls, text: str):
        """Return the member spelled by ``text`` or ``None``."""
        from phq.units.registry import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.parse(cls, text)

    @classmethod
    def standard(cls):
        from phq.units.registry import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.standard(cls)

    def __str__(self) -> str:
        return self.abbreviation


@dataclass(frozen=True)
class CategoryDefinition:
    """Registration record for one unit category."""

    category: Type[UnitEnum]
    standard: UnitEnum
    dimensions: Dimensions
    abbreviations: Mapping[UnitEnum, str]
    conversions: Mapping[UnitEnum, Transform]
    consistent_units: Mapping[UnitSystem, UnitEnum]
    spellings: Mapping[UnitEnum, Tuple[str, ...]] = field(default_factory=dict)
    related_unit_systems: Mapping[UnitEnum, UnitSystem] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.category.__name__


# ---------------------------------------------------------------------------
# Helpers for writing catalog tables
# ---------------------------------------------------------------------------
FactorLike = Union[Constant, str, int, Transform]


def conversions(standard: UnitEnum, factors: Mapping[UnitEnum, FactorLike]) -> Dict[UnitEnum, Transform]:
    """Turn a ``{variant: factor}`` table into transforms.

    The standard variant always gets :class:`Identity`. A plain factor becomes
    a :class:`Scale`; transforms (e.g. :class:`Affine`) pass through.
    """
    table: Dict[UnitEnum, Transform] = {}
    for unit, factor in factors.items():
        if unit is standard:
            table[unit] = Identity()
        elif isinstance(factor, (Identity, Scale, Affine)):
            table[unit] = factor
        else:
            table[unit] = Scale(Constant(factor))
    if standard not in table:
        table[standard] = Identity()
    return table


_ASCII_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("·", "*"),
    ("μ", "u"),
    ("°", "deg"),
)


def ascii_spellings(text: str) -> Tuple[str, ...]:
    """ASCII renderings of an abbreviation: ``"μin^2"`` -> ``("uin^2", "uin2")``."""
    plain = text
    for src, dst in _ASCII_REPLACEMENTS:
        plain = plain.replace(src, dst)
    out = []
    for candidate in (plain, plain.replace("^", ""), text.replace("^", "")):
        if candidate != text and candidate not in out:
            out.append(candidate)
    return tuple(out)


def derived_spellings(abbreviations: Mapping[UnitEnum, str]) -> Dict[UnitEnum, Tuple[str, ...]]:
    return {unit: ascii_spellings(text) for unit, text in abbreviations.items()}


def one_system(unit: UnitEnum) -> Dict[UnitSystem, UnitEnum]:
    """Consistent-unit table for a category whose unit is the same in every system."""
    return {system: unit for system in UnitSystem}


def per_system(mks: Any, mmgs: Any, fps: Any, ips: Any) -> Dict[UnitSystem, Any]:
    return {
        UnitSystem.MetreKilogramSecondKelvin: mks,
        UnitSystem.MillimetreGramSecondKelvin: mmgs,
        UnitSystem.FootPoundSecondRankine: fps,
        UnitSystem.InchPoundSecondRankine: ips,
    }


def related_from(consistent: Mapping[UnitSystem, UnitEnum]) -> Dict[UnitEnum, UnitSystem]:
    """Reverse a consistent-unit table where each system picks a distinct unit."""
    reverse: Dict[UnitEnum, UnitSystem] = {}
    for system, unit in consistent.items():
        if unit in reverse:
            # Shared by several systems: not tied to any single one.
            reverse[unit] = None  # type: ignore[assignment]
        else:
            reverse[unit] = system
    return {unit: system for unit, system in reverse.items() if system is not None}


__all__ = [
    "UnitEnum",
    "CategoryDefinition",
    "conversions",
    "ascii_spellings",
    "derived_spellings",
    "one_system",
    "per_system",
    "related_from",
]
