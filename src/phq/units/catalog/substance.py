"""Substance amount units."""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.core.conversion import ONE
from phq.units.catalog.constants import AVOGADRO, GIGA, KILO, MEGA
from phq.units.category import CategoryDefinition, UnitEnum, conversions, one_system


class SubstanceAmount(UnitEnum):
    Mole = auto()
    Kilomole = auto()
    Megamole = auto()
    Gigamole = auto()
    Particles = auto()


SUBSTANCE_AMOUNT = CategoryDefinition(
    category=SubstanceAmount,
    standard=SubstanceAmount.Mole,
    dimensions=dims.SUBSTANCE_AMOUNT,
    abbreviations={
        SubstanceAmount.Mole: "mol",
        SubstanceAmount.Kilomole: "kmol",
        SubstanceAmount.Megamole: "Mmol",
        SubstanceAmount.Gigamole: "Gmol",
        SubstanceAmount.Particles: "particles",
    },
    spellings={
        SubstanceAmount.Mole: ("mole", "moles"),
        SubstanceAmount.Kilomole: ("kilomole", "kilomoles"),
        SubstanceAmount.Particles: ("particle", "molecules", "atoms"),
    },
    conversions=conversions(SubstanceAmount.Mole, {
        SubstanceAmount.Kilomole: KILO,
        SubstanceAmount.Megamole: MEGA,
        SubstanceAmount.Gigamole: GIGA,
        SubstanceAmount.Particles: ONE / AVOGADRO,
    }),
    consistent_units=one_system(SubstanceAmount.Mole),
)


DEFINITIONS = (SUBSTANCE_AMOUNT,)
