"""Electric charge and electric current units."""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.units.catalog.constants import (
    ELEMENTARY_CHARGE,
    GIGA,
    HOUR,
    KILO,
    MEGA,
    MICRO,
    MILLI,
    MINUTE,
    NANO,
    TERA,
)
from phq.units.category import CategoryDefinition, UnitEnum, conversions, one_system


class ElectricCharge(UnitEnum):
    Coulomb = auto()
    Kilocoulomb = auto()
    Megacoulomb = auto()
    Gigacoulomb = auto()
    Teracoulomb = auto()
    Millicoulomb = auto()
    Microcoulomb = auto()
    Nanocoulomb = auto()
    ElementaryCharge = auto()
    AmpereMinute = auto()
    AmpereHour = auto()
    KiloampereMinute = auto()
    KiloampereHour = auto()
    MegaampereMinute = auto()
    MegaampereHour = auto()
    GigaampereMinute = auto()
    GigaampereHour = auto()
    TeraampereMinute = auto()
    TeraampereHour = auto()
    MilliampereMinute = auto()
    MilliampereHour = auto()
    MicroampereMinute = auto()
    MicroampereHour = auto()
    NanoampereMinute = auto()
    NanoampereHour = auto()


# (prefix symbol, factor) for the coulomb and ampere-time families.
_PREFIXES = (
    ("", None),
    ("k", KILO),
    ("M", MEGA),
    ("G", GIGA),
    ("T", TERA),
    ("m", MILLI),
    ("μ", MICRO),
    ("n", NANO),
)

_AMPERE_TIME = {
    ElectricCharge.AmpereMinute: ("", MINUTE),
    ElectricCharge.AmpereHour: ("", HOUR),
    ElectricCharge.KiloampereMinute: ("k", KILO * MINUTE),
    ElectricCharge.KiloampereHour: ("k", KILO * HOUR),
    ElectricCharge.MegaampereMinute: ("M", MEGA * MINUTE),
    ElectricCharge.MegaampereHour: ("M", MEGA * HOUR),
    ElectricCharge.GigaampereMinute: ("G", GIGA * MINUTE),
    ElectricCharge.GigaampereHour: ("G", GIGA * HOUR),
    ElectricCharge.TeraampereMinute: ("T", TERA * MINUTE),
    ElectricCharge.TeraampereHour: ("T", TERA * HOUR),
    ElectricCharge.MilliampereMinute: ("m", MILLI * MINUTE),
    ElectricCharge.MilliampereHour: ("m", MILLI * HOUR),
    ElectricCharge.MicroampereMinute: ("μ", MICRO * MINUTE),
    ElectricCharge.MicroampereHour: ("μ", MICRO * HOUR),
    ElectricCharge.NanoampereMinute: ("n", NANO * MINUTE),
    ElectricCharge.NanoampereHour: ("n", NANO * HOUR),
}


def _ampere_time_abbreviation(member: ElectricCharge) -> str:
    prefix, _ = _AMPERE_TIME[member]
    suffix = "min" if member.name.endswith("Minute") else "hr"
    return f"{prefix}A·{suffix}"


_COULOMBS = dict(zip(
    (
        ElectricCharge.Coulomb,
        ElectricCharge.Kilocoulomb,
        ElectricCharge.Megacoulomb,
        ElectricCharge.Gigacoulomb,
        ElectricCharge.Teracoulomb,
        ElectricCharge.Millicoulomb,
        ElectricCharge.Microcoulomb,
        ElectricCharge.Nanocoulomb,
    ),
    _PREFIXES,
))

ELECTRIC_CHARGE = CategoryDefinition(
    category=ElectricCharge,
    standard=ElectricCharge.Coulomb,
    dimensions=dims.TIME * dims.ELECTRIC_CURRENT,
    abbreviations={
        **{member: f"{prefix}C" for member, (prefix, _) in _COULOMBS.items()},
        ElectricCharge.ElementaryCharge: "e",
        **{member: _ampere_time_abbreviation(member) for member in _AMPERE_TIME},
    },
    spellings={
        ElectricCharge.Coulomb: ("coulomb", "coulombs", "A·s", "A*s"),
        ElectricCharge.ElementaryCharge: ("elementary charge",),
        ElectricCharge.AmpereHour: ("Ah",),
        ElectricCharge.MilliampereHour: ("mAh",),
        ElectricCharge.MicroampereMinute: ("uA·min",),
        ElectricCharge.MicroampereHour: ("uA·hr",),
    },
    conversions=conversions(ElectricCharge.Coulomb, {
        **{member: factor for member, (_, factor) in _COULOMBS.items() if factor is not None},
        ElectricCharge.ElementaryCharge: ELEMENTARY_CHARGE,
        **{member: factor for member, (_, factor) in _AMPERE_TIME.items()},
    }),
    consistent_units=one_system(ElectricCharge.Coulomb),
)


class ElectricCurrent(UnitEnum):
    Ampere = auto()
    Kiloampere = auto()
    Megaampere = auto()
    Gigaampere = auto()
    Teraampere = auto()
    Milliampere = auto()
    Microampere = auto()
    Nanoampere = auto()
    ElementaryChargePerSecond = auto()
    ElementaryChargePerMinute = auto()
    ElementaryChargePerHour = auto()


_AMPERES = dict(zip(
    (
        ElectricCurrent.Ampere,
        ElectricCurrent.Kiloampere,
        ElectricCurrent.Megaampere,
        ElectricCurrent.Gigaampere,
        ElectricCurrent.Teraampere,
        ElectricCurrent.Milliampere,
        ElectricCurrent.Microampere,
        ElectricCurrent.Nanoampere,
    ),
    _PREFIXES,
))

ELECTRIC_CURRENT = CategoryDefinition(
    category=ElectricCurrent,
    standard=ElectricCurrent.Ampere,
    dimensions=dims.ELECTRIC_CURRENT,
    abbreviations={
        **{member: f"{prefix}A" for member, (prefix, _) in _AMPERES.items()},
        ElectricCurrent.ElementaryChargePerSecond: "e/s",
        ElectricCurrent.ElementaryChargePerMinute: "e/min",
        ElectricCurrent.ElementaryChargePerHour: "e/hr",
    },
    spellings={
        ElectricCurrent.Ampere: ("amp", "amps", "ampere", "amperes", "C/s"),
    },
    conversions=conversions(ElectricCurrent.Ampere, {
        **{member: factor for member, (_, factor) in _AMPERES.items() if factor is not None},
        ElectricCurrent.ElementaryChargePerSecond: ELEMENTARY_CHARGE,
        ElectricCurrent.ElementaryChargePerMinute: ELEMENTARY_CHARGE / MINUTE,
        ElectricCurrent.ElementaryChargePerHour: ELEMENTARY_CHARGE / HOUR,
    }),
    consistent_units=one_system(ElectricCurrent.Ampere),
)


DEFINITIONS = (ELECTRIC_CHARGE, ELECTRIC_CURRENT)
