"""Mass, force, pressure, energy and power units."""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.core.conversion import Constant
from phq.units.catalog.constants import (
    ATMOSPHERE,
    BAR,
    FOOT,
    GIGA,
    HOUR,
    INCH,
    KILO,
    MEGA,
    MICRO,
    MILE,
    MILLI,
    MINUTE,
    NANO,
    POUND_FORCE,
    POUND_MASS,
    SLINCH,
    SLUG,
)
from phq.units.category import CategoryDefinition, UnitEnum, conversions, per_system, related_from

_FORCE = dims.MASS * dims.LENGTH / dims.TIME ** 2
_ENERGY = _FORCE * dims.LENGTH
_POWER = _ENERGY / dims.TIME


class Mass(UnitEnum):
    Kilogram = auto()
    Gram = auto()
    Slug = auto()
    Slinch = auto()
    Pound = auto()


_MASS_CONSISTENT = per_system(Mass.Kilogram, Mass.Gram, Mass.Slug, Mass.Slinch)

MASS = CategoryDefinition(
    category=Mass,
    standard=Mass.Kilogram,
    dimensions=dims.MASS,
    abbreviations={
        Mass.Kilogram: "kg",
        Mass.Gram: "g",
        Mass.Slug: "slug",
        Mass.Slinch: "slinch",
        Mass.Pound: "lbm",
    },
    spellings={
        Mass.Kilogram: ("kilogram", "kilograms"),
        Mass.Gram: ("gram", "grams"),
        Mass.Slug: ("slugs",),
        Mass.Slinch: ("slinches",),
        Mass.Pound: ("lb", "lbs", "pound", "pounds"),
    },
    conversions=conversions(Mass.Kilogram, {
        Mass.Gram: MILLI,
        Mass.Slug: SLUG,
        Mass.Slinch: SLINCH,
        Mass.Pound: POUND_MASS,
    }),
    consistent_units=_MASS_CONSISTENT,
    related_unit_systems=related_from(_MASS_CONSISTENT),
)


class MassDensity(UnitEnum):
    KilogramPerCubicMetre = auto()
    GramPerCubicMillimetre = auto()
    SlugPerCubicFoot = auto()
    SlinchPerCubicInch = auto()
    PoundPerCubicFoot = auto()
    PoundPerCubicInch = auto()


_MASS_DENSITY_CONSISTENT = per_system(
    MassDensity.KilogramPerCubicMetre,
    MassDensity.GramPerCubicMillimetre,
    MassDensity.SlugPerCubicFoot,
    MassDensity.SlinchPerCubicInch,
)

MASS_DENSITY = CategoryDefinition(
    category=MassDensity,
    standard=MassDensity.KilogramPerCubicMetre,
    dimensions=dims.MASS / dims.LENGTH ** 3,
    abbreviations={
        MassDensity.KilogramPerCubicMetre: "kg/m^3",
        MassDensity.GramPerCubicMillimetre: "g/mm^3",
        MassDensity.SlugPerCubicFoot: "slug/ft^3",
        MassDensity.SlinchPerCubicInch: "slinch/in^3",
        MassDensity.PoundPerCubicFoot: "lbm/ft^3",
        MassDensity.PoundPerCubicInch: "lbm/in^3",
    },
    spellings={
        MassDensity.KilogramPerCubicMetre: ("kg/m³",),
        MassDensity.PoundPerCubicFoot: ("lb/ft^3", "lb/ft3"),
        MassDensity.PoundPerCubicInch: ("lb/in^3", "lb/in3"),
    },
    conversions=conversions(MassDensity.KilogramPerCubicMetre, {
        MassDensity.GramPerCubicMillimetre: MILLI / NANO,
        MassDensity.SlugPerCubicFoot: SLUG / FOOT ** 3,
        MassDensity.SlinchPerCubicInch: SLINCH / INCH ** 3,
        MassDensity.PoundPerCubicFoot: POUND_MASS / FOOT ** 3,
        MassDensity.PoundPerCubicInch: POUND_MASS / INCH ** 3,
    }),
    consistent_units=_MASS_DENSITY_CONSISTENT,
    related_unit_systems=related_from(_MASS_DENSITY_CONSISTENT),
)


class MassRate(UnitEnum):
    KilogramPerSecond = auto()
    GramPerSecond = auto()
    SlugPerSecond = auto()
    SlinchPerSecond = auto()
    PoundPerSecond = auto()


MASS_RATE = CategoryDefinition(
    category=MassRate,
    standard=MassRate.KilogramPerSecond,
    dimensions=dims.MASS / dims.TIME,
    abbreviations={
        MassRate.KilogramPerSecond: "kg/s",
        MassRate.GramPerSecond: "g/s",
        MassRate.SlugPerSecond: "slug/s",
        MassRate.SlinchPerSecond: "slinch/s",
        MassRate.PoundPerSecond: "lbm/s",
    },
    spellings={
        MassRate.PoundPerSecond: ("lb/s",),
    },
    conversions=conversions(MassRate.KilogramPerSecond, {
        MassRate.GramPerSecond: MILLI,
        MassRate.SlugPerSecond: SLUG,
        MassRate.SlinchPerSecond: SLINCH,
        MassRate.PoundPerSecond: POUND_MASS,
    }),
    consistent_units=per_system(
        MassRate.KilogramPerSecond,
        MassRate.GramPerSecond,
        MassRate.SlugPerSecond,
        MassRate.SlinchPerSecond,
    ),
)


class Force(UnitEnum):
    Newton = auto()
    Kilonewton = auto()
    Meganewton = auto()
    Giganewton = auto()
    Millinewton = auto()
    Micronewton = auto()
    Nanonewton = auto()
    Pound = auto()


FORCE = CategoryDefinition(
    category=Force,
    standard=Force.Newton,
    dimensions=_FORCE,
    abbreviations={
        Force.Newton: "N",
        Force.Kilonewton: "kN",
        Force.Meganewton: "MN",
        Force.Giganewton: "GN",
        Force.Millinewton: "mN",
        Force.Micronewton: "μN",
        Force.Nanonewton: "nN",
        Force.Pound: "lbf",
    },
    spellings={
        Force.Newton: ("newton", "newtons", "kg·m/s^2"),
        Force.Pound: ("pound-force",),
    },
    conversions=conversions(Force.Newton, {
        Force.Kilonewton: KILO,
        Force.Meganewton: MEGA,
        Force.Giganewton: GIGA,
        Force.Millinewton: MILLI,
        Force.Micronewton: MICRO,
        Force.Nanonewton: NANO,
        Force.Pound: POUND_FORCE,
    }),
    consistent_units=per_system(Force.Newton, Force.Micronewton, Force.Pound, Force.Pound),
)


class Pressure(UnitEnum):
    Pascal = auto()
    Kilopascal = auto()
    Megapascal = auto()
    Gigapascal = auto()
    Bar = auto()
    Atmosphere = auto()
    PoundPerSquareFoot = auto()
    PoundPerSquareInch = auto()


PRESSURE = CategoryDefinition(
    category=Pressure,
    standard=Pressure.Pascal,
    dimensions=_FORCE / dims.LENGTH ** 2,
    abbreviations={
        Pressure.Pascal: "Pa",
        Pressure.Kilopascal: "kPa",
        Pressure.Megapascal: "MPa",
        Pressure.Gigapascal: "GPa",
        Pressure.Bar: "bar",
        Pressure.Atmosphere: "atm",
        Pressure.PoundPerSquareFoot: "lbf/ft^2",
        Pressure.PoundPerSquareInch: "lbf/in^2",
    },
    spellings={
        Pressure.Pascal: ("pascal", "pascals", "N/m^2", "N/m2"),
        Pressure.Kilopascal: ("kilopascal", "kilopascals"),
        Pressure.Megapascal: ("megapascal", "megapascals", "N/mm^2", "N/mm2"),
        Pressure.Gigapascal: ("gigapascal", "gigapascals"),
        Pressure.Bar: ("bars",),
        Pressure.Atmosphere: ("atmosphere", "atmospheres"),
        Pressure.PoundPerSquareFoot: ("psf",),
        Pressure.PoundPerSquareInch: ("psi",),
    },
    conversions=conversions(Pressure.Pascal, {
        Pressure.Kilopascal: KILO,
        Pressure.Megapascal: MEGA,
        Pressure.Gigapascal: GIGA,
        Pressure.Bar: BAR,
        Pressure.Atmosphere: ATMOSPHERE,
        Pressure.PoundPerSquareFoot: POUND_FORCE / FOOT ** 2,
        Pressure.PoundPerSquareInch: POUND_FORCE / INCH ** 2,
    }),
    consistent_units=per_system(
        Pressure.Pascal, Pressure.Pascal, Pressure.PoundPerSquareFoot, Pressure.PoundPerSquareInch,
    ),
)


class Energy(UnitEnum):
    Joule = auto()
    Millijoule = auto()
    Microjoule = auto()
    Nanojoule = auto()
    Kilojoule = auto()
    Megajoule = auto()
    Gigajoule = auto()
    FootPound = auto()
    InchPound = auto()


ENERGY = CategoryDefinition(
    category=Energy,
    standard=Energy.Joule,
    dimensions=_ENERGY,
    abbreviations={
        Energy.Joule: "J",
        Energy.Millijoule: "mJ",
        Energy.Microjoule: "μJ",
        Energy.Nanojoule: "nJ",
        Energy.Kilojoule: "kJ",
        Energy.Megajoule: "MJ",
        Energy.Gigajoule: "GJ",
        Energy.FootPound: "ft·lbf",
        Energy.InchPound: "in·lbf",
    },
    spellings={
        Energy.Joule: ("joule", "joules", "N·m", "N*m"),
        Energy.FootPound: ("ft-lbf", "ftlbf"),
        Energy.InchPound: ("in-lbf", "inlbf"),
    },
    conversions=conversions(Energy.Joule, {
        Energy.Millijoule: MILLI,
        Energy.Microjoule: MICRO,
        Energy.Nanojoule: NANO,
        Energy.Kilojoule: KILO,
        Energy.Megajoule: MEGA,
        Energy.Gigajoule: GIGA,
        Energy.FootPound: POUND_FORCE * FOOT,
        Energy.InchPound: POUND_FORCE * INCH,
    }),
    consistent_units=per_system(Energy.Joule, Energy.Nanojoule, Energy.FootPound, Energy.InchPound),
)


class Power(UnitEnum):
    Watt = auto()
    Milliwatt = auto()
    Microwatt = auto()
    Nanowatt = auto()
    Kilowatt = auto()
    Megawatt = auto()
    Gigawatt = auto()
    FootPoundPerSecond = auto()
    InchPoundPerSecond = auto()


POWER = CategoryDefinition(
    category=Power,
    standard=Power.Watt,
    dimensions=_POWER,
    abbreviations={
        Power.Watt: "W",
        Power.Milliwatt: "mW",
        Power.Microwatt: "μW",
        Power.Nanowatt: "nW",
        Power.Kilowatt: "kW",
        Power.Megawatt: "MW",
        Power.Gigawatt: "GW",
        Power.FootPoundPerSecond: "ft·lbf/s",
        Power.InchPoundPerSecond: "in·lbf/s",
    },
    spellings={
        Power.Watt: ("watt", "watts", "J/s"),
        Power.Kilowatt: ("kilowatt", "kilowatts"),
        Power.Megawatt: ("megawatt", "megawatts"),
    },
    conversions=conversions(Power.Watt, {
        Power.Milliwatt: MILLI,
        Power.Microwatt: MICRO,
        Power.Nanowatt: NANO,
        Power.Kilowatt: KILO,
        Power.Megawatt: MEGA,
        Power.Gigawatt: GIGA,
        Power.FootPoundPerSecond: POUND_FORCE * FOOT,
        Power.InchPoundPerSecond: POUND_FORCE * INCH,
    }),
    consistent_units=per_system(
        Power.Watt, Power.Nanowatt, Power.FootPoundPerSecond, Power.InchPoundPerSecond,
    ),
)


class EnergyFlux(UnitEnum):
    WattPerSquareMetre = auto()
    NanowattPerSquareMillimetre = auto()
    FootPoundPerSquareFootPerSecond = auto()
    InchPoundPerSquareInchPerSecond = auto()


ENERGY_FLUX = CategoryDefinition(
    category=EnergyFlux,
    standard=EnergyFlux.WattPerSquareMetre,
    dimensions=_POWER / dims.LENGTH ** 2,
    abbreviations={
        EnergyFlux.WattPerSquareMetre: "W/m^2",
        EnergyFlux.NanowattPerSquareMillimetre: "nW/mm^2",
        EnergyFlux.FootPoundPerSquareFootPerSecond: "ft·lbf/ft^2/s",
        EnergyFlux.InchPoundPerSquareInchPerSecond: "in·lbf/in^2/s",
    },
    spellings={
        EnergyFlux.WattPerSquareMetre: (
            "W/m²", "W/(m^2)", "J/m^2/s", "J/(m^2·s)", "J/(m^2*s)", "N/m/s", "kg/s^3",
        ),
        EnergyFlux.NanowattPerSquareMillimetre: (
            "nW/mm²", "nJ/mm^2/s", "nJ/(mm^2·s)", "μN/mm/s", "uN/mm/s", "g/s^3",
        ),
        EnergyFlux.FootPoundPerSquareFootPerSecond: ("lbf/ft/s",),
        EnergyFlux.InchPoundPerSquareInchPerSecond: ("lbf/in/s",),
    },
    conversions=conversions(EnergyFlux.WattPerSquareMetre, {
        EnergyFlux.NanowattPerSquareMillimetre: NANO / MICRO,
        EnergyFlux.FootPoundPerSquareFootPerSecond: POUND_FORCE / FOOT,
        EnergyFlux.InchPoundPerSquareInchPerSecond: POUND_FORCE / INCH,
    }),
    consistent_units=per_system(
        EnergyFlux.WattPerSquareMetre,
        EnergyFlux.NanowattPerSquareMillimetre,
        EnergyFlux.FootPoundPerSquareFootPerSecond,
        EnergyFlux.InchPoundPerSquareInchPerSecond,
    ),
)


class DynamicViscosity(UnitEnum):
    PascalSecond = auto()
    KilopascalSecond = auto()
    MegapascalSecond = auto()
    GigapascalSecond = auto()
    PoundSecondPerSquareFoot = auto()
    PoundSecondPerSquareInch = auto()


DYNAMIC_VISCOSITY = CategoryDefinition(
    category=DynamicViscosity,
    standard=DynamicViscosity.PascalSecond,
    dimensions=dims.MASS / dims.LENGTH / dims.TIME,
    abbreviations={
        DynamicViscosity.PascalSecond: "Pa·s",
        DynamicViscosity.KilopascalSecond: "kPa·s",
        DynamicViscosity.MegapascalSecond: "MPa·s",
        DynamicViscosity.GigapascalSecond: "GPa·s",
        DynamicViscosity.PoundSecondPerSquareFoot: "lbf·s/ft^2",
        DynamicViscosity.PoundSecondPerSquareInch: "lbf·s/in^2",
    },
    spellings={
        DynamicViscosity.PascalSecond: ("Pa-s", "kg/m/s", "N·s/m^2"),
        DynamicViscosity.PoundSecondPerSquareInch: ("reyn",),
    },
    conversions=conversions(DynamicViscosity.PascalSecond, {
        DynamicViscosity.KilopascalSecond: KILO,
        DynamicViscosity.MegapascalSecond: MEGA,
        DynamicViscosity.GigapascalSecond: GIGA,
        DynamicViscosity.PoundSecondPerSquareFoot: POUND_FORCE / FOOT ** 2,
        DynamicViscosity.PoundSecondPerSquareInch: POUND_FORCE / INCH ** 2,
    }),
    consistent_units=per_system(
        DynamicViscosity.PascalSecond,
        DynamicViscosity.PascalSecond,
        DynamicViscosity.PoundSecondPerSquareFoot,
        DynamicViscosity.PoundSecondPerSquareInch,
    ),
)


class SpecificEnergy(UnitEnum):
    JoulePerKilogram = auto()
    NanojoulePerGram = auto()
    FootPoundPerSlug = auto()
    InchPoundPerSlinch = auto()


SPECIFIC_ENERGY = CategoryDefinition(
    category=SpecificEnergy,
    standard=SpecificEnergy.JoulePerKilogram,
    dimensions=_ENERGY / dims.MASS,
    abbreviations={
        SpecificEnergy.JoulePerKilogram: "J/kg",
        SpecificEnergy.NanojoulePerGram: "nJ/g",
        SpecificEnergy.FootPoundPerSlug: "ft·lbf/slug",
        SpecificEnergy.InchPoundPerSlinch: "in·lbf/slinch",
    },
    spellings={
        SpecificEnergy.JoulePerKilogram: ("m^2/s^2",),
        SpecificEnergy.NanojoulePerGram: ("mm^2/s^2",),
        SpecificEnergy.FootPoundPerSlug: ("ft^2/s^2",),
        SpecificEnergy.InchPoundPerSlinch: ("in^2/s^2",),
    },
    conversions=conversions(SpecificEnergy.JoulePerKilogram, {
        SpecificEnergy.NanojoulePerGram: NANO / MILLI,
        SpecificEnergy.FootPoundPerSlug: POUND_FORCE * FOOT / SLUG,
        SpecificEnergy.InchPoundPerSlinch: POUND_FORCE * INCH / SLINCH,
    }),
    consistent_units=per_system(
        SpecificEnergy.JoulePerKilogram,
        SpecificEnergy.NanojoulePerGram,
        SpecificEnergy.FootPoundPerSlug,
        SpecificEnergy.InchPoundPerSlinch,
    ),
)


class SpecificPower(UnitEnum):
    WattPerKilogram = auto()
    NanowattPerGram = auto()
    FootPoundPerSlugPerSecond = auto()
    InchPoundPerSlinchPerSecond = auto()


SPECIFIC_POWER = CategoryDefinition(
    category=SpecificPower,
    standard=SpecificPower.WattPerKilogram,
    dimensions=_POWER / dims.MASS,
    abbreviations={
        SpecificPower.WattPerKilogram: "W/kg",
        SpecificPower.NanowattPerGram: "nW/g",
        SpecificPower.FootPoundPerSlugPerSecond: "ft·lbf/slug/s",
        SpecificPower.InchPoundPerSlinchPerSecond: "in·lbf/slinch/s",
    },
    spellings={
        SpecificPower.WattPerKilogram: ("J/kg/s", "m^2/s^3"),
    },
    conversions=conversions(SpecificPower.WattPerKilogram, {
        SpecificPower.NanowattPerGram: NANO / MILLI,
        SpecificPower.FootPoundPerSlugPerSecond: POUND_FORCE * FOOT / SLUG,
        SpecificPower.InchPoundPerSlinchPerSecond: POUND_FORCE * INCH / SLINCH,
    }),
    consistent_units=per_system(
        SpecificPower.WattPerKilogram,
        SpecificPower.NanowattPerGram,
        SpecificPower.FootPoundPerSlugPerSecond,
        SpecificPower.InchPoundPerSlinchPerSecond,
    ),
)


class TransportEnergyConsumption(UnitEnum):
    JoulePerMile = auto()
    JoulePerKilometre = auto()
    JoulePerMetre = auto()
    NanojoulePerMillimetre = auto()
    KilojoulePerMile = auto()
    WattMinutePerMile = auto()
    WattHourPerMile = auto()
    WattMinutePerKilometre = auto()
    WattHourPerKilometre = auto()
    WattMinutePerMetre = auto()
    WattHourPerMetre = auto()
    KilowattMinutePerMile = auto()
    KilowattHourPerMile = auto()
    KilowattMinutePerMetre = auto()
    KilowattHourPerMetre = auto()
    FootPoundPerFoot = auto()
    InchPoundPerInch = auto()


_TEC = TransportEnergyConsumption
_KILOMETRE = Constant("1000")

TRANSPORT_ENERGY_CONSUMPTION = CategoryDefinition(
    category=TransportEnergyConsumption,
    standard=_TEC.JoulePerMetre,
    dimensions=_ENERGY / dims.LENGTH,
    abbreviations={
        _TEC.JoulePerMile: "J/mi",
        _TEC.JoulePerKilometre: "J/km",
        _TEC.JoulePerMetre: "J/m",
        _TEC.NanojoulePerMillimetre: "nJ/mm",
        _TEC.KilojoulePerMile: "kJ/mi",
        _TEC.WattMinutePerMile: "W·min/mi",
        _TEC.WattHourPerMile: "W·hr/mi",
        _TEC.WattMinutePerKilometre: "W·min/km",
        _TEC.WattHourPerKilometre: "W·hr/km",
        _TEC.WattMinutePerMetre: "W·min/m",
        _TEC.WattHourPerMetre: "W·hr/m",
        _TEC.KilowattMinutePerMile: "kW·min/mi",
        _TEC.KilowattHourPerMile: "kW·hr/mi",
        _TEC.KilowattMinutePerMetre: "kW·min/m",
        _TEC.KilowattHourPerMetre: "kW·hr/m",
        _TEC.FootPoundPerFoot: "ft·lbf/ft",
        _TEC.InchPoundPerInch: "in·lbf/in",
    },
    spellings={
        _TEC.JoulePerMetre: ("N",),
        _TEC.WattHourPerKilometre: ("Wh/km", "W·h/km"),
        _TEC.KilowattHourPerMile: ("kWh/mi", "kW·h/mi"),
    },
    conversions=conversions(_TEC.JoulePerMetre, {
        _TEC.JoulePerMile: Constant("1") / MILE,
        _TEC.JoulePerKilometre: Constant("1") / _KILOMETRE,
        _TEC.NanojoulePerMillimetre: NANO / MILLI,
        _TEC.KilojoulePerMile: KILO / MILE,
        _TEC.WattMinutePerMile: MINUTE / MILE,
        _TEC.WattHourPerMile: HOUR / MILE,
        _TEC.WattMinutePerKilometre: MINUTE / _KILOMETRE,
        _TEC.WattHourPerKilometre: HOUR / _KILOMETRE,
        _TEC.WattMinutePerMetre: MINUTE,
        _TEC.WattHourPerMetre: HOUR,
        _TEC.KilowattMinutePerMile: KILO * MINUTE / MILE,
        _TEC.KilowattHourPerMile: KILO * HOUR / MILE,
        _TEC.KilowattMinutePerMetre: KILO * MINUTE,
        _TEC.KilowattHourPerMetre: KILO * HOUR,
        _TEC.FootPoundPerFoot: POUND_FORCE,
        _TEC.InchPoundPerInch: POUND_FORCE,
    }),
    consistent_units=per_system(
        _TEC.JoulePerMetre, _TEC.NanojoulePerMillimetre, _TEC.FootPoundPerFoot, _TEC.InchPoundPerInch,
    ),
)


DEFINITIONS = (
    MASS,
    MASS_DENSITY,
    MASS_RATE,
    FORCE,
    PRESSURE,
    ENERGY,
    POWER,
    ENERGY_FLUX,
    DYNAMIC_VISCOSITY,
    SPECIFIC_ENERGY,
    SPECIFIC_POWER,
    TRANSPORT_ENERGY_CONSUMPTION,
)
