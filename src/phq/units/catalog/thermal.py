"""Temperature and heat-transfer units.

Temperature is the one category with affine variants: degrees Celsius and
degrees Fahrenheit carry an offset from absolute zero. Differences, gradients
and the heat-transfer categories only ever scale.
"""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.core.conversion import ONE, Affine
from phq.units.catalog.constants import (
    CELSIUS_OFFSET,
    FAHRENHEIT_OFFSET,
    FOOT,
    INCH,
    KELVIN_PER_RANKINE,
    MILLI,
    NANO,
    POUND_FORCE,
    RANKINE,
    SLINCH,
    SLUG,
)
from phq.units.category import CategoryDefinition, UnitEnum, conversions, per_system

_ENERGY = dims.MASS * dims.LENGTH ** 2 / dims.TIME ** 2
_POWER = _ENERGY / dims.TIME


class Temperature(UnitEnum):
    Kelvin = auto()
    Celsius = auto()
    Rankine = auto()
    Fahrenheit = auto()


TEMPERATURE = CategoryDefinition(
    category=Temperature,
    standard=Temperature.Kelvin,
    dimensions=dims.TEMPERATURE,
    abbreviations={
        Temperature.Kelvin: "K",
        Temperature.Celsius: "°C",
        Temperature.Rankine: "°R",
        Temperature.Fahrenheit: "°F",
    },
    spellings={
        Temperature.Kelvin: ("kelvin",),
        Temperature.Celsius: ("C", "celsius"),
        Temperature.Rankine: ("R", "rankine"),
        Temperature.Fahrenheit: ("F", "fahrenheit"),
    },
    conversions=conversions(Temperature.Kelvin, {
        Temperature.Celsius: Affine(ONE, CELSIUS_OFFSET),
        Temperature.Rankine: RANKINE,
        Temperature.Fahrenheit: Affine(RANKINE, FAHRENHEIT_OFFSET),
    }),
    consistent_units=per_system(
        Temperature.Kelvin, Temperature.Kelvin, Temperature.Rankine, Temperature.Rankine,
    ),
)


class TemperatureDifference(UnitEnum):
    Kelvin = auto()
    Celsius = auto()
    Rankine = auto()
    Fahrenheit = auto()


TEMPERATURE_DIFFERENCE = CategoryDefinition(
    category=TemperatureDifference,
    standard=TemperatureDifference.Kelvin,
    dimensions=dims.TEMPERATURE,
    abbreviations={
        TemperatureDifference.Kelvin: "K",
        TemperatureDifference.Celsius: "°C",
        TemperatureDifference.Rankine: "°R",
        TemperatureDifference.Fahrenheit: "°F",
    },
    spellings={
        TemperatureDifference.Kelvin: ("ΔK",),
        TemperatureDifference.Celsius: ("C", "Δ°C"),
        TemperatureDifference.Rankine: ("R", "Δ°R"),
        TemperatureDifference.Fahrenheit: ("F", "Δ°F"),
    },
    conversions=conversions(TemperatureDifference.Kelvin, {
        TemperatureDifference.Celsius: ONE,
        TemperatureDifference.Rankine: RANKINE,
        TemperatureDifference.Fahrenheit: RANKINE,
    }),
    consistent_units=per_system(
        TemperatureDifference.Kelvin,
        TemperatureDifference.Kelvin,
        TemperatureDifference.Rankine,
        TemperatureDifference.Rankine,
    ),
)


class TemperatureGradient(UnitEnum):
    KelvinPerMetre = auto()
    CelsiusPerMetre = auto()
    KelvinPerMillimetre = auto()
    CelsiusPerMillimetre = auto()
    RankinePerFoot = auto()
    FahrenheitPerFoot = auto()
    RankinePerInch = auto()
    FahrenheitPerInch = auto()


_PER_MILLIMETRE = ONE / MILLI

TEMPERATURE_GRADIENT = CategoryDefinition(
    category=TemperatureGradient,
    standard=TemperatureGradient.KelvinPerMetre,
    dimensions=dims.TEMPERATURE / dims.LENGTH,
    abbreviations={
        TemperatureGradient.KelvinPerMetre: "K/m",
        TemperatureGradient.CelsiusPerMetre: "°C/m",
        TemperatureGradient.KelvinPerMillimetre: "K/mm",
        TemperatureGradient.CelsiusPerMillimetre: "°C/mm",
        TemperatureGradient.RankinePerFoot: "°R/ft",
        TemperatureGradient.FahrenheitPerFoot: "°F/ft",
        TemperatureGradient.RankinePerInch: "°R/in",
        TemperatureGradient.FahrenheitPerInch: "°F/in",
    },
    spellings={
        TemperatureGradient.CelsiusPerMetre: ("C/m",),
        TemperatureGradient.CelsiusPerMillimetre: ("C/mm",),
        TemperatureGradient.RankinePerFoot: ("R/ft",),
        TemperatureGradient.FahrenheitPerFoot: ("F/ft",),
        TemperatureGradient.RankinePerInch: ("R/in",),
        TemperatureGradient.FahrenheitPerInch: ("F/in",),
    },
    conversions=conversions(TemperatureGradient.KelvinPerMetre, {
        TemperatureGradient.CelsiusPerMetre: ONE,
        TemperatureGradient.KelvinPerMillimetre: _PER_MILLIMETRE,
        TemperatureGradient.CelsiusPerMillimetre: _PER_MILLIMETRE,
        TemperatureGradient.RankinePerFoot: RANKINE / FOOT,
        TemperatureGradient.FahrenheitPerFoot: RANKINE / FOOT,
        TemperatureGradient.RankinePerInch: RANKINE / INCH,
        TemperatureGradient.FahrenheitPerInch: RANKINE / INCH,
    }),
    consistent_units=per_system(
        TemperatureGradient.KelvinPerMetre,
        TemperatureGradient.KelvinPerMillimetre,
        TemperatureGradient.RankinePerFoot,
        TemperatureGradient.RankinePerInch,
    ),
)


class HeatCapacity(UnitEnum):
    JoulePerKelvin = auto()
    NanojoulePerKelvin = auto()
    FootPoundPerRankine = auto()
    InchPoundPerRankine = auto()


HEAT_CAPACITY = CategoryDefinition(
    category=HeatCapacity,
    standard=HeatCapacity.JoulePerKelvin,
    dimensions=_ENERGY / dims.TEMPERATURE,
    abbreviations={
        HeatCapacity.JoulePerKelvin: "J/K",
        HeatCapacity.NanojoulePerKelvin: "nJ/K",
        HeatCapacity.FootPoundPerRankine: "ft·lbf/°R",
        HeatCapacity.InchPoundPerRankine: "in·lbf/°R",
    },
    spellings={
        HeatCapacity.FootPoundPerRankine: ("ft·lbf/R", "ft*lbf/R"),
        HeatCapacity.InchPoundPerRankine: ("in·lbf/R", "in*lbf/R"),
    },
    conversions=conversions(HeatCapacity.JoulePerKelvin, {
        HeatCapacity.NanojoulePerKelvin: NANO,
        HeatCapacity.FootPoundPerRankine: POUND_FORCE * FOOT * KELVIN_PER_RANKINE,
        HeatCapacity.InchPoundPerRankine: POUND_FORCE * INCH * KELVIN_PER_RANKINE,
    }),
    consistent_units=per_system(
        HeatCapacity.JoulePerKelvin,
        HeatCapacity.NanojoulePerKelvin,
        HeatCapacity.FootPoundPerRankine,
        HeatCapacity.InchPoundPerRankine,
    ),
)


class SpecificHeatCapacity(UnitEnum):
    JoulePerKilogramPerKelvin = auto()
    NanojoulePerGramPerKelvin = auto()
    FootPoundPerSlugPerRankine = auto()
    InchPoundPerSlinchPerRankine = auto()


SPECIFIC_HEAT_CAPACITY = CategoryDefinition(
    category=SpecificHeatCapacity,
    standard=SpecificHeatCapacity.JoulePerKilogramPerKelvin,
    dimensions=_ENERGY / dims.MASS / dims.TEMPERATURE,
    abbreviations={
        SpecificHeatCapacity.JoulePerKilogramPerKelvin: "J/kg/K",
        SpecificHeatCapacity.NanojoulePerGramPerKelvin: "nJ/g/K",
        SpecificHeatCapacity.FootPoundPerSlugPerRankine: "ft·lbf/slug/°R",
        SpecificHeatCapacity.InchPoundPerSlinchPerRankine: "in·lbf/slinch/°R",
    },
    spellings={
        SpecificHeatCapacity.JoulePerKilogramPerKelvin: ("J/(kg·K)", "J/(kg*K)"),
        SpecificHeatCapacity.NanojoulePerGramPerKelvin: ("nJ/(g·K)", "nJ/(g*K)"),
    },
    conversions=conversions(SpecificHeatCapacity.JoulePerKilogramPerKelvin, {
        SpecificHeatCapacity.NanojoulePerGramPerKelvin: NANO / MILLI,
        SpecificHeatCapacity.FootPoundPerSlugPerRankine: POUND_FORCE * FOOT / SLUG * KELVIN_PER_RANKINE,
        SpecificHeatCapacity.InchPoundPerSlinchPerRankine: POUND_FORCE * INCH / SLINCH * KELVIN_PER_RANKINE,
    }),
    consistent_units=per_system(
        SpecificHeatCapacity.JoulePerKilogramPerKelvin,
        SpecificHeatCapacity.NanojoulePerGramPerKelvin,
        SpecificHeatCapacity.FootPoundPerSlugPerRankine,
        SpecificHeatCapacity.InchPoundPerSlinchPerRankine,
    ),
)


class ThermalConductivity(UnitEnum):
    WattPerMetrePerKelvin = auto()
    NanowattPerMillimetrePerKelvin = auto()
    PoundPerSecondPerRankine = auto()


THERMAL_CONDUCTIVITY = CategoryDefinition(
    category=ThermalConductivity,
    standard=ThermalConductivity.WattPerMetrePerKelvin,
    dimensions=_POWER / dims.LENGTH / dims.TEMPERATURE,
    abbreviations={
        ThermalConductivity.WattPerMetrePerKelvin: "W/m/K",
        ThermalConductivity.NanowattPerMillimetrePerKelvin: "nW/mm/K",
        ThermalConductivity.PoundPerSecondPerRankine: "lbf/s/°R",
    },
    spellings={
        ThermalConductivity.WattPerMetrePerKelvin: ("W/(m·K)", "W/(m*K)"),
        ThermalConductivity.NanowattPerMillimetrePerKelvin: ("nW/(mm·K)", "nW/(mm*K)"),
        ThermalConductivity.PoundPerSecondPerRankine: ("lbf/s/R", "ft·lbf/ft/s/°R", "in·lbf/in/s/°R"),
    },
    conversions=conversions(ThermalConductivity.WattPerMetrePerKelvin, {
        ThermalConductivity.NanowattPerMillimetrePerKelvin: NANO / MILLI,
        ThermalConductivity.PoundPerSecondPerRankine: POUND_FORCE * KELVIN_PER_RANKINE,
    }),
    consistent_units=per_system(
        ThermalConductivity.WattPerMetrePerKelvin,
        ThermalConductivity.NanowattPerMillimetrePerKelvin,
        ThermalConductivity.PoundPerSecondPerRankine,
        ThermalConductivity.PoundPerSecondPerRankine,
    ),
)


def _per_temperature(category):
    """Definition fields shared by the two reciprocal-temperature categories."""
    kelvin, celsius, rankine, fahrenheit = list(category)
    return dict(
        category=category,
        standard=kelvin,
        dimensions=dims.TEMPERATURE ** -1,
        conversions=conversions(kelvin, {
            celsius: ONE,
            rankine: KELVIN_PER_RANKINE,
            fahrenheit: KELVIN_PER_RANKINE,
        }),
        consistent_units=per_system(kelvin, kelvin, rankine, rankine),
    )


class ThermalExpansion(UnitEnum):
    PerKelvin = auto()
    PerCelsius = auto()
    PerRankine = auto()
    PerFahrenheit = auto()


THERMAL_EXPANSION = CategoryDefinition(
    abbreviations={
        ThermalExpansion.PerKelvin: "1/K",
        ThermalExpansion.PerCelsius: "1/°C",
        ThermalExpansion.PerRankine: "1/°R",
        ThermalExpansion.PerFahrenheit: "1/°F",
    },
    spellings={
        ThermalExpansion.PerKelvin: ("/K", "K^-1"),
        ThermalExpansion.PerCelsius: ("/°C", "1/C", "/C"),
        ThermalExpansion.PerRankine: ("/°R", "1/R", "/R"),
        ThermalExpansion.PerFahrenheit: ("/°F", "1/F", "/F"),
    },
    **_per_temperature(ThermalExpansion),
)


class ReciprocalTemperature(UnitEnum):
    PerKelvin = auto()
    PerCelsius = auto()
    PerRankine = auto()
    PerFahrenheit = auto()


RECIPROCAL_TEMPERATURE = CategoryDefinition(
    abbreviations={
        ReciprocalTemperature.PerKelvin: "/K",
        ReciprocalTemperature.PerCelsius: "/°C",
        ReciprocalTemperature.PerRankine: "/°R",
        ReciprocalTemperature.PerFahrenheit: "/°F",
    },
    spellings={
        ReciprocalTemperature.PerKelvin: ("1/K", "K^-1"),
        ReciprocalTemperature.PerCelsius: ("1/°C", "1/C", "/C"),
        ReciprocalTemperature.PerRankine: ("1/°R", "1/R", "/R"),
        ReciprocalTemperature.PerFahrenheit: ("1/°F", "1/F", "/F"),
    },
    **_per_temperature(ReciprocalTemperature),
)


DEFINITIONS = (
    TEMPERATURE,
    TEMPERATURE_DIFFERENCE,
    TEMPERATURE_GRADIENT,
    HEAT_CAPACITY,
    SPECIFIC_HEAT_CAPACITY,
    THERMAL_CONDUCTIVITY,
    THERMAL_EXPANSION,
    RECIPROCAL_TEMPERATURE,
)
