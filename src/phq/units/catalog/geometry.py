"""Length, area, volume and angle units."""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.units.catalog.constants import (
    ACRE,
    ARCMINUTE,
    ARCSECOND,
    DEGREE,
    FOOT,
    HECTARE,
    INCH,
    LITRE,
    MICROINCH,
    MILE,
    MILLIINCH,
    MILLILITRE,
    YARD,
)
from phq.core.conversion import Constant
from phq.units.category import CategoryDefinition, UnitEnum, conversions, one_system, per_system, related_from


class Length(UnitEnum):
    Mile = auto()
    Kilometre = auto()
    Yard = auto()
    Metre = auto()
    Foot = auto()
    Decimetre = auto()
    Inch = auto()
    Centimetre = auto()
    Millimetre = auto()
    Milliinch = auto()
    Micrometre = auto()
    Microinch = auto()


# Metres per unit of each length variant; area and volume tables reuse it.
LENGTH_FACTORS = {
    Length.Mile: MILE,
    Length.Kilometre: Constant("1000"),
    Length.Yard: YARD,
    Length.Metre: Constant("1"),
    Length.Foot: FOOT,
    Length.Decimetre: Constant("0.1"),
    Length.Inch: INCH,
    Length.Centimetre: Constant("0.01"),
    Length.Millimetre: Constant("0.001"),
    Length.Milliinch: MILLIINCH,
    Length.Micrometre: Constant("0.000001"),
    Length.Microinch: MICROINCH,
}

_LENGTH_CONSISTENT = per_system(Length.Metre, Length.Millimetre, Length.Foot, Length.Inch)

LENGTH = CategoryDefinition(
    category=Length,
    standard=Length.Metre,
    dimensions=dims.LENGTH,
    abbreviations={
        Length.Mile: "mi",
        Length.Kilometre: "km",
        Length.Yard: "yd",
        Length.Metre: "m",
        Length.Foot: "ft",
        Length.Decimetre: "dm",
        Length.Inch: "in",
        Length.Centimetre: "cm",
        Length.Millimetre: "mm",
        Length.Milliinch: "thou",
        Length.Micrometre: "μm",
        Length.Microinch: "μin",
    },
    spellings={
        Length.Mile: ("mile", "miles"),
        Length.Kilometre: ("kilometre", "kilometres", "kilometer", "kilometers"),
        Length.Yard: ("yard", "yards"),
        Length.Metre: ("metre", "metres", "meter", "meters"),
        Length.Foot: ("foot", "feet"),
        Length.Decimetre: ("decimetre", "decimetres", "decimeter", "decimeters"),
        Length.Inch: ("inch", "inches"),
        Length.Centimetre: ("centimetre", "centimetres", "centimeter", "centimeters"),
        Length.Millimetre: ("millimetre", "millimetres", "millimeter", "millimeters"),
        Length.Milliinch: ("mil", "mils", "milliinch", "milliinches"),
        Length.Micrometre: ("micron", "microns", "micrometre", "micrometres", "micrometer", "micrometers"),
        Length.Microinch: ("microinch", "microinches"),
    },
    conversions=conversions(Length.Metre, LENGTH_FACTORS),
    consistent_units=_LENGTH_CONSISTENT,
    related_unit_systems=related_from(_LENGTH_CONSISTENT),
)


class Area(UnitEnum):
    SquareMile = auto()
    SquareKilometre = auto()
    Hectare = auto()
    Acre = auto()
    SquareYard = auto()
    SquareMetre = auto()
    SquareFoot = auto()
    SquareDecimetre = auto()
    SquareInch = auto()
    SquareCentimetre = auto()
    SquareMillimetre = auto()
    SquareMilliinch = auto()
    SquareMicrometre = auto()
    SquareMicroinch = auto()


_SQUARE = {
    Area.SquareMile: Length.Mile,
    Area.SquareKilometre: Length.Kilometre,
    Area.SquareYard: Length.Yard,
    Area.SquareMetre: Length.Metre,
    Area.SquareFoot: Length.Foot,
    Area.SquareDecimetre: Length.Decimetre,
    Area.SquareInch: Length.Inch,
    Area.SquareCentimetre: Length.Centimetre,
    Area.SquareMillimetre: Length.Millimetre,
    Area.SquareMilliinch: Length.Milliinch,
    Area.SquareMicrometre: Length.Micrometre,
    Area.SquareMicroinch: Length.Microinch,
}

AREA_FACTORS = {
    **{area: LENGTH_FACTORS[length] ** 2 for area, length in _SQUARE.items()},
    Area.Hectare: HECTARE,
    Area.Acre: ACRE,
}

AREA = CategoryDefinition(
    category=Area,
    standard=Area.SquareMetre,
    dimensions=dims.LENGTH ** 2,
    abbreviations={
        Area.SquareMile: "mi^2",
        Area.SquareKilometre: "km^2",
        Area.Hectare: "ha",
        Area.Acre: "ac",
        Area.SquareYard: "yd^2",
        Area.SquareMetre: "m^2",
        Area.SquareFoot: "ft^2",
        Area.SquareDecimetre: "dm^2",
        Area.SquareInch: "in^2",
        Area.SquareCentimetre: "cm^2",
        Area.SquareMillimetre: "mm^2",
        Area.SquareMilliinch: "thou^2",
        Area.SquareMicrometre: "μm^2",
        Area.SquareMicroinch: "μin^2",
    },
    spellings={
        Area.Hectare: ("hectare", "hectares"),
        Area.Acre: ("acre", "acres"),
        Area.SquareMetre: ("m²",),
        Area.SquareFoot: ("ft²", "sqft"),
        Area.SquareInch: ("in²", "sqin"),
        Area.SquareMillimetre: ("mm²",),
        Area.SquareMilliinch: ("mil^2", "mil2"),
    },
    conversions=conversions(Area.SquareMetre, AREA_FACTORS),
    consistent_units=per_system(Area.SquareMetre, Area.SquareMillimetre, Area.SquareFoot, Area.SquareInch),
)


class Volume(UnitEnum):
    CubicMile = auto()
    CubicKilometre = auto()
    CubicYard = auto()
    CubicMetre = auto()
    CubicFoot = auto()
    CubicDecimetre = auto()
    Litre = auto()
    CubicInch = auto()
    CubicCentimetre = auto()
    Millilitre = auto()
    CubicMillimetre = auto()
    CubicMilliinch = auto()
    CubicMicrometre = auto()
    CubicMicroinch = auto()


_CUBE = {
    Volume.CubicMile: Length.Mile,
    Volume.CubicKilometre: Length.Kilometre,
    Volume.CubicYard: Length.Yard,
    Volume.CubicMetre: Length.Metre,
    Volume.CubicFoot: Length.Foot,
    Volume.CubicDecimetre: Length.Decimetre,
    Volume.CubicInch: Length.Inch,
    Volume.CubicCentimetre: Length.Centimetre,
    Volume.CubicMillimetre: Length.Millimetre,
    Volume.CubicMilliinch: Length.Milliinch,
    Volume.CubicMicrometre: Length.Micrometre,
    Volume.CubicMicroinch: Length.Microinch,
}

VOLUME_FACTORS = {
    **{volume: LENGTH_FACTORS[length] ** 3 for volume, length in _CUBE.items()},
    Volume.Litre: LITRE,
    Volume.Millilitre: MILLILITRE,
}

VOLUME = CategoryDefinition(
    category=Volume,
    standard=Volume.CubicMetre,
    dimensions=dims.LENGTH ** 3,
    abbreviations={
        Volume.CubicMile: "mi^3",
        Volume.CubicKilometre: "km^3",
        Volume.CubicYard: "yd^3",
        Volume.CubicMetre: "m^3",
        Volume.CubicFoot: "ft^3",
        Volume.CubicDecimetre: "dm^3",
        Volume.Litre: "L",
        Volume.CubicInch: "in^3",
        Volume.CubicCentimetre: "cm^3",
        Volume.Millilitre: "mL",
        Volume.CubicMillimetre: "mm^3",
        Volume.CubicMilliinch: "thou^3",
        Volume.CubicMicrometre: "μm^3",
        Volume.CubicMicroinch: "μin^3",
    },
    spellings={
        Volume.CubicMetre: ("m³",),
        Volume.Litre: ("l", "litre", "litres", "liter", "liters"),
        Volume.CubicCentimetre: ("cc",),
        Volume.Millilitre: ("ml", "millilitre", "millilitres", "milliliter", "milliliters"),
        Volume.CubicMilliinch: ("mil^3", "mil3"),
    },
    conversions=conversions(Volume.CubicMetre, VOLUME_FACTORS),
    consistent_units=per_system(Volume.CubicMetre, Volume.CubicMillimetre, Volume.CubicFoot, Volume.CubicInch),
)


class Angle(UnitEnum):
    Radian = auto()
    Degree = auto()
    Arcminute = auto()
    Arcsecond = auto()


ANGLE_FACTORS = {
    Angle.Radian: Constant("1"),
    Angle.Degree: DEGREE,
    Angle.Arcminute: ARCMINUTE,
    Angle.Arcsecond: ARCSECOND,
}

ANGLE = CategoryDefinition(
    category=Angle,
    standard=Angle.Radian,
    dimensions=dims.DIMENSIONLESS,
    abbreviations={
        Angle.Radian: "rad",
        Angle.Degree: "deg",
        Angle.Arcminute: "arcmin",
        Angle.Arcsecond: "arcsec",
    },
    spellings={
        Angle.Radian: ("radian", "radians"),
        Angle.Degree: ("°", "degree", "degrees"),
        Angle.Arcminute: ("arcminute", "arcminutes"),
        Angle.Arcsecond: ("arcsecond", "arcseconds"),
    },
    conversions=conversions(Angle.Radian, ANGLE_FACTORS),
    consistent_units=one_system(Angle.Radian),
)


class SolidAngle(UnitEnum):
    Steradian = auto()
    SquareDegree = auto()
    SquareArcminute = auto()
    SquareArcsecond = auto()


SOLID_ANGLE = CategoryDefinition(
    category=SolidAngle,
    standard=SolidAngle.Steradian,
    dimensions=dims.DIMENSIONLESS,
    abbreviations={
        SolidAngle.Steradian: "sr",
        SolidAngle.SquareDegree: "deg^2",
        SolidAngle.SquareArcminute: "arcmin^2",
        SolidAngle.SquareArcsecond: "arcsec^2",
    },
    spellings={
        SolidAngle.Steradian: ("steradian", "steradians"),
        SolidAngle.SquareDegree: ("sqdeg",),
    },
    conversions=conversions(SolidAngle.Steradian, {
        SolidAngle.SquareDegree: DEGREE ** 2,
        SolidAngle.SquareArcminute: ARCMINUTE ** 2,
        SolidAngle.SquareArcsecond: ARCSECOND ** 2,
    }),
    consistent_units=one_system(SolidAngle.Steradian),
)


DEFINITIONS = (LENGTH, AREA, VOLUME, ANGLE, SOLID_ANGLE)
