"""Time, frequency, speed, acceleration and rate units."""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.core.conversion import Constant
from phq.units.catalog.constants import (
    DEGREE,
    GIGA,
    HOUR,
    KILO,
    MEGA,
    MICRO,
    MILLI,
    MINUTE,
    NANO,
    REVOLUTION,
)
from phq.units.catalog.geometry import AREA_FACTORS, LENGTH_FACTORS, VOLUME_FACTORS, Area, Length, Volume
from phq.units.category import CategoryDefinition, UnitEnum, conversions, one_system, per_system, related_from

_PER_SECOND = dims.TIME ** -1
_PER_SQUARE_SECOND = dims.TIME ** -2


class Time(UnitEnum):
    Nanosecond = auto()
    Microsecond = auto()
    Millisecond = auto()
    Second = auto()
    Minute = auto()
    Hour = auto()


TIME = CategoryDefinition(
    category=Time,
    standard=Time.Second,
    dimensions=dims.TIME,
    abbreviations={
        Time.Nanosecond: "ns",
        Time.Microsecond: "μs",
        Time.Millisecond: "ms",
        Time.Second: "s",
        Time.Minute: "min",
        Time.Hour: "hr",
    },
    spellings={
        Time.Nanosecond: ("nanosecond", "nanoseconds"),
        Time.Microsecond: ("microsecond", "microseconds"),
        Time.Millisecond: ("millisecond", "milliseconds"),
        Time.Second: ("sec", "secs", "second", "seconds"),
        Time.Minute: ("mins", "minute", "minutes"),
        Time.Hour: ("h", "hrs", "hour", "hours"),
    },
    conversions=conversions(Time.Second, {
        Time.Nanosecond: NANO,
        Time.Microsecond: MICRO,
        Time.Millisecond: MILLI,
        Time.Minute: MINUTE,
        Time.Hour: HOUR,
    }),
    consistent_units=one_system(Time.Second),
)


class Frequency(UnitEnum):
    Hertz = auto()
    Kilohertz = auto()
    Megahertz = auto()
    Gigahertz = auto()


FREQUENCY = CategoryDefinition(
    category=Frequency,
    standard=Frequency.Hertz,
    dimensions=_PER_SECOND,
    abbreviations={
        Frequency.Hertz: "Hz",
        Frequency.Kilohertz: "kHz",
        Frequency.Megahertz: "MHz",
        Frequency.Gigahertz: "GHz",
    },
    spellings={
        Frequency.Hertz: ("hertz", "/s", "1/s", "s^-1"),
        Frequency.Kilohertz: ("kilohertz",),
        Frequency.Megahertz: ("megahertz",),
        Frequency.Gigahertz: ("gigahertz",),
    },
    conversions=conversions(Frequency.Hertz, {
        Frequency.Kilohertz: KILO,
        Frequency.Megahertz: MEGA,
        Frequency.Gigahertz: GIGA,
    }),
    consistent_units=one_system(Frequency.Hertz),
)


class Speed(UnitEnum):
    MilePerSecond = auto()
    KilometrePerSecond = auto()
    YardPerSecond = auto()
    MetrePerSecond = auto()
    FootPerSecond = auto()
    DecimetrePerSecond = auto()
    InchPerSecond = auto()
    CentimetrePerSecond = auto()
    MillimetrePerSecond = auto()
    MilliinchPerSecond = auto()
    MicrometrePerSecond = auto()
    MicroinchPerSecond = auto()


_SPEED_LENGTH = {
    Speed.MilePerSecond: Length.Mile,
    Speed.KilometrePerSecond: Length.Kilometre,
    Speed.YardPerSecond: Length.Yard,
    Speed.MetrePerSecond: Length.Metre,
    Speed.FootPerSecond: Length.Foot,
    Speed.DecimetrePerSecond: Length.Decimetre,
    Speed.InchPerSecond: Length.Inch,
    Speed.CentimetrePerSecond: Length.Centimetre,
    Speed.MillimetrePerSecond: Length.Millimetre,
    Speed.MilliinchPerSecond: Length.Milliinch,
    Speed.MicrometrePerSecond: Length.Micrometre,
    Speed.MicroinchPerSecond: Length.Microinch,
}

_SPEED_CONSISTENT = per_system(
    Speed.MetrePerSecond, Speed.MillimetrePerSecond, Speed.FootPerSecond, Speed.InchPerSecond,
)

SPEED = CategoryDefinition(
    category=Speed,
    standard=Speed.MetrePerSecond,
    dimensions=dims.LENGTH / dims.TIME,
    abbreviations={
        Speed.MilePerSecond: "mi/s",
        Speed.KilometrePerSecond: "km/s",
        Speed.YardPerSecond: "yd/s",
        Speed.MetrePerSecond: "m/s",
        Speed.FootPerSecond: "ft/s",
        Speed.DecimetrePerSecond: "dm/s",
        Speed.InchPerSecond: "in/s",
        Speed.CentimetrePerSecond: "cm/s",
        Speed.MillimetrePerSecond: "mm/s",
        Speed.MilliinchPerSecond: "mil/s",
        Speed.MicrometrePerSecond: "μm/s",
        Speed.MicroinchPerSecond: "μin/s",
    },
    spellings={
        Speed.MetrePerSecond: ("m*s^-1", "metre per second", "meter per second"),
        Speed.FootPerSecond: ("fps",),
        Speed.MilliinchPerSecond: ("thou/s",),
    },
    conversions=conversions(
        Speed.MetrePerSecond,
        {speed: LENGTH_FACTORS[length] for speed, length in _SPEED_LENGTH.items()},
    ),
    consistent_units=_SPEED_CONSISTENT,
    related_unit_systems=related_from(_SPEED_CONSISTENT),
)


class Acceleration(UnitEnum):
    MilePerSquareSecond = auto()
    KilometrePerSquareSecond = auto()
    YardPerSquareSecond = auto()
    MetrePerSquareSecond = auto()
    FootPerSquareSecond = auto()
    DecimetrePerSquareSecond = auto()
    InchPerSquareSecond = auto()
    CentimetrePerSquareSecond = auto()
    MillimetrePerSquareSecond = auto()
    MilliinchPerSquareSecond = auto()
    MicrometrePerSquareSecond = auto()
    MicroinchPerSquareSecond = auto()


_ACCELERATION_LENGTH = {
    Acceleration.MilePerSquareSecond: Length.Mile,
    Acceleration.KilometrePerSquareSecond: Length.Kilometre,
    Acceleration.YardPerSquareSecond: Length.Yard,
    Acceleration.MetrePerSquareSecond: Length.Metre,
    Acceleration.FootPerSquareSecond: Length.Foot,
    Acceleration.DecimetrePerSquareSecond: Length.Decimetre,
    Acceleration.InchPerSquareSecond: Length.Inch,
    Acceleration.CentimetrePerSquareSecond: Length.Centimetre,
    Acceleration.MillimetrePerSquareSecond: Length.Millimetre,
    Acceleration.MilliinchPerSquareSecond: Length.Milliinch,
    Acceleration.MicrometrePerSquareSecond: Length.Micrometre,
    Acceleration.MicroinchPerSquareSecond: Length.Microinch,
}

_ACCELERATION_CONSISTENT = per_system(
    Acceleration.MetrePerSquareSecond,
    Acceleration.MillimetrePerSquareSecond,
    Acceleration.FootPerSquareSecond,
    Acceleration.InchPerSquareSecond,
)

ACCELERATION = CategoryDefinition(
    category=Acceleration,
    standard=Acceleration.MetrePerSquareSecond,
    dimensions=dims.LENGTH * _PER_SQUARE_SECOND,
    abbreviations={
        Acceleration.MilePerSquareSecond: "mi/s^2",
        Acceleration.KilometrePerSquareSecond: "km/s^2",
        Acceleration.YardPerSquareSecond: "yd/s^2",
        Acceleration.MetrePerSquareSecond: "m/s^2",
        Acceleration.FootPerSquareSecond: "ft/s^2",
        Acceleration.DecimetrePerSquareSecond: "dm/s^2",
        Acceleration.InchPerSquareSecond: "in/s^2",
        Acceleration.CentimetrePerSquareSecond: "cm/s^2",
        Acceleration.MillimetrePerSquareSecond: "mm/s^2",
        Acceleration.MilliinchPerSquareSecond: "mil/s^2",
        Acceleration.MicrometrePerSquareSecond: "μm/s^2",
        Acceleration.MicroinchPerSquareSecond: "μin/s^2",
    },
    spellings={
        Acceleration.MetrePerSquareSecond: ("m/s²", "m*s^-2"),
        Acceleration.FootPerSquareSecond: ("ft/s²",),
        Acceleration.InchPerSquareSecond: ("in/s²",),
        Acceleration.MillimetrePerSquareSecond: ("mm/s²",),
    },
    conversions=conversions(
        Acceleration.MetrePerSquareSecond,
        {acc: LENGTH_FACTORS[length] for acc, length in _ACCELERATION_LENGTH.items()},
    ),
    consistent_units=_ACCELERATION_CONSISTENT,
    related_unit_systems=related_from(_ACCELERATION_CONSISTENT),
)


class AngularSpeed(UnitEnum):
    RadianPerSecond = auto()
    RadianPerMinute = auto()
    RadianPerHour = auto()
    DegreePerSecond = auto()
    DegreePerMinute = auto()
    DegreePerHour = auto()
    RevolutionPerSecond = auto()
    RevolutionPerMinute = auto()
    RevolutionPerHour = auto()


ANGULAR_SPEED = CategoryDefinition(
    category=AngularSpeed,
    standard=AngularSpeed.RadianPerSecond,
    dimensions=_PER_SECOND,
    abbreviations={
        AngularSpeed.RadianPerSecond: "rad/s",
        AngularSpeed.RadianPerMinute: "rad/min",
        AngularSpeed.RadianPerHour: "rad/hr",
        AngularSpeed.DegreePerSecond: "deg/s",
        AngularSpeed.DegreePerMinute: "deg/min",
        AngularSpeed.DegreePerHour: "deg/hr",
        AngularSpeed.RevolutionPerSecond: "rev/s",
        AngularSpeed.RevolutionPerMinute: "rev/min",
        AngularSpeed.RevolutionPerHour: "rev/hr",
    },
    spellings={
        AngularSpeed.RevolutionPerMinute: ("rpm", "RPM"),
        AngularSpeed.RevolutionPerSecond: ("rps",),
    },
    conversions=conversions(AngularSpeed.RadianPerSecond, {
        AngularSpeed.RadianPerMinute: Constant("1") / MINUTE,
        AngularSpeed.RadianPerHour: Constant("1") / HOUR,
        AngularSpeed.DegreePerSecond: DEGREE,
        AngularSpeed.DegreePerMinute: DEGREE / MINUTE,
        AngularSpeed.DegreePerHour: DEGREE / HOUR,
        AngularSpeed.RevolutionPerSecond: REVOLUTION,
        AngularSpeed.RevolutionPerMinute: REVOLUTION / MINUTE,
        AngularSpeed.RevolutionPerHour: REVOLUTION / HOUR,
    }),
    consistent_units=one_system(AngularSpeed.RadianPerSecond),
)


class AngularAcceleration(UnitEnum):
    RadianPerSquareSecond = auto()
    RadianPerSquareMinute = auto()
    RadianPerSquareHour = auto()
    DegreePerSquareSecond = auto()
    DegreePerSquareMinute = auto()
    DegreePerSquareHour = auto()
    RevolutionPerSquareSecond = auto()
    RevolutionPerSquareMinute = auto()
    RevolutionPerSquareHour = auto()


ANGULAR_ACCELERATION = CategoryDefinition(
    category=AngularAcceleration,
    standard=AngularAcceleration.RadianPerSquareSecond,
    dimensions=_PER_SQUARE_SECOND,
    abbreviations={
        AngularAcceleration.RadianPerSquareSecond: "rad/s^2",
        AngularAcceleration.RadianPerSquareMinute: "rad/min^2",
        AngularAcceleration.RadianPerSquareHour: "rad/hr^2",
        AngularAcceleration.DegreePerSquareSecond: "deg/s^2",
        AngularAcceleration.DegreePerSquareMinute: "deg/min^2",
        AngularAcceleration.DegreePerSquareHour: "deg/hr^2",
        AngularAcceleration.RevolutionPerSquareSecond: "rev/s^2",
        AngularAcceleration.RevolutionPerSquareMinute: "rev/min^2",
        AngularAcceleration.RevolutionPerSquareHour: "rev/hr^2",
    },
    conversions=conversions(AngularAcceleration.RadianPerSquareSecond, {
        AngularAcceleration.RadianPerSquareMinute: Constant("1") / MINUTE ** 2,
        AngularAcceleration.RadianPerSquareHour: Constant("1") / HOUR ** 2,
        AngularAcceleration.DegreePerSquareSecond: DEGREE,
        AngularAcceleration.DegreePerSquareMinute: DEGREE / MINUTE ** 2,
        AngularAcceleration.DegreePerSquareHour: DEGREE / HOUR ** 2,
        AngularAcceleration.RevolutionPerSquareSecond: REVOLUTION,
        AngularAcceleration.RevolutionPerSquareMinute: REVOLUTION / MINUTE ** 2,
        AngularAcceleration.RevolutionPerSquareHour: REVOLUTION / HOUR ** 2,
    }),
    consistent_units=one_system(AngularAcceleration.RadianPerSquareSecond),
)


class Diffusivity(UnitEnum):
    SquareMilePerSecond = auto()
    SquareKilometrePerSecond = auto()
    HectarePerSecond = auto()
    AcrePerSecond = auto()
    SquareYardPerSecond = auto()
    SquareMetrePerSecond = auto()
    SquareFootPerSecond = auto()
    SquareDecimetrePerSecond = auto()
    SquareInchPerSecond = auto()
    SquareCentimetrePerSecond = auto()
    SquareMillimetrePerSecond = auto()
    SquareMilliinchPerSecond = auto()
    SquareMicrometrePerSecond = auto()
    SquareMicroinchPerSecond = auto()


_DIFFUSIVITY_AREA = {
    Diffusivity.SquareMilePerSecond: Area.SquareMile,
    Diffusivity.SquareKilometrePerSecond: Area.SquareKilometre,
    Diffusivity.HectarePerSecond: Area.Hectare,
    Diffusivity.AcrePerSecond: Area.Acre,
    Diffusivity.SquareYardPerSecond: Area.SquareYard,
    Diffusivity.SquareMetrePerSecond: Area.SquareMetre,
    Diffusivity.SquareFootPerSecond: Area.SquareFoot,
    Diffusivity.SquareDecimetrePerSecond: Area.SquareDecimetre,
    Diffusivity.SquareInchPerSecond: Area.SquareInch,
    Diffusivity.SquareCentimetrePerSecond: Area.SquareCentimetre,
    Diffusivity.SquareMillimetrePerSecond: Area.SquareMillimetre,
    Diffusivity.SquareMilliinchPerSecond: Area.SquareMilliinch,
    Diffusivity.SquareMicrometrePerSecond: Area.SquareMicrometre,
    Diffusivity.SquareMicroinchPerSecond: Area.SquareMicroinch,
}

DIFFUSIVITY = CategoryDefinition(
    category=Diffusivity,
    standard=Diffusivity.SquareMetrePerSecond,
    dimensions=dims.LENGTH ** 2 / dims.TIME,
    abbreviations={
        Diffusivity.SquareMilePerSecond: "mi^2/s",
        Diffusivity.SquareKilometrePerSecond: "km^2/s",
        Diffusivity.HectarePerSecond: "ha/s",
        Diffusivity.AcrePerSecond: "ac/s",
        Diffusivity.SquareYardPerSecond: "yd^2/s",
        Diffusivity.SquareMetrePerSecond: "m^2/s",
        Diffusivity.SquareFootPerSecond: "ft^2/s",
        Diffusivity.SquareDecimetrePerSecond: "dm^2/s",
        Diffusivity.SquareInchPerSecond: "in^2/s",
        Diffusivity.SquareCentimetrePerSecond: "cm^2/s",
        Diffusivity.SquareMillimetrePerSecond: "mm^2/s",
        Diffusivity.SquareMilliinchPerSecond: "mil^2/s",
        Diffusivity.SquareMicrometrePerSecond: "μm^2/s",
        Diffusivity.SquareMicroinchPerSecond: "μin^2/s",
    },
    spellings={
        Diffusivity.SquareMetrePerSecond: ("m²/s",),
        Diffusivity.SquareMillimetrePerSecond: ("mm²/s", "cSt"),
        Diffusivity.SquareCentimetrePerSecond: ("St",),
    },
    conversions=conversions(
        Diffusivity.SquareMetrePerSecond,
        {diff: AREA_FACTORS[area] for diff, area in _DIFFUSIVITY_AREA.items()},
    ),
    consistent_units=per_system(
        Diffusivity.SquareMetrePerSecond,
        Diffusivity.SquareMillimetrePerSecond,
        Diffusivity.SquareFootPerSecond,
        Diffusivity.SquareInchPerSecond,
    ),
)


class VolumeRate(UnitEnum):
    CubicMilePerSecond = auto()
    CubicKilometrePerSecond = auto()
    CubicYardPerSecond = auto()
    CubicMetrePerSecond = auto()
    CubicFootPerSecond = auto()
    CubicDecimetrePerSecond = auto()
    LitrePerSecond = auto()
    CubicInchPerSecond = auto()
    CubicCentimetrePerSecond = auto()
    MillilitrePerSecond = auto()
    CubicMillimetrePerSecond = auto()
    CubicMilliinchPerSecond = auto()
    CubicMicrometrePerSecond = auto()
    CubicMicroinchPerSecond = auto()


_VOLUME_RATE_VOLUME = {
    VolumeRate.CubicMilePerSecond: Volume.CubicMile,
    VolumeRate.CubicKilometrePerSecond: Volume.CubicKilometre,
    VolumeRate.CubicYardPerSecond: Volume.CubicYard,
    VolumeRate.CubicMetrePerSecond: Volume.CubicMetre,
    VolumeRate.CubicFootPerSecond: Volume.CubicFoot,
    VolumeRate.CubicDecimetrePerSecond: Volume.CubicDecimetre,
    VolumeRate.LitrePerSecond: Volume.Litre,
    VolumeRate.CubicInchPerSecond: Volume.CubicInch,
    VolumeRate.CubicCentimetrePerSecond: Volume.CubicCentimetre,
    VolumeRate.MillilitrePerSecond: Volume.Millilitre,
    VolumeRate.CubicMillimetrePerSecond: Volume.CubicMillimetre,
    VolumeRate.CubicMilliinchPerSecond: Volume.CubicMilliinch,
    VolumeRate.CubicMicrometrePerSecond: Volume.CubicMicrometre,
    VolumeRate.CubicMicroinchPerSecond: Volume.CubicMicroinch,
}

VOLUME_RATE = CategoryDefinition(
    category=VolumeRate,
    standard=VolumeRate.CubicMetrePerSecond,
    dimensions=dims.LENGTH ** 3 / dims.TIME,
    abbreviations={
        VolumeRate.CubicMilePerSecond: "mi^3/s",
        VolumeRate.CubicKilometrePerSecond: "km^3/s",
        VolumeRate.CubicYardPerSecond: "yd^3/s",
        VolumeRate.CubicMetrePerSecond: "m^3/s",
        VolumeRate.CubicFootPerSecond: "ft^3/s",
        VolumeRate.CubicDecimetrePerSecond: "dm^3/s",
        VolumeRate.LitrePerSecond: "L/s",
        VolumeRate.CubicInchPerSecond: "in^3/s",
        VolumeRate.CubicCentimetrePerSecond: "cm^3/s",
        VolumeRate.MillilitrePerSecond: "mL/s",
        VolumeRate.CubicMillimetrePerSecond: "mm^3/s",
        VolumeRate.CubicMilliinchPerSecond: "mil^3/s",
        VolumeRate.CubicMicrometrePerSecond: "μm^3/s",
        VolumeRate.CubicMicroinchPerSecond: "μin^3/s",
    },
    spellings={
        VolumeRate.CubicMetrePerSecond: ("m³/s",),
        VolumeRate.LitrePerSecond: ("l/s",),
        VolumeRate.MillilitrePerSecond: ("ml/s",),
        VolumeRate.CubicFootPerSecond: ("cfs",),
    },
    conversions=conversions(
        VolumeRate.CubicMetrePerSecond,
        {rate: VOLUME_FACTORS[volume] for rate, volume in _VOLUME_RATE_VOLUME.items()},
    ),
    consistent_units=per_system(
        VolumeRate.CubicMetrePerSecond,
        VolumeRate.CubicMillimetrePerSecond,
        VolumeRate.CubicFootPerSecond,
        VolumeRate.CubicInchPerSecond,
    ),
)


DEFINITIONS = (
    TIME,
    FREQUENCY,
    SPEED,
    ACCELERATION,
    ANGULAR_SPEED,
    ANGULAR_ACCELERATION,
    DIFFUSIVITY,
    VOLUME_RATE,
)
