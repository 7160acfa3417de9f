"""
phq.quantity.named
==================

Named quantity classes. Each one binds a generic quantity shape to a unit
category; the behaviour lives in the generic classes.

>>> from phq import units
>>> HeatFluxScalar(1.11, units.EnergyFlux.WattPerSquareMetre).print()
'1.110000000000000 W/m^2'
"""

from __future__ import annotations

from phq.core.values import Vector
from phq.units import catalog as units
from phq.quantity.base import relate
from phq.quantity.dyad import DimensionalDyad, DimensionalSymmetricDyad
from phq.quantity.scalar import DimensionalScalar
from phq.quantity.vector import DimensionalVector

# --- Scalars ---------------------------------------------------------------

# Geometry
class Length(DimensionalScalar, category=units.Length): __slots__ = ()
class Area(DimensionalScalar, category=units.Area): __slots__ = ()
class Volume(DimensionalScalar, category=units.Volume): __slots__ = ()
class Angle(DimensionalScalar, category=units.Angle): __slots__ = ()
class SolidAngle(DimensionalScalar, category=units.SolidAngle): __slots__ = ()

# Kinematics
class Duration(DimensionalScalar, category=units.Time): __slots__ = ()
class Frequency(DimensionalScalar, category=units.Frequency): __slots__ = ()
class Speed(DimensionalScalar, category=units.Speed): __slots__ = ()
class AccelerationScalar(DimensionalScalar, category=units.Acceleration): __slots__ = ()
class AngularSpeed(DimensionalScalar, category=units.AngularSpeed): __slots__ = ()
class AngularAccelerationScalar(DimensionalScalar, category=units.AngularAcceleration): __slots__ = ()
class KinematicViscosity(DimensionalScalar, category=units.Diffusivity): __slots__ = ()
class ThermalDiffusivity(DimensionalScalar, category=units.Diffusivity): __slots__ = ()
class VolumeRate(DimensionalScalar, category=units.VolumeRate): __slots__ = ()

# Mechanics
class Mass(DimensionalScalar, category=units.Mass): __slots__ = ()
class MassDensity(DimensionalScalar, category=units.MassDensity): __slots__ = ()
class MassRate(DimensionalScalar, category=units.MassRate): __slots__ = ()
class ForceScalar(DimensionalScalar, category=units.Force): __slots__ = ()
class StaticPressure(DimensionalScalar, category=units.Pressure): __slots__ = ()
class StressScalar(DimensionalScalar, category=units.Pressure): __slots__ = ()
class Energy(DimensionalScalar, category=units.Energy): __slots__ = ()
class Power(DimensionalScalar, category=units.Power): __slots__ = ()
class HeatFluxScalar(DimensionalScalar, category=units.EnergyFlux): __slots__ = ()
class DynamicViscosity(DimensionalScalar, category=units.DynamicViscosity): __slots__ = ()
class SpecificEnergy(DimensionalScalar, category=units.SpecificEnergy): __slots__ = ()
class SpecificPower(DimensionalScalar, category=units.SpecificPower): __slots__ = ()
class TransportEnergyConsumption(DimensionalScalar, category=units.TransportEnergyConsumption): __slots__ = ()

# Thermal
class Temperature(DimensionalScalar, category=units.Temperature): __slots__ = ()
class TemperatureDifference(DimensionalScalar, category=units.TemperatureDifference): __slots__ = ()
class TemperatureGradientScalar(DimensionalScalar, category=units.TemperatureGradient): __slots__ = ()
class IsobaricHeatCapacity(DimensionalScalar, category=units.HeatCapacity): __slots__ = ()
class SpecificIsobaricHeatCapacity(DimensionalScalar, category=units.SpecificHeatCapacity): __slots__ = ()
class ThermalConductivityScalar(DimensionalScalar, category=units.ThermalConductivity): __slots__ = ()
class LinearThermalExpansionCoefficient(DimensionalScalar, category=units.ThermalExpansion): __slots__ = ()

# Electromagnetism, substance, information
class ElectricCharge(DimensionalScalar, category=units.ElectricCharge): __slots__ = ()
class ElectricCurrent(DimensionalScalar, category=units.ElectricCurrent): __slots__ = ()
class SubstanceAmount(DimensionalScalar, category=units.SubstanceAmount): __slots__ = ()
class Memory(DimensionalScalar, category=units.Memory): __slots__ = ()
class MemoryRate(DimensionalScalar, category=units.MemoryRate): __slots__ = ()

# --- Vectors ---------------------------------------------------------------

class HeatFlux(DimensionalVector, category=units.EnergyFlux, scalar=HeatFluxScalar): __slots__ = ()
class Velocity(DimensionalVector, category=units.Speed, scalar=Speed): __slots__ = ()
class Acceleration(DimensionalVector, category=units.Acceleration, scalar=AccelerationScalar): __slots__ = ()
class Displacement(DimensionalVector, category=units.Length, scalar=Length): __slots__ = ()
class Position(DimensionalVector, category=units.Length, scalar=Length): __slots__ = ()
class Force(DimensionalVector, category=units.Force, scalar=ForceScalar): __slots__ = ()
class TemperatureGradient(
    DimensionalVector, category=units.TemperatureGradient, scalar=TemperatureGradientScalar,
): __slots__ = ()

# --- Dyads -----------------------------------------------------------------

class Stress(DimensionalSymmetricDyad, category=units.Pressure, scalar=StressScalar): __slots__ = ()
class ThermalConductivity(
    DimensionalSymmetricDyad, category=units.ThermalConductivity, scalar=ThermalConductivityScalar,
): __slots__ = ()
class StrainRate(DimensionalSymmetricDyad, category=units.Frequency, scalar=Frequency): __slots__ = ()
class VelocityGradient(DimensionalDyad, category=units.Frequency, scalar=Frequency): __slots__ = ()


# --- Products and quotients ------------------------------------------------
# relate(product, left, right): left * right -> product, product / left -> right.

relate(Area, Length, Length)
relate(Volume, Area, Length)
relate(Length, Speed, Duration)
relate(Speed, Length, Frequency)
relate(Speed, AccelerationScalar, Duration)
relate(AccelerationScalar, Speed, Frequency)
relate(Angle, AngularSpeed, Duration)
relate(AngularSpeed, AngularAccelerationScalar, Duration)
relate(Volume, VolumeRate, Duration)
relate(Mass, MassDensity, Volume)
relate(Mass, MassRate, Duration)
relate(MassRate, Mass, Frequency)
relate(ForceScalar, Mass, AccelerationScalar)
relate(ForceScalar, StaticPressure, Area)
relate(Energy, ForceScalar, Length)
relate(Energy, Power, Duration)
relate(Power, Energy, Frequency)
relate(Power, ForceScalar, Speed)
relate(Power, HeatFluxScalar, Area)
relate(Energy, SpecificEnergy, Mass)
relate(Power, SpecificPower, Mass)
relate(DynamicViscosity, MassDensity, KinematicViscosity)
relate(TemperatureDifference, TemperatureGradientScalar, Length)
relate(Energy, IsobaricHeatCapacity, TemperatureDifference)
relate(IsobaricHeatCapacity, SpecificIsobaricHeatCapacity, Mass)
relate(ElectricCharge, ElectricCurrent, Duration)
relate(Memory, MemoryRate, Duration)

# A magnitude times a direction.
relate(Displacement, Length, Vector)
relate(Velocity, Speed, Vector)
relate(Acceleration, AccelerationScalar, Vector)
relate(Force, ForceScalar, Vector)
relate(HeatFlux, HeatFluxScalar, Vector)
relate(TemperatureGradient, TemperatureGradientScalar, Vector)

relate(Displacement, Velocity, Duration)
relate(Velocity, Acceleration, Duration)
relate(Force, Acceleration, Mass)


SCALARS = (
    Length, Area, Volume, Angle, SolidAngle,
    Duration, Frequency, Speed, AccelerationScalar, AngularSpeed, AngularAccelerationScalar,
    KinematicViscosity, ThermalDiffusivity, VolumeRate,
    Mass, MassDensity, MassRate, ForceScalar, StaticPressure, StressScalar, Energy, Power,
    HeatFluxScalar, DynamicViscosity, SpecificEnergy, SpecificPower, TransportEnergyConsumption,
    Temperature, TemperatureDifference, TemperatureGradientScalar, IsobaricHeatCapacity,
    SpecificIsobaricHeatCapacity, ThermalConductivityScalar, LinearThermalExpansionCoefficient,
    ElectricCharge, ElectricCurrent, SubstanceAmount, Memory, MemoryRate,
)
VECTORS = (HeatFlux, Velocity, Acceleration, Displacement, Position, Force, TemperatureGradient)
DYADS = (Stress, ThermalConductivity, StrainRate, VelocityGradient)

__all__ = [cls.__name__ for cls in (*SCALARS, *VECTORS, *DYADS)] + ["SCALARS", "VECTORS", "DYADS"]
