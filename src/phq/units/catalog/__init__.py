"""
phq.units.catalog
=================

Definitions of every unit category phq registers by default, grouped by
physical domain. Each submodule exports its category enums and a
``DEFINITIONS`` tuple; :data:`DEFINITIONS` concatenates them in registration
order.
"""

from phq.units.catalog import electromagnetism, geometry, information, kinematics, mechanics, substance, thermal
from phq.units.catalog.electromagnetism import ElectricCharge, ElectricCurrent
from phq.units.catalog.geometry import Angle, Area, Length, SolidAngle, Volume
from phq.units.catalog.information import Memory, MemoryRate
from phq.units.catalog.kinematics import (
    Acceleration,
    AngularAcceleration,
    AngularSpeed,
    Diffusivity,
    Frequency,
    Speed,
    Time,
    VolumeRate,
)
from phq.units.catalog.mechanics import (
    DynamicViscosity,
    Energy,
    EnergyFlux,
    Force,
    Mass,
    MassDensity,
    MassRate,
    Power,
    Pressure,
    SpecificEnergy,
    SpecificPower,
    TransportEnergyConsumption,
)
from phq.units.catalog.substance import SubstanceAmount
from phq.units.catalog.thermal import (
    HeatCapacity,
    ReciprocalTemperature,
    SpecificHeatCapacity,
    Temperature,
    TemperatureDifference,
    TemperatureGradient,
    ThermalConductivity,
    ThermalExpansion,
)

DEFINITIONS = (
    *geometry.DEFINITIONS,
    *kinematics.DEFINITIONS,
    *mechanics.DEFINITIONS,
    *thermal.DEFINITIONS,
    *electromagnetism.DEFINITIONS,
    *substance.DEFINITIONS,
    *information.DEFINITIONS,
)

__all__ = [
    "DEFINITIONS",
    "Acceleration",
    "Angle",
    "AngularAcceleration",
    "AngularSpeed",
    "Area",
    "Diffusivity",
    "DynamicViscosity",
    "ElectricCharge",
    "ElectricCurrent",
    "Energy",
    "EnergyFlux",
    "Force",
    "Frequency",
    "HeatCapacity",
    "Length",
    "Mass",
    "MassDensity",
    "MassRate",
    "Memory",
    "MemoryRate",
    "Power",
    "Pressure",
    "ReciprocalTemperature",
    "SolidAngle",
    "SpecificEnergy",
    "SpecificHeatCapacity",
    "SpecificPower",
    "Speed",
    "SubstanceAmount",
    "Temperature",
    "TemperatureDifference",
    "TemperatureGradient",
    "ThermalConductivity",
    "ThermalExpansion",
    "Time",
    "TransportEnergyConsumption",
    "Volume",
    "VolumeRate",
]
