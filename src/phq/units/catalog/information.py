"""Computer memory units, with binary prefixes (1 kB = 1024 B)."""

from __future__ import annotations

from enum import auto

from phq.core import dimensions as dims
from phq.units.catalog.constants import BIT, KIBI
from phq.units.category import CategoryDefinition, UnitEnum, conversions, one_system

_PREFIXES = ("", "k", "M", "G", "T")


def _binary_factors(bits, bytes_):
    """Bytes per unit for a bit family and a byte family, prefix by prefix."""
    factors = {}
    for power, (bit, byte) in enumerate(zip(bits, bytes_)):
        scale = KIBI ** power
        factors[bit] = BIT * scale
        factors[byte] = scale
    return factors


class Memory(UnitEnum):
    Bit = auto()
    Kilobit = auto()
    Megabit = auto()
    Gigabit = auto()
    Terabit = auto()
    Byte = auto()
    Kilobyte = auto()
    Megabyte = auto()
    Gigabyte = auto()
    Terabyte = auto()


_MEMORY_BITS = (Memory.Bit, Memory.Kilobit, Memory.Megabit, Memory.Gigabit, Memory.Terabit)
_MEMORY_BYTES = (Memory.Byte, Memory.Kilobyte, Memory.Megabyte, Memory.Gigabyte, Memory.Terabyte)

MEMORY = CategoryDefinition(
    category=Memory,
    standard=Memory.Byte,
    dimensions=dims.DIMENSIONLESS,
    abbreviations={
        **{unit: f"{prefix}b" for unit, prefix in zip(_MEMORY_BITS, _PREFIXES)},
        **{unit: f"{prefix}B" for unit, prefix in zip(_MEMORY_BYTES, _PREFIXES)},
    },
    spellings={
        Memory.Bit: ("bit", "bits"),
        Memory.Byte: ("byte", "bytes"),
        Memory.Kilobyte: ("KB", "KiB", "kilobyte", "kilobytes"),
        Memory.Megabyte: ("MiB", "megabyte", "megabytes"),
        Memory.Gigabyte: ("GiB", "gigabyte", "gigabytes"),
        Memory.Terabyte: ("TiB", "terabyte", "terabytes"),
    },
    conversions=conversions(Memory.Byte, _binary_factors(_MEMORY_BITS, _MEMORY_BYTES)),
    consistent_units=one_system(Memory.Byte),
)


class MemoryRate(UnitEnum):
    BitPerSecond = auto()
    KilobitPerSecond = auto()
    MegabitPerSecond = auto()
    GigabitPerSecond = auto()
    TerabitPerSecond = auto()
    BytePerSecond = auto()
    KilobytePerSecond = auto()
    MegabytePerSecond = auto()
    GigabytePerSecond = auto()
    TerabytePerSecond = auto()


_RATE_BITS = (
    MemoryRate.BitPerSecond,
    MemoryRate.KilobitPerSecond,
    MemoryRate.MegabitPerSecond,
    MemoryRate.GigabitPerSecond,
    MemoryRate.TerabitPerSecond,
)
_RATE_BYTES = (
    MemoryRate.BytePerSecond,
    MemoryRate.KilobytePerSecond,
    MemoryRate.MegabytePerSecond,
    MemoryRate.GigabytePerSecond,
    MemoryRate.TerabytePerSecond,
)

MEMORY_RATE = CategoryDefinition(
    category=MemoryRate,
    standard=MemoryRate.BytePerSecond,
    dimensions=dims.TIME ** -1,
    abbreviations={
        **{unit: f"{prefix}b/s" for unit, prefix in zip(_RATE_BITS, _PREFIXES)},
        **{unit: f"{prefix}B/s" for unit, prefix in zip(_RATE_BYTES, _PREFIXES)},
    },
    spellings={
        MemoryRate.BitPerSecond: ("bps",),
        MemoryRate.KilobitPerSecond: ("kbps",),
        MemoryRate.MegabitPerSecond: ("Mbps",),
        MemoryRate.GigabitPerSecond: ("Gbps",),
    },
    conversions=conversions(MemoryRate.BytePerSecond, _binary_factors(_RATE_BITS, _RATE_BYTES)),
    consistent_units=one_system(MemoryRate.BytePerSecond),
)


DEFINITIONS = (MEMORY, MEMORY_RATE)
