# phq.core.unit_system

from __future__ import annotations

from phq.core.enumeration import AbbreviatedEnum, EnumerationTable, register_enumeration


class UnitSystem(AbbreviatedEnum):
    """Systems of units. Each picks one consistent unit per category."""

    MetreKilogramSecondKelvin = "m·kg·s·K"
    MillimetreGramSecondKelvin = "mm·g·s·K"
    FootPoundSecondRankine = "ft·lbf·s·°R"
    InchPoundSecondRankine = "in·lbf·s·°R"


# System in which quantities store their values.
STANDARD_UNIT_SYSTEM = UnitSystem.MetreKilogramSecondKelvin


def _separator_variants(symbols: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(sep.join(symbols) for sep in ("-", "*", " ", ", "))


register_enumeration(EnumerationTable(
    UnitSystem,
    abbreviations={member: member.value for member in UnitSystem},
    spellings={
        UnitSystem.MetreKilogramSecondKelvin: (
            *_separator_variants(("m", "kg", "s", "K")),
            "mks", "MKS", "SI",
        ),
        UnitSystem.MillimetreGramSecondKelvin: (
            *_separator_variants(("mm", "g", "s", "K")),
            "mmgs", "MMGS",
        ),
        UnitSystem.FootPoundSecondRankine: (
            *_separator_variants(("ft", "lbf", "s", "°R")),
            "ft·lbf·s·R", "ft-lbf-s-R", "fps", "FPS",
        ),
        UnitSystem.InchPoundSecondRankine: (
            *_separator_variants(("in", "lbf", "s", "°R")),
            "in·lbf·s·R", "in-lbf-s-R", "ips", "IPS",
        ),
    },
))


__all__ = ["UnitSystem", "STANDARD_UNIT_SYSTEM"]
