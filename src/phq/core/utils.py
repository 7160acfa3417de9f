"""
phq.core.utils
==============

Number printing and small text helpers shared by every text form phq
produces.

``print_number`` follows a magnitude-banded policy. Numbers near unity print in
fixed notation, with more decimals as they shrink. Very small and very large
numbers switch to scientific notation. The number of significant decimals comes
from a :class:`Precision`.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional, Sequence

from phq.core.enumeration import AbbreviatedEnum, EnumerationTable, register_enumeration


class Precision(AbbreviatedEnum):
    """Floating-point precision used when printing numbers."""

    # 32-bit binary floating point; 6 decimal digits.
    Single = 6
    # 64-bit binary floating point; 15 decimal digits.
    Double = 15

    @property
    def digits(self) -> int:
        return self.value


register_enumeration(EnumerationTable(
    Precision,
    abbreviations={Precision.Single: "Single", Precision.Double: "Double"},
    spellings={
        Precision.Single: ("SINGLE", "single"),
        Precision.Double: ("DOUBLE", "double"),
    },
))


def _default_precision() -> Precision:
    # Local import avoids a cycle: phq.config imports Precision from here.
    from phq.config import get_settings
    return get_settings().precision


def print_number(value: float, precision: Optional[Precision] = None) -> str:
    """Print ``value`` using the banded fixed/scientific policy.

    >>> print_number(1.11)
    '1.110000000000000'
    >>> print_number(-1000.0, Precision.Single)
    '-1000.000'
    """
    if precision is None:
        precision = _default_precision()
    digits = precision.digits

    x = float(value)
    if not math.isfinite(x):
        return str(x)

    a = abs(x)
    if a == 0.0:
        return "0"
    if a < 0.001 or a >= 10000.0:
        return f"{x:.{digits}e}"
    if a < 0.01:
        decimals = digits + 3
    elif a < 0.1:
        decimals = digits + 2
    elif a < 1.0:
        decimals = digits + 1
    elif a < 10.0:
        decimals = digits
    elif a < 100.0:
        decimals = digits - 1
    elif a < 1000.0:
        decimals = digits - 2
    else:
        decimals = digits - 3
    return f"{x:.{decimals}f}"


def print_components(
    values: Sequence[float],
    groups: Sequence[int],
    precision: Optional[Precision] = None,
) -> str:
    """Print a tuple of components, e.g. ``(1, 2, 3)`` or ``(xx, xy; yy)``.

    ``groups`` gives how many components each ``;``-separated row holds.
    """
    rows = []
    start = 0
    for size in groups:
        rows.append(", ".join(print_number(v, precision) for v in values[start:start + size]))
        start += size
    return "(" + "; ".join(rows) + ")"


def json_object(pairs: Iterable[tuple[str, str]]) -> str:
    return "{" + ",".join(f'"{k}":{v}' for k, v in pairs) + "}"


def xml_elements(pairs: Iterable[tuple[str, str]]) -> str:
    return "".join(f"<{k}>{v}</{k}>" for k, v in pairs)


def yaml_object(pairs: Iterable[tuple[str, str]]) -> str:
    return "{" + ",".join(f"{k}:{v}" for k, v in pairs) + "}"


_WORD_BOUNDARY = re.compile(r"[\s\-]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_case(text: str) -> str:
    """``"Substance Amount"`` -> ``"substance_amount"``; ``"ElectricCurrent"`` -> ``"electric_current"``."""
    text = _CAMEL_BOUNDARY.sub("_", text.strip())
    return _WORD_BOUNDARY.sub("_", text).lower()


__all__ = [
    "Precision",
    "print_number",
    "print_components",
    "json_object",
    "xml_elements",
    "yaml_object",
    "snake_case",
]
