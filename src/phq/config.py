"""
phq.config
==========

Process-wide settings.

``Settings`` holds the defaults the rest of the package falls back to when a
call does not say otherwise:

- ``precision``: digits used by :func:`phq.core.utils.print_number` and by every
  text form of values and quantities;
- ``unit_system``: the system ``Quantity.to()`` converts into when no unit is given;
- ``number_type``: the floating type :func:`phq.units.registry.static_convert`
  computes in for plain Python numbers.

Settings are immutable; ``configure`` swaps in a new object under a lock.
"""

from __future__ import annotations

import contextlib
import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from phq.core.unit_system import STANDARD_UNIT_SYSTEM, UnitSystem
from phq.core.utils import Precision

logger = logging.getLogger(__name__)

_NUMBER_TYPES = (float, np.float32, np.float64, np.longdouble)


@dataclass(frozen=True)
class Settings:
    precision: Precision = Precision.Double
    unit_system: UnitSystem = STANDARD_UNIT_SYSTEM
    number_type: type = float

    def __post_init__(self) -> None:
        # Accept spellings ("single", "SI", ...) as well as members.
        if isinstance(self.precision, str):
            object.__setattr__(self, "precision", _parse(Precision, self.precision))
        if isinstance(self.unit_system, str):
            object.__setattr__(self, "unit_system", _parse(UnitSystem, self.unit_system))
        if not isinstance(self.precision, Precision):
            raise ValueError(f"precision must be a Precision, got {self.precision!r}")
        if not isinstance(self.unit_system, UnitSystem):
            raise ValueError(f"unit_system must be a UnitSystem, got {self.unit_system!r}")
        if self.number_type not in _NUMBER_TYPES:
            raise ValueError(f"number_type must be a floating type, got {self.number_type!r}")


def _parse(enumeration: Any, text: str) -> Any:
    member = enumeration.parse(text)
    if member is None:
        raise ValueError(f"Unknown {enumeration.__name__} spelling: {text!r}")
    return member


_lock = threading.RLock()
_DEFAULTS = Settings()
_settings = _DEFAULTS
_FIELDS = frozenset(f.name for f in dataclasses.fields(Settings))


def get_settings() -> Settings:
    return _settings


def configure(**changes: Any) -> Settings:
    """Replace the named settings and return the new ``Settings``.

    Unknown names raise ``TypeError``; invalid values raise ``ValueError``.
    """
    global _settings
    unknown = sorted(set(changes) - _FIELDS)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")
    with _lock:
        _settings = dataclasses.replace(_settings, **changes)
        logger.debug("Settings changed: %s", _settings)
        return _settings


@contextlib.contextmanager
def override(**changes: Any) -> Iterator[Settings]:
    """Apply ``changes`` inside a ``with`` block and restore the previous settings on exit."""
    global _settings
    with _lock:
        previous = _settings
        current = configure(**changes)
    try:
        yield current
    finally:
        with _lock:
            _settings = previous
            logger.debug("Settings restored: %s", previous)


def reset() -> Settings:
    global _settings
    with _lock:
        _settings = _DEFAULTS
    return _settings


__all__ = ["Settings", "get_settings", "configure", "override", "reset"]
