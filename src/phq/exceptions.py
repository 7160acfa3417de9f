"""
phq.exceptions
==============

Exception hierarchy for the conversion engine.

Every error raised by phq derives from :class:`PhQError` and from the builtin
exception that best describes it, so callers can catch either one. Parse misses
are not errors: ``parse`` returns ``None`` for unknown text.
"""

from __future__ import annotations


class PhQError(Exception):
    """Base class for every error raised by phq."""


class RegistrationError(PhQError, ValueError):
    """A category definition is incomplete or inconsistent."""


class UnknownCategoryError(PhQError, KeyError):
    """A unit category was used without being registered."""

    def __init__(self, category: object) -> None:
        name = getattr(category, "__name__", repr(category))
        super().__init__(f"Unit category '{name}' is not registered.")
        self.category = category

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class UnknownUnitError(PhQError, KeyError):
    """A unit variant has no entry in its category's tables."""

    def __init__(self, unit: object) -> None:
        super().__init__(f"Unit '{unit!r}' is not registered.")
        self.unit = unit

    def __str__(self) -> str:
        return str(self.args[0])


class UnitMismatchError(PhQError, TypeError):
    """Two units of different categories were combined."""


__all__ = [
    "PhQError",
    "RegistrationError",
    "UnknownCategoryError",
    "UnknownUnitError",
    "UnitMismatchError",
]
