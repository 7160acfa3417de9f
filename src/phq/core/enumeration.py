"""
phq.core.enumeration
====================

Abbreviation and spelling tables for enumerations.

Every enumeration that phq prints or parses (unit categories, unit systems,
print precisions) owns one :class:`EnumerationTable`:

- *abbreviations* are one-to-one and used for output, so printing is
  deterministic;
- *spellings* are many-to-one and used for input, so parsing stays permissive.

Tables are validated when they are built. A table must cover every member, may
not repeat a spelling, and may not map one spelling to two members. Every
abbreviation is also a spelling of its own member.
"""

from __future__ import annotations

import threading
import unicodedata
from enum import Enum
from typing import Dict, Generic, Iterable, Mapping, Optional, Tuple, Type, TypeVar

from phq.exceptions import RegistrationError, UnknownCategoryError, UnknownUnitError

E = TypeVar("E", bound=Enum)

# Micro sign (U+00B5) and Greek small mu (U+03BC) look identical; keys use the latter.
_MICRO_SIGN = "µ"
_GREEK_MU = "μ"


def normalize_text(text: str) -> str:
    """Normalize user-provided spellings.

    Rules:
    - Strip surrounding whitespace.
    - Unicode normalize to NFC.
    - Map the micro sign to Greek mu.
    """
    text = unicodedata.normalize("NFC", text.strip())
    return text.replace(_MICRO_SIGN, _GREEK_MU)


class EnumerationTable(Generic[E]):
    """Validated abbreviation/spelling table for one enumeration type."""

    __slots__ = ("enumeration", "_abbreviations", "_spellings")

    def __init__(
        self,
        enumeration: Type[E],
        abbreviations: Mapping[E, str],
        spellings: Mapping[E, Iterable[str]] | None = None,
        derived: Mapping[E, Iterable[str]] | None = None,
    ) -> None:
        """
        Parameters
        ----------
        enumeration
            The enum class the table describes.
        abbreviations
            Canonical output text for every member.
        spellings
            Extra accepted input forms per member. Repeating a spelling, or
            listing a member's own abbreviation again, is rejected.
        derived
            Mechanically generated forms (ASCII renderings and the like). They
            are added only where the text is still free.
        """
        self.enumeration = enumeration
        self._abbreviations: Dict[E, str] = {}
        self._spellings: Dict[str, E] = {}

        members = list(enumeration)
        missing = [m.name for m in members if m not in abbreviations]
        if missing:
            raise RegistrationError(
                f"{enumeration.__name__}: no abbreviation for {', '.join(missing)}."
            )

        for member, text in abbreviations.items():
            if not isinstance(member, enumeration):
                raise RegistrationError(
                    f"{enumeration.__name__}: abbreviation key {member!r} is not a member."
                )
            key = normalize_text(text)
            owner = self._spellings.get(key)
            if owner is not None:
                raise RegistrationError(
                    f"{enumeration.__name__}: abbreviation '{text}' is used by both "
                    f"{owner.name} and {member.name}."
                )
            self._abbreviations[member] = text
            self._spellings[key] = member

        for member, texts in (spellings or {}).items():
            for text in texts:
                key = normalize_text(text)
                owner = self._spellings.get(key)
                if owner is not None:
                    raise RegistrationError(
                        f"{enumeration.__name__}: spelling '{text}' of {member.name} is "
                        f"already registered for {owner.name}."
                    )
                self._spellings[key] = member

        for member, texts in (derived or {}).items():
            for text in texts:
                key = normalize_text(text)
                owner = self._spellings.get(key)
                if owner is None:
                    self._spellings[key] = member
                elif owner is not member:
                    raise RegistrationError(
                        f"{enumeration.__name__}: generated spelling '{text}' of "
                        f"{member.name} collides with {owner.name}."
                    )

    # -------------------------- public API ---------------------------------
    def abbreviation(self, member: E) -> str:
        try:
            return self._abbreviations[member]
        except KeyError:
            raise UnknownUnitError(member) from None

    def parse(self, text: str) -> Optional[E]:
        """Return the member spelled by ``text``, or ``None`` when nothing matches."""
        if not isinstance(text, str):
            return None
        return self._spellings.get(normalize_text(text))

    def abbreviations(self) -> Mapping[E, str]:
        return dict(self._abbreviations)

    def spellings(self) -> Mapping[str, E]:
        return dict(self._spellings)

    def items(self) -> Tuple[Tuple[E, str], ...]:
        return tuple(self._abbreviations.items())

    def __contains__(self, member: object) -> bool:
        return member in self._abbreviations

    def __len__(self) -> int:
        return len(self._abbreviations)

    def __repr__(self) -> str:
        return (
            f"EnumerationTable({self.enumeration.__name__}, "
            f"{len(self._abbreviations)} members, {len(self._spellings)} spellings)"
        )


# ---------------------------------------------------------------------------
# Tables for the library's own (non-unit) enumerations
# ---------------------------------------------------------------------------
_lock = threading.RLock()
_TABLES: Dict[type, EnumerationTable] = {}


def register_enumeration(table: EnumerationTable) -> EnumerationTable:
    with _lock:
        if table.enumeration in _TABLES:
            raise RegistrationError(
                f"An enumeration table for {table.enumeration.__name__} already exists."
            )
        _TABLES[table.enumeration] = table
    return table


def table_for(enumeration: type) -> EnumerationTable:
    try:
        return _TABLES[enumeration]
    except KeyError:
        raise UnknownCategoryError(enumeration) from None


def abbreviation(member: Enum) -> str:
    return table_for(type(member)).abbreviation(member)


def parse_enumeration(enumeration: Type[E], text: str) -> Optional[E]:
    return table_for(enumeration).parse(text)


class AbbreviatedEnum(Enum):
    """Enum whose members print as their registered abbreviation."""

    def __str__(self) -> str:
        return abbreviation(self)

    @classmethod
    def parse(cls, text: str):
        return parse_enumeration(cls, text)


__all__ = [
    "EnumerationTable",
    "AbbreviatedEnum",
    "normalize_text",
    "register_enumeration",
    "table_for",
    "abbreviation",
    "parse_enumeration",
]
