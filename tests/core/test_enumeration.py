from enum import Enum, auto

import pytest

from phq.core.enumeration import (
    EnumerationTable,
    normalize_text,
    parse_enumeration,
    register_enumeration,
    table_for,
)
from phq.exceptions import RegistrationError, UnknownCategoryError, UnknownUnitError


class Colour(Enum):
    Red = auto()
    Green = auto()
    Blue = auto()


ABBREVIATIONS = {Colour.Red: "R", Colour.Green: "G", Colour.Blue: "B"}


# -------------------------------
# Table validation
# -------------------------------

def test_abbreviations_are_spellings():
    table = EnumerationTable(Colour, ABBREVIATIONS)
    assert table.parse("R") is Colour.Red
    assert table.abbreviation(Colour.Blue) == "B"
    assert len(table) == 3


def test_spellings_parse_to_their_member():
    table = EnumerationTable(Colour, ABBREVIATIONS, {Colour.Red: ("red", "rouge")})
    assert table.parse("red") is Colour.Red
    assert table.parse("rouge") is Colour.Red
    assert table.spellings()["rouge"] is Colour.Red


def test_missing_abbreviation_is_rejected():
    with pytest.raises(RegistrationError, match="Blue"):
        EnumerationTable(Colour, {Colour.Red: "R", Colour.Green: "G"})


def test_shared_abbreviation_is_rejected():
    with pytest.raises(RegistrationError):
        EnumerationTable(Colour, {Colour.Red: "C", Colour.Green: "C", Colour.Blue: "B"})


def test_spelling_used_by_two_members_is_rejected():
    with pytest.raises(RegistrationError):
        EnumerationTable(Colour, ABBREVIATIONS, {Colour.Red: ("x",), Colour.Blue: ("x",)})


def test_spelling_shadowing_another_abbreviation_is_rejected():
    with pytest.raises(RegistrationError):
        EnumerationTable(Colour, ABBREVIATIONS, {Colour.Red: ("G",)})


def test_derived_spelling_is_skipped_when_already_owned():
    table = EnumerationTable(Colour, ABBREVIATIONS, {Colour.Red: ("red",)}, derived={Colour.Red: ("red", "r")})
    assert table.parse("r") is Colour.Red


def test_derived_spelling_colliding_with_other_member_is_rejected():
    with pytest.raises(RegistrationError):
        EnumerationTable(Colour, ABBREVIATIONS, derived={Colour.Red: ("G",)})


def test_foreign_key_is_rejected():
    class Other(Enum):
        A = 1

    with pytest.raises(RegistrationError):
        EnumerationTable(Colour, {**ABBREVIATIONS, Other.A: "A"})


# -------------------------------
# Lookups
# -------------------------------

def test_parse_miss_returns_none():
    table = EnumerationTable(Colour, ABBREVIATIONS)
    assert table.parse("purple") is None
    assert table.parse("") is None
    assert table.parse(3) is None


def test_parse_strips_whitespace():
    table = EnumerationTable(Colour, ABBREVIATIONS)
    assert table.parse("  R ") is Colour.Red


def test_micro_sign_is_normalized():
    assert normalize_text("µm") == "μm"
    assert normalize_text(" μm ") == "μm"


def test_abbreviation_of_foreign_member_raises():
    table = EnumerationTable(Colour, ABBREVIATIONS)
    with pytest.raises(UnknownUnitError):
        table.abbreviation("R")


# -------------------------------
# Module-level tables
# -------------------------------

def test_register_enumeration_once():
    class Shade(Enum):
        Light = 1
        Dark = 2

    table = EnumerationTable(Shade, {Shade.Light: "L", Shade.Dark: "D"})
    register_enumeration(table)
    assert table_for(Shade) is table
    assert parse_enumeration(Shade, "D") is Shade.Dark
    with pytest.raises(RegistrationError):
        register_enumeration(EnumerationTable(Shade, {Shade.Light: "l", Shade.Dark: "d"}))


def test_table_for_unknown_enumeration():
    with pytest.raises(UnknownCategoryError):
        table_for(Colour)
