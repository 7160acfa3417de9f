# pytest tests for phq.units.registry
#
# These tests exercise registration checks, lookups, the generic conversion
# path and the cached static conversions. Registration tests use isolated
# registries; the `reg` fixture is a freshly bootstrapped copy of the catalog.

import logging
import threading
from enum import auto

import numpy as np
import pytest

import phq.units.registry as regmod
from phq.config import override
from phq.core.conversion import Constant, Identity, Scale
from phq.core.dimensions import LENGTH, MASS, TEMPERATURE
from phq.core.unit_system import UnitSystem
from phq.core.values import Vector
from phq.exceptions import RegistrationError, UnitMismatchError, UnknownCategoryError
from phq.units import (
    ElectricCharge,
    EnergyFlux,
    Length,
    Mass,
    MassDensity,
    Memory,
    ReciprocalTemperature,
    Temperature,
    ThermalExpansion,
    Time,
)
from phq.units.category import CategoryDefinition, UnitEnum, one_system


class Widget(UnitEnum):
    Unit = auto()
    Dozen = auto()
    Gross = auto()


def widget_definition(**changes):
    fields = dict(
        category=Widget,
        standard=Widget.Unit,
        dimensions=MASS,
        abbreviations={Widget.Unit: "wd", Widget.Dozen: "dz", Widget.Gross: "gr"},
        conversions={
            Widget.Unit: Identity(),
            Widget.Dozen: Scale(Constant(12)),
            Widget.Gross: Scale(Constant(144)),
        },
        consistent_units=one_system(Widget.Unit),
    )
    fields.update(changes)
    return CategoryDefinition(**fields)


# -------------------------------
# Registration
# -------------------------------

def test_register_and_lookup():
    reg = regmod.UnitsRegistry()
    reg.register(widget_definition(spellings={Widget.Dozen: ("dozen",)}))
    assert Widget in reg
    assert len(reg) == 1
    assert reg.standard(Widget) is Widget.Unit
    assert reg.related_dimensions(Widget) == MASS
    assert reg.parse(Widget, "dozen") is Widget.Dozen
    assert reg.abbreviation(Widget.Gross) == "gr"
    assert reg.convert(2.0, Widget.Gross, Widget.Dozen) == 24.0


def test_register_twice_needs_replace():
    reg = regmod.UnitsRegistry()
    reg.register(widget_definition())
    with pytest.raises(RegistrationError, match="already registered"):
        reg.register(widget_definition())
    reg.register(widget_definition(abbreviations={Widget.Unit: "w", Widget.Dozen: "d", Widget.Gross: "g"}), replace=True)
    assert reg.abbreviation(Widget.Unit) == "w"


def test_missing_conversion_is_rejected():
    conversions = {Widget.Unit: Identity(), Widget.Dozen: Scale(Constant(12))}
    with pytest.raises(RegistrationError, match="Gross"):
        regmod.UnitsRegistry().register(widget_definition(conversions=conversions))


def test_standard_must_convert_by_identity():
    conversions = {
        Widget.Unit: Scale(Constant(2)),
        Widget.Dozen: Scale(Constant(12)),
        Widget.Gross: Scale(Constant(144)),
    }
    with pytest.raises(RegistrationError, match="identity"):
        regmod.UnitsRegistry().register(widget_definition(conversions=conversions))


def test_standard_must_be_a_member():
    with pytest.raises(RegistrationError):
        regmod.UnitsRegistry().register(widget_definition(standard=Length.Metre))


def test_every_unit_system_needs_a_consistent_unit():
    consistent = {UnitSystem.MetreKilogramSecondKelvin: Widget.Unit}
    with pytest.raises(RegistrationError, match="consistent unit"):
        regmod.UnitsRegistry().register(widget_definition(consistent_units=consistent))


def test_consistent_unit_must_be_a_member():
    with pytest.raises(RegistrationError):
        regmod.UnitsRegistry().register(widget_definition(consistent_units=one_system(Length.Metre)))


def test_related_system_must_match_consistent_unit():
    related = {Widget.Dozen: UnitSystem.MetreKilogramSecondKelvin}
    with pytest.raises(RegistrationError, match="related"):
        regmod.UnitsRegistry().register(widget_definition(related_unit_systems=related))


def test_dimensions_must_be_dimensions():
    with pytest.raises(RegistrationError):
        regmod.UnitsRegistry().register(widget_definition(dimensions=(0, 0, 1, 0, 0, 0, 0)))


def test_duplicate_spelling_is_rejected():
    spellings = {Widget.Dozen: ("pack",), Widget.Gross: ("pack",)}
    with pytest.raises(RegistrationError):
        regmod.UnitsRegistry().register(widget_definition(spellings=spellings))


def test_spelling_equal_to_another_abbreviation_is_rejected():
    with pytest.raises(RegistrationError):
        regmod.UnitsRegistry().register(widget_definition(spellings={Widget.Dozen: ("gr",)}))


def test_non_unit_enum_category_is_rejected():
    definition = widget_definition()
    bogus = CategoryDefinition(**{**definition.__dict__, "category": int})
    with pytest.raises(RegistrationError):
        regmod.UnitsRegistry().register(bogus)


def test_registration_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="phq.units.registry"):
        regmod.UnitsRegistry().register(widget_definition())
    assert "Registered unit category Widget" in caplog.text


def test_concurrent_registration_registers_once():
    reg = regmod.UnitsRegistry()
    errors = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        try:
            reg.register(widget_definition())
        except RegistrationError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(reg) == 1
    assert len(errors) == 7


# -------------------------------
# Lookups on the catalog
# -------------------------------

def test_unknown_category():
    reg = regmod.UnitsRegistry()
    with pytest.raises(UnknownCategoryError):
        reg.standard(Widget)
    with pytest.raises(KeyError):
        reg.related_dimensions(Widget)
    assert reg.parse(Widget, "wd") is None


def test_bootstrap_registers_whole_catalog(reg):
    from phq.units import catalog

    assert len(reg) == len(catalog.DEFINITIONS)
    assert set(reg.categories()) == {d.category for d in catalog.DEFINITIONS}


def test_bootstrap_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="phq.units.registry"):
        regmod._bootstrap_default_registry()
    assert "Bootstrapped units registry" in caplog.text


def test_abbreviation_and_str(ureg):
    assert ureg.abbreviation(Length.Metre) == "m"
    assert str(Length.Micrometre) == "μm"
    assert Length.Metre.abbreviation == "m"
    assert ureg.abbreviation(UnitSystem.FootPoundSecondRankine) == "ft·lbf·s·°R"


def test_parse(ureg):
    assert ureg.parse(ElectricCharge, "kC") is ElectricCharge.Kilocoulomb
    assert ureg.parse(ElectricCharge, "nonsense") is None
    assert ureg.parse(Length, "µm") is Length.Micrometre
    assert ureg.parse(Length, "um") is Length.Micrometre
    assert ureg.parse(Length, "feet") is Length.Foot
    assert ureg.parse(UnitSystem, "SI") is UnitSystem.MetreKilogramSecondKelvin
    assert ElectricCharge.parse("e") is ElectricCharge.ElementaryCharge


def test_parse_ascii_renderings(ureg):
    assert ureg.parse(Temperature, "degC") is Temperature.Celsius
    assert ureg.parse(EnergyFlux, "W/m2") is EnergyFlux.WattPerSquareMetre


def test_standard(ureg):
    assert ureg.standard(ElectricCharge) is ElectricCharge.Coulomb
    assert Temperature.standard() is Temperature.Kelvin


def test_consistent_unit(ureg):
    assert ureg.consistent_unit(EnergyFlux, UnitSystem.MetreKilogramSecondKelvin) is EnergyFlux.WattPerSquareMetre
    assert ureg.consistent_unit(EnergyFlux, UnitSystem.MillimetreGramSecondKelvin) is EnergyFlux.NanowattPerSquareMillimetre
    assert ureg.consistent_unit(EnergyFlux, UnitSystem.FootPoundSecondRankine) is EnergyFlux.FootPoundPerSquareFootPerSecond
    assert ureg.consistent_unit(EnergyFlux, UnitSystem.InchPoundSecondRankine) is EnergyFlux.InchPoundPerSquareInchPerSecond
    assert ureg.consistent_unit(ElectricCharge, UnitSystem.FootPoundSecondRankine) is ElectricCharge.Coulomb


def test_related_unit_system(ureg):
    assert ureg.related_unit_system(ElectricCharge.ElementaryCharge) is None
    assert ureg.related_unit_system(ElectricCharge.Coulomb) is None
    assert ureg.related_unit_system(Length.Metre) is UnitSystem.MetreKilogramSecondKelvin
    assert ureg.related_unit_system(Length.Millimetre) is UnitSystem.MillimetreGramSecondKelvin
    assert ureg.related_unit_system(Length.Foot) is UnitSystem.FootPoundSecondRankine
    assert ureg.related_unit_system(Length.Mile) is None


def test_related_dimensions(ureg):
    assert ureg.related_dimensions(Length) == LENGTH
    assert ureg.related_dimensions(Temperature) == TEMPERATURE
    assert ureg.related_dimensions(ThermalExpansion) == ureg.related_dimensions(ReciprocalTemperature)


def test_categories_with_dimensions(ureg):
    found = ureg.categories_with_dimensions(TEMPERATURE ** -1)
    assert ThermalExpansion in found
    assert ReciprocalTemperature in found


def test_transforms_table_is_read_only(ureg):
    table = ureg.transforms(Length)
    with pytest.raises(TypeError):
        table[Length.Metre] = Scale(Constant(2))


# -------------------------------
# Conversions
# -------------------------------

def test_convert_between_variants(ureg):
    assert ureg.convert(1.0, ElectricCharge.Coulomb, ElectricCharge.Kilocoulomb) == pytest.approx(0.001)
    assert ureg.convert(1.0, ElectricCharge.Coulomb, ElectricCharge.AmpereHour) == pytest.approx(1 / 3600)
    assert ureg.convert(1.0, Length.Kilometre, Length.Metre) == 1000.0


def test_convert_same_unit_returns_value(ureg):
    assert ureg.convert(3.25, Length.Foot, Length.Foot) == 3.25


def test_convert_to_unit_system(ureg):
    assert ureg.convert(1.0, Length.Metre, UnitSystem.MillimetreGramSecondKelvin) == pytest.approx(1000.0)
    assert ureg.convert(1.0, Length.Foot, UnitSystem.MetreKilogramSecondKelvin) == pytest.approx(0.3048)


def test_convert_across_categories_is_rejected(ureg):
    with pytest.raises(UnitMismatchError):
        ureg.convert(1.0, Length.Metre, Time.Second)
    with pytest.raises(TypeError):
        ureg.convert(1.0, Length.Metre, Mass.Kilogram)


@pytest.mark.parametrize("value, source, target, expected", [
    (0.0, Temperature.Celsius, Temperature.Kelvin, 273.15),
    (100.0, Temperature.Celsius, Temperature.Fahrenheit, 212.0),
    (491.67, Temperature.Rankine, Temperature.Kelvin, 273.15),
    (-40.0, Temperature.Fahrenheit, Temperature.Celsius, -40.0),
])
def test_temperature_offsets(ureg, value, source, target, expected):
    assert ureg.convert(value, source, target) == pytest.approx(expected)


def test_freezing_point_in_fahrenheit_is_zero_celsius(ureg):
    assert ureg.convert(32.0, Temperature.Fahrenheit, Temperature.Celsius) == pytest.approx(0.0, abs=1e-9)


def test_memory_uses_binary_prefixes(ureg):
    assert ureg.convert(1.0, Memory.Kilobyte, Memory.Byte) == 1024.0
    assert ureg.convert(8.0, Memory.Bit, Memory.Byte) == 1.0
    assert ureg.convert(1.0, Memory.Kilobit, Memory.Bit) == pytest.approx(1024.0)


@pytest.mark.regression
def test_pound_per_cubic_inch_is_its_own_unit(ureg):
    expected = 0.45359237 / 0.0254 ** 3
    assert ureg.convert(1.0, MassDensity.PoundPerCubicInch, MassDensity.KilogramPerCubicMetre) == pytest.approx(expected)
    assert ureg.convert(1.0, MassDensity.PoundPerCubicInch, MassDensity.PoundPerCubicFoot) == pytest.approx(1728.0)
    assert ureg.parse(MassDensity, "lbm/in^3") is MassDensity.PoundPerCubicInch


def test_to_and_from_standard(ureg):
    assert ureg.to_standard(2.0, Length.Kilometre) == 2000.0
    assert ureg.from_standard(2000.0, Length.Kilometre) == 2.0
    assert ureg.to_standard(5.0, Length.Metre) == 5.0


# -------------------------------
# Containers and arrays
# -------------------------------

def test_convert_list_and_tuple_keep_their_type(ureg):
    assert ureg.convert([1.0, 2.0], Length.Kilometre, Length.Metre) == [1000.0, 2000.0]
    result = ureg.convert((1.0, 2.0), Length.Kilometre, Length.Metre)
    assert isinstance(result, tuple)
    assert result == (1000.0, 2000.0)


def test_convert_vector(ureg):
    result = ureg.convert(Vector(1.0, 2.0, 3.0), Length.Kilometre, Length.Metre)
    assert isinstance(result, Vector)
    assert result == Vector(1000.0, 2000.0, 3000.0)


def test_convert_array_returns_new_array(ureg):
    array = np.array([1.0, 2.0, 3.0])
    result = ureg.convert(array, Length.Kilometre, Length.Metre)
    np.testing.assert_array_equal(result, [1000.0, 2000.0, 3000.0])
    np.testing.assert_array_equal(array, [1.0, 2.0, 3.0])


def test_convert_array_same_unit_is_a_copy(ureg):
    array = np.array([1.0, 2.0])
    result = ureg.convert(array, Length.Metre, Length.Metre)
    assert result is not array
    np.testing.assert_array_equal(result, array)


def test_convert_integer_array_gives_floats(ureg):
    result = ureg.convert(np.array([1, 2]), Length.Kilometre, Length.Metre)
    assert np.issubdtype(result.dtype, np.floating)
    np.testing.assert_array_equal(result, [1000.0, 2000.0])


def test_convert_keeps_float32(ureg):
    result = ureg.convert(np.ones(4, dtype=np.float32), Length.Foot, Length.Inch)
    assert result.dtype == np.float32
    np.testing.assert_allclose(result, 12.0, rtol=1e-5)


def test_convert_in_place(ureg):
    array = np.array([0.0, 100.0])
    ureg.convert_in_place(array, Temperature.Celsius, Temperature.Kelvin)
    np.testing.assert_allclose(array, [273.15, 373.15])


def test_convert_in_place_needs_float_array(ureg):
    with pytest.raises(TypeError):
        ureg.convert_in_place(np.array([1, 2]), Length.Metre, Length.Foot)
    with pytest.raises(TypeError):
        ureg.convert_in_place([1.0, 2.0], Length.Metre, Length.Foot)


# -------------------------------
# Module-level API and static conversions
# -------------------------------

def test_module_functions_use_default_registry():
    assert regmod.convert(1.0, Length.Kilometre, Length.Metre) == 1000.0
    assert regmod.parse(Length, "km") is Length.Kilometre
    assert regmod.abbreviation(Length.Kilometre) == "km"
    assert regmod.standard(Length) is Length.Metre
    assert regmod.consistent_unit(Length, UnitSystem.InchPoundSecondRankine) is Length.Inch


def test_static_convert_matches_convert():
    assert regmod.static_convert(1.0, ElectricCharge.Coulomb, ElectricCharge.Kilocoulomb) == pytest.approx(0.001)
    assert regmod.static_convert(1.0, Length.Mile, Length.Foot) == pytest.approx(5280.0)
    assert regmod.static_convert(0.0, Temperature.Celsius, Temperature.Fahrenheit) == pytest.approx(32.0)


def test_static_convert_to_unit_system():
    assert regmod.static_convert(1.0, Length.Metre, UnitSystem.FootPoundSecondRankine) == pytest.approx(1 / 0.3048)


def test_static_convert_caches_composed_conversions():
    regmod._static_conversion.cache_clear()
    regmod.static_convert(1.0, Length.Yard, Length.Inch)
    regmod.static_convert(2.0, Length.Yard, Length.Inch)
    info = regmod._static_conversion.cache_info()
    assert info.misses == 1
    assert info.hits == 1


def test_static_convert_follows_array_dtype():
    result = regmod.static_convert(np.ones(3, dtype=np.float32), Length.Foot, Length.Inch)
    assert result.dtype == np.float32
    np.testing.assert_allclose(result, 12.0, rtol=1e-5)


@pytest.mark.parametrize("source, target", [
    (Length.Foot, Length.Inch),
    (Temperature.Celsius, Temperature.Fahrenheit),
    (Temperature.Fahrenheit, Temperature.Kelvin),
    (Temperature.Kelvin, Temperature.Kelvin),
])
def test_static_convert_returns_requested_number_type(source, target):
    result = regmod.static_convert(1.0, source, target, np.float32)
    assert isinstance(result, np.float32)


def test_static_convert_temperature_follows_configured_number_type():
    with override(number_type=np.float32):
        result = regmod.static_convert(100.0, Temperature.Celsius, Temperature.Fahrenheit)
    assert isinstance(result, np.float32)
    assert result == pytest.approx(212.0, rel=1e-6)


def test_static_convert_across_categories_is_rejected():
    with pytest.raises(UnitMismatchError):
        regmod.static_convert(1.0, Length.Metre, Time.Second)


def test_register_on_default_registry_rejects_duplicates(ureg):
    with pytest.raises(RegistrationError):
        regmod.register(ureg.definition(Length))


def test_units_package_resolves_registry_names_lazily():
    import phq.units as units_pkg

    assert units_pkg.DEFAULT_REGISTRY is regmod.DEFAULT_REGISTRY
    assert units_pkg.static_convert is regmod.static_convert
    assert "convert" in dir(units_pkg)
    with pytest.raises(AttributeError):
        units_pkg.default_registry
