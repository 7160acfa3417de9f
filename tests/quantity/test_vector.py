import pytest

from phq import units
from phq.core.unit_system import UnitSystem
from phq.core.utils import Precision
from phq.core.values import Vector
from phq.quantity import (
    DimensionalScalar,
    DimensionalVector,
    Force,
    ForceScalar,
    HeatFlux,
    HeatFluxScalar,
    Position,
    Velocity,
)


# -------------------------------
# Construction and values
# -------------------------------

def test_components_are_stored_in_standard_unit():
    v = Velocity((1.0, 2.0, 3.0), units.Speed.FootPerSecond)
    assert isinstance(v.value, Vector)
    assert v.value == pytest.approx((0.3048, 0.6096, 0.9144))


def test_accepts_vector_and_integer_components():
    p = Position(Vector(1, 2, 3), units.Length.Metre)
    assert p.value == Vector(1.0, 2.0, 3.0)
    assert all(isinstance(c, float) for c in p.value)


def test_wrong_component_count_raises():
    with pytest.raises(ValueError):
        Position((1.0, 2.0), units.Length.Metre)


def test_scalar_value_raises():
    with pytest.raises(TypeError):
        Position(1.0, units.Length.Metre)


def test_value_in_returns_vector():
    p = Position((1.0, 0.0, -1.0), units.Length.Kilometre)
    assert p.value == Vector(1000.0, 0.0, -1000.0)
    assert p.value_in(units.Length.Kilometre) == Vector(1.0, 0.0, -1.0)


def test_static_value():
    p = Position((1.0, 2.0, 3.0), units.Length.Foot)
    assert p.static_value(units.Length.Inch) == pytest.approx((12.0, 24.0, 36.0))


def test_to_unit_system():
    p = Position((1.0, 2.0, 3.0), units.Length.Metre)
    value, unit = p.to(UnitSystem.MillimetreGramSecondKelvin)
    assert unit is units.Length.Millimetre
    assert value == pytest.approx((1000.0, 2000.0, 3000.0))


# -------------------------------
# Magnitude, direction and components
# -------------------------------

def test_magnitude_uses_declared_scalar_class():
    f = Force((3.0, 4.0, 0.0), units.Force.Newton)
    m = f.magnitude()
    assert isinstance(m, ForceScalar)
    assert m.value == 5.0
    assert abs(f) == m


def test_generic_vector_magnitude_is_generic_scalar():
    v = DimensionalVector[units.Speed]((0.0, 3.0, 4.0), units.Speed.MetrePerSecond)
    m = v.magnitude()
    assert isinstance(m, DimensionalScalar)
    assert m.category is units.Speed
    assert m.value == 5.0


def test_direction():
    f = Force((3.0, 4.0, 0.0), units.Force.Kilonewton)
    assert f.direction() == pytest.approx((0.6, 0.8, 0.0))


def test_zero_vector_direction():
    assert Force.zero().direction() == Vector(0.0, 0.0, 0.0)


def test_component_properties():
    q = HeatFlux((1.0, 2.0, 3.0), units.EnergyFlux.WattPerSquareMetre)
    assert isinstance(q.x, HeatFluxScalar)
    assert (q.x.value, q.y.value, q.z.value) == (1.0, 2.0, 3.0)


# -------------------------------
# Arithmetic
# -------------------------------

def test_vector_arithmetic():
    a = Position((1.0, 2.0, 3.0), units.Length.Metre)
    b = Position((1.0, 1.0, 1.0), units.Length.Metre)
    assert (a + b).value == Vector(2.0, 3.0, 4.0)
    assert (a - b).value == Vector(0.0, 1.0, 2.0)
    assert (2 * a).value == Vector(2.0, 4.0, 6.0)
    assert (a / 2).value == Vector(0.5, 1.0, 1.5)
    assert (-a).value == Vector(-1.0, -2.0, -3.0)


def test_vector_and_scalar_do_not_mix():
    with pytest.raises(TypeError):
        _ = Force((1.0, 0.0, 0.0), units.Force.Newton) + ForceScalar(1.0, units.Force.Newton)


def test_vector_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Force((1.0, 0.0, 0.0), units.Force.Newton) / 0


def test_vector_by_vector_division_is_undefined():
    f = Force((1.0, 0.0, 0.0), units.Force.Newton)
    with pytest.raises(TypeError):
        _ = f / f


def test_equality_and_hash():
    a = Position((1.0, 2.0, 3.0), units.Length.Kilometre)
    b = Position((1000.0, 2000.0, 3000.0), units.Length.Metre)
    assert a == b
    assert hash(a) == hash(b)


# -------------------------------
# Text forms
# -------------------------------

def test_print():
    q = HeatFlux((1.0, 2.0, 3.0), units.EnergyFlux.WattPerSquareMetre)
    assert q.print(precision=Precision.Single) == "(1.000000, 2.000000, 3.000000) W/m^2"


def test_json_xml_yaml():
    q = HeatFlux((1.0, 0.0, -2.0), units.EnergyFlux.WattPerSquareMetre)
    assert q.json() == '{"value":{"x":1.000000000000000,"y":0,"z":-2.000000000000000},"unit":"W/m^2"}'
    assert q.xml() == (
        "<value><x>1.000000000000000</x><y>0</y><z>-2.000000000000000</z></value><unit>W/m^2</unit>"
    )
    assert q.yaml() == '{value:{x:1.000000000000000,y:0,z:-2.000000000000000},unit:"W/m^2"}'


def test_repr():
    q = Position((1.0, 2.0, 3.0), units.Length.Metre)
    assert repr(q) == "Position('(1.000000000000000, 2.000000000000000, 3.000000000000000) m')"
