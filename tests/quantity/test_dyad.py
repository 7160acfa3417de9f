import pytest

from phq import units
from phq.core.utils import Precision
from phq.core.values import Dyad, SymmetricDyad, Vector
from phq.quantity import (
    DimensionalSymmetricDyad,
    Frequency,
    Stress,
    StressScalar,
    VelocityGradient,
)


def test_stress_components_in_standard_unit():
    s = Stress((1.0,) * 6, units.Pressure.Kilopascal)
    assert isinstance(s.value, SymmetricDyad)
    assert s.value == SymmetricDyad((1000.0,) * 6)


def test_stress_needs_six_components():
    with pytest.raises(ValueError):
        Stress((1.0, 2.0, 3.0), units.Pressure.Pascal)


def test_trace_is_a_scalar_quantity():
    s = Stress((1.0, 2.0, 3.0, 4.0, 5.0, 6.0), units.Pressure.Pascal)
    t = s.trace()
    assert isinstance(t, StressScalar)
    assert t.value == 11.0


def test_generic_symmetric_dyad():
    cls = DimensionalSymmetricDyad[units.Pressure]
    s = cls((1.0, 0.0, 0.0, 1.0, 0.0, 1.0), units.Pressure.Megapascal)
    assert s.trace().value == 3.0e6


def test_print_groups_rows():
    s = Stress((1.0, 2.0, 3.0, 4.0, 5.0, 6.0), units.Pressure.Pascal)
    assert s.print(precision=Precision.Single) == (
        "(1.000000, 2.000000, 3.000000; 4.000000, 5.000000; 6.000000) Pa"
    )


def test_json_labels():
    s = Stress((1.0, 0.0, 0.0, 0.0, 0.0, 0.0), units.Pressure.Pascal)
    assert s.json() == (
        '{"value":{"xx":1.000000000000000,"xy":0,"xz":0,"yy":0,"yz":0,"zz":0},"unit":"Pa"}'
    )


def test_velocity_gradient_transpose():
    g = VelocityGradient(range(9), units.Frequency.Hertz)
    assert isinstance(g.value, Dyad)
    t = g.transpose()
    assert isinstance(t, VelocityGradient)
    assert t.value == Dyad(0.0, 3.0, 6.0, 1.0, 4.0, 7.0, 2.0, 5.0, 8.0)


def test_velocity_gradient_trace():
    g = VelocityGradient(range(9), units.Frequency.Hertz)
    assert isinstance(g.trace(), Frequency)
    assert g.trace().value == 12.0


def test_dyad_arithmetic():
    a = Stress((1.0,) * 6, units.Pressure.Pascal)
    assert (a + a).value == SymmetricDyad((2.0,) * 6)
    assert (a * 0.5).value == SymmetricDyad((0.5,) * 6)
    with pytest.raises(ZeroDivisionError):
        a / 0.0


def test_dyad_acts_on_vectors():
    s = Stress((1.0, 2.0, 3.0, 4.0, 5.0, 6.0), units.Pressure.Pascal)
    assert s.value.dot(Vector(0.0, 1.0, 0.0)) == Vector(2.0, 4.0, 5.0)
