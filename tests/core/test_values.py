import math

import pytest

from phq.core.utils import Precision
from phq.core.values import Dyad, SymmetricDyad, Vector


# -------------------------------
# Vector
# -------------------------------

def test_vector_construction_forms():
    assert Vector(1.0, 2.0, 3.0) == Vector((1.0, 2.0, 3.0))
    assert Vector([1.0, 2.0, 3.0]) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("components", [(1.0, 2.0), (1.0, 2.0, 3.0, 4.0)])
def test_vector_wrong_length(components):
    with pytest.raises(ValueError):
        Vector(components)


def test_vector_rejects_non_numbers():
    with pytest.raises(TypeError):
        Vector(1.0, "2", 3.0)
    with pytest.raises(TypeError):
        Vector(1.0, True, 3.0)


def test_vector_labels():
    v = Vector(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        _ = v.w


def test_vector_algebra():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(1.0, 1.0, 1.0)
    assert a + b == Vector(2.0, 3.0, 4.0)
    assert a - b == Vector(0.0, 1.0, 2.0)
    assert 2 * a == Vector(2.0, 4.0, 6.0)
    assert a * 2 == Vector(2.0, 4.0, 6.0)
    assert a / 2 == Vector(0.5, 1.0, 1.5)
    assert -a == Vector(-1.0, -2.0, -3.0)
    assert +a is a


def test_vector_blocks_tuple_concatenation():
    with pytest.raises(TypeError):
        _ = Vector(1.0, 2.0, 3.0) + (1.0, 2.0, 3.0)


def test_vector_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vector(1.0, 2.0, 3.0) / 0


def test_vector_magnitude_and_direction():
    v = Vector(3.0, 4.0, 0.0)
    assert v.magnitude() == 5.0
    assert v.direction() == pytest.approx((0.6, 0.8, 0.0))
    assert math.isclose(v.direction().magnitude(), 1.0)


def test_zero_vector_direction_is_zero():
    assert Vector.zero().direction() == Vector(0.0, 0.0, 0.0)


def test_dot_and_cross():
    ex, ey = Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0)
    assert ex.dot(ey) == 0.0
    assert ex.cross(ey) == Vector(0.0, 0.0, 1.0)
    assert ey.cross(ex) == Vector(0.0, 0.0, -1.0)
    assert Vector(1.0, 2.0, 3.0).dot(Vector(4.0, 5.0, 6.0)) == 32.0


def test_vector_text_forms():
    v = Vector(1.0, 0.0, -2.0)
    assert v.print(Precision.Single) == "(1.000000, 0, -2.000000)"
    assert v.json(Precision.Single) == '{"x":1.000000,"y":0,"z":-2.000000}'
    assert v.xml(Precision.Single) == "<x>1.000000</x><y>0</y><z>-2.000000</z>"
    assert v.yaml(Precision.Single) == "{x:1.000000,y:0,z:-2.000000}"
    assert str(v) == "(1.000000000000000, 0, -2.000000000000000)"
    assert repr(v) == "Vector(1.000000000000000, 0, -2.000000000000000)"


def test_vector_is_hashable():
    assert len({Vector(1.0, 2.0, 3.0), Vector(1.0, 2.0, 3.0)}) == 1


# -------------------------------
# Dyads
# -------------------------------

def test_symmetric_dyad_print_groups_rows():
    d = SymmetricDyad(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert d.print(Precision.Single) == (
        "(1.000000, 2.000000, 3.000000; 4.000000, 5.000000; 6.000000)"
    )
    assert d.xy == 2.0
    assert d.zz == 6.0


def test_symmetric_dyad_trace_and_dot():
    d = SymmetricDyad(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert d.trace() == 11.0
    assert d.dot(Vector(1.0, 0.0, 0.0)) == Vector(1.0, 2.0, 3.0)


def test_dyad_transpose_and_trace():
    d = Dyad(range(9))
    assert d.transpose() == Dyad(0, 3, 6, 1, 4, 7, 2, 5, 8)
    assert d.transpose().transpose() == d
    assert d.trace() == 12
    assert d.dot(Vector(1.0, 0.0, 0.0)) == Vector(0.0, 3.0, 6.0)


def test_dyad_json_labels():
    d = Dyad((1.0,) * 9)
    assert d.json(Precision.Single).startswith('{"xx":1.000000,"xy":1.000000,"xz":1.000000,"yx":')


def test_different_value_types_do_not_add():
    with pytest.raises(TypeError):
        _ = SymmetricDyad.zero() + Dyad.zero()
