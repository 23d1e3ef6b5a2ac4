import dataclasses
import math

import numpy as np
import pytest

from segmentintersection.model.geometry_primitives import Segment, Vector


def test_vector_z_defaults_to_zero():
    v = Vector(1.0, 2.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 0.0)


def test_length_squared_is_not_the_euclidean_length():
    v = Vector(1.0, 2.0, 2.0)
    assert v.length_squared() == 9.0
    assert v.magnitude == 3.0


def test_vector_str_formatting():
    assert str(Vector(0, 3, 3)) == "(0, 3, 3)"
    assert str(Vector(1.5, -2.0, 0.25)) == "(1.5, -2, 0.25)"


def test_vector_is_an_immutable_value():
    v = Vector(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vector(1.0, 2.0, 3.0)
    assert len({v, Vector(1.0, 2.0, 3.0)}) == 1


def test_vector_operators():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(4.0, 5.0, 6.0)
    assert a + b == Vector(5.0, 7.0, 9.0)
    assert b - a == Vector(3.0, 3.0, 3.0)
    assert a * 2.0 == Vector(2.0, 4.0, 6.0)
    assert 2.0 * a == a * 2.0
    assert -a == Vector(-1.0, -2.0, -3.0)


def test_vector_array_interop():
    v = Vector(1.0, -2.0, 3.5)
    arr = v.to_array()
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [1.0, -2.0, 3.5])
    assert Vector.from_array(arr) == v
    assert Vector.from_array([4, 5]) == Vector(4.0, 5.0, 0.0)


def test_vector_from_array_rejects_wrong_size():
    with pytest.raises(ValueError):
        Vector.from_array([1.0, 2.0, 3.0, 4.0])


def test_segment_accessors_and_lengths():
    seg = Segment(Vector(1.0, 1.0, 1.0), Vector(4.0, 5.0, 1.0))
    assert seg.start == Vector(1.0, 1.0, 1.0)
    assert seg.end == Vector(4.0, 5.0, 1.0)
    assert seg.direction == Vector(3.0, 4.0, 0.0)
    assert seg.length_squared() == 25.0
    assert seg.length == 5.0


def test_segment_point_at_and_reverse():
    seg = Segment(Vector(0.0, 0.0, 0.0), Vector(2.0, 4.0, 6.0))
    assert seg.point_at(0.0) == seg.start
    assert seg.point_at(1.0) == seg.end
    assert seg.point_at(0.5) == Vector(1.0, 2.0, 3.0)
    rev = seg.reverse()
    assert (rev.start, rev.end) == (seg.end, seg.start)


def test_degenerate_segment():
    p = Vector(1.0, 2.0, 3.0)
    seg = Segment(p, p)
    assert seg.is_degenerate
    assert seg.length_squared() == 0.0
    assert not Segment(p, Vector(0.0, 0.0, 0.0)).is_degenerate
    assert math.isclose(Segment(p, Vector(0.0, 0.0, 0.0)).length, math.sqrt(14.0))
