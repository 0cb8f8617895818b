import math

import pytest

from airhockey.geometry import (
    Vec,
    check_hit_all,
    is_hit_box,
    is_hit_box_circle,
    is_hit_circle,
)


def test_vec_add_and_sub_round_trip():
    a = Vec(1.5, -2.0, 3.0)
    b = Vec(4.0, 5.0, -1.0)
    assert (a + b) - b == a


def test_vec_scale_multiplies_each_component():
    v = Vec(2.0, -3.0, 1.0).scale(3)
    assert v == Vec(2.0 * 3, -3.0 * 3, 1.0 * 3)


def test_vec_normalized_has_unit_length():
    v = Vec(3.0, -7.0, 2.0).normalized()
    assert math.isclose(math.hypot(v.x, v.y, v.z), 1.0)
    assert v.x > 0 and v.y < 0 and v.z > 0


def test_vec_normalized_zero_stays_zero():
    assert Vec().normalized() == Vec()


def test_is_hit_box_overlap():
    assert is_hit_box(0, 0, 10, 10, 5, 5, 10, 10) is True


def test_is_hit_box_touching_edges_is_not_a_hit():
    assert is_hit_box(0, 0, 10, 10, 10, 0, 10, 10) is False
    assert is_hit_box(0, 0, 10, 10, 0, 10, 10, 10) is False


def test_is_hit_box_is_symmetric():
    boxes = [(0, 0, 4, 4), (3, 3, 2, 2), (10, 10, 1, 1)]
    for a in boxes:
        for b in boxes:
            assert is_hit_box(*a, *b) == is_hit_box(*b, *a)


def test_is_hit_circle_overlap_and_touch():
    assert is_hit_circle(0, 0, 3, 4, 0, 2) is True
    # Exactly touching circles do not count as a hit.
    assert is_hit_circle(0, 0, 3, 5, 0, 2) is False


def test_is_hit_circle_truncates_coordinates():
    assert is_hit_circle(0, 0, 3, 5.9, 0, 2) == is_hit_circle(0, 0, 3, 5, 0, 2)


def test_is_hit_box_circle_point_inside_strictly():
    assert is_hit_box_circle(0, 0, 10, 10, 5, 5) is True
    assert is_hit_box_circle(0, 0, 10, 10, 0, 5) is False
    assert is_hit_box_circle(0, 0, 10, 10, 10, 5) is False


def test_is_hit_box_circle_radius_widens_the_box():
    assert is_hit_box_circle(0, 0, 10, 10, 12, 5) is False
    assert is_hit_box_circle(0, 0, 10, 10, 12, 5, 3) is True


def test_check_hit_all_circles_in_contact():
    r = Vec(5, 5)
    assert check_hit_all(Vec(0, 0), r, 2, Vec(10, 0), r, 2) is True
    assert check_hit_all(Vec(0, 0), r, 2, Vec(9, 0), r, 2) is True


def test_check_hit_all_circles_apart():
    r = Vec(5, 5)
    assert check_hit_all(Vec(0, 0), r, 2, Vec(11, 0), r, 2) is False


def test_check_hit_all_zero_type_raises():
    with pytest.raises(ZeroDivisionError):
        check_hit_all(Vec(0, 0), Vec(1, 1), 0, Vec(5, 0), Vec(1, 1), 2)