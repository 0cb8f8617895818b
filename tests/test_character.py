import math

import pytest

from airhockey.character import (
    DEAD_ZONE,
    VECTOR_SCALE,
    Character,
    PadState,
    Puck,
    PuckGrade,
    distance_sqr,
    grade_for_bounds,
    radius_for_grade,
)
from airhockey.geometry import Vec


def test_norm_input_inside_dead_zone_does_not_move():
    c = Character(pos=Vec(100, 200))
    step = c.norm_input(PadState(thumb_lx=DEAD_ZONE, thumb_ly=-DEAD_ZONE))
    assert step == Vec()
    assert c.pos == Vec(100, 200)


def test_norm_input_full_right_moves_fixed_step():
    c = Character(pos=Vec(100, 200))
    step = c.norm_input(PadState(thumb_lx=30000, thumb_ly=0))
    assert step == Vec(VECTOR_SCALE, 0)
    assert c.pos == Vec(100 + VECTOR_SCALE, 200)
    assert c.center == step


def test_norm_input_inverts_vertical_axis():
    c = Character(pos=Vec(0, 0))
    step = c.norm_input(PadState(thumb_lx=0, thumb_ly=20000))
    assert step.y == -VECTOR_SCALE
    assert c.pos.y == -VECTOR_SCALE


def test_norm_input_diagonal_step_has_fixed_length():
    c = Character()
    step = c.norm_input(PadState(thumb_lx=15000, thumb_ly=-25000))
    assert math.isclose(math.hypot(step.x, step.y), VECTOR_SCALE)
    assert step.x > 0 and step.y > 0


def test_distance_sqr_is_symmetric_and_zero_on_same_point():
    assert distance_sqr(1.5, 2.0, 7.0, -3.0) == distance_sqr(7.0, -3.0, 1.5, 2.0)
    assert distance_sqr(4.0, 4.0, 4.0, 4.0) == 0
    assert distance_sqr(0, 0, 3, 4) == 25


@pytest.mark.parametrize(
    "bounds, grade",
    [
        (0, PuckGrade.SMALL),
        (5, PuckGrade.SMALL),
        (6, PuckGrade.MEDIUM),
        (10, PuckGrade.MEDIUM),
        (11, PuckGrade.BIG),
        (50, PuckGrade.BIG),
    ],
)
def test_grade_for_bounds_thresholds(bounds, grade):
    assert grade_for_bounds(bounds) is grade


@pytest.mark.parametrize(
    "grade, radius",
    [(PuckGrade.SMALL, 32), (PuckGrade.MEDIUM, 64), (PuckGrade.BIG, 128)],
)
def test_radius_for_grade_known(grade, radius):
    assert radius_for_grade(grade, 1.0) == radius


def test_radius_for_grade_unknown_keeps_radius():
    assert radius_for_grade(0, 7.9) == 7
    assert radius_for_grade(9, 40) == 40


def test_puck_bounds_count_and_reset():
    puck = Puck()
    for expected in range(1, 4):
        assert puck.add_bound() == expected
    assert puck.bound_count == 3
    assert puck.reset_bounds() == 0
    assert puck.bound_count == 0


def test_puck_update_grade_sets_radius():
    puck = Puck(radius=32)
    for _ in range(6):
        puck.add_bound()
    assert puck.update_grade() is PuckGrade.MEDIUM
    assert puck.radius == 64
    for _ in range(5):
        puck.add_bound()
    assert puck.update_grade() is PuckGrade.BIG
    assert puck.radius == 128
    puck.reset_bounds()
    assert puck.update_grade() is PuckGrade.SMALL
    assert puck.radius == 32