import pygame

from airhockey.rally import (
    FIELD_HEIGHT,
    PADDLE_STEP,
    PLAYER1_X,
    PLAYER2_X,
    RallyState,
    draw_rally,
)


def _still(**kwargs):
    base = dict(
        player1_y=300,
        player2_y=300,
        puck_x=400,
        puck_y=300,
        speed_x=0,
        speed_y=0,
        puck_radius=10,
        paddle_radius=30,
    )
    base.update(kwargs)
    return RallyState(**base)


def test_keys_move_paddles_by_step():
    state = _still()
    state.update({"w", "down"})
    assert state.player1_y == 300 - PADDLE_STEP
    assert state.player2_y == 300 + PADDLE_STEP


def test_opposite_keys_cancel():
    state = _still()
    state.update(["w", "s", "up", "down"])
    assert state.player1_y == 300
    assert state.player2_y == 300


def test_paddles_are_clamped_to_field():
    state = _still(player1_y=31, player2_y=FIELD_HEIGHT - 31)
    state.update({"w", "down"})
    assert state.player1_y == state.paddle_radius
    assert state.player2_y == FIELD_HEIGHT - state.paddle_radius


def test_puck_moves_by_its_speed_in_open_field():
    state = _still(speed_x=4, speed_y=-3)
    state.update(())
    assert (state.puck_x, state.puck_y) == (400 + 4, 300 - 3)
    assert (state.speed_x, state.speed_y) == (4, -3)


def test_puck_bounces_off_top_wall():
    state = _still(puck_y=12, speed_y=-5)
    state.update(())
    assert state.speed_y == 5


def test_puck_bounces_off_right_wall():
    state = _still(puck_x=788, puck_y=100, speed_x=5)
    state.update(())
    assert state.speed_x == -5


def test_puck_bounces_off_left_paddle():
    state = _still(puck_x=85, speed_x=-3)
    state.update(())
    assert state.speed_x == 3


def test_puck_bounces_off_right_paddle():
    state = _still(puck_x=715, speed_x=3)
    state.update(())
    assert state.speed_x == -3


def test_draw_rally_paints_bodies():
    surface = pygame.Surface((800, 600))
    state = _still(player1_y=200, player2_y=400)
    draw_rally(surface, state)
    assert tuple(surface.get_at((state.puck_x, state.puck_y)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((PLAYER1_X, 200)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((PLAYER2_X, 400)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)