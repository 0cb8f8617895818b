"""A small two-paddle rally on an 800x600 field driven by the keyboard."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pygame

FIELD_WIDTH = 800
FIELD_HEIGHT = 600
PADDLE_STEP = 5
PLAYER1_X = 50
PLAYER2_X = 750

PUCK_COLOR = (255, 255, 255)
PLAYER1_COLOR = (255, 0, 0)
PLAYER2_COLOR = (0, 0, 255)


@dataclass
class RallyState:
    """Paddle heights, puck position and velocity, and body sizes.

    ``update`` takes the names of held keys: ``"w"`` and ``"s"`` move the left
    paddle, ``"up"`` and ``"down"`` move the right one.
    """

    player1_y: int = FIELD_HEIGHT // 2
    player2_y: int = FIELD_HEIGHT // 2
    puck_x: int = FIELD_WIDTH // 2
    puck_y: int = FIELD_HEIGHT // 2
    speed_x: int = 4
    speed_y: int = 3
    puck_radius: int = 10
    paddle_radius: int = 30

    def _clamp_paddle(self, y: int) -> int:
        return min(max(y, self.paddle_radius), FIELD_HEIGHT - self.paddle_radius)

    def _touches(self, paddle_x: int, paddle_y: int) -> bool:
        dx = self.puck_x - paddle_x
        dy = self.puck_y - paddle_y
        reach = self.puck_radius + self.paddle_radius
        return dx * dx + dy * dy <= reach * reach

    def update(self, pressed: Iterable[str]) -> None:
        """Advance one frame with the given held keys."""
        keys = set(pressed)
        if "w" in keys:
            self.player1_y -= PADDLE_STEP
        if "s" in keys:
            self.player1_y += PADDLE_STEP
        if "up" in keys:
            self.player2_y -= PADDLE_STEP
        if "down" in keys:
            self.player2_y += PADDLE_STEP

        self.player1_y = self._clamp_paddle(self.player1_y)
        self.player2_y = self._clamp_paddle(self.player2_y)

        self.puck_x += self.speed_x
        self.puck_y += self.speed_y

        r = self.puck_radius
        if self.puck_y < r or self.puck_y > FIELD_HEIGHT - r:
            self.speed_y = -self.speed_y
        if self.puck_x < r or self.puck_x > FIELD_WIDTH - r:
            self.speed_x = -self.speed_x

        if self._touches(PLAYER1_X, self.player1_y):
            self.speed_x = -self.speed_x
        if self._touches(PLAYER2_X, self.player2_y):
            self.speed_x = -self.speed_x


def draw_rally(surface: pygame.Surface, state: RallyState) -> None:
    """Draw the puck and both paddles as filled circles."""
    pygame.draw.circle(surface, PUCK_COLOR, (state.puck_x, state.puck_y), state.puck_radius)
    pygame.draw.circle(surface, PLAYER1_COLOR, (PLAYER1_X, state.player1_y), state.paddle_radius)
    pygame.draw.circle(surface, PLAYER2_COLOR, (PLAYER2_X, state.player2_y), state.paddle_radius)