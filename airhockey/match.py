"""Rules of one timed air-hockey match: puck physics, fences, goals and scoring."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum

from airhockey.character import (
    CHARACTER_TYPE_PLAYER1,
    CHARACTER_TYPE_PLAYER2,
    Character,
    PadState,
    Puck,
    PuckGrade,
    radius_for_grade,
)
from airhockey.geometry import Vec, is_hit_box_circle, is_hit_circle

SCREEN_W = 1920
SCREEN_H = 1080

PLAYER1_X = 510
PLAYER1_Y = 534
PLAYER2_X = 1400
PLAYER2_Y = 534
PLAYER_RADIUS = 64
PLAYER_SPEED = 2

PLAYER_X_MIN = 180
PLAYER_X_MAX = 1750
PLAYER_Y_MIN = 170
PLAYER_Y_MAX = 900

PUCK_X = 962
PUCK_Y = 500

GOAL_W = 64
GOAL_H = 384

FENCE_MAX = 72
FENCE_SIZE = 64

PUCK_SPEED_ADJUSTMENT = 0.2
PUCK_SPEED_ACCELERATION = 1.5

PUCK_SCORE = {
    PuckGrade.SMALL: 1,
    PuckGrade.MEDIUM: 2,
    PuckGrade.BIG: 4,
}

GAME_TIME = 100
RESULT_DELAY = 5
EFFECT_MAX = 30


class EffectKind(IntEnum):
    NORMAL = 0
    FIRE = 1
    CRASH = 2


class Sound(Enum):
    GOAL = "goal"
    FENCE_CRASH = "fence_crash"
    FENCE_BREAK = "fence_break"


class Orientation(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


@dataclass
class Effect:
    """A short sprite animation playing at a fixed spot."""

    kind: EffectKind
    x: int
    y: int
    anim_count: int = 0
    anim_speed: int = 4
    anim_frames: int = 6


@dataclass(frozen=True)
class Goal:
    """A goal mouth given by its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int

    @property
    def center(self) -> tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2


@dataclass
class Fence:
    """One fence block; a big puck can break it."""

    x: int
    y: int
    w: int = FENCE_SIZE
    h: int = FENCE_SIZE
    orientation: Orientation = Orientation.HORIZONTAL
    broken: bool = False


def clamp_player(pos: Vec) -> Vec:
    """Keep a player position inside the playing area."""
    return Vec(
        min(max(pos.x, PLAYER_X_MIN), PLAYER_X_MAX),
        min(max(pos.y, PLAYER_Y_MIN), PLAYER_Y_MAX),
        pos.z,
    )


def invert(axis: int, vec: Vec) -> Vec:
    """Negate the x component for axis 0 or the y component for axis 1."""
    if axis == 0:
        return Vec(-vec.x, vec.y, vec.z)
    if axis == 1:
        return Vec(vec.x, -vec.y, vec.z)
    return vec


def build_fences() -> list[Fence]:
    """Lay out the fence blocks: top and bottom rows, then the four side columns."""
    fences = []
    for t in range(FENCE_MAX):
        if t < 28:
            fence = Fence((t + 1) * 64, 50)
        elif t < 56:
            fence = Fence((t - 27) * 64, 945)
        elif t < 60:
            fence = Fence(64, (t - 56) * 64 + 100, orientation=Orientation.VERTICAL)
        elif t < 64:
            fence = Fence(64, (t - 56) * 64 + 454, orientation=Orientation.VERTICAL)
        elif t < 68:
            fence = Fence(64 * 28, (t - 64) * 64 + 100, orientation=Orientation.VERTICAL)
        else:
            fence = Fence(64 * 28, (t - 64) * 64 + 454, orientation=Orientation.VERTICAL)
        fences.append(fence)
    return fences


class Match:
    """State of one match between two gamepad-driven players.

    Sounds to be played are queued in ``sounds``; effects to be drawn come
    from ``advance_effects``.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self.reset()

    def reset(self) -> None:
        """Start a fresh match: scores, bodies, goals, fences, effects and timer."""
        self.scores = [0, 0]
        self.winner: int | None = None
        self.last_touch = 0
        self.move_vector = Vec()
        self.effects: list[Effect] = []
        self.sounds: list[Sound] = []
        self.puck = Puck(
            pos=Vec(PUCK_X, SCREEN_H // 2),
            radius=radius_for_grade(PuckGrade.SMALL, 0),
            speed=1,
            grade=PuckGrade.SMALL,
        )
        self.characters = [
            Character(
                kind=CHARACTER_TYPE_PLAYER1,
                pos=Vec(PLAYER1_X, PLAYER1_Y),
                radius=PLAYER_RADIUS,
                speed=PLAYER_SPEED,
            ),
            Character(
                kind=CHARACTER_TYPE_PLAYER2,
                pos=Vec(PLAYER2_X, PLAYER2_Y),
                radius=PLAYER_RADIUS,
                speed=PLAYER_SPEED,
            ),
        ]
        self.goals = [
            Goal(64, 340, GOAL_W, GOAL_H),
            Goal(1792, 340, GOAL_W, GOAL_H),
        ]
        self.fences = build_fences()
        self.start_time = self.clock()
        self.remaining = GAME_TIME

    @property
    def remaining_time(self) -> int:
        """Whole seconds left on the match clock; negative once time is up."""
        return GAME_TIME - (int(self.clock()) - int(self.start_time))

    @property
    def over(self) -> bool:
        """True once the result screen should be shown."""
        return self.remaining_time <= -RESULT_DELAY

    def move_puck(self) -> Vec:
        """Let touching paddles push the puck, then move it; return its new position."""
        for index, character in enumerate(self.characters):
            if is_hit_circle(
                character.pos.x, character.pos.y, character.radius,
                self.puck.pos.x, self.puck.pos.y, self.puck.radius,
            ):
                self.last_touch = index
                push = (self.puck.pos - character.pos).scale(PUCK_SPEED_ADJUSTMENT)
                self.move_vector = Vec(
                    push.x + character.center.x,
                    push.y + character.center.y,
                    self.move_vector.z,
                )
        if self.puck.grade in (PuckGrade.BIG, PuckGrade.MEDIUM):
            acceleration = PUCK_SPEED_ACCELERATION
        else:
            acceleration = 1
        self.puck.pos = Vec(
            self.puck.pos.x + self.move_vector.x * acceleration,
            self.puck.pos.y + self.move_vector.y * acceleration,
            self.puck.pos.z,
        )
        return self.puck.pos

    def award(self, player: int) -> int:
        """Add the current puck's value to ``player`` (0 or 1); return the new score."""
        self.scores[player] += PUCK_SCORE.get(self.puck.grade, 0)
        return self.scores[player]

    def add_effect(self, kind: EffectKind, x: int, y: int) -> Effect | None:
        """Start an effect; nothing happens when all effect slots are busy."""
        if len(self.effects) >= EFFECT_MAX:
            return None
        effect = Effect(EffectKind(kind), int(x), int(y))
        self.effects.append(effect)
        return effect

    def advance_effects(self) -> list[tuple[Effect, int]]:
        """Return each live effect with the frame to draw, and step its animation."""
        shown = []
        alive = []
        for effect in self.effects:
            frame = effect.anim_count // effect.anim_speed
            if frame < effect.anim_frames:
                shown.append((effect, frame))
                effect.anim_count += 1
                alive.append(effect)
        self.effects = alive
        return shown

    def judge_goal(self) -> bool:
        """Score a goal if the puck centre is inside a goal mouth."""
        for index, goal in enumerate(self.goals):
            if is_hit_box_circle(goal.x, goal.y, goal.w, goal.h, self.puck.pos.x, self.puck.pos.y):
                # The left goal belongs to player 1, so the other player scores.
                self.award(1 if index == 0 else 0)
                cx, cy = goal.center
                self.add_effect(EffectKind.NORMAL, cx - 770, cy - 200)
                self.sounds.append(Sound.GOAL)
                return True
        return False

    def out_of_range(self, pos: Vec) -> bool:
        """True when ``pos`` lies outside the screen."""
        return pos.x < 0 or pos.x > SCREEN_W or pos.y < 0 or pos.y > SCREEN_H

    def fence_hit(self) -> None:
        """Bounce the puck off fences, or break them when the puck is big."""
        for fence in self.fences:
            if fence.broken:
                continue
            # Contact is tested with the puck centre only.
            if not is_hit_box_circle(fence.x, fence.y, fence.w, fence.h, self.puck.pos.x, self.puck.pos.y, 0):
                continue
            cx = fence.x + fence.w // 2
            cy = fence.y + fence.h // 2
            if self.puck.grade == PuckGrade.BIG:
                fence.broken = True
                self.add_effect(EffectKind.CRASH, cx - 192, cy - 160)
                self.sounds.append(Sound.FENCE_BREAK)
                continue
            if fence.orientation == Orientation.HORIZONTAL:
                self.move_vector = invert(1, self.move_vector)
            else:
                self.move_vector = invert(0, self.move_vector)
            self.puck.add_bound()
            self.sounds.append(Sound.FENCE_CRASH)
            self.add_effect(EffectKind.FIRE, cx - 192, cy - 224)

    def position_reset(self) -> None:
        """Put the puck and both players back on their spots and stop the puck."""
        self.puck.pos = Vec(PUCK_X, PUCK_Y, self.puck.pos.z)
        self.move_vector = Vec()
        self.characters[0].pos = Vec(PLAYER1_X, PLAYER1_Y, self.characters[0].pos.z)
        self.characters[1].pos = Vec(PLAYER2_X, PLAYER2_Y, self.characters[1].pos.z)

    def reset_fences(self) -> None:
        """Restore every broken fence."""
        for fence in self.fences:
            fence.broken = False

    def judge_winner(self) -> int:
        """Set and return the winner: 0 for a draw, else 1 or 2."""
        first, second = self.scores
        if first == second:
            self.winner = 0
        elif first > second:
            self.winner = 1
        else:
            self.winner = 2
        return self.winner

    def step(self, pad1: PadState, pad2: PadState) -> None:
        """Advance one frame with both gamepads' state."""
        self.remaining = self.remaining_time
        if self.remaining > 0:
            self.move_puck()
            for character, pad in zip(self.characters, (pad1, pad2)):
                offset = character.norm_input(pad)
                character.pos = clamp_player(character.pos + offset)

            if self.out_of_range(self.puck.pos):
                self.award(self.last_touch)

            if self.judge_goal() or self.out_of_range(self.puck.pos):
                self.position_reset()
                self.puck.reset_bounds()
                self.reset_fences()

            self.fence_hit()
            self.puck.update_grade()

        if self.remaining == 0:
            self.judge_winner()