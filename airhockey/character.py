"""Players and the puck, with gamepad-driven movement and puck growth."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from airhockey.geometry import Vec

CHARACTER_MAX = 2
CHARACTER_TYPE_NONE = 0
CHARACTER_TYPE_PLAYER1 = 1
CHARACTER_TYPE_PLAYER2 = 2

VECTOR_SCALE = 15
DEAD_ZONE = 10000


@dataclass(frozen=True)
class PadState:
    """A snapshot of one gamepad: left stick position and the held button names.

    Button names are lower case, e.g. ``"a"``, ``"x"``, ``"left_shoulder"``.
    """

    thumb_lx: int = 0
    thumb_ly: int = 0
    buttons: frozenset = frozenset()


@dataclass
class Character:
    """A round body on the rink."""

    kind: int = CHARACTER_TYPE_NONE
    pos: Vec = field(default_factory=Vec)
    radius: float = 0
    speed: float = 0
    center: Vec = field(default_factory=Vec)

    def norm_input(self, pad: PadState) -> Vec:
        """Move by the left stick, scaled to a fixed step, and return that step.

        Stick deflections within the dead zone on both axes give no movement.
        """
        if abs(pad.thumb_lx) > DEAD_ZONE or abs(pad.thumb_ly) > DEAD_ZONE:
            stick = Vec(pad.thumb_lx, -pad.thumb_ly, 0)
            self.center = stick.normalized().scale(VECTOR_SCALE)
        else:
            self.center = Vec()
        self.pos = Vec(self.pos.x + self.center.x, self.pos.y + self.center.y, self.pos.z)
        return self.center


def distance_sqr(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the squared distance between two points."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


class PuckGrade(IntEnum):
    SMALL = 1
    MEDIUM = 2
    BIG = 3


PUCK_RADIUS = {
    PuckGrade.SMALL: 32,
    PuckGrade.MEDIUM: 64,
    PuckGrade.BIG: 128,
}


def grade_for_bounds(bound_count: int) -> PuckGrade:
    """Return the puck grade reached after ``bound_count`` fence bounces."""
    if bound_count <= 5:
        return PuckGrade.SMALL
    if bound_count <= 10:
        return PuckGrade.MEDIUM
    return PuckGrade.BIG


def radius_for_grade(grade: int, radius: float) -> int:
    """Return the radius for ``grade``; an unknown grade keeps ``radius`` (as an integer)."""
    try:
        return PUCK_RADIUS[PuckGrade(grade)]
    except ValueError:
        return int(radius)


@dataclass
class Puck(Character):
    """The puck, which grows as it bounces off fences."""

    grade: PuckGrade = PuckGrade.SMALL
    bound_count: int = 0

    def add_bound(self) -> int:
        """Count one more fence bounce and return the new count."""
        self.bound_count += 1
        return self.bound_count

    def reset_bounds(self) -> int:
        """Clear the bounce count and return it."""
        self.bound_count = 0
        return self.bound_count

    def update_grade(self) -> PuckGrade:
        """Set grade and radius from the bounce count and return the grade."""
        self.grade = grade_for_bounds(self.bound_count)
        self.radius = radius_for_grade(self.grade, self.radius)
        return self.grade