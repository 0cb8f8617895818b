"""Vector type and collision tests used by the game logic."""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = math.pi


@dataclass(frozen=True)
class Vec:
    """An immutable three-component vector; z is carried but rarely used."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vec:
        """Return this vector multiplied by ``factor``."""
        return Vec(self.x * factor, self.y * factor, self.z * factor)

    def normalized(self) -> Vec:
        """Return the unit vector in the same direction; a zero vector stays zero."""
        length = math.hypot(self.x, self.y, self.z)
        if length == 0:
            return Vec()
        return Vec(self.x / length, self.y / length, self.z / length)


def is_hit_box(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """Return True when two axis-aligned boxes (top-left corner, size) overlap."""
    return x1 < x2 + w2 and x2 < x1 + w1 and y1 < y2 + h2 and y2 < y1 + h1


def is_hit_circle(x1, y1, r1, x2, y2, r2) -> bool:
    """Return True when two circles overlap; coordinates are truncated to integers."""
    w = int(x1) - int(x2)
    h = int(y1) - int(y2)
    r = int(r1) + int(r2)
    return r * r > w * w + h * h


def is_hit_box_circle(x1, y1, w1, h1, x2, y2, r2=0.0) -> bool:
    """Return True when a circle centred at (x2, y2) with radius r2 touches the box.

    The box corner and size are truncated to integers. With a zero radius this
    tests whether the point lies strictly inside the box.
    """
    bx, by, bw, bh = int(x1), int(y1), int(w1), int(h1)
    return (
        bx - r2 < x2 < bx + bw + r2
        and by - r2 < y2 < by + bh + r2
    )


def _exponent(kind: int) -> int:
    # Integer division truncating toward zero; a zero kind raises ZeroDivisionError.
    return int(2 / kind)


def check_hit_all(pos1: Vec, r1: Vec, type1: int, pos2: Vec, r2: Vec, type2: int) -> bool:
    """Test two super-ellipse shapes for contact along the line joining their centres."""
    direction = (pos2 - pos1).normalized()
    e1 = _exponent(type1)
    e2 = _exponent(type2)

    def extents(component: float) -> tuple[float, float]:
        if component < 0:
            return -math.pow(-component, e1), math.pow(-component, e2)
        return math.pow(component, e1), -math.pow(component, e2)

    ex1, ex2 = extents(direction.x)
    ey1, ey2 = extents(direction.y)

    x1 = (ex1 * r1.x + pos1.x) * direction.x
    x2 = (ex2 * r2.x + pos2.x) * direction.x
    y1 = (ey1 * r1.y + pos1.y) * direction.y
    y2 = (ey2 * r2.y + pos2.y) * direction.y
    return x1 >= x2 and y1 >= y2