"""Rectangles, colours, directions and small numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from floodforge.vector import Vector2


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b``."""
    return (b - a) * t + a


class Direction(Enum):
    RIGHT = 0
    UP = 1
    LEFT = 2
    DOWN = 3
    UNKNOWN = 4


_DIRECTION_VECTORS = {
    Direction.RIGHT: Vector2(1, 0),
    Direction.UP: Vector2(0, 1),
    Direction.LEFT: Vector2(-1, 0),
    Direction.DOWN: Vector2(0, -1),
}


def direction_to_vector(direction: Direction) -> Vector2:
    """Unit vector for a direction; the zero vector for UNKNOWN."""
    return _DIRECTION_VECTORS.get(direction, Vector2(0, 0))


@dataclass(init=False)
class Rect:
    """An axis-aligned rectangle whose corners are kept ordered."""

    x0: float
    y0: float
    x1: float
    y1: float

    def __init__(self, x0: float = 0.0, y0: float = 0.0, x1: float = 0.0, y1: float = 0.0) -> None:
        self.x0 = min(x0, x1)
        self.y0 = min(y0, y1)
        self.x1 = max(x0, x1)
        self.y1 = max(y0, y1)

    def inside(self, x: float, y: float) -> bool:
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def contains(self, point: Vector2) -> bool:
        return self.inside(point.x, point.y)

    def offset(self, delta: Vector2) -> Rect:
        """Move the rectangle in place and return it."""
        self.x0 += delta.x
        self.x1 += delta.x
        self.y0 += delta.y
        self.y1 += delta.y
        return self

    @staticmethod
    def from_size(x: float, y: float, width: float, height: float) -> Rect:
        return Rect(x, y, x + width, y + height)


@dataclass
class Colour:
    """An RGBA colour with float channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def mix(self, other: Colour, amount: float) -> Colour:
        """Blend towards this colour multiplied by ``other``."""
        return Colour(
            lerp(self.r, self.r * other.r, amount),
            lerp(self.g, self.g * other.g, amount),
            lerp(self.b, self.b * other.b, amount),
            lerp(self.a, self.a * other.a, amount),
        )