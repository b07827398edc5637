"""Bounce trajectory and collision detection logic."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from utils import Point


@runtime_checkable
class PhysicalEntity(Protocol):
    pos: Point
    size: float


def quadratic_function(a: float, b: float, c: float) -> Callable[[float], float]:
    """Return f(t) = a*t^2 + b*t + c.

    With b == 0 the parabola is symmetric around t == 0, which is the apex of
    the bounce.
    """
    def f(t: float) -> float:
        return a * (t * t) + b * t + c
    return f


def check_circle_collision(pos1: Point, r1: float, pos2: Point, r2: float) -> bool:
    """Check if two circles touch or overlap (no square root)."""
    r_sum = r1 + r2
    return pos1.distance_to_squared(pos2) <= r_sum * r_sum


def intersects(a: PhysicalEntity, b: PhysicalEntity) -> bool:
    return check_circle_collision(a.pos, a.size, b.pos, b.size)
