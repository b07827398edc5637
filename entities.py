"""Game entities: balls, particles and floating notifications.

All variants share a position and a liveness flag (see :class:`Entity`) and
carry a ``kind`` tag so renderers and tests can dispatch on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Protocol, Tuple, runtime_checkable

from config import PALETTE
from logic import BalanceLogic
from physics import intersects
from utils import Point


Color = Tuple[int, int, int, int]

PLAYER = "player"
ENEMY = "enemy"
PARTICLE = "particle"
NOTIFICATION = "notification"


@runtime_checkable
class Entity(Protocol):
    pos: Point
    alive: bool


@dataclass
class Ball:
    """Player or enemy ball.

    The player uses both flags as movement intents. Enemies only use
    ``going_right`` as their patrol direction.
    """
    pos: Point
    size: float
    speed: float
    color: Color = PALETTE["player"]
    kind: str = PLAYER
    going_left: bool = False
    going_right: bool = False
    alive: bool = True

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Ball size must be positive, got {self.size}")
        if self.speed < 0:
            raise ValueError(f"Ball speed must be non-negative, got {self.speed}")

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    def intersects(self, other: "Ball") -> bool:
        return intersects(self, other)


@dataclass
class Particle:
    """Square spark with exponential drag and a late, random fade."""
    kind: ClassVar[str] = PARTICLE

    pos: Point
    vel: Point
    color: Color
    size: float
    alpha: float = 1.0
    fading: bool = False
    cutoff: float = BalanceLogic.alpha_cutoff

    @property
    def alive(self) -> bool:
        return self.alpha >= self.cutoff


@dataclass
class Notification:
    """Floating text with a round backdrop."""
    kind: ClassVar[str] = NOTIFICATION

    text: str = ""
    pos: Point = field(default_factory=Point)
    scale: float = 1.0
    rgb: Tuple[int, int, int] = (255, 255, 255)
    alpha: float = 1.0
    cutoff: float = BalanceLogic.alpha_cutoff

    @property
    def alive(self) -> bool:
        return self.alpha >= self.cutoff

    @property
    def radius(self) -> float:
        return 14.0 * self.scale

    @property
    def font_size(self) -> int:
        return round(12 * self.scale)


def make_player(x: float, y: float, size: float, speed: float, color: Color = PALETTE["player"]) -> Ball:
    return Ball(pos=Point(x, y), size=size, speed=speed, color=color, kind=PLAYER)


def make_enemy(x: float, y: float, size: float, speed: float, color: Color) -> Ball:
    return Ball(pos=Point(x, y), size=size, speed=speed, color=color, kind=ENEMY)
