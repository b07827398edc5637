"""Utility functions and math helpers."""

import math
import os
import sys
from dataclasses import dataclass


@dataclass
class Point:
    """2D position, mutated in place as entities move."""
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def distance_to_squared(self, other) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy


def resource_path(*parts: str) -> str:
    """Resolve paths for both source and PyInstaller (_MEIPASS) runtime."""
    base = getattr(sys, "_MEIPASS", os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base, *parts)


def rgba_opacity(color, alpha: float = 1.0) -> int:
    """Combine a color's own alpha channel with an extra alpha in [0, 1]."""
    base = color[3] if len(color) > 3 else 255
    a = max(0.0, min(1.0, float(alpha)))
    return int(base * a)
