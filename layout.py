"""World sizing and on-screen layout.

The world is a fixed-size canvas on desktop. In touch layout it takes the
viewport width and part of its height, leaving a strip below the canvas for
the left/right touch buttons.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

import config


@dataclass
class World:
    """Canvas dimensions in world units (pixels, y pointing down)."""
    width: float = config.DEFAULT_WIDTH
    height: float = config.DEFAULT_HEIGHT

    def contains_x(self, x: float, margin: float) -> bool:
        return margin <= x <= self.width - margin


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


def is_touch_device() -> bool:
    """Best-effort detection of a touch-first runtime."""
    flag = os.environ.get(config.TOUCH_ENV_FLAG, "").strip().lower()
    if flag in ("1", "true", "yes", "on"):
        return True
    if flag in ("0", "false", "no", "off"):
        return False
    if sys.platform == "android":
        return True
    android_markers = ("ANDROID_ARGUMENT", "ANDROID_PRIVATE", "P4A_BOOTSTRAP")
    return any(os.environ.get(k) for k in android_markers)


def derive_world(viewport_w: float, viewport_h: float, touch: bool = False) -> World:
    """Pick the world size once at startup."""
    if not touch:
        return World(config.DEFAULT_WIDTH, config.DEFAULT_HEIGHT)
    w = max(1.0, float(viewport_w))
    h = max(1.0, float(viewport_h) * config.TOUCH_HEIGHT_RATIO)
    return World(w, h)


def canvas_origin(window_w: float, window_h: float, world: World) -> tuple[float, float]:
    """Top-left corner of the centered canvas, never closer than 1px to the edge."""
    cx = max((window_w - world.width) * 0.5, 1)
    cy = max((window_h - world.height) * 0.5, 1)
    return (cx, cy)


def touch_buttons(window_w: float, window_h: float, world: World) -> tuple[Rect, Rect]:
    """Left/right touch button rectangles in window coordinates (y down)."""
    cx, cy = canvas_origin(window_w, window_h, world)
    top = cy + world.height + config.TOUCH_BUTTON_GAP
    height = max(1.0, (window_h - world.height) * config.TOUCH_BUTTON_STRIP_RATIO)
    half = world.width * 0.5
    return (Rect(cx, top, half, height), Rect(cx + half, top, half, height))
