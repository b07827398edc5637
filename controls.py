"""Logical input identities and their pyglet bindings.

States only ever see the string identities below, never raw key symbols or
pixel coordinates.
"""

from __future__ import annotations

from layout import World, touch_buttons

# Keys
LEFT = "left"
RIGHT = "right"
CONFIRM = "confirm"
CANCEL = "cancel"
MUTE = "mute"

# Touch zones (LEFT and RIGHT are shared with the keys)
GENERIC = "generic"


def key_bindings() -> dict[int, str]:
    """Map pyglet key symbols to logical keys."""
    from pyglet.window import key

    return {
        key.LEFT: LEFT,
        key.RIGHT: RIGHT,
        key.ENTER: CONFIRM,
        key.RETURN: CONFIRM,
        key.ESCAPE: CANCEL,
        key.M: MUTE,
    }


def touch_zone_at(x: float, y: float, window_w: float, window_h: float, world: World) -> str:
    """Classify a press in pyglet window coordinates (y up) into a touch zone."""
    y_down = window_h - y
    left, right = touch_buttons(window_w, window_h, world)
    if left.contains(x, y_down):
        return LEFT
    if right.contains(x, y_down):
        return RIGHT
    return GENERIC
