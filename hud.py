"""Score bar drawn across the top of the canvas while playing."""

import pyglet
from pyglet import shapes
from pyglet.graphics import Group

import config
from layout import World
from utils import rgba_opacity


class ScoreHud:
    """Translucent panel with a "Score:" label and the running score."""

    def __init__(self, world: World, batch, group):
        self.world = world
        self.visible = False
        panel_color = config.PALETTE["hud_panel"]
        self._panel = shapes.Rectangle(0, 0, world.width, config.HUD_PANEL_HEIGHT, color=panel_color[:3], batch=batch, group=group)
        self._panel.opacity = rgba_opacity(panel_color)
        text_group = Group(order=1, parent=group)
        self._label = pyglet.text.Label(
            config.HUD_LABEL,
            font_name=config.HUD_FONT,
            font_size=config.HUD_FONT_SIZE,
            weight="bold",
            color=config.PALETTE["hud_text"],
            anchor_x="left",
            anchor_y="baseline",
            batch=batch,
            group=text_group,
        )
        self._value = pyglet.text.Label(
            "0",
            font_name=config.HUD_FONT,
            font_size=config.HUD_FONT_SIZE,
            weight="bold",
            color=config.PALETTE["score_value"],
            anchor_x="left",
            anchor_y="baseline",
            batch=batch,
            group=text_group,
        )
        self._score = None
        self._set_visible(False)

    def layout(self, left: float, top: float) -> None:
        """Anchor the bar at the canvas top-left corner (window coordinates)."""
        self._panel.x = left
        self._panel.y = top - config.HUD_PANEL_HEIGHT
        self._label.x = left + config.HUD_LABEL_X
        self._label.y = top - config.HUD_LABEL_Y
        self._value.x = left + config.HUD_LABEL_X + config.HUD_VALUE_OFFSET
        self._value.y = top - config.HUD_LABEL_Y

    def _set_visible(self, visible: bool) -> None:
        self.visible = visible
        self._panel.visible = visible
        self._label.visible = visible
        self._value.visible = visible

    def update(self, score: int, visible: bool = True) -> None:
        if visible != self.visible:
            self._set_visible(visible)
        if visible and score != self._score:
            self._score = score
            self._value.text = str(score)
