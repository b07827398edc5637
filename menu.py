"""Idle menu overlay with fade-in/fade-out and last score panels."""

from __future__ import annotations

import pyglet
from pyglet import shapes

import config
from layout import World, canvas_origin


def _ui_scale(world: World) -> float:
    """Responsive UI scale factor based on the canvas size."""
    s = min(world.width / config.DEFAULT_WIDTH, world.height / config.DEFAULT_HEIGHT)
    return max(0.75, min(1.85, s))


class Menu:
    """Title, start hint and (after the first game) score/highscore panels."""

    def __init__(self, window_w: int, window_h: int, world: World, touch: bool = False):
        self.world = world
        self.touch = touch
        self.batch = pyglet.graphics.Batch()
        self.alpha = 0.0
        self._target = 0.0
        self._rate = 0.0
        self.show_results = False

        s = _ui_scale(world)
        self._backdrop = shapes.Rectangle(0, 0, 1, 1, color=(0, 0, 0), batch=self.batch)
        self._title = pyglet.text.Label(
            config.CAPTION.upper(),
            font_name=config.HUD_FONT,
            font_size=int(34 * s),
            weight="bold",
            anchor_x="center",
            anchor_y="center",
            batch=self.batch,
        )
        hint = "Tap to start" if touch else "Press ENTER to start"
        self._hint = pyglet.text.Label(
            hint,
            font_name=config.HUD_FONT,
            font_size=int(14 * s),
            anchor_x="center",
            anchor_y="center",
            batch=self.batch,
        )
        self._meta = pyglet.text.Label(
            "Arrows move  -  M toggles sound",
            font_name=config.HUD_FONT,
            font_size=int(10 * s),
            anchor_x="center",
            anchor_y="center",
            batch=self.batch,
        )
        self._score = pyglet.text.Label(
            "",
            font_name=config.HUD_FONT,
            font_size=int(14 * s),
            anchor_x="center",
            anchor_y="center",
            batch=self.batch,
        )
        self._highscore = pyglet.text.Label(
            "",
            font_name=config.HUD_FONT,
            font_size=int(14 * s),
            anchor_x="center",
            anchor_y="center",
            batch=self.batch,
        )
        self.resize(window_w, window_h)
        self._sync()

    def resize(self, window_w: int, window_h: int) -> None:
        ox, oy = canvas_origin(window_w, window_h, self.world)
        cx = ox + self.world.width * 0.5
        cy = window_h - (oy + self.world.height * 0.5)
        s = _ui_scale(self.world)

        w = min(self.world.width * 0.8, 360 * s)
        h = min(self.world.height * 0.8, 220 * s)
        self._backdrop.x = cx - w * 0.5
        self._backdrop.y = cy - h * 0.5
        self._backdrop.width = w
        self._backdrop.height = h

        self._title.x, self._title.y = cx, cy + 60 * s
        self._hint.x, self._hint.y = cx, cy + 10 * s
        self._score.x, self._score.y = cx - w * 0.25, cy - 40 * s
        self._highscore.x, self._highscore.y = cx + w * 0.25, cy - 40 * s
        self._meta.x, self._meta.y = cx, cy - 85 * s

    def _fade_to(self, target: float, duration_ms: float) -> None:
        self._target = target
        delta = abs(target - self.alpha)
        self._rate = delta / max(1e-6, duration_ms / 1000.0)

    def show(self, session=None) -> None:
        if session is not None and session.games_played > 0:
            self.show_results = True
            self._score.text = f"Score  {session.score}"
            self._highscore.text = f"Best  {session.highscore}"
        self._fade_to(1.0, config.MENU_FADE_IN_DURATION)

    def hide(self) -> None:
        self._fade_to(0.0, config.MENU_FADE_OUT_DURATION)

    @property
    def visible(self) -> bool:
        return self.alpha > 0.0

    def update(self, dt: float) -> None:
        if self.alpha == self._target:
            return
        step = self._rate * dt
        if self.alpha < self._target:
            self.alpha = min(self._target, self.alpha + step)
        else:
            self.alpha = max(self._target, self.alpha - step)
        self._sync()

    def _sync(self) -> None:
        a = max(0.0, min(1.0, self.alpha))
        self._backdrop.opacity = int(150 * a)
        text = config.PALETTE["menu_text"]
        meta = config.PALETTE["menu_meta"]
        self._title.color = (*text[:3], int(255 * a))
        self._hint.color = (*config.PALETTE["score_value"][:3], int(255 * a))
        self._meta.color = (*meta[:3], int(255 * a))
        results_a = int(255 * a) if self.show_results else 0
        self._score.color = (*text[:3], results_a)
        self._highscore.color = (*text[:3], results_a)

    def draw(self) -> None:
        if self.visible:
            self.batch.draw()
