"""Visual rendering system.

World coordinates are y-down with the origin at the top-left of the canvas;
everything is converted to pyglet's y-up window space here. Render objects
are pooled in one Batch and re-synced every frame instead of reallocated.
"""

from __future__ import annotations

import pyglet
from pyglet import shapes
from pyglet.graphics import Group

import config
from entities import Ball, Notification
from hud import ScoreHud
from layout import World, canvas_origin
from utils import rgba_opacity


# Draw order, back to front.
ORDER_FADE = 0
ORDER_BALLS = 10
ORDER_PARTICLES = 20
ORDER_NOTIFY_BG = 30
ORDER_NOTIFY_TEXT = 31
ORDER_HUD = 40

GLOW_PAD = 5.0
GLOW_STRENGTH = 0.35
STROKE_WIDTH = 2


class RenderHandle:
    """Handle for managing render objects."""

    def __init__(self, *objs):
        self.objs = list(objs)

    def set_visible(self, visible: bool) -> None:
        for o in self.objs:
            o.visible = visible


class Renderer:
    """Draws one session frame: fade, balls, particles, notifications, HUD."""

    def __init__(self, window_w: int, window_h: int, world: World, fade_factor: float = config.FADE_FACTOR):
        self.world = world
        self.fade_factor = max(0.0, min(1.0, float(fade_factor)))
        self.batch = pyglet.graphics.Batch()
        self._groups = {order: Group(order=order) for order in (
            ORDER_FADE, ORDER_BALLS, ORDER_PARTICLES, ORDER_NOTIFY_BG, ORDER_NOTIFY_TEXT, ORDER_HUD,
        )}

        self._fade = shapes.Rectangle(
            0, 0, world.width, world.height,
            color=config.PALETTE["background"], batch=self.batch, group=self._groups[ORDER_FADE],
        )
        self._fade.opacity = int(255 * self.fade_factor)

        self._ball_pool: list[RenderHandle] = []
        self._particle_pool: list[shapes.Rectangle] = []
        self._notify_pool: list[RenderHandle] = []
        self._notify_used = 0

        self.hud = ScoreHud(world, self.batch, self._groups[ORDER_HUD])
        self.resize(window_w, window_h)

    # ----------------------------
    # Layout
    # ----------------------------
    def resize(self, window_w: int, window_h: int) -> None:
        self.window_w = window_w
        self.window_h = window_h
        self.origin = canvas_origin(window_w, window_h, self.world)
        ox, oy = self.origin
        self._fade.x = ox
        self._fade.y = window_h - oy - self.world.height
        self.hud.layout(*self.to_screen(0.0, 0.0))

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self.origin
        return (ox + x, self.window_h - (oy + y))

    # ----------------------------
    # Pools
    # ----------------------------
    def _ball_handle(self, i: int) -> RenderHandle:
        while len(self._ball_pool) <= i:
            group = self._groups[ORDER_BALLS]
            glow = shapes.Circle(0, 0, 1, color=(255, 255, 255), batch=self.batch, group=group)
            body = shapes.Circle(0, 0, 1, color=(255, 255, 255), batch=self.batch, group=group)
            stroke = shapes.Arc(0, 0, 1, segments=48, thickness=STROKE_WIDTH, color=(255, 255, 255), batch=self.batch, group=group)
            self._ball_pool.append(RenderHandle(glow, body, stroke))
        return self._ball_pool[i]

    def _particle_rect(self, i: int) -> shapes.Rectangle:
        while len(self._particle_pool) <= i:
            rect = shapes.Rectangle(0, 0, 1, 1, color=(255, 255, 255), batch=self.batch, group=self._groups[ORDER_PARTICLES])
            self._particle_pool.append(rect)
        return self._particle_pool[i]

    def _notify_handle(self, i: int) -> RenderHandle:
        while len(self._notify_pool) <= i:
            backdrop = shapes.Circle(0, 0, 1, color=(0, 0, 0), batch=self.batch, group=self._groups[ORDER_NOTIFY_BG])
            label = pyglet.text.Label(
                "",
                font_name=config.NOTIFY_FONT,
                font_size=12,
                weight="bold",
                x=0,
                y=0,
                anchor_x="center",
                anchor_y="baseline",
                batch=self.batch,
                group=self._groups[ORDER_NOTIFY_TEXT],
            )
            self._notify_pool.append(RenderHandle(backdrop, label))
        return self._notify_pool[i]

    # ----------------------------
    # Sync
    # ----------------------------
    def _sync_ball(self, handle: RenderHandle, ball: Ball) -> None:
        glow, body, stroke = handle.objs
        sx, sy = self.to_screen(ball.x, ball.y)
        rgb = ball.color[:3]

        glow.x, glow.y = sx, sy
        glow.radius = ball.size + GLOW_PAD
        glow.color = rgb
        glow.opacity = rgba_opacity(ball.color, GLOW_STRENGTH)

        body.x, body.y = sx, sy
        body.radius = ball.size
        body.color = rgb
        body.opacity = rgba_opacity(ball.color)

        stroke.x, stroke.y = sx, sy
        stroke.radius = ball.size
        stroke.color = config.PALETTE["ball_stroke"][:3]
        stroke.opacity = rgba_opacity(config.PALETTE["ball_stroke"])
        handle.set_visible(True)

    def _sync_balls(self, session) -> None:
        balls = []
        if session.playing and session.player is not None:
            balls.append(session.player)
            balls.extend(reversed(session.enemies))
        for i, ball in enumerate(balls):
            self._sync_ball(self._ball_handle(i), ball)
        for handle in self._ball_pool[len(balls):]:
            handle.set_visible(False)

    def _sync_particles(self, session) -> None:
        particles = session.particles.particles
        n = len(particles)
        for i in range(n):
            p = particles[n - 1 - i]
            rect = self._particle_rect(i)
            sx, sy = self.to_screen(p.pos.x, p.pos.y)
            rect.x = sx
            rect.y = sy - p.size
            rect.width = p.size
            rect.height = p.size
            rect.color = p.color[:3]
            rect.opacity = rgba_opacity(p.color, p.alpha)
            rect.visible = True
        for rect in self._particle_pool[n:]:
            rect.visible = False

    def _draw_notification(self, n: Notification) -> None:
        backdrop, label = self._notify_handle(self._notify_used).objs
        self._notify_used += 1
        sx, sy = self.to_screen(n.pos.x, n.pos.y)

        backdrop.x, backdrop.y = sx, sy
        backdrop.radius = n.radius
        backdrop.opacity = int(255 * 0.7 * max(0.0, min(1.0, n.alpha)))
        backdrop.visible = True

        label.text = n.text
        if label.font_size != n.font_size:
            label.font_size = n.font_size
        label.x = sx
        label.y = sy - 4 * n.scale
        label.color = (*n.rgb, int(255 * max(0.0, min(1.0, n.alpha))))
        label.visible = True

    def _sync_notifications(self, session) -> None:
        self._notify_used = 0
        session.notifications.update(draw=self._draw_notification)
        for handle in self._notify_pool[self._notify_used:]:
            handle.set_visible(False)

    def draw(self, session) -> None:
        self._sync_balls(session)
        self._sync_particles(session)
        self._sync_notifications(session)
        self.hud.update(session.score, visible=session.playing)
        self.batch.draw()
