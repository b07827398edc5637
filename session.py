"""Game session: entity collections, score and the per-frame simulation step."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

import config
from entities import Ball, make_enemy, make_player
from layout import World
from logic import BalanceLogic
from notifications import NotificationBoard
from particles import ParticleSystem
from physics import quadratic_function
from score import MemoryStore, ScoreTracker, ensure_high_score, submit_score
from sound import SilentSound


LOG = logging.getLogger(__name__)


class Session:
    """Everything one game owns.

    ``step()`` advances one frame. The player and enemies only move while
    ``playing``; particles keep animating so the death burst stays visible on
    the menu.
    """

    def __init__(
        self,
        world: World | None = None,
        balance: BalanceLogic | None = None,
        audio=None,
        store=None,
        rng: Optional[random.Random] = None,
        high_score_key: str = config.HIGH_SCORE_KEY,
    ):
        self.world = world or World()
        self.balance = balance or BalanceLogic()
        self.audio = audio or SilentSound()
        self.store = store if store is not None else MemoryStore()
        self.high_score_key = high_score_key
        self.rng = rng or random.Random()

        self.particles = ParticleSystem(self.balance, self.rng)
        self.notifications = NotificationBoard(self.balance)
        self.tracker = ScoreTracker(self.balance)

        self.trajectory = quadratic_function(
            self.balance.trajectory_a,
            self.balance.trajectory_b,
            self.balance.apex_offset(self.world.height),
        )

        self.playing = False
        self.player: Ball | None = None
        self.enemies: List[Ball] = []
        self.t = 0.0
        self.direction = 1
        self.games_played = 0
        self.highscore = ensure_high_score(self.store, self.high_score_key)

    @property
    def score(self) -> int:
        return self.tracker.score

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self.playing = False
        self.player = None
        self.enemies = []
        self.particles.clear()
        self.notifications.clear()
        self.tracker.reset()
        self.t = 0.0
        self.direction = 1

    def start(self) -> bool:
        """Begin a new game.  Returns False if one is already running."""
        if self.playing:
            return False
        self.reset()

        self.audio.stop("intro")
        self.audio.play("start")
        self.audio.seek("background", config.BACKGROUND_SEEK)
        self.audio.play("background")

        b = self.balance
        w, h = self.world.width, self.world.height
        self.player = make_player(w * b.player_start_x_ratio, 0.0, b.player_size, b.player_speed)
        self.enemies.append(make_enemy(0.0, h * b.enemy_top_y_ratio, b.enemy_size, b.enemy_top_speed, config.PALETTE["enemy_yellow"]))
        self.enemies.append(make_enemy(0.0, h - b.enemy_bottom_offset, b.enemy_size, b.enemy_bottom_speed, config.PALETTE["enemy_green"]))

        self.playing = True
        LOG.info("Session started (world %dx%d)", w, h)
        return True

    def stop(self) -> int:
        """End the current game.  Returns the (possibly updated) high score."""
        if not self.playing:
            return self.highscore
        self.playing = False
        self.games_played += 1
        self.audio.stop("background")
        self.audio.play("intro")
        self.highscore = submit_score(self.store, self.score, self.high_score_key)
        LOG.info("Session ended with score %d (high score %d)", self.score, self.highscore)
        return self.highscore

    # ------------------------------------------------------------------
    # Per-frame simulation
    # ------------------------------------------------------------------

    def step(self) -> None:
        if self.playing:
            self.update_player()
            self.update_enemies()
            self.find_intersections()
        self.particles.update()

    def emit(self, color, x: float, y: float, speed: float, size: float, quantity: int):
        return self.particles.emit(color, x, y, speed, size, quantity)

    def update_score(self) -> None:
        p = self.player
        b = self.balance
        milestone = self.tracker.on_bounce()
        self.audio.play("bounce")
        burst = b.bounce_burst
        self.emit(p.color, p.x, p.y, burst.speed, burst.size, burst.quantity)
        if milestone:
            self.notifications.notify(
                self.score, p.x, p.y - b.milestone_notify_lift,
                b.milestone_notify_scale, config.PALETTE["milestone"],
            )
            self.emit(p.color, p.x, p.y - b.milestone_burst_lift, b.milestone_speed, b.milestone_size, self.score)
            self.audio.play("ping")

    def update_player(self) -> None:
        p = self.player
        b = self.balance

        if p.pos.y > self.world.height - p.size:
            self.direction *= -1
            self.update_score()

        self.t += b.trajectory_step * self.direction
        p.pos.y = self.trajectory(self.t)

        current_x = p.pos.x
        if p.going_left:
            p.pos.x -= p.speed
        if p.going_right:
            p.pos.x += p.speed
        if not self.world.contains_x(p.pos.x, p.size):
            p.pos.x = current_x

    def update_enemies(self) -> None:
        b = self.balance
        wall = b.wall_burst
        for enemy in reversed(self.enemies):
            enemy.pos.x += enemy.speed if enemy.going_right else -enemy.speed
            if enemy.pos.x > self.world.width - enemy.size:
                enemy.going_right = False
                self.emit(enemy.color, enemy.x, enemy.y, wall.speed, wall.size, wall.quantity)
                enemy.speed += b.enemy_speed_increment
            elif enemy.pos.x < enemy.size:
                enemy.going_right = True
                self.emit(enemy.color, enemy.x, enemy.y, wall.speed, wall.size, wall.quantity)

    def find_intersections(self) -> Ball | None:
        """Resolve the first player/enemy hit.  Returns the enemy that was hit."""
        p = self.player
        b = self.balance
        for i in range(len(self.enemies) - 1, -1, -1):
            enemy = self.enemies[i]
            if p.intersects(enemy):
                death = b.death_burst
                self.emit(p.color, p.x, p.y, death.speed, death.size, death.quantity)
                self.emit(enemy.color, enemy.x, enemy.y, enemy.speed, b.enemy_death_size, b.enemy_death_quantity)
                enemy.alive = False
                del self.enemies[i]
                self.stop()
                self.audio.play("dead")
                return enemy
        return None
