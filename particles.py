"""Particle system for bounce, wall and death bursts.

Simulation only: the renderer reads ``ParticleSystem.particles`` and draws
each one as a square at its alpha. The random source is injectable so fade
transitions can be forced in tests.
"""

from __future__ import annotations

import random
from typing import List

from entities import Color, Particle
from logic import BalanceLogic
from utils import Point


class ParticleSystem:
    """Owns the live particles of a session."""

    def __init__(self, balance: BalanceLogic | None = None, rng=None):
        self.balance = balance or BalanceLogic()
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def clear(self) -> None:
        self.particles.clear()

    # ----------------------------
    # Emission
    # ----------------------------
    def emit(self, color: Color, x: float, y: float, speed: float, size: float, quantity: int) -> List[Particle]:
        """Spawn `quantity` particles at (x, y) with velocities in [-speed, speed)."""
        rand = self.rng.random
        burst = []
        for _ in range(max(0, int(quantity))):
            vel = Point(-speed + rand() * speed * 2, -speed + rand() * speed * 2)
            burst.append(Particle(
                pos=Point(x, y), vel=vel, color=color, size=size, cutoff=self.balance.alpha_cutoff,
            ))
        self.particles.extend(burst)
        return burst

    # ----------------------------
    # Update
    # ----------------------------
    def update(self) -> None:
        """Advance one frame: move, drag, maybe start fading, drop faded ones."""
        if not self.particles:
            return

        b = self.balance
        rand = self.rng.random
        i = len(self.particles)
        while i:
            i -= 1
            p = self.particles[i]
            p.pos.x += p.vel.x
            p.pos.y += p.vel.y
            p.vel.x *= b.particle_drag
            p.vel.y *= b.particle_drag
            if p.fading:
                p.alpha *= b.particle_fade
            elif rand() > b.particle_fade_threshold:
                p.fading = True
            if not p.alive:
                del self.particles[i]
