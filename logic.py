"""Centralized gameplay balance tuning logic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Burst:
    """Particle burst shape: initial speed range, square size and count."""

    speed: float
    size: float
    quantity: int


@dataclass
class BalanceLogic:
    """Single source of truth for gameplay tuning values."""

    fps: float = 60.0

    # Simulation pacing
    frame_dt_cap: float = 0.25
    max_catchup_steps: int = 6

    # Bounce trajectory: y = a*t^2 + b*t + c, c derived from world height.
    trajectory_a: float = 0.1
    trajectory_b: float = 0.0
    apex_ratio: float = 0.3
    trajectory_step: float = 2.0

    # Player
    player_size: float = 12.0
    player_speed: float = 4.0
    player_start_x_ratio: float = 0.75

    # Enemies: (y ratio or bottom offset handled in session, size, speed)
    enemy_size: float = 7.0
    enemy_speed_increment: float = 0.3
    enemy_top_y_ratio: float = 0.45
    enemy_top_speed: float = 2.5
    enemy_bottom_offset: float = 14.0
    enemy_bottom_speed: float = 2.0

    # Scoring
    milestone_every: int = 10
    milestone_burst_lift: float = 80.0
    milestone_notify_lift: float = 70.0
    milestone_notify_scale: float = 4.0

    # Bursts
    bounce_burst: Burst = Burst(speed=3.0, size=3.0, quantity=15)
    wall_burst: Burst = Burst(speed=3.0, size=3.0, quantity=15)
    death_burst: Burst = Burst(speed=3.0, size=6.0, quantity=60)
    enemy_death_size: float = 3.0
    enemy_death_quantity: int = 30
    milestone_speed: float = 10.0
    milestone_size: float = 5.0

    # Particles
    particle_drag: float = 0.98
    particle_fade: float = 0.92
    particle_fade_threshold: float = 0.92
    alpha_cutoff: float = 0.05

    # Notifications
    notification_rise: float = 0.4
    notification_decay: float = 0.08

    @property
    def fixed_dt(self) -> float:
        return 1.0 / max(1.0, float(self.fps))

    def apex_offset(self, world_height: float) -> float:
        """Vertical offset `c` of the bounce parabola for a world height."""
        return float(world_height) * self.apex_ratio

    def is_milestone(self, score: int) -> bool:
        return score > 0 and score % self.milestone_every == 0
