"""Frame scheduling.

The simulation is frame based (one ``step`` per display refresh), so the
scheduler turns whatever dt the clock hands over into whole fixed steps.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from logic import BalanceLogic


LOG = logging.getLogger(__name__)


class FixedStepper:
    """Accumulates wall-clock dt and emits fixed steps, with a catch-up cap."""

    def __init__(self, step: Callable[[float], None], balance: BalanceLogic | None = None):
        self.step = step
        self.balance = balance or BalanceLogic()
        self._fixed_dt = self.balance.fixed_dt
        self._frame_dt_cap = self.balance.frame_dt_cap
        self._max_catchup_steps = self.balance.max_catchup_steps
        self._accumulator = 0.0

    def tick(self, dt: float) -> int:
        """Feed one clock tick.  Returns how many fixed steps were run."""
        frame_dt = max(0.0, min(float(dt), self._frame_dt_cap))
        self._accumulator += frame_dt
        steps = 0
        while self._accumulator >= self._fixed_dt and steps < self._max_catchup_steps:
            self.step(self._fixed_dt)
            self._accumulator -= self._fixed_dt
            steps += 1
        if steps >= self._max_catchup_steps:
            # Drop extra accumulated time to avoid spiral-of-death stalls.
            self._accumulator = 0.0
        return steps


class FrameScheduler:
    """Drives a FixedStepper from a pyglet-style clock.

    Prefers per-frame scheduling (``clock.schedule``), which pyglet paces to
    the display refresh when vsync is on. Falls back to a fixed 60 Hz
    ``schedule_interval`` when that is unavailable or disabled.
    """

    def __init__(self, step: Callable[[float], None], balance: BalanceLogic | None = None, clock=None, native: bool = True):
        self.balance = balance or BalanceLogic()
        self.stepper = FixedStepper(step, self.balance)
        if clock is None:
            import pyglet

            clock = pyglet.clock
        self.clock = clock
        self.native = native
        self.mode = None

    def _tick(self, dt: float) -> None:
        self.stepper.tick(dt)

    def start(self) -> str:
        if self.mode is not None:
            return self.mode
        schedule = getattr(self.clock, "schedule", None) if self.native else None
        if callable(schedule):
            schedule(self._tick)
            self.mode = "frame"
        else:
            self.clock.schedule_interval(self._tick, self.balance.fixed_dt)
            self.mode = "interval"
        LOG.debug("Frame scheduler running in %s mode", self.mode)
        return self.mode

    def stop(self) -> None:
        if self.mode is None:
            return
        self.clock.unschedule(self._tick)
        self.mode = None


class FixedTickDriver:
    """Deterministic driver: one exact fixed step per frame, no clock."""

    def __init__(self, step: Callable[[float], None], balance: BalanceLogic | None = None):
        self.step = step
        self.balance = balance or BalanceLogic()
        self.frames = 0

    def run(self, frames: int) -> None:
        dt = self.balance.fixed_dt
        for _ in range(int(frames)):
            self.step(dt)
            self.frames += 1
