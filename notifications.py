"""Floating score notifications.

Notifications have no separate simulation pass: they rise, get drawn and then
fade in one sweep during rendering, newest first.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import List, Optional

from entities import Notification
from logic import BalanceLogic
from utils import Point


class NotificationBoard:
    def __init__(self, balance: BalanceLogic | None = None):
        self.balance = balance or BalanceLogic()
        self.notifications: List[Notification] = []

    def __len__(self) -> int:
        return len(self.notifications)

    def __iter__(self):
        return iter(self.notifications)

    def clear(self) -> None:
        self.notifications.clear()

    def notify(self, text, x: float, y: float, scale: float = 1.0, rgb=(255, 255, 255)) -> Notification:
        n = Notification(
            text=str(text), pos=Point(x, y), scale=scale, rgb=tuple(rgb),
            cutoff=self.balance.alpha_cutoff,
        )
        self.notifications.append(n)
        return n

    def fade(self, n: Notification) -> None:
        # Kept in its literal form: it sets the frame-by-frame timing of the fade.
        k = self.balance.notification_decay
        n.alpha *= 1 - (k * (1 - ((n.alpha - k) / 1)))

    def update(self, draw: Optional[Callable[[Notification], None]] = None) -> None:
        """Rise, draw (if a callback is given), fade and prune every notification."""
        i = len(self.notifications)
        while i:
            i -= 1
            n = self.notifications[i]
            n.pos.y -= self.balance.notification_rise
            if draw is not None:
                draw(n)
            self.fade(n)
            if not n.alive:
                del self.notifications[i]
