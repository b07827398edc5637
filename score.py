"""Score tracking and high-score persistence."""

from __future__ import annotations

import json
import logging
import os

import config
from logic import BalanceLogic


LOG = logging.getLogger(__name__)


class ScoreTracker:
    """Tracks the bounce count of a single run."""

    def __init__(self, balance: BalanceLogic | None = None):
        self.balance = balance or BalanceLogic()
        self.score: int = 0

    def reset(self) -> None:
        self.score = 0

    def on_bounce(self) -> bool:
        """Record a bounce.  Returns True when the new score is a milestone."""
        self.score += 1
        return self.balance.is_milestone(self.score)


class HighScoreStore:
    """Key/int store backed by a small JSON file.

    Anything unreadable is treated as missing; callers fall back to zero.
    """

    def __init__(self, path: str = config.HIGH_SCORE_FILE):
        self.path = path

    def _load(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
            LOG.debug("Ignoring non-object high score file %s", self.path)
        except FileNotFoundError:
            pass
        except (ValueError, OSError) as e:
            LOG.debug("Unreadable high score file %s: %s", self.path, e)
        return {}

    def _save(self, data: dict) -> None:
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            LOG.warning("Could not write high score file %s: %s", self.path, e)

    def get(self, key: str) -> int | None:
        value = self._load().get(key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            LOG.debug("Non-numeric %s value %r treated as missing", key, value)
            return None

    def set(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        self._save(data)


class MemoryStore:
    """In-process store with the same contract as HighScoreStore."""

    def __init__(self, initial: dict | None = None):
        self.data = dict(initial or {})

    def get(self, key: str) -> int | None:
        value = self.data.get(key)
        try:
            return None if value is None else int(value)
        except (TypeError, ValueError, OverflowError):
            return None

    def set(self, key: str, value: int) -> None:
        self.data[key] = int(value)


def ensure_high_score(store, key: str = config.HIGH_SCORE_KEY) -> int:
    """Create the high score entry if it is absent.  Returns its value."""
    value = store.get(key)
    if value is None:
        store.set(key, 0)
        return 0
    return value


def submit_score(store, score: int, key: str = config.HIGH_SCORE_KEY) -> int:
    """Store `score` if it beats the saved value.  Returns the high score."""
    best = store.get(key) or 0
    if score > best:
        store.set(key, score)
        LOG.info("New high score: %d (was %d)", score, best)
        return score
    return best
