"""Shared fakes for the headless test suite."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from layout import World
from score import MemoryStore
from session import Session


class StubRandom:
    """Stand-in for random.Random that replays fixed values."""

    def __init__(self, *values):
        self.values = list(values) or [0.5]
        self.i = 0

    def random(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v


class RecordingAudio:
    """Audio fake that records every cue call."""

    def __init__(self):
        self.calls = []
        self.muted = False

    def play(self, name):
        self.calls.append(("play", name))

    def stop(self, name):
        self.calls.append(("stop", name))

    def seek(self, name, seconds):
        self.calls.append(("seek", name, seconds))

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def played(self, name):
        return ("play", name) in self.calls


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def world():
    return World(600, 400)


@pytest.fixture
def session(world, audio):
    return Session(world=world, audio=audio, store=MemoryStore(), rng=StubRandom(0.5))
