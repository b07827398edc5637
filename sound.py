"""Sound cues played through pyglet.media.

The game only fires named one-shot cues and never waits on them. Any cue that
fails to load is logged once and then silently skipped.
"""

from __future__ import annotations

import logging

import pyglet

import config
from utils import resource_path


LOG = logging.getLogger(__name__)


class SilentSound:
    """Drop-in replacement for SoundBoard that plays nothing."""

    muted = False
    volume = 0.0

    def load(self) -> None:
        pass

    def play(self, name: str) -> None:
        pass

    def stop(self, name: str) -> None:
        pass

    def seek(self, name: str, seconds: float) -> None:
        pass

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def set_volume(self, volume: float) -> None:
        self.volume = volume


class SoundBoard:
    """Loads every cue up front; looping cues keep a dedicated Player."""

    def __init__(self, sounds: dict | None = None, volume: float = config.MASTER_VOLUME, sound_dir: str = config.SOUND_DIR):
        self.sounds = dict(sounds if sounds is not None else config.SOUNDS)
        self.sound_dir = sound_dir
        self.volume = max(0.0, min(1.0, float(volume)))
        self.muted = False
        self._sources: dict[str, object] = {}
        self._loop_players: dict[str, object] = {}
        self._oneshots: list = []

    def load(self) -> None:
        """Decode all cues; the intro loop starts as soon as it is ready."""
        for name, (filename, loop) in self.sounds.items():
            path = resource_path(self.sound_dir, filename)
            try:
                source = pyglet.media.load(path, streaming=False)
            except FileNotFoundError:
                LOG.warning("Sound '%s' missing: %s", name, path)
                continue
            except Exception as e:
                LOG.warning("Sound '%s' could not be decoded (%s): %s", name, path, e)
                continue
            self._sources[name] = source
            if loop:
                player = pyglet.media.Player()
                player.queue(source)
                player.loop = True
                player.volume = self._effective_volume()
                self._loop_players[name] = player
        LOG.info("Loaded %d/%d sounds", len(self._sources), len(self.sounds))
        self.play("intro")

    def _effective_volume(self) -> float:
        return 0.0 if self.muted else self.volume

    def _apply_volume(self) -> None:
        v = self._effective_volume()
        for player in self._loop_players.values():
            player.volume = v
        for player in self._oneshots:
            player.volume = v

    def play(self, name: str) -> None:
        player = self._loop_players.get(name)
        if player is not None:
            player.play()
            return
        source = self._sources.get(name)
        if source is None:
            return
        oneshot = source.play()
        oneshot.volume = self._effective_volume()
        self._oneshots = [p for p in self._oneshots if p.playing]
        self._oneshots.append(oneshot)

    def stop(self, name: str) -> None:
        player = self._loop_players.get(name)
        if player is not None:
            player.pause()
            player.seek(0.0)

    def seek(self, name: str, seconds: float) -> None:
        player = self._loop_players.get(name)
        if player is not None:
            player.seek(seconds)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        self._apply_volume()
        LOG.info("Sound %s", "muted" if self.muted else "unmuted")
        return self.muted

    def set_volume(self, volume: float) -> None:
        self.volume = max(0.0, min(1.0, float(volume)))
        self._apply_volume()


def create_sound(enabled: bool = config.ENABLE_SOUND):
    if not enabled:
        return SilentSound()
    board = SoundBoard()
    board.load()
    return board
