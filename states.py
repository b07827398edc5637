"""Game states logic.

``game`` is anything exposing ``session``, ``fsm`` and ``audio``; ``menu``
and ``renderer`` are optional so the states run headless in tests.
"""

import controls
from fsm import State


def _draw_scene(game) -> None:
    renderer = getattr(game, "renderer", None)
    if renderer:
        renderer.draw(game.session)


class _GameState(State):
    def on_key_up(self, key):
        if key == controls.MUTE:
            self.game.audio.toggle_mute()


class IdleState(_GameState):
    """Menu on screen; leftover particles keep animating behind it."""

    def enter(self):
        menu = getattr(self.game, "menu", None)
        if menu:
            menu.show(self.game.session)

    def _start(self):
        if self.game.session.start():
            self.game.fsm.set_state("PlayingState")

    def on_key_up(self, key):
        super().on_key_up(key)
        if key == controls.CONFIRM:
            self._start()

    def on_touch_start(self, zone):
        if zone == controls.GENERIC:
            self._start()

    def update(self, dt: float):
        self.game.session.step()
        menu = getattr(self.game, "menu", None)
        if menu:
            menu.update(dt)

    def draw(self):
        _draw_scene(self.game)
        menu = getattr(self.game, "menu", None)
        if menu:
            menu.draw()


class PlayingState(_GameState):
    def enter(self):
        menu = getattr(self.game, "menu", None)
        if menu:
            menu.hide()

    def _set_intent(self, key, active: bool) -> None:
        player = self.game.session.player
        if player is None:
            return
        if key == controls.LEFT:
            player.going_left = active
        elif key == controls.RIGHT:
            player.going_right = active

    def on_key_down(self, key):
        self._set_intent(key, True)

    def on_key_up(self, key):
        super().on_key_up(key)
        if key == controls.CANCEL:
            self.game.session.stop()
            self.game.fsm.set_state("IdleState")
            return
        self._set_intent(key, False)

    def on_touch_start(self, zone):
        self._set_intent(zone, True)

    def on_touch_end(self, zone):
        self._set_intent(zone, False)

    def update(self, dt: float):
        session = self.game.session
        session.step()
        menu = getattr(self.game, "menu", None)
        if menu:
            menu.update(dt)
        if not session.playing:
            self.game.fsm.set_state("IdleState")

    def draw(self):
        _draw_scene(self.game)
        menu = getattr(self.game, "menu", None)
        if menu:
            # Fade-out still running after start.
            menu.draw()
