# Pyglet bounce arcade game
# Controls: LEFT/RIGHT move, ENTER starts, ESC ends the run, M toggles sound.
# Install: py -m pip install pyglet

import logging

import pyglet

pyglet.options["shadow_window"] = False

import config
import controls
from fsm import StateMachine
from layout import derive_world, is_touch_device
from logic import BalanceLogic
from menu import Menu
from scheduler import FrameScheduler
from score import HighScoreStore
from session import Session
from sound import create_sound
from states import IdleState, PlayingState
from visuals import Renderer


LOG = logging.getLogger(__name__)

SURFACE_NOTICE = "Your system does not support the OpenGL surface this game needs."


class UnsupportedSurfaceError(RuntimeError):
    """No usable window or GL context could be created."""


def _viewport_size():
    try:
        display = pyglet.display.get_display()
        screen = display.get_default_screen()
        return (int(screen.width), int(screen.height))
    except Exception as e:
        LOG.debug("Could not query the screen size: %s", e)
        return (config.DEFAULT_WIDTH, config.DEFAULT_HEIGHT)


class Game(pyglet.window.Window):
    """Main game window: owns the session and wires input, clock and drawing."""

    def __init__(self, touch=None, audio=None, store=None):
        self.touch = is_touch_device() if touch is None else bool(touch)
        if self.touch:
            vw, vh = _viewport_size()
            self.world = derive_world(vw, vh, touch=True)
            size = (vw, vh)
        else:
            self.world = derive_world(0, 0)
            size = (int(self.world.width), int(self.world.height))
        super().__init__(width=size[0], height=size[1], caption=config.CAPTION, vsync=True, resizable=True)

        self.balance = BalanceLogic(fps=float(config.FPS))
        self.audio = audio or create_sound()
        self.session = Session(
            world=self.world,
            balance=self.balance,
            audio=self.audio,
            store=store or HighScoreStore(),
        )

        self.renderer = Renderer(self.width, self.height, self.world)
        self.menu = Menu(self.width, self.height, self.world, touch=self.touch)
        self._key_map = controls.key_bindings()
        self._touch_zone = None
        self._needs_clear = True

        self.fsm = StateMachine(IdleState(self))
        self.fsm.add_state(PlayingState(self))

        self.scheduler = FrameScheduler(
            self.fsm.update, self.balance, native=config.USE_NATIVE_FRAME_SCHEDULING,
        )
        self.scheduler.start()

    # ----------------------------
    # Input
    # ----------------------------
    def on_key_press(self, symbol, modifiers):
        key = self._key_map.get(symbol)
        if key:
            self.fsm.on_key_down(key)
        if symbol == pyglet.window.key.ESCAPE:
            # Keep ESC from closing the window.
            return pyglet.event.EVENT_HANDLED

    def on_key_release(self, symbol, modifiers):
        key = self._key_map.get(symbol)
        if key:
            self.fsm.on_key_up(key)

    def on_mouse_press(self, x, y, button, modifiers):
        if self.touch:
            zone = controls.touch_zone_at(x, y, self.width, self.height, self.world)
        else:
            zone = controls.GENERIC
        self._touch_zone = zone
        self.fsm.on_touch_start(zone)

    def on_mouse_release(self, x, y, button, modifiers):
        if self._touch_zone is not None:
            self.fsm.on_touch_end(self._touch_zone)
            self._touch_zone = None

    # ----------------------------
    # Window
    # ----------------------------
    def on_resize(self, width, height):
        super().on_resize(width, height)
        if not hasattr(self, "menu"):
            # Some platforms resize while the base window is still initializing.
            return
        self.renderer.resize(width, height)
        self.menu.resize(width, height)
        self._needs_clear = True

    def on_draw(self):
        """Render the game."""
        if self._needs_clear or self.renderer.fade_factor >= 1.0:
            self.clear()
            self._needs_clear = False
        self.fsm.draw()

    def on_close(self):
        self.scheduler.stop()
        self.close()
        pyglet.app.exit()


def create_game(**kwargs) -> Game:
    """Open the game window, translating GL/window failures."""
    try:
        return Game(**kwargs)
    except (pyglet.window.NoSuchConfigException, pyglet.gl.ContextException) as e:
        raise UnsupportedSurfaceError(str(e)) from e


def main():
    """Start the game."""
    try:
        _ = create_game()
        pyglet.app.run()
    except UnsupportedSurfaceError as e:
        LOG.error("Unsupported rendering surface: %s", e)
        print(SURFACE_NOTICE)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
