"""
A simple finite state machine (FSM) implementation.
"""

class State:
    """Base class for a state in the FSM."""
    def __init__(self, game):
        self.game = game

    def enter(self):
        """Code to execute when entering this state."""
        pass

    def exit(self):
        """Code to execute when exiting this state."""
        pass

    def update(self, dt: float):
        """Update game logic for this state."""
        pass

    def draw(self):
        """Render the screen for this state."""
        pass

    def on_key_down(self, key: str):
        """Handle a logical key press (see controls)."""
        pass

    def on_key_up(self, key: str):
        """Handle a logical key release."""
        pass

    def on_touch_start(self, zone: str):
        """Handle a touch landing in a zone."""
        pass

    def on_touch_end(self, zone: str):
        """Handle a touch leaving a zone."""
        pass


class StateMachine:
    """A simple finite state machine."""
    def __init__(self, initial_state: State):
        self.current_state = None
        self._states = {}
        if initial_state:
            self.add_state(initial_state)
            self.set_state(initial_state.__class__.__name__)

    @property
    def state_name(self) -> str | None:
        if self.current_state is None:
            return None
        return self.current_state.__class__.__name__

    def add_state(self, state: State):
        """Adds a state to the machine."""
        self._states[state.__class__.__name__] = state

    def set_state(self, state_name: str):
        """Transitions to a new state."""
        new_state = self._states.get(state_name)
        if new_state is None:
            raise ValueError(f"State '{state_name}' not found.")

        if self.current_state:
            self.current_state.exit()
        self.current_state = new_state
        self.current_state.enter()

    def update(self, dt: float):
        if self.current_state:
            self.current_state.update(dt)

    def draw(self):
        if self.current_state:
            self.current_state.draw()

    def on_key_down(self, key: str):
        if self.current_state:
            self.current_state.on_key_down(key)

    def on_key_up(self, key: str):
        if self.current_state:
            self.current_state.on_key_up(key)

    def on_touch_start(self, zone: str):
        if self.current_state:
            self.current_state.on_touch_start(zone)

    def on_touch_end(self, zone: str):
        if self.current_state:
            self.current_state.on_touch_end(zone)
