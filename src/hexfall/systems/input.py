from hexfall.constants import KEY_ENTER, KEY_LEFT, KEY_R, KEY_RIGHT
from hexfall.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_RESTART_REQUEST,
    EVENT_ROTATE_REQUEST,
)
from hexfall.systems.board_ops import RotateDirection
from hexfall.utils.game_state import is_running

ROTATE_KEYS = {
    KEY_LEFT: RotateDirection.LEFT,
    KEY_RIGHT: RotateDirection.RIGHT,
}
RESTART_KEYS = {KEY_R, KEY_ENTER}


class InputSystem:
    """Maps raw key presses to the logical rotate and restart actions."""

    def __init__(self, event_bus: EventBus, world):
        self.event_bus = event_bus
        self.world = world
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        if is_running(self.world):
            direction = ROTATE_KEYS.get(symbol)
            if direction is not None:
                self.event_bus.emit(EVENT_ROTATE_REQUEST, direction=direction)
            return
        # Only restart is accepted while the loss screen is up.
        if symbol in RESTART_KEYS:
            self.event_bus.emit(EVENT_RESTART_REQUEST, reason="key")
