from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float (frame delta from the host loop)
EVENT_BOARD_TICKED = "board_ticked"          # payload: tick=int (counter value the tick ran with)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"                # payload: symbol=int, modifiers=int
EVENT_ROTATE_REQUEST = "rotate_request"      # payload: direction=RotateDirection
EVENT_RESTART_REQUEST = "restart_request"    # payload: reason=str


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_ROTATED = "rotated"                          # payload: direction, rotation=int, forced=list[(lane, index)]
EVENT_MATCH_CLEARED = "match_cleared"              # payload: color=str, positions=list[(lane, index)], size=int, score=int
EVENT_BLOCKS_FLOATED = "blocks_floated"            # payload: blocks=list[FloatedBlock]
EVENT_BLOCKS_ATTACHED = "blocks_attached"          # payload: positions=list[(lane, index)], source=str
EVENT_BLOCKS_SPAWNED = "blocks_spawned"            # payload: spawns=list[(lane, color)], tick=int
EVENT_BOARD_OVERFLOW = "board_overflow"            # payload: lane=int, color=str, source=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode, new_mode=GameMode
EVENT_GAME_LOST = "game_lost"                      # payload: score=int, tick=int, source=str
EVENT_GAME_RESTARTED = "game_restarted"            # payload: reason=str
