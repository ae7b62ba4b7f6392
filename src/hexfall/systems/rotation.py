from __future__ import annotations

from esper import World

from hexfall.events.bus import (
    EventBus,
    EVENT_BLOCKS_ATTACHED,
    EVENT_BOARD_OVERFLOW,
    EVENT_ROTATE_REQUEST,
    EVENT_ROTATED,
)
from hexfall.systems.board_ops import (
    RotateDirection,
    RotationReport,
    get_board,
    reconcile_rotation,
    rotate,
)
from hexfall.utils.game_state import is_running

_DIRECTION_NAMES = {
    "left": RotateDirection.LEFT,
    "right": RotateDirection.RIGHT,
}


def coerce_direction(value: RotateDirection | str) -> RotateDirection:
    if isinstance(value, RotateDirection):
        return value
    try:
        return _DIRECTION_NAMES[str(value).lower()]
    except KeyError:
        raise ValueError(f"Unknown rotate direction: {value!r}") from None


class RotationSystem:
    """Handles rotate actions between ticks and reconciles falling blocks."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_ROTATE_REQUEST, self.on_rotate_request)

    def on_rotate_request(self, sender, **payload) -> None:
        direction = payload.get("direction")
        if direction is None:
            return
        # Input is disabled once the game is lost.
        if not is_running(self.world):
            return
        self.rotate(coerce_direction(direction))

    def rotate(self, direction: RotateDirection) -> RotationReport:
        board = get_board(self.world)
        rotate(board, direction)
        report = reconcile_rotation(board)
        if report.forced:
            self.event_bus.emit(EVENT_BLOCKS_ATTACHED, positions=list(report.forced), source="rotation")
        for lane, color in report.overflows:
            self.event_bus.emit(EVENT_BOARD_OVERFLOW, lane=lane, color=color, source="rotation")
        self.event_bus.emit(
            EVENT_ROTATED,
            direction=direction,
            rotation=report.rotation,
            forced=list(report.forced),
        )
        return report
