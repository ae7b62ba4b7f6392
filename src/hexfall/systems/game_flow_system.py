"""Running → Lost state machine, loss notification and restart."""
from __future__ import annotations

import logging
from typing import Callable

from esper import World

from hexfall.components.game_state import GameMode
from hexfall.events.bus import (
    EventBus,
    EVENT_BOARD_OVERFLOW,
    EVENT_GAME_LOST,
    EVENT_GAME_RESTARTED,
    EVENT_RESTART_REQUEST,
)
from hexfall.systems.board_ops import get_board
from hexfall.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Turns the first overflow of a game into a loss and handles restarts."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        report_loss: Callable[[], None] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._report_loss = report_loss
        self.event_bus.subscribe(EVENT_BOARD_OVERFLOW, self._on_board_overflow)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self._on_restart_request)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_board_overflow(self, sender, **payload) -> None:
        self.lose(source=payload.get("source", "overflow"))

    def _on_restart_request(self, sender, **payload) -> None:
        self.restart(reason=payload.get("reason", "restart_request"))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def lose(self, *, source: str = "overflow") -> bool:
        state = get_game_state(self.world)
        if state is None or state.mode == GameMode.LOST:
            return False
        set_game_mode(self.world, self.event_bus, GameMode.LOST)
        board = get_board(self.world)
        logger.info("game lost at tick %d with score %d (%s)", board.tick, board.score, source)
        if self._report_loss is not None:
            self._report_loss()
        self.event_bus.emit(EVENT_GAME_LOST, score=board.score, tick=board.tick, source=source)
        return True

    def restart(self, *, reason: str = "restart") -> None:
        board = get_board(self.world)
        board.reset()
        set_game_mode(self.world, self.event_bus, GameMode.RUNNING)
        logger.info("game restarted (%s)", reason)
        self.event_bus.emit(EVENT_GAME_RESTARTED, reason=reason)
