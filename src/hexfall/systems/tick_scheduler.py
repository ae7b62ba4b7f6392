"""Fixed-rate driver for the board simulation."""
from __future__ import annotations

import logging

from esper import World

from hexfall.constants import TICK_INTERVAL
from hexfall.events.bus import (
    EventBus,
    EVENT_BOARD_TICKED,
    EVENT_GAME_LOST,
    EVENT_GAME_RESTARTED,
    EVENT_TICK,
)
from hexfall.systems.board_ops import get_board
from hexfall.systems.descent import DescentSystem
from hexfall.systems.match_resolution import MatchResolutionSystem
from hexfall.systems.spawner import SpawnerSystem

logger = logging.getLogger(__name__)


class TickSchedulerSystem:
    """Accumulates frame deltas and fires a board tick every ``interval`` seconds.

    A tick runs match resolution, descent, the spawner when due, and then
    advances the tick counter. A lost game cancels the timer until the game
    is restarted.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        interval: float = TICK_INTERVAL,
        match_resolution: MatchResolutionSystem | None = None,
        descent: DescentSystem | None = None,
        spawner: SpawnerSystem | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.interval = interval
        self.match_resolution = match_resolution or MatchResolutionSystem(world, event_bus)
        self.descent = descent or DescentSystem(world, event_bus)
        self.spawner = spawner or SpawnerSystem(world, event_bus)
        self.armed = True
        self._elapsed = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_LOST, self._on_game_lost)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self._on_game_restarted)

    def on_tick(self, sender, **kwargs) -> None:
        dt = kwargs.get("dt")
        if dt is None or not self.armed:
            return
        self._elapsed += float(dt)
        while self.armed and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self.step()

    def step(self) -> bool:
        """Run one board tick immediately. Returns False when the timer is cancelled."""
        if not self.armed:
            return False
        board = get_board(self.world)
        tick = board.tick
        self.match_resolution.resolve()
        self.descent.advance()
        self.spawner.spawn_if_due()
        board.tick += 1
        logger.debug("board tick %d done (score=%d, rotation=%d)", tick, board.score, board.rotation)
        self.event_bus.emit(EVENT_BOARD_TICKED, tick=tick)
        return True

    def cancel(self) -> None:
        self.armed = False
        self._elapsed = 0.0

    def arm(self) -> None:
        self.armed = True
        self._elapsed = 0.0

    def _on_game_lost(self, sender, **payload) -> None:
        self.cancel()

    def _on_game_restarted(self, sender, **payload) -> None:
        self.arm()
