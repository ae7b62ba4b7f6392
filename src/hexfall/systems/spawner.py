from __future__ import annotations

import logging
import random
from typing import List, Tuple

from esper import World

from hexfall.events.bus import EventBus, EVENT_BLOCKS_SPAWNED
from hexfall.systems.board_ops import get_board, get_palette, spawn_blocks, spawn_due

logger = logging.getLogger(__name__)


class SpawnerSystem:
    """Last phase of a board tick: introduce new falling blocks every few ticks."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()

    def spawn_if_due(self) -> List[Tuple[int, str]]:
        board = get_board(self.world)
        if not spawn_due(board.tick):
            return []
        colors = get_palette(self.world).color_names()
        spawns = spawn_blocks(board, self._rng, colors)
        logger.debug("tick %d spawned %s", board.tick, spawns)
        if spawns:
            self.event_bus.emit(EVENT_BLOCKS_SPAWNED, spawns=spawns, tick=board.tick)
        return spawns
