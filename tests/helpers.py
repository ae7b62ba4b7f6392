from __future__ import annotations

import random
from typing import Any, Iterable

from esper import World

from hexfall.components.board import Board
from hexfall.events.bus import EventBus
from hexfall.systems.board_ops import get_board
from hexfall.world import create_world


def make_world(seed: int = 1234) -> tuple[EventBus, World, Board]:
    """Fresh bus/world pair with a seeded rng and the board component."""

    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    return bus, world, get_board(world)


def set_attached(board: Board, lane: int, colors: Iterable[str | None]) -> None:
    """Overwrite attached ``lane`` from index 0 with ``colors``, padding with empties."""

    values = list(colors)
    board.attached[lane] = values + [None] * (board.lane_size - len(values))


def set_falling(board: Board, lane: int, index: int, color: str | None) -> None:
    board.falling[lane][index] = color


class EventCapture:
    """Collects payloads emitted for one event name."""

    def __init__(self, bus: EventBus, name: str) -> None:
        self.payloads: list[dict[str, Any]] = []
        bus.subscribe(name, self._on_event)

    def _on_event(self, sender, **payload) -> None:
        self.payloads.append(payload)

    def __len__(self) -> int:
        return len(self.payloads)
