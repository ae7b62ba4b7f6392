from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from hexfall.components.block_palette import BlockPalette
from hexfall.components.board import BoardSnapshot
from hexfall.constants import CORE_COLOR, RING_COLOR
from hexfall.ui.layout import (
    Point,
    attached_block_quad,
    core_outline,
    falling_block_quad,
    ring_outline,
)


@dataclass(frozen=True, slots=True)
class PolygonCommand:
    points: Tuple[Point, ...]
    color: Tuple[int, int, int]
    kind: str


def build_board_commands(
    snapshot: BoardSnapshot,
    palette: BlockPalette,
    window_size: float,
) -> List[PolygonCommand]:
    """Polygons for one frame, in draw order: ring, core, attached, overflow, falling."""
    commands = [
        PolygonCommand(tuple(ring_outline(window_size)), RING_COLOR, "ring"),
        PolygonCommand(tuple(core_outline(window_size)), CORE_COLOR, "core"),
    ]
    for lane, stack in enumerate(snapshot.attached):
        for index, color in enumerate(stack):
            if color is None:
                continue
            quad = attached_block_quad(lane, index, snapshot.rotation, window_size)
            commands.append(PolygonCommand(tuple(quad), palette.rgb_for(color), "attached"))
    if snapshot.overflow is not None:
        lane, color = snapshot.overflow
        quad = attached_block_quad(lane, len(snapshot.attached[lane]), snapshot.rotation, window_size)
        commands.append(PolygonCommand(tuple(quad), palette.rgb_for(color), "overflow"))
    for lane, slots in enumerate(snapshot.falling):
        for index, color in enumerate(slots):
            if color is None:
                continue
            quad = falling_block_quad(lane, index, window_size)
            commands.append(PolygonCommand(tuple(quad), palette.rgb_for(color), "falling"))
    return commands


class BoardRenderer:
    def __init__(self, window_size: float):
        self._window_size = window_size
        self.last_commands: List[PolygonCommand] = []

    def render(self, arcade, snapshot: BoardSnapshot, palette: BlockPalette, headless: bool) -> None:
        self.last_commands = build_board_commands(snapshot, palette, self._window_size)
        if headless:
            return
        for command in self.last_commands:
            arcade.draw_polygon_filled(list(command.points), command.color)
