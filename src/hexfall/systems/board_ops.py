from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from esper import World

from hexfall.components.block_palette import BlockPalette
from hexfall.components.board import Board, Lane
from hexfall.constants import MATCH_SIZE, SPAWN_COUNT_TABLE, SPAWN_INTERVAL

# (lane, index) in attached-lane coordinates unless stated otherwise.
Position = Tuple[int, int]
Overflow = Tuple[int, str]


class AttachOutcome(Enum):
    ATTACHED = "attached"
    OVERFLOW = "overflow"


class RotateDirection(Enum):
    """Step applied to ``Board.rotation``."""
    LEFT = 1
    RIGHT = -1


@dataclass(slots=True)
class FloatedBlock:
    attached_lane: int
    falling_lane: int
    index: int
    color: str


@dataclass(slots=True)
class ClearedGroup:
    color: str
    positions: List[Position]
    floated: List[FloatedBlock] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.positions)


@dataclass(slots=True)
class DescentMove:
    lane: int
    source: int
    target: int
    color: str


@dataclass(slots=True)
class DescentReport:
    moved: List[DescentMove] = field(default_factory=list)
    attached: List[Position] = field(default_factory=list)
    overflows: List[Overflow] = field(default_factory=list)


@dataclass(slots=True)
class RotationReport:
    rotation: int
    forced: List[Position] = field(default_factory=list)
    overflows: List[Overflow] = field(default_factory=list)


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_palette(world: World) -> BlockPalette:
    for _, palette in world.get_component(BlockPalette):
        return palette
    raise RuntimeError("BlockPalette definitions not found")


# ---------------------------------------------------------------------------
# Match resolution
# ---------------------------------------------------------------------------

def neighbours(board: Board, lane: int, index: int) -> List[Position]:
    """Lane axis wraps around the ring; index axis is bounded."""
    result = [
        ((lane - 1 + board.lane_count) % board.lane_count, index),
        ((lane + 1) % board.lane_count, index),
    ]
    if index != 0:
        result.append((lane, index - 1))
    if index != board.lane_size - 1:
        result.append((lane, index + 1))
    return result


def flood_fill(board: Board, lane: int, index: int) -> List[Position]:
    """Return attached positions connected to (lane, index) with the same color, in BFS order."""
    color = board.attached[lane][index]
    if color is None:
        return []
    visited: set[Position] = set()
    group: List[Position] = []
    to_visit = deque([(lane, index)])
    while to_visit:
        pos = to_visit.popleft()
        if pos in visited:
            continue
        visited.add(pos)
        group.append(pos)
        for n_lane, n_index in neighbours(board, *pos):
            if (n_lane, n_index) in visited:
                continue
            if board.attached[n_lane][n_index] == color:
                to_visit.append((n_lane, n_index))
    return group


def float_back(board: Board, lane: int) -> List[FloatedBlock]:
    """Move every attached block sitting above a gap back into its feeding falling lane."""
    target = board.falling_lane_for(lane)
    stack = board.attached[lane]
    floated: List[FloatedBlock] = []
    floating = False
    for index in range(board.lane_size):
        color = stack[index]
        if color is None:
            floating = True
        elif floating:
            stack[index] = None
            board.falling[target][index] = color
            floated.append(FloatedBlock(attached_lane=lane, falling_lane=target, index=index, color=color))
    return floated


def _lanes_in_order(positions: Iterable[Position]) -> List[int]:
    seen: List[int] = []
    for lane, _ in positions:
        if lane not in seen:
            seen.append(lane)
    return seen


def resolve_matches(board: Board, *, match_size: int = MATCH_SIZE) -> List[ClearedGroup]:
    """Single lane-then-index scan clearing every group of at least ``match_size``.

    Clears happen mid-scan, so later seeds see the board as already mutated.
    New adjacencies created by a clear are left for the next call.
    """
    cleared: List[ClearedGroup] = []
    visited: set[Position] = set()
    for lane in range(board.lane_count):
        for index in range(board.lane_size):
            if (lane, index) in visited:
                continue
            color = board.attached[lane][index]
            if color is None:
                continue
            group = flood_fill(board, lane, index)
            visited.update(group)
            if len(group) < match_size:
                continue
            board.score += len(group)
            for g_lane, g_index in group:
                board.attached[g_lane][g_index] = None
            floated: List[FloatedBlock] = []
            for affected in _lanes_in_order(group):
                floated.extend(float_back(board, affected))
            cleared.append(ClearedGroup(color=color, positions=group, floated=floated))
    return cleared


# ---------------------------------------------------------------------------
# Descent and attachment
# ---------------------------------------------------------------------------

def _attached_slot_empty(board: Board, lane: int, index: int) -> bool:
    # Positions past the attached capacity never hold a block.
    return index >= board.lane_size or board.attached[lane][index] is None


def attach_block(board: Board, lane: int, index: int, color: str) -> AttachOutcome:
    """Write ``color`` into attached ``lane`` at ``index``; past capacity is an overflow."""
    if index >= board.lane_size:
        board.overflow = (lane, color)
        return AttachOutcome.OVERFLOW
    board.attached[lane][index] = color
    return AttachOutcome.ATTACHED


def descend(board: Board) -> DescentReport:
    """Advance every falling block one slot or attach it where it rests."""
    report = DescentReport()
    for lane_index, lane in enumerate(board.falling):
        target = board.attached_lane_for(lane_index)
        for index in range(board.falling_size):
            color = lane[index]
            if color is None:
                continue
            if index != 0 and _attached_slot_empty(board, target, index - 1):
                lane[index - 1] = color
                lane[index] = None
                report.moved.append(DescentMove(lane=lane_index, source=index, target=index - 1, color=color))
                continue
            lane[index] = None
            if attach_block(board, target, index, color) is AttachOutcome.OVERFLOW:
                report.overflows.append((target, color))
            else:
                report.attached.append((target, index))
    return report


# ---------------------------------------------------------------------------
# Rotation
# ---------------------------------------------------------------------------

def rotate(board: Board, direction: RotateDirection) -> int:
    board.rotation = (board.rotation + board.lane_count + direction.value) % board.lane_count
    return board.rotation


def first_empty_index(stack: Lane) -> Optional[int]:
    for index, color in enumerate(stack):
        if color is None:
            return index
    return None


def reconcile_rotation(board: Board) -> RotationReport:
    """Force-attach falling blocks whose new target slot is already occupied."""
    report = RotationReport(rotation=board.rotation)
    for lane_index, lane in enumerate(board.falling):
        target = board.attached_lane_for(lane_index)
        stack = board.attached[target]
        for index in range(board.falling_size):
            color = lane[index]
            if color is None or _attached_slot_empty(board, target, index):
                continue
            lane[index] = None
            slot = first_empty_index(stack)
            if slot is None:
                attach_block(board, target, board.lane_size, color)
                report.overflows.append((target, color))
            else:
                attach_block(board, target, slot, color)
                report.forced.append((target, slot))
    return report


# ---------------------------------------------------------------------------
# Spawning
# ---------------------------------------------------------------------------

def spawn_due(tick: int, *, interval: int = SPAWN_INTERVAL) -> bool:
    return tick % interval == 0


def draw_spawn_count(
    rng: random.Random,
    table: Sequence[Tuple[float, int]] = SPAWN_COUNT_TABLE,
) -> int:
    roll = rng.random()
    for bound, count in table:
        if roll < bound:
            return count
    return table[-1][1]


def spawn_blocks(
    board: Board,
    rng: random.Random,
    colors: Sequence[str],
    *,
    count: int | None = None,
) -> List[Tuple[int, str]]:
    """Drop random colors into the outermost slot of ``count`` distinct falling lanes.

    An occupied outermost slot is overwritten.
    """
    if not colors:
        return []
    if count is None:
        count = draw_spawn_count(rng)
    count = min(count, board.lane_count)
    spawns: List[Tuple[int, str]] = []
    used: set[int] = set()
    while len(spawns) < count:
        lane = rng.randrange(board.lane_count)
        if lane in used:
            continue
        used.add(lane)
        color = rng.choice(list(colors))
        board.falling[lane][board.falling_size - 1] = color
        spawns.append((lane, color))
    return spawns


def attached_lanes_contiguous(board: Board) -> bool:
    """True when every attached lane is a gap-free run starting at index 0."""
    for stack in board.attached:
        seen_gap = False
        for color in stack:
            if color is None:
                seen_gap = True
            elif seen_gap:
                return False
    return True
