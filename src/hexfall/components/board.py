from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from hexfall.constants import FALLING_LANE_SIZE, LANE_COUNT, LANE_SIZE

Lane = List[Optional[str]]


def _empty_lanes(count: int, size: int) -> List[Lane]:
    return [[None] * size for _ in range(count)]


@dataclass(slots=True)
class Board:
    """The whole simulated play field.

    ``falling`` lanes sit at fixed angular positions; ``attached`` lanes are the
    central stack, rotated beneath them by ``rotation`` steps. Falling lane ``i``
    feeds attached lane ``(i + rotation) % lane_count``. Slots hold a palette
    color name or ``None`` when empty.

    ``overflow`` records the ``(attached_lane, color)`` of the block whose
    attachment went past the attached capacity; it is only set once the game
    is lost.
    """
    lane_count: int = LANE_COUNT
    lane_size: int = LANE_SIZE
    falling_size: int = FALLING_LANE_SIZE
    falling: List[Lane] = field(default_factory=list)
    attached: List[Lane] = field(default_factory=list)
    rotation: int = 0
    score: int = 0
    tick: int = 0
    overflow: Optional[Tuple[int, str]] = None

    def __post_init__(self) -> None:
        if not self.falling:
            self.falling = _empty_lanes(self.lane_count, self.falling_size)
        if not self.attached:
            self.attached = _empty_lanes(self.lane_count, self.lane_size)

    def reset(self) -> None:
        self.falling = _empty_lanes(self.lane_count, self.falling_size)
        self.attached = _empty_lanes(self.lane_count, self.lane_size)
        self.rotation = 0
        self.score = 0
        self.tick = 0
        self.overflow = None

    def attached_lane_for(self, falling_lane: int) -> int:
        return (falling_lane + self.rotation) % self.lane_count

    def falling_lane_for(self, attached_lane: int) -> int:
        return (attached_lane - self.rotation + self.lane_count) % self.lane_count

    def snapshot(self) -> "BoardSnapshot":
        return BoardSnapshot(
            falling=tuple(tuple(lane) for lane in self.falling),
            attached=tuple(tuple(lane) for lane in self.attached),
            rotation=self.rotation,
            score=self.score,
            tick=self.tick,
            overflow=self.overflow,
        )


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only copy of the board handed to renderers."""
    falling: Tuple[Tuple[Optional[str], ...], ...]
    attached: Tuple[Tuple[Optional[str], ...], ...]
    rotation: int
    score: int
    tick: int
    overflow: Optional[Tuple[int, str]] = None
