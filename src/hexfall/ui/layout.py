import math
from typing import List, Tuple

from hexfall.constants import BLOCK_HEIGHT, HEX_SIZE, LANE_COUNT, LANE_SIZE, WINDOW_SIZE

Point = Tuple[float, float]


def ring_center(window_size: float = WINDOW_SIZE) -> Point:
    return window_size / 2, window_size / 2


def core_radius(window_size: float = WINDOW_SIZE) -> float:
    return window_size / HEX_SIZE


def ring_point(angle: float, radius: float, window_size: float = WINDOW_SIZE) -> Point:
    """Point at ``angle`` radians and ``radius`` from the center.

    Angles grow clockwise on screen; arcade's y axis points up, so sin is negated.
    """
    cx, cy = ring_center(window_size)
    return cx + math.cos(angle) * radius, cy - math.sin(angle) * radius


def lane_angle(position: float, lane_count: int = LANE_COUNT) -> float:
    return (position / lane_count) * math.pi * 2


def hexagon(radius: float, window_size: float = WINDOW_SIZE, lane_count: int = LANE_COUNT) -> List[Point]:
    return [ring_point(lane_angle(i, lane_count), radius, window_size) for i in range(lane_count)]


def ring_outline(window_size: float = WINDOW_SIZE, lane_size: int = LANE_SIZE) -> List[Point]:
    """Outer hexagon covering the full attached capacity."""
    return hexagon(core_radius(window_size) + lane_size * BLOCK_HEIGHT, window_size)


def core_outline(window_size: float = WINDOW_SIZE) -> List[Point]:
    return hexagon(core_radius(window_size), window_size)


def block_quad(position: float, index: int, window_size: float = WINDOW_SIZE) -> List[Point]:
    """Trapezoid for a block at angular ``position`` (in lanes) and radial ``index``.

    Returned as bottom-left, bottom-right, top-right, top-left.
    """
    left = lane_angle(position)
    right = lane_angle(position + 1)
    inner = core_radius(window_size) + index * BLOCK_HEIGHT
    outer = inner + BLOCK_HEIGHT
    return [
        ring_point(left, inner, window_size),
        ring_point(right, inner, window_size),
        ring_point(right, outer, window_size),
        ring_point(left, outer, window_size),
    ]


def attached_block_quad(lane: int, index: int, rotation: int, window_size: float = WINDOW_SIZE) -> List[Point]:
    # The attached stack is drawn turned back by ``rotation`` so it lines up with the falling lanes.
    return block_quad(lane - rotation, index, window_size)


def falling_block_quad(lane: int, index: int, window_size: float = WINDOW_SIZE) -> List[Point]:
    return block_quad(lane, index, window_size)
