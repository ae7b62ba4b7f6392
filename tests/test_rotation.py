import pytest

from hexfall.components.board import Board
from hexfall.components.game_state import GameMode
from hexfall.events.bus import EVENT_BOARD_OVERFLOW, EVENT_ROTATE_REQUEST, EVENT_ROTATED
from hexfall.systems.board_ops import (
    RotateDirection,
    attached_lanes_contiguous,
    reconcile_rotation,
    rotate,
)
from hexfall.systems.rotation import RotationSystem, coerce_direction
from hexfall.utils.game_state import set_game_mode

from tests.helpers import EventCapture, make_world, set_attached


def test_rotate_left_increments_and_right_decrements():
    board = Board()
    assert rotate(board, RotateDirection.LEFT) == 1
    assert rotate(board, RotateDirection.RIGHT) == 0
    assert rotate(board, RotateDirection.RIGHT) == 5
    assert rotate(board, RotateDirection.LEFT) == 0


@pytest.mark.parametrize("start", range(6))
def test_left_then_right_restores_rotation(start):
    board = Board(rotation=start)
    rotate(board, RotateDirection.LEFT)
    rotate(board, RotateDirection.RIGHT)
    assert board.rotation == start


def test_collision_forces_attachment_at_first_empty_slot():
    board = Board()
    set_attached(board, 1, ["red", "red"])
    board.falling[0][1] = "sky"

    rotate(board, RotateDirection.LEFT)
    report = reconcile_rotation(board)

    assert report.forced == [(1, 2)]
    assert board.attached[1][:3] == ["red", "red", "sky"]
    assert board.falling[0][1] is None
    assert attached_lanes_contiguous(board)


def test_forced_blocks_stack_in_index_order():
    board = Board()
    set_attached(board, 1, ["red", "red", "red"])
    board.falling[0][1] = "sky"
    board.falling[0][3] = "lime"
    board.falling[0][6] = "amber"

    rotate(board, RotateDirection.LEFT)
    report = reconcile_rotation(board)

    # The first forced block raises the stack so the one at index 3 collides too.
    assert report.forced == [(1, 3), (1, 4)]
    assert board.attached[1][:5] == ["red", "red", "red", "sky", "lime"]
    assert board.falling[0][6] == "amber"


def test_block_without_collision_keeps_falling():
    board = Board()
    set_attached(board, 5, ["red"])
    board.falling[0][4] = "sky"

    rotate(board, RotateDirection.RIGHT)
    report = reconcile_rotation(board)

    assert report.forced == []
    assert board.falling[0][4] == "sky"
    assert board.attached_lane_for(0) == 5


def test_collision_with_full_lane_overflows():
    board = Board()
    set_attached(board, 1, ["red", "sky"] * 4)
    board.falling[0][3] = "amber"

    rotate(board, RotateDirection.LEFT)
    report = reconcile_rotation(board)

    assert report.overflows == [(1, "amber")]
    assert board.overflow == (1, "amber")
    assert board.falling[0][3] is None


def test_coerce_direction_accepts_names_and_rejects_unknown():
    assert coerce_direction("left") is RotateDirection.LEFT
    assert coerce_direction("RIGHT") is RotateDirection.RIGHT
    assert coerce_direction(RotateDirection.LEFT) is RotateDirection.LEFT
    with pytest.raises(ValueError):
        coerce_direction("up")


def test_rotate_request_event_drives_reconciliation():
    bus, world, board = make_world()
    RotationSystem(world, bus)
    rotated = EventCapture(bus, EVENT_ROTATED)
    set_attached(board, 1, ["red"])
    board.falling[0][0] = "lime"

    bus.emit(EVENT_ROTATE_REQUEST, direction=RotateDirection.LEFT)

    assert board.rotation == 1
    assert board.attached[1][:2] == ["red", "lime"]
    assert rotated.payloads[0]["rotation"] == 1
    assert rotated.payloads[0]["forced"] == [(1, 1)]


def test_rotate_overflow_is_published():
    bus, world, board = make_world()
    RotationSystem(world, bus)
    overflow = EventCapture(bus, EVENT_BOARD_OVERFLOW)
    set_attached(board, 5, ["red", "sky"] * 4)
    board.falling[0][0] = "lime"

    bus.emit(EVENT_ROTATE_REQUEST, direction="right")

    assert overflow.payloads == [{"lane": 5, "color": "lime", "source": "rotation"}]


def test_rotate_request_ignored_after_loss():
    bus, world, board = make_world()
    RotationSystem(world, bus)
    set_game_mode(world, bus, GameMode.LOST)

    bus.emit(EVENT_ROTATE_REQUEST, direction=RotateDirection.LEFT)

    assert board.rotation == 0
