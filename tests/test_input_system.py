import pytest

from hexfall.components.game_state import GameMode
from hexfall.constants import KEY_ENTER, KEY_LEFT, KEY_R, KEY_RIGHT
from hexfall.events.bus import EVENT_KEY_PRESS, EVENT_RESTART_REQUEST, EVENT_ROTATE_REQUEST
from hexfall.systems.board_ops import RotateDirection
from hexfall.systems.game_flow_system import GameFlowSystem
from hexfall.systems.input import InputSystem
from hexfall.systems.rotation import RotationSystem
from hexfall.utils.game_state import get_game_state, set_game_mode

from tests.helpers import EventCapture, make_world


@pytest.fixture
def setup_world():
    bus, world, board = make_world()
    InputSystem(bus, world)
    return bus, world, board


def test_arrow_keys_map_to_rotate_actions(setup_world):
    bus, world, board = setup_world
    requests = EventCapture(bus, EVENT_ROTATE_REQUEST)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_LEFT, modifiers=0)
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_RIGHT, modifiers=0)

    assert [p["direction"] for p in requests.payloads] == [RotateDirection.LEFT, RotateDirection.RIGHT]


def test_each_key_press_rotates_once(setup_world):
    bus, world, board = setup_world
    RotationSystem(world, bus)

    for _ in range(3):
        bus.emit(EVENT_KEY_PRESS, symbol=KEY_LEFT, modifiers=0)

    assert board.rotation == 3


def test_unmapped_keys_are_ignored(setup_world):
    bus, world, board = setup_world
    requests = EventCapture(bus, EVENT_ROTATE_REQUEST)
    restarts = EventCapture(bus, EVENT_RESTART_REQUEST)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_R, modifiers=0)
    bus.emit(EVENT_KEY_PRESS, symbol=32, modifiers=0)
    bus.emit(EVENT_KEY_PRESS, modifiers=0)

    assert len(requests) == 0
    assert len(restarts) == 0


def test_input_disabled_while_lost(setup_world):
    bus, world, board = setup_world
    requests = EventCapture(bus, EVENT_ROTATE_REQUEST)
    set_game_mode(world, bus, GameMode.LOST)

    bus.emit(EVENT_KEY_PRESS, symbol=KEY_LEFT, modifiers=0)

    assert len(requests) == 0


@pytest.mark.parametrize("symbol", [KEY_R, KEY_ENTER])
def test_restart_key_restarts_lost_game(setup_world, symbol):
    bus, world, board = setup_world
    flow = GameFlowSystem(world, bus)
    flow.lose(source="test")
    board.score = 5

    bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=0)

    assert get_game_state(world).mode == GameMode.RUNNING
    assert board.score == 0
