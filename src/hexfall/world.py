import random

from esper import World
from .events.bus import EventBus
from hexfall.components.board import Board
from hexfall.components.block_palette import BlockPalette
from hexfall.components.game_state import GameState, GameMode
from hexfall.constants import FALLING_LANE_SIZE, LANE_COUNT, LANE_SIZE, PALETTE


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.RUNNING,
    *,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Global game state resource.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))

    world.create_entity(
        Board(lane_count=LANE_COUNT, lane_size=LANE_SIZE, falling_size=FALLING_LANE_SIZE),
    )

    # Single palette entity with the canonical block colors.
    world.create_entity(BlockPalette(colors=dict(PALETTE)))
    return world
