from __future__ import annotations

from esper import World

from hexfall.components.game_state import GameMode, GameState
from hexfall.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def is_running(world: World) -> bool:
    state = get_game_state(world)
    return state is not None and state.mode == GameMode.RUNNING


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""

    for _, state in world.get_component(GameState):
        if state.mode != mode:
            previous_mode = state.mode
            state.mode = mode
            event_bus.emit(
                EVENT_GAME_MODE_CHANGED,
                previous_mode=previous_mode,
                new_mode=mode,
            )
        return
