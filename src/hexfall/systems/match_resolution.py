from typing import List
from esper import World
from hexfall.events.bus import EventBus, EVENT_MATCH_CLEARED, EVENT_BLOCKS_FLOATED
from hexfall.systems.board_ops import ClearedGroup, get_board, resolve_matches

class MatchResolutionSystem:
    """First phase of a board tick: clear connected groups and float orphans back."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def resolve(self) -> List[ClearedGroup]:
        board = get_board(self.world)
        groups = resolve_matches(board)
        for group in groups:
            # Deterministic ordering for events/tests
            self.event_bus.emit(
                EVENT_MATCH_CLEARED,
                color=group.color,
                positions=sorted(group.positions),
                size=group.size,
                score=board.score,
            )
            if group.floated:
                self.event_bus.emit(EVENT_BLOCKS_FLOATED, blocks=list(group.floated))
        return groups
