from esper import World
from hexfall.events.bus import EventBus, EVENT_BLOCKS_ATTACHED, EVENT_BOARD_OVERFLOW
from hexfall.systems.board_ops import DescentReport, descend, get_board

class DescentSystem:
    """Second phase of a board tick: move falling blocks inward and lock them in."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def advance(self) -> DescentReport:
        report = descend(get_board(self.world))
        if report.attached:
            self.event_bus.emit(EVENT_BLOCKS_ATTACHED, positions=list(report.attached), source="descent")
        for lane, color in report.overflows:
            self.event_bus.emit(EVENT_BOARD_OVERFLOW, lane=lane, color=color, source="descent")
        return report
