"""Entry point for the Hexfall ring puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from hexfall.world import create_world
from hexfall.constants import WINDOW_SIZE
from hexfall.events.bus import EventBus, EVENT_TICK, EVENT_KEY_PRESS
from hexfall.systems.descent import DescentSystem
from hexfall.systems.game_flow_system import GameFlowSystem
from hexfall.systems.input import InputSystem
from hexfall.systems.match_resolution import MatchResolutionSystem
from hexfall.systems.render import RenderSystem
from hexfall.systems.rotation import RotationSystem
from hexfall.systems.spawner import SpawnerSystem
from hexfall.systems.tick_scheduler import TickSchedulerSystem

logger = logging.getLogger(__name__)


class HexfallWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_SIZE, WINDOW_SIZE, "Hexfall")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Game flow first so loss is recorded before the scheduler sees it.
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus, report_loss=self.report_loss)

        # Board simulation systems
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.descent_system = DescentSystem(self.world, self.event_bus)
        self.spawner_system = SpawnerSystem(self.world, self.event_bus)
        self.tick_scheduler = TickSchedulerSystem(
            self.world,
            self.event_bus,
            match_resolution=self.match_resolution_system,
            descent=self.descent_system,
            spawner=self.spawner_system,
        )
        self.rotation_system = RotationSystem(self.world, self.event_bus)

        # Interface systems
        self.input_system = InputSystem(self.event_bus, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.BLACK)

    def report_loss(self):
        logger.info("loss reported to host window")

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = HexfallWindow()
    run()

if __name__ == "__main__":
    main()
