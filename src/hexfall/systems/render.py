from esper import World

from hexfall.components.game_state import GameMode
from hexfall.constants import FONT_SIZE, SCORE_COLOR
from hexfall.events.bus import EventBus, EVENT_GAME_LOST, EVENT_GAME_RESTARTED
from hexfall.rendering.board_renderer import BoardRenderer
from hexfall.systems.board_ops import get_board, get_palette
from hexfall.utils.game_state import get_game_state


class RenderSystem:
    """Draws a read-only snapshot of the board once per frame."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.loss_visible = False
        self._board_renderer = BoardRenderer(min(window.width, window.height))
        self.event_bus.subscribe(EVENT_GAME_LOST, self.on_game_lost)
        self.event_bus.subscribe(EVENT_GAME_RESTARTED, self.on_game_restarted)

    def on_game_lost(self, sender, **kwargs):
        self.loss_visible = True

    def on_game_restarted(self, sender, **kwargs):
        self.loss_visible = False

    @property
    def last_commands(self):
        return self._board_renderer.last_commands

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        snapshot = get_board(self.world).snapshot()
        self._board_renderer.render(arcade, snapshot, get_palette(self.world), headless=headless)
        if headless:
            return
        cx = self.window.width / 2
        cy = self.window.height / 2
        arcade.draw_text(
            str(snapshot.score),
            cx,
            cy,
            SCORE_COLOR,
            FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        state = get_game_state(self.world)
        if self.loss_visible or (state is not None and state.mode == GameMode.LOST):
            self._render_loss_screen(arcade)

    def _render_loss_screen(self, arcade):
        width = self.window.width
        height = self.window.height
        arcade.draw_lrbt_rectangle_filled(0, width, 0, height, (0, 0, 0, 180))
        arcade.draw_text(
            "You lost",
            width / 2,
            height / 2 + FONT_SIZE,
            SCORE_COLOR,
            FONT_SIZE * 1.5,
            anchor_x="center",
            bold=True,
        )
        arcade.draw_text(
            "Press R to restart",
            width / 2,
            height / 2 - FONT_SIZE,
            SCORE_COLOR,
            FONT_SIZE * 0.7,
            anchor_x="center",
        )
