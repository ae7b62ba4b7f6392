LANE_COUNT = 6
LANE_SIZE = 8
# Falling lanes reach past the attached stack so blocks have room to drift in.
EXTRA_ROOM = 3
FALLING_LANE_SIZE = LANE_SIZE + EXTRA_ROOM
SPAWN_INDEX = FALLING_LANE_SIZE - 1

TICK_RATE = 5
TICK_INTERVAL = 1.0 / TICK_RATE
MATCH_SIZE = 3
SPAWN_INTERVAL = 10

# Cumulative thresholds for a single uniform draw: (upper bound, spawn count).
SPAWN_COUNT_TABLE = (
    (0.5, 1),
    (0.8, 2),
    (0.95, 3),
    (1.0, 4),
)

PALETTE = {
    'red':   (239, 68, 68),    # #EF4444
    'lime':  (132, 204, 22),   # #84CC16
    'sky':   (14, 165, 233),   # #0EA5E9
    'amber': (234, 179, 8),    # #EAB308
}

# Render geometry, in window pixels.
WINDOW_SIZE = 1024
BLOCK_HEIGHT = 25
# Inner hexagon radius is WINDOW_SIZE / HEX_SIZE.
HEX_SIZE = 10
FONT_SIZE = 30
RING_COLOR = (156, 163, 175)   # #9CA3AF
CORE_COLOR = (75, 85, 99)      # #4B5563
SCORE_COLOR = (229, 231, 235)  # #E5E7EB

# Key symbols as reported by arcade (pyglet), kept here to avoid importing arcade in systems.
KEY_LEFT = 65361     # arcade.key.LEFT
KEY_RIGHT = 65363    # arcade.key.RIGHT
KEY_ENTER = 65293    # arcade.key.ENTER
KEY_R = 114          # arcade.key.R
