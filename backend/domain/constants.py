"""
Game constants for SnakeArcade.

Distances are in pixels and always multiples of UNIT_SIZE; durations are in seconds.
"""

# Board geometry
GAME_WIDTH = 600
GAME_HEIGHT = 600
UNIT_SIZE = 20
INITIAL_SNAKE_LENGTH = 3

# Scoring
FOOD_SCORE = 10
SPECIAL_FOOD_SCORE = FOOD_SCORE * 10

# Special food timing
SPECIAL_FOOD_DURATION = 10.0
SPECIAL_FOOD_COOLDOWN = 20.0
SPECIAL_FOOD_SPAWN_CHECK_INTERVAL = 0.1

# Placement
FOOD_PLACEMENT_ATTEMPTS = 100

# Tick speed presets (level -> (name, delay in ms))
SPEED_PRESETS = {
    1: ("Slow", 300),
    2: ("Medium", 200),
    3: ("Fast", 100),
    4: ("Lightning", 50),
}
DEFAULT_SPEED_LEVEL = 2

# Ignore pause toggles closer together than this
PAUSE_TOGGLE_DEBOUNCE = 0.2
