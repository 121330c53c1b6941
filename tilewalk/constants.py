# Grid
TILE_SIZE: float = 32.0
GRID_WIDTH: int = 25
GRID_HEIGHT: int = 18

# Movement
MOVE_EPSILON: float = 0.001
# Largest sub-step of the swept resolver, as a fraction of a tile.
MAX_STEP_FRACTION: float = 0.25
PLAYER_RADIUS: float = 10.0

# Walkability sampling
MARGIN_SAMPLES: int = 8
SHORE_SAMPLES: int = 12
SHORE_MARGIN_FRACTION: float = 0.25
GROUND_MARGIN_FRACTION: float = 0.15

# Extra radius (fraction of a tile) applied to shore cells in circle tests.
SHORE_CLEARANCE: float = 0.1

# Debug
DEBUG_LOG_EVERY: int = 60
