from dataclasses import dataclass
from typing import Optional

from tilewalk.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_STEP_FRACTION,
    MOVE_EPSILON,
    TILE_SIZE,
)
from tilewalk.types import Vector2


@dataclass(frozen=True)
class GridSettings:
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT

    # World units per tile edge
    tile_size: float = TILE_SIZE

    # World position of cell (0, 0)'s lower corner.
    # None = centre the grid on the world origin.
    origin: Optional[Vector2] = None


@dataclass(frozen=True)
class MovementSettings:
    # Moves shorter than this are ignored
    epsilon: float = MOVE_EPSILON

    # Sub-step length as a fraction of tile_size
    max_step_fraction: float = MAX_STEP_FRACTION

    # Scale move_by() offsets by the friction of the tile underfoot
    apply_friction: bool = True

    def __post_init__(self) -> None:
        if not self.max_step_fraction > 0:
            raise ValueError(
                f"max_step_fraction must be positive, got {self.max_step_fraction}"
            )
