from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from tilewalk.types import GridPos


class TileType(IntEnum):
    # Walkable terrain
    DIRT = 0
    GRASS = 1
    YELLOW_GRASS = 2
    SHORE = 3  # Walkable edge of water

    # Blocking
    WATER = 4
    TREE = 5
    ROCK = 6

    # Walkable props
    PLANT = 7
    STUMP = 8

    # No tile placed
    EMPTY = 9

    @property
    def is_walkable(self) -> bool:
        return self not in _BLOCKING

    @property
    def friction(self) -> float:
        """Speed multiplier. 1.0 = normal speed, < 1.0 = slower."""
        return _FRICTION.get(self, 1.0)


_BLOCKING = frozenset({TileType.WATER, TileType.TREE, TileType.ROCK})

_FRICTION = {
    TileType.DIRT: 1.0,
    TileType.GRASS: 0.85,
    TileType.YELLOW_GRASS: 0.7,
}

# Indexed by tile value; lets a whole int8 tile array be mapped in one go.
WALKABLE_LUT = np.array([t.is_walkable for t in TileType], dtype=np.bool_)


def is_walkable(tile: TileType) -> bool:
    return tile.is_walkable


def friction(tile: TileType) -> float:
    return tile.friction


@dataclass(frozen=True)
class TileMarker:
    """Attached to a spawned tile so the collision grid can be rebuilt from it."""

    tile_type: TileType
    grid_position: GridPos
    layer: int = 0
