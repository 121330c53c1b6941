from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from tilewalk.constants import TILE_SIZE
from tilewalk.resources import GridSettings
from tilewalk.spatial import collision, movement, walkability
from tilewalk.spatial.tiles import WALKABLE_LUT, TileType
from tilewalk.types import Rect, Vector2


class Grid:
    """
    Fixed-size tile map plus the mapping between world and grid space.

    World space is continuous; grid space is integer cell indices. Cell
    (gx, gy) covers [origin + g * tile_size, origin + (g + 1) * tile_size)
    on each axis.
    """

    def __init__(
        self,
        width: int,
        height: int,
        tile_size: float = TILE_SIZE,
        origin: Optional[Vector2] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")

        self.width = width
        self.height = height
        self.tile_size = float(tile_size)

        if origin is None:
            # Centered on the world origin
            origin = Vector2(
                -(width * self.tile_size) / 2.0,
                -(height * self.tile_size) / 2.0,
            )
        self.origin = origin

        # Row-major: index = y * width + x.
        # Int8 is enough for 127 tile types.
        self._data = np.full(width * height, TileType.EMPTY, dtype=np.int8)

    @classmethod
    def with_origin(
        cls, width: int, height: int, tile_size: float, origin: Vector2
    ) -> Grid:
        return cls(width, height, tile_size, origin)

    @classmethod
    def from_settings(cls, settings: GridSettings) -> Grid:
        return cls(
            settings.width, settings.height, settings.tile_size, settings.origin
        )

    @property
    def tiles(self) -> List[TileType]:
        return [TileType(int(v)) for v in self._data]

    # -- Storage --
    def xy_idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Optional[TileType]:
        if not self.in_bounds(x, y):
            return None
        return TileType(int(self._data[self.xy_idx(x, y)]))

    def set_tile(self, x: int, y: int, tile: TileType) -> None:
        if self.in_bounds(x, y):
            self._data[self.xy_idx(x, y)] = tile

    def walkable_mask(self) -> NDArray[np.bool_]:
        """(height, width) array, True where the tile can be walked on."""
        return WALKABLE_LUT[self._data].reshape(self.height, self.width)

    # -- Coordinate transforms --
    def world_to_grid(self, world_pos: Vector2) -> Tuple[int, int]:
        """Converts world coordinates to grid indices."""
        fx = (world_pos.x - self.origin.x) / self.tile_size
        fy = (world_pos.y - self.origin.y) / self.tile_size

        # NaN or infinite positions land outside the grid
        if not (math.isfinite(fx) and math.isfinite(fy)):
            return (-1, -1)

        return (math.floor(fx), math.floor(fy))

    def grid_to_world(self, gx: int, gy: int) -> Vector2:
        """Returns the CENTER of the tile in world coordinates."""
        return Vector2(
            self.origin.x + (gx + 0.5) * self.tile_size,
            self.origin.y + (gy + 0.5) * self.tile_size,
        )

    def tile_bounds(self, gx: int, gy: int) -> Rect:
        return (
            self.origin.x + gx * self.tile_size,
            self.origin.y + gy * self.tile_size,
            self.tile_size,
            self.tile_size,
        )

    def world_bounds(self) -> Rect:
        return (
            self.origin.x,
            self.origin.y,
            self.width * self.tile_size,
            self.height * self.tile_size,
        )

    def contains_circle(self, center: Vector2, radius: float) -> bool:
        """True if the circle's bounding square lies inside the grid."""
        left, bottom, w, h = self.world_bounds()
        return (
            center.x - radius >= left
            and center.x + radius <= left + w
            and center.y - radius >= bottom
            and center.y + radius <= bottom + h
        )

    # -- Queries --
    def is_walkable(self, x: int, y: int) -> bool:
        return walkability.is_walkable(self, x, y)

    def is_world_pos_walkable(self, world_pos: Vector2) -> bool:
        return walkability.is_world_pos_walkable(self, world_pos)

    def is_world_pos_walkable_with_margin(
        self, world_pos: Vector2, margin_tiles: float
    ) -> bool:
        return walkability.is_world_pos_walkable_with_margin(
            self, world_pos, margin_tiles
        )

    def is_world_pos_walkable_smart(self, world_pos: Vector2) -> bool:
        return walkability.is_world_pos_walkable_smart(self, world_pos)

    def is_world_pos_clear_circle(self, center: Vector2, radius: float) -> bool:
        return collision.is_world_pos_clear_circle(self, center, radius)

    def try_move_circle(
        self, start: Vector2, desired_end: Vector2, radius: float
    ) -> Vector2:
        return movement.try_move_circle(self, start, desired_end, radius)
