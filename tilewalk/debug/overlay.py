from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from tilewalk.constants import DEBUG_LOG_EVERY
from tilewalk.spatial.collision import aabb_vs_aabb
from tilewalk.spatial.grid import Grid
from tilewalk.spatial.tiles import TileType
from tilewalk.types import GridPos, Rect, Vector2


@dataclass(frozen=True)
class TileInfo:
    position: Vector2
    cell: GridPos
    tile: Optional[TileType]
    walkable: bool
    walkable_smart: bool
    clear: bool

    def describe(self) -> str:
        tile = self.tile.name if self.tile is not None else "OUT_OF_BOUNDS"
        return (
            f"pos=({self.position.x:.1f}, {self.position.y:.1f}) "
            f"cell={self.cell} tile={tile} walkable={self.walkable} "
            f"smart={self.walkable_smart} clear={self.clear}"
        )


class CollisionDebug:
    """
    Read-only view of the collision grid for overlays and periodic logging.

    The frame counter lives here rather than in module state; call reset()
    when a session starts.
    """

    def __init__(
        self, grid: Grid, log_every: int = DEBUG_LOG_EVERY, enabled: bool = False
    ):
        if log_every <= 0:
            raise ValueError(f"log_every must be positive, got {log_every}")

        self.grid = grid
        self.log_every = log_every
        self.enabled = enabled
        self.frame = 0

    def reset(self) -> None:
        self.frame = 0

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        print(f"[collision] debug {'on' if self.enabled else 'off'}")
        return self.enabled

    def tile_info(self, position: Vector2, radius: float = 0.0) -> TileInfo:
        cell = self.grid.world_to_grid(position)
        return TileInfo(
            position=position,
            cell=cell,
            tile=self.grid.get_tile(*cell),
            walkable=self.grid.is_world_pos_walkable(position),
            walkable_smart=self.grid.is_world_pos_walkable_smart(position),
            clear=self.grid.is_world_pos_clear_circle(position, radius),
        )

    def tick(self, position: Vector2, radius: float = 0.0) -> Optional[TileInfo]:
        """Advance one frame. Returns the logged info on logging frames."""
        self.frame += 1

        if not self.enabled or self.frame % self.log_every != 0:
            return None

        info = self.tile_info(position, radius)
        print(f"[collision] frame {self.frame}: {info.describe()}")
        return info

    def blocking_cells(self, view: Optional[Rect] = None) -> List[GridPos]:
        """Blocking cells, optionally only those overlapping `view` (world space)."""
        ys, xs = np.nonzero(~self.grid.walkable_mask())
        cells = [(int(x), int(y)) for x, y in zip(xs, ys)]

        if view is None:
            return cells

        return [c for c in cells if aabb_vs_aabb(self.grid.tile_bounds(*c), view)]
