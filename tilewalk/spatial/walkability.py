from __future__ import annotations

from typing import TYPE_CHECKING

from tilewalk.constants import (
    GROUND_MARGIN_FRACTION,
    MARGIN_SAMPLES,
    SHORE_MARGIN_FRACTION,
    SHORE_SAMPLES,
)
from tilewalk.math import point_on_circle, ring_angles
from tilewalk.spatial.tiles import TileType
from tilewalk.types import Vector2

if TYPE_CHECKING:
    from tilewalk.spatial.grid import Grid


def is_walkable(grid: Grid, x: int, y: int) -> bool:
    tile = grid.get_tile(x, y)
    if tile is None:
        return False  # Out of bounds is never walkable
    return tile.is_walkable


def is_world_pos_walkable(grid: Grid, world_pos: Vector2) -> bool:
    gx, gy = grid.world_to_grid(world_pos)
    return is_walkable(grid, gx, gy)


def _ring_is_walkable(
    grid: Grid, center: Vector2, radius: float, samples: int
) -> bool:
    for angle in ring_angles(samples):
        if not is_world_pos_walkable(grid, point_on_circle(center, radius, angle)):
            return False
    return True


def is_world_pos_walkable_with_margin(
    grid: Grid, world_pos: Vector2, margin_tiles: float
) -> bool:
    """
    Point test plus a ring of samples `margin_tiles` tiles away, so the caller
    keeps a buffer from obstacles without exact geometry.
    """
    if not is_world_pos_walkable(grid, world_pos):
        return False

    if margin_tiles <= 0:
        return True

    return _ring_is_walkable(
        grid, world_pos, margin_tiles * grid.tile_size, MARGIN_SAMPLES
    )


def is_world_pos_walkable_smart(grid: Grid, world_pos: Vector2) -> bool:
    """
    Adaptive margin: dense and wide on shore tiles (water is one step away),
    sparse and tight everywhere else.
    """
    gx, gy = grid.world_to_grid(world_pos)
    tile = grid.get_tile(gx, gy)

    if tile is None or not tile.is_walkable:
        return False

    if tile == TileType.SHORE:
        return _ring_is_walkable(
            grid, world_pos, SHORE_MARGIN_FRACTION * grid.tile_size, SHORE_SAMPLES
        )

    return _ring_is_walkable(
        grid, world_pos, GROUND_MARGIN_FRACTION * grid.tile_size, MARGIN_SAMPLES
    )
