from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

from tilewalk.constants import SHORE_CLEARANCE
from tilewalk.math import clamp, distance_sq
from tilewalk.spatial import walkability
from tilewalk.spatial.tiles import TileType
from tilewalk.types import Rect, Vector2

if TYPE_CHECKING:
    from tilewalk.spatial.grid import Grid


def aabb_vs_aabb(r1: Rect, r2: Rect) -> bool:
    """
    Rect = (x, y, w, h) where x,y is the minimum corner.
    """
    return (
        r1[0] < r2[0] + r2[2]
        and r1[0] + r1[2] > r2[0]
        and r1[1] < r2[1] + r2[3]
        and r1[1] + r1[3] > r2[1]
    )


def closest_point_on_aabb(p: Vector2, r: Rect) -> Vector2:
    return Vector2(
        clamp(p.x, r[0], r[0] + r[2]),
        clamp(p.y, r[1], r[1] + r[3]),
    )


def circle_vs_aabb(center: Vector2, radius: float, r: Rect) -> bool:
    """Touching counts as overlap."""
    closest = closest_point_on_aabb(center, r)
    return distance_sq(center, closest) <= radius * radius


def cell_range(
    grid: Grid, center: Vector2, radius: float
) -> Tuple[int, int, int, int]:
    """Inclusive (min_gx, max_gx, min_gy, max_gy) under the circle's bounding square."""
    ox, oy = grid.origin
    ts = grid.tile_size
    return (
        math.floor((center.x - radius - ox) / ts),
        math.floor((center.x + radius - ox) / ts),
        math.floor((center.y - radius - oy) / ts),
        math.floor((center.y + radius - oy) / ts),
    )


def is_world_pos_clear_circle(grid: Grid, center: Vector2, radius: float) -> bool:
    """
    Exact circle-vs-tile test. Returns False if a circle of `radius` at
    `center` overlaps any blocking tile or pokes out of the grid.
    """
    # Outside the map counts as solid
    if not grid.contains_circle(center, radius):
        return False

    if radius <= 0:
        return walkability.is_world_pos_walkable(grid, center)

    min_gx, max_gx, min_gy, max_gy = cell_range(grid, center, radius)

    for gy in range(min_gy, max_gy + 1):
        for gx in range(min_gx, max_gx + 1):
            tile = grid.get_tile(gx, gy)
            if tile is None:
                return False  # Solid border

            if tile.is_walkable:
                continue

            # Unreachable while shore is walkable (the continue above skips it)
            effective_radius = radius
            if tile == TileType.SHORE:
                effective_radius += SHORE_CLEARANCE * grid.tile_size

            if circle_vs_aabb(center, effective_radius, grid.tile_bounds(gx, gy)):
                return False

    return True
