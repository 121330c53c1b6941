# tilewalk/__init__.py
from tilewalk.debug.overlay import CollisionDebug, TileInfo
from tilewalk.resources import GridSettings, MovementSettings
from tilewalk.spatial.builder import TileSpawn, build_grid, populate_grid
from tilewalk.spatial.collision import is_world_pos_clear_circle
from tilewalk.spatial.grid import Grid
from tilewalk.spatial.movement import try_move_circle
from tilewalk.spatial.tiles import TileMarker, TileType
from tilewalk.systems.movement import Actor, MovementSystem
from tilewalk.types import Vector2

__all__ = [
    "Grid",
    "GridSettings",
    "MovementSettings",
    "TileType",
    "TileMarker",
    "TileSpawn",
    "build_grid",
    "populate_grid",
    "is_world_pos_clear_circle",
    "try_move_circle",
    "Actor",
    "MovementSystem",
    "CollisionDebug",
    "TileInfo",
    "Vector2",
]
