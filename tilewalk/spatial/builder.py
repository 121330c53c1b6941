from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from tilewalk.resources import GridSettings
from tilewalk.spatial.grid import Grid
from tilewalk.spatial.tiles import TileMarker, TileType
from tilewalk.types import GridPos


@dataclass(frozen=True)
class Blocking:
    """Tag for spawned tiles that stop movement."""


@dataclass(frozen=True)
class TileSpawn:
    """One spawnable tile asset as declared by the world generator."""

    sprite_name: str
    # Offset in grid cells (for multi-tile objects)
    grid_offset: GridPos = (0, 0)
    # None = decoration only, does not take part in collision
    tile_type: Optional[TileType] = None

    def with_tile_type(self, tile_type: TileType) -> "TileSpawn":
        return TileSpawn(self.sprite_name, self.grid_offset, tile_type)


def spawn_components(
    spawn: TileSpawn, grid_position: GridPos, layer: int = 0
) -> Tuple[Any, ...]:
    """Components to attach to the entity spawned for `spawn` at `grid_position`."""
    cell = (
        grid_position[0] + spawn.grid_offset[0],
        grid_position[1] + spawn.grid_offset[1],
    )

    match spawn.tile_type:
        case None:
            return ()
        case TileType.WATER | TileType.TREE | TileType.ROCK:
            return (TileMarker(spawn.tile_type, cell, layer), Blocking())
        case (
            TileType.DIRT
            | TileType.GRASS
            | TileType.YELLOW_GRASS
            | TileType.SHORE
            | TileType.PLANT
            | TileType.STUMP
            | TileType.EMPTY
        ):
            return (TileMarker(spawn.tile_type, cell, layer),)
        case _:
            raise ValueError(f"Unknown tile type: {spawn.tile_type!r}")


def populate_grid(grid: Grid, markers: Iterable[TileMarker]) -> int:
    """
    Writes tile markers into `grid`, lowest layer first.

    A walkable marker never overwrites a blocking one already written to the
    same cell, so a tree stays solid whatever ground sits under or over it.
    Markers outside the grid are skipped. Returns the number of markers
    written.
    """
    written: Dict[GridPos, TileType] = {}
    applied = 0

    for marker in sorted(markers, key=lambda m: m.layer):
        x, y = marker.grid_position
        if not grid.in_bounds(x, y):
            continue

        previous = written.get((x, y))
        if (
            previous is not None
            and not previous.is_walkable
            and marker.tile_type.is_walkable
        ):
            continue

        grid.set_tile(x, y, marker.tile_type)
        written[(x, y)] = marker.tile_type
        applied += 1

    return applied


def build_grid(
    markers: Iterable[TileMarker], settings: Optional[GridSettings] = None
) -> Grid:
    grid = Grid.from_settings(settings or GridSettings())
    populate_grid(grid, markers)
    return grid
