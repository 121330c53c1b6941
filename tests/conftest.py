import pytest

from tilewalk.spatial.grid import Grid
from tilewalk.types import Vector2

TILE = 32.0


@pytest.fixture
def level_grid():
    """The default level layout: 25x18 tiles of 32 units, centred on (0, 0)."""
    return Grid(25, 18, TILE)


@pytest.fixture
def open_grid():
    """
    20x20 open grid anchored at the world origin.
    Cell (gx, gy) spans [g * 32, g * 32 + 32) on each axis.
    """
    return Grid(20, 20, TILE, origin=Vector2(0.0, 0.0))
