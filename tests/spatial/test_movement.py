import math

import pytest

from tilewalk.resources import MovementSettings
from tilewalk.spatial.collision import circle_vs_aabb, is_world_pos_clear_circle
from tilewalk.spatial.movement import substep_count, try_move_circle
from tilewalk.spatial.tiles import TileType
from tilewalk.types import Vector2


def test_substep_count(open_grid):
    # Quarter tile = 8 units per step
    assert substep_count(open_grid, 0.5, 0.25) == 1
    assert substep_count(open_grid, 8.0, 0.25) == 1
    assert substep_count(open_grid, 8.1, 0.25) == 2
    assert substep_count(open_grid, 136.0, 0.25) == 17


@pytest.mark.parametrize("radius", [-1.0, 0.0, 5.0, 10.0])
def test_no_op_move_returns_start(open_grid, radius):
    start = Vector2(200.0, 200.0)

    assert try_move_circle(open_grid, start, start, radius) == start
    # Below epsilon
    assert try_move_circle(open_grid, start, start + Vector2(0.0005, 0.0), radius) == start


def test_unobstructed_move_reaches_target(open_grid):
    start = Vector2(100.0, 100.0)
    end = Vector2(260.0, 180.0)

    result = try_move_circle(open_grid, start, end, 10.0)

    assert result.x == pytest.approx(end.x)
    assert result.y == pytest.approx(end.y)


def test_stops_before_water_tile(open_grid):
    """Walking straight at a water tile ends with the collider touching-free."""
    open_grid.set_tile(10, 10, TileType.WATER)
    water = open_grid.tile_bounds(10, 10)
    start = Vector2(200.0, 336.0)
    target = open_grid.grid_to_world(10, 10)

    result = try_move_circle(open_grid, start, target, 10.0)

    assert result != target
    assert not circle_vs_aabb(result, 10.0, water)
    assert result.x == pytest.approx(304.0)
    assert result.y == pytest.approx(336.0)


def test_thin_wall_is_not_tunneled(open_grid):
    for gy in range(0, 20):
        open_grid.set_tile(10, gy, TileType.ROCK)

    radius = open_grid.tile_size / 4
    start = Vector2(100.0, 336.0)

    # One call, far past the wall
    result = try_move_circle(open_grid, start, Vector2(560.0, 336.0), radius)

    assert result.x < 320.0
    assert is_world_pos_clear_circle(open_grid, result, radius)


@pytest.mark.parametrize(
    "end",
    [
        Vector2(560.0, 200.0),
        Vector2(500.0, 500.0),
        Vector2(20.0, 600.0),
        Vector2(330.0, 330.0),
    ],
)
def test_result_is_always_clear(open_grid, end):
    for cell in [(10, 10), (10, 11), (11, 11), (5, 12), (6, 12), (14, 4)]:
        open_grid.set_tile(*cell, TileType.TREE)

    radius = 8.0
    start = Vector2(200.0, 200.0)

    result = try_move_circle(open_grid, start, end, radius)

    assert is_world_pos_clear_circle(open_grid, result, radius)


def test_slides_along_wall(open_grid):
    """Diagonal move into a vertical wall keeps the Y component."""
    open_grid.set_tile(10, 10, TileType.ROCK)
    open_grid.set_tile(10, 11, TileType.ROCK)
    start = Vector2(308.0, 330.0)

    result = try_move_circle(open_grid, start, Vector2(324.0, 346.0), 10.0)

    assert result.x == pytest.approx(308.0)
    assert result.y == pytest.approx(346.0)


def test_slides_along_floor(open_grid):
    """Diagonal move into a horizontal wall keeps the X component."""
    open_grid.set_tile(10, 10, TileType.ROCK)
    open_grid.set_tile(11, 10, TileType.ROCK)
    start = Vector2(330.0, 308.0)

    result = try_move_circle(open_grid, start, Vector2(346.0, 324.0), 10.0)

    assert result.x == pytest.approx(346.0)
    assert result.y == pytest.approx(308.0)


def test_corner_prefers_x_slide(open_grid):
    """Both slides are clear at a lone corner; X is tried first."""
    open_grid.set_tile(10, 10, TileType.ROCK)
    start = Vector2(300.0, 300.0)

    result = try_move_circle(open_grid, start, Vector2(316.0, 316.0), 10.0)

    assert result.x == pytest.approx(316.0)
    assert result.y == pytest.approx(300.0 + 32.0 / 3.0)


def test_fully_blocked_stays_put(open_grid):
    for cell in [(9, 10), (10, 9), (10, 10), (11, 10), (10, 11)]:
        open_grid.set_tile(*cell, TileType.WATER)

    # Pocket: the collider touches nothing yet any step hits water
    open_grid.set_tile(10, 10, TileType.EMPTY)
    start = open_grid.grid_to_world(10, 10)

    result = try_move_circle(open_grid, start, start + Vector2(40.0, 40.0), 15.0)

    assert result == start


def test_zero_radius_uses_point_walkability(open_grid):
    open_grid.set_tile(10, 10, TileType.WATER)
    start = Vector2(200.0, 336.0)

    result = try_move_circle(open_grid, start, Vector2(336.0, 336.0), 0.0)

    # Last walkable sub-step before x=320 (which belongs to the water cell)
    assert result.x == pytest.approx(312.0)
    assert open_grid.is_world_pos_walkable(result)
    assert try_move_circle(open_grid, start, Vector2(336.0, 336.0), -2.0) == result


def test_deterministic(open_grid):
    open_grid.set_tile(10, 10, TileType.ROCK)
    start = Vector2(300.0, 300.0)
    end = Vector2(360.0, 330.0)

    first = try_move_circle(open_grid, start, end, 9.0)
    second = try_move_circle(open_grid, start, end, 9.0)

    assert first == second


def test_custom_step_settings(open_grid):
    open_grid.set_tile(10, 10, TileType.ROCK)
    settings = MovementSettings(epsilon=5.0)
    start = Vector2(200.0, 200.0)

    assert try_move_circle(open_grid, start, Vector2(204.0, 200.0), 5.0, settings) == start


def test_grid_method_delegates(open_grid):
    start = Vector2(100.0, 100.0)

    assert open_grid.try_move_circle(start, start, 10.0) == start


@pytest.mark.parametrize(
    "end",
    [
        Vector2(float("nan"), 100.0),
        Vector2(100.0, math.inf),
        Vector2(-math.inf, -math.inf),
    ],
)
def test_non_finite_target_stays_put(open_grid, end):
    start = Vector2(100.0, 100.0)

    assert try_move_circle(open_grid, start, end, 10.0) == start


@pytest.mark.parametrize("fraction", [0.0, -0.25, float("nan")])
def test_non_positive_step_fraction_raises(fraction):
    with pytest.raises(ValueError):
        MovementSettings(max_step_fraction=fraction)
