from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from tilewalk.math import magnitude_vec
from tilewalk.resources import MovementSettings
from tilewalk.spatial.collision import is_world_pos_clear_circle
from tilewalk.types import Vector2

if TYPE_CHECKING:
    from tilewalk.spatial.grid import Grid

_DEFAULT_SETTINGS = MovementSettings()


def substep_count(grid: Grid, distance: float, max_step_fraction: float) -> int:
    max_step = grid.tile_size * max_step_fraction
    return max(1, math.ceil(distance / max_step))


def try_move_circle(
    grid: Grid,
    start: Vector2,
    desired_end: Vector2,
    radius: float,
    settings: Optional[MovementSettings] = None,
) -> Vector2:
    """
    Swept movement for a circle collider.

    Walks from `start` towards `desired_end` in sub-steps no longer than a
    fraction of a tile so thin walls can't be skipped. A blocked sub-step
    retries along X only, then Y only (wall sliding). Returns the farthest
    position reached.

    `start` is assumed to be clear; feed the previous result back in.
    """
    settings = settings or _DEFAULT_SETTINGS

    delta = desired_end - start
    delta_len = magnitude_vec(delta)

    # NaN or infinite targets leave the collider where it is
    if not math.isfinite(delta_len):
        return start

    if delta_len < settings.epsilon:
        return start

    steps = substep_count(grid, delta_len, settings.max_step_fraction)
    step_v = delta / steps

    p = start
    for _ in range(steps):
        candidate = p + step_v

        if is_world_pos_clear_circle(grid, candidate, radius):
            p = candidate
            continue

        # X before Y: keeps corner behaviour reproducible
        slide_x = p.with_x(candidate.x)
        if is_world_pos_clear_circle(grid, slide_x, radius):
            p = slide_x
            continue

        slide_y = p.with_y(candidate.y)
        if is_world_pos_clear_circle(grid, slide_y, radius):
            p = slide_y
            continue

        break

    return p
