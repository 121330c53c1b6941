from dataclasses import dataclass
from typing import Optional

from tilewalk.constants import PLAYER_RADIUS
from tilewalk.resources import MovementSettings
from tilewalk.spatial.collision import is_world_pos_clear_circle
from tilewalk.spatial.grid import Grid
from tilewalk.spatial.movement import try_move_circle
from tilewalk.types import Vector2


@dataclass
class Actor:
    """Anything that walks the grid with a circle collider."""

    position: Vector2
    radius: float = PLAYER_RADIUS


class MovementSystem:
    """
    Per-tick movement driver.

    Owns no state besides the injected Grid. Each actor's resolved position is
    written back so the next tick starts from a clear position.
    """

    def __init__(self, grid: Grid, settings: Optional[MovementSettings] = None):
        self.grid = grid
        self.settings = settings or MovementSettings()

    def place(self, actor: Actor, position: Vector2) -> bool:
        """Puts the actor at `position` if it fits there."""
        if not is_world_pos_clear_circle(self.grid, position, actor.radius):
            return False
        actor.position = position
        return True

    def move(self, actor: Actor, desired: Vector2) -> Vector2:
        actor.position = try_move_circle(
            self.grid, actor.position, desired, actor.radius, self.settings
        )
        return actor.position

    def move_by(self, actor: Actor, offset: Vector2) -> Vector2:
        if self.settings.apply_friction:
            offset = offset * self.friction_at(actor.position)
        return self.move(actor, actor.position + offset)

    def friction_at(self, position: Vector2) -> float:
        tile = self.grid.get_tile(*self.grid.world_to_grid(position))
        if tile is None:
            return 1.0
        return tile.friction
