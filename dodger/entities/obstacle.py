"""
obstacle.py
-----------
Falling rectangle the player must avoid.

Obstacles have no identity beyond their geometry; the simulation creates
them through ObstacleSpawner and drops them once they fall off the surface.
"""

from dodger.core.runtime.game_settings import Layers
from dodger.entities.rectangle import Rectangle


class Obstacle(Rectangle):
    """Rectangle with a per-instance fall speed (pixels per frame)."""

    __slots__ = ('fall_speed',)

    def __init__(self, x, y, width, height, fall_speed, color=(255, 255, 255)):
        super().__init__(x, y, width, height, color)
        self.fall_speed = float(fall_speed)

    def fall(self):
        """Advance one frame downward."""
        self.y += self.fall_speed

    def is_below(self, surface_height) -> bool:
        """True once the top edge has passed the bottom of the surface."""
        return self.y > surface_height

    def draw(self, draw_manager, layer=Layers.OBSTACLES):
        super().draw(draw_manager, layer)
