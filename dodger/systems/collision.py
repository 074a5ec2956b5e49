"""
collision.py
------------
Player-vs-obstacle collision detection.

Responsibilities
----------------
- Provide the symmetric strict AABB overlap test.
- Find the first obstacle touching the player, in obstacle-set order.
- Optionally queue debug hitbox outlines.

Detection only: the simulation decides what a hit means.
"""

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.game_settings import Debug


def rects_overlap(a, b) -> bool:
    """
    True if rectangles a and b overlap with positive area.

    Works on anything exposing x, y, width and height. Edge contact is not overlap.
    """
    return (
        a.x < b.x + b.width and
        a.x + a.width > b.x and
        a.y < b.y + b.height and
        a.y + a.height > b.y
    )


class CollisionManager:
    """Detects player hits against the obstacle set."""

    def __init__(self, player):
        self.player = player

    def first_hit(self, obstacles):
        """
        Return the first obstacle overlapping the player, or None.

        Args:
            obstacles: Iterable of obstacles in stable order
        """
        for obstacle in obstacles:
            if rects_overlap(self.player, obstacle):
                DebugLogger.trace(f"Player hit by {obstacle!r}", category="collision")
                return obstacle
        return None

    def draw_debug(self, draw_manager, obstacles):
        """Queue hitbox outlines when hitbox display is toggled on."""
        if not Debug.HITBOX_VISIBLE:
            return
        draw_manager.queue_hitbox(self.player.as_tuple(), (255, 255, 0))
        for obstacle in obstacles:
            draw_manager.queue_hitbox(obstacle.as_tuple(), (255, 0, 0))
