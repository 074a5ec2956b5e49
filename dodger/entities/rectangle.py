"""
rectangle.py
------------
Float axis-aligned rectangle shared by the player and the obstacles.

Coordinate System
-----------------
- (x, y) is the top-left corner in logical surface pixels
- y grows downward
- pygame.Rect is not used for entity state because it truncates to ints
"""

from dodger.systems.collision import rects_overlap


def clamp(value, low, high):
    """Constrain value to [low, high] by saturating at the nearer bound."""
    return max(low, min(value, high))


class Rectangle:
    """
    Axis-aligned rectangle with a display color.

    Color is cosmetic and never read by simulation logic.
    """

    __slots__ = ('x', 'y', 'width', 'height', 'color')

    def __init__(self, x, y, width, height, color=(255, 255, 255)):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.color = color

    # ===========================================================
    # Edges
    # ===========================================================

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    # ===========================================================
    # Queries
    # ===========================================================

    def overlaps(self, other) -> bool:
        """Strict AABB overlap; shared edges do not count."""
        return rects_overlap(self, other)

    def as_tuple(self):
        """Return (x, y, width, height)."""
        return self.x, self.y, self.width, self.height

    def draw(self, draw_manager, layer=0):
        """Queue this rectangle as a filled shape."""
        draw_manager.fill_rect(self.x, self.y, self.width, self.height, self.color, layer=layer)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(x={self.x:.1f}, y={self.y:.1f}, "
            f"w={self.width:.1f}, h={self.height:.1f})"
        )
