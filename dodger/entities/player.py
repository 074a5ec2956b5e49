"""
player.py
---------
Player-controlled rectangle.

Responsibilities
----------------
- Hold position, size and constant per-frame speed.
- Apply held-direction movement and pointer offsets.
- Keep x clamped to [0, surface_width - width] after every move.
"""

from dodger.core.runtime.game_settings import Layers
from dodger.entities.rectangle import Rectangle, clamp


class Player(Rectangle):
    """Horizontal-only player. Created once, repositioned on restart."""

    __slots__ = ('speed', 'surface_width')

    def __init__(self, x, y, width, height, speed, surface_width, color=(0, 255, 0)):
        super().__init__(x, y, width, height, color)
        self.speed = float(speed)
        self.surface_width = float(surface_width)
        self.clamp_to_surface()

    # ===========================================================
    # Movement
    # ===========================================================

    def move_by(self, dx):
        """Offset x by dx and clamp."""
        self.x += dx
        self.clamp_to_surface()

    def move_held(self, left: bool, right: bool):
        """Apply one frame of held-direction movement. Opposing intents cancel."""
        direction = int(right) - int(left)
        if direction:
            self.move_by(direction * self.speed)

    def move_to(self, x):
        self.x = float(x)
        self.clamp_to_surface()

    def clamp_to_surface(self):
        self.x = clamp(self.x, 0.0, self.max_x)

    @property
    def max_x(self):
        return self.surface_width - self.width

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager, layer=Layers.PLAYER):
        super().draw(draw_manager, layer)
