"""
display_manager.py
------------------
Window management and scaling for a fixed logical resolution.

Responsibilities:
- Window creation, resizing and fullscreen toggling
- Aspect ratio preservation with letterboxing
- Reporting the displayed surface width for pointer scaling
- Scaling the logical game surface onto the window
"""

import pygame

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.game_settings import Colors, Display


class DisplayManager:
    """
    Owns the logical game surface and the window it is scaled into.

    Simulation and rendering work in logical pixels only; the scale factor
    and letterbox offsets only affect how the surface is blitted.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, game_width=Display.WIDTH, game_height=Display.HEIGHT,
                 window_size=Display.DEFAULT_WINDOW_SIZE):
        """
        Initialize display system.

        Args:
            game_width: Logical game resolution width
            game_height: Logical game resolution height
            window_size: Initial window preset ("small", "medium", "large")
        """
        DebugLogger.init_entry("DisplayManager")

        self.game_width = game_width
        self.game_height = game_height
        self.game_surface = pygame.Surface((game_width, game_height))

        self.window = None
        self.window_size_preset = window_size
        self.is_fullscreen = False

        # Scaling state (calculated in _calculate_scale)
        self.scale = 1.0
        self.offset_x = 0
        self.offset_y = 0
        self.scaled_size = (game_width, game_height)

        self._create_window()

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        """Toggle between windowed and fullscreen modes."""
        self._create_window(fullscreen=not self.is_fullscreen)
        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen → {state}", category="display")

    def handle_resize(self, width, height):
        """Adopt a new window size after the user resized the window."""
        if self.is_fullscreen:
            return
        self.window = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self._calculate_scale()
        DebugLogger.state(f"Window resized to {width}x{height}", category="display")

    # ===========================================================
    # Rendering Pipeline
    # ===========================================================

    def get_game_surface(self) -> pygame.Surface:
        """Get the logical game surface."""
        return self.game_surface

    def render(self):
        """Scale the game surface into the letterboxed window area and flip."""
        self.window.fill(Colors.LETTERBOX)
        scaled = pygame.transform.scale(self.game_surface, self.scaled_size)
        self.window.blit(scaled, (self.offset_x, self.offset_y))
        pygame.display.flip()

    # ===========================================================
    # Window Queries
    # ===========================================================

    @property
    def displayed_width(self) -> int:
        """Width in window pixels that the logical surface currently occupies."""
        return self.scaled_size[0]

    def get_window_size(self) -> tuple:
        """Get current physical window size in pixels."""
        return self.window.get_size()

    # ===========================================================
    # Internal: Window Creation
    # ===========================================================

    def _create_window(self, fullscreen: bool = False):
        """Create pygame window with appropriate flags."""
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.is_fullscreen = True
            mode = "Fullscreen"
        else:
            window_w, window_h = Display.WINDOW_SIZES.get(
                self.window_size_preset,
                (self.game_width, self.game_height)
            )
            self.window = pygame.display.set_mode((window_w, window_h), pygame.RESIZABLE)
            self.is_fullscreen = False
            mode = f"Windowed ({window_w}x{window_h})"

        self._calculate_scale()
        DebugLogger.init_sub(f"Display Mode: {mode}", level=1)

    def _calculate_scale(self):
        """Calculate scale factor and letterbox offsets for aspect ratio preservation."""
        window_width, window_height = self.window.get_size()

        self.scale = min(window_width / self.game_width, window_height / self.game_height)

        scaled_width = int(self.game_width * self.scale)
        scaled_height = int(self.game_height * self.scale)
        self.scaled_size = (scaled_width, scaled_height)

        # Center in window (letterbox)
        self.offset_x = (window_width - scaled_width) // 2
        self.offset_y = (window_height - scaled_height) // 2

        DebugLogger.trace(
            f"Scale={self.scale:.3f}, Offset=({self.offset_x},{self.offset_y})",
            category="display"
        )
