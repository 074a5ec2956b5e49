"""
draw_manager.py
---------------
Layered draw queue implementing the game's draw surface contract.

Responsibilities:
- clear(color): start a new frame with a background color
- fill_rect(x, y, w, h, color): queue a filled rectangle
- draw_text(text, x, y, size, color, align): queue a text line
- Render queued shapes and text to a pygame surface, lowest layer first

The queue is retained until the next clear(), like a canvas keeps its last
frame. The host may render it every loop iteration even when the simulation
has stopped producing frames.
"""

import pygame

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.game_settings import Colors, Fonts


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Initialize draw manager with empty queues."""
        self.background = Colors.BACKGROUND

        # Layer queues: {layer: [(kind, payload), ...]}
        self.layers = {}
        self._layer_keys_cache = []
        self._layers_dirty = False

        # Fonts keyed by pixel size
        self.fonts = {}

        # Debug overlays
        self.debug_hitboxes = []

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Draw Surface Contract
    # ===========================================================

    def clear(self, color=None):
        """Discard queued items and set the background for the next render."""
        if color is not None:
            self.background = tuple(color)
        for layer_items in self.layers.values():
            layer_items.clear()
        self.debug_hitboxes.clear()

    def fill_rect(self, x, y, width, height, color, layer=0):
        """Queue a filled axis-aligned rectangle in logical coordinates."""
        self._queue(layer, ("rect", (x, y, width, height, tuple(color))))

    def draw_text(self, text, x, y, size, color=Colors.TEXT, align="center", layer=0):
        """
        Queue a line of text.

        Args:
            text: String to draw
            x: Horizontal anchor (center for align="center", left edge for "left")
            y: Baseline position
            size: Font size in pixels
            color: RGB tuple
            align: "center" or "left"
            layer: Render layer
        """
        if align not in ("center", "left"):
            DebugLogger.warn(f"Unknown text alignment '{align}', using center", category="render")
            align = "center"
        self._queue(layer, ("text", (str(text), x, y, int(size), tuple(color), align)))

    def queue_hitbox(self, rect, color=(255, 255, 0), width=1):
        """Queue debug hitbox outline."""
        self.debug_hitboxes.append((rect, color, width))

    def queued(self, kind=None):
        """Return queued payloads in render order, optionally filtered by kind."""
        items = []
        for layer in sorted(self.layers):
            for item_kind, payload in self.layers[layer]:
                if kind is None or item_kind == kind:
                    items.append(payload)
        return items

    def _queue(self, layer, item):
        if layer not in self.layers:
            self.layers[layer] = []
            self._layers_dirty = True
        self.layers[layer].append(item)

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Render all queued items, then debug hitboxes, to the logical game surface."""
        target_surface.fill(self.background)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self.layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for kind, payload in self.layers[layer]:
                if kind == "rect":
                    self._render_rect(target_surface, *payload)
                else:
                    self._render_text(target_surface, *payload)

        for rect, color, width in self.debug_hitboxes:
            pygame.draw.rect(target_surface, color, self._to_pixel_rect(*rect), width)

    def _render_rect(self, surface, x, y, width, height, color):
        pygame.draw.rect(surface, color, self._to_pixel_rect(x, y, width, height))

    def _render_text(self, surface, text, x, y, size, color, align):
        image = self.get_font(size).render(text, True, color)
        rect = image.get_rect()
        if align == "left":
            rect.left = round(x)
        else:
            rect.centerx = round(x)
        rect.bottom = round(y)
        surface.blit(image, rect)

    @staticmethod
    def _to_pixel_rect(x, y, width, height):
        return pygame.Rect(round(x), round(y), round(width), round(height))

    # ===========================================================
    # Fonts
    # ===========================================================

    def get_font(self, size):
        """Return a cached font for the given pixel size."""
        font = self.fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(Fonts.NAME, size)
            self.fonts[size] = font
        return font
