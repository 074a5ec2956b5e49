"""
hud.py
------
Score readout and game-over banner.
"""

from dodger.core.runtime.game_settings import Colors, Fonts, Layers


GAME_OVER_TEXT = "Game Over!"
RESTART_PROMPT = "Press SPACE to restart"

HUD_MARGIN = 10
PROMPT_OFFSET = 40


class HudRenderer:
    """Queues HUD text onto a DrawManager."""

    def __init__(self, surface_width, surface_height):
        self.surface_width = surface_width
        self.surface_height = surface_height

    def draw_scores(self, draw_manager, score, high_score):
        line_height = Fonts.HUD_SIZE
        draw_manager.draw_text(
            f"Score: {score}", HUD_MARGIN, HUD_MARGIN + line_height,
            Fonts.HUD_SIZE, Colors.TEXT, align="left", layer=Layers.UI,
        )
        draw_manager.draw_text(
            f"High Score: {high_score}", HUD_MARGIN, HUD_MARGIN + line_height * 2,
            Fonts.HUD_SIZE, Colors.TEXT, align="left", layer=Layers.UI,
        )

    def draw_game_over(self, draw_manager):
        center_x = self.surface_width / 2
        center_y = self.surface_height / 2
        draw_manager.draw_text(
            GAME_OVER_TEXT, center_x, center_y,
            Fonts.BANNER_SIZE, Colors.TEXT, layer=Layers.OVERLAY,
        )
        draw_manager.draw_text(
            RESTART_PROMPT, center_x, center_y + PROMPT_OFFSET,
            Fonts.PROMPT_SIZE, Colors.TEXT, layer=Layers.OVERLAY,
        )
