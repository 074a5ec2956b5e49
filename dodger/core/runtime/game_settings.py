"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Logical surface and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "Dodger"

    WINDOW_SIZES = {
        "small": (800, 600),
        "medium": (1200, 900),
        "large": (1600, 1200),
    }
    DEFAULT_WINDOW_SIZE: str = "small"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    NAME: str = None  # pygame default font
    HUD_SIZE: int = 24
    BANNER_SIZE: int = 48
    PROMPT_SIZE: int = 24


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Player rectangle configuration."""
    WIDTH: float = 50.0
    HEIGHT: float = 50.0
    SPEED: float = 5.0          # pixels per frame
    BOTTOM_OFFSET: float = 50.0  # distance from the surface bottom to the player top
    COLOR: tuple = (0, 255, 0)


# ===========================================================
# Obstacle Defaults
# ===========================================================

class Obstacles:
    """Falling obstacle configuration."""
    MIN_WIDTH: float = 20.0
    MAX_WIDTH: float = 70.0
    HEIGHT: float = 20.0
    MIN_SPEED: float = 2.0
    MAX_SPEED: float = 4.0
    SPAWN_Y: float = -20.0
    SATURATION: float = 0.5
    LIGHTNESS: float = 0.5


# ===========================================================
# Spawning
# ===========================================================

class Spawn:
    """Per-frame obstacle spawn policy."""
    CHANCE: float = 0.02


# ===========================================================
# Colors
# ===========================================================

class Colors:
    BACKGROUND: tuple = (0, 0, 0)
    TEXT: tuple = (255, 255, 255)
    LETTERBOX: tuple = (0, 0, 0)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    OBSTACLES: int = 100
    PLAYER: int = 200
    UI: int = 600
    OVERLAY: int = 700


# ===========================================================
# Persistence
# ===========================================================

class Storage:
    SCORES_FILE: str = "dodger_scores.json"
    HIGH_SCORE_KEY: str = "highScore"


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    FRAME_TIME_WARNING: float = 16.67
    HITBOX_VISIBLE: bool = False
