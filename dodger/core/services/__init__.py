"""
Core services exports.

Provides configuration loading, input, display and high score storage.
"""

from dodger.core.services.config_manager import load_config
from dodger.core.services.score_store import (
    KeyValueStore,
    JsonFileStore,
    MemoryStore,
    HighScoreTracker,
)
from dodger.core.services.input_manager import InputManager
from dodger.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    # Storage
    'KeyValueStore',
    'JsonFileStore',
    'MemoryStore',
    'HighScoreTracker',
    # Services
    'InputManager',
    'DisplayManager',
]
