"""
Runtime configuration exports.

Provides game-wide constants, the validated simulation config and frame
scheduling. The pygame host loop is imported from game_loop directly.
"""

from dodger.core.runtime.game_settings import (
    Display,
    Fonts,
    Player,
    Obstacles,
    Spawn,
    Colors,
    Layers,
    Storage,
    Debug,
)
from dodger.core.runtime.game_config import SimulationConfig, ConfigError
from dodger.core.runtime.frame_scheduler import FrameScheduler, ManualFrameScheduler

__all__ = [
    # Constants
    'Display',
    'Fonts',
    'Player',
    'Obstacles',
    'Spawn',
    'Colors',
    'Layers',
    'Storage',
    'Debug',
    # Config
    'SimulationConfig',
    'ConfigError',
    # Scheduling
    'FrameScheduler',
    'ManualFrameScheduler',
]
