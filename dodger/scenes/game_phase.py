"""
game_phase.py
-------------
Coarse game state.
"""

from enum import Enum, auto


class GamePhase(Enum):
    """RUNNING advances every frame; ENDED is frozen until restart."""
    RUNNING = auto()
    ENDED = auto()
