"""
Scene module exports.
"""

from dodger.scenes.game_phase import GamePhase
from dodger.scenes.game_scene import DodgeSimulation

__all__ = [
    'GamePhase',
    'DodgeSimulation',
]
