"""
dodger/entities/__init__.py
---------------------------
Entity module exports.

Exports:
    Rectangle - Float axis-aligned rectangle with overlap test
    Player    - Horizontally clamped player rectangle
    Obstacle  - Falling rectangle with a fall speed
"""

from dodger.entities.rectangle import Rectangle, clamp
from dodger.entities.player import Player
from dodger.entities.obstacle import Obstacle

__all__ = [
    'Rectangle',
    'clamp',
    'Player',
    'Obstacle',
]
