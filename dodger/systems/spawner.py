"""
spawner.py
----------
Probabilistic obstacle spawner.

Each frame has one independent chance of producing a single obstacle. All
random draws go through the injected random.Random so a seeded generator
reproduces spawn timing and obstacle attributes exactly.
"""

import colorsys
import random

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.game_settings import Obstacles
from dodger.entities.obstacle import Obstacle


class ObstacleSpawner:
    """Creates obstacles from a SimulationConfig and a random source."""

    def __init__(self, config, rng=None):
        """
        Args:
            config: SimulationConfig providing ranges and spawn chance
            rng: random.Random instance (a fresh unseeded one if None)
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def maybe_spawn(self):
        """Roll the per-frame spawn chance. Returns a new Obstacle or None."""
        if self.rng.random() < self.config.spawn_chance:
            return self.spawn()
        return None

    def spawn(self) -> Obstacle:
        """Create one obstacle fully above the visible surface."""
        cfg = self.config

        width = self.rng.uniform(cfg.obstacle_min_width, cfg.obstacle_max_width)
        x = self.rng.uniform(0.0, cfg.surface_width - width)
        fall_speed = self.rng.uniform(cfg.obstacle_min_speed, cfg.obstacle_max_speed)

        obstacle = Obstacle(
            x, cfg.obstacle_spawn_y, width, cfg.obstacle_height,
            fall_speed, color=self.random_color(),
        )
        DebugLogger.trace(f"Spawned {obstacle!r} speed={fall_speed:.2f}", category="entity_spawn")
        return obstacle

    def random_color(self):
        """Random hue at fixed saturation and lightness, as an RGB tuple."""
        hue = self.rng.random()
        r, g, b = colorsys.hls_to_rgb(hue, Obstacles.LIGHTNESS, Obstacles.SATURATION)
        return int(r * 255), int(g * 255), int(b * 255)
