"""
game_config.py
--------------
Validated simulation parameters built from the constant classes in
game_settings.py, optionally overridden by a loaded config dict.

Config file layout (JSON or YAML):

    display:   {width, height}
    player:    {width, height, speed, bottom_offset, color}
    obstacles: {min_width, max_width, height, min_speed, max_speed, spawn_y}
    spawn:     {chance}
    storage:   {scores_file, high_score_key}
"""

import math
from dataclasses import dataclass, fields
from numbers import Real

from dodger.core.runtime.game_settings import (
    Display, Player, Obstacles, Spawn, Storage,
)


class ConfigError(ValueError):
    """Raised when configuration values cannot produce a playable game."""


def config_section(data: dict, name: str) -> dict:
    """
    Return one section of a loaded config dict.

    An empty section (`player:` with nothing under it) loads as None and
    is treated like a missing one.
    """
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"config section '{name}' must be a mapping, got {section!r}")
    return section


DEFAULT_CONFIG = {
    "display": {
        "width": Display.WIDTH,
        "height": Display.HEIGHT,
    },
    "player": {
        "width": Player.WIDTH,
        "height": Player.HEIGHT,
        "speed": Player.SPEED,
        "bottom_offset": Player.BOTTOM_OFFSET,
        "color": list(Player.COLOR),
    },
    "obstacles": {
        "min_width": Obstacles.MIN_WIDTH,
        "max_width": Obstacles.MAX_WIDTH,
        "height": Obstacles.HEIGHT,
        "min_speed": Obstacles.MIN_SPEED,
        "max_speed": Obstacles.MAX_SPEED,
        "spawn_y": Obstacles.SPAWN_Y,
    },
    "spawn": {
        "chance": Spawn.CHANCE,
    },
    "storage": {
        "scores_file": Storage.SCORES_FILE,
        "high_score_key": Storage.HIGH_SCORE_KEY,
    },
}


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable parameters for one DodgeSimulation instance."""
    surface_width: float = Display.WIDTH
    surface_height: float = Display.HEIGHT

    player_width: float = Player.WIDTH
    player_height: float = Player.HEIGHT
    player_speed: float = Player.SPEED
    player_bottom_offset: float = Player.BOTTOM_OFFSET
    player_color: tuple = Player.COLOR

    obstacle_min_width: float = Obstacles.MIN_WIDTH
    obstacle_max_width: float = Obstacles.MAX_WIDTH
    obstacle_height: float = Obstacles.HEIGHT
    obstacle_min_speed: float = Obstacles.MIN_SPEED
    obstacle_max_speed: float = Obstacles.MAX_SPEED
    obstacle_spawn_y: float = Obstacles.SPAWN_Y

    spawn_chance: float = Spawn.CHANCE
    high_score_key: str = Storage.HIGH_SCORE_KEY

    def __post_init__(self):
        self._check_types()
        self._validate()

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """
        Build a config from a nested config dict (see module docstring).

        Missing or empty sections and keys keep their defaults.
        """
        display = config_section(data, "display")
        player = config_section(data, "player")
        obstacles = config_section(data, "obstacles")
        spawn = config_section(data, "spawn")
        storage = config_section(data, "storage")

        mapping = {
            "surface_width": display.get("width"),
            "surface_height": display.get("height"),
            "player_width": player.get("width"),
            "player_height": player.get("height"),
            "player_speed": player.get("speed"),
            "player_bottom_offset": player.get("bottom_offset"),
            "player_color": player.get("color"),
            "obstacle_min_width": obstacles.get("min_width"),
            "obstacle_max_width": obstacles.get("max_width"),
            "obstacle_height": obstacles.get("height"),
            "obstacle_min_speed": obstacles.get("min_speed"),
            "obstacle_max_speed": obstacles.get("max_speed"),
            "obstacle_spawn_y": obstacles.get("spawn_y"),
            "spawn_chance": spawn.get("chance"),
            "high_score_key": storage.get("high_score_key"),
        }
        kwargs = {key: value for key, value in mapping.items() if value is not None}

        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in kwargs.items() if k in known})

    # ===========================================================
    # Validation
    # ===========================================================

    def _check_types(self):
        """Reject values of the wrong type before any range checks compare them."""
        for f in fields(self):
            if f.name in ("player_color", "high_score_key"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise ConfigError(f"{f.name} must be a finite number, got {value!r}")

        color = self.player_color
        if (not isinstance(color, (list, tuple)) or len(color) != 3
                or not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
                           for c in color)):
            raise ConfigError(f"player_color must be three integers in [0, 255], got {color!r}")
        # Frozen dataclass: lists from JSON/YAML are stored as tuples
        object.__setattr__(self, "player_color", tuple(color))

        if not isinstance(self.high_score_key, str) or not self.high_score_key:
            raise ConfigError(f"high_score_key must be a non-empty string, got {self.high_score_key!r}")

    def _validate(self):
        positive = (
            "surface_width", "surface_height",
            "player_width", "player_height",
            "obstacle_min_width", "obstacle_height",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

        if self.player_speed < 0:
            raise ConfigError(f"player_speed must not be negative, got {self.player_speed}")
        if self.player_width > self.surface_width:
            raise ConfigError("player_width exceeds surface_width")

        if self.obstacle_min_width > self.obstacle_max_width:
            raise ConfigError(
                f"obstacle width range is inverted: "
                f"[{self.obstacle_min_width}, {self.obstacle_max_width}]"
            )
        if self.obstacle_max_width > self.surface_width:
            raise ConfigError("obstacle_max_width exceeds surface_width")

        if self.obstacle_min_speed <= 0 or self.obstacle_min_speed > self.obstacle_max_speed:
            raise ConfigError(
                f"obstacle speed range must be positive and ordered: "
                f"[{self.obstacle_min_speed}, {self.obstacle_max_speed}]"
            )
        if self.player_bottom_offset < self.player_height:
            raise ConfigError("player_bottom_offset is smaller than player_height")
        if self.player_bottom_offset > self.surface_height:
            raise ConfigError("player_bottom_offset exceeds surface_height")
        if self.obstacle_spawn_y + self.obstacle_height > 0:
            raise ConfigError("obstacles must spawn fully above the visible surface")

        if not 0.0 <= self.spawn_chance <= 1.0:
            raise ConfigError(f"spawn_chance must be within [0, 1], got {self.spawn_chance}")

    # ===========================================================
    # Derived Values
    # ===========================================================

    @property
    def player_start_x(self) -> float:
        """Horizontal center for the player rectangle."""
        return (self.surface_width - self.player_width) / 2

    @property
    def player_y(self) -> float:
        return self.surface_height - self.player_bottom_offset
