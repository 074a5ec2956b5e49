"""
__main__.py
-----------
Launcher for the dodge game.

Usage:
    python -m dodger                         # Defaults, scores in ./dodger_scores.json
    python -m dodger --config dodger.yaml    # Override settings from a config file
    python -m dodger --scores /tmp/s.json    # Custom high score file
    python -m dodger --no-save               # Keep the high score in memory only
    python -m dodger --seed 42               # Reproducible obstacle spawning
    python -m dodger --window-size large     # Start in the 1600x1200 window
"""

import argparse
import sys

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.game_config import (
    DEFAULT_CONFIG, ConfigError, SimulationConfig, config_section,
)
from dodger.core.runtime.game_loop import GameLoop
from dodger.core.runtime.game_settings import Display, Storage
from dodger.core.services.config_manager import load_config
from dodger.core.services.score_store import JsonFileStore, MemoryStore


def build_parser():
    parser = argparse.ArgumentParser(description="Dodge the falling blocks")
    parser.add_argument("--config", default=None,
                        help="JSON or YAML config file with overrides")
    parser.add_argument("--scores", default=None,
                        help="High score file (default from config storage.scores_file)")
    parser.add_argument("--no-save", action="store_true",
                        help="Do not persist the high score")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle spawning")
    parser.add_argument("--window-size", choices=sorted(Display.WINDOW_SIZES),
                        default=Display.DEFAULT_WINDOW_SIZE,
                        help="Initial window size preset")
    return parser


def scores_file_from(settings):
    """Scores file named in the storage section, or the default one."""
    path = config_section(settings, "storage").get("scores_file")
    if path is None:
        return Storage.SCORES_FILE
    if not isinstance(path, str) or not path:
        raise ConfigError(f"scores_file must be a non-empty string, got {path!r}")
    return path


def main(argv=None):
    """Main entry point. Returns 2 when the configuration cannot be loaded or is invalid."""
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            settings = load_config(args.config, DEFAULT_CONFIG, strict=True)
        else:
            settings = load_config("dodger.yaml", DEFAULT_CONFIG)
    except FileNotFoundError as e:
        DebugLogger.fail(str(e))
        return 2

    try:
        config = SimulationConfig.from_dict(settings)
        scores_file = args.scores or scores_file_from(settings)
    except ConfigError as e:
        DebugLogger.fail(f"Invalid configuration: {e}")
        return 2

    if args.no_save:
        store = MemoryStore()
    else:
        store = JsonFileStore(scores_file)

    GameLoop(store, config=config, seed=args.seed, window_size=args.window_size).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
