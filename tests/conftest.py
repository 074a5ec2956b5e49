"""
conftest.py
-----------
Shared pytest configuration and fixtures for Dodger tests.

Contains:
- Headless SDL setup so pygame runs without a window or audio device
- Common fixtures: scheduler, store, seeded RNG, simulation factory
- Shared mock utilities and test helpers
"""

import os
import random
import sys
from unittest.mock import MagicMock

import pytest

# Headless pygame, set before anything imports it
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Project root on sys.path so tests run without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dodger.core.debug.debug_logger import LoggerConfig  # noqa: E402
from dodger.core.runtime.frame_scheduler import ManualFrameScheduler  # noqa: E402
from dodger.core.runtime.game_config import SimulationConfig  # noqa: E402
from dodger.core.services.score_store import MemoryStore  # noqa: E402
from dodger.entities.obstacle import Obstacle  # noqa: E402
from dodger.scenes.game_scene import DodgeSimulation  # noqa: E402


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Silence console logging during tests."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def scheduler():
    """Frame scheduler driven by tick()."""
    return ManualFrameScheduler()


@pytest.fixture
def store():
    """Empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def rng():
    """Seeded random source for reproducible spawns."""
    return random.Random(1234)


@pytest.fixture
def no_spawn_config():
    """Default geometry with spawning disabled."""
    return SimulationConfig(spawn_chance=0.0)


@pytest.fixture
def make_simulation(scheduler, store, no_spawn_config, rng):
    """Factory building a started DodgeSimulation with injectable overrides."""

    def _make(**overrides):
        kwargs = {
            "store": store,
            "config": no_spawn_config,
            "rng": rng,
        }
        kwargs.update(overrides)
        simulation = DodgeSimulation(scheduler, **kwargs)
        simulation.start()
        return simulation

    return _make


# ===========================================================
# Mock Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the draw surface methods."""
    draw_manager = MagicMock()
    draw_manager.clear = MagicMock()
    draw_manager.fill_rect = MagicMock()
    draw_manager.draw_text = MagicMock()
    return draw_manager


@pytest.fixture
def mock_display_manager():
    """Mock DisplayManager with an 800x600 window showing the surface at half size."""
    display_manager = MagicMock()
    display_manager.get_window_size.return_value = (800, 600)
    display_manager.displayed_width = 400
    return display_manager


# ===========================================================
# Test Utilities
# ===========================================================

@pytest.fixture
def make_obstacle():
    """Factory for obstacles with explicit geometry."""

    def _make(x=0, y=0, width=30, height=20, fall_speed=5):
        return Obstacle(x, y, width, height, fall_speed)

    return _make


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything not marked integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
