"""
test_game_loop.py
-----------------
Headless tests for the pygame host loop: event routing, system actions
and the frame/render cycle.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from dodger.core.runtime.game_config import SimulationConfig
from dodger.core.runtime.game_loop import GameLoop
from dodger.core.runtime.game_settings import Debug
from dodger.core.services.score_store import MemoryStore


@pytest.fixture
def game_loop():
    loop = GameLoop(MemoryStore(), config=SimulationConfig(spawn_chance=0.0), seed=1)
    yield loop
    pygame.quit()


def feed_events(monkeypatch, batches):
    """Make pygame.event.get return each batch in turn, then QUIT forever."""
    batches = list(batches)

    def fake_get():
        if batches:
            return batches.pop(0)
        return [pygame.event.Event(pygame.QUIT)]

    monkeypatch.setattr(pygame.event, "get", fake_get)


# ===========================================================
# Main Loop
# ===========================================================

def test_quit_event_stops_before_any_frame(game_loop, monkeypatch):
    feed_events(monkeypatch, [])

    game_loop.run()

    assert game_loop.running is False
    assert game_loop.scheduler.frames_run == 0
    assert game_loop.simulation.score == 0


def test_frames_advance_until_quit(game_loop, monkeypatch):
    feed_events(monkeypatch, [[], [], []])

    game_loop.run()

    assert game_loop.scheduler.frames_run == 3
    assert game_loop.simulation.running
    assert game_loop.scheduler.pending()


def test_each_iteration_renders_to_display(game_loop, monkeypatch):
    feed_events(monkeypatch, [[], []])
    game_loop.display = MagicMock(wraps=game_loop.display)

    game_loop.run()

    assert game_loop.display.render.call_count == 2


# ===========================================================
# Event Routing
# ===========================================================

def test_escape_key_quits(game_loop, monkeypatch):
    feed_events(monkeypatch, [[pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0)]])

    game_loop._handle_events()

    assert game_loop.running is False


def test_resize_event_goes_to_display(game_loop, monkeypatch):
    game_loop.display = MagicMock()
    resize = pygame.event.Event(pygame.VIDEORESIZE, w=400, h=300, size=(400, 300))
    feed_events(monkeypatch, [[resize]])

    game_loop._handle_events()

    game_loop.display.handle_resize.assert_called_once_with(400, 300)
    assert game_loop.running is True


def test_gameplay_keys_reach_simulation(game_loop, monkeypatch):
    feed_events(monkeypatch, [[pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT, mod=0)]])

    game_loop._handle_events()

    assert game_loop.input_manager.held_directions() == (True, False)


# ===========================================================
# System Actions
# ===========================================================

def test_quit_action_stops_loop(game_loop):
    game_loop._handle_system_action("quit")
    assert game_loop.running is False


def test_toggle_fullscreen_action(game_loop):
    game_loop.display = MagicMock()

    game_loop._handle_system_action("toggle_fullscreen")

    game_loop.display.toggle_fullscreen.assert_called_once_with()
    assert game_loop.running is True


def test_toggle_debug_flips_hitboxes_and_redraws(game_loop, monkeypatch):
    monkeypatch.setattr(Debug, "HITBOX_VISIBLE", False)
    game_loop.simulation.render = MagicMock()

    game_loop._handle_system_action("toggle_debug")

    assert Debug.HITBOX_VISIBLE is True
    game_loop.simulation.render.assert_called_once_with()


@pytest.mark.parametrize("action", [None, "confirm", "pointer_release"])
def test_non_system_actions_are_ignored(game_loop, action):
    game_loop.display = MagicMock()

    game_loop._handle_system_action(action)

    assert game_loop.running is True
    game_loop.display.toggle_fullscreen.assert_not_called()


# ===========================================================
# Window Presets
# ===========================================================

def test_window_size_preset_reaches_display():
    loop = GameLoop(MemoryStore(), window_size="medium")
    try:
        assert loop.display.get_window_size() == (1200, 900)
        assert loop.display.displayed_width == 1200
    finally:
        pygame.quit()
