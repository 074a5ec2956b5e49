"""
test_rectangle.py
-----------------
Tests for the float rectangle, the clamp helper and the player entity.
"""

import pytest

from dodger.entities.player import Player
from dodger.entities.rectangle import Rectangle, clamp


# ===========================================================
# Clamp
# ===========================================================

@pytest.mark.parametrize("value, expected", [
    (-10.0, 0.0),
    (0.0, 0.0),
    (375.0, 375.0),
    (750.0, 750.0),
    (751.0, 750.0),
    (10_000.0, 750.0),
])
def test_clamp_saturates_at_nearer_bound(value, expected):
    assert clamp(value, 0.0, 750.0) == expected


@pytest.mark.parametrize("start", [0.0, 100.0, 375.0, 749.0, 750.0])
@pytest.mark.parametrize("delta", [-1000.0, -5.0, -0.5, 0.0, 0.5, 5.0, 1000.0])
def test_player_stays_within_surface(start, delta):
    player = Player(start, 550, 50, 50, speed=5, surface_width=800)
    player.move_by(delta)
    assert 0.0 <= player.x <= 750.0


# ===========================================================
# Player Movement
# ===========================================================

def test_held_left_moves_by_speed_then_clamps_at_zero():
    player = Player(375, 550, 50, 50, speed=5, surface_width=800)

    for _ in range(5):
        player.move_held(left=True, right=False)
    assert player.x == 350.0

    for _ in range(80):
        player.move_held(left=True, right=False)
        assert player.x >= 0.0
    assert player.x == 0.0


def test_held_right_clamps_at_right_edge():
    player = Player(740, 550, 50, 50, speed=5, surface_width=800)
    for _ in range(3):
        player.move_held(left=False, right=True)
    assert player.x == 750.0


def test_opposing_intents_cancel():
    player = Player(375, 550, 50, 50, speed=5, surface_width=800)
    player.move_held(left=True, right=True)
    assert player.x == 375.0


def test_construction_clamps_out_of_range_position():
    player = Player(900, 550, 50, 50, speed=5, surface_width=800)
    assert player.x == 750.0


def test_move_to_clamps():
    player = Player(100, 550, 50, 50, speed=5, surface_width=800)
    player.move_to(-30)
    assert player.x == 0.0


# ===========================================================
# Rectangle
# ===========================================================

def test_edges():
    rect = Rectangle(10, 20, 30, 40)
    assert rect.right == 40.0
    assert rect.bottom == 60.0
    assert rect.as_tuple() == (10.0, 20.0, 30.0, 40.0)


def test_overlap_method_matches_scenario():
    player = Rectangle(100, 550, 50, 50)
    assert player.overlaps(Rectangle(120, 560, 30, 20))
    assert not player.overlaps(Rectangle(200, 560, 30, 20))


def test_draw_queues_filled_rect(mock_draw_manager):
    rect = Rectangle(1, 2, 3, 4, color=(9, 8, 7))
    rect.draw(mock_draw_manager, layer=5)
    mock_draw_manager.fill_rect.assert_called_once_with(1.0, 2.0, 3.0, 4.0, (9, 8, 7), layer=5)
