"""
test_draw_manager.py
--------------------
Tests for the layered draw queue and its pygame rendering.
"""

import pygame
import pytest

from dodger.graphics.draw_manager import DrawManager


@pytest.fixture
def draw_manager():
    return DrawManager()


@pytest.fixture
def surface():
    return pygame.Surface((100, 100))


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_clear_sets_background_and_empties_queue(draw_manager, surface):
    draw_manager.fill_rect(0, 0, 10, 10, (255, 0, 0))
    draw_manager.clear((0, 0, 255))

    assert draw_manager.queued() == []
    draw_manager.render(surface)
    assert pixel(surface, 5, 5) == (0, 0, 255)


def test_filled_rect_rendered(draw_manager, surface):
    draw_manager.clear((0, 0, 0))
    draw_manager.fill_rect(10.4, 10.6, 20, 20, (255, 0, 0))
    draw_manager.render(surface)

    assert pixel(surface, 15, 15) == (255, 0, 0)
    assert pixel(surface, 50, 50) == (0, 0, 0)


def test_higher_layer_drawn_last(draw_manager, surface):
    draw_manager.clear((0, 0, 0))
    draw_manager.fill_rect(0, 0, 50, 50, (0, 255, 0), layer=10)
    draw_manager.fill_rect(0, 0, 50, 50, (255, 0, 0), layer=1)
    draw_manager.render(surface)

    assert pixel(surface, 25, 25) == (0, 255, 0)


def test_queue_retained_until_next_clear(draw_manager, surface):
    draw_manager.clear((0, 0, 0))
    draw_manager.fill_rect(0, 0, 10, 10, (255, 255, 255))
    draw_manager.render(surface)
    surface.fill((9, 9, 9))
    draw_manager.render(surface)

    assert pixel(surface, 5, 5) == (255, 255, 255)


def test_text_queue_and_render(draw_manager, surface):
    draw_manager.clear((0, 0, 0))
    draw_manager.draw_text("Hi", 50, 60, 24, (255, 255, 255))
    draw_manager.draw_text("Lo", 5, 90, 16, (255, 255, 255), align="left")

    texts = draw_manager.queued("text")
    assert [t[0] for t in texts] == ["Hi", "Lo"]
    assert texts[0][5] == "center"
    assert texts[1][5] == "left"

    draw_manager.render(surface)
    assert set(draw_manager.fonts) == {24, 16}


def test_unknown_alignment_falls_back_to_center(draw_manager):
    draw_manager.draw_text("x", 0, 0, 12, align="right")
    assert draw_manager.queued("text")[0][5] == "center"
