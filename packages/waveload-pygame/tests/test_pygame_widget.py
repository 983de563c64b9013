"""Tests for the pygame wave widget."""
from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
from waveload import WaveConfig, WaveLoader
from waveload_pygame import WaveWidget


def make_widget(**overrides) -> WaveWidget:
    config = WaveConfig(wave_length=3, visible_length=6, color=(255, 0, 0, 255), **overrides)
    return WaveWidget.from_config(config)


def test_surface_matches_loader_size():
    widget = make_widget()
    assert widget.surface.get_size() == widget.loader.size


def test_render_paints_and_clears_dirty():
    widget = make_widget()
    assert widget.dirty
    surface = widget.render()
    assert not widget.dirty
    width, height = surface.get_size()
    painted = any(
        surface.get_at((x, y)).a > 0 for x in range(width) for y in range(height)
    )
    assert painted


def test_tick_marks_dirty():
    widget = make_widget()
    widget.render()
    widget.loader.tick()
    assert widget.dirty


def test_update_forwards_to_loader():
    widget = make_widget()
    widget.start()
    assert widget.update(250) == 2
    assert widget.loader.crest == 2
    widget.pause()
    assert widget.update(250) == 0


def test_surface_follows_loader_size():
    widget = make_widget()
    widget.render()
    widget.loader.set_wave_length(4)
    surface = widget.render()
    assert surface.get_size() == widget.loader.size


def test_draw_blits_onto_target():
    widget = make_widget()
    target = pygame.Surface((200, 100))
    target.fill((0, 0, 0))
    widget.draw(target, (10, 10))
    width, height = widget.loader.size
    painted = any(
        target.get_at((10 + x, 10 + y)).r > 0 for x in range(width) for y in range(height)
    )
    assert painted


def test_close_releases_driver():
    widget = make_widget()
    widget.start()
    widget.close()
    widget.close()
    assert widget.closed
    assert widget.loader.driver.closed
    assert not widget.loader.running


def test_context_manager():
    with WaveWidget(WaveLoader()) as widget:
        widget.start()
    assert widget.closed
    assert widget.loader.driver.closed
