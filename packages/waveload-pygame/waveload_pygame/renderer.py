"""Pygame renderer - draws waveload commands onto a pygame Surface."""
from __future__ import annotations

from typing import Callable, Iterable

import pygame

from waveload.compositor import (
    DrawCircle,
    DrawCommand,
    DrawCustom,
    DrawGlyph,
    DrawImage,
    DrawRect,
)


class FontCache:
    """Lazily created fonts keyed by pixel size."""

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._fonts: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(self._name, size)
            self._fonts[size] = font
        return font


def _layer(width: int, height: int) -> pygame.Surface:
    # pygame.draw writes RGBA verbatim; blitting the layer is what blends it.
    return pygame.Surface((width, height), pygame.SRCALPHA)


def _draw_circle(surface: pygame.Surface, cmd: DrawCircle, fonts: FontCache) -> None:
    cx, cy = cmd.center
    diameter = cmd.radius * 2
    if diameter <= 0:
        return
    layer = _layer(diameter, diameter)
    pygame.draw.circle(layer, cmd.color, (cmd.radius, cmd.radius), cmd.radius)
    surface.blit(layer, (cx - cmd.radius, cy - cmd.radius))


def _draw_rect(surface: pygame.Surface, cmd: DrawRect, fonts: FontCache) -> None:
    width = cmd.right - cmd.left
    height = cmd.bottom - cmd.top
    if width <= 0 or height <= 0:
        return
    layer = _layer(width, height)
    pygame.draw.rect(layer, cmd.color, (0, 0, width, height), border_radius=cmd.radius)
    surface.blit(layer, (cmd.left, cmd.top))


def _draw_glyph(surface: pygame.Surface, cmd: DrawGlyph, fonts: FontCache) -> None:
    r, g, b, a = cmd.color
    glyph = fonts.get(cmd.height).render(cmd.char, True, (r, g, b))
    glyph.set_alpha(a)
    # Bottom of the glyph sits on the bottom of its cell.
    surface.blit(glyph, (cmd.left, cmd.top + cmd.height - glyph.get_height()))


def _draw_image(surface: pygame.Surface, cmd: DrawImage, fonts: FontCache) -> None:
    left, top, width, height = cmd.rect
    image = pygame.transform.scale(cmd.image, (width, height))
    if cmd.alpha is not None:
        image.set_alpha(cmd.alpha)
    surface.blit(image, (left, top))


def _draw_custom(surface: pygame.Surface, cmd: DrawCustom, fonts: FontCache) -> None:
    left, top, width, height = cmd.rect
    layer = _layer(width, height)
    cmd.drawer(layer, cmd.color, (0, 0, width, height))
    surface.blit(layer, (left, top))


PAINTERS: dict[type, Callable[[pygame.Surface, DrawCommand, FontCache], None]] = {
    DrawCircle: _draw_circle,
    DrawRect: _draw_rect,
    DrawGlyph: _draw_glyph,
    DrawImage: _draw_image,
    DrawCustom: _draw_custom,
}


def render(
    surface: pygame.Surface,
    commands: Iterable[DrawCommand],
    fonts: FontCache | None = None,
) -> None:
    """Draw every command onto ``surface`` in order."""
    if fonts is None:
        fonts = FontCache()
    for cmd in commands:
        PAINTERS[type(cmd)](surface, cmd, fonts)
