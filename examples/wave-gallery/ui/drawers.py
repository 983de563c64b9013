"""Custom element drawers."""
from __future__ import annotations

import pygame


def draw_triangle(
    surface: pygame.Surface,
    color: tuple[int, int, int, int],
    rect: tuple[int, int, int, int],
) -> None:
    """Upward triangle filling the element cell."""
    left, top, width, height = rect
    points = [
        (left, top + height),
        (left + width, top + height),
        (left + width // 2, top),
    ]
    pygame.draw.polygon(surface, color, points)
