"""Row labels and bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import (
    ROW_BORDER,
    ROW_H,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_row_label(
    surface: pygame.Surface,
    font: pygame.font.Font,
    row: int,
    title: str,
    detail: str,
) -> None:
    y = row * ROW_H
    pygame.draw.line(surface, ROW_BORDER, (0, y + ROW_H - 1), (SCREEN_W, y + ROW_H - 1))
    surface.blit(font.render(title, True, TEXT_COLOR), (10, y + 10))
    surface.blit(font.render(detail, True, TEXT_DIM), (10, y + 30))


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    running: bool,
    ghost: bool,
    wave_length: int,
) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    state = "running" if running else "paused"
    text = (
        f"[Space] {state}  [G] ghost {'on' if ghost else 'off'}  "
        f"[+/-] wave {wave_length}  [R] reverse  [Esc] quit"
    )
    surface.blit(font.render(text, True, TEXT_COLOR), (10, y + 10))
