"""Wave Gallery: every element style side by side.

Exercises waveload and waveload-pygame.

Controls:
  Space   Start / pause all waves
  G       Toggle ghost effect
  +/-     Grow / shrink wave length
  R       Reverse wave direction
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from waveload import WaveConfig
from waveload_pygame import FontCache, WaveWidget

from ui.constants import (
    BG_COLOR,
    FPS,
    LABEL_W,
    ROW_H,
    SCREEN_H,
    SCREEN_W,
    WAVE_COLORS,
)
from ui.drawers import draw_triangle
from ui.status import draw_row_label, draw_status_bar

VISIBLE_LENGTH = 11


def reverse_step(current: int, lower: int, upper: int) -> int:
    """Move the crest right to left, wrapping at the left edge."""
    if current <= lower:
        return upper
    return current - 1


def build_rows() -> list[tuple[str, WaveConfig]]:
    base = WaveConfig(
        wave_length=5,
        visible_length=VISIBLE_LENGTH,
        wave_height="big",
        element_size=18,
        interval=6,
        ghost_alpha_min=60,
        seed=42,
    )
    return [
        ("circle", base.replace(image_type="circle", color=WAVE_COLORS[0])),
        ("square", base.replace(image_type="square", rect_radius=4, color=WAVE_COLORS[1])),
        ("rect", base.replace(image_type="rect", color=WAVE_COLORS[2])),
        ("noise", base.replace(image_type="noise", color=WAVE_COLORS[3])),
        ("text", base.replace(text="LOADING....", text_size=18, color=WAVE_COLORS[4])),
        ("custom", base.replace(custom_drawer=draw_triangle, color=WAVE_COLORS[5])),
    ]


class GalleryState:
    """Holds all widgets and shared toggles."""

    def __init__(self) -> None:
        fonts = FontCache()
        self.rows: list[tuple[str, WaveWidget]] = [
            (title, WaveWidget.from_config(config, fonts)) for title, config in build_rows()
        ]
        self.running = False
        self.ghost = False
        self.reversed = False

    @property
    def wave_length(self) -> int:
        return self.rows[0][1].loader.wave_length

    def toggle_running(self) -> None:
        self.running = not self.running
        for _, widget in self.rows:
            if self.running:
                widget.start()
            else:
                widget.pause()

    def toggle_ghost(self) -> None:
        self.ghost = not self.ghost
        for _, widget in self.rows:
            widget.loader.set_ghost_effect(self.ghost)

    def toggle_direction(self) -> None:
        self.reversed = not self.reversed
        step_fn = reverse_step if self.reversed else None
        for _, widget in self.rows:
            widget.loader.set_step_function(step_fn)

    def resize_waves(self, delta: int) -> None:
        for _, widget in self.rows:
            widget.loader.set_wave_length(widget.loader.wave_length + delta)

    def update(self, dt_ms: float) -> None:
        for _, widget in self.rows:
            widget.update(dt_ms)

    def close(self) -> None:
        for _, widget in self.rows:
            widget.close()


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Wave Gallery - waveload demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    state.toggle_running()
    running = True

    while running:
        dt_ms = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.toggle_running()
                elif event.key == pygame.K_g:
                    state.toggle_ghost()
                elif event.key == pygame.K_r:
                    state.toggle_direction()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.resize_waves(1)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.resize_waves(-1)

        # --- Tick ---
        state.update(dt_ms)

        # --- Render ---
        screen.fill(BG_COLOR)
        for row, (title, widget) in enumerate(state.rows):
            loader = widget.loader
            draw_row_label(screen, font, row, title, f"crest {loader.crest}")
            surface = widget.render()
            screen.blit(surface, (LABEL_W, row * ROW_H + (ROW_H - surface.get_height()) // 2))

        draw_status_bar(screen, font, state.running, state.ghost, state.wave_length)
        pygame.display.flip()

    state.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
