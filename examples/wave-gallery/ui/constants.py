"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 520
ROW_H = 90
ROW_COUNT = 6
STATUS_H = 36
LABEL_W = 110
SCREEN_H = ROW_H * ROW_COUNT + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
ROW_BORDER = (50, 50, 70)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

WAVE_COLORS = [
    (0, 220, 220, 255),
    (255, 160, 40, 255),
    (60, 220, 80, 255),
    (220, 80, 220, 255),
    (90, 140, 255, 255),
    (240, 240, 240, 255),
]
