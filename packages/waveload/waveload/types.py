"""Shared type aliases, constants and error types for the wave loader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Color = tuple[int, int, int, int]

# (current, lower, upper) -> next crest position
StepFunction = Callable[[int, int, int], int]

# (surface, color, (left, top, width, height)) -> None
ElementDrawer = Callable[[Any, Color, tuple[int, int, int, int]], None]

IMAGE_TYPES = ("text", "circle", "square", "rect", "noise", "custom")

WAVE_HEIGHTS: dict[str, float] = {
    "slight": 0.25,
    "normal": 0.5,
    "big": 0.75,
    "large": 1.0,
}

DEFAULT_DURATION_MS = 100
DEFAULT_INTERVAL = 5
DEFAULT_ELEMENT_SIZE = 10
DEFAULT_TEXT_SIZE = 10
DEFAULT_COLOR: Color = (0, 0, 255, 255)

ALPHA_CEILING = 255
ALPHA_FLOOR = 10
GHOST_ALPHA_MIN_DEFAULT = 100
GHOST_ALPHA_MAX_DEFAULT = 255


@dataclass(slots=True)
class Element:
    x: int = 0
    y: int = 0
    alpha: int = GHOST_ALPHA_MIN_DEFAULT


class ConfigError(ValueError):
    """Raised when a WaveConfig is constructed from invalid values."""
