"""waveload - An animated wave of discrete elements rippling across a strip."""

from waveload.buffer import ElementBuffer
from waveload.clock import Clock
from waveload.compositor import (
    DrawCircle,
    DrawCommand,
    DrawCustom,
    DrawGlyph,
    DrawImage,
    DrawRect,
    compose,
)
from waveload.config import WaveConfig
from waveload.driver import AnimationDriver
from waveload.engine import WaveEngine
from waveload.gradient import AlphaGradient
from waveload.loader import WaveLoader
from waveload.style import CustomStyle, ElementStyle, ShapeStyle, TextStyle
from waveload.types import (
    WAVE_HEIGHTS,
    Color,
    ConfigError,
    Element,
    ElementDrawer,
    StepFunction,
)

__all__ = [
    "WaveLoader",
    "WaveConfig",
    "WaveEngine",
    "ElementBuffer",
    "AlphaGradient",
    "AnimationDriver",
    "Clock",
    "compose",
    "DrawCommand",
    "DrawCircle",
    "DrawRect",
    "DrawGlyph",
    "DrawImage",
    "DrawCustom",
    "ElementStyle",
    "TextStyle",
    "ShapeStyle",
    "CustomStyle",
    "Element",
    "Color",
    "ElementDrawer",
    "StepFunction",
    "ConfigError",
    "WAVE_HEIGHTS",
]
