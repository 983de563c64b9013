"""Frame compositor - turns element state into host-agnostic draw commands.

The compositor holds no state and does no geometry. Each style kind maps to a
composer function; every composer emits commands for the drawn window only.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Union

from waveload.buffer import ElementBuffer
from waveload.style import CustomStyle, ElementStyle, ShapeStyle, TextStyle
from waveload.types import Color, Element, ElementDrawer

NOISE_BARS = 4


@dataclass(frozen=True, slots=True)
class DrawCircle:
    center: tuple[int, int]
    radius: int
    color: Color


@dataclass(frozen=True, slots=True)
class DrawRect:
    left: int
    top: int
    right: int
    bottom: int
    color: Color
    radius: int = 0


@dataclass(frozen=True, slots=True)
class DrawGlyph:
    """``top`` is the top of the glyph cell, ``height`` its height."""

    char: str
    left: int
    top: int
    height: int
    size: int
    color: Color


@dataclass(frozen=True, slots=True)
class DrawImage:
    image: Any
    rect: tuple[int, int, int, int]
    alpha: int | None


@dataclass(frozen=True, slots=True)
class DrawCustom:
    drawer: ElementDrawer
    rect: tuple[int, int, int, int]
    color: Color


DrawCommand = Union[DrawCircle, DrawRect, DrawGlyph, DrawImage, DrawCustom]


@dataclass(frozen=True)
class FrameContext:
    color: Color
    ghost_effect: bool
    baseline: int
    random: random.Random

    def paint(self, element: Element) -> Color:
        if not self.ghost_effect:
            return self.color
        r, g, b, _ = self.color
        return (r, g, b, element.alpha)


Composer = Callable[[list[Element], Any, FrameContext], list[DrawCommand]]


def _compose_text(elements: list[Element], style: TextStyle, ctx: FrameContext) -> list[DrawCommand]:
    height = style.element_height
    return [
        DrawGlyph(char, e.x, e.y, height, style.text_size, ctx.paint(e))
        for char, e in zip(style.text, elements)
    ]


def _compose_circles(elements: list[Element], style: ShapeStyle, ctx: FrameContext) -> list[DrawCommand]:
    half = style.size // 2
    return [DrawCircle((e.x + half, e.y + half), half, ctx.paint(e)) for e in elements]


def _compose_squares(elements: list[Element], style: ShapeStyle, ctx: FrameContext) -> list[DrawCommand]:
    radius = max(style.radius, 0)
    return [
        DrawRect(e.x, e.y, e.x + style.size, e.y + style.size, ctx.paint(e), radius)
        for e in elements
    ]


def _compose_rects(elements: list[Element], style: ShapeStyle, ctx: FrameContext) -> list[DrawCommand]:
    radius = max(style.radius, 0)
    return [
        DrawRect(e.x, e.y, e.x + style.size, ctx.baseline, ctx.paint(e), radius)
        for e in elements
    ]


def _compose_noise(elements: list[Element], style: ShapeStyle, ctx: FrameContext) -> list[DrawCommand]:
    bar_width = style.size // 8
    commands: list[DrawCommand] = []
    for e in elements:
        color = ctx.paint(e)
        for j in range(NOISE_BARS):
            top = int(e.y * 0.25 + e.y * 0.75 * ctx.random.random())
            left = e.x + bar_width * 2 * j
            commands.append(DrawRect(left, top, left + bar_width, ctx.baseline, color))
    return commands


def _compose_custom(elements: list[Element], style: CustomStyle, ctx: FrameContext) -> list[DrawCommand]:
    size = style.size
    if style.drawer is not None:
        return [DrawCustom(style.drawer, (e.x, e.y, size, size), ctx.paint(e)) for e in elements]
    if style.image is None:
        return []
    return [
        DrawImage(style.image, (e.x, e.y, size, size), e.alpha if ctx.ghost_effect else None)
        for e in elements
    ]


COMPOSERS: dict[str, Composer] = {
    "text": _compose_text,
    "circle": _compose_circles,
    "square": _compose_squares,
    "rect": _compose_rects,
    "noise": _compose_noise,
    "custom": _compose_custom,
}


def compose(
    buffer: ElementBuffer,
    style: ElementStyle,
    color: Color,
    ghost_effect: bool,
    baseline: int,
    rng: random.Random | None = None,
) -> list[DrawCommand]:
    """Return the draw commands for one frame, left to right."""
    ctx = FrameContext(
        color=color,
        ghost_effect=ghost_effect,
        baseline=baseline,
        random=rng if rng is not None else random.Random(),
    )
    return COMPOSERS[style.kind](buffer.visible(), style, ctx)
