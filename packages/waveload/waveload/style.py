"""Element styles - the tagged variant shared by layout and compositing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from waveload.types import ElementDrawer

SHAPE_KINDS = ("circle", "square", "rect", "noise")


def text_height(text_size: int) -> int:
    """Glyph cell height for a text size, from the typical font aspect."""
    return int((text_size + 0.00000007) / 0.7535)


@dataclass(frozen=True)
class TextStyle:
    """One glyph per element, so the visible length is the text length."""

    kind: ClassVar[str] = "text"

    text: str
    text_size: int

    @property
    def element_width(self) -> int:
        return self.text_size

    @property
    def element_height(self) -> int:
        return text_height(self.text_size)


@dataclass(frozen=True)
class ShapeStyle:
    """Circle, square, baseline-anchored rect or noise bars.

    Attributes:
        kind: One of ``SHAPE_KINDS``.
        size: Width and height of one element in pixels.
        radius: Corner radius for square and rect, 0 for sharp corners.
    """

    kind: str
    size: int
    radius: int = 0

    def __post_init__(self) -> None:
        if self.kind not in SHAPE_KINDS:
            raise ValueError(f"Unknown shape kind {self.kind!r}")

    @property
    def element_width(self) -> int:
        return self.size

    @property
    def element_height(self) -> int:
        return self.size


@dataclass(frozen=True)
class CustomStyle:
    """A user image or a user drawer, fitted into a ``size`` square."""

    kind: ClassVar[str] = "custom"

    size: int
    image: Any = None
    drawer: ElementDrawer | None = None

    @property
    def element_width(self) -> int:
        return self.size

    @property
    def element_height(self) -> int:
        return self.size


ElementStyle = Union[TextStyle, ShapeStyle, CustomStyle]


def clamp_radius(radius: int, size: int) -> int:
    if radius * 2 > size:
        return max(size // 2 - 1, 0)
    return radius
