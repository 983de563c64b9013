"""WaveConfig - validated loader configuration and mapping parser."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from waveload.types import (
    DEFAULT_COLOR,
    DEFAULT_DURATION_MS,
    DEFAULT_ELEMENT_SIZE,
    DEFAULT_INTERVAL,
    DEFAULT_TEXT_SIZE,
    GHOST_ALPHA_MAX_DEFAULT,
    GHOST_ALPHA_MIN_DEFAULT,
    IMAGE_TYPES,
    WAVE_HEIGHTS,
    Color,
    ConfigError,
    ElementDrawer,
)

Padding = tuple[int, int, int, int]


@dataclass(frozen=True)
class WaveConfig:
    """Immutable configuration for a WaveLoader.

    Attributes:
        text: Characters to ripple. Used only when it is at least
            ``wave_length + 2`` long; it then fixes the visible length.
        color: RGBA fill for shapes and glyphs.
        image_type: Element style when neither text nor a custom image is set.
        wave_length: Elements in one wave, crest to tail.
        visible_length: Drawn elements; defaults to ``wave_length + 2``.
        wave_height: Name of the wave height preset (see ``WAVE_HEIGHTS``).
        duration: Milliseconds per crest step.
        interval: Pixels between neighbouring elements.
        element_size: Width and height of shape and custom elements.
        text_size: Glyph width for text elements.
        rect_radius: Corner radius for square and rect elements.
        ghost_effect: Fade elements by their distance to the peak.
        ghost_alpha_min: Alpha of elements away from the wave.
        ghost_alpha_max: Alpha of the peak element.
        custom_image: Host image drawn for every element.
        custom_drawer: Callable drawing one element on the host surface.
        padding: (left, top, right, bottom) in pixels.
        seed: Seed for the noise-bar RNG; random when None.
    """

    text: str | None = None
    color: Color = DEFAULT_COLOR
    image_type: str = "circle"
    wave_length: int = 1
    visible_length: int | None = None
    wave_height: str = "normal"
    duration: int = DEFAULT_DURATION_MS
    interval: int = DEFAULT_INTERVAL
    element_size: int = DEFAULT_ELEMENT_SIZE
    text_size: int = DEFAULT_TEXT_SIZE
    rect_radius: int = 0
    ghost_effect: bool = False
    ghost_alpha_min: int = GHOST_ALPHA_MIN_DEFAULT
    ghost_alpha_max: int = GHOST_ALPHA_MAX_DEFAULT
    custom_image: Any = None
    custom_drawer: ElementDrawer | None = None
    padding: Padding = (0, 0, 0, 0)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.image_type not in IMAGE_TYPES:
            raise ConfigError(f"image_type must be one of {IMAGE_TYPES}, got {self.image_type!r}")
        if self.wave_height not in WAVE_HEIGHTS:
            raise ConfigError(
                f"wave_height must be one of {tuple(WAVE_HEIGHTS)}, got {self.wave_height!r}"
            )
        if self.wave_length < 1:
            raise ConfigError(f"wave_length must be >= 1, got {self.wave_length}")
        if self.visible_length is not None and self.visible_length < self.wave_length + 2:
            raise ConfigError(
                f"visible_length must be >= wave_length + 2, got {self.visible_length}"
            )
        if self.duration < 0:
            raise ConfigError(f"duration must be >= 0, got {self.duration}")
        if self.interval < 0:
            raise ConfigError(f"interval must be >= 0, got {self.interval}")
        if self.element_size < 1:
            raise ConfigError(f"element_size must be >= 1, got {self.element_size}")
        if self.text_size < 1:
            raise ConfigError(f"text_size must be >= 1, got {self.text_size}")
        if self.rect_radius < 0:
            raise ConfigError(f"rect_radius must be >= 0, got {self.rect_radius}")
        if len(self.color) != 4 or any(not 0 <= c <= 255 for c in self.color):
            raise ConfigError(f"color must be four channels in [0, 255], got {self.color!r}")
        if len(self.padding) != 4 or any(p < 0 for p in self.padding):
            raise ConfigError(f"padding must be four values >= 0, got {self.padding!r}")

    @property
    def length(self) -> int:
        """Visible length with the ``wave_length + 2`` default applied."""
        if self.visible_length is None:
            return self.wave_length + 2
        return self.visible_length

    @property
    def height_ratio(self) -> float:
        return WAVE_HEIGHTS[self.wave_height]

    def replace(self, **changes: Any) -> WaveConfig:
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WaveConfig:
        """Build a config from a plain mapping, e.g. parsed JSON.

        Colours may be ``"#RRGGBB"``, ``"#AARRGGBB"`` or a 3/4-tuple; padding
        may be a single int.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values = dict(data)
        if "color" in values:
            values["color"] = parse_color(values["color"])
        if "padding" in values:
            values["padding"] = parse_padding(values["padding"])
        return cls(**values)


def parse_color(value: Any) -> Color:
    if isinstance(value, str):
        text = value.lstrip("#")
        try:
            channels = int(text, 16)
        except ValueError:
            raise ConfigError(f"Invalid colour {value!r}") from None
        if len(text) == 6:
            return ((channels >> 16) & 0xFF, (channels >> 8) & 0xFF, channels & 0xFF, 255)
        if len(text) == 8:
            return (
                (channels >> 16) & 0xFF,
                (channels >> 8) & 0xFF,
                channels & 0xFF,
                (channels >> 24) & 0xFF,
            )
        raise ConfigError(f"Invalid colour {value!r}")

    channels = tuple(int(c) for c in value)
    if len(channels) == 3:
        return (*channels, 255)  # type: ignore[return-value]
    if len(channels) == 4:
        return channels  # type: ignore[return-value]
    raise ConfigError(f"Invalid colour {value!r}")


def parse_padding(value: Any) -> Padding:
    if isinstance(value, int):
        return (value, value, value, value)
    padding = tuple(int(p) for p in value)
    if len(padding) != 4:
        raise ConfigError(f"padding must have four values, got {value!r}")
    return padding  # type: ignore[return-value]
