"""WaveLoader - the public face of the wave: setters, ticking and frames.

A loader owns one element buffer, its alpha gradient, the wave engine that
moves the crest, and the animation driver that paces it. Setters never
raise; a rejected value leaves the loader untouched and logs at DEBUG, so
callers confirm an effect through the getters.
"""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from waveload.buffer import ElementBuffer
from waveload.compositor import DrawCommand, compose
from waveload.config import WaveConfig
from waveload.driver import AnimationDriver
from waveload.engine import WaveEngine
from waveload.gradient import AlphaGradient
from waveload.style import (
    SHAPE_KINDS,
    CustomStyle,
    ElementStyle,
    ShapeStyle,
    TextStyle,
    clamp_radius,
)
from waveload.types import ALPHA_CEILING, Color, ElementDrawer, StepFunction

logger = logging.getLogger(__name__)

InvalidateHook = Callable[["WaveLoader"], None]


class WaveLoader:
    def __init__(self, config: WaveConfig | None = None) -> None:
        if config is None:
            config = WaveConfig()

        self._color = config.color
        self._wave_length = config.wave_length
        self._length = config.length
        self._height_ratio = config.height_ratio
        self._interval = config.interval
        self._element_size = config.element_size
        self._rect_radius = clamp_radius(config.rect_radius, config.element_size)
        self._padding = config.padding
        self._ghost_effect = config.ghost_effect
        self._custom_image = config.custom_image
        self._custom_drawer = config.custom_drawer
        self._rng = random.Random(config.seed)
        self._invalidate_hooks: list[InvalidateHook] = []

        self._style = self._resolve_style(config)

        self._gradient = AlphaGradient.build(
            self._wave_length, config.ghost_alpha_min, config.ghost_alpha_max
        )
        self._buffer = ElementBuffer(self._length, self._wave_length, self._gradient.alpha_min)
        self._engine = WaveEngine(
            self._buffer,
            self._gradient,
            self._style.element_height,
            self._height_ratio,
        )
        self._driver = AnimationDriver(self._on_tick, config.duration)

        self._auto_size = True
        self._size = (0, 0)
        self._relayout()

    def _resolve_style(self, config: WaveConfig) -> ElementStyle:
        size = self._element_size
        usable_text = None
        if config.text is not None:
            if len(config.text) - config.wave_length >= 2:
                # Text fixes the element count even when an image is drawn instead.
                self._length = len(config.text)
                usable_text = config.text
            else:
                logger.warning(
                    "Ignoring text %r: needs at least wave_length + 2 = %d characters",
                    config.text,
                    config.wave_length + 2,
                )

        if self._has_custom_source():
            return self._custom_style()
        if usable_text is not None:
            return TextStyle(usable_text, config.text_size)
        if config.image_type == "custom":
            return CustomStyle(size)
        if config.image_type == "text":
            logger.warning("image_type 'text' needs usable text, drawing circles")
            return ShapeStyle("circle", size, self._rect_radius)
        return ShapeStyle(config.image_type, size, self._rect_radius)

    def _has_custom_source(self) -> bool:
        return self._custom_image is not None or self._custom_drawer is not None

    def _custom_style(self) -> CustomStyle:
        return CustomStyle(self._element_size, self._custom_image, self._custom_drawer)

    # --- getters ---

    @property
    def style(self) -> ElementStyle:
        return self._style

    @property
    def image_type(self) -> str:
        return self._style.kind

    @property
    def color(self) -> Color:
        return self._color

    @property
    def wave_length(self) -> int:
        return self._wave_length

    @property
    def visible_length(self) -> int:
        return self._length

    @property
    def height_ratio(self) -> float:
        return self._height_ratio

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def element_size(self) -> int:
        return self._element_size

    @property
    def rect_radius(self) -> int:
        return self._rect_radius

    @property
    def padding(self) -> tuple[int, int, int, int]:
        return self._padding

    @property
    def duration(self) -> int:
        return self._driver.duration_ms

    @property
    def ghost_effect(self) -> bool:
        return self._ghost_effect

    @property
    def ghost_alpha(self) -> tuple[int, int]:
        return (self._gradient.alpha_min, self._gradient.alpha_max)

    @property
    def gradient(self) -> AlphaGradient:
        return self._gradient

    @property
    def custom_image(self) -> Any:
        return self._custom_image

    @property
    def custom_drawer(self) -> ElementDrawer | None:
        return self._custom_drawer

    @property
    def step_function(self) -> StepFunction | None:
        return self._engine.step_function

    @property
    def crest(self) -> int:
        return self._engine.crest

    @property
    def buffer(self) -> ElementBuffer:
        return self._buffer

    @property
    def engine(self) -> WaveEngine:
        return self._engine

    @property
    def driver(self) -> AnimationDriver:
        return self._driver

    @property
    def running(self) -> bool:
        return self._driver.running

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    @property
    def baseline(self) -> int:
        return self._size[1] - self._padding[3]

    # --- lifecycle ---

    def start(self) -> None:
        self._driver.start()

    def pause(self) -> None:
        self._driver.pause()

    def close(self) -> None:
        self._driver.close()
        self._invalidate_hooks.clear()

    def __enter__(self) -> WaveLoader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def on_invalidate(self, hook: InvalidateHook) -> None:
        self._invalidate_hooks.append(hook)

    def _invalidate(self) -> None:
        for hook in self._invalidate_hooks:
            hook(self)

    @contextmanager
    def _paused(self) -> Iterator[None]:
        was_running = self._driver.running
        self._driver.pause()
        try:
            yield
        finally:
            if was_running:
                self._driver.start()

    # --- ticking ---

    def _on_tick(self, tick_number: int) -> None:
        self.tick()

    def tick(self) -> int:
        """Advance the crest one step and recompute the geometry."""
        crest = self._engine.step()
        self._engine.recompute_geometry(self._size[1], self._padding[3])
        self._invalidate()
        return crest

    def update(self, elapsed_ms: float) -> int:
        return self._driver.update(elapsed_ms)

    def frame(self) -> list[DrawCommand]:
        return compose(
            self._buffer,
            self._style,
            self._color,
            self._ghost_effect,
            self.baseline,
            self._rng,
        )

    # --- layout ---

    def preferred_size(self) -> tuple[int, int]:
        """Wrap-content size: every element plus the tallest wave."""
        left, top, right, bottom = self._padding
        element_width = self._style.element_width
        element_height = self._style.element_height
        width = (
            self._length * element_width
            + (self._length - 1) * self._interval
            + left
            + right
        )
        half = self._wave_length // 2
        if self._wave_length % 2:
            wave_height = int(element_height + (half + 1) * element_height * self._height_ratio)
        else:
            wave_height = int(element_height + half * element_height * self._height_ratio)
        return (width, wave_height + top + bottom)

    def resize(self, width: int, height: int) -> None:
        """Pin the surface size. Until called, the size follows preferred_size()."""
        self._auto_size = False
        self._size = (width, height)
        self._relayout()

    def _relayout(self) -> None:
        if self._auto_size:
            self._size = self.preferred_size()
        self._engine.element_height = self._style.element_height
        self._buffer.assign_x(self._style.element_width, self._interval, self._padding[0])
        self._engine.recompute_geometry(self._size[1], self._padding[3])
        self._invalidate()

    # --- setters ---

    def set_duration(self, duration_ms: int) -> None:
        self._driver.set_duration(duration_ms)

    def set_color(self, color: Color) -> None:
        self._color = color
        self._invalidate()

    def set_wave_length(self, wave_length: int) -> None:
        with self._paused():
            if wave_length < 1 or wave_length + 2 > self._length:
                logger.debug(
                    "Rejecting wave_length %d for visible length %d", wave_length, self._length
                )
                return
            self._wave_length = wave_length
            self._gradient = AlphaGradient.build(
                wave_length, self._gradient.alpha_min, self._gradient.alpha_max
            )
            self._buffer.resize(self._length, wave_length, self._gradient.alpha_min)
            self._engine.gradient = self._gradient
            self._engine.reset()
            self._relayout()

    def set_interval(self, interval: int) -> None:
        with self._paused():
            if interval < 0:
                logger.debug("Rejecting negative interval %d", interval)
                return
            self._interval = interval
            self._relayout()

    def set_style(self, kind: str) -> None:
        current = self._style
        if isinstance(current, TextStyle):
            logger.debug("Style is fixed while drawing text")
            return
        if isinstance(current, CustomStyle) and current.image is None and current.drawer is None:
            logger.debug("Style is fixed while custom has no image")
            return

        if kind in SHAPE_KINDS:
            self._style = ShapeStyle(kind, self._element_size, self._rect_radius)
        elif kind == "custom" and self._has_custom_source():
            self._style = self._custom_style()
        else:
            logger.debug("Rejecting style %r", kind)
            return
        self._relayout()

    def set_ghost_effect(self, enabled: bool) -> None:
        self._ghost_effect = enabled
        self._invalidate()

    def set_ghost_alpha(self, alpha_min: int, alpha_max: int) -> None:
        if (
            alpha_min > alpha_max
            or alpha_min < 0
            or alpha_max > ALPHA_CEILING
            or alpha_min > ALPHA_CEILING
        ):
            logger.debug("Rejecting ghost alpha (%d, %d)", alpha_min, alpha_max)
            return
        with self._paused():
            self._gradient = AlphaGradient.build(self._wave_length, alpha_min, alpha_max)
            self._engine.gradient = self._gradient
            self._engine.recompute_geometry(self._size[1], self._padding[3])
            self._invalidate()

    def set_custom_image(self, image: Any) -> None:
        if image is None:
            return
        self._custom_image = image
        self._custom_drawer = None
        self._style = self._custom_style()
        self._relayout()

    def set_custom_drawer(self, drawer: ElementDrawer | None) -> None:
        if drawer is None:
            return
        self._custom_drawer = drawer
        self._style = self._custom_style()
        self._relayout()

    def set_step_function(self, step_fn: StepFunction | None) -> None:
        self._engine.set_step_function(step_fn)
