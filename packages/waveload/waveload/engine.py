"""WaveEngine - crest advance and per-tick element geometry."""

from __future__ import annotations

from typing import Iterable

from waveload.buffer import ElementBuffer
from waveload.gradient import AlphaGradient
from waveload.types import WAVE_HEIGHTS, StepFunction


class WaveEngine:
    """Moves the crest through the element ring and recomputes every
    element's ``y`` and ``alpha`` for the current crest.

    The crest is the first slot of the wave, not its peak. For odd wave
    lengths the peak is the middle slot; even lengths have no middle, so the
    peak is attributed to the slot just before the computed midpoint.
    """

    def __init__(
        self,
        buffer: ElementBuffer,
        gradient: AlphaGradient,
        element_height: int,
        height_ratio: float = WAVE_HEIGHTS["normal"],
        step_fn: StepFunction | None = None,
    ) -> None:
        self._buffer = buffer
        self._gradient = gradient
        self._element_height = element_height
        self._height_ratio = height_ratio
        self._step_fn = step_fn
        self._crest = 0

    @property
    def crest(self) -> int:
        return self._crest

    @property
    def buffer(self) -> ElementBuffer:
        return self._buffer

    @property
    def gradient(self) -> AlphaGradient:
        return self._gradient

    @gradient.setter
    def gradient(self, gradient: AlphaGradient) -> None:
        self._gradient = gradient

    @property
    def element_height(self) -> int:
        return self._element_height

    @element_height.setter
    def element_height(self, height: int) -> None:
        self._element_height = height

    @property
    def height_ratio(self) -> float:
        return self._height_ratio

    @height_ratio.setter
    def height_ratio(self, ratio: float) -> None:
        self._height_ratio = ratio

    @property
    def step_function(self) -> StepFunction | None:
        return self._step_fn

    def set_step_function(self, step_fn: StepFunction | None) -> None:
        self._step_fn = step_fn

    def reset(self, crest: int = 0) -> None:
        self._crest = crest

    def step(self) -> int:
        total = len(self._buffer)
        if self._step_fn is not None:
            crest = self._step_fn(self._crest, 0, total - 1)
        else:
            crest = self._crest + 1

        if crest >= total or crest < 0:
            crest = 0
        self._crest = crest
        return crest

    def wave_end(self) -> int:
        return (self._crest + self._buffer.wave_length - 1) % len(self._buffer)

    def peak_position(self) -> int:
        """Index the peak is dispatched on. Not re-wrapped after the even
        adjustment, so it can be -1."""
        wave_length = self._buffer.wave_length
        peak = (self._crest + wave_length // 2) % len(self._buffer)
        if wave_length % 2 == 0:
            peak -= 1
        return peak

    def recompute_geometry(self, surface_height: int, bottom_padding: int = 0) -> None:
        baseline = surface_height - bottom_padding
        if self._buffer.wave_length % 2:
            self._odd_geometry(baseline)
        else:
            self._even_geometry(baseline)

    # --- region cases ---

    def _odd_geometry(self, baseline: int) -> None:
        buf = self._buffer
        start, end = buf.display_start, buf.display_end
        crest = self._crest
        wave_end = self.wave_end()
        peak = self.peak_position()
        count = 1

        if start <= peak <= end:
            # crest..wave_end never wraps while the peak is in the window
            for i in range(crest, wave_end + 1):
                if i < peak:
                    self._raise(i, count, baseline)
                    count += 1
                elif i > peak:
                    count -= 1
                    self._raise(i, count, baseline)
                else:
                    self._crown(i, count, baseline)
            self._flatten(range(start, crest), baseline)
            self._flatten(range(wave_end + 1, end + 1), baseline)
            return

        if peak < start:
            for i in range(wave_end, start - 1, -1):
                self._raise(i, count, baseline)
                count += 1
            self._flatten(range(wave_end + 1, end + 1), baseline)
            return

        self._flatten(range(start, crest), baseline)
        for i in range(crest, end):
            self._raise(i, count, baseline)
            count += 1

    def _even_geometry(self, baseline: int) -> None:
        buf = self._buffer
        start, end = buf.display_start, buf.display_end
        crest = self._crest
        wave_end = self.wave_end()
        peak = self.peak_position()
        count = 1

        if start < peak <= end:
            for i in range(crest, wave_end + 1):
                if i < peak:
                    self._raise(i, count, baseline)
                    count += 1
                elif i > peak:
                    self._raise(i, count, baseline)
                    count -= 1
                else:
                    self._crown(i, count, baseline)
            self._flatten(range(start, crest), baseline)
            self._flatten(range(wave_end + 1, end + 1), baseline)
            return

        if peak <= start:
            for i in range(wave_end, peak, -1):
                self._raise(i, count, baseline)
                count += 1
            self._flatten(range(wave_end + 1, end + 1), baseline)
            return

        self._flatten(range(start, crest), baseline)
        for i in range(crest, end + 1):
            self._raise(i, count, baseline)
            count += 1

    # --- element writers ---

    def _lift(self, count: int, baseline: int) -> int:
        offset = self._element_height * self._height_ratio
        return int(baseline - self._element_height - count * offset)

    def _raise(self, index: int, count: int, baseline: int) -> None:
        element = self._buffer[index]
        element.y = self._lift(count, baseline)
        element.alpha = self._gradient[count - 1]

    def _crown(self, index: int, count: int, baseline: int) -> None:
        element = self._buffer[index]
        element.y = self._lift(count, baseline)
        element.alpha = self._gradient.alpha_max

    def _flatten(self, indices: Iterable[int], baseline: int) -> None:
        total = len(self._buffer)
        y = baseline - self._element_height
        alpha = self._gradient.alpha_min
        for i in indices:
            if i >= total:
                break
            element = self._buffer[i]
            element.y = y
            element.alpha = alpha
