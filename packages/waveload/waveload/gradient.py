"""Alpha gradient - symmetric opacity ramp across one wave cycle."""

from __future__ import annotations

from dataclasses import dataclass

from waveload.types import (
    ALPHA_CEILING,
    ALPHA_FLOOR,
    GHOST_ALPHA_MAX_DEFAULT,
    GHOST_ALPHA_MIN_DEFAULT,
)


@dataclass(frozen=True)
class AlphaGradient:
    """Immutable opacity ramp used by the ghost effect.

    Attributes:
        alpha_min: Effective lower bound after clamping.
        alpha_max: Effective upper bound after clamping.
        values: One alpha per position in the wave, mirrored about the centre.
    """

    alpha_min: int
    alpha_max: int
    values: tuple[int, ...]

    @classmethod
    def build(cls, wave_length: int, alpha_min: int, alpha_max: int) -> AlphaGradient:
        if alpha_max > ALPHA_CEILING:
            alpha_max = ALPHA_CEILING
        if alpha_min < ALPHA_FLOOR:
            alpha_min = ALPHA_FLOOR
        if alpha_max < alpha_min:
            alpha_min = GHOST_ALPHA_MIN_DEFAULT
            alpha_max = GHOST_ALPHA_MAX_DEFAULT

        if wave_length % 2 == 0:
            half_len = wave_length // 2 + 1
        else:
            half_len = wave_length // 2
        step = (alpha_max - alpha_min) // (half_len + 1)

        values = [alpha_min] * wave_length
        for i in range(half_len + 1):
            mirror = wave_length - 1 - i
            # Even lengths would otherwise run past the midpoint.
            if i > mirror:
                break
            values[i] = values[mirror] = alpha_min + (i + 1) * step

        return cls(alpha_min=alpha_min, alpha_max=alpha_max, values=tuple(values))

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]
