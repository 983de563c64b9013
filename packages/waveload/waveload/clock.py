"""Clock - inter-tick duration and pending time for the animation driver."""

from __future__ import annotations

from waveload.types import DEFAULT_DURATION_MS


class Clock:
    def __init__(self, duration_ms: int = DEFAULT_DURATION_MS) -> None:
        if duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {duration_ms}")
        self._duration_ms = duration_ms
        self._tick_number = 0
        self._pending_ms = 0.0

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @duration_ms.setter
    def duration_ms(self, duration_ms: int) -> None:
        if duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {duration_ms}")
        self._duration_ms = duration_ms

    @property
    def dt(self) -> float:
        """Seconds between ticks."""
        return self._duration_ms / 1000.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def pending_ms(self) -> float:
        return self._pending_ms

    def accumulate(self, elapsed_ms: float) -> int:
        """Add elapsed time and return how many ticks are now due.

        A zero duration makes exactly one tick due per call.
        """
        if self._duration_ms == 0:
            return 1
        self._pending_ms += elapsed_ms
        due = int(self._pending_ms // self._duration_ms)
        self._pending_ms -= due * self._duration_ms
        return due

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def discard(self) -> None:
        """Drop pending time so no already-scheduled tick fires."""
        self._pending_ms = 0.0

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._pending_ms = 0.0
