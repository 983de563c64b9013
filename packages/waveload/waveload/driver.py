"""AnimationDriver - start/pause lifecycle and tick dispatch."""

from __future__ import annotations

import logging
import time
from typing import Callable

from waveload.clock import Clock
from waveload.types import DEFAULT_DURATION_MS

logger = logging.getLogger(__name__)

TickCallback = Callable[[int], None]
Hook = Callable[["AnimationDriver"], None]


class AnimationDriver:
    """Fires ``on_tick`` once per elapsed duration while running.

    The host loop polls :meth:`update` with the wall time that passed since
    the previous poll. Closing the driver releases the tick callback; a closed
    driver never starts again. Use it as a context manager to tie that
    release to the owning surface's lifetime.
    """

    def __init__(
        self,
        on_tick: TickCallback,
        duration_ms: int = DEFAULT_DURATION_MS,
    ) -> None:
        self._clock = Clock(duration_ms)
        self._on_tick: TickCallback | None = on_tick
        self._running = False
        self._closed = False
        self._start_hooks: list[Hook] = []
        self._pause_hooks: list[Hook] = []

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def running(self) -> bool:
        return self._running

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def duration_ms(self) -> int:
        return self._clock.duration_ms

    def set_duration(self, duration_ms: int) -> None:
        if duration_ms < 0:
            logger.debug("Ignoring negative duration %d", duration_ms)
            return
        self._clock.duration_ms = duration_ms

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_pause(self, hook: Hook) -> None:
        self._pause_hooks.append(hook)

    def start(self) -> None:
        if self._running or self._closed:
            return
        self._running = True
        self._clock.discard()
        logger.debug("Driver started at tick %d", self._clock.tick_number)
        for hook in self._start_hooks:
            hook(self)

    def pause(self) -> None:
        if not self._running:
            return
        self._running = False
        self._clock.discard()
        logger.debug("Driver paused at tick %d", self._clock.tick_number)
        for hook in self._pause_hooks:
            hook(self)

    def close(self) -> None:
        if self._closed:
            return
        self.pause()
        self._closed = True
        self._on_tick = None
        self._start_hooks.clear()
        self._pause_hooks.clear()

    def __enter__(self) -> AnimationDriver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _tick(self) -> None:
        if self._on_tick is None:
            return
        self._on_tick(self._clock.advance())

    def step(self) -> None:
        """Fire one tick now, running or not."""
        self._tick()

    def update(self, elapsed_ms: float) -> int:
        """Fire every tick that came due during ``elapsed_ms``. Returns the count."""
        if not self._running:
            return 0
        due = self._clock.accumulate(elapsed_ms)
        fired = 0
        for _ in range(due):
            self._tick()
            fired += 1
            if not self._running:
                break
        return fired

    def run(self, n: int) -> None:
        for _ in range(n):
            self._tick()

    def run_forever(self) -> None:
        """Start and tick at the clock's pace until paused or closed."""
        self.start()
        dt = self._clock.dt
        while self._running:
            start = time.monotonic()
            self._tick()
            if not self._running:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
