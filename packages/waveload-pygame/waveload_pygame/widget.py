"""WaveWidget - a WaveLoader bound to its own pygame surface."""
from __future__ import annotations

import pygame

from waveload import WaveConfig, WaveLoader
from waveload_pygame.renderer import FontCache, render


class WaveWidget:
    """Owns a transparent surface sized to the loader and redraws it only
    after the loader invalidates. Closing the widget closes the loader, which
    releases its animation driver.
    """

    def __init__(self, loader: WaveLoader, fonts: FontCache | None = None) -> None:
        self._loader = loader
        self._fonts = fonts if fonts is not None else FontCache()
        self._surface = pygame.Surface(loader.size, pygame.SRCALPHA)
        self._dirty = True
        self._closed = False
        loader.on_invalidate(self._mark_dirty)

    @classmethod
    def from_config(cls, config: WaveConfig, fonts: FontCache | None = None) -> WaveWidget:
        return cls(WaveLoader(config), fonts)

    @property
    def loader(self) -> WaveLoader:
        return self._loader

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def closed(self) -> bool:
        return self._closed

    def _mark_dirty(self, loader: WaveLoader) -> None:
        self._dirty = True

    def start(self) -> None:
        self._loader.start()

    def pause(self) -> None:
        self._loader.pause()

    def update(self, dt_ms: float) -> int:
        return self._loader.update(dt_ms)

    def render(self) -> pygame.Surface:
        if self._dirty and not self._closed:
            if self._surface.get_size() != self._loader.size:
                self._surface = pygame.Surface(self._loader.size, pygame.SRCALPHA)
            self._surface.fill((0, 0, 0, 0))
            render(self._surface, self._loader.frame(), self._fonts)
            self._dirty = False
        return self._surface

    def draw(self, target: pygame.Surface, pos: tuple[int, int]) -> None:
        target.blit(self.render(), pos)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._loader.close()

    def __enter__(self) -> WaveWidget:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
