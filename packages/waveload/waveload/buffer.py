"""ElementBuffer - fixed-size ring of element slots with overscan."""

from __future__ import annotations

from waveload.types import GHOST_ALPHA_MIN_DEFAULT, Element


class ElementBuffer:
    """Holds ``visible_length`` drawn slots plus ``wave_length - 1`` overscan
    slots on each side, so the wave can enter and leave the window smoothly.

    The length only changes through :meth:`resize`, which reallocates every
    element.
    """

    def __init__(
        self,
        visible_length: int,
        wave_length: int,
        alpha: int = GHOST_ALPHA_MIN_DEFAULT,
    ) -> None:
        self._elements: list[Element] = []
        self._visible_length = 0
        self._wave_length = 0
        self._display_start = 0
        self._display_end = 0
        self.resize(visible_length, wave_length, alpha)

    @property
    def elements(self) -> list[Element]:
        return self._elements

    @property
    def visible_length(self) -> int:
        return self._visible_length

    @property
    def wave_length(self) -> int:
        return self._wave_length

    @property
    def display_start(self) -> int:
        return self._display_start

    @property
    def display_end(self) -> int:
        return self._display_end

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> Element:
        return self._elements[index]

    def resize(
        self,
        visible_length: int,
        wave_length: int,
        alpha: int = GHOST_ALPHA_MIN_DEFAULT,
    ) -> ElementBuffer:
        total = visible_length + (wave_length - 1) * 2
        self._elements = [Element(alpha=alpha) for _ in range(total)]
        self._visible_length = visible_length
        self._wave_length = wave_length
        self._display_start = wave_length - 1
        self._display_end = self._display_start + visible_length
        return self

    def assign_x(self, element_width: int, interval: int, left_padding: int = 0) -> None:
        """Lay out the drawn window left to right. Overscan keeps x = 0."""
        for offset in range(self._visible_length):
            x = left_padding + (element_width + interval) * offset
            self._elements[self._display_start + offset].x = x

    def visible(self) -> list[Element]:
        start = self._display_start
        return self._elements[start:start + self._visible_length]

    def snapshot(self) -> list[tuple[int, int, int]]:
        return [(e.x, e.y, e.alpha) for e in self._elements]
