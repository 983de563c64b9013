"""waveload-pygame - Draws waveload frames with pygame."""
from __future__ import annotations

from waveload_pygame.renderer import FontCache, render
from waveload_pygame.widget import WaveWidget

__all__ = ["WaveWidget", "FontCache", "render"]
