"""Simple text rendering onto a pygame Surface.

Provides a small API to draw 2D text in screen space on top of the scene.
Rendered glyph surfaces are cached and dynamic labels (e.g., FPS) reuse a
keyed slot that is only re-rendered when the text changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

Color = Tuple[int, int, int, int]


@dataclass
class _TextSlot:
    surface: Optional[pygame.Surface]
    last_text: str | None = None
    last_color: Color | None = None


class TextRenderer:
    """Screen-space text drawn with pygame.font.

    - draw_text() can take a `key` to reuse a slot for dynamic text (FPS).
    - Without a key, content is cached by (text, color) and reused.
    """

    def __init__(
        self,
        font: Optional[pygame.font.Font] = None,
        size: int = 20,
    ) -> None:
        if font is None and not pygame.font.get_init():
            pygame.font.init()
        self.font = font or pygame.font.Font(None, size)
        self._cache: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._slots: Dict[str, _TextSlot] = {}

    def _render(self, text: str, color: Color, key: Optional[str]) -> pygame.Surface:
        if key is None:
            surf = self._cache.get((text, color))
            if surf is None:
                surf = self.font.render(text, True, color)
                self._cache[(text, color)] = surf
            return surf
        slot = self._slots.get(key)
        if slot is None:
            slot = _TextSlot(surface=None)
            self._slots[key] = slot
        if slot.surface is None or slot.last_text != text or slot.last_color != color:
            slot.surface = self.font.render(text, True, color)
            slot.last_text = text
            slot.last_color = color
        return slot.surface

    def draw_text(
        self,
        target: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single line of text onto ``target`` at screen coords.

        align: 'topleft' | 'topright' | 'bottomleft' | 'bottomright' | 'center'
        """
        surf = self._render(text, color, key)
        w, h = surf.get_size()
        if align == "topright":
            draw_x, draw_y = x - w, y
        elif align == "bottomleft":
            draw_x, draw_y = x, y - h
        elif align == "bottomright":
            draw_x, draw_y = x - w, y - h
        elif align == "center":
            draw_x, draw_y = x - w / 2, y - h / 2
        else:  # topleft
            draw_x, draw_y = x, y
        target.blit(surf, (int(draw_x), int(draw_y)))
        return w, h
