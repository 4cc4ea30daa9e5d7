"""Theme colors: palettes, the host-side lookup and the engine-side cache.

The engine never reads a palette directly. It is given a lookup callable
(``name -> color string``) and keeps the resolved values in a
:class:`ColorCache` until :meth:`ColorCache.invalidate` is called on a
theme change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

ColorLookup = Callable[[str], str]

COLOR_NAMES = ("bg", "text", "text-muted", "primary", "border", "surface")

PALETTES: Dict[str, Dict[str, str]] = {
    "light": {
        "bg": "#fafaf9",
        "text": "#1c1917",
        "text-muted": "#78716c",
        "primary": "#2563eb",
        "border": "#d6d3d1",
        "surface": "#f5f5f4",
    },
    "dark": {
        "bg": "#0c0a09",
        "text": "#e7e5e4",
        "text-muted": "#a8a29e",
        "primary": "#60a5fa",
        "border": "#44403c",
        "surface": "#1c1917",
    },
}


@dataclass(frozen=True)
class SceneColors:
    bg: str
    text: str
    text_muted: str
    primary: str
    border: str
    surface: str


class ThemeProvider:
    """Host-side color source holding the active palette name."""

    def __init__(self, theme: str = "dark") -> None:
        self.theme = theme if theme in PALETTES else "dark"

    def toggle(self) -> str:
        self.theme = "light" if self.theme == "dark" else "dark"
        return self.theme

    def lookup(self, name: str) -> str:
        return PALETTES[self.theme].get(name, "")


class ColorCache:
    """Resolved scene colors, read once per theme from a lookup callable."""

    def __init__(self, lookup: ColorLookup) -> None:
        self._lookup = lookup
        self._colors: Optional[SceneColors] = None
        self.reads = 0

    @property
    def colors(self) -> SceneColors:
        if self._colors is None:
            self._colors = self._read()
        return self._colors

    def invalidate(self) -> None:
        logger.debug("Color cache invalidated")
        self._colors = None

    def _read(self) -> SceneColors:
        self.reads += 1
        values = [str(self._lookup(name) or "").strip() for name in COLOR_NAMES]
        return SceneColors(*values)
