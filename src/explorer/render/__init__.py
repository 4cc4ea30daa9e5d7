"""Rendering package.

Only the leaf modules are re-exported here; the layer renderers import the
``world`` package and are imported from their own modules.
"""

from .canvas import Canvas
from .colors import ColorCache, SceneColors, ThemeProvider
from .path import Path

__all__ = ["Canvas", "ColorCache", "SceneColors", "ThemeProvider", "Path"]
