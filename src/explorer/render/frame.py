"""Per-draw snapshot shared by the layer renderers, plus edge fading."""

from __future__ import annotations

from dataclasses import dataclass

from explorer.config import FADE
from explorer.render.canvas import Canvas
from explorer.render.colors import SceneColors


@dataclass
class Frame:
    canvas: Canvas
    colors: SceneColors
    width: float
    height: float
    ground_y: float
    world_offset: float
    # animation clock; frozen at 0 under reduced motion
    time: float
    wind: float

    def screen_x(self, world_x: float, parallax: float) -> float:
        return world_x - self.world_offset * parallax


def edge_fade(screen_x: float, width: float) -> float:
    """Fade factor: 1 away from the right edge, ramping to 0 within FADE px.

    Anything at or beyond the right edge is fully transparent so entities
    fade in instead of popping into view.
    """
    edge = width - screen_x
    if edge >= FADE:
        return 1.0
    if edge <= 0.0:
        return 0.0
    return edge / FADE


def entity_alpha(screen_x: float, parallax: float, width: float, base: float) -> float:
    """Opacity for an entity: base, dimmed with depth, faded at the edge."""
    return base * (0.3 + 0.7 * parallax) * edge_fade(screen_x, width)
