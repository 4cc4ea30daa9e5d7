"""Canvas-style 2D drawing on top of a pygame Surface.

The engine draws with a small path API (begin_path / move_to / arc / fill /
stroke) plus a ``global_alpha`` value, the way a browser 2D context works.
pygame has no notion of a global alpha, so translucent fills and strokes
are rendered onto a reusable SRCALPHA layer and blitted over the touched
rectangle only. Opaque draws go straight to the target surface.

Every ``fill()``/``stroke()`` call is counted in :attr:`Canvas.fill_calls`
and :attr:`Canvas.stroke_calls` so batching can be checked from tests.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from explorer.render.path import Path, Point

logger = logging.getLogger(__name__)

_FALLBACK_COLOR = pygame.Color(128, 128, 128)


@dataclass
class _State:
    fill_style: str
    stroke_style: str
    line_width: float
    line_cap: str
    line_join: str
    global_alpha: float
    tx: float
    ty: float


class Canvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.line_cap = "butt"
        self.line_join = "miter"
        self.global_alpha = 1.0
        self._tx = 0.0
        self._ty = 0.0
        self._stack: List[_State] = []
        self._path = Path()
        self._layer: Optional[pygame.Surface] = None
        self._colors: Dict[str, pygame.Color] = {}
        self.fill_calls = 0
        self.stroke_calls = 0

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------
    def save(self) -> None:
        self._stack.append(
            _State(
                self.fill_style,
                self.stroke_style,
                self.line_width,
                self.line_cap,
                self.line_join,
                self.global_alpha,
                self._tx,
                self._ty,
            )
        )

    def restore(self) -> None:
        if not self._stack:
            return
        s = self._stack.pop()
        self.fill_style = s.fill_style
        self.stroke_style = s.stroke_style
        self.line_width = s.line_width
        self.line_cap = s.line_cap
        self.line_join = s.line_join
        self.global_alpha = s.global_alpha
        self._tx = s.tx
        self._ty = s.ty

    def translate(self, dx: float, dy: float) -> None:
        self._tx += dx
        self._ty += dy

    def reset_counters(self) -> None:
        self.fill_calls = 0
        self.stroke_calls = 0

    # ------------------------------------------------------------------
    # current path (coordinates are translated on entry)
    # ------------------------------------------------------------------
    def begin_path(self) -> None:
        self._path.reset()

    def move_to(self, x: float, y: float) -> None:
        self._path.move_to(x + self._tx, y + self._ty)

    def line_to(self, x: float, y: float) -> None:
        self._path.line_to(x + self._tx, y + self._ty)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        tx, ty = self._tx, self._ty
        self._path.quadratic_curve_to(cpx + tx, cpy + ty, x + tx, y + ty)

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        tx, ty = self._tx, self._ty
        self._path.bezier_curve_to(c1x + tx, c1y + ty, c2x + tx, c2y + ty, x + tx, y + ty)

    def arc(
        self, cx: float, cy: float, r: float, start: float, end: float, anticlockwise: bool = False
    ) -> None:
        self._path.arc(cx + self._tx, cy + self._ty, r, start, end, anticlockwise)

    def ellipse(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        rotation: float,
        start: float,
        end: float,
        anticlockwise: bool = False,
    ) -> None:
        self._path.ellipse(
            cx + self._tx, cy + self._ty, rx, ry, rotation, start, end, anticlockwise
        )

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._path.rect(x + self._tx, y + self._ty, w, h)

    def close_path(self) -> None:
        self._path.close_path()

    def fill(self) -> None:
        self.fill_path(self._path, translate=False)

    def stroke(self) -> None:
        self.stroke_path(self._path, translate=False)

    # ------------------------------------------------------------------
    # drawing
    # ------------------------------------------------------------------
    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        color = self._color(self.fill_style)
        rect = pygame.Rect(int(x + self._tx), int(y + self._ty), math.ceil(w), math.ceil(h))
        alpha = self._effective_alpha(color)
        self.fill_calls += 1
        if alpha <= 0:
            return
        if alpha >= 255:
            self.surface.fill(color, rect)
            return
        layer = self._layer_for(self.surface)
        layer.fill((color.r, color.g, color.b, alpha), rect)
        self._compose(layer, rect)

    def fill_path(self, path: Path, translate: bool = True) -> None:
        """Fill every sub-path of ``path`` with :attr:`fill_style`."""
        self.fill_calls += 1
        self._render(path, translate, self._color(self.fill_style), fill=True)

    def stroke_path(self, path: Path, translate: bool = True) -> None:
        """Stroke every sub-path of ``path`` with :attr:`stroke_style`."""
        self.stroke_calls += 1
        self._render(path, translate, self._color(self.stroke_style), fill=False)

    # ------------------------------------------------------------------
    def _color(self, style: str) -> pygame.Color:
        color = self._colors.get(style)
        if color is None:
            try:
                color = pygame.Color(style)
            except (ValueError, TypeError):
                logger.warning("Unparsable color %r, using gray", style)
                color = _FALLBACK_COLOR
            self._colors[style] = color
        return color

    def _effective_alpha(self, color: pygame.Color) -> int:
        ga = self.global_alpha
        if not ga > 0.0:
            return 0
        return int(round(color.a * min(ga, 1.0)))

    def _layer_for(self, target: pygame.Surface) -> pygame.Surface:
        size = target.get_size()
        layer = self._layer
        if layer is None or layer.get_size() != size:
            layer = pygame.Surface(size, pygame.SRCALPHA)
            self._layer = layer
        return layer

    def _compose(self, layer: pygame.Surface, rect: pygame.Rect) -> None:
        rect = rect.clip(layer.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return
        self.surface.blit(layer, rect.topleft, area=rect)
        layer.fill((0, 0, 0, 0), rect)

    def _render(self, path: Path, translate: bool, color: pygame.Color, fill: bool) -> None:
        if path.empty:
            return
        alpha = self._effective_alpha(color)
        if alpha <= 0:
            return
        bounds = path.bounds()
        if bounds is None:
            return
        ox, oy = (self._tx, self._ty) if translate else (0.0, 0.0)
        width = max(1, int(round(self.line_width)))
        pad = width + 2
        rect = pygame.Rect(
            int(math.floor(bounds[0] + ox)) - pad,
            int(math.floor(bounds[1] + oy)) - pad,
            int(math.ceil(bounds[2] - bounds[0])) + 2 * pad + 1,
            int(math.ceil(bounds[3] - bounds[1])) + 2 * pad + 1,
        )
        if not rect.colliderect(self.surface.get_rect()):
            return

        if alpha >= 255:
            target = self.surface
            draw_color: Tuple[int, ...] = (color.r, color.g, color.b)
        else:
            target = self._layer_for(self.surface)
            draw_color = (color.r, color.g, color.b, alpha)

        round_caps = self.line_cap == "round" and width >= 2
        round_joins = self.line_join == "round" and width >= 2
        for pts, closed in path.subpaths():
            if ox or oy:
                pts = [(x + ox, y + oy) for x, y in pts]
            if fill:
                self._fill_points(target, draw_color, pts)
            else:
                self._stroke_points(
                    target, draw_color, pts, closed, width, round_caps, round_joins
                )

        if target is not self.surface:
            self._compose(target, rect)

    @staticmethod
    def _fill_points(target: pygame.Surface, color, pts: List[Point]) -> None:
        if len(pts) >= 3:
            pygame.draw.polygon(target, color, pts)
        elif pts:
            x, y = pts[0]
            target.fill(color, pygame.Rect(int(x), int(y), 1, 1))

    @staticmethod
    def _stroke_points(
        target: pygame.Surface,
        color,
        pts: List[Point],
        closed: bool,
        width: int,
        round_caps: bool,
        round_joins: bool = False,
    ) -> None:
        if len(pts) < 2:
            return
        pygame.draw.lines(target, color, closed and len(pts) > 2, pts, width)
        if round_caps:
            radius = width / 2.0
            if not closed:
                pygame.draw.circle(target, color, pts[0], radius)
                pygame.draw.circle(target, color, pts[-1], radius)
        if round_joins:
            radius = width / 2.0
            joints = pts if closed else pts[1:-1]
            for p in joints:
                pygame.draw.circle(target, color, p, radius)
