"""Ground layer: mountains, the ground line, pebbles and grass tufts.

Pebbles and grass are batched: everything clear of the fade band goes into
a single path drawn with one fill (or stroke). Only the few entities inside
the band are drawn individually, each with its own alpha.
"""

from __future__ import annotations

import math

from explorer.config import FADE
from explorer.figure.secondary import blade_angle
from explorer.render.canvas import Canvas
from explorer.render.frame import Frame, entity_alpha
from explorer.world.pool import EntityPool

_TWO_PI = math.pi * 2.0
GRASS_ALPHA = 0.45
PEBBLE_ALPHA = 0.4


def _add_blades(c: Canvas, x: float, y: float, e, wind: float) -> None:
    count = e.blade_count
    for j in range(count):
        angle = blade_angle(e.blade_angles, j, wind)
        bx = x + (j - (count - 1) * 0.5) * 3.0
        c.move_to(bx, y)
        c.line_to(bx + math.sin(angle) * e.blade_height, y - math.cos(angle) * e.blade_height)


class GroundRenderer:
    def draw_mountains(self, frame: Frame, mountains: EntityPool) -> None:
        c = frame.canvas
        for e in mountains:
            x = frame.screen_x(e.world_x, e.parallax)
            if x + e.right_width < -10.0 or x - e.left_width > frame.width + 10.0:
                continue
            if e.path is None:
                continue
            c.global_alpha = entity_alpha(x, e.parallax, frame.width, 1.0)
            c.save()
            c.translate(x, e.y)
            c.fill_style = frame.colors.border
            c.fill_path(e.path)
            c.stroke_style = frame.colors.text_muted
            c.line_width = 1.0
            c.stroke_path(e.path)
            c.restore()
        c.global_alpha = 1.0

    def draw_ground_line(self, frame: Frame) -> None:
        c = frame.canvas
        c.stroke_style = frame.colors.border
        c.line_width = 1.0
        c.global_alpha = 1.0
        c.begin_path()
        c.move_to(0.0, frame.ground_y)
        c.line_to(frame.width, frame.ground_y)
        c.stroke()

    def draw_pebbles(self, frame: Frame, pebbles: EntityPool) -> None:
        c = frame.canvas
        width = frame.width
        c.fill_style = frame.colors.text_muted
        c.global_alpha = PEBBLE_ALPHA
        c.begin_path()
        batched = False
        for e in pebbles:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -5.0 or x > width + 5.0 or width - x < FADE:
                continue
            c.move_to(x + e.radius, e.y)
            c.arc(x, e.y, e.radius, 0.0, _TWO_PI)
            batched = True
        if batched:
            c.fill()
        for e in pebbles:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -5.0 or x > width + 5.0 or width - x >= FADE:
                continue
            c.global_alpha = entity_alpha(x, e.parallax, width, PEBBLE_ALPHA)
            c.begin_path()
            c.arc(x, e.y, e.radius, 0.0, _TWO_PI)
            c.fill()
        c.global_alpha = 1.0

    def draw_grass(self, frame: Frame, tufts: EntityPool) -> None:
        c = frame.canvas
        width = frame.width
        c.stroke_style = frame.colors.text_muted
        c.line_width = 0.8
        c.line_cap = "round"
        c.global_alpha = GRASS_ALPHA
        c.begin_path()
        batched = False
        for e in tufts:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -15.0 or x > width + 15.0 or width - x < FADE:
                continue
            _add_blades(c, x, e.y, e, frame.wind)
            batched = True
        if batched:
            c.stroke()
        for e in tufts:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -15.0 or x > width + 15.0 or width - x >= FADE:
                continue
            c.global_alpha = entity_alpha(x, e.parallax, width, GRASS_ALPHA)
            c.begin_path()
            _add_blades(c, x, e.y, e, frame.wind)
            c.stroke()
        c.global_alpha = 1.0
