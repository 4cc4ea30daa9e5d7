"""Floating and flying things: whales, jellyfish, balloons, birds, ufos."""

from __future__ import annotations

import math

from explorer.figure.secondary import (
    balloon_sway,
    bird_flap,
    jelly_pulse,
    tentacle_sway,
    ufo_hover,
    whale_bob,
    whale_wag,
)
from explorer.render.frame import Frame, entity_alpha
from explorer.render.path import Path
from explorer.world.pool import EntityPool
from explorer.world.shapes import WHALE_BODY, WHALE_FIN, bezier_outline

_TWO_PI = math.pi * 2.0


class CreatureRenderer:
    def __init__(self) -> None:
        # reused outline holder for the whale body/fin
        self._outline = Path()

    def _fill_outline(self, frame: Frame, points) -> None:
        if len(points) < 3:
            return
        path = self._outline
        path.reset()
        path.polyline(points, close=True)
        frame.canvas.fill_path(path, translate=False)

    def draw_whales(self, frame: Frame, whales: EntityPool) -> None:
        c = frame.canvas
        for e in whales:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -120.0 or x > frame.width + 120.0:
                continue
            s = e.size
            cy = e.y + whale_bob(e.bob_phase)
            wag = whale_wag(e.bob_phase, s)
            alpha = entity_alpha(x, e.parallax, frame.width, 1.0)
            c.fill_style = frame.colors.text_muted
            c.global_alpha = alpha * 0.7
            self._fill_outline(frame, bezier_outline(WHALE_BODY, x, cy, s, wag))
            c.global_alpha = alpha * 0.55
            self._fill_outline(frame, bezier_outline(WHALE_FIN, x, cy, s, 0.0))
            # belly grooves
            c.stroke_style = frame.colors.surface
            c.global_alpha = alpha * 0.3
            c.line_width = 0.7
            c.begin_path()
            for g in range(3):
                gy = cy + s * (0.12 + g * 0.06)
                gs = x - s * (0.55 - g * 0.1)
                ge = x + s * (0.1 - g * 0.04)
                c.move_to(gs, gy)
                c.quadratic_curve_to((gs + ge) * 0.5, gy + s * 0.03, ge, gy)
            c.stroke()
        c.global_alpha = 1.0

    def draw_jellyfish(self, frame: Frame, jellies: EntityPool) -> None:
        c = frame.canvas
        for e in jellies:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -30.0 or x > frame.width + 30.0:
                continue
            s = e.size
            pulse = jelly_pulse(e.pulse_phase)
            bell_w = s * (0.7 + pulse)
            bell_h = s * (0.55 - pulse * 0.3)
            alpha = entity_alpha(x, e.parallax, frame.width, 0.55)
            c.fill_style = frame.colors.primary
            c.global_alpha = alpha * 0.5
            c.begin_path()
            c.ellipse(x, e.y, bell_w, bell_h, 0.0, math.pi, 0.0)
            c.fill()
            c.stroke_style = frame.colors.primary
            c.line_width = 0.8
            c.global_alpha = alpha * 0.7
            c.begin_path()
            c.ellipse(x, e.y, bell_w * 1.02, bell_h * 0.3, 0.0, 0.0, math.pi)
            c.stroke()

            count = e.tentacle_count
            if count == 0:
                continue
            c.stroke_style = frame.colors.text_muted
            c.line_width = 0.6
            c.line_cap = "round"
            c.global_alpha = alpha * 0.45
            spacing = (bell_w * 2.0) / (count + 1)
            lengths = e.tentacle_lengths
            c.begin_path()
            for t in range(count):
                tx = x - bell_w + spacing * (t + 1)
                tent_len = s * (lengths[t] if t < len(lengths) else 1.0)
                sway = tentacle_sway(e.tentacle_phases, t, frame.time, s, frame.wind)
                c.move_to(tx, e.y)
                c.quadratic_curve_to(tx + sway, e.y + tent_len * 0.5, tx + sway * 0.6, e.y + tent_len)
            c.stroke()
        c.global_alpha = 1.0

    def draw_balloons(self, frame: Frame, balloons: EntityPool) -> None:
        c = frame.canvas
        for e in balloons:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -30.0 or x > frame.width + 30.0:
                continue
            s = e.size
            bx = x + balloon_sway(e.sway_phase, frame.wind)
            alpha = entity_alpha(x, e.parallax, frame.width, 0.6)
            c.fill_style = frame.colors.primary
            c.global_alpha = alpha
            c.begin_path()
            c.ellipse(bx, e.y, s * 0.6, s * 0.75, 0.0, 0.0, _TWO_PI)
            c.fill()
            # ropes
            c.stroke_style = frame.colors.text_muted
            c.line_width = 0.8
            c.global_alpha = alpha * 0.83
            basket_y = e.y + s
            c.begin_path()
            c.move_to(bx - s * 0.3, e.y + s * 0.6)
            c.line_to(bx - 3.0, basket_y)
            c.move_to(bx + s * 0.3, e.y + s * 0.6)
            c.line_to(bx + 3.0, basket_y)
            c.stroke()
            # basket
            c.line_width = 1.2
            c.begin_path()
            c.rect(bx - 4.0, basket_y, 8.0, 5.0)
            c.stroke()
        c.global_alpha = 1.0

    def draw_birds(self, frame: Frame, birds: EntityPool) -> None:
        c = frame.canvas
        c.stroke_style = frame.colors.text_muted
        c.line_cap = "round"
        for e in birds:
            x = frame.screen_x(e.world_x, e.parallax) + e.formation_offset_x
            y = e.y + e.formation_offset_y
            if x < -20.0 or x > frame.width + 20.0:
                continue
            flap, rise = bird_flap(e.flap_phase)
            ws = e.wingspan
            c.line_width = 0.8 + ws * 0.06
            c.global_alpha = entity_alpha(x, e.parallax, frame.width, 0.7)
            c.begin_path()
            c.move_to(x - ws, y - rise - flap * ws * 0.5)
            c.line_to(x, y - rise)
            c.line_to(x + ws, y - rise - flap * ws * 0.5)
            c.stroke()
        c.global_alpha = 1.0

    def draw_ufos(self, frame: Frame, ufos: EntityPool) -> None:
        c = frame.canvas
        c.fill_style = frame.colors.primary
        for e in ufos:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -40.0 or x > frame.width + 40.0:
                continue
            s = e.size
            hover_y = e.y + ufo_hover(e.hover_phase, s)
            alpha = entity_alpha(x, e.parallax, frame.width, 1.0)
            c.global_alpha = alpha
            c.begin_path()
            c.ellipse(x, hover_y, 16.0 * s, 6.0 * s, 0.0, 0.0, _TWO_PI)
            c.fill()
            c.begin_path()
            c.arc(x, hover_y - 5.0 * s, 8.0 * s, math.pi, 0.0)
            c.fill()
            if e.has_tractor_beam:
                c.global_alpha = alpha * 0.15
                c.begin_path()
                c.move_to(x - 10.0 * s, hover_y + 6.0 * s)
                c.line_to(x + 10.0 * s, hover_y + 6.0 * s)
                c.line_to(x + 22.0 * s, frame.ground_y)
                c.line_to(x - 22.0 * s, frame.ground_y)
                c.close_path()
                c.fill()
        c.global_alpha = 1.0
