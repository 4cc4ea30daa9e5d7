"""Sky layer: stars, meteors and clouds.

Stars are the most numerous entities, so they are drawn in at most
:data:`BUCKETS` fills: each visible star's alpha is quantized to a tier and
all stars of a tier go into one path. Positions and alphas are staged in
preallocated numpy buffers sized to the star capacity.
"""

from __future__ import annotations

import math

import numpy as np

from explorer.config import BUCKETS
from explorer.figure.secondary import star_twinkle
from explorer.render.frame import Frame, entity_alpha
from explorer.world.pool import EntityPool

_TWO_PI = math.pi * 2.0


class SkyRenderer:
    def __init__(self, star_capacity: int) -> None:
        n = max(1, star_capacity)
        # x, y, radius per visible star
        self._star_buf = np.zeros((n, 3), dtype=np.float64)
        self._star_alpha = np.zeros(n, dtype=np.float64)

    # ------------------------------------------------------------------
    def collect_visible_stars(self, frame: Frame, stars: EntityPool) -> int:
        buf = self._star_buf
        alphas = self._star_alpha
        width = frame.width
        vis = 0
        for e in stars:
            if vis >= len(alphas):
                break
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -10.0 or x > width + 10.0:
                continue
            tw = star_twinkle(frame.time, e.twinkle_speed, e.twinkle_offset)
            buf[vis, 0] = x
            buf[vis, 1] = e.y
            buf[vis, 2] = e.size
            alphas[vis] = entity_alpha(x, e.parallax, width, tw)
            vis += 1
        return vis

    def star_buckets(self, vis: int) -> np.ndarray:
        """Alpha tier index for each of the first ``vis`` staged stars."""
        tiers = np.floor(self._star_alpha[:vis] * BUCKETS).astype(np.int64)
        return np.clip(tiers, 0, BUCKETS - 1)

    def draw_stars(self, frame: Frame, stars: EntityPool) -> None:
        c = frame.canvas
        vis = self.collect_visible_stars(frame, stars)
        if vis == 0:
            return
        tiers = self.star_buckets(vis)
        buf = self._star_buf
        c.fill_style = frame.colors.text_muted
        for b in range(BUCKETS):
            members = np.flatnonzero(tiers == b)
            if members.size == 0:
                continue
            c.global_alpha = (b + 0.5) / BUCKETS
            c.begin_path()
            for j in members:
                sx, sy, sr = buf[j]
                c.move_to(sx + sr, sy)
                c.arc(sx, sy, sr, 0.0, _TWO_PI)
            c.fill()
        c.global_alpha = 1.0

    def draw_meteors(self, frame: Frame, meteors: EntityPool) -> None:
        c = frame.canvas
        primary = frame.colors.primary
        for e in meteors:
            x = frame.screen_x(e.world_x, e.parallax)
            opacity = e.life / e.max_life if e.max_life > 0 else 0.0
            ms = e.tail_len / 50.0
            tdx = math.cos(e.angle) * e.tail_len * 1.5
            tdy = math.sin(e.angle) * e.tail_len * 1.5
            alpha = entity_alpha(x, e.parallax, frame.width, opacity)
            if alpha <= 0.0:
                continue
            c.stroke_style = primary
            c.line_cap = "round"
            # outer tail
            c.line_width = 1.5 + ms
            c.global_alpha = alpha * 0.4
            c.begin_path()
            c.move_to(x, e.y)
            c.line_to(x + tdx, e.y - tdy)
            c.stroke()
            # inner tail
            c.line_width = 1.0 + ms * 0.7
            c.global_alpha = alpha * 0.8
            c.begin_path()
            c.move_to(x, e.y)
            c.line_to(x + tdx * 0.5, e.y - tdy * 0.5)
            c.stroke()
            # glow and head
            c.fill_style = primary
            c.global_alpha = alpha * 0.4
            c.begin_path()
            c.arc(x, e.y, 2.0 + ms * 2.0, 0.0, _TWO_PI)
            c.fill()
            c.global_alpha = alpha
            c.begin_path()
            c.arc(x, e.y, 1.0 + ms, 0.0, _TWO_PI)
            c.fill()
        c.global_alpha = 1.0

    def draw_clouds(self, frame: Frame, clouds: EntityPool) -> None:
        c = frame.canvas
        c.fill_style = frame.colors.text_muted
        for e in clouds:
            x = frame.screen_x(e.world_x, e.parallax)
            if x < -60.0 or x > frame.width + 60.0 or e.path is None:
                continue
            c.global_alpha = entity_alpha(x, e.parallax, frame.width, e.base_opacity)
            c.save()
            c.translate(x, e.y)
            c.fill_path(e.path)
            c.restore()
        c.global_alpha = 1.0
