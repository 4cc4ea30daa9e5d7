"""Polyline paths with canvas-style construction.

A :class:`Path` collects sub-paths built from lines, arcs, ellipses and
quadratic/cubic Bezier segments. Curves are flattened on the fly using
precomputed Bernstein bases, so a path is always a list of point lists
ready for ``pygame.draw``. Paths double as the precomputed outlines stored
on cloud and mountain records.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]

CURVE_SAMPLES = 8
_TWO_PI = math.pi * 2.0


def _bernstein(degree: int, samples: int) -> np.ndarray:
    # t = 0 is skipped: the segment starts at the current point
    t = np.linspace(1.0 / samples, 1.0, samples)
    u = 1.0 - t
    if degree == 2:
        return np.stack([u * u, 2.0 * u * t, t * t], axis=1)
    return np.stack([u * u * u, 3.0 * u * u * t, 3.0 * u * t * t, t * t * t], axis=1)


QUAD_BASIS = _bernstein(2, CURVE_SAMPLES)
CUBIC_BASIS = _bernstein(3, CURVE_SAMPLES)


def arc_segments(radius: float, sweep: float) -> int:
    """Number of chords used to approximate an arc."""
    n = int(abs(sweep) * max(radius, 0.0) * 0.5) + 6
    return max(6, min(n, 64))


def arc_points(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    end: float,
    rotation: float = 0.0,
    anticlockwise: bool = False,
) -> List[Point]:
    """Sample an elliptical arc from ``start`` to ``end`` (radians)."""
    sweep = end - start
    if anticlockwise:
        if sweep > 0.0:
            sweep -= _TWO_PI * math.ceil(sweep / _TWO_PI)
        sweep = max(sweep, -_TWO_PI)
    else:
        if sweep < 0.0:
            sweep += _TWO_PI * math.ceil(-sweep / _TWO_PI)
        sweep = min(sweep, _TWO_PI)
    n = arc_segments(max(rx, ry), sweep)
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    pts: List[Point] = []
    for i in range(n + 1):
        a = start + sweep * i / n
        ex = math.cos(a) * rx
        ey = math.sin(a) * ry
        pts.append((cx + ex * cos_r - ey * sin_r, cy + ex * sin_r + ey * cos_r))
    return pts


class Path:
    def __init__(self) -> None:
        self._subpaths: List[List[Point]] = []
        self._closed: List[bool] = []
        self._current: Optional[List[Point]] = None
        self._reopen: Optional[Point] = None

    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._subpaths.clear()
        self._closed.clear()
        self._current = None
        self._reopen = None

    def _ensure(self, x: float, y: float) -> List[Point]:
        if self._current is None:
            self.move_to(*(self._reopen or (x, y)))
        return self._current  # type: ignore[return-value]

    def _last(self) -> Point:
        cur = self._current
        if not cur:
            return (0.0, 0.0)
        return cur[-1]

    def move_to(self, x: float, y: float) -> None:
        self._current = [(float(x), float(y))]
        self._subpaths.append(self._current)
        self._closed.append(False)

    def line_to(self, x: float, y: float) -> None:
        self._ensure(x, y).append((float(x), float(y)))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        cur = self._ensure(cpx, cpy)
        x0, y0 = self._last()
        ctrl = np.array([[x0, y0], [cpx, cpy], [x, y]], dtype=np.float64)
        cur.extend(map(tuple, (QUAD_BASIS @ ctrl).tolist()))

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        cur = self._ensure(c1x, c1y)
        x0, y0 = self._last()
        ctrl = np.array([[x0, y0], [c1x, c1y], [c2x, c2y], [x, y]], dtype=np.float64)
        cur.extend(map(tuple, (CUBIC_BASIS @ ctrl).tolist()))

    def arc(
        self,
        cx: float,
        cy: float,
        r: float,
        start: float,
        end: float,
        anticlockwise: bool = False,
    ) -> None:
        self.ellipse(cx, cy, r, r, 0.0, start, end, anticlockwise)

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
        pts = arc_points(cx, cy, abs(rx), abs(ry), start, end, rotation, anticlockwise)
        if self._current is None:
            self.move_to(*pts[0])
            self._current.extend(pts[1:])  # type: ignore[union-attr]
        else:
            self._current.extend(pts)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.move_to(x, y)
        self.line_to(x + w, y)
        self.line_to(x + w, y + h)
        self.line_to(x, y + h)
        self.close_path()

    def polyline(self, points: Sequence[Sequence[float]], close: bool = True) -> None:
        """Append a precomputed point sequence as its own sub-path."""
        pts = [(float(p[0]), float(p[1])) for p in points]
        if not pts:
            return
        self._current = pts
        self._subpaths.append(pts)
        self._closed.append(close)
        if close:
            self._reopen = pts[0]
            self._current = None

    def close_path(self) -> None:
        if self._current is None:
            return
        self._closed[-1] = True
        self._reopen = self._current[0]
        # A following segment starts a new sub-path at the same point
        self._current = None

    # ------------------------------------------------------------------
    @property
    def empty(self) -> bool:
        return not self._subpaths

    def subpaths(self):
        """Yield ``(points, closed)`` for every sub-path."""
        return zip(self._subpaths, self._closed)

    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Return ``(min_x, min_y, max_x, max_y)`` or ``None`` when empty."""
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for pts in self._subpaths:
            for x, y in pts:
                if x < min_x:
                    min_x = x
                if x > max_x:
                    max_x = x
                if y < min_y:
                    min_y = y
                if y > max_y:
                    max_y = y
        if min_x == math.inf:
            return None
        return min_x, min_y, max_x, max_y
