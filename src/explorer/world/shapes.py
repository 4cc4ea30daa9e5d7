"""Procedural outlines for clouds, mountains and the whale.

Cloud and mountain outlines are built once when a record is acquired and
stored on it as a :class:`~explorer.render.path.Path`, relative to the
record's anchor. The whale body and fin are fixed control-point arrays of
cubic Bezier segments; a single ``wag`` scalar bends them per frame.

Control-point layout: ``[x0, y0]`` followed by one 9-float block per
segment ``[c1x, c1y, c1_wag, c2x, c2y, c2_wag, ex, ey, e_wag]``. The wag
weight scales the vertical offset applied to that point. Coordinates are in
units of the creature size.
"""

from __future__ import annotations

import math
import random

import numpy as np

from explorer.render.path import CUBIC_BASIS, Path

_TWO_PI = math.pi * 2.0

# fmt: off
WHALE_BODY = np.array([
    -0.95, 0.02,
    -0.92, -0.12, 0, -0.75, -0.32, 0, -0.45, -0.36, 0,
    -0.15, -0.38, 0, 0.2, -0.34, 0, 0.45, -0.26, 0,
    0.52, -0.24, 0, 0.55, -0.3, 0, 0.58, -0.24, 0,
    0.72, -0.16, 0.25, 0.88, -0.06, 0.5, 0.98, -0.02, 0.7,
    1.06, -0.04, 0.85, 1.18, -0.18, 1, 1.28, -0.26, 1,
    1.3, -0.22, 1, 1.26, -0.14, 0.9, 1.12, -0.04, 0.75,
    1.06, 0, 0.7, 1.06, 0.02, 0.7, 1.12, 0.06, 0.75,
    1.26, 0.16, 0.9, 1.3, 0.24, 1, 1.28, 0.28, 1,
    1.18, 0.2, 1, 1.06, 0.08, 0.85, 0.98, 0.04, 0.7,
    0.85, 0.1, 0.25, 0.65, 0.2, 0, 0.4, 0.28, 0,
    0.1, 0.34, 0, -0.25, 0.36, 0, -0.55, 0.3, 0,
    -0.78, 0.24, 0, -0.92, 0.14, 0, -0.95, 0.02, 0,
], dtype=np.float64)

WHALE_FIN = np.array([
    -0.3, 0.2,
    -0.38, 0.32, 0, -0.52, 0.42, 0, -0.62, 0.38, 0,
    -0.58, 0.32, 0, -0.44, 0.26, 0, -0.3, 0.2, 0,
], dtype=np.float64)
# fmt: on


def _segments(data: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Split a control array into its start point and ``(n, 9)`` blocks.

    Missing values read as 0, so truncated arrays still produce a shape.
    """
    data = np.asarray(data, dtype=np.float64).ravel()
    start = np.zeros(2)
    start[: min(2, data.size)] = data[:2]
    body = data[2:]
    if body.size == 0:
        return start, np.zeros((0, 9))
    blocks = math.ceil(body.size / 9)
    padded = np.zeros(blocks * 9)
    padded[: body.size] = body
    return start, padded.reshape(blocks, 9)


def bezier_outline(
    data: np.ndarray, x: float, cy: float, size: float, wag: float
) -> np.ndarray:
    """Flatten a wag-able control array to screen points, shape ``(m, 2)``.

    Returns an empty array when the data holds no segments.
    """
    start, seg = _segments(data)
    if seg.shape[0] == 0:
        return np.zeros((0, 2))
    # (n, 3) control points after applying scale, offset and wag
    cx = x + size * seg[:, [0, 3, 6]]
    cyy = cy + size * seg[:, [1, 4, 7]] + wag * seg[:, [2, 5, 8]]
    # each segment starts at the previous segment's end
    px = np.concatenate(([x + size * start[0]], cx[:-1, 2]))
    py = np.concatenate(([cy + size * start[1]], cyy[:-1, 2]))
    ctrl_x = np.column_stack((px, cx))  # (n, 4)
    ctrl_y = np.column_stack((py, cyy))
    xs = ctrl_x @ CUBIC_BASIS.T  # (n, samples)
    ys = ctrl_y @ CUBIC_BASIS.T
    out = np.empty((xs.size + 1, 2))
    out[0] = (px[0], py[0])
    out[1:, 0] = xs.ravel()
    out[1:, 1] = ys.ravel()
    return out


def cloud_path(rng: random.Random, r: float) -> Path:
    """Five overlapping puffs around the origin."""
    radii = (
        r * rng.uniform(0.8, 0.95),
        r * rng.uniform(0.9, 1.0),
        r * rng.uniform(0.8, 0.95),
        r * rng.uniform(0.7, 0.9),
        r * rng.uniform(0.65, 0.85),
    )
    offsets = (
        (-r * 1.1, 0.0),
        (0.0, 0.0),
        (r * 1.1, 0.0),
        (-r * 0.5, -r * 0.7),
        (r * 0.4, -r * 0.65),
    )
    path = Path()
    for (ox, oy), cr in zip(offsets, radii):
        path.move_to(ox + cr, oy)
        path.arc(ox, oy, cr, 0.0, _TWO_PI)
        path.close_path()
    return path


def mountain_path(
    h: float,
    w_left: float,
    w_right: float,
    left_dx: float,
    left_dy: float,
    right_dx: float,
    right_dy: float,
) -> Path:
    """Peak of height ``h`` with quadratic flanks, base on y = 0."""
    path = Path()
    path.move_to(-w_left, 0.0)
    path.quadratic_curve_to(-w_left * 0.5 + left_dx, -left_dy, 0.0, -h)
    path.quadratic_curve_to(w_right * 0.5 + right_dx, -right_dy, w_right, 0.0)
    path.close_path()
    return path
