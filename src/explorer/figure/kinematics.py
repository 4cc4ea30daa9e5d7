"""Walking-figure kinematics.

The gait is parametrized by a normalized phase ``t`` in [0, 1): the first
60% of a stride is stance (the foot slides back under the hip), the rest is
swing (the foot lifts and is carried forward along a smoothstep-like
curve). Legs run half a stride apart. Knees are placed with two-bone IK,
arms with forward kinematics driven by the same gait phase.

Everything here is pure math on floats; the renderer only reads the
resulting :class:`Pose`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from explorer.config import (
    ARM_SWING,
    FOOT_LIFT,
    FOREARM_SWING,
    HEAD_R,
    HIP_BOB,
    L_ARM,
    L_LEG,
    LEAN,
    NECK,
    STATIC_ELBOW_SPREAD,
    STATIC_FOOT_SPREAD,
    STATIC_HAND_SPREAD,
    STATIC_KNEE_DROP,
    STATIC_KNEE_SPREAD,
    STRIDE,
    TORSO,
    TWIST,
    U_ARM,
    U_LEG,
)

Point = Tuple[float, float]

STANCE = 0.6
_SWING_RATE = 1.0 / (1.0 - STANCE)
_TWO_PI = math.pi * 2.0
_EPS = 1e-9


def _wrap(t: float) -> float:
    if not math.isfinite(t):
        return 0.0
    return t % 1.0


def foot_path_x(t: float, half_span: float = STRIDE) -> float:
    """Horizontal foot offset from the hip over one stride (period 1)."""
    t = _wrap(t)
    if t < STANCE:
        # +half_span -> -half_span across the stance
        return half_span * (1.0 - t / (STANCE * 0.5))
    s = (t - STANCE) * _SWING_RATE
    return half_span * (6.0 * s * s - 4.0 * s * s * s - 1.0)


def foot_lift_y(t: float, max_lift: float = FOOT_LIFT) -> float:
    """Foot height above the ground; zero in stance, half-sine in swing."""
    t = _wrap(t)
    if t < STANCE:
        return 0.0
    return max(0.0, math.sin((t - STANCE) * _SWING_RATE * math.pi) * max_lift)


def leg_ik(
    hip_x: float,
    hip_y: float,
    foot_x: float,
    foot_y: float,
    upper: float = U_LEG,
    lower: float = L_LEG,
) -> Tuple[float, float, float, float]:
    """Solve a two-bone leg; returns ``(knee_x, knee_y, foot_x, foot_y)``.

    The foot target is pulled into the reachable annulus
    ``[|upper - lower|, upper + lower]`` around the hip, so the returned foot
    may differ from the target when it is out of reach. The knee bends
    towards +x (the walking direction). A target on top of the hip solves
    as if the foot were straight below.
    """
    dx = foot_x - hip_x
    dy = foot_y - hip_y
    d = math.hypot(dx, dy)
    if not math.isfinite(d):
        dx, dy, d = 0.0, 0.0, 0.0
    if d > _EPS:
        ux, uy = dx / d, dy / d
    else:
        ux, uy = 0.0, 1.0

    reach = min(max(d, abs(upper - lower)), upper + lower)
    fx = hip_x + ux * reach
    fy = hip_y + uy * reach

    if reach > _EPS:
        a = (upper * upper - lower * lower + reach * reach) / (2.0 * reach)
    else:
        a = 0.0
    h = math.sqrt(max(upper * upper - a * a, 0.0))
    # perpendicular (uy, -ux) points forward when the foot is below the hip
    kx = hip_x + ux * a + uy * h
    ky = hip_y + uy * a - ux * h
    return kx, ky, fx, fy


def arm_fk(
    shoulder_x: float, shoulder_y: float, side: float, phase: float
) -> Tuple[float, float, float, float]:
    """Swinging arm; returns ``(elbow_x, elbow_y, hand_x, hand_y)``.

    ``side`` is -1 for the left arm and +1 for the right.
    """
    upper = side * math.cos(phase - 0.3) * ARM_SWING
    ex = shoulder_x + math.sin(upper) * U_ARM
    ey = shoulder_y + math.cos(upper) * U_ARM
    fore = side * math.cos(phase - 0.6) * ARM_SWING * FOREARM_SWING
    return ex, ey, ex + math.sin(fore) * L_ARM, ey + math.cos(fore) * L_ARM


@dataclass
class Pose:
    hip: Point = (0.0, 0.0)
    shoulder: Point = (0.0, 0.0)
    neck: Point = (0.0, 0.0)
    head: Point = (0.0, 0.0)
    left_knee: Point = (0.0, 0.0)
    right_knee: Point = (0.0, 0.0)
    left_foot: Point = (0.0, 0.0)
    right_foot: Point = (0.0, 0.0)
    left_elbow: Point = (0.0, 0.0)
    right_elbow: Point = (0.0, 0.0)
    left_hand: Point = (0.0, 0.0)
    right_hand: Point = (0.0, 0.0)


def leg_room() -> float:
    """Standing hip height above the feet."""
    return U_LEG + L_LEG - 2.0


def static_pose(x: float, feet_y: float) -> Pose:
    """Reduced-motion pose: upright, symmetric, independent of time."""
    hip_y = feet_y - leg_room()
    sh_y = hip_y - TORSO
    nk_y = sh_y - NECK
    knee_y = hip_y + U_LEG - STATIC_KNEE_DROP
    hand_y = sh_y + U_ARM + L_ARM * 0.5
    return Pose(
        hip=(x, hip_y),
        shoulder=(x, sh_y),
        neck=(x, nk_y),
        head=(x, nk_y - HEAD_R),
        left_knee=(x - STATIC_KNEE_SPREAD, knee_y),
        right_knee=(x + STATIC_KNEE_SPREAD, knee_y),
        left_foot=(x - STATIC_FOOT_SPREAD, feet_y),
        right_foot=(x + STATIC_FOOT_SPREAD, feet_y),
        left_elbow=(x - STATIC_ELBOW_SPREAD, sh_y + U_ARM),
        right_elbow=(x + STATIC_ELBOW_SPREAD, sh_y + U_ARM),
        left_hand=(x - STATIC_HAND_SPREAD, hand_y),
        right_hand=(x + STATIC_HAND_SPREAD, hand_y),
    )


def walking_pose(x: float, feet_y: float, walk_phase: float) -> Pose:
    """Animated pose for gait phase ``walk_phase`` (radians)."""
    if not math.isfinite(walk_phase):
        walk_phase = 0.0
    left_t = (walk_phase % _TWO_PI) / _TWO_PI
    right_t = (left_t + 0.5) % 1.0
    bob = abs(math.sin(walk_phase * 2.0)) * HIP_BOB
    twist = math.sin(walk_phase) * TWIST
    lean = math.sin(LEAN)

    left_dx = foot_path_x(left_t)
    right_dx = foot_path_x(right_t)
    hip_x = x
    hip_y = feet_y - leg_room() - bob
    # a planted foot must stay reachable, or the IK clamp lifts it off the ground
    reach = U_LEG + L_LEG
    for t, dx in ((left_t, left_dx), (right_t, right_dx)):
        if foot_lift_y(t) == 0.0:
            hip_y = max(hip_y, feet_y - math.sqrt(max(reach * reach - dx * dx, 0.0)))
    sh_y = hip_y - TORSO
    nk_y = sh_y - NECK
    hd_y = nk_y - HEAD_R - bob * 0.15
    sh_x = x + lean * TORSO + twist
    nk_x = x + lean * (TORSO + NECK) + twist * 0.5
    hd_x = x + lean * (TORSO + NECK + HEAD_R) + twist * 0.25

    lk_x, lk_y, lf_x, lf_y = leg_ik(
        hip_x, hip_y, hip_x + left_dx, feet_y - foot_lift_y(left_t)
    )
    rk_x, rk_y, rf_x, rf_y = leg_ik(
        hip_x, hip_y, hip_x + right_dx, feet_y - foot_lift_y(right_t)
    )
    le_x, le_y, lh_x, lh_y = arm_fk(sh_x, sh_y, -1.0, walk_phase)
    re_x, re_y, rh_x, rh_y = arm_fk(sh_x, sh_y, 1.0, walk_phase)

    return Pose(
        hip=(hip_x, hip_y),
        shoulder=(sh_x, sh_y),
        neck=(nk_x, nk_y),
        head=(hd_x, hd_y),
        left_knee=(lk_x, lk_y),
        right_knee=(rk_x, rk_y),
        left_foot=(lf_x, lf_y),
        right_foot=(rf_x, rf_y),
        left_elbow=(le_x, le_y),
        right_elbow=(re_x, re_y),
        left_hand=(lh_x, lh_y),
        right_hand=(rh_x, rh_y),
    )


def solve_pose(x: float, feet_y: float, walk_phase: float, reduced_motion: bool) -> Pose:
    if reduced_motion:
        return static_pose(x, feet_y)
    return walking_pose(x, feet_y, walk_phase)
