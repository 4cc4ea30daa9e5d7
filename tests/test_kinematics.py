"""Tests for the gait curves, two-bone leg IK and pose solving."""

import math

import numpy as np
import pytest

from explorer.config import FOOT_LIFT, L_LEG, STRIDE, U_LEG
from explorer.figure.kinematics import (
    STANCE,
    Pose,
    foot_lift_y,
    foot_path_x,
    leg_ik,
    solve_pose,
    static_pose,
)

SAMPLES = np.linspace(-3.0, 3.0, 241)


def _dist(ax, ay, bx, by):
    return math.hypot(bx - ax, by - ay)


class TestGaitCurves:
    @pytest.mark.parametrize("t", SAMPLES)
    def test_foot_path_is_periodic(self, t):
        assert foot_path_x(t) == pytest.approx(foot_path_x(t + 1.0), abs=1e-9)
        assert foot_path_x(t) == pytest.approx(foot_path_x(t - 2.0), abs=1e-9)

    @pytest.mark.parametrize("t", SAMPLES)
    def test_foot_lift_is_periodic_and_non_negative(self, t):
        lift = foot_lift_y(t)
        assert lift >= 0.0
        assert lift == pytest.approx(foot_lift_y(t + 1.0), abs=1e-9)

    def test_foot_is_grounded_during_stance(self):
        for t in np.linspace(0.0, STANCE, 20, endpoint=False):
            assert foot_lift_y(t) == 0.0

    def test_foot_lift_peaks_mid_swing(self):
        mid = STANCE + (1.0 - STANCE) / 2.0
        assert foot_lift_y(mid) == pytest.approx(FOOT_LIFT)

    def test_foot_path_spans_stride(self):
        assert foot_path_x(0.0) == pytest.approx(STRIDE)
        assert foot_path_x(STANCE) == pytest.approx(-STRIDE)
        # continuous across the period boundary
        assert foot_path_x(0.999999) == pytest.approx(STRIDE, abs=1e-4)

    @pytest.mark.parametrize("t", [math.nan, math.inf, -math.inf])
    def test_non_finite_phase(self, t):
        assert math.isfinite(foot_path_x(t))
        assert foot_lift_y(t) == 0.0


class TestLegIK:
    @pytest.mark.parametrize(
        "foot",
        [
            (0.0, 14.0),  # comfortably reachable
            (3.0, 12.0),
            (0.0, 40.0),  # beyond upper + lower
            (50.0, -50.0),
            (0.5, 0.5),  # inside the inner radius
            (0.0, 0.0),  # on top of the hip
        ],
    )
    def test_segment_lengths_hold(self, foot):
        hx, hy = 100.0, 200.0
        kx, ky, fx, fy = leg_ik(hx, hy, hx + foot[0], hy + foot[1])

        for v in (kx, ky, fx, fy):
            assert math.isfinite(v)
        assert _dist(hx, hy, kx, ky) == pytest.approx(U_LEG, abs=1e-6)
        assert _dist(kx, ky, fx, fy) == pytest.approx(L_LEG, abs=1e-6)

    def test_reachable_target_is_hit(self):
        kx, ky, fx, fy = leg_ik(0.0, 0.0, 2.0, 12.0)
        assert (fx, fy) == pytest.approx((2.0, 12.0))

    def test_out_of_reach_target_is_clamped_along_direction(self):
        _, _, fx, fy = leg_ik(0.0, 0.0, 0.0, 100.0)
        assert fx == pytest.approx(0.0)
        assert fy == pytest.approx(U_LEG + L_LEG)

    def test_knee_bends_forward(self):
        kx, _, _, _ = leg_ik(0.0, 0.0, 0.0, 12.0)
        assert kx > 0.0

    def test_equal_bones_at_zero_distance(self):
        kx, ky, fx, fy = leg_ik(0.0, 0.0, 0.0, 0.0, 5.0, 5.0)
        assert (fx, fy) == pytest.approx((0.0, 0.0))
        assert _dist(0.0, 0.0, kx, ky) == pytest.approx(5.0)

    def test_non_finite_target(self):
        result = leg_ik(0.0, 0.0, math.nan, 10.0)
        assert all(math.isfinite(v) for v in result)


class TestPose:
    def _points(self, pose: Pose):
        return [getattr(pose, name) for name in pose.__dataclass_fields__]

    def test_walking_pose_is_finite(self):
        for phase in np.linspace(0.0, 20.0, 50):
            pose = solve_pose(420.0, 479.0, phase, reduced_motion=False)
            for x, y in self._points(pose):
                assert math.isfinite(x) and math.isfinite(y)

    def test_walking_pose_changes_with_phase(self):
        a = solve_pose(420.0, 479.0, 0.0, reduced_motion=False)
        b = solve_pose(420.0, 479.0, 1.3, reduced_motion=False)
        assert a.left_foot != b.left_foot

    def test_reduced_pose_ignores_phase(self):
        a = solve_pose(420.0, 479.0, 0.0, reduced_motion=True)
        b = solve_pose(420.0, 479.0, 7.7, reduced_motion=True)
        assert a == b
        assert a == static_pose(420.0, 479.0)

    def test_static_pose_is_symmetric(self):
        pose = static_pose(100.0, 50.0)
        assert pose.left_foot[0] + pose.right_foot[0] == pytest.approx(200.0)
        assert pose.left_foot[1] == pose.right_foot[1] == 50.0
        assert pose.head[1] < pose.neck[1] < pose.shoulder[1] < pose.hip[1]

    def test_planted_feet_touch_the_ground(self):
        feet_y = 100.0
        for phase in np.linspace(0.0, 2.0 * math.pi, 720):
            left_t = (phase % (2.0 * math.pi)) / (2.0 * math.pi)
            right_t = (left_t + 0.5) % 1.0
            pose = solve_pose(0.0, feet_y, phase, reduced_motion=False)
            if foot_lift_y(left_t) == 0.0:
                assert pose.left_foot[1] == pytest.approx(feet_y, abs=1e-6)
                assert pose.left_foot[0] == pytest.approx(foot_path_x(left_t), abs=1e-6)
            if foot_lift_y(right_t) == 0.0:
                assert pose.right_foot[1] == pytest.approx(feet_y, abs=1e-6)

    def test_feet_stay_on_or_above_ground(self):
        for phase in np.linspace(0.0, 2.0 * math.pi, 64):
            pose = solve_pose(0.0, 100.0, phase, reduced_motion=False)
            assert pose.left_foot[1] <= 100.0 + 1e-9
            assert pose.right_foot[1] <= 100.0 + 1e-9
