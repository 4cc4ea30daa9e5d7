"""Tests for the world clock and viewport."""

import math

import pytest

from explorer.config import GROUND_Y, MAX_DT, WALK_SPEED
from explorer.world.clock import Viewport, WorldClock


class TestWorldClock:
    def test_advance_moves_offset_by_walk_speed(self):
        clock = WorldClock()
        step = clock.advance(0.05)

        assert step == pytest.approx(0.05)
        assert clock.time == pytest.approx(0.05)
        assert clock.world_offset == pytest.approx(0.05 * WALK_SPEED)

    def test_long_stall_is_one_bounded_step(self):
        clock = WorldClock()
        step = clock.advance(5.0)

        assert step == pytest.approx(MAX_DT)
        assert clock.world_offset == pytest.approx(MAX_DT * WALK_SPEED)

    @pytest.mark.parametrize("dt", [0.0, -0.1, math.nan, math.inf, -math.inf])
    def test_invalid_dt_is_ignored(self, dt):
        clock = WorldClock()
        assert clock.advance(dt) == 0.0
        assert clock.time == 0.0
        assert clock.world_offset == 0.0

    def test_offset_is_monotonic(self):
        clock = WorldClock()
        last = clock.world_offset
        for dt in (0.016, 0.3, -1.0, 0.001, math.nan, 0.05):
            clock.advance(dt)
            assert clock.world_offset >= last
            last = clock.world_offset

    def test_wind_is_bounded(self):
        clock = WorldClock()
        for _ in range(500):
            clock.advance(0.1)
            assert abs(clock.wind) <= 1.0

    def test_reset(self):
        clock = WorldClock()
        clock.advance(0.1)
        clock.reset()
        assert (clock.time, clock.world_offset, clock.walk_phase, clock.wind) == (
            0.0,
            0.0,
            0.0,
            0.0,
        )

    def test_screen_and_world_x_are_inverse(self):
        clock = WorldClock(world_offset=300.0)
        sx = clock.screen_x(500.0, 0.2)
        assert sx == pytest.approx(440.0)
        assert clock.to_world_x(sx, 0.2) == pytest.approx(500.0)


class TestViewport:
    def test_ground_line(self):
        vp = Viewport(1200, 600)
        assert vp.ground_y == pytest.approx(600 * GROUND_Y)

    def test_resize_clamps_to_one_pixel(self):
        vp = Viewport(0, -20)
        assert vp.width == 1.0
        assert vp.height == 1.0
        vp.resize(800, 0)
        assert (vp.width, vp.height) == (800.0, 1.0)

    def test_non_finite_resize_keeps_previous_size(self):
        vp = Viewport(1200, 600)
        vp.resize(math.nan, 500)
        assert (vp.width, vp.height) == (1200.0, 500.0)
        vp.resize(800, math.inf)
        assert (vp.width, vp.height) == (800.0, 500.0)
        vp.resize(-math.inf, math.nan)
        assert (vp.width, vp.height) == (800.0, 500.0)

    def test_non_finite_construction_falls_back_to_one_pixel(self):
        vp = Viewport(math.nan, math.inf)
        assert (vp.width, vp.height) == (1.0, 1.0)
