"""Tests for timed spawning, back-pressure and initial seeding."""

import random

import pytest

from explorer.config import (
    CAPACITY_DESKTOP,
    MOBILE_INTERVAL_SCALE,
    PARALLAX,
    SPAWN_TABLE,
    capacity_for,
)
from explorer.world.clock import Viewport, WorldClock
from explorer.world.factory import EntityFactory
from explorer.world.pool import PoolSet
from explorer.world.world_spawner import Spawner


def make_spawner(rng, width=1200, height=600, is_mobile=False):
    pools = PoolSet(capacity_for(is_mobile))
    viewport = Viewport(width, height)
    clock = WorldClock()
    factory = EntityFactory(pools, viewport, rng)
    spawner = Spawner(pools, factory, clock, viewport, rng, is_mobile=is_mobile)
    return spawner, pools, clock


class TestSchedules:
    def test_initial_thresholds_follow_table(self, seeded_rng):
        spawner, _, _ = make_spawner(seeded_rng, width=1000)
        for category, start, lo, hi in SPAWN_TABLE:
            sched = spawner.schedules[category]
            assert sched.next == pytest.approx(1000 * start)
            assert (sched.min_interval, sched.max_interval) == (lo, hi)

    def test_mobile_intervals_are_scaled(self, seeded_rng):
        spawner, _, _ = make_spawner(seeded_rng, is_mobile=True)
        for category, _, lo, hi in SPAWN_TABLE:
            sched = spawner.schedules[category]
            assert sched.min_interval == pytest.approx(lo * MOBILE_INTERVAL_SCALE)
            assert sched.max_interval == pytest.approx(hi * MOBILE_INTERVAL_SCALE)

    def test_not_due_does_nothing(self, seeded_rng):
        spawner, pools, _ = make_spawner(seeded_rng)
        before = spawner.schedules["whale"].next
        assert spawner.try_spawn("whale") is False
        assert spawner.schedules["whale"].next == before
        assert len(pools["whale"]) == 0

    def test_due_spawns_beyond_right_edge(self, seeded_rng):
        spawner, pools, clock = make_spawner(seeded_rng)
        clock.world_offset = 500.0
        assert spawner.try_spawn("star") is True
        (star,) = list(pools["star"])
        sx = clock.screen_x(star.world_x, PARALLAX["star"])
        assert 1200 + 20 <= sx <= 1200 + 80
        assert spawner.spawn_counts["star"] == 1

    def test_next_threshold_advances_within_interval(self, seeded_rng):
        spawner, _, clock = make_spawner(seeded_rng)
        spawner.try_spawn("star")
        right_edge = clock.world_offset + 1200
        nxt = spawner.schedules["star"].next
        assert right_edge + 50 <= nxt <= right_edge + 100


class TestBackPressure:
    def test_full_category_skips_but_reschedules(self, seeded_rng):
        spawner, pools, clock = make_spawner(seeded_rng)
        pool = pools["meteor"]
        while not pool.full:
            spawner.factory.create_meteor(100.0)
        assert len(pool) == CAPACITY_DESKTOP["meteor"]

        clock.world_offset = 10_000.0
        before = spawner.schedules["meteor"].next
        assert spawner.try_spawn("meteor") is False

        assert len(pool) == CAPACITY_DESKTOP["meteor"]
        assert spawner.spawn_counts["meteor"] == 0
        assert spawner.schedules["meteor"].next > before
        assert spawner.schedules["meteor"].next >= clock.world_offset + 1200 + 400

    def test_tick_never_exceeds_capacity(self, seeded_rng):
        spawner, pools, clock = make_spawner(seeded_rng)
        for step in range(2000):
            clock.world_offset = step * 25.0
            spawner.tick()
            for category, pool in pools.items():
                assert len(pool) <= pool.capacity, category


class TestGroups:
    def test_mountain_cluster_is_sorted_tallest_first(self, seeded_rng):
        spawner, pools, _ = make_spawner(seeded_rng)
        peaks = spawner.spawn_mountain_cluster(600.0)
        assert 3 <= len(peaks) <= 5
        heights = [m.peak_height for m in peaks]
        assert heights == sorted(heights, reverse=True)
        assert len(pools["mountain"]) == len(peaks)

    def test_mountain_cluster_respects_capacity(self, seeded_rng):
        spawner, pools, _ = make_spawner(seeded_rng)
        for _ in range(10):
            spawner.spawn_mountain_cluster(600.0)
        assert len(pools["mountain"]) == pools["mountain"].capacity

    def test_bird_group_shares_heading(self):
        # find a seed that produces a group
        for seed in range(50):
            spawner, pools, _ = make_spawner(random.Random(seed))
            group = spawner.spawn_bird_group(1250.0)
            if len(group) > 1:
                break
        leader, *followers = group
        assert followers
        for bird in followers:
            assert bird.velocity == leader.velocity
            assert bird.y == leader.y
            assert bird.formation_offset_x < 0.0


class TestSeeding:
    def test_seed_populates_scene(self, seeded_rng):
        spawner, pools, _ = make_spawner(seeded_rng)
        spawner.seed()
        assert len(pools["star"]) == 20
        assert len(pools["cloud"]) == 4
        assert len(pools["balloon"]) == 1
        assert len(pools["bird"]) == 3
        assert len(pools["mountain"]) >= 6
        assert len(pools["grassTuft"]) == 12
        assert len(pools["pebble"]) == 6
        assert len(pools["meteor"]) == 0

    def test_reduced_seed_is_smaller(self):
        full, full_pools, _ = make_spawner(random.Random(3))
        full.seed()
        reduced, reduced_pools, _ = make_spawner(random.Random(3))
        reduced.seed(reduced=True)
        assert len(reduced_pools["star"]) < len(full_pools["star"])
        assert len(reduced_pools["bird"]) == 2

    def test_seed_is_deterministic(self):
        a, pools_a, _ = make_spawner(random.Random(7))
        b, pools_b, _ = make_spawner(random.Random(7))
        a.seed()
        b.seed()
        xs_a = [s.world_x for s in pools_a["star"]]
        xs_b = [s.world_x for s in pools_b["star"]]
        assert xs_a == xs_b

    def test_seed_resets_schedules(self, seeded_rng):
        spawner, _, clock = make_spawner(seeded_rng)
        clock.world_offset = 5000.0
        spawner.tick()
        clock.reset()
        spawner.seed()
        assert spawner.schedules["whale"].next == pytest.approx(1200 * 3.8)
        assert sum(spawner.spawn_counts.values()) == 0
