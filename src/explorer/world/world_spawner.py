"""Timed spawning of scrolling entities.

Every category has a schedule holding the world-space threshold at which
its next unit is due. When the right edge of the viewport (in world space)
reaches the threshold the spawner either materializes a unit just beyond
the right edge or, when the category is at capacity, only reschedules.
Back-pressure skips spawns; nothing is queued.

Mountains spawn as clusters of 3-5 peaks and birds as a leader with up to
two followers. Both count against their category's capacity.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict

from explorer.config import (
    MOBILE_INTERVAL_SCALE,
    PARALLAX,
    REDUCED_SEED_SCALE,
    SPAWN_OFFSET_MAX,
    SPAWN_OFFSET_MIN,
    SPAWN_TABLE,
)
from explorer.world.clock import Viewport, WorldClock
from explorer.world.entities import Bird, Mountain
from explorer.world.factory import EntityFactory
from explorer.world.pool import PoolSet

logger = logging.getLogger(__name__)


@dataclass
class SpawnSchedule:
    next: float
    min_interval: float
    max_interval: float


class Spawner:
    def __init__(
        self,
        pools: PoolSet,
        factory: EntityFactory,
        clock: WorldClock,
        viewport: Viewport,
        rng: random.Random,
        *,
        is_mobile: bool = False,
    ) -> None:
        self.pools = pools
        self.factory = factory
        self.clock = clock
        self.viewport = viewport
        self.rng = rng
        self.interval_scale = MOBILE_INTERVAL_SCALE if is_mobile else 1.0
        self.schedules: Dict[str, SpawnSchedule] = {}
        self.spawn_counts: Dict[str, int] = {}
        self._creators = factory.creators()
        self.reset_schedules()

    def reset_schedules(self) -> None:
        """Rebuild every schedule relative to the current viewport width."""
        sm = self.interval_scale
        width = self.viewport.width
        self.schedules = {
            category: SpawnSchedule(width * start, lo * sm, hi * sm)
            for category, start, lo, hi in SPAWN_TABLE
        }
        self.spawn_counts = {category: 0 for category, *_ in SPAWN_TABLE}

    # ------------------------------------------------------------------
    def tick(self) -> None:
        for category in self.schedules:
            self.try_spawn(category)

    def try_spawn(self, category: str) -> bool:
        """Spawn ``category`` if its threshold was reached; True if it did."""
        sched = self.schedules[category]
        right_edge = self.clock.world_offset + self.viewport.width
        if right_edge < sched.next:
            return False
        spawned = False
        if not self.pools[category].full:
            x = self.viewport.width + self.factory.rand(SPAWN_OFFSET_MIN, SPAWN_OFFSET_MAX)
            self.spawn(category, x)
            spawned = True
        sched.next = right_edge + self.factory.rand(sched.min_interval, sched.max_interval)
        return spawned

    def spawn(self, category: str, screen_x: float) -> None:
        """Materialize one unit of ``category`` at ``screen_x``."""
        if category == "mountain":
            self.spawn_mountain_cluster(
                self.clock.to_world_x(screen_x, PARALLAX["mountain"])
            )
        elif category == "bird":
            self.spawn_bird_group(screen_x)
        else:
            creator = self._creators.get(category)
            if creator is None:
                return
            creator(self.clock.to_world_x(screen_x, PARALLAX[category]))
        self.spawn_counts[category] += 1

    def spawn_mountain_cluster(self, center_world_x: float) -> list[Mountain]:
        """Spawn 3-5 peaks around ``center_world_x``, tallest first.

        The middle peaks get a height bonus (a triangular profile). Peaks
        beyond the remaining capacity are dropped.
        """
        f = self.factory
        pool = self.pools["mountain"]
        n = f.rand_int(3, 5)
        mid = (n - 1) / 2.0
        max_h = self.viewport.ground_y * 0.85
        specs = []
        for i in range(n):
            if len(pool) + len(specs) >= pool.capacity:
                break
            weight = 1.0 - abs(i - mid) / (mid + 0.5)
            h = min(f.rand(55.0, 115.0) + weight * f.rand(20.0, 50.0), max_h)
            x = center_world_x + (i - mid) * f.rand(30.0, 55.0)
            specs.append((x, h, f.rand(25.0, 65.0), f.rand(25.0, 65.0)))
        specs.sort(key=lambda s: s[1], reverse=True)
        return [f.create_mountain(x, h, wl, wr) for x, h, wl, wr in specs]

    def spawn_bird_group(self, screen_x: float) -> list[Bird]:
        """Spawn a leader and, 30% of the time, one or two followers."""
        f = self.factory
        pool = self.pools["bird"]
        world_x = self.clock.to_world_x(screen_x, PARALLAX["bird"])
        group_size = f.rand_int(2, 3) if self.rng.random() < 0.3 else 1
        leader = f.create_bird(world_x)
        group = [leader]
        for i in range(1, group_size):
            if pool.full:
                break
            follower = f.create_bird(world_x)
            follower.y = leader.y
            follower.velocity = leader.velocity
            follower.formation_offset_x = -f.rand(12.0, 20.0) * i
            follower.formation_offset_y = (-1.0 if i % 2 == 0 else 1.0) * f.rand(6.0, 12.0) * i
            group.append(follower)
        return group

    # ------------------------------------------------------------------
    def seed(self, reduced: bool = False) -> None:
        """Populate an initial on-screen scene.

        Positions are stratified across the viewport so the opening frame
        looks evenly filled. Reduced-motion scenes use fewer entities.
        """
        self.reset_schedules()
        scale = REDUCED_SEED_SCALE if reduced else 1.0
        mobile = self.interval_scale != 1.0
        self._seed_sky(scale, mobile)
        self._seed_birds(reduced)
        self._seed_ground(scale, mobile)
        logger.debug(
            "Seeded scene (reduced=%s): %s",
            reduced,
            {c: len(p) for c, p in self.pools.items()},
        )

    def _count(self, n: int, scale: float) -> int:
        return max(1, int(round(n * scale)))

    def _seed_sky(self, scale: float, mobile: bool) -> None:
        f = self.factory
        w = self.viewport.width
        stars = self._count(14 if mobile else 20, scale)
        for i in range(stars):
            if self.pools["star"].full:
                break
            f.create_star(w * (i / stars) + f.rand(0.0, w / stars))
        clouds = self._count(3 if mobile else 4, scale)
        for i in range(clouds):
            if self.pools["cloud"].full:
                break
            f.create_cloud(w * f.rand(i / clouds, (i + 0.7) / clouds))
        if not self.pools["balloon"].full:
            f.create_balloon(w * f.rand(0.55, 0.8))

    def _seed_birds(self, reduced: bool) -> None:
        f = self.factory
        pool = self.pools["bird"]
        w = self.viewport.width
        if not reduced and not pool.full:
            f.create_bird(w * f.rand(0.25, 0.4))
        if pool.full:
            return
        leader = f.create_bird(w * f.rand(0.65, 0.85))
        if pool.full:
            return
        follower = f.create_bird(leader.world_x)
        follower.y = leader.y
        follower.velocity = leader.velocity
        follower.formation_offset_x = -f.rand(12.0, 18.0)
        follower.formation_offset_y = f.rand(6.0, 10.0)

    def _seed_ground(self, scale: float, mobile: bool) -> None:
        f = self.factory
        w = self.viewport.width
        self.spawn_mountain_cluster(w * f.rand(0.2, 0.35))
        self.spawn_mountain_cluster(w * f.rand(0.7, 0.9))
        tufts = self._count(8 if mobile else 12, scale)
        for i in range(tufts):
            if self.pools["grassTuft"].full:
                break
            f.create_grass_tuft(w * (i / tufts) + f.rand(0.0, (w / tufts) * 0.8))
        pebbles = self._count(4 if mobile else 6, scale)
        for i in range(pebbles):
            if self.pools["pebble"].full:
                break
            f.create_pebble(w * (i / pebbles) + f.rand(0.0, (w / pebbles) * 0.8))
