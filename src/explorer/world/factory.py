"""Category constructors.

Each ``create_*`` method acquires a record from its category pool (reusing
a freed one when available), assigns every mutable field and returns it.
The record is already active when returned. Callers must check
``pool.full`` first; acquiring from a full pool raises
:class:`~explorer.world.pool.PoolExhaustedError`.
"""

from __future__ import annotations

import math
import random

from explorer.config import METEOR_LIFE
from explorer.world.clock import Viewport
from explorer.world.entities import (
    Balloon,
    Bird,
    Cloud,
    GrassTuft,
    Jellyfish,
    Meteor,
    Mountain,
    Pebble,
    Star,
    Ufo,
    Whale,
)
from explorer.world.pool import PoolSet
from explorer.world.shapes import cloud_path, mountain_path

_TWO_PI = math.pi * 2.0


class EntityFactory:
    def __init__(self, pools: PoolSet, viewport: Viewport, rng: random.Random):
        self.pools = pools
        self.viewport = viewport
        self.rng = rng

    def rand(self, a: float, b: float) -> float:
        return a + self.rng.random() * (b - a)

    def rand_int(self, a: int, b: int) -> int:
        return self.rng.randint(a, b)

    # ------------------------------------------------------------------
    def create_star(self, world_x: float) -> Star:
        h = self.viewport.height
        e: Star = self.pools["star"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.05, h * 0.45)
        e.size = 0.5 + self.rng.random() ** 2.5 * 2.8
        e.twinkle_offset = self.rand(0.0, _TWO_PI)
        e.twinkle_speed = self.rand(0.8, 2.5)
        return e

    def create_cloud(self, world_x: float) -> Cloud:
        h = self.viewport.height
        r = self.rand(6.0, 18.0)
        e: Cloud = self.pools["cloud"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.1, h * 0.35)
        e.path = cloud_path(self.rng, r)
        e.drift_speed = self.rand(1.0, 4.0)
        e.base_opacity = self.rand(0.15, 0.25)
        return e

    def create_mountain(
        self, world_x: float, height: float, w_left: float, w_right: float
    ) -> Mountain:
        left_dx = self.rand(-0.15, 0.15) * w_left
        left_dy = self.rand(0.3, 0.6) * height
        right_dx = self.rand(-0.15, 0.15) * w_right
        right_dy = self.rand(0.3, 0.6) * height
        e: Mountain = self.pools["mountain"].acquire()
        e.world_x = world_x
        e.y = self.viewport.ground_y
        e.peak_height = height
        e.left_width = w_left
        e.right_width = w_right
        e.path = mountain_path(height, w_left, w_right, left_dx, left_dy, right_dx, right_dy)
        return e

    def create_bird(self, world_x: float) -> Bird:
        h = self.viewport.height
        e: Bird = self.pools["bird"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.1, h * 0.4)
        e.velocity = self.rand(10.0, 20.0)
        e.flap_phase = self.rand(0.0, _TWO_PI)
        e.wingspan = self.rand(5.0, 16.0)
        e.formation_offset_x = 0.0
        e.formation_offset_y = 0.0
        return e

    def create_ufo(self, world_x: float) -> Ufo:
        h = self.viewport.height
        e: Ufo = self.pools["ufo"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.08, h * 0.25)
        e.size = self.rand(0.6, 1.4)
        e.hover_phase = self.rand(0.0, _TWO_PI)
        e.has_tractor_beam = self.rng.random() > 0.5
        return e

    def create_meteor(self, world_x: float) -> Meteor:
        h = self.viewport.height
        e: Meteor = self.pools["meteor"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.02, h * 0.2)
        e.angle = self.rand(0.15, 0.4)
        e.speed = self.rand(200.0, 350.0)
        e.life = METEOR_LIFE
        e.max_life = METEOR_LIFE
        e.tail_len = self.rand(25.0, 80.0)
        return e

    def create_balloon(self, world_x: float) -> Balloon:
        h = self.viewport.height
        e: Balloon = self.pools["balloon"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.08, h * 0.3)
        e.size = self.rand(8.0, 20.0)
        e.drift_speed = self.rand(4.0, 12.0)
        e.sway_phase = self.rand(0.0, _TWO_PI)
        return e

    def create_whale(self, world_x: float) -> Whale:
        h = self.viewport.height
        s = self.rand(40.0, 95.0)
        min_y = s * 0.42 + 4.0
        max_y = h * 0.45 - s * 0.42
        e: Whale = self.pools["whale"].acquire()
        e.world_x = world_x
        e.y = self.rand(max(min_y, h * 0.12), max(min_y, max_y))
        e.size = s
        e.velocity = 0.0
        e.bob_phase = self.rand(0.0, _TWO_PI)
        return e

    def create_jellyfish(self, world_x: float) -> Jellyfish:
        h = self.viewport.height
        count = self.rand_int(3, 5)
        e: Jellyfish = self.pools["jellyfish"].acquire()
        e.world_x = world_x
        e.y = self.rand(h * 0.1, h * 0.4)
        e.size = self.rand(6.0, 16.0)
        e.pulse_phase = self.rand(0.0, _TWO_PI)
        e.drift_speed = self.rand(2.0, 6.0)
        # reuse the recycled lists
        e.tentacle_phases.clear()
        e.tentacle_lengths.clear()
        for _ in range(count):
            e.tentacle_phases.append(self.rand(0.0, _TWO_PI))
            e.tentacle_lengths.append(self.rand(0.8, 1.4))
        return e

    def create_grass_tuft(self, world_x: float) -> GrassTuft:
        count = self.rand_int(2, 3)
        e: GrassTuft = self.pools["grassTuft"].acquire()
        e.world_x = world_x
        e.y = self.viewport.ground_y
        e.blade_height = self.rand(3.0, 11.0)
        e.blade_angles.clear()
        for _ in range(count):
            e.blade_angles.append(self.rand(-0.4, 0.4))
        return e

    def create_pebble(self, world_x: float) -> Pebble:
        e: Pebble = self.pools["pebble"].acquire()
        e.world_x = world_x
        e.y = self.viewport.ground_y + self.rand(1.0, 3.0)
        e.radius = self.rand(0.8, 3.5)
        return e

    def creators(self):
        """Single-unit constructors keyed by category."""
        return {
            "star": self.create_star,
            "cloud": self.create_cloud,
            "ufo": self.create_ufo,
            "meteor": self.create_meteor,
            "balloon": self.create_balloon,
            "whale": self.create_whale,
            "jellyfish": self.create_jellyfish,
            "grassTuft": self.create_grass_tuft,
            "pebble": self.create_pebble,
        }
