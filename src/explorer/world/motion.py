"""Per-frame motion of the self-propelled categories."""

from __future__ import annotations

import math

from explorer.config import METEOR_LIFE_DECAY
from explorer.world.pool import PoolSet


def tick_flyers(pools: PoolSet, d: float, wind: float) -> None:
    for e in pools["bird"]:
        e.world_x += (e.velocity + wind * 5.0) * d
        e.flap_phase += d * 6.0
    for e in pools["ufo"]:
        e.hover_phase += d * 2.0
    for e in pools["meteor"]:
        e.world_x -= math.cos(e.angle) * e.speed * d
        e.y += math.sin(e.angle) * e.speed * d
        e.life -= d * METEOR_LIFE_DECAY


def tick_drifters(pools: PoolSet, d: float, wind: float) -> None:
    for e in pools["balloon"]:
        e.world_x += (e.drift_speed + wind * 3.0) * d
        e.sway_phase += d * 1.5
    for e in pools["whale"]:
        e.world_x += e.velocity * d
        e.bob_phase += d * 1.2
    for e in pools["jellyfish"]:
        e.world_x += (e.drift_speed + wind * 2.0) * d
        e.pulse_phase += d * 2.5
    for e in pools["cloud"]:
        e.world_x += (e.drift_speed + wind * 2.0) * d


def tick_all(pools: PoolSet, d: float, wind: float) -> None:
    tick_flyers(pools, d, wind)
    tick_drifters(pools, d, wind)
