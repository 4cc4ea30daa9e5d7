"""Recycling of entities that scrolled off the left edge or expired."""

from __future__ import annotations

from explorer.config import CULL_MARGIN
from explorer.world.pool import EntityPool, PoolSet


def cull_pool(pool: EntityPool, world_offset: float, expiring: bool = False) -> int:
    """Release every record of ``pool`` that is no longer visible.

    A record is culled once its screen x falls below ``-CULL_MARGIN``. With
    ``expiring`` set, records whose ``life`` reached zero are culled too.
    Returns the number of released records.
    """
    removed = 0
    i = 0
    while i < len(pool):
        e = pool.entity_at(i)
        gone = e.world_x - world_offset * e.parallax < -CULL_MARGIN
        if not gone and expiring:
            gone = not e.life > 0.0  # type: ignore[attr-defined]
        if gone:
            # the last record moves into slot i; check it on the next pass
            pool.remove_at(i)
            removed += 1
        else:
            i += 1
    return removed


def cull_all(pools: PoolSet, world_offset: float) -> int:
    removed = 0
    for category, pool in pools.items():
        removed += cull_pool(pool, world_offset, expiring=category == "meteor")
    return removed
