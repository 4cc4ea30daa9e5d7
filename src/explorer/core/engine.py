"""Explorer engine: the single object a host talks to.

The engine owns every piece of scene state (pools, spawn schedules, the
world clock, the solved figure pose and the cached theme colors) and
exposes five operations:

- ``update(dt)``: advance the clock, re-solve the pose, move, spawn, cull.
- ``draw()``: paint the current state onto the host surface.
- ``resize(width, height)``: new viewport size and ground line, no reseed.
- ``on_theme_change()``: drop cached colors; the next draw re-reads them.
- ``set_reduced_motion(enabled)``: reseed and freeze, or reseed and resume.

The host calls ``update`` then ``draw`` once per frame. Neither blocks and
there is no background work.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

import pygame

from explorer.config import SCREEN_X, capacity_for
from explorer.figure.kinematics import Pose, solve_pose
from explorer.render.canvas import Canvas
from explorer.render.colors import ColorCache, ColorLookup
from explorer.render.renderer import SceneRenderer
from explorer.world.clock import Viewport, WorldClock
from explorer.world.culler import cull_all
from explorer.world.factory import EntityFactory
from explorer.world.motion import tick_all
from explorer.world.pool import PoolSet
from explorer.world.world_spawner import Spawner

logger = logging.getLogger(__name__)


class EngineState(Enum):
    SEEDED = "seeded"
    RUNNING = "running"
    REDUCED = "reduced"


class ExplorerEngine:
    def __init__(
        self,
        surface: pygame.Surface,
        width: float,
        height: float,
        get_color: ColorLookup,
        *,
        is_mobile: bool = False,
        reduced_motion: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.is_mobile = bool(is_mobile)
        self.reduced_motion = bool(reduced_motion)
        self.rng = rng if rng is not None else random.Random()

        self.canvas = Canvas(surface)
        self.viewport = Viewport(width, height)
        self.clock = WorldClock()
        self.colors = ColorCache(get_color)
        self.pools = PoolSet(capacity_for(self.is_mobile))
        self.factory = EntityFactory(self.pools, self.viewport, self.rng)
        self.spawner = Spawner(
            self.pools,
            self.factory,
            self.clock,
            self.viewport,
            self.rng,
            is_mobile=self.is_mobile,
        )
        self.renderer = SceneRenderer(
            self.canvas, self.pools, self.colors, self.viewport, self.clock
        )
        self.pose = Pose()
        self.state = EngineState.SEEDED
        self._reseed()

    # ------------------------------------------------------------------
    # host API
    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        if self.reduced_motion:
            return
        d = self.clock.advance(dt)
        if d <= 0.0:
            return
        self.state = EngineState.RUNNING
        self._solve_pose()
        tick_all(self.pools, d, self.clock.wind)
        self.spawner.tick()
        # after spawning, so fresh off-screen spawns survive this pass
        cull_all(self.pools, self.clock.world_offset)

    def draw(self) -> None:
        self.renderer.draw(self.pose, frozen=self.reduced_motion)

    def resize(self, width: float, height: float, surface: Optional[pygame.Surface] = None) -> None:
        """Adopt a new viewport size; pass ``surface`` if the host replaced it."""
        self.viewport.resize(width, height)
        if surface is not None:
            self.canvas.surface = surface
        self._solve_pose()
        logger.debug("Resized to %dx%d", self.viewport.width, self.viewport.height)

    def on_theme_change(self) -> None:
        self.colors.invalidate()

    def set_reduced_motion(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if not enabled and not self.reduced_motion:
            return
        logger.debug("Reduced motion %s", "on" if enabled else "off")
        self.reduced_motion = enabled
        self._reseed()

    # ------------------------------------------------------------------
    @property
    def world_offset(self) -> float:
        return self.clock.world_offset

    @property
    def time(self) -> float:
        return self.clock.time

    def get_stats(self) -> dict:
        return {
            "state": self.state.value,
            "world_offset": self.clock.world_offset,
            "pools": self.pools.get_stats(),
            "spawns": dict(self.spawner.spawn_counts),
        }

    # ------------------------------------------------------------------
    def _solve_pose(self) -> None:
        vp = self.viewport
        self.pose = solve_pose(
            vp.width * SCREEN_X,
            vp.ground_y - 1.0,
            self.clock.walk_phase,
            self.reduced_motion,
        )

    def _reseed(self) -> None:
        self.clock.reset()
        self.pools.clear()
        self.spawner.seed(reduced=self.reduced_motion)
        self.state = EngineState.REDUCED if self.reduced_motion else EngineState.SEEDED
        self._solve_pose()
        logger.debug("Scene reseeded (%s)", self.state.value)


def create_explorer_engine(
    surface: pygame.Surface,
    width: float,
    height: float,
    get_color: ColorLookup,
    is_mobile: bool = False,
    reduced_motion: bool = False,
    rng: Optional[random.Random] = None,
) -> ExplorerEngine:
    """Build an engine drawing onto ``surface``; see :class:`ExplorerEngine`."""
    return ExplorerEngine(
        surface,
        width,
        height,
        get_color,
        is_mobile=is_mobile,
        reduced_motion=reduced_motion,
        rng=rng,
    )
