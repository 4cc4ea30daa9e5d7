"""World clock and viewport state."""

from __future__ import annotations

import math
from dataclasses import dataclass

from explorer.config import GROUND_Y, MAX_DT, WALK_PHASE_RATE, WALK_SPEED
from explorer.figure.secondary import wind_at


def _dimension(value: float, previous: float) -> float:
    """Whole pixels, at least 1. Non-finite values keep ``previous``."""
    if math.isfinite(value):
        return float(max(1, int(value)))
    if math.isfinite(previous) and previous >= 1.0:
        return float(previous)
    return 1.0


@dataclass
class Viewport:
    width: float
    height: float

    def __post_init__(self) -> None:
        self.resize(self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        self.width = _dimension(width, self.width)
        self.height = _dimension(height, self.height)

    @property
    def ground_y(self) -> float:
        return self.height * GROUND_Y


@dataclass
class WorldClock:
    """Monotonic scroll offset, simulation time, gait phase and wind.

    ``advance`` clamps each step to :data:`MAX_DT`; a long stall becomes one
    bounded step and is never replayed.
    """

    time: float = 0.0
    world_offset: float = 0.0
    walk_phase: float = 0.0
    wind: float = 0.0
    walk_speed: float = WALK_SPEED
    max_dt: float = MAX_DT

    def advance(self, dt: float) -> float:
        """Advance by ``dt`` seconds; returns the step actually taken."""
        if not math.isfinite(dt) or dt <= 0.0:
            return 0.0
        d = min(dt, self.max_dt)
        self.time += d
        self.world_offset += self.walk_speed * d
        self.walk_phase += d * WALK_PHASE_RATE
        self.wind = wind_at(self.time)
        return d

    def reset(self) -> None:
        self.time = 0.0
        self.world_offset = 0.0
        self.walk_phase = 0.0
        self.wind = 0.0

    def screen_x(self, world_x: float, parallax: float) -> float:
        return world_x - self.world_offset * parallax

    def to_world_x(self, screen_x: float, parallax: float) -> float:
        return screen_x + self.world_offset * parallax
