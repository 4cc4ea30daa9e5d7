"""Entity records for every scrolling category.

Each record carries a world-space ``world_x``, a screen ``y`` and an
immutable ``parallax`` factor, plus whatever the category needs to animate
and draw. Records are owned by an :class:`~explorer.world.pool.EntityPool`
and are reused, so constructors here only fill in defaults; the factory
functions in ``world.factory`` assign every field on acquire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from explorer.config import PARALLAX
from explorer.render.path import Path


@dataclass(eq=False)
class Entity:
    world_x: float = 0.0
    y: float = 0.0
    parallax: float = 0.0
    # Arena slot, assigned by the pool
    handle: int = -1

    def screen_x(self, world_offset: float) -> float:
        return self.world_x - world_offset * self.parallax


@dataclass(eq=False)
class Star(Entity):
    parallax: float = PARALLAX["star"]
    size: float = 1.0
    twinkle_offset: float = 0.0
    twinkle_speed: float = 1.0


@dataclass(eq=False)
class Cloud(Entity):
    parallax: float = PARALLAX["cloud"]
    path: Optional[Path] = None
    drift_speed: float = 0.0
    base_opacity: float = 0.2


@dataclass(eq=False)
class Mountain(Entity):
    parallax: float = PARALLAX["mountain"]
    peak_height: float = 0.0
    left_width: float = 0.0
    right_width: float = 0.0
    path: Optional[Path] = None


@dataclass(eq=False)
class Bird(Entity):
    parallax: float = PARALLAX["bird"]
    velocity: float = 0.0
    flap_phase: float = 0.0
    wingspan: float = 8.0
    formation_offset_x: float = 0.0
    formation_offset_y: float = 0.0


@dataclass(eq=False)
class Ufo(Entity):
    parallax: float = PARALLAX["ufo"]
    size: float = 1.0
    hover_phase: float = 0.0
    has_tractor_beam: bool = False


@dataclass(eq=False)
class Meteor(Entity):
    parallax: float = PARALLAX["meteor"]
    angle: float = 0.0
    speed: float = 0.0
    life: float = 0.0
    max_life: float = 1.0
    tail_len: float = 0.0


@dataclass(eq=False)
class Balloon(Entity):
    parallax: float = PARALLAX["balloon"]
    size: float = 10.0
    drift_speed: float = 0.0
    sway_phase: float = 0.0


@dataclass(eq=False)
class Whale(Entity):
    parallax: float = PARALLAX["whale"]
    size: float = 50.0
    velocity: float = 0.0
    bob_phase: float = 0.0


@dataclass(eq=False)
class Jellyfish(Entity):
    parallax: float = PARALLAX["jellyfish"]
    size: float = 10.0
    pulse_phase: float = 0.0
    drift_speed: float = 0.0
    tentacle_phases: list[float] = field(default_factory=list)
    tentacle_lengths: list[float] = field(default_factory=list)

    @property
    def tentacle_count(self) -> int:
        return len(self.tentacle_phases)


@dataclass(eq=False)
class GrassTuft(Entity):
    parallax: float = PARALLAX["grassTuft"]
    blade_height: float = 5.0
    blade_angles: list[float] = field(default_factory=list)

    @property
    def blade_count(self) -> int:
        return len(self.blade_angles)


@dataclass(eq=False)
class Pebble(Entity):
    parallax: float = PARALLAX["pebble"]
    radius: float = 1.0


RECORD_TYPES: dict[str, type[Entity]] = {
    "star": Star,
    "cloud": Cloud,
    "mountain": Mountain,
    "bird": Bird,
    "ufo": Ufo,
    "meteor": Meteor,
    "balloon": Balloon,
    "whale": Whale,
    "jellyfish": Jellyfish,
    "grassTuft": GrassTuft,
    "pebble": Pebble,
}
