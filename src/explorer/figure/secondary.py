"""Secondary procedural motion for the background creatures.

Small scalar terms derived from per-entity phases and the shared wind value.
They perturb precomputed shapes at draw time instead of rebuilding them.
"""

from __future__ import annotations

import math
from typing import Sequence


def wind_at(time: float) -> float:
    """Slow composite oscillation in roughly [-0.5, 0.5]."""
    return math.sin(time * 0.2) * 0.3 + math.sin(time * 0.07) * 0.2


def whale_bob(bob_phase: float) -> float:
    return math.sin(bob_phase) * 4.0


def whale_wag(bob_phase: float, size: float) -> float:
    """Vertical tail displacement fed to the weighted control points."""
    return math.sin(bob_phase * 1.6) * size * 0.08


def jelly_pulse(pulse_phase: float) -> float:
    return math.sin(pulse_phase) * 0.15


def tentacle_sway(
    phases: Sequence[float], index: int, time: float, size: float, wind: float
) -> float:
    """Horizontal tip offset of one tentacle; missing phases read as 0."""
    phase = phases[index] if 0 <= index < len(phases) else 0.0
    return math.sin(phase + time * 1.5) * size * 0.15 + wind * 1.5


def bird_flap(flap_phase: float) -> tuple[float, float]:
    """Return ``(flap, body_rise)`` for a flap phase."""
    s = math.sin(flap_phase)
    flap = math.copysign(abs(s) ** 0.7, s) * 0.6 if s else 0.0
    return flap, max(0.0, -s) * 1.5


def balloon_sway(sway_phase: float, wind: float) -> float:
    return math.sin(sway_phase) * 3.0 + wind * 2.0


def ufo_hover(hover_phase: float, size: float) -> float:
    return math.sin(hover_phase) * 4.0 * size


def star_twinkle(time: float, speed: float, offset: float) -> float:
    return 0.4 + 0.6 * abs(math.sin(time * speed + offset))


def blade_angle(angles: Sequence[float], index: int, wind: float) -> float:
    base = angles[index] if 0 <= index < len(angles) else 0.0
    return base + wind * 0.3
