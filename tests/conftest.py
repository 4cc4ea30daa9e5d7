"""Pytest configuration and fixtures for explorer scene tests."""

import os
import random

# headless pygame; must be set before pygame initializes a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from explorer.render.colors import PALETTES  # noqa: E402

WIDTH = 1200
HEIGHT = 600


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def surface():
    """Off-screen drawing target the size of a desktop viewport."""
    pygame.init()
    yield pygame.Surface((WIDTH, HEIGHT))


@pytest.fixture
def color_lookup():
    """Static color source that counts how often it is read."""

    class Lookup:
        def __init__(self):
            self.palette = dict(PALETTES["dark"])
            self.calls = 0

        def __call__(self, name):
            self.calls += 1
            return self.palette.get(name, "")

    return Lookup()


@pytest.fixture
def engine(surface, color_lookup, seeded_rng):
    """Desktop engine seeded deterministically."""
    from explorer.core.engine import create_explorer_engine

    return create_explorer_engine(surface, WIDTH, HEIGHT, color_lookup, rng=seeded_rng)
