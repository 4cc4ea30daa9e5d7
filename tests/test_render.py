"""Tests for the canvas, edge fading, batching and color caching."""

import numpy as np
import pygame
import pytest

from explorer.config import BUCKETS, FADE, capacity_for
from explorer.render.canvas import Canvas
from explorer.render.colors import PALETTES, ColorCache, SceneColors, ThemeProvider
from explorer.render.frame import Frame, edge_fade, entity_alpha
from explorer.render.ground_renderer import GroundRenderer
from explorer.render.sky_renderer import SkyRenderer
from explorer.world.clock import Viewport
from explorer.world.factory import EntityFactory
from explorer.world.pool import PoolSet

WIDTH = 1200


def make_frame(canvas, time=0.0):
    colors = ColorCache(ThemeProvider("dark").lookup).colors
    return Frame(
        canvas=canvas,
        colors=colors,
        width=WIDTH,
        height=600,
        ground_y=480,
        world_offset=0.0,
        time=time,
        wind=0.0,
    )


class TestEdgeFade:
    def test_outside_band_is_opaque(self):
        for x in np.linspace(-300.0, WIDTH - FADE, 50):
            assert edge_fade(x, WIDTH) == 1.0

    def test_monotonic_inside_band(self):
        xs = np.linspace(WIDTH - FADE, WIDTH, 121)
        fades = [edge_fade(x, WIDTH) for x in xs]
        assert all(b <= a for a, b in zip(fades, fades[1:]))
        assert fades[0] == 1.0
        assert fades[-1] == 0.0

    def test_beyond_right_edge_is_transparent(self):
        assert edge_fade(WIDTH + 10.0, WIDTH) == 0.0

    def test_half_way(self):
        assert edge_fade(WIDTH - FADE / 2.0, WIDTH) == pytest.approx(0.5)

    def test_entity_alpha_dims_with_depth(self):
        near = entity_alpha(100.0, 1.0, WIDTH, 0.8)
        far = entity_alpha(100.0, 0.1, WIDTH, 0.8)
        assert near == pytest.approx(0.8)
        assert far == pytest.approx(0.8 * (0.3 + 0.07))


class TestCanvas:
    def test_opaque_fill_rect(self, surface):
        c = Canvas(surface)
        c.fill_style = "#ff0000"
        c.fill_rect(10, 10, 5, 5)
        assert surface.get_at((12, 12))[:3] == (255, 0, 0)
        assert surface.get_at((20, 20))[:3] == (0, 0, 0)
        assert c.fill_calls == 1

    def test_global_alpha_blends(self, surface):
        c = Canvas(surface)
        c.fill_style = "#ffffff"
        c.global_alpha = 0.5
        c.fill_rect(0, 0, 10, 10)
        r, g, b = surface.get_at((5, 5))[:3]
        assert 120 <= r <= 135
        assert r == g == b

    def test_zero_alpha_draws_nothing(self, surface):
        c = Canvas(surface)
        c.fill_style = "#ffffff"
        c.global_alpha = 0.0
        c.begin_path()
        c.rect(0, 0, 50, 50)
        c.fill()
        assert surface.get_at((25, 25))[:3] == (0, 0, 0)
        assert c.fill_calls == 1

    def test_path_fill_with_translate(self, surface):
        c = Canvas(surface)
        c.fill_style = "#00ff00"
        c.save()
        c.translate(100, 100)
        c.begin_path()
        c.arc(0, 0, 10, 0, 2 * np.pi)
        c.fill()
        c.restore()
        assert surface.get_at((100, 100))[:3] == (0, 255, 0)
        assert surface.get_at((5, 5))[:3] == (0, 0, 0)

    def test_stroke_counts(self, surface):
        c = Canvas(surface)
        c.stroke_style = "#ffffff"
        c.line_width = 3
        c.line_cap = "round"
        c.begin_path()
        c.move_to(10, 50)
        c.line_to(90, 50)
        c.stroke()
        assert c.stroke_calls == 1
        assert surface.get_at((50, 50))[:3] == (255, 255, 255)

    def test_round_join_fills_the_corner(self, surface):
        c = Canvas(surface)
        c.stroke_style = "#ffffff"
        c.line_width = 8
        c.line_join = "round"
        c.begin_path()
        c.move_to(10, 50)
        c.line_to(50, 50)
        c.line_to(50, 90)
        c.stroke()
        # outside both segments, inside the joint disc
        assert surface.get_at((52, 48))[:3] == (255, 255, 255)

    def test_unparsable_color_falls_back_to_gray(self, surface):
        c = Canvas(surface)
        c.fill_style = "not-a-color"
        c.fill_rect(0, 0, 4, 4)
        assert surface.get_at((1, 1))[:3] == (128, 128, 128)

    def test_restore_without_save_is_harmless(self, surface):
        c = Canvas(surface)
        c.restore()
        c.line_width = 3
        c.save()
        c.line_width = 1
        c.restore()
        assert c.line_width == 3


class TestStarBatching:
    def test_stars_use_at_most_one_fill_per_bucket(self, surface, seeded_rng):
        pools = PoolSet(capacity_for(False))
        factory = EntityFactory(pools, Viewport(WIDTH, 600), seeded_rng)
        while not pools["star"].full:
            factory.create_star(seeded_rng.uniform(0.0, WIDTH))
        canvas = Canvas(surface)
        sky = SkyRenderer(pools["star"].capacity)

        for t in (0.0, 0.7, 3.1):
            canvas.reset_counters()
            sky.draw_stars(make_frame(canvas, time=t), pools["star"])
            assert 1 <= canvas.fill_calls <= BUCKETS

    def test_buckets_are_in_range(self, surface, seeded_rng):
        pools = PoolSet(capacity_for(False))
        factory = EntityFactory(pools, Viewport(WIDTH, 600), seeded_rng)
        for x in (10.0, 600.0, WIDTH - 5.0, WIDTH + 5.0):
            factory.create_star(x)
        sky = SkyRenderer(pools["star"].capacity)
        vis = sky.collect_visible_stars(make_frame(Canvas(surface)), pools["star"])
        assert vis == 4
        tiers = sky.star_buckets(vis)
        assert tiers.min() >= 0
        assert tiers.max() <= BUCKETS - 1

    def test_empty_sky_draws_nothing(self, surface):
        pools = PoolSet(capacity_for(False))
        canvas = Canvas(surface)
        SkyRenderer(30).draw_stars(make_frame(canvas), pools["star"])
        assert canvas.fill_calls == 0


class TestGroundBatching:
    def test_clear_pebbles_share_one_fill(self, surface, seeded_rng):
        pools = PoolSet(capacity_for(False))
        factory = EntityFactory(pools, Viewport(WIDTH, 600), seeded_rng)
        for x in (100.0, 300.0, 500.0, 700.0):
            factory.create_pebble(x)
        factory.create_pebble(WIDTH - 10.0)
        canvas = Canvas(surface)
        GroundRenderer().draw_pebbles(make_frame(canvas), pools["pebble"])
        # one batched fill plus one for the pebble inside the fade band
        assert canvas.fill_calls == 2


class TestColors:
    def test_cache_reads_once_until_invalidated(self):
        calls = []

        def lookup(name):
            calls.append(name)
            return PALETTES["light"][name]

        cache = ColorCache(lookup)
        first = cache.colors
        assert cache.colors is first
        assert cache.reads == 1

        cache.invalidate()
        assert cache.colors == first
        assert cache.reads == 2
        assert len(calls) == 12

    def test_scene_colors_fields(self):
        colors = ColorCache(ThemeProvider("light").lookup).colors
        assert isinstance(colors, SceneColors)
        assert colors.text_muted == PALETTES["light"]["text-muted"]

    def test_theme_toggle(self):
        theme = ThemeProvider("dark")
        assert theme.toggle() == "light"
        assert theme.lookup("bg") == PALETTES["light"]["bg"]
        assert ThemeProvider("sepia").theme == "dark"

    def test_missing_lookup_value_is_empty(self):
        colors = ColorCache(lambda name: None).colors
        assert colors.bg == ""

    def test_surface_rgb_from_hex(self, surface):
        c = Canvas(surface)
        c.fill_style = PALETTES["dark"]["bg"]
        c.fill_rect(0, 0, 2, 2)
        assert surface.get_at((0, 0))[:3] == tuple(pygame.Color(PALETTES["dark"]["bg"]))[:3]
