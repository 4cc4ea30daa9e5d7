"""Scene renderer: paints every layer in depth order.

Order is fixed, back to front: background, sky (stars, meteors, clouds),
distant floaters (whales, jellyfish, balloons), mountains, ground, ground
clutter, flyers (birds, ufos) and finally the walking figure. Within a
layer, draw order follows the unordered pool and is unspecified.
"""

from __future__ import annotations

from explorer.figure.kinematics import Pose
from explorer.render.canvas import Canvas
from explorer.render.colors import ColorCache
from explorer.render.creature_renderer import CreatureRenderer
from explorer.render.figure_renderer import draw_figure
from explorer.render.frame import Frame
from explorer.render.ground_renderer import GroundRenderer
from explorer.render.sky_renderer import SkyRenderer
from explorer.world.clock import Viewport, WorldClock
from explorer.world.pool import PoolSet


class SceneRenderer:
    def __init__(
        self,
        canvas: Canvas,
        pools: PoolSet,
        colors: ColorCache,
        viewport: Viewport,
        clock: WorldClock,
    ) -> None:
        self.canvas = canvas
        self.pools = pools
        self.colors = colors
        self.viewport = viewport
        self.clock = clock
        self.sky = SkyRenderer(pools["star"].capacity)
        self.creatures = CreatureRenderer()
        self.ground = GroundRenderer()

    def frame(self, frozen: bool) -> Frame:
        vp = self.viewport
        clock = self.clock
        return Frame(
            canvas=self.canvas,
            colors=self.colors.colors,
            width=vp.width,
            height=vp.height,
            ground_y=vp.ground_y,
            world_offset=clock.world_offset,
            time=0.0 if frozen else clock.time,
            wind=0.0 if frozen else clock.wind,
        )

    def draw(self, pose: Pose, frozen: bool = False) -> None:
        """Paint a full frame. ``frozen`` ignores the animation clock."""
        f = self.frame(frozen)
        p = self.pools
        c = self.canvas
        c.global_alpha = 1.0
        c.fill_style = f.colors.bg
        c.fill_rect(0.0, 0.0, f.width, f.height)

        self.sky.draw_stars(f, p["star"])
        self.sky.draw_meteors(f, p["meteor"])
        self.sky.draw_clouds(f, p["cloud"])
        self.creatures.draw_whales(f, p["whale"])
        self.creatures.draw_jellyfish(f, p["jellyfish"])
        self.creatures.draw_balloons(f, p["balloon"])
        self.ground.draw_mountains(f, p["mountain"])
        self.ground.draw_ground_line(f)
        self.ground.draw_pebbles(f, p["pebble"])
        self.ground.draw_grass(f, p["grassTuft"])
        self.creatures.draw_birds(f, p["bird"])
        self.creatures.draw_ufos(f, p["ufo"])
        draw_figure(f, pose)
