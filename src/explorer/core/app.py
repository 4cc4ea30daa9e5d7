"""Host application: a pygame window driving an :class:`ExplorerEngine`.

Separates concerns:
- App: sets up the window, owns the theme and runs the frame loop.
- ExplorerEngine: holds all scene state and does update/draw.
- TextRenderer: simple 2D overlay (FPS).

Keys: ``T`` toggles the light/dark theme, ``M`` toggles reduced motion,
``Esc`` quits. Resizing the window resizes the scene without reseeding.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

import pygame

from explorer import config
from explorer.core.engine import ExplorerEngine, create_explorer_engine
from explorer.render.colors import ThemeProvider
from explorer.ui.text_renderer import TextRenderer

logger = logging.getLogger(__name__)


@dataclass
class AppSettings:
    width: int = config.WIDTH
    height: int = config.HEIGHT
    fps: int = config.FPS
    vsync: bool = config.VSYNC
    show_fps: bool = config.SHOW_FPS
    theme: str = config.DEFAULT_THEME
    is_mobile: bool = False
    reduced_motion: bool = False
    seed: Optional[int] = None
    timing: bool = False


def log_timing(message: str, start_time: float, end_time: float, log: bool = False) -> None:
    """Print how long a setup phase took."""
    if log:
        print(f"{message} took {end_time - start_time:.6f} seconds")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
class App:
    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or AppSettings()
        s = self.settings
        pygame.init()
        pygame.display.set_caption("Explorer")
        flags = pygame.RESIZABLE
        try:
            # vsync: 1 to enable, 0 to disable
            self.screen = pygame.display.set_mode(
                (s.width, s.height), flags, vsync=(1 if s.vsync else 0)
            )
        except pygame.error:
            # vsync was requested but is unavailable on this driver
            self.screen = pygame.display.set_mode((s.width, s.height), flags)
        self.clock = pygame.time.Clock()

        self.theme = ThemeProvider(s.theme)
        rng = random.Random(s.seed) if s.seed is not None else None

        start_time = time.perf_counter()
        self.engine: ExplorerEngine = create_explorer_engine(
            self.screen,
            s.width,
            s.height,
            self.theme.lookup,
            is_mobile=s.is_mobile,
            reduced_motion=s.reduced_motion,
            rng=rng,
        )
        log_timing("Seeding scene", start_time, time.perf_counter(), s.timing)

        self.text = TextRenderer() if s.show_fps else None
        print(f"Explorer scene initialized ({s.width}x{s.height}, {self.theme.theme} theme)")

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_t:
                    self.toggle_theme()
                elif event.key == pygame.K_m:
                    self.toggle_reduced_motion()
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
        return True

    def toggle_theme(self) -> None:
        theme = self.theme.toggle()
        self.engine.on_theme_change()
        logger.info("Theme switched to %s", theme)

    def toggle_reduced_motion(self) -> None:
        enabled = not self.engine.reduced_motion
        self.engine.set_reduced_motion(enabled)
        logger.info("Reduced motion %s", "enabled" if enabled else "disabled")

    def resize(self, width: int, height: int) -> None:
        # pygame 2 resizes the display surface in place; re-fetch it anyway
        self.screen = pygame.display.get_surface() or self.screen
        self.engine.resize(width, height, self.screen)

    # ------------------------------------------------------------------
    def render(self) -> None:  # pragma: no cover - visual
        self.engine.draw()
        if self.text is not None:
            fps_val = self.clock.get_fps()
            color = pygame.Color(self.theme.lookup("text-muted"))
            self.text.draw_text(
                self.screen,
                f"{fps_val:5.1f} fps",
                self.screen.get_width() - 8,
                8,
                (color.r, color.g, color.b, 255),
                key="fps",
                align="topright",
            )
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self) -> None:  # pragma: no cover - visual
        running = True
        while running:
            # With vsync the display paces frames; the FPS cap is a safety
            # net for drivers that don't honor it.
            dt = self.clock.tick(self.settings.fps) / 1000.0
            running = self.handle_events()
            if not running:
                break
            self.engine.update(dt)
            self.render()
        pygame.quit()
