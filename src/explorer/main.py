"""Entry point kept minimal by delegating to App.

Parses the command line into :class:`~explorer.core.app.AppSettings` and runs
the window loop.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from explorer import config
from explorer.core.app import App, AppSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="explorer",
        description="Procedural walking-explorer animation.",
    )
    parser.add_argument("--width", type=int, default=config.WIDTH)
    parser.add_argument("--height", type=int, default=config.HEIGHT)
    parser.add_argument("--fps", type=int, default=config.FPS, help="frame rate cap")
    parser.add_argument("--vsync", action="store_true", default=config.VSYNC)
    parser.add_argument(
        "--mobile", action="store_true", help="use mobile capacities and spawn rates"
    )
    parser.add_argument(
        "--reduced-motion", action="store_true", help="start with a frozen scene"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the scene RNG")
    parser.add_argument(
        "--theme", choices=("light", "dark"), default=config.DEFAULT_THEME
    )
    parser.add_argument("--show-fps", action="store_true", default=config.SHOW_FPS)
    parser.add_argument("--timing", action="store_true", help="print setup timings")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        width=max(1, args.width),
        height=max(1, args.height),
        fps=max(1, args.fps),
        vsync=args.vsync,
        show_fps=args.show_fps,
        theme=args.theme,
        is_mobile=args.mobile,
        reduced_motion=args.reduced_motion,
        seed=args.seed,
        timing=args.timing,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:  # small wrapper for clarity / debuggers
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    App(settings_from_args(args)).run()


if __name__ == "__main__":
    main()
