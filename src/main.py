"""Entry point kept minimal by delegating to Engine.

Command-line flags override the defaults from ``config.py`` for a single
run; the values are handed to the Engine explicitly.
"""

import argparse
import logging

from config import DEFAULT_SEED, DEMO_TREE_COUNT, FPS, HEIGHT, WIDTH
from logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Interactive procedural 2D scene: fractal trees, sine ribbons and more"
    )
    ap.add_argument("--width", type=int, default=WIDTH, help="Window width in pixels")
    ap.add_argument("--height", type=int, default=HEIGHT, help="Window height in pixels")
    ap.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for the shared random stream")
    ap.add_argument("--trees", type=int, default=DEMO_TREE_COUNT, help="Number of fractal trees at start")
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level",
    )
    ap.add_argument("--log-file", default=None, help="Optional log file path")
    return ap


def main(argv=None):  # small wrapper for clarity / debuggers
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    # Imported late so --help works without initializing pygame/OpenGL
    from core.engine import Engine

    Engine(
        width=args.width,
        height=args.height,
        fps=args.fps,
        seed=args.seed,
        tree_count=args.trees,
    ).run()


if __name__ == "__main__":
    main()
