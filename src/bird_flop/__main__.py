"""
Command line entry point: python -m bird_flop
"""

import argparse
import logging

from .constants import RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .game_client import GameClient
from .logging_setup import setup_logging

logger = logging.getLogger("bird_flop")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bird-flop", description="Flap between the pipes.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="ticks per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe placement")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    client = GameClient(width=args.width, height=args.height, fps=args.fps, seed=args.seed)
    try:
        client.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
