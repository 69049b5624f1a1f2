"""Command line entry point for the slot machine."""

from __future__ import annotations

import argparse
import random

from .config import get_settings
from .engine.spin import SpinEngine
from .game import SlotMachineGame
from .utils import configure_logging


def build_game(seed: int | None = None) -> SlotMachineGame:
    settings = get_settings()
    if seed is None:
        seed = settings.seed
    engine = SpinEngine(rows=settings.rows, cols=settings.cols, rng=random.Random(seed))
    return SlotMachineGame(engine=engine)


def main(argv: list[str] | None = None, prog_name: str | None = None) -> None:
    parser = argparse.ArgumentParser(prog=prog_name, description="Console slot machine")
    parser.add_argument("--seed", type=int, default=None, help="seed the reels")
    parser.add_argument("--log-level", default=None, help="diagnostic log level (stderr)")
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)
    build_game(args.seed).run()


if __name__ == "__main__":
    main()
