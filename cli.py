# cli.py
from __future__ import annotations
import argparse
import random

from config_loader import Tuning, load_tuning
from logging_config import LOG_LEVELS
from session import GameSession
from settings import WIDTH, HEIGHT


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Dash.")
    parser.add_argument("--width", type=int, default=WIDTH, help="Window width in px.")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Window height in px.")
    parser.add_argument("--config", type=str, default=None, help="JSON file with tuning overrides.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe gap placement.")
    parser.add_argument("--log-level", type=str, default="info", choices=LOG_LEVELS)
    parser.add_argument("--log-file", type=str, default=None)
    return parser.parse_args(argv)


def build_session(args: argparse.Namespace) -> GameSession:
    tuning = load_tuning(args.config) if args.config else Tuning()
    rng = random.Random(args.seed)
    return GameSession(args.width, args.height, rng=rng, tuning=tuning)
