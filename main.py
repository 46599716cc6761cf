# main.py
import logging

import arcade

from cli import parse_args, build_session
from game_view import GameView
from logging_config import setup_logging
from settings import BG, TITLE

logger = logging.getLogger(__name__)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    session = build_session(args)
    logger.info("Starting %dx%d window", args.width, args.height)

    window = arcade.Window(args.width, args.height, TITLE, resizable=False)
    arcade.set_background_color(BG)
    window.show_view(GameView(session))
    arcade.run()


if __name__ == "__main__":
    main()
