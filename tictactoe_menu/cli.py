import argparse

from . import constants
from .menu import Settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic-tac-toe with menu and settings")
    parser.add_argument("--board-size", type=int, default=constants.DEFAULT_BOARD_SIZE,
                        help=f"initial board size (default: {constants.DEFAULT_BOARD_SIZE})")
    parser.add_argument("--search-depth", type=int, default=constants.DEFAULT_SEARCH_DEPTH,
                        help=f"initial AI depth setting (default: {constants.DEFAULT_SEARCH_DEPTH})")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level (default: WARNING)")
    args = parser.parse_args(argv)
    # out-of-range values exit with status 2 like any argparse error
    if args.board_size not in constants.BOARD_SIZE_OPTIONS:
        parser.error(f"--board-size must be one of {list(constants.BOARD_SIZE_OPTIONS)}")
    if args.search_depth not in constants.SEARCH_DEPTH_OPTIONS:
        parser.error(f"--search-depth must be one of {list(constants.SEARCH_DEPTH_OPTIONS)}")
    return args


def build_settings(args):
    settings = Settings()
    settings.board_size.select(args.board_size)
    settings.search_depth.select(args.search_depth)
    return settings
