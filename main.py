import sys
import argparse
import logging
from typing import List, Optional

import numpy as np

from gridpath.config import OBSTACLE_DENSITY
from gridpath.generator import Board, load_board, randomize, random_dimensions
from gridpath.geometry import Point, euclidean_distance, manhattan_distance
from gridpath.grid import GridError
from gridpath.render import pretty_print, raw_path
from gridpath.search import InvalidConfigurationError, SearchConfig, find_path

logger = logging.getLogger("gridpath")

HEURISTICS = {
    "manhattan": manhattan_distance,
    "euclidean": euclidean_distance,
}


def parse_point(text: str) -> Point:
    """Parse an 'x,y' command line value."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")
    return Point(x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a shortest path across an obstacle grid with A*."
    )
    parser.add_argument("--board", help="JSON board file to load instead of a random board")
    parser.add_argument("--width", type=int, help="random board width")
    parser.add_argument("--height", type=int, help="random board height")
    parser.add_argument(
        "--density",
        type=float,
        default=OBSTACLE_DENSITY,
        help="probability that a random cell is an obstacle",
    )
    parser.add_argument("--seed", type=int, help="seed for reproducible boards")
    parser.add_argument("--start", type=parse_point, help="start cell as x,y")
    parser.add_argument("--goal", type=parse_point, help="goal cell as x,y")
    parser.add_argument(
        "--heuristic", choices=sorted(HEURISTICS), default="manhattan"
    )
    parser.add_argument(
        "--view", action="store_true", help="show the result in a pygame window"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def make_board(args: argparse.Namespace, rng: np.random.Generator) -> Board:
    """Load or randomize the board, then apply any start/goal overrides."""
    if args.board:
        board = load_board(args.board, rng=rng)
    else:
        width, height = random_dimensions(rng)
        board = randomize(
            width if args.width is None else args.width,
            height if args.height is None else args.height,
            density=args.density,
            rng=rng,
        )
    return Board(
        board.grid,
        args.start or board.start,
        args.goal or board.goal,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = np.random.default_rng(args.seed)
    try:
        board = make_board(args, rng)
        config = SearchConfig(
            board.grid, board.start, board.goal, HEURISTICS[args.heuristic]
        )
        config.validate()
        print("------ BOARD ------")
        print(pretty_print(board.grid, board.start, board.goal))
        print("------ END OF BOARD ------")
        print("Searching for path...")
        path, found = find_path(config)
    except (GridError, InvalidConfigurationError) as e:
        logger.error("%s", e)
        return 2

    print("Path found!" if found else "No path found...")
    if not found:
        logger.info(
            "Start %s lies in region %s and goal %s in region %s",
            tuple(board.start),
            board.grid.region_id(board.start),
            tuple(board.goal),
            board.grid.region_id(board.goal),
        )
    print("------ FINAL BOARD ------")
    print(pretty_print(board.grid, board.start, board.goal, path))
    print("------ END OF BOARD ------")
    print(raw_path(path))
    if args.view:
        from gridpath.viewer import run_viewer

        run_viewer(board.grid, board.start, board.goal, path)
    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())
