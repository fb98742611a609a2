"""
Board generation: random obstacle boards and boards loaded from JSON files.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import (
    OBSTACLE_DENSITY,
    MIN_BOARD_SIZE,
    MAX_BOARD_SIZE,
    TILE_EMPTY,
    TILE_WALL,
)
from .geometry import Point
from .grid import Grid, GridError, read_board_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Board:
    """A grid together with the start and goal cells to search between."""

    grid: Grid
    start: Point
    goal: Point


def random_dimensions(
    rng: Optional[np.random.Generator] = None,
) -> Tuple[int, int]:
    """Draw a (width, height) pair in [MIN_BOARD_SIZE, MAX_BOARD_SIZE)."""
    rng = rng or np.random.default_rng()
    width, height = rng.integers(MIN_BOARD_SIZE, MAX_BOARD_SIZE, size=2)
    return int(width), int(height)


def randomize(
    width: int,
    height: int,
    density: float = OBSTACLE_DENSITY,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Build a width x height board where each cell is an obstacle with
    probability ``density``, and pick two distinct walkable cells as start
    and goal. Raises GridError when fewer than two walkable cells remain.
    """
    if width < 1 or height < 1:
        raise GridError(f"Board size must be positive, got {width}x{height}")
    if not 0.0 <= density <= 1.0:
        raise GridError(f"Obstacle density must be in [0, 1], got {density}")
    rng = rng or np.random.default_rng()
    cells = np.where(
        rng.random((height, width)) < density, TILE_WALL, TILE_EMPTY
    )
    grid = Grid(cells)
    free = grid.walkable_cells()
    logger.debug(
        "Generated %dx%d board with %d obstacles",
        width,
        height,
        width * height - len(free),
    )
    if len(free) < 2:
        raise GridError(
            f"Not enough walkable cells on the board ({len(free)} found)"
        )
    first, second = rng.choice(len(free), size=2, replace=False)
    return Board(grid, free[int(first)], free[int(second)])


def _parse_point(raw, name: str) -> Optional[Point]:
    if raw is None:
        return None
    if not (isinstance(raw, (list, tuple)) and len(raw) == 2):
        raise GridError(f"Board {name} must be an [x, y] pair, got {raw!r}")
    try:
        return Point(int(raw[0]), int(raw[1]))
    except (TypeError, ValueError):
        raise GridError(f"Board {name} must be integers, got {raw!r}")


def load_board(
    path: Optional[str] = None,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Load a board from a JSON file. Missing start/goal entries are filled
    with distinct random walkable cells.
    """
    data = read_board_file(path)
    grid = Grid(data["map"])
    start = _parse_point(data.get("start"), "start")
    goal = _parse_point(data.get("goal"), "goal")
    if start is None or goal is None:
        rng = rng or np.random.default_rng()
        free = [p for p in grid.walkable_cells() if p not in (start, goal)]
        needed = (start is None) + (goal is None)
        if len(free) < needed:
            raise GridError(
                f"Not enough walkable cells on the board ({len(free)} found)"
            )
        picks = [free[int(i)] for i in rng.choice(len(free), size=needed, replace=False)]
        if start is None:
            start = picks.pop()
        if goal is None:
            goal = picks.pop()
    return Board(grid, start, goal)
