from __future__ import annotations
import os
import json
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

import numpy as np

from .config import BOARD_FILE, TILE_EMPTY, TILE_WALL
from .geometry import Point, neighbors

logger = logging.getLogger(__name__)


class GridError(ValueError):
    """Raised when a board is malformed or cannot be loaded."""


def read_board_file(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read a JSON board definition of the form {"map": [[0, 1, ...], ...]} with
    optional "start" and "goal" [x, y] pairs. Defaults to the bundled board.
    """
    board_path = path or os.path.join(os.path.dirname(__file__), BOARD_FILE)
    try:
        with open(board_path, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise GridError(f"Failed to load board from {board_path}: {e}")
    rows = data.get("map") if isinstance(data, dict) else None
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise GridError(f"Board file {board_path} has no 'map' rows")
    return data


class Grid:
    """Rectangular occupancy map: TILE_EMPTY cells are walkable, TILE_WALL cells are obstacles."""

    def __init__(self, map_grid: Sequence[Sequence[int]]) -> None:
        if len(map_grid) == 0 or len(map_grid[0]) == 0:
            raise GridError("Board must have at least one row and one column")
        row_len = len(map_grid[0])
        for y, row in enumerate(map_grid):
            if len(row) != row_len:
                raise GridError(
                    f"Board row {y} has {len(row)} cells, expected {row_len}"
                )
        try:
            raw = np.array(map_grid)
        except ValueError as e:
            raise GridError(f"Board rows must be flat lists of tiles: {e}")
        if raw.ndim != 2:
            raise GridError(f"Board must be 2-dimensional, got {raw.ndim} dimensions")
        if raw.dtype != np.bool_ and not np.issubdtype(raw.dtype, np.integer):
            raise GridError(f"Board cells must be integers, got {raw.dtype}")
        cells = raw.astype(np.int8)
        bad = ~np.isin(raw, (TILE_EMPTY, TILE_WALL))
        if bad.any():
            y, x = np.argwhere(bad)[0]
            raise GridError(
                f"Unknown tile {int(raw[y, x])} at ({int(x)}, {int(y)})"
            )
        # Read-only for the lifetime of the grid
        cells.setflags(write=False)
        self.cells = cells
        self.height, self.width = cells.shape
        self._region_map: Optional[np.ndarray] = None

    def in_bounds(self, p: Point) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, p: Point) -> bool:
        """Return True if ``p`` lies inside the board on an empty cell."""
        if not self.in_bounds(p):
            return False
        x, y = p
        return bool(self.cells[y, x] == TILE_EMPTY)

    def walkable_cells(self) -> List[Point]:
        """All walkable cells in row-major order."""
        ys, xs = np.nonzero(self.cells == TILE_EMPTY)
        return [Point(int(x), int(y)) for y, x in zip(ys, xs)]

    def cells_iter(self) -> Iterator[Point]:
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    @property
    def region_map(self) -> np.ndarray:
        """
        Label each walkable cell with the id of its 4-connected region,
        obstacles with -1. Computed on first use.
        """
        if self._region_map is None:
            self._region_map = self._flood_regions()
        return self._region_map

    def _flood_regions(self) -> np.ndarray:
        region_map = np.full((self.height, self.width), -1, dtype=np.int32)
        region_id = 0
        for start in self.cells_iter():
            if (
                not self.is_walkable(start)
                or region_map[start.y, start.x] != -1
            ):
                continue
            stack = [start]
            while stack:
                p = stack.pop()
                if not self.is_walkable(p) or region_map[p.y, p.x] != -1:
                    continue
                region_map[p.y, p.x] = region_id
                stack.extend(neighbors(p))
            region_id += 1
        logger.debug(
            "Flood fill found %d regions on %dx%d board",
            region_id,
            self.width,
            self.height,
        )
        return region_map

    def region_id(self, p: Point) -> Optional[int]:
        """Return the region id of a walkable cell, or None for obstacles and out-of-bounds."""
        if not self.is_walkable(p):
            return None
        return int(self.region_map[p[1], p[0]])

    def __repr__(self) -> str:
        return f"<Grid {self.width}x{self.height}>"
