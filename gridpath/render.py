"""Plain-text rendering of boards and paths."""
from __future__ import annotations
from typing import Iterable, Optional, Sequence

from .geometry import Point
from .grid import Grid


def pretty_print(
    grid: Grid,
    start: Point,
    goal: Point,
    path: Optional[Iterable[Point]] = None,
) -> str:
    """
    Render the board one row per line: S marks the start, E the goal,
    X a path cell and any other cell shows its tile value.
    """
    on_path = {Point(*p) for p in path or ()}
    lines = []
    for y in range(grid.height):
        cells = []
        for x in range(grid.width):
            p = Point(x, y)
            if p == start:
                cells.append("S")
            elif p == goal:
                cells.append("E")
            elif p in on_path:
                cells.append("X")
            else:
                cells.append(str(int(grid.cells[y, x])))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def raw_path(path: Sequence[Point]) -> str:
    """Render a path as '(x, y) -> (x, y) -> Goal', or 'No path.' when empty."""
    if not path:
        return "No path."
    steps = "".join(f"({p[0]}, {p[1]}) -> " for p in path)
    return steps + "Goal"
