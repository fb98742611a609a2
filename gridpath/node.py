"""Per-cell search bookkeeping for the A* engine."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .geometry import Point


@dataclass
class SearchNode:
    """
    Best-known search state for one cell.
    Attributes:
        position (Point): Cell this node describes.
        cost (float): Accumulated path cost from the start (g-value).
        priority (float): cost plus heuristic estimate to the goal (f-value).
        parent (Point | None): Predecessor cell on the best path so far.
        rank (int): Order in which the cell first entered the open set.
    """

    position: Point
    cost: float = 0.0
    priority: float = 0.0
    parent: Optional[Point] = None
    rank: int = 0

    def relax(self, cost: float, estimate: float, parent: Point) -> None:
        """Record a cheaper route reaching this cell through ``parent``."""
        self.cost = cost
        self.priority = cost + estimate
        self.parent = parent
