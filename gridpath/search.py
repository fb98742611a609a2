"""
Pathfinding engine: implements grid-based A* search.
"""
from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Set, Tuple

from .geometry import Heuristic, Point, manhattan_distance, neighbors
from .grid import Grid
from .node import SearchNode

logger = logging.getLogger(__name__)

# Cost of moving to a 4-connected neighbour
STEP_COST = 1.0


class InvalidConfigurationError(ValueError):
    """Raised when the start or goal cell cannot take part in a search."""


@dataclass(frozen=True)
class SearchConfig:
    """
    Everything one search needs. Instances are immutable; the ``with_*``
    helpers return an updated copy.
    """

    grid: Grid
    start: Point
    goal: Point
    heuristic: Heuristic = manhattan_distance

    def __post_init__(self) -> None:
        # Accept plain (x, y) tuples
        for name in ("start", "goal"):
            value = getattr(self, name)
            try:
                object.__setattr__(self, name, Point(*value))
            except TypeError:
                raise InvalidConfigurationError(
                    f"{name} must be an (x, y) pair, got {value!r}"
                )

    def with_grid(self, grid: Grid) -> SearchConfig:
        return replace(self, grid=grid)

    def with_start(self, start: Point) -> SearchConfig:
        return replace(self, start=start)

    def with_goal(self, goal: Point) -> SearchConfig:
        return replace(self, goal=goal)

    def with_heuristic(self, heuristic: Heuristic) -> SearchConfig:
        return replace(self, heuristic=heuristic)

    def validate(self) -> None:
        """Raise InvalidConfigurationError unless start and goal are walkable board cells."""
        for name, p in (("start", self.start), ("goal", self.goal)):
            if not self.grid.in_bounds(p):
                raise InvalidConfigurationError(
                    f"{name} {tuple(p)} is outside the "
                    f"{self.grid.width}x{self.grid.height} board"
                )
            if not self.grid.is_walkable(p):
                raise InvalidConfigurationError(
                    f"{name} {tuple(p)} is on an obstacle"
                )


@dataclass
class SearchStats:
    """Counters collected during one search."""

    expanded: int = 0
    pushed: int = 0
    relaxed: int = 0
    path_length: int = 0
    found: bool = False


@dataclass
class _OpenSet:
    """
    Binary heap of (priority, rank, point) entries plus the node table.
    A node keeps the rank of its first insertion, so equal priorities are
    served in first-inserted order even after relaxation. Entries made
    stale by a relaxation are skipped when popped.
    """

    nodes: Dict[Point, SearchNode] = field(default_factory=dict)
    heap: List[Tuple[float, int, Point]] = field(default_factory=list)
    members: Set[Point] = field(default_factory=set)
    next_rank: int = 0

    def __len__(self) -> int:
        return len(self.members)

    def get(self, p: Point) -> Optional[SearchNode]:
        return self.nodes.get(p) if p in self.members else None

    def add(self, p: Point) -> SearchNode:
        node = SearchNode(p, rank=self.next_rank)
        self.next_rank += 1
        self.nodes[p] = node
        self.members.add(p)
        return node

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self.heap, (node.priority, node.rank, node.position))

    def pop_min(self) -> SearchNode:
        while True:
            priority, _, p = heapq.heappop(self.heap)
            node = self.nodes[p]
            if p in self.members and priority == node.priority:
                self.members.discard(p)
                return node


def reconstruct_path(nodes: Dict[Point, SearchNode], end: Point) -> List[Point]:
    """Follow parent links from ``end`` back to the start and return them start-first."""
    path = [end]
    current = nodes[end].parent
    while current is not None:
        path.append(current)
        current = nodes[current].parent
    path.reverse()
    return path


def find_path_with_stats(
    config: SearchConfig,
) -> Tuple[List[Point], bool, SearchStats]:
    """
    Run A* for ``config`` and return (path, found, stats).
    path runs from start to goal inclusive, or is empty when no path exists.
    """
    config.validate()
    grid, start, goal, heuristic = (
        config.grid,
        config.start,
        config.goal,
        config.heuristic,
    )
    stats = SearchStats()

    open_set = _OpenSet()
    start_node = open_set.add(start)
    start_node.priority = heuristic(start, goal)
    open_set.push(start_node)
    stats.pushed += 1
    closed: Set[Point] = set()

    while open_set:
        current = open_set.pop_min()
        if current.position == goal:
            path = reconstruct_path(open_set.nodes, goal)
            stats.found = True
            stats.path_length = len(path)
            logger.debug(
                "Path %s -> %s found: %d cells, %d expanded",
                start,
                goal,
                len(path),
                stats.expanded,
            )
            return path, True, stats

        closed.add(current.position)
        stats.expanded += 1

        for neighbor in neighbors(current.position):
            if not grid.in_bounds(neighbor) or not grid.is_walkable(neighbor):
                continue
            if neighbor in closed:
                continue
            tentative_cost = current.cost + STEP_COST
            node = open_set.get(neighbor)
            if node is None:
                node = open_set.add(neighbor)
            elif tentative_cost >= node.cost:
                continue
            else:
                stats.relaxed += 1
            node.relax(
                tentative_cost, heuristic(neighbor, goal), current.position
            )
            open_set.push(node)
            stats.pushed += 1

    logger.debug(
        "No path %s -> %s after %d expansions", start, goal, stats.expanded
    )
    return [], False, stats


def find_path(config: SearchConfig) -> Tuple[List[Point], bool]:
    """
    Find a shortest 4-connected path from config.start to config.goal.
    Returns (path, True) on success and ([], False) when the goal is
    unreachable. Raises InvalidConfigurationError for start or goal cells
    outside the board or on obstacles.
    """
    path, found, _ = find_path_with_stats(config)
    return path, found
