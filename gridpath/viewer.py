"""
Pygame window showing a board and the path found on it.
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional

import pygame

from .config import (
    CELL_SIZE,
    CELL_MARGIN,
    FPS,
    BACKGROUND_COLOR,
    EMPTY_COLOR,
    WALL_COLOR,
    PATH_COLOR,
    START_COLOR,
    GOAL_COLOR,
    TILE_WALL,
)
from .geometry import Point
from .grid import Grid

logger = logging.getLogger(__name__)


def window_size(grid: Grid, cell_size: int = CELL_SIZE) -> tuple:
    return grid.width * cell_size, grid.height * cell_size


def cell_color(
    grid: Grid, p: Point, start: Point, goal: Point, on_path: set
) -> tuple:
    """Return the fill colour of one board cell."""
    if p == start:
        return START_COLOR
    if p == goal:
        return GOAL_COLOR
    if p in on_path:
        return PATH_COLOR
    if grid.cells[p.y, p.x] == TILE_WALL:
        return WALL_COLOR
    return EMPTY_COLOR


def draw_board(
    surface: pygame.Surface,
    grid: Grid,
    start: Point,
    goal: Point,
    path: Optional[Iterable[Point]] = None,
    cell_size: int = CELL_SIZE,
) -> None:
    """Draw every cell of ``grid`` onto ``surface`` as a filled square."""
    on_path = {Point(*p) for p in path or ()}
    surface.fill(BACKGROUND_COLOR)
    inner = max(1, cell_size - CELL_MARGIN)
    for p in grid.cells_iter():
        rect = pygame.Rect(p.x * cell_size, p.y * cell_size, inner, inner)
        pygame.draw.rect(surface, cell_color(grid, p, start, goal, on_path), rect)


def run_viewer(
    grid: Grid,
    start: Point,
    goal: Point,
    path: Optional[Iterable[Point]] = None,
    clock: Optional[pygame.time.Clock] = None,
) -> None:
    """Open a window with the board and block until it is closed (window close or Escape)."""
    path = list(path or ())
    pygame.init()
    screen = pygame.display.set_mode(window_size(grid))
    pygame.display.set_caption(
        f"A* {tuple(start)} -> {tuple(goal)}"
        + (f" ({len(path) - 1} steps)" if path else " (no path)")
    )
    # Clock for frame rate (injectable for testing)
    clock = clock or pygame.time.Clock()
    logger.info("Viewer opened for %dx%d board", grid.width, grid.height)
    running = True
    while running:
        clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
        draw_board(screen, grid, start, goal, path)
        pygame.display.flip()
    pygame.quit()
