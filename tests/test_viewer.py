import pygame
import pytest

from gridpath import config
from gridpath.geometry import Point
from gridpath.grid import Grid
import gridpath.viewer as viewer


@pytest.fixture
def grid():
    return Grid([[0, 1, 0], [0, 0, 0]])


def test_window_size(grid):
    assert viewer.window_size(grid, cell_size=10) == (30, 20)


def test_cell_color_priority(grid):
    on_path = {Point(0, 1), Point(0, 0)}
    start, goal = Point(0, 0), Point(2, 0)
    # Start and goal colours win over the path colour
    assert viewer.cell_color(grid, start, start, goal, on_path) == config.START_COLOR
    assert viewer.cell_color(grid, goal, start, goal, on_path) == config.GOAL_COLOR
    assert viewer.cell_color(grid, Point(0, 1), start, goal, on_path) == config.PATH_COLOR
    assert viewer.cell_color(grid, Point(1, 0), start, goal, on_path) == config.WALL_COLOR
    assert viewer.cell_color(grid, Point(2, 1), start, goal, on_path) == config.EMPTY_COLOR


def test_draw_board_fills_cells(grid):
    surface = pygame.Surface((30, 20))
    viewer.draw_board(
        surface, grid, Point(0, 0), Point(2, 0), [(0, 0), (0, 1)], cell_size=10
    )
    # Sample the middle of a few cells
    assert tuple(surface.get_at((5, 5)))[:3] == config.START_COLOR
    assert tuple(surface.get_at((15, 5)))[:3] == config.WALL_COLOR
    assert tuple(surface.get_at((25, 5)))[:3] == config.GOAL_COLOR
    assert tuple(surface.get_at((5, 15)))[:3] == config.PATH_COLOR
    assert tuple(surface.get_at((25, 15)))[:3] == config.EMPTY_COLOR


def test_run_viewer_exits_on_quit(monkeypatch, grid):
    """Stub out the pygame display so the loop can run headless."""
    calls = []
    monkeypatch.setattr(pygame, "init", lambda: None)
    monkeypatch.setattr(pygame, "quit", lambda: calls.append("quit"))
    monkeypatch.setattr(
        pygame.display, "set_mode", lambda size: pygame.Surface(size)
    )
    monkeypatch.setattr(
        pygame.display, "set_caption", lambda caption: calls.append(caption)
    )
    monkeypatch.setattr(pygame.display, "flip", lambda: calls.append("flip"))
    monkeypatch.setattr(
        pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)]
    )

    class DummyClock:
        def tick(self, fps):
            return 0

    viewer.run_viewer(
        grid, Point(0, 0), Point(2, 0), [(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)],
        clock=DummyClock(),
    )
    assert calls[0] == "A* (0, 0) -> (2, 0) (4 steps)"
    assert calls[-2:] == ["flip", "quit"]
