import json

import numpy as np
import pytest

from gridpath.config import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from gridpath.generator import Board, load_board, random_dimensions, randomize
from gridpath.geometry import Point
from gridpath.grid import GridError


def test_randomize_board_shape_and_endpoints():
    board = randomize(7, 5, rng=np.random.default_rng(1))
    assert board.grid.width == 7 and board.grid.height == 5
    # Start and goal are distinct walkable cells
    assert board.start != board.goal
    assert board.grid.is_walkable(board.start)
    assert board.grid.is_walkable(board.goal)


def test_randomize_is_reproducible_with_seed():
    a = randomize(9, 9, rng=np.random.default_rng(42))
    b = randomize(9, 9, rng=np.random.default_rng(42))
    assert a.grid.cells.tolist() == b.grid.cells.tolist()
    assert (a.start, a.goal) == (b.start, b.goal)


def test_randomize_zero_density_has_no_obstacles():
    board = randomize(4, 3, density=0.0, rng=np.random.default_rng(0))
    assert len(board.grid.walkable_cells()) == 12


def test_randomize_full_density_fails():
    # Fewer than two walkable cells cannot hold a start and goal
    with pytest.raises(GridError):
        randomize(4, 4, density=1.0, rng=np.random.default_rng(0))


def test_randomize_single_cell_fails():
    with pytest.raises(GridError):
        randomize(1, 1, density=0.0)


@pytest.mark.parametrize("width,height,density", [(0, 3, 0.2), (3, -1, 0.2), (3, 3, 1.5)])
def test_randomize_rejects_bad_arguments(width, height, density):
    with pytest.raises(GridError):
        randomize(width, height, density=density)


def test_random_dimensions_range():
    rng = np.random.default_rng(7)
    for _ in range(50):
        width, height = random_dimensions(rng)
        assert MIN_BOARD_SIZE <= width < MAX_BOARD_SIZE
        assert MIN_BOARD_SIZE <= height < MAX_BOARD_SIZE


def test_load_board_with_endpoints(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(
        json.dumps({"map": [[0, 0, 0], [1, 1, 0]], "start": [0, 0], "goal": [2, 1]})
    )
    board = load_board(str(path))
    assert isinstance(board, Board)
    assert board.start == Point(0, 0)
    assert board.goal == Point(2, 1)


def test_load_board_fills_missing_endpoints(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"map": [[0, 1], [0, 1]], "start": [0, 0]}))
    board = load_board(str(path), rng=np.random.default_rng(3))
    assert board.start == Point(0, 0)
    # Only one other walkable cell is left for the goal
    assert board.goal == Point(0, 1)


def test_load_board_not_enough_cells(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"map": [[0, 1]]}))
    with pytest.raises(GridError):
        load_board(str(path))


@pytest.mark.parametrize("start", [[0], "0,0", ["x", 0]])
def test_load_board_bad_endpoint(tmp_path, start):
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"map": [[0, 0]], "start": start, "goal": [1, 0]}))
    with pytest.raises(GridError):
        load_board(str(path))


def test_load_default_board():
    board = load_board()
    assert board.grid.is_walkable(board.start)
    assert board.grid.is_walkable(board.goal)
