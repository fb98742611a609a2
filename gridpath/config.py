# Board tiles
TILE_EMPTY = 0
TILE_WALL = 1

# Random board settings
# Probability that a generated cell is an obstacle
OBSTACLE_DENSITY = 0.2
# Random board dimensions are drawn from [MIN_BOARD_SIZE, MAX_BOARD_SIZE)
MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 20
# Board file: JSON definition of a fixed board (relative to the package)
BOARD_FILE = 'boards/default.json'

# Viewer settings
# Side length of one board cell in pixels
CELL_SIZE = 32
FPS = 30
# Gap in pixels between neighbouring cells
CELL_MARGIN = 1

# Colors
BACKGROUND_COLOR = (20, 20, 20)
EMPTY_COLOR = (200, 200, 200)
WALL_COLOR = (50, 50, 50)
PATH_COLOR = (90, 160, 230)
START_COLOR = (60, 190, 90)
GOAL_COLOR = (220, 70, 70)
