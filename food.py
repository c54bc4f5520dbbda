import random

from config import GRID_COUNT
from grid import cell_count


def random_free_cell(snake, grid_count=GRID_COUNT, rng=random):
    """Return a random grid position that is not occupied by the snake.

    Every free cell is equally likely. Raises ValueError when the snake
    covers the whole board, since sampling could never succeed.
    """
    occupied = set(snake)
    if len(occupied) >= cell_count(grid_count):
        raise ValueError("no free cell left on a %dx%d grid" % (grid_count, grid_count))

    while True:
        pos = (rng.randrange(grid_count), rng.randrange(grid_count))
        if pos not in occupied:
            return pos
