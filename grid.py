"""Grid geometry: integer cells on a square board and their pixel regions."""
import pygame

from config import BOARD_ORIGIN, BOARD_SIZE, CELL_SIZE, GRID_COUNT


def in_bounds(cell, grid_count=GRID_COUNT):
    """Return True when a cell lies on the board."""
    x, y = cell
    return 0 <= x < grid_count and 0 <= y < grid_count


def step(cell, vector):
    """Return the neighbouring cell one unit along a direction vector."""
    return (cell[0] + vector[0], cell[1] + vector[1])


def cell_count(grid_count=GRID_COUNT):
    return grid_count * grid_count


def board_rect():
    return pygame.Rect(BOARD_ORIGIN[0], BOARD_ORIGIN[1], BOARD_SIZE, BOARD_SIZE)


def cell_rect(cell, padding=0):
    """Return a pixel rectangle for a grid position."""
    x, y = cell
    return pygame.Rect(
        BOARD_ORIGIN[0] + x * CELL_SIZE + padding,
        BOARD_ORIGIN[1] + y * CELL_SIZE + padding,
        CELL_SIZE - padding * 2,
        CELL_SIZE - padding * 2,
    )


def cell_center(cell):
    return cell_rect(cell).center
