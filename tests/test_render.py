import pygame
import pytest

from config import HEAD_COLOR, WINDOW_HEIGHT, WINDOW_WIDTH
from game import Direction, GameStatus, SnakeGame
from grid import cell_rect
from render import Renderer


@pytest.fixture
def renderer(fonts):
    return Renderer(pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT)))


def test_running_game_draws_head(renderer, rng):
    game = SnakeGame(rng=rng)
    game.food = (0, 0)
    game.request_direction(Direction.RIGHT)
    game.tick()

    renderer.draw(game)

    center = cell_rect(game.head).center
    assert tuple(renderer.screen.get_at(center))[:3] == HEAD_COLOR


@pytest.mark.parametrize("status", list(GameStatus))
def test_every_status_renders(renderer, rng, status):
    game = SnakeGame(rng=rng)
    game.status = status
    renderer.show_debug = True
    renderer.draw(game)

    center = cell_rect(game.head).center
    dimmed = status is not GameStatus.RUNNING
    assert (tuple(renderer.screen.get_at(center))[:3] != HEAD_COLOR) == dimmed


def test_full_board_without_food_renders(renderer, rng):
    game = SnakeGame(rng=rng)
    game.food = None
    game.status = GameStatus.GAME_OVER
    game.game_over_reason = "full"
    renderer.show_help = True
    renderer.draw(game)
