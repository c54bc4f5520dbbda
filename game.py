"""Snake state machine: body, direction, food, score and speed ramp."""
import enum
import logging
import random

from config import (
    BASE_TICK_MS,
    GRID_COUNT,
    MIN_TICK_MS,
    SCORE_INCREMENT,
    START_CELL,
    TICK_STEP_MS,
)
from food import random_free_cell
from grid import cell_count, in_bounds, step

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))

    @property
    def label(self):
        return self.name.lower()


class GameStatus(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class InputEvent(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE_TOGGLE = "pause_toggle"
    RESTART = "restart"


EVENT_DIRECTIONS = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}


class SnakeGame:
    """A single game of snake on a square grid.

    The instance owns every piece of mutable game state. It never schedules
    anything itself: a loop driver calls tick() while the status is RUNNING.
    `high_scores` is any object with load() -> int and save(int); without
    one the high score starts at 0 and is kept in memory only.
    """

    def __init__(self, grid_count=GRID_COUNT, start_cell=START_CELL, high_scores=None, rng=None):
        if grid_count < 2:
            raise ValueError("grid_count must be at least 2.")
        if not in_bounds(start_cell, grid_count):
            raise ValueError("start_cell does not fit within the grid.")

        self.grid_count = grid_count
        self.start_cell = start_cell
        self.high_scores = high_scores
        self.rng = rng or random.Random()
        self.high_score = self._load_high_score()
        self.restart()

    def _load_high_score(self):
        if self.high_scores is None:
            return 0
        return max(0, self.high_scores.load())

    def restart(self):
        """Reset to a one-cell snake waiting for its first direction."""
        self.snake = [self.start_cell]
        self.direction = Direction.NONE
        self.score = 0
        self.tick_interval = BASE_TICK_MS
        self.food = random_free_cell(self.snake, self.grid_count, self.rng)
        self.status = GameStatus.NOT_STARTED
        self.game_over_reason = None

    @property
    def head(self):
        return self.snake[0]

    def request_direction(self, direction):
        """Steer the snake; returns False when the request is ignored."""
        if self.status in (GameStatus.PAUSED, GameStatus.GAME_OVER):
            return False
        if direction is Direction.NONE:
            return False
        # Reversing onto the neck would be instant self-collision.
        if self.direction is not Direction.NONE and direction is self.direction.opposite:
            return False

        self.direction = direction
        if self.status is GameStatus.NOT_STARTED:
            self.status = GameStatus.RUNNING
            logger.info("Game started heading %s", direction.label)
        return True

    def toggle_pause(self):
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
        else:
            return False
        return True

    def dispatch(self, event):
        """Apply one input event; returns True when the state changed."""
        if event is InputEvent.PAUSE_TOGGLE:
            return self.toggle_pause()
        if event is InputEvent.RESTART:
            self.restart()
            return True
        return self.request_direction(EVENT_DIRECTIONS[event])

    def tick(self):
        """Advance the snake one cell. Returns False once the game is over."""
        if self.status is not GameStatus.RUNNING:
            return self.status is not GameStatus.GAME_OVER

        new_head = step(self.head, self.direction.value)

        if not in_bounds(new_head, self.grid_count):
            self._game_over("wall")
            return False
        # The tail still occupies its cell while the head moves.
        if new_head in self.snake:
            self._game_over("self")
            return False

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self._eat()
        else:
            self.snake.pop()
        return self.status is GameStatus.RUNNING

    def _eat(self):
        self.score += SCORE_INCREMENT
        self._update_high_score()
        self.tick_interval = max(MIN_TICK_MS, self.tick_interval - TICK_STEP_MS)

        if len(self.snake) >= cell_count(self.grid_count):
            self.food = None
            self._game_over("full")
            return
        self.food = random_free_cell(self.snake, self.grid_count, self.rng)

    def _update_high_score(self):
        if self.score <= self.high_score:
            return
        self.high_score = self.score
        logger.info("New high score: %d", self.high_score)
        if self.high_scores is not None:
            self.high_scores.save(self.high_score)

    def _game_over(self, reason):
        self.status = GameStatus.GAME_OVER
        self.game_over_reason = reason
        logger.info("Game over (%s) with score %d, length %d", reason, self.score, len(self.snake))
