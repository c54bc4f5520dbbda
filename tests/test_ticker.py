import pygame
import pytest

from game import Direction, GameStatus, InputEvent, SnakeGame
from ticker import TICK_EVENT, GameLoop, TickTimer


@pytest.fixture
def game(rng, scores):
    return SnakeGame(high_scores=scores, rng=rng)


@pytest.fixture
def frames():
    return []


@pytest.fixture
def loop(game, set_timer, frames):
    game.food = (0, 0)
    return GameLoop(game, TickTimer(set_timer=set_timer), on_render=lambda g: frames.append(g.status))


def fire(loop, set_timer):
    """Deliver the most recently armed tick event."""
    event, _ = set_timer.scheduled[-1]
    return loop.handle_tick(event)


def test_nothing_scheduled_before_start(loop, set_timer):
    loop.redraw()
    assert set_timer.calls == []


def test_first_direction_arms_one_tick(loop, set_timer):
    loop.handle_input(InputEvent.RIGHT)
    loop.handle_input(InputEvent.UP)

    assert len(set_timer.scheduled) == 1
    event, millis = set_timer.scheduled[0]
    assert event.type == TICK_EVENT
    assert millis == 200
    assert set_timer.calls[0][2] == 1


def test_tick_rearms_with_fresh_interval(loop, game, set_timer, frames):
    game.snake = [(10, 10)]
    game.food = (11, 10)
    loop.handle_input(InputEvent.RIGHT)

    assert fire(loop, set_timer)

    assert game.snake == [(11, 10), (10, 10)]
    assert set_timer.scheduled[-1][1] == 199
    assert len(set_timer.scheduled) == 2
    assert frames[-1] is GameStatus.RUNNING


def test_stale_and_foreign_events_are_ignored(loop, game, set_timer):
    loop.handle_input(InputEvent.RIGHT)
    first, _ = set_timer.scheduled[0]
    fire(loop, set_timer)

    # Same tick delivered twice: only the first one counts.
    assert not loop.handle_tick(first)
    assert not loop.handle_tick(pygame.event.Event(TICK_EVENT))
    assert game.snake == [(11, 10)]


def test_pause_cancels_and_resume_arms_once(loop, game, set_timer):
    loop.handle_input(InputEvent.RIGHT)
    armed_before_pause, _ = set_timer.scheduled[-1]

    loop.handle_input(InputEvent.PAUSE_TOGGLE)
    assert game.status is GameStatus.PAUSED
    assert set_timer.cancelled == [TICK_EVENT]
    # A tick already queued when the pause happened must not move the snake.
    assert not loop.handle_tick(armed_before_pause)
    assert game.snake == [(10, 10)]

    loop.handle_input(InputEvent.PAUSE_TOGGLE)
    assert game.status is GameStatus.RUNNING
    assert len(set_timer.scheduled) == 2
    assert not loop.handle_tick(armed_before_pause)
    assert fire(loop, set_timer)
    assert game.snake == [(11, 10)]


def test_game_over_stops_scheduling(loop, game, set_timer, frames):
    game.snake = [(19, 4)]
    loop.handle_input(InputEvent.RIGHT)

    fire(loop, set_timer)

    assert game.status is GameStatus.GAME_OVER
    assert len(set_timer.scheduled) == 1
    assert frames[-1] is GameStatus.GAME_OVER


def test_restart_cancels_pending_tick(loop, game, set_timer):
    loop.handle_input(InputEvent.RIGHT)
    pending, _ = set_timer.scheduled[-1]

    loop.handle_input(InputEvent.RESTART)

    assert game.status is GameStatus.NOT_STARTED
    assert set_timer.cancelled == [TICK_EVENT]
    assert not loop.handle_tick(pending)

    loop.handle_input(InputEvent.LEFT)
    assert game.direction is Direction.LEFT
    assert len(set_timer.scheduled) == 2


def test_ignored_input_does_not_redraw(loop, frames):
    loop.handle_input(InputEvent.RIGHT)
    count = len(frames)
    loop.handle_input(InputEvent.LEFT)
    assert len(frames) == count


def test_dispose_cancels(loop, set_timer):
    loop.handle_input(InputEvent.DOWN)
    loop.dispose()
    assert set_timer.cancelled == [TICK_EVENT]
    assert not loop.timer.pending
