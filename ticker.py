"""Timer-driven game loop: one pending tick at a time, re-armed after each tick."""
import logging

import pygame

from game import GameStatus

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """One-shot pygame timer that posts TICK_EVENT.

    Each armed tick carries a generation number. Cancelling bumps the
    generation, so a tick event already waiting in the queue when the timer
    was cancelled is recognised as stale and dropped.
    """

    def __init__(self, event_type=TICK_EVENT, set_timer=None):
        self.event_type = event_type
        self._set_timer = set_timer or pygame.time.set_timer
        self.generation = 0
        self.pending = False

    def schedule(self, delay_ms):
        self.generation += 1
        event = pygame.event.Event(self.event_type, generation=self.generation)
        self._set_timer(event, delay_ms, 1)
        self.pending = True
        logger.debug("Tick %d scheduled in %d ms", self.generation, delay_ms)

    def cancel(self):
        if not self.pending:
            return
        self._set_timer(self.event_type, 0)
        self.generation += 1
        self.pending = False
        logger.debug("Pending tick cancelled")

    def accept(self, event):
        """Consume a fired tick event; returns False for stale ones."""
        if not self.pending or getattr(event, "generation", None) != self.generation:
            return False
        self.pending = False
        return True


class GameLoop:
    """Drive a SnakeGame from input events and timer ticks.

    `on_render` is called with the game after every change that affects
    what is on screen.
    """

    def __init__(self, game, timer=None, on_render=None):
        self.game = game
        self.timer = timer or TickTimer()
        self.on_render = on_render

    def handle_input(self, event):
        changed = self.game.dispatch(event)
        self._sync_timer()
        if changed:
            self.redraw()
        return changed

    def handle_tick(self, event):
        if not self.timer.accept(event):
            return False
        if self.game.status is not GameStatus.RUNNING:
            return False
        self.game.tick()
        self.redraw()
        self._sync_timer()
        return True

    def redraw(self):
        if self.on_render is not None:
            self.on_render(self.game)

    def dispose(self):
        self.timer.cancel()

    def _sync_timer(self):
        if self.game.status is GameStatus.RUNNING:
            if not self.timer.pending:
                self.timer.schedule(self.game.tick_interval)
        else:
            self.timer.cancel()
