import logging

import pygame

from config import FPS, HIGH_SCORE_PATH, LOG_LEVEL, WINDOW_HEIGHT, WINDOW_WIDTH
from controls import SwipeTracker, button_at, key_to_event
from game import SnakeGame
from grid import board_rect
from highscore import HighScoreStore
from render import Renderer
from ticker import TICK_EVENT, GameLoop, TickTimer

logger = logging.getLogger("snake")


def setup_logging(level=LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def handle_event(event, loop, renderer, swipe):
    """Route one pygame event. Returns False when the window should close."""
    if event.type == pygame.QUIT:
        return False

    if event.type == TICK_EVENT:
        loop.handle_tick(event)
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_h:
            renderer.show_help = not renderer.show_help
            loop.redraw()
        elif event.key == pygame.K_d:
            renderer.show_debug = not renderer.show_debug
            loop.redraw()
        else:
            action = key_to_event(event.key)
            if action is not None:
                loop.handle_input(action)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        # Touch input arrives here too, as SDL-synthesised mouse events.
        action = button_at(renderer.buttons, event.pos)
        if action is not None:
            loop.handle_input(action)
        elif board_rect().collidepoint(event.pos):
            swipe.begin(event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        action = swipe.end(event.pos)
        if action is not None:
            loop.handle_input(action)
    elif event.type == pygame.WINDOWEXPOSED:
        loop.redraw()
    return True


def main():
    setup_logging()
    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    renderer = Renderer(screen)
    game = SnakeGame(high_scores=HighScoreStore(HIGH_SCORE_PATH))
    loop = GameLoop(game, TickTimer(), on_render=renderer.present)
    swipe = SwipeTracker()
    logger.info("Snake ready, best score %d", game.high_score)

    loop.redraw()
    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(event, loop, renderer, swipe):
                running = False
                break
        clock.tick(FPS)

    loop.dispose()
    pygame.quit()


if __name__ == "__main__":
    main()
