import pygame

from config import (
    BG_BOTTOM,
    BG_TOP,
    BUTTON_BORDER,
    BUTTON_COLOR,
    CELL_SIZE,
    FOOD_BORDER,
    FOOD_COLOR,
    FOOD_INNER,
    GRID_COUNT,
    GRID_LINE,
    HEAD_BORDER,
    HEAD_COLOR,
    BODY_BORDER,
    BODY_COLOR,
    HUD_BASE_SIZE,
    HUD_BG,
    HUD_HEIGHT,
    HUD_MIN_SIZE,
    PUPIL,
    WHITE,
    WINDOW_WIDTH,
)
from controls import build_buttons
from game import GameStatus, InputEvent
from grid import board_rect, cell_rect


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def draw_background(surface):
    """Draw a gradient board and subtle grid lines."""
    board = board_rect()
    for y in range(board.height):
        t = y / board.height
        r = int(BG_TOP[0] + (BG_BOTTOM[0] - BG_TOP[0]) * t)
        g = int(BG_TOP[1] + (BG_BOTTOM[1] - BG_TOP[1]) * t)
        b = int(BG_TOP[2] + (BG_BOTTOM[2] - BG_TOP[2]) * t)
        pygame.draw.line(surface, (r, g, b), (board.left, board.top + y), (board.right, board.top + y))

    for i in range(GRID_COUNT + 1):
        offset = i * CELL_SIZE
        pygame.draw.line(surface, GRID_LINE, (board.left + offset, board.top), (board.left + offset, board.bottom), 1)
        pygame.draw.line(surface, GRID_LINE, (board.left, board.top + offset), (board.right, board.top + offset), 1)


def draw_food(surface, cell):
    """Draw a round, highlighted food pellet."""
    rect = cell_rect(cell, padding=2)
    center = rect.center
    radius = rect.width // 2
    pygame.draw.circle(surface, FOOD_COLOR, center, radius)
    pygame.draw.circle(surface, FOOD_INNER, (center[0] - 4, center[1] - 4), max(2, radius // 3))
    pygame.draw.circle(surface, FOOD_BORDER, center, radius, 2)


def draw_snake(surface, snake, direction):
    """Draw the body fading towards the tail and a bordered head with eyes."""
    for i in range(len(snake) - 1, 0, -1):
        rect = cell_rect(snake[i], padding=2)
        fade = max(0.4, 1.0 - i * 0.1)
        color = tuple(int(c * fade + 255 * (1.0 - fade)) for c in BODY_COLOR)
        border = tuple(int(c * fade + 255 * (1.0 - fade)) for c in BODY_BORDER)
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, border, rect, 1)

    head_rect = cell_rect(snake[0], padding=1)
    pygame.draw.rect(surface, HEAD_COLOR, head_rect)
    pygame.draw.rect(surface, HEAD_BORDER, head_rect, 2)

    # Eyes face the direction of travel; a resting snake looks up.
    cx, cy = head_rect.center
    eye_offset = 4
    dx, dy = direction.value
    if dx == 1:
        eyes = [(cx + eye_offset, cy - 4), (cx + eye_offset, cy + 4)]
    elif dx == -1:
        eyes = [(cx - eye_offset, cy - 4), (cx - eye_offset, cy + 4)]
    elif dy == 1:
        eyes = [(cx - 4, cy + eye_offset), (cx + 4, cy + eye_offset)]
    else:
        eyes = [(cx - 4, cy - eye_offset), (cx + 4, cy - eye_offset)]
    for ex, ey in eyes:
        pygame.draw.circle(surface, WHITE, (ex, ey), 3)
        pygame.draw.circle(surface, PUPIL, (ex, ey), 1)


def draw_hud(surface, score, high_score, length, tick_interval):
    """Draw the top bar, shrinking the font until all labels fit."""
    bar = pygame.Rect(0, 0, WINDOW_WIDTH, HUD_HEIGHT)
    pygame.draw.rect(surface, HUD_BG, bar)
    pad = 12

    labels = [
        f"Score: {score}",
        f"Best: {high_score}",
        f"Size: {length}",
        f"{tick_interval} ms",
    ]
    rendered = []
    for size in range(HUD_BASE_SIZE, HUD_MIN_SIZE - 1, -1):
        font = get_ui_font(size)
        rendered = [font.render(label, True, WHITE) for label in labels]
        if sum(r.get_width() for r in rendered) + pad * (len(rendered) + 1) <= bar.width:
            break

    slot = bar.width // len(rendered)
    for i, text in enumerate(rendered):
        center = (slot * i + slot // 2, bar.centery)
        surface.blit(text, text.get_rect(center=center))


def draw_buttons(surface, font, buttons, paused):
    for label, rect, event in buttons:
        if event is InputEvent.PAUSE_TOGGLE and paused:
            label = "Resume"
        pygame.draw.rect(surface, BUTTON_COLOR, rect, border_radius=6)
        pygame.draw.rect(surface, BUTTON_BORDER, rect, 1, border_radius=6)
        text = font.render(label, True, WHITE)
        surface.blit(text, text.get_rect(center=rect.center))


def draw_board_overlay(surface, title_font, text_font, title, lines):
    """Dim the board and center a title with a few lines of text on it."""
    board = board_rect()
    shade = pygame.Surface((board.width, board.height), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 178))
    surface.blit(shade, board.topleft)

    title_surface = title_font.render(title, True, WHITE)
    line_surfaces = [text_font.render(line, True, WHITE) for line in lines]
    total_h = title_surface.get_height() + sum(s.get_height() + 8 for s in line_surfaces)

    y = board.centery - total_h // 2
    surface.blit(title_surface, title_surface.get_rect(centerx=board.centerx, y=y))
    y += title_surface.get_height() + 8
    for line_surface in line_surfaces:
        surface.blit(line_surface, line_surface.get_rect(centerx=board.centerx, y=y))
        y += line_surface.get_height() + 8


def draw_debug_status(surface, font, game):
    """Draw debug line when debug mode is enabled."""
    debug = (
        f"status={game.status.value}  "
        f"direction={game.direction.label}  "
        f"game_over_reason={game.game_over_reason or 'none'}"
    )
    text = font.render(debug, True, WHITE)
    panel_h = font.get_height() + 8
    board = board_rect()
    panel_rect = pygame.Rect(board.left + 8, board.bottom - panel_h - 8, board.width - 16, panel_h)
    panel_surface = pygame.Surface((panel_rect.width, panel_rect.height), pygame.SRCALPHA)
    panel_surface.fill((0, 0, 0, 120))
    surface.blit(panel_surface, panel_rect.topleft)
    surface.blit(text, (panel_rect.left + 8, panel_rect.top + 4))


HELP_LINES = [
    "Arrows / swipe: move",
    "Space or P: pause",
    "R: restart",
    "H: this help",
    "D: debug line",
    "Esc: quit",
]


class Renderer:
    """Draw a SnakeGame onto the window surface."""

    def __init__(self, screen):
        self.screen = screen
        self.title_font = get_ui_font(32)
        self.text_font = get_ui_font(18)
        self.button_font = get_ui_font(16)
        self.buttons = build_buttons()
        self.show_help = False
        self.show_debug = False

    def draw(self, game):
        surface = self.screen
        surface.fill(HUD_BG)
        draw_background(surface)
        if game.food is not None:
            draw_food(surface, game.food)
        draw_snake(surface, game.snake, game.direction)
        draw_hud(surface, game.score, game.high_score, len(game.snake), game.tick_interval)
        draw_buttons(surface, self.button_font, self.buttons, game.status is GameStatus.PAUSED)

        if self.show_debug:
            draw_debug_status(surface, self.button_font, game)

        if self.show_help:
            draw_board_overlay(surface, self.title_font, self.text_font, "Controls", HELP_LINES)
        elif game.status is GameStatus.NOT_STARTED:
            draw_board_overlay(
                surface, self.title_font, self.text_font,
                "Snake", ["Press an arrow key to start", "or tap a button"],
            )
        elif game.status is GameStatus.PAUSED:
            draw_board_overlay(
                surface, self.title_font, self.text_font,
                "Paused", ["Press Space or tap Resume to continue"],
            )
        elif game.status is GameStatus.GAME_OVER:
            draw_board_overlay(
                surface, self.title_font, self.text_font,
                "Game Over", [f"Score: {game.score}", "Press R or tap Restart"],
            )

    def present(self, game):
        self.draw(game)
        pygame.display.flip()
