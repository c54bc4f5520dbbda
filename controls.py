"""Translate keyboard, button and swipe input into InputEvents."""
import pygame

from config import BOARD_SIZE, BUTTON_BAR_HEIGHT, HUD_HEIGHT, SWIPE_THRESHOLD, WINDOW_WIDTH
from game import InputEvent

KEY_EVENTS = {
    pygame.K_UP: InputEvent.UP,
    pygame.K_DOWN: InputEvent.DOWN,
    pygame.K_LEFT: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT,
    pygame.K_SPACE: InputEvent.PAUSE_TOGGLE,
    pygame.K_p: InputEvent.PAUSE_TOGGLE,
    pygame.K_r: InputEvent.RESTART,
}

BUTTON_LAYOUT = [
    ("Left", InputEvent.LEFT),
    ("Up", InputEvent.UP),
    ("Down", InputEvent.DOWN),
    ("Right", InputEvent.RIGHT),
    ("Pause", InputEvent.PAUSE_TOGGLE),
    ("Restart", InputEvent.RESTART),
]
BUTTON_GAP = 6


def key_to_event(key):
    return KEY_EVENTS.get(key)


def build_buttons():
    """Lay out the on-screen buttons evenly across the bottom bar."""
    count = len(BUTTON_LAYOUT)
    width = (WINDOW_WIDTH - BUTTON_GAP * (count + 1)) // count
    height = BUTTON_BAR_HEIGHT - BUTTON_GAP * 2
    top = HUD_HEIGHT + BOARD_SIZE + BUTTON_GAP

    buttons = []
    for i, (label, event) in enumerate(BUTTON_LAYOUT):
        left = BUTTON_GAP + i * (width + BUTTON_GAP)
        buttons.append((label, pygame.Rect(left, top, width, height), event))
    return buttons


def button_at(buttons, pos):
    for _, rect, event in buttons:
        if rect.collidepoint(pos):
            return event
    return None


def classify_swipe(start, end, threshold=SWIPE_THRESHOLD):
    """Turn a pointer drag into a direction event, or None if too short."""
    diff_x = start[0] - end[0]
    diff_y = start[1] - end[1]

    if abs(diff_x) > abs(diff_y):
        if diff_x > threshold:
            return InputEvent.LEFT
        if diff_x < -threshold:
            return InputEvent.RIGHT
    else:
        if diff_y > threshold:
            return InputEvent.UP
        if diff_y < -threshold:
            return InputEvent.DOWN
    return None


class SwipeTracker:
    """Remember where a drag started and classify it when it ends."""

    def __init__(self, threshold=SWIPE_THRESHOLD):
        self.threshold = threshold
        self.start = None

    def begin(self, pos):
        self.start = pos

    def end(self, pos):
        if self.start is None:
            return None
        start, self.start = self.start, None
        return classify_swipe(start, pos, self.threshold)
