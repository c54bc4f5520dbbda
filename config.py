import os

# Board configuration
GRID_COUNT = 20
CELL_SIZE = 20
BOARD_SIZE = GRID_COUNT * CELL_SIZE
START_CELL = (GRID_COUNT // 2, GRID_COUNT // 2)

# Speed ramp (milliseconds between ticks)
BASE_TICK_MS = 200
MIN_TICK_MS = 120
TICK_STEP_MS = 1

SCORE_INCREMENT = 10

# Swipe gestures shorter than this (in pixels) are ignored.
SWIPE_THRESHOLD = 30

# Window layout: HUD on top, board in the middle, button bar below.
HUD_HEIGHT = 52
BUTTON_BAR_HEIGHT = 56
BOARD_ORIGIN = (0, HUD_HEIGHT)
WINDOW_WIDTH = BOARD_SIZE
WINDOW_HEIGHT = HUD_HEIGHT + BOARD_SIZE + BUTTON_BAR_HEIGHT

# Redraw/poll rate of the main event loop; ticks are driven by a timer.
FPS = 60

# Colors (R, G, B)
BG_TOP = (247, 250, 252)
BG_BOTTOM = (226, 232, 240)
GRID_LINE = (226, 232, 240)
HUD_BG = (45, 55, 72)
HEAD_COLOR = (56, 161, 105)
HEAD_BORDER = (47, 133, 90)
BODY_COLOR = (72, 187, 120)
BODY_BORDER = (56, 161, 105)
FOOD_COLOR = (229, 62, 62)
FOOD_INNER = (254, 178, 178)
FOOD_BORDER = (197, 48, 48)
BUTTON_COLOR = (74, 85, 104)
BUTTON_BORDER = (113, 128, 150)
WHITE = (255, 255, 255)
PUPIL = (45, 55, 72)
HUD_BASE_SIZE = 22
HUD_MIN_SIZE = 16

# High score persistence
HIGH_SCORE_PATH = os.environ.get(
    "SNAKE_HIGH_SCORE_FILE",
    os.path.join(os.path.expanduser("~"), ".snake_game", "high_score.json"),
)
LOG_LEVEL = os.environ.get("SNAKE_LOG_LEVEL", "INFO")
