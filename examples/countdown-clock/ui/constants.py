"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 480
SCREEN_H = 300
PAD = 25
TITLE_H = 40
FACE_H = 100
BUTTON_W = 120
BUTTON_H = 36
BUTTON_GAP = 10

# Colors
BG_COLOR = (245, 245, 245)
TEXT_COLOR = (0, 0, 0)
FACE_BORDER = (0, 0, 0)
BUTTON_TEXT = (255, 255, 255)
ACTIVE_OUTLINE = (0, 0, 0)
FINISHED_COLOR = (200, 30, 30)

# Button name -> (color, hover color)
BUTTON_COLORS = {
    "start": ((76, 175, 80), (39, 113, 42)),
    "pause": ((204, 204, 204), (170, 170, 170)),
    "reset": ((255, 170, 170), (255, 0, 0)),
}
BUTTON_LABELS = {
    "start": "start",
    "pause": "pause",
    "reset": "reset",
}
BUTTON_ORDER = ["start", "pause", "reset"]
