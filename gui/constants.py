from __future__ import annotations

"""Constants for GUI rendering.

Sizes are in canvas pixels. The canvas is fixed; the window is not resizable.
"""

# Canvas
CANVAS_SIZE = (500, 500)
TARGET_FPS = 60

# Colors (R,G,B)
BACKGROUND_COLOR = (135, 206, 235)  # light blue
BALL_COLOR = (255, 0, 0)
TEXT_COLOR = (0, 0, 0)
AURA_COLOR = (255, 0, 0)

# Font sizes
BANNER_FONT_SIZE = 32
SCORE_FONT_SIZE = 20
HINT_FONT_SIZE = 20
CREDIT_FONT_SIZE = 16
FONT_NAME = "arial"

# HUD placement
SCORE_POS = (10, 10)
CREDIT_MARGIN_PX = 10
WIN_LINE_GAP_PX = 40

# Texts
WIN_TEXT = "Wow! You are the winner!"
RESTART_HINT = "Press Enter to Restart"
LOSING_AURA_TEXT = "You are losing aura! D:"
CREDIT_TEXT = "created by demi"
WINDOW_TITLE = "AuraBall"
