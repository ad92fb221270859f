"""Pygame GUI for AuraBall.

Contains draw helpers for balls and splashes, a HUD for score and banners,
the frame renderer, and the application entry point (`python -m gui.app`).
"""

__all__ = [
    "constants",
    "sprites",
    "hud",
    "renderer",
    "app",
]
