"""AuraBall game rules and headless front ends.

The engine holds all game state and rules without any pygame dependency, so
the GUI (`python -m gui.app`) and the autoplay CLI (`python -m auraball`)
share the same behavior.
"""

__all__ = ["engine", "autoplay", "cli"]
