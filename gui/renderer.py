from __future__ import annotations

"""Frame composition: background, balls, splashes, then the HUD.

`Renderer.draw` reads the game state and never changes it. Splash colors come
from the injected rng so a seeded renderer draws the same frames.
"""

from typing import Optional
import random
import pygame

from auraball.engine import GameState
from . import constants as C
from .hud import HUD
from .sprites import BallSprite, SplashSprite


class Renderer:
    def __init__(self, surf: pygame.Surface, rng: Optional[random.Random] = None):
        self.surf = surf
        self.rng = rng or random.Random()
        splash_font = pygame.font.SysFont(C.FONT_NAME, C.BANNER_FONT_SIZE, bold=True)
        self.ball_sprite = BallSprite()
        self.splash_sprite = SplashSprite(self.rng, splash_font)
        self.hud = HUD(surf)

    def draw(self, state: GameState):
        """Draw one full frame onto the surface (no flip here)."""
        self.surf.fill(C.BACKGROUND_COLOR)
        # Newest ball last so it ends up on top, matching the hit test order
        for ball in state.balls:
            self.ball_sprite.draw(self.surf, ball)
        for splash in state.splashes:
            self.splash_sprite.draw(self.surf, splash)
        self.hud.draw(state)
