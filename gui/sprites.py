from __future__ import annotations

"""Simple draw helpers for balls and splashes.

These read engine objects and draw them; they hold no game state and do not
use pygame.sprite groups.
"""

from dataclasses import dataclass
from typing import Tuple
import random
import pygame

from auraball.engine import Ball, Splash
from . import constants as C


Color = Tuple[int, int, int]


@dataclass
class BallSprite:
    color: Color = C.BALL_COLOR

    def draw(self, surf: pygame.Surface, ball: Ball):
        # Filled circle, no outline
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(surf, self.color, pos, int(ball.radius))


class SplashSprite:
    """Draws a splash as a translucent circle with its message on top.

    The fill color is picked again on every draw, so a splash flickers while
    it grows. The rng is injected to keep frames reproducible in tests.
    """

    def __init__(self, rng: random.Random, font: pygame.font.Font):
        self.rng = rng
        self.font = font

    def random_color(self) -> Color:
        return (self.rng.randint(0, 255), self.rng.randint(0, 255), self.rng.randint(0, 255))

    def draw(self, surf: pygame.Surface, splash: Splash):
        alpha = max(0, min(255, splash.alpha))
        color = self.random_color()
        radius = splash.size // 2
        if radius > 0:
            disc = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(disc, (*color, alpha), (radius, radius), radius)
            surf.blit(disc, (int(splash.x) - radius, int(splash.y) - radius))

        if splash.shows_message():
            img = self.font.render(splash.message, True, C.TEXT_COLOR)
            img.set_alpha(alpha)
            surf.blit(img, img.get_rect(center=(int(splash.x), int(splash.y))))
