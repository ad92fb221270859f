from __future__ import annotations

"""HUD for score, win banner, losing aura banner and credit line."""

import pygame

from auraball.engine import GameState
from . import constants as C


class HUD:
    def __init__(self, surf: pygame.Surface):
        # This sets up fonts for the different text sizes
        self.surf = surf
        self.font_banner = pygame.font.SysFont(C.FONT_NAME, C.BANNER_FONT_SIZE, bold=True)
        self.font_score = pygame.font.SysFont(C.FONT_NAME, C.SCORE_FONT_SIZE)
        self.font_hint = pygame.font.SysFont(C.FONT_NAME, C.HINT_FONT_SIZE, bold=True)
        self.font_credit = pygame.font.SysFont(C.FONT_NAME, C.CREDIT_FONT_SIZE)

    def _blit_centered(self, font: pygame.font.Font, text: str, color, center, alpha: int = 255):
        img = font.render(text, True, color)
        if alpha < 255:
            img.set_alpha(max(0, alpha))
        self.surf.blit(img, img.get_rect(center=center))

    def draw_score(self, score: int):
        img = self.font_score.render(f"Score: {score}", True, C.TEXT_COLOR)
        self.surf.blit(img, C.SCORE_POS)

    def draw_win(self, score: int):
        # Three centered lines: title, final score, restart hint
        cx = self.surf.get_width() // 2
        cy = self.surf.get_height() // 2
        gap = C.WIN_LINE_GAP_PX
        self._blit_centered(self.font_banner, C.WIN_TEXT, C.TEXT_COLOR, (cx, cy))
        self._blit_centered(self.font_banner, f"Final Score: {score}", C.TEXT_COLOR, (cx, cy + gap))
        self._blit_centered(self.font_hint, C.RESTART_HINT, C.TEXT_COLOR, (cx, cy + gap * 2))

    def draw_losing_aura(self, alpha: int):
        center = (self.surf.get_width() // 2, self.surf.get_height() // 2)
        self._blit_centered(self.font_banner, C.LOSING_AURA_TEXT, C.AURA_COLOR, center, alpha)

    def draw_credit(self):
        img = self.font_credit.render(C.CREDIT_TEXT, True, C.TEXT_COLOR)
        rect = img.get_rect(midbottom=(self.surf.get_width() // 2, self.surf.get_height() - C.CREDIT_MARGIN_PX))
        self.surf.blit(img, rect)

    def draw(self, state: GameState):
        # Order matters: the aura banner sits above the win banner
        if state.won:
            self.draw_win(state.score)
        self.draw_score(state.score)
        if state.losing_aura:
            self.draw_losing_aura(state.losing_aura_alpha)
        self.draw_credit()
