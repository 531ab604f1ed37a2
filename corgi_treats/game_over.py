"""The darkened end screen shown once every heart is lost."""

from __future__ import annotations

import pygame

from corgi_treats.background import WINDOW_HEIGHT, WINDOW_WIDTH, load_font

OVERLAY_COLOR = (0, 0, 0, 130)
TEXT_COLOR = (255, 255, 255)


class GameOverScreen:
    """A translucent overlay with two centred lines of text."""

    def __init__(self):
        self.overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        self.overlay.fill(OVERLAY_COLOR)
        self.game_over_text = self.create_text(50, "Game Over", 400.0, 200.0)
        self.press_key_text = self.create_text(
            20, "Press Key to Close the Game", 400.0, 300.0
        )

    def create_text(self, size, text, x, y):
        """Render text and return (surface, rect) with the rect centred on (x, y)."""
        rendered = load_font(size).render(text, True, TEXT_COLOR)
        rect = rendered.get_rect(center=(round(x), round(y)))
        return rendered, rect

    def draw(self, surface):
        surface.blit(self.overlay, (0, 0))
        for rendered, rect in (self.game_over_text, self.press_key_text):
            surface.blit(rendered, rect)