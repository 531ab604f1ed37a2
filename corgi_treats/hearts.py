"""The row of hearts counting the lives left."""

from __future__ import annotations

import pygame

from corgi_treats.background import load_image

START_LIVES = 3
HEART_SCALE = 0.2
FIRST_HEART = (600.0, 10.0)
HEART_GAP = 10.0


class Hearts:
    """Three hearts in a row; losing the last one ends the game."""

    def __init__(self, image=None):
        self.image = image if image is not None else load_image("heart.png", HEART_SCALE)
        step = self.image.get_width() + HEART_GAP
        x, y = FIRST_HEART
        self.positions = [(x + step * n, y) for n in range(START_LIVES)]

    @property
    def hp(self):
        return len(self.positions)

    @property
    def game_over(self):
        return not self.positions

    def bounds(self):
        """Size of a single heart, placed at the origin."""
        return self.image.get_rect()

    def remove_heart(self):
        """Take away the leftmost heart."""
        if not self.positions:
            raise ValueError("no hearts left to remove")
        del self.positions[0]

    def draw(self, surface):
        for x, y in self.positions:
            surface.blit(self.image, (round(x), round(y)))