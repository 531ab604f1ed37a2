"""The corgi the player steers along the ground."""

from __future__ import annotations

import pygame

from corgi_treats.background import WINDOW_WIDTH, load_image

START_SPEED = 3.0
PLAYER_SCALE = 0.1

_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


def _held(pressed, keys):
    for key in keys:
        try:
            if pressed[key]:
                return True
        except (KeyError, IndexError):
            continue
    return False


class Player:
    """A sprite whose position is its centre, moved with A/D or the arrow keys."""

    def __init__(self, x, y, image=None):
        self.image = image if image is not None else load_image("corgi.png", PLAYER_SCALE)
        self._flipped = pygame.transform.flip(self.image, True, False)
        self.x = float(x)
        self.y = float(y)
        self.speed = START_SPEED
        self.facing_left = False

    def bounds(self):
        width, height = self.image.get_size()
        return pygame.Rect(
            round(self.x - width / 2), round(self.y - height / 2), width, height
        )

    def update(self, pressed):
        """Move according to the held keys; `pressed` is indexed by key code."""
        half_width = self.image.get_width() / 2
        if _held(pressed, _LEFT_KEYS) and self.x > half_width:
            self.x -= self.speed
            self.facing_left = True
        if _held(pressed, _RIGHT_KEYS) and self.x < WINDOW_WIDTH - half_width:
            self.x += self.speed
            self.facing_left = False

    def draw(self, surface):
        image = self._flipped if self.facing_left else self.image
        surface.blit(image, self.bounds().topleft)