"""Lightning bolts that make the corgi faster when caught."""

from __future__ import annotations

import random

import pygame

from corgi_treats.background import GROUND_Y, load_image, load_sound

BOOST_SCALE = 0.05
FALL_SPEED = 2.0
SPAWN_INTERVAL = 700
SPEED_BONUS = 0.5
MAX_PLAYER_SPEED = 10.0


class Boosts:
    """Every boost currently falling; each is a `pygame.Vector2` top-left corner."""

    def __init__(self, image=None, sound=None, rng=None):
        self.image = image if image is not None else load_image("lightning.png", BOOST_SCALE)
        self.sound = sound if sound is not None else load_sound("power_up_sound.wav")
        self.rng = rng if rng is not None else random.Random()
        self.items = []
        self.spawn_timer = 0
        self.spawn_interval = SPAWN_INTERVAL

    def _rect(self, item):
        return pygame.Rect(round(item.x), round(item.y), *self.image.get_size())

    def drop(self, width):
        """Count a frame and add a boost above the screen every `spawn_interval` frames."""
        self.spawn_timer += 1
        if self.spawn_timer != self.spawn_interval:
            return
        image_width, image_height = self.image.get_size()
        span = int(width - image_width)
        if span <= 0:
            raise ValueError(f"window width {width} leaves no room for a boost")
        self.items.append(pygame.Vector2(self.rng.randrange(span), -image_height))
        self.spawn_timer = 0

    def move(self):
        """Drop every boost; those that reach the ground simply vanish."""
        height = self.image.get_height()
        for item in self.items:
            item.y += FALL_SPEED
        self.items = [item for item in self.items if item.y + height < GROUND_Y]

    def collect(self, player):
        """Remove boosts the player touches, raising its speed; return how many."""
        player_rect = player.bounds()
        kept = [item for item in self.items if not player_rect.colliderect(self._rect(item))]
        caught = len(self.items) - len(kept)
        self.items = kept
        for _ in range(caught):
            if player.speed < MAX_PLAYER_SPEED:
                player.speed += SPEED_BONUS
            if self.sound is not None:
                self.sound.play()
        return caught

    def draw(self, surface):
        for item in self.items:
            surface.blit(self.image, self._rect(item))