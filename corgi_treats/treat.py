"""Dog treats that fall from the sky and must be caught before they land."""

from __future__ import annotations

import random

import pygame

from corgi_treats.background import GROUND_Y, load_image, load_sound

TREAT_SCALE = 0.2
START_SPEED = 2.0
SPEED_STEP = 0.2
SPAWN_INTERVAL = 120
TREATS_PER_SPEEDUP = 5


def _play(sound):
    if sound is not None:
        sound.play()


class Treats:
    """Every treat currently falling, plus the timers that spawn and speed them up.

    Each treat is a `pygame.Vector2` holding the top-left corner of its image.
    """

    def __init__(self, image=None, collect_sound=None, fail_sound=None, rng=None):
        self.image = image if image is not None else load_image("dog_treat.png", TREAT_SCALE)
        self.collect_sound = (
            collect_sound if collect_sound is not None else load_sound("collect_sound.wav")
        )
        self.fail_sound = fail_sound if fail_sound is not None else load_sound("fail_sound.wav")
        self.rng = rng if rng is not None else random.Random()
        self.items = []
        self.speed = START_SPEED
        self.spawn_timer = 0
        self.spawn_interval = SPAWN_INTERVAL
        self.collected_since_speedup = 0

    def _rect(self, item):
        return pygame.Rect(round(item.x), round(item.y), *self.image.get_size())

    def move(self, hearts):
        """Drop every treat; one that reaches the ground costs a heart."""
        height = self.image.get_height()
        remaining = []
        for item in self.items:
            item.y += self.speed
            if item.y + height >= GROUND_Y:
                if not hearts.game_over:
                    hearts.remove_heart()
                _play(self.fail_sound)
            else:
                remaining.append(item)
        self.items = remaining

    def spawn(self, width):
        """Count a frame and add a treat above the screen every `spawn_interval` frames."""
        self.spawn_timer += 1
        if self.spawn_timer != self.spawn_interval:
            return
        image_width, image_height = self.image.get_size()
        span = int(width - image_width)
        if span <= 0:
            raise ValueError(f"window width {width} leaves no room for a treat")
        self.items.append(pygame.Vector2(self.rng.randrange(span), -image_height))
        self.spawn_timer = 0

    def collect(self, player):
        """Remove the treats the player touches and return how many there were."""
        player_rect = player.bounds()
        kept = [item for item in self.items if not player_rect.colliderect(self._rect(item))]
        caught = len(self.items) - len(kept)
        self.items = kept
        for _ in range(caught):
            _play(self.collect_sound)
        self.collected_since_speedup += caught
        return caught

    def speed_check(self):
        """Speed the fall up after every few treats caught."""
        count = self.collected_since_speedup
        if count > 0 and count % TREATS_PER_SPEEDUP == 0:
            self.speed += SPEED_STEP
            self.collected_since_speedup = 0

    def draw(self, surface):
        for item in self.items:
            surface.blit(self.image, self._rect(item))