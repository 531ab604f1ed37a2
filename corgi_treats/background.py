"""Window constants, asset loading and the scrolling-free scene background."""

from __future__ import annotations

from pathlib import Path

import pygame

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
GROUND_Y = 500
PLACEHOLDER_SIZE = (32, 32)
PLACEHOLDER_COLOR = (200, 120, 40, 255)
FONT_FILE = "OpenSans-Bold.ttf"
DEFAULT_FONT_SIZE = 30
MUSIC_VOLUME = 70


def load_image(name, scale=1.0):
    """Load an image from the working directory and scale it.

    A file that is missing or unreadable yields a placeholder box of
    PLACEHOLDER_SIZE so the game stays playable.
    """
    path = Path(name)
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        placeholder = pygame.Surface(PLACEHOLDER_SIZE, pygame.SRCALPHA)
        placeholder.fill(PLACEHOLDER_COLOR)
        return placeholder
    width, height = image.get_size()
    size = (max(1, round(width * scale)), max(1, round(height * scale)))
    if size == (width, height):
        return image
    return pygame.transform.scale(image, size)


def load_sound(name):
    """Load a sound effect, or return None when audio or the file is unavailable."""
    path = Path(name)
    if not pygame.mixer.get_init() or not path.is_file():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


def load_font(size):
    """Return the game font at the given size, falling back to pygame's default."""
    if not pygame.font.get_init():
        pygame.font.init()
    path = Path(FONT_FILE)
    if path.is_file():
        try:
            return pygame.font.Font(str(path), size)
        except (pygame.error, OSError):
            pass
    return pygame.font.Font(None, size)


class Background:
    """The backdrop picture together with the looping level music."""

    def __init__(self, image=None, music=None):
        self.image = image if image is not None else load_image("background.png")
        self.music = music if music is not None else load_sound("background_music.ogg")
        self.volume = MUSIC_VOLUME
        self.set_volume(MUSIC_VOLUME)
        if self.music is not None:
            self.music.play()

    def draw(self, surface):
        surface.blit(self.image, (0, 0))

    def set_volume(self, volume):
        """Set the music volume on a 0-100 scale."""
        self.volume = volume
        if self.music is not None:
            self.music.set_volume(volume / 100)