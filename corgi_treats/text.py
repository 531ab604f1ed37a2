"""The points counter shown in the top-left corner."""

from __future__ import annotations

from corgi_treats.background import DEFAULT_FONT_SIZE, load_font

TEXT_COLOR = (255, 255, 255)


class PointsText:
    """A single line of text drawn at a fixed position."""

    def __init__(self, x=10.0, y=10.0, font=None):
        self.font = font if font is not None else load_font(DEFAULT_FONT_SIZE)
        self.position = (x, y)
        self.text = ""

    def update(self, points):
        self.text = f"Points: {points}"

    def set_string(self, text):
        self.text = text

    def draw(self, surface):
        rendered = self.font.render(self.text, True, TEXT_COLOR)
        surface.blit(rendered, (round(self.position[0]), round(self.position[1])))