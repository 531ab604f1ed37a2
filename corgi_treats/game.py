"""The game state, one frame at a time, and the window loop that drives it."""

from __future__ import annotations

import argparse

import pygame

from corgi_treats.background import WINDOW_HEIGHT, WINDOW_WIDTH, Background
from corgi_treats.boost import Boosts
from corgi_treats.game_over import GameOverScreen
from corgi_treats.hearts import Hearts
from corgi_treats.player import Player
from corgi_treats.text import PointsText
from corgi_treats.treat import Treats

TITLE = "CORGI TREATS"
FRAME_RATE = 60
PLAYER_Y = 460.0
GAME_OVER_VOLUME = 20


class Game:
    """Everything on screen plus the score; `running` turns False when the game ends."""

    def __init__(self, rng=None):
        self.points = 0
        self.running = True
        self.points_text = PointsText()
        self.background = Background()
        self.player = Player(WINDOW_WIDTH / 2, PLAYER_Y)
        self.treats = Treats(rng=rng)
        self.boosts = Boosts(rng=rng)
        self.hearts = Hearts()
        self.game_over_screen = GameOverScreen()

    @property
    def game_over(self):
        return self.hearts.game_over

    def handle_event(self, event):
        """Closing the window always quits; any key quits once the game is over."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and self.game_over:
            self.running = False

    def step(self, pressed):
        """Advance the game by one frame given the currently held keys."""
        if self.game_over:
            self.background.set_volume(GAME_OVER_VOLUME)
            return
        self.player.update(pressed)
        self.points_text.update(self.points)
        self.treats.move(self.hearts)
        self.boosts.move()
        self.treats.spawn(WINDOW_WIDTH)
        self.boosts.drop(WINDOW_WIDTH)
        self.points += self.treats.collect(self.player)
        self.boosts.collect(self.player)
        self.treats.speed_check()

    def draw(self, surface):
        self.background.draw(surface)
        self.player.draw(surface)
        self.points_text.draw(surface)
        self.hearts.draw(surface)
        self.boosts.draw(surface)
        self.treats.draw(surface)
        if self.game_over:
            self.game_over_screen.draw(surface)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="corgi-treats", description="Catch the falling treats with the corgi."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = Game()
        while game.running:
            for event in pygame.event.get():
                game.handle_event(event)
            if not game.running:
                break
            screen.fill((0, 0, 0))
            game.draw(screen)
            game.step(pygame.key.get_pressed())
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())