import random

import pygame
import pytest

from corgi_treats.background import GROUND_Y
from corgi_treats.hearts import START_LIVES, Hearts
from corgi_treats.player import Player
from corgi_treats.treat import (
    SPAWN_INTERVAL,
    SPEED_STEP,
    START_SPEED,
    TREATS_PER_SPEEDUP,
    Treats,
)


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def treats():
    return Treats(
        image=pygame.Surface((20, 10)),
        collect_sound=FakeSound(),
        fail_sound=FakeSound(),
        rng=random.Random(1),
    )


@pytest.fixture
def hearts():
    return Hearts(image=pygame.Surface((5, 5)))


def test_spawn_waits_for_interval(treats):
    for _ in range(SPAWN_INTERVAL - 1):
        treats.spawn(800)
    assert treats.items == []
    treats.spawn(800)
    assert len(treats.items) == 1
    item = treats.items[0]
    assert item.y == -10
    assert 0 <= item.x < 800 - 20
    assert treats.spawn_timer == 0


def test_spawn_repeats_every_interval(treats):
    for _ in range(SPAWN_INTERVAL * 3):
        treats.spawn(800)
    assert len(treats.items) == 3


def test_spawn_without_room_raises(treats):
    treats.spawn_timer = SPAWN_INTERVAL - 1
    with pytest.raises(ValueError):
        treats.spawn(20)


def test_move_drops_by_speed(treats, hearts):
    treats.items.append(pygame.Vector2(50, 100))
    treats.move(hearts)
    assert treats.items[0].y == pytest.approx(100 + START_SPEED)
    assert hearts.hp == START_LIVES


def test_treat_on_ground_costs_heart(treats, hearts):
    treats.items.append(pygame.Vector2(50, GROUND_Y - 10 - 1))
    treats.items.append(pygame.Vector2(80, 0))
    treats.move(hearts)
    assert len(treats.items) == 1
    assert treats.items[0].x == 80
    assert hearts.hp == START_LIVES - 1
    assert treats.fail_sound.plays == 1


def test_treats_landing_after_game_over_do_not_raise(treats, hearts):
    for _ in range(START_LIVES):
        hearts.remove_heart()
    treats.items.append(pygame.Vector2(50, GROUND_Y))
    treats.move(hearts)
    assert treats.items == []
    assert hearts.game_over


def test_collect_touching_treat(treats):
    player = Player(100, 100, image=pygame.Surface((10, 10)))
    treats.items.append(pygame.Vector2(90, 95))
    treats.items.append(pygame.Vector2(400, 0))
    caught = treats.collect(player)
    assert caught == 1
    assert len(treats.items) == 1
    assert treats.collect_sound.plays == 1
    assert treats.collected_since_speedup == 1


def test_collect_nothing_out_of_reach(treats):
    player = Player(100, 100, image=pygame.Surface((10, 10)))
    treats.items.append(pygame.Vector2(300, 300))
    assert treats.collect(player) == 0
    assert len(treats.items) == 1


def test_speed_check_after_enough_treats(treats):
    treats.collected_since_speedup = TREATS_PER_SPEEDUP - 1
    treats.speed_check()
    assert treats.speed == START_SPEED
    treats.collected_since_speedup = TREATS_PER_SPEEDUP
    treats.speed_check()
    assert treats.speed == pytest.approx(START_SPEED + SPEED_STEP)
    assert treats.collected_since_speedup == 0


def test_speed_check_ignores_zero(treats):
    treats.speed_check()
    assert treats.speed == START_SPEED


def test_draw_blits_treats(treats):
    treats.image.fill((255, 0, 0))
    treats.items.append(pygame.Vector2(5, 5))
    surface = pygame.Surface((100, 100))
    treats.draw(surface)
    assert surface.get_at((6, 6))[:3] == (255, 0, 0)
    assert surface.get_at((60, 60))[:3] == (0, 0, 0)