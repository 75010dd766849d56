# coindash/tests/test_draw.py
"""Flat-shape drawing reads everything from the world snapshot."""
from __future__ import annotations
import pygame

from coindash.game.config import WIDTH, HEIGHT, COLOR_HERO, COLOR_COIN, COLOR_DANGER
from coindash.game.entities import Coin
from coindash.game.game import draw_world
from coindash.game.world import World


def _rgb(surf: pygame.Surface, pos):
    return tuple(surf.get_at(pos))[:3]


def test_hero_and_coin_drawn_from_snapshot():
    w = World.new(1)
    w.track.coins.append(Coin(x=500.0, y=200.0))
    surf = pygame.Surface((WIDTH, HEIGHT))
    draw_world(surf, w.snapshot())
    assert _rgb(surf, (int(w.hero.x) + 10, int(w.hero.y) + 10)) == COLOR_HERO
    assert _rgb(surf, (512, 212)) == COLOR_COIN


def test_game_over_hero_colour():
    w = World.new(1)
    surf = pygame.Surface((WIDTH, HEIGHT))
    draw_world(surf, w.snapshot(phase="game_over"))
    assert _rgb(surf, (int(w.hero.x) + 10, int(w.hero.y) + 10)) == COLOR_DANGER
