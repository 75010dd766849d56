# coindash/tests/test_hero.py
"""
Hero physics: double jump, gravity, ground/platform landing, screen clamp.

Usage (from repo root):
  python -m pytest coindash/tests/test_hero.py
"""
from __future__ import annotations

from coindash.game.config import (
    WIDTH, GROUND_Y, HERO_W, HERO_H, JUMP_VY, MAX_JUMPS, HERO_START_X
)
from coindash.game.entities import Platform
from coindash.game.hero import Hero


def test_start_pose():
    h = Hero.at_start()
    assert (h.x, h.y, h.vy) == (HERO_START_X, GROUND_Y, 0.0)
    assert h.on_ground and h.jumps_left == MAX_JUMPS
    assert (h.w, h.h) == (HERO_W, HERO_H)


def test_double_jump_then_third_press_ignored():
    h = Hero.at_start()

    assert h.try_jump()
    assert h.vy == JUMP_VY and h.jumps_left == 1 and not h.on_ground

    # a few frames of rising before the second press
    for _ in range(5):
        h.update_physics(1 / 60)
        h.resolve_landing()
    assert h.vy > JUMP_VY, "gravity should slow the ascent"

    assert h.try_jump()
    assert h.vy == JUMP_VY and h.jumps_left == 0

    h.update_physics(1 / 60)
    vy_before = h.vy
    assert not h.try_jump(), "no jumps left"
    assert h.vy == vy_before and h.jumps_left == 0


def test_ground_landing_refills_jumps():
    h = Hero.at_start()
    h.try_jump()
    h.try_jump()
    landed = False
    for _ in range(600):
        h.update_physics(1 / 60)
        if h.resolve_landing():
            landed = True
            break
    assert landed, "hero never came back down"
    assert h.y == GROUND_Y and h.vy == 0.0
    assert h.on_ground and h.jumps_left == MAX_JUMPS


def test_gravity_pulls_down_while_airborne():
    h = Hero(x=100.0, y=100.0, vy=0.0, on_ground=False, jumps_left=0)
    h.update_physics(0.1)
    assert h.vy > 0 and h.y > 100.0
    assert not h.resolve_landing()
    assert not h.on_ground


def test_horizontal_clamp():
    h = Hero(x=5.0, y=float(GROUND_Y))
    h.move_horizontal(-1, 1.0)
    assert h.x == 0.0
    h.move_horizontal(+1, 10.0)
    assert h.x == WIDTH - HERO_W


def test_platform_landing_within_tolerance():
    p = Platform(x=80.0, y=250.0)
    h = Hero(x=100.0, y=205.0, vy=50.0, on_ground=False, jumps_left=0)  # bottom 245
    assert h.resolve_landing(p)
    assert h.y == p.y - HERO_H and h.vy == 0.0
    assert h.on_ground and h.jumps_left == MAX_JUMPS


def test_platform_ignored_when_rising_or_far():
    p = Platform(x=80.0, y=250.0)

    rising = Hero(x=100.0, y=205.0, vy=-100.0, on_ground=False, jumps_left=1)
    assert not rising.resolve_landing(p)
    assert rising.jumps_left == 1

    far = Hero(x=100.0, y=190.0, vy=50.0, on_ground=False, jumps_left=1)  # bottom 230
    assert not far.resolve_landing(p)

    beside = Hero(x=p.right + 1, y=205.0, vy=50.0, on_ground=False, jumps_left=1)
    assert not beside.resolve_landing(p)
