# coindash/game/entities.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Optional
from .config import COIN_W, COIN_H, SPIKE_W, SPIKE_H, PLATFORM_W, PLATFORM_H


@dataclass
class Box:
    """Axis-aligned box in screen space (top-left origin, y grows down)."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))

    def as_tuple(self) -> tuple:
        return (self.x, self.y, self.w, self.h)


@dataclass
class Coin(Box):
    w: float = COIN_W
    h: float = COIN_H


@dataclass
class Spike(Box):
    w: float = SPIKE_W
    h: float = SPIKE_H


@dataclass
class Platform(Box):
    """Floating one-way platform. `y` is the walkable top surface."""
    w: float = PLATFORM_W
    h: float = PLATFORM_H
    spike: Optional[Spike] = field(default=None, repr=False, compare=False)


def aabb_overlap(a: Box, b: Box) -> bool:
    """Inclusive overlap: boxes that only touch on an edge still collide."""
    return not (
        a.right < b.x or
        b.right < a.x or
        a.bottom < b.y or
        b.bottom < a.y
    )
