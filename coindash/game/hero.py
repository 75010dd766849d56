# coindash/game/hero.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from .config import (
    WIDTH, HERO_START_X, HERO_W, HERO_H, HERO_RUN_PX_PER_S,
    JUMP_VY, GRAVITY, MAX_JUMPS, GROUND_Y, LANDING_TOLERANCE
)
from .entities import Box, Platform


@dataclass
class Hero(Box):
    """
    Double-jumping runner:
    - y is the top edge; standing on the ground means y == GROUND_Y
    - jumps_left counts remaining air jumps (0..MAX_JUMPS), refilled on landing
    """
    w: float = HERO_W
    h: float = HERO_H
    vy: float = 0.0
    on_ground: bool = True
    jumps_left: int = MAX_JUMPS

    @classmethod
    def at_start(cls) -> "Hero":
        return cls(x=float(HERO_START_X), y=float(GROUND_Y))

    def move_horizontal(self, direction: int, dt: float):
        """Run left (-1) or right (+1) and keep the hero on screen."""
        if direction:
            self.x += direction * HERO_RUN_PX_PER_S * dt
        self.x = max(0.0, min(WIDTH - self.w, self.x))

    def can_jump(self) -> bool:
        return self.jumps_left > 0

    def try_jump(self) -> bool:
        """Apply the jump impulse if a jump is left. Returns True if performed."""
        if not self.can_jump():
            return False
        self.vy = JUMP_VY
        self.on_ground = False
        self.jumps_left = max(0, self.jumps_left - 1)
        return True

    def update_physics(self, dt: float):
        """Integrate gravity, then position."""
        self.vy += GRAVITY * dt
        self.y += self.vy * dt

    def resolve_landing(self, platform: Optional[Platform] = None) -> bool:
        """
        Snap onto the ground or onto the platform surface.

        The platform is one-way: it only catches a descending hero whose
        bottom edge is within LANDING_TOLERANCE of its top.
        """
        vy_after = self.vy
        landed = False

        if self.y >= GROUND_Y:
            self.y = float(GROUND_Y)
            self.vy = 0.0
            landed = True

        if platform is not None:
            over = self.right > platform.x and self.x < platform.right
            if (vy_after >= 0.0 and over
                    and abs(self.bottom - platform.y) <= LANDING_TOLERANCE):
                self.y = platform.y - self.h
                self.vy = 0.0
                landed = True

        self.on_ground = landed
        if landed:
            self.jumps_left = MAX_JUMPS
        return landed
