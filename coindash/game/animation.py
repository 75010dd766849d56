# coindash/game/animation.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass
class FrameCycler:
    """Advances a sprite frame index on a fixed cadence. No gameplay effect."""
    frame_count: int
    frame_s: float
    frame: int = 0
    _timer: float = 0.0

    def advance(self, dt: float):
        self._timer += dt
        if self._timer >= self.frame_s:
            self._timer -= self.frame_s
            self.frame = (self.frame + 1) % self.frame_count
