# coindash/env/observations.py
from __future__ import annotations
from typing import Iterable, Optional
import numpy as np

from coindash.game.config import WIDTH, HEIGHT, HERO_W, MAX_JUMPS, START_LIVES, JUMP_VY
from coindash.game.entities import Box

OBS_SIZE = 13
# Vertical speed normalization (px/s); jump impulse doubled covers a long fall
VY_SCALE = abs(JUMP_VY) * 2.0


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def _nearest_ahead(boxes: Iterable[Box], x: float) -> Optional[Box]:
    """Closest box whose right edge is not yet behind x."""
    best = None
    for b in boxes:
        if b.right < x:
            continue
        if best is None or b.x < best.x:
            best = b
    return best


def _entity_pair(box: Optional[Box], hero_x: float):
    """(dx_norm, y_norm) for a box ahead of the hero, (1, 1) if none."""
    if box is None:
        return 1.0, 1.0
    return _clamp01((box.x - hero_x) / WIDTH), _clamp01(box.y / HEIGHT)


def build_observation(world) -> np.ndarray:
    """
    13-D float32 vector:
      [hero_x, hero_y, vy, jumps_left, on_ground, lives,
       spike_dx, spike_y, coin_dx, coin_y,
       platform_present, platform_dx, platform_top]
    Every entry is in [0,1] except vy in [-1,1].
    """
    hero = world.hero
    track = world.track

    vy = float(np.clip(hero.vy / VY_SCALE, -1.0, 1.0))
    spike_dx, spike_y = _entity_pair(_nearest_ahead(track.spikes, hero.x), hero.x)
    coin_dx, coin_y = _entity_pair(_nearest_ahead(track.coins, hero.x), hero.x)

    p = track.platform
    if p is not None and p.right >= hero.x:
        plat = (1.0, _clamp01((p.x - hero.x) / WIDTH), _clamp01(p.y / HEIGHT))
    else:
        plat = (0.0, 1.0, 1.0)

    obs = [
        _clamp01(hero.x / max(1, WIDTH - HERO_W)),
        _clamp01(hero.y / HEIGHT),
        vy,
        _clamp01(hero.jumps_left / MAX_JUMPS),
        1.0 if hero.on_ground else 0.0,
        _clamp01(world.lives / START_LIVES),
        spike_dx, spike_y,
        coin_dx, coin_y,
        *plat,
    ]
    return np.asarray(obs, dtype=np.float32)
