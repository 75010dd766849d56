# coindash/game/track.py
from __future__ import annotations
import random
from typing import List, Optional, Tuple
from .config import (
    GROUND_Y, GROUND_LINE_Y, HERO_H, MAX_JUMP_HEIGHT, SCROLL_PX_PER_S, SPAWN_X,
    COIN_H, SPIKE_W, SPIKE_H, PLATFORM_H, PLATFORM_MIN_TOP, PLATFORM_MAX_TOP,
    PLATFORM_CHANCE, PLATFORM_ENABLED, COIN_CLEARANCE,
    SPAWN_POLICY, COIN_INTERVAL_S, SPIKE_INTERVAL_S,
    COIN_CHANCE_PER_FRAME, SPIKE_CHANCE_PER_FRAME
)
from .entities import Coin, Spike, Platform

SPAWN_POLICIES = ("interval", "bernoulli")


class IntervalTimer:
    """Fires once each time accumulated time reaches a uniformly drawn interval."""
    def __init__(self, interval_range: Tuple[float, float], rng: random.Random):
        self.lo, self.hi = interval_range
        self.rng = rng
        self.reset()

    def reset(self):
        self.timer = 0.0
        self.interval = self.rng.uniform(self.lo, self.hi)

    def tick(self, dt: float) -> bool:
        self.timer += dt
        if self.timer >= self.interval:
            self.timer -= self.interval
            self.interval = self.rng.uniform(self.lo, self.hi)
            return True
        return False


class BernoulliTrial:
    """Independent draw every frame, regardless of dt."""
    def __init__(self, chance: float, rng: random.Random):
        self.chance = chance
        self.rng = rng

    def tick(self, dt: float) -> bool:
        return self.rng.random() < self.chance


def make_triggers(policy: str, rng: random.Random):
    """Return (coin_trigger, spike_trigger) for a spawn policy name."""
    if policy == "interval":
        return IntervalTimer(COIN_INTERVAL_S, rng), IntervalTimer(SPIKE_INTERVAL_S, rng)
    if policy == "bernoulli":
        return BernoulliTrial(COIN_CHANCE_PER_FRAME, rng), BernoulliTrial(SPIKE_CHANCE_PER_FRAME, rng)
    raise ValueError(f"Unknown spawn policy {policy!r}, expected one of {SPAWN_POLICIES}")


class Track:
    """
    Endless stream of coins, ground spikes and an optional floating platform,
    all scrolling left at SCROLL_PX_PER_S.
    """
    def __init__(self, seed: int | None,
                 spawn_policy: str = SPAWN_POLICY,
                 platform_enabled: bool = PLATFORM_ENABLED):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.spawn_policy = spawn_policy
        self.platform_enabled = platform_enabled
        self.platform_chance = PLATFORM_CHANCE
        self.coin_trigger, self.spike_trigger = make_triggers(spawn_policy, self.rng)
        self.coins: List[Coin] = []
        self.spikes: List[Spike] = []
        self.platform: Optional[Platform] = None

    # ---------------- Coin placement ----------------

    def ground_coin_y(self) -> float:
        """Anywhere between ground level and the double-jump apex from the ground."""
        highest = GROUND_Y - MAX_JUMP_HEIGHT * 2
        lowest = GROUND_Y
        return self.rng.uniform(highest, lowest)

    def platform_coin_y(self, platform: Platform) -> float:
        """
        Reachable from the platform (double-jump apex) down to the ground,
        skipping the band around the platform body so a coin never overlaps it.
        """
        stand_y = platform.y - HERO_H
        highest = max(0.0, stand_y - MAX_JUMP_HEIGHT * 2)
        lowest = float(GROUND_Y)

        band_top = platform.y - COIN_H - COIN_CLEARANCE
        band_bottom = platform.y + PLATFORM_H + COIN_CLEARANCE

        safe_top = max(highest, band_top)
        safe_bottom = min(lowest, band_bottom)
        has_above = safe_top > highest
        has_below = safe_bottom < lowest

        if has_above and has_below:
            if self.rng.random() < 0.5:
                return self.rng.uniform(highest, safe_top)
            return self.rng.uniform(safe_bottom, lowest)
        if has_above:
            return self.rng.uniform(highest, safe_top)
        if has_below:
            return self.rng.uniform(safe_bottom, lowest)
        return self.ground_coin_y()

    # ---------------- Spawning ----------------

    def spawn_coin(self) -> Coin:
        p = self.platform
        if p is not None and p.x <= SPAWN_X <= p.right:
            y = self.platform_coin_y(p)
        else:
            y = self.ground_coin_y()
        coin = Coin(x=float(SPAWN_X), y=y)
        self.coins.append(coin)
        return coin

    def spawn_spike(self) -> Spike:
        spike = Spike(x=float(SPAWN_X), y=float(GROUND_LINE_Y - SPIKE_H))
        self.spikes.append(spike)
        return spike

    def maybe_spawn_platform(self) -> Optional[Platform]:
        """Start a platform off-screen right with one spike on its centre."""
        if not self.platform_enabled or self.platform is not None:
            return None
        if self.rng.random() >= self.platform_chance:
            return None

        top = self.rng.uniform(PLATFORM_MIN_TOP, PLATFORM_MAX_TOP)
        platform = Platform(x=float(SPAWN_X), y=top)
        spike = Spike(x=platform.center_x - SPIKE_W / 2, y=top - SPIKE_H)
        platform.spike = spike
        self.spikes.append(spike)
        self.platform = platform
        return platform

    # ---------------- Per-frame update ----------------

    def update_and_generate(self, dt: float):
        """Spawn what is due, scroll everything left, drop what left the screen."""
        if self.coin_trigger.tick(dt):
            self.spawn_coin()
        if self.spike_trigger.tick(dt):
            self.spawn_spike()
        self.maybe_spawn_platform()

        dx = SCROLL_PX_PER_S * dt
        for c in self.coins:
            c.x -= dx
        for s in self.spikes:
            s.x -= dx

        if self.platform is not None:
            self.platform.x -= dx
            if self.platform.right < 0:
                self.platform = None

        self.coins = [c for c in self.coins if c.right > 0]
        self.spikes = [s for s in self.spikes if s.right > 0]
