# coindash/game/world.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
from .config import (
    MAX_DT, START_LIVES, SPAWN_POLICY, PLATFORM_ENABLED,
    HERO_FRAME_COUNT, HERO_FRAME_S, COIN_FRAME_COUNT, COIN_FRAME_S
)
from .animation import FrameCycler
from .collisions import collect_coins, hit_spikes
from .hero import Hero
from .input import InputState
from .track import Track


class GameEvent(str, Enum):
    JUMPED = "jumped"
    COIN_COLLECTED = "coin_collected"
    HIT = "hit"
    GAME_OVER = "game_over"


BoxTuple = Tuple[float, float, float, float]


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view handed to presentation; nothing is read back from it."""
    hero: BoxTuple
    hero_frame: int
    coins: Tuple[BoxTuple, ...]
    coin_frame: int
    spikes: Tuple[BoxTuple, ...]
    platform: Optional[BoxTuple]
    score: int
    lives: int
    phase: str = "playing"
    help_open: bool = False


@dataclass
class World:
    hero: Hero
    track: Track
    score: int = 0
    lives: int = START_LIVES
    hero_anim: FrameCycler = field(default_factory=lambda: FrameCycler(HERO_FRAME_COUNT, HERO_FRAME_S))
    coin_anim: FrameCycler = field(default_factory=lambda: FrameCycler(COIN_FRAME_COUNT, COIN_FRAME_S))

    @classmethod
    def new(cls, seed: int | None = None,
            spawn_policy: str = SPAWN_POLICY,
            platform_enabled: bool = PLATFORM_ENABLED) -> "World":
        return cls(hero=Hero.at_start(),
                   track=Track(seed, spawn_policy=spawn_policy, platform_enabled=platform_enabled))

    @property
    def game_over(self) -> bool:
        return self.lives <= 0

    def step(self, dt: float, inp: InputState) -> List[GameEvent]:
        """
        Advance one frame: input -> physics & spawning -> collisions & score.
        Returns the events raised this frame. A finished world does not move.
        """
        if self.game_over:
            return []
        dt = max(0.0, min(dt, MAX_DT))
        events: List[GameEvent] = []
        hero, track = self.hero, self.track

        # --- hero ---
        hero.move_horizontal(inp.direction, dt)
        if inp.jump_pressed and hero.try_jump():
            events.append(GameEvent.JUMPED)
        hero.update_physics(dt)
        hero.resolve_landing(track.platform)

        # --- scenery ---
        track.update_and_generate(dt)

        # --- collisions ---
        track.coins, picked = collect_coins(hero, track.coins)
        if picked:
            self.score += picked
            events.extend([GameEvent.COIN_COLLECTED] * picked)

        track.spikes, hits = hit_spikes(hero, track.spikes)
        for _ in range(hits):
            if self.lives > 0:
                self.lives -= 1
                events.append(GameEvent.HIT)

        if self.lives <= 0:
            self.lives = 0
            events.append(GameEvent.GAME_OVER)

        self.hero_anim.advance(dt)
        self.coin_anim.advance(dt)
        return events

    def snapshot(self, phase: str = "playing", help_open: bool = False) -> WorldSnapshot:
        p = self.track.platform
        return WorldSnapshot(
            hero=self.hero.as_tuple(),
            hero_frame=self.hero_anim.frame,
            coins=tuple(c.as_tuple() for c in self.track.coins),
            coin_frame=self.coin_anim.frame,
            spikes=tuple(s.as_tuple() for s in self.track.spikes),
            platform=p.as_tuple() if p is not None else None,
            score=self.score,
            lives=self.lives,
            phase=phase,
            help_open=help_open,
        )
