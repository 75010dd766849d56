# coindash/game/collisions.py
from __future__ import annotations
from typing import List, Tuple
from .entities import Box, Coin, Spike, aabb_overlap


def collect_coins(hero: Box, coins: List[Coin]) -> Tuple[List[Coin], int]:
    """Split coins into (still on track, number picked up by the hero)."""
    kept = [c for c in coins if not aabb_overlap(hero, c)]
    return kept, len(coins) - len(kept)


def hit_spikes(hero: Box, spikes: List[Spike]) -> Tuple[List[Spike], int]:
    """Split spikes into (still on track, number the hero ran into)."""
    kept = [s for s in spikes if not aabb_overlap(hero, s)]
    return kept, len(spikes) - len(kept)
