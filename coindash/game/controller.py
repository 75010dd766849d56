# coindash/game/controller.py
from __future__ import annotations
from enum import Enum
from typing import Callable, List
from .config import SPAWN_POLICY, PLATFORM_ENABLED, LOG_EVENTS
from .input import InputState, LogicalKey
from .world import World, WorldSnapshot, GameEvent

Listener = Callable[[GameEvent, World], None]


class Phase(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameController:
    """
    Owns the world and the phase state machine:
      PLAYING <-> PAUSED (pause key or help overlay)
      PLAYING  -> GAME_OVER (lives exhausted)
      any      -> PLAYING (restart, fresh world)
    Only PLAYING advances the world.
    """
    def __init__(self, seed: int | None = None,
                 spawn_policy: str = SPAWN_POLICY,
                 platform_enabled: bool = PLATFORM_ENABLED,
                 log_events: bool = LOG_EVENTS):
        self.seed_spec = seed
        self.spawn_policy = spawn_policy
        self.platform_enabled = platform_enabled
        self._listeners: List[Listener] = []
        if log_events:
            self.subscribe(print_event)
        self.restart()

    # -------------------- Events --------------------

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def _dispatch(self, events: List[GameEvent]):
        for ev in events:
            for listener in self._listeners:
                listener(ev, self.world)

    # -------------------- Phase transitions --------------------

    def restart(self):
        """Fresh world with the same seed spec (None -> new random layout)."""
        self.world = World.new(self.seed_spec,
                               spawn_policy=self.spawn_policy,
                               platform_enabled=self.platform_enabled)
        self.phase = Phase.PLAYING
        self.help_open = False
        self._paused_by_help = False

    def toggle_pause(self):
        if self.phase is Phase.PLAYING:
            self.phase = Phase.PAUSED
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.PLAYING
            self._paused_by_help = False

    def open_help(self):
        if self.help_open:
            return
        self.help_open = True
        if self.phase is Phase.PLAYING:
            self.phase = Phase.PAUSED
            self._paused_by_help = True

    def close_help(self):
        if not self.help_open:
            return
        self.help_open = False
        if self._paused_by_help and self.phase is Phase.PAUSED:
            self.phase = Phase.PLAYING
        self._paused_by_help = False

    def toggle_help(self):
        if self.help_open:
            self.close_help()
        else:
            self.open_help()

    def handle_command(self, key: LogicalKey):
        if key is LogicalKey.RESTART:
            self.restart()
        elif key is LogicalKey.PAUSE:
            self.toggle_pause()
        elif key is LogicalKey.HELP:
            self.toggle_help()

    # -------------------- Frame --------------------

    def tick(self, dt: float, inp: InputState) -> List[GameEvent]:
        """Apply commands, step the world if playing, notify listeners."""
        for key in inp.commands:
            self.handle_command(key)

        if self.phase is not Phase.PLAYING:
            return []

        events = self.world.step(dt, inp)
        if GameEvent.GAME_OVER in events:
            self.phase = Phase.GAME_OVER
        self._dispatch(events)
        return events

    def snapshot(self) -> WorldSnapshot:
        return self.world.snapshot(phase=self.phase.value, help_open=self.help_open)


def print_event(ev: GameEvent, world: World):
    print(f"[event] {ev.value:<15} score={world.score} lives={world.lives}")
