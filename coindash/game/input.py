# coindash/game/input.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Set, Tuple
import pygame


class LogicalKey(Enum):
    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"
    PAUSE = "pause"
    RESTART = "restart"
    HELP = "help"


# Keys that are queued as one-shot commands rather than held.
COMMAND_KEYS = (LogicalKey.PAUSE, LogicalKey.RESTART, LogicalKey.HELP)

KEYMAP: Dict[int, LogicalKey] = {
    pygame.K_LEFT: LogicalKey.LEFT,
    pygame.K_a: LogicalKey.LEFT,
    pygame.K_RIGHT: LogicalKey.RIGHT,
    pygame.K_d: LogicalKey.RIGHT,
    pygame.K_SPACE: LogicalKey.JUMP,
    pygame.K_UP: LogicalKey.JUMP,
    pygame.K_w: LogicalKey.JUMP,
    pygame.K_p: LogicalKey.PAUSE,
    pygame.K_r: LogicalKey.RESTART,
    pygame.K_ESCAPE: LogicalKey.HELP,
}


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump_pressed: bool = False  # true only on the frame the key went down
    commands: Tuple[LogicalKey, ...] = ()

    @property
    def direction(self) -> int:
        return int(self.right) - int(self.left)


class InputSampler:
    """
    Key-state table fed by press/release events and polled once per frame.
    Movement is level-triggered; jump and commands are edge-triggered.
    """
    def __init__(self, keymap: Dict[int, LogicalKey] | None = None):
        self.keymap = KEYMAP if keymap is None else keymap
        self.reset()

    def reset(self):
        self._held: Set[LogicalKey] = set()
        self._jump_edge = False
        self._commands: List[LogicalKey] = []

    def is_held(self, key: LogicalKey) -> bool:
        return key in self._held

    def press(self, key: LogicalKey):
        if key in self._held:
            return  # key repeat
        self._held.add(key)
        if key is LogicalKey.JUMP:
            self._jump_edge = True
        elif key in COMMAND_KEYS:
            self._commands.append(key)

    def release(self, key: LogicalKey):
        self._held.discard(key)

    def handle_event(self, event) -> bool:
        """Feed a pygame event. Returns True if it mapped to a logical key."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        key = self.keymap.get(getattr(event, "key", None))
        if key is None:
            return False
        if event.type == pygame.KEYDOWN:
            self.press(key)
        else:
            self.release(key)
        return True

    def sample(self) -> InputState:
        state = InputState(
            left=LogicalKey.LEFT in self._held,
            right=LogicalKey.RIGHT in self._held,
            jump_pressed=self._jump_edge,
            commands=tuple(self._commands),
        )
        self._jump_edge = False
        self._commands.clear()
        return state
