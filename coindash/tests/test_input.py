# coindash/tests/test_input.py
"""Input sampler: level-triggered movement, edge-triggered jump and commands."""
from __future__ import annotations
import pygame

from coindash.game.input import InputSampler, LogicalKey


def test_jump_fires_once_per_press():
    s = InputSampler()
    s.press(LogicalKey.JUMP)
    assert s.sample().jump_pressed
    assert not s.sample().jump_pressed, "held jump must not re-fire"

    s.press(LogicalKey.JUMP)  # key repeat while held
    assert not s.sample().jump_pressed

    s.release(LogicalKey.JUMP)
    s.press(LogicalKey.JUMP)
    assert s.sample().jump_pressed


def test_quick_tap_between_samples_still_jumps():
    s = InputSampler()
    s.press(LogicalKey.JUMP)
    s.release(LogicalKey.JUMP)
    assert s.sample().jump_pressed
    assert not s.sample().jump_pressed


def test_movement_is_level_triggered():
    s = InputSampler()
    s.press(LogicalKey.LEFT)
    for _ in range(3):
        st = s.sample()
        assert st.left and not st.right and st.direction == -1
    s.press(LogicalKey.RIGHT)
    assert s.sample().direction == 0
    s.release(LogicalKey.LEFT)
    assert s.sample().direction == 1
    s.release(LogicalKey.RIGHT)
    assert s.sample().direction == 0


def test_commands_are_drained_once():
    s = InputSampler()
    s.press(LogicalKey.PAUSE)
    s.press(LogicalKey.PAUSE)  # repeat while held
    assert s.sample().commands == (LogicalKey.PAUSE,)
    assert s.sample().commands == ()
    s.release(LogicalKey.PAUSE)
    s.press(LogicalKey.PAUSE)
    s.press(LogicalKey.HELP)
    assert s.sample().commands == (LogicalKey.PAUSE, LogicalKey.HELP)


def test_pygame_events_mapping():
    s = InputSampler()
    assert s.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert s.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    st = s.sample()
    assert st.jump_pressed and st.left

    assert s.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert not s.sample().left


def test_unknown_keys_are_ignored():
    s = InputSampler()
    assert not s.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F12))
    assert not s.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    st = s.sample()
    assert not (st.left or st.right or st.jump_pressed) and st.commands == ()
