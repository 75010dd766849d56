# coindash/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from coindash.game.config import (
    WIDTH, HEIGHT, FPS, SPAWN_POLICY, PLATFORM_ENABLED, COLOR_BG
)
from coindash.game.game import draw_world
from coindash.game.input import InputState
from coindash.game.world import World, GameEvent
from coindash.env.observations import build_observation, OBS_SIZE

NOOP, JUMP, LEFT, RIGHT = 0, 1, 2, 3


class RunnerEnv(gym.Env):
    """
    Coin Dash Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Actions: 0 NOOP, 1 JUMP (press edge on the first sub-step), 2 LEFT, 3 RIGHT.
    - Reward: coins collected minus spikes hit during the decision.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 spawn_policy: str = SPAWN_POLICY,
                 platform_enabled: bool = PLATFORM_ENABLED):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.spawn_policy = spawn_policy
        self.platform_enabled = platform_enabled

        self.sim_fps = FPS
        self.dt = 1.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(4)
        low = np.zeros(OBS_SIZE, dtype=np.float32)
        low[2] = -1.0  # vy
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.world: Optional[World] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Seeded reset -> exact layout; None lets the Track randomize
        track_seed = int(seed) if seed is not None else None

        self.world = World.new(track_seed,
                               spawn_policy=self.spawn_policy,
                               platform_enabled=self.platform_enabled)
        self.timestep = 0
        self.current_seed = self.world.track.seed

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.world is not None, "Call reset() first."
        action = int(action)

        coins = hits = 0
        for i in range(self.frame_skip):
            inp = InputState(left=(action == LEFT),
                             right=(action == RIGHT),
                             jump_pressed=(action == JUMP and i == 0))
            events = self.world.step(self.dt, inp)
            coins += events.count(GameEvent.COIN_COLLECTED)
            hits += events.count(GameEvent.HIT)
            if self.world.game_over:
                break

        reward = float(coins - hits)

        self.timestep += 1
        terminated = self.world.game_over
        truncated = bool(self.time_limit_decisions is not None
                         and self.timestep >= self.time_limit_decisions)

        info = self._info()
        info.update({"coins": coins, "hits": hits})

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return build_observation(self.world)

    def _info(self) -> Dict[str, Any]:
        assert self.world is not None
        return {
            "seed": self.current_seed,
            "timestep": self.timestep,
            "score": self.world.score,
            "lives": self.world.lives,
            "on_ground": bool(self.world.hero.on_ground),
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Coin Dash - RunnerEnv")
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.clock = pygame.time.Clock()

        if self.render_mode == "human":
            pygame.event.pump()

        self.screen.fill(COLOR_BG)
        if self.world is not None:
            phase = "game_over" if self.world.game_over else "playing"
            draw_world(self.screen, self.world.snapshot(phase=phase))

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
