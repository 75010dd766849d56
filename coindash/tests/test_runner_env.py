# coindash/tests/test_runner_env.py
"""
Quick tests for RunnerEnv (Gymnasium environment).

Usage (from repo root):
  python -m pytest coindash/tests/test_runner_env.py
  python -m coindash.tests.test_runner_env --steps 500
"""
from __future__ import annotations
import argparse
import sys
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from coindash.env.runner_env import RunnerEnv, JUMP

SEED = 123
STEPS = 300


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = RunnerEnv()
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_smoke(steps: int = STEPS, seed: int = SEED):
    """Random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = RunnerEnv()
    try:
        obs, info = env.reset(seed=seed)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == seed and info["lives"] == 3

        env.action_space.seed(seed)
        for t in range(steps):
            obs, r, term, trunc, info = env.step(env.action_space.sample())
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            assert r == info["coins"] - info["hits"]
            if term:
                assert info["lives"] == 0
            if term or trunc:
                break
    finally:
        env.close()


def test_determinism(steps: int = STEPS, seed: int = SEED):
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = RunnerEnv()
        traj = []
        try:
            env.reset(seed=seed)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.randint(0, 4)) for _ in range(steps)]
    t1, t2 = rollout(action_seq), rollout(action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.allclose(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_jump_action_leaves_ground():
    env = RunnerEnv(frame_skip=2)
    try:
        obs, _ = env.reset(seed=SEED)
        assert obs[4] == 1.0 and obs[3] == 1.0  # on ground, both jumps
        obs, *_ = env.step(JUMP)
        assert obs[4] == 0.0 and obs[3] == 0.5
        assert obs[2] < 0.0, "moving up"
    finally:
        env.close()


def test_time_limit_truncates():
    env = RunnerEnv(frame_skip=4, time_limit_seconds=1.0)
    try:
        env.reset(seed=SEED)
        trunc = False
        for _ in range(15):
            _, _, term, trunc, _ = env.step(0)
            if term:
                break
        assert trunc or term
    finally:
        env.close()


def test_rgb_array_render():
    env = RunnerEnv(render_mode="rgb_array")
    try:
        env.reset(seed=SEED)
        frame = env.render()
        assert frame.shape[2] == 3 and frame.dtype == np.uint8
    finally:
        env.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=SEED, help="Episode seed for tests")
    ap.add_argument("--steps", type=int, default=STEPS, help="Max decision steps per test")
    args = ap.parse_args()

    try:
        test_api_check()
        print("✓ API check ok")
        test_smoke(steps=args.steps, seed=args.seed)
        print("✓ Smoke test ok")
        test_determinism(steps=args.steps, seed=args.seed)
        print("✓ Determinism ok")
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
