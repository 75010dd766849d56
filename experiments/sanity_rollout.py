# /experiments/sanity_rollout.py
"""
Sanity rollouts for RunnerEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Appends one row per episode to an episodes CSV for notebook analysis

Usage examples (from repo root):
  # Both policies over 20 default seeds, frame_skip=4:
  python -m experiments.sanity_rollout --policies both

  # Only heuristic, custom seeds, bernoulli spawning, no platform:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333 \
      --spawn-policy bernoulli --no-platform
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from coindash.env.runner_env import RunnerEnv, NOOP, JUMP
from coindash.game.track import SPAWN_POLICIES


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> int:
        return int(rng.randint(0, 4))
    return act

def tiny_heuristic_policy_init(jump_dx: float = 0.12):
    """
    Very small rule: stay in place and jump when the nearest spike is close
    ahead and the hero is on the ground (obs[6] = spike_dx, obs[4] = on_ground).
    """
    def act(obs: np.ndarray) -> int:
        spike_dx, on_ground = obs[6], obs[4]
        return JUMP if (on_ground == 1.0 and spike_dx < jump_dx) else NOOP
    return act


# ------------------------ Rollout core ------------------------

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str, seed: int, frame_skip: int, steps_limit: int,
                    spawn_policy: str, platform_enabled: bool) -> Tuple[int, float, int, int, bool, bool]:
    """Returns: (ep_len, ret_sum, score, lives, terminated, truncated)"""
    env = RunnerEnv(frame_skip=frame_skip, spawn_policy=spawn_policy, platform_enabled=platform_enabled)

    if policy_name == "random":
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError("Unknown policy")

    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            obs, r, term, trunc, info = env.step(policy(obs))
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
    finally:
        env.close()

    return ep_len, ret_sum, int(info["score"]), int(info["lives"]), bool(term), bool(trunc)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"], help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4, help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--spawn-policy", choices=SPAWN_POLICIES, default="interval")
    ap.add_argument("--no-platform", action="store_true")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "policy_name", "seed", "spawn_policy", "platform",
        "frame_skip", "episode_len_decisions", "return_sum",
        "score", "lives", "terminated", "truncated",
    ]
    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]
    platform_enabled = not args.no_platform

    print(f"Running policies={to_run} on {len(seeds)} seeds "
          f"(frame_skip={args.frame_skip}, spawn={args.spawn_policy}, platform={platform_enabled})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, score, lives, terminated, truncated = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                spawn_policy=args.spawn_policy,
                platform_enabled=platform_enabled,
            )
            write_episode_row(episodes_csv, header, [
                policy_name, seed, args.spawn_policy, int(platform_enabled),
                args.frame_skip, ep_len, f"{ret_sum:.1f}",
                score, lives, int(terminated), int(truncated),
            ])
            print(f"[{policy_name}] seed={seed}  len={ep_len}  score={score}  lives={lives}  "
                  f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
