from __future__ import annotations

import logging
from typing import Optional

import gymnasium as gym

import falling_blocks.env  # noqa: F401
from falling_blocks.utils.logging import setup_logger


logger = logging.getLogger(__name__)


def run_random(steps: int = 200, seed: Optional[int] = None) -> float:
    env = gym.make("FallingBlocks-10x20-v0")
    env.action_space.seed(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    episodes = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            episodes += 1
            logger.info("episode %d ended after %d steps, %d line(s) cleared",
                        episodes, info["steps"], info["lines_cleared_total"])
            obs, info = env.reset()
    env.close()
    return total_reward


if __name__ == "__main__":  # pragma: no cover
    setup_logger(name="falling_blocks")
    print(f"Random agent total reward: {run_random():.2f}")
