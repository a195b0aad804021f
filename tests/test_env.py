from __future__ import annotations

import gymnasium as gym
import numpy as np

import falling_blocks.env  # noqa: F401
from falling_blocks.env.falling_blocks_env import EnvAction, FallingBlocksEnv
from falling_blocks.game import GameConfig
from falling_blocks.rl.random_agent import run_random


def test_reset_returns_board_snapshot() -> None:
    env = FallingBlocksEnv(GameConfig(width=10, height=8))
    obs, info = env.reset(seed=0)
    assert obs.shape == (8, 10)
    assert obs.dtype == np.int8
    assert env.observation_space.contains(obs)
    assert np.count_nonzero(obs < 0) == 4
    assert info == {"lines_cleared_total": 0, "settled_pieces": 0, "steps": 0}


def test_step_applies_action_then_gravity() -> None:
    env = FallingBlocksEnv(GameConfig(width=10, height=20))
    env.reset(seed=1)
    before = set(env.board.active.positions())
    obs, reward, terminated, truncated, info = env.step(EnvAction.LEFT)
    after = set(env.board.active.positions())
    assert after == {(x - 1, y + 1) for x, y in before}
    assert reward == 1.0
    assert not terminated and not truncated
    assert info["steps"] == 1


def test_episode_terminates_when_board_is_lost() -> None:
    env = FallingBlocksEnv(GameConfig(width=10, height=8))
    env.reset(seed=2)
    terminated = False
    reward = None
    for _ in range(2000):
        _, reward, terminated, truncated, _ = env.step(EnvAction.NONE)
        if terminated:
            break
    assert terminated
    assert reward == 0.0
    assert env.board.lost


def test_truncates_at_max_episode_steps() -> None:
    env = FallingBlocksEnv(GameConfig(width=10, height=20, max_episode_steps=3))
    env.reset(seed=0)
    results = [env.step(EnvAction.NONE)[3] for _ in range(3)]
    assert results == [False, False, True]


def test_seeded_resets_are_reproducible() -> None:
    a = FallingBlocksEnv()
    b = FallingBlocksEnv()
    obs_a, _ = a.reset(seed=42)
    obs_b, _ = b.reset(seed=42)
    assert np.array_equal(obs_a, obs_b)
    for action in [EnvAction.ROTATE, EnvAction.RIGHT] * 30:
        obs_a = a.step(action)[0]
        obs_b = b.step(action)[0]
        assert np.array_equal(obs_a, obs_b)


def test_config_seed_used_on_first_reset() -> None:
    a = FallingBlocksEnv(GameConfig(random_seed=5))
    b = FallingBlocksEnv(GameConfig(random_seed=5))
    assert np.array_equal(a.reset()[0], b.reset()[0])


def test_render_rgb_array() -> None:
    env = FallingBlocksEnv(GameConfig(width=6, height=5), render_mode="rgb_array")
    env.reset(seed=0)
    img = env.render()
    assert img.shape == (5 * 12, 6 * 12, 3)
    assert img.dtype == np.uint8
    assert FallingBlocksEnv().render() is None


def test_registered_env_and_random_agent() -> None:
    env = gym.make("FallingBlocks-10x20-v0")
    obs, _ = env.reset(seed=0)
    assert obs.shape == (20, 10)
    env.close()
    assert run_random(steps=100, seed=0) >= 0.0
