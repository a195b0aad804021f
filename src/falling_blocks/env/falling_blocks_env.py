from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Board, Direction, GameConfig, RandomShapeSampler, ShapeKind


class EnvAction(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3


_PALETTE = {
    0: (30, 30, 36),
    int(ShapeKind.I): (0, 240, 240),
    int(ShapeKind.O): (240, 240, 0),
    int(ShapeKind.T): (160, 0, 240),
    int(ShapeKind.J): (0, 0, 240),
    int(ShapeKind.L): (240, 160, 0),
    int(ShapeKind.S): (0, 240, 0),
    int(ShapeKind.Z): (240, 0, 0),
}


class FallingBlocksEnv(gym.Env):
    """Drives a Board with one player action followed by one gravity tick per step."""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 10}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.board = Board.from_config(self.config)

        n_kinds = len(ShapeKind)
        self.observation_space = spaces.Box(
            low=-n_kinds, high=n_kinds, shape=(self.board.height, self.board.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(EnvAction))

        self._steps = 0
        self._initial_seed = self.config.random_seed

    def _get_obs(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "lines_cleared_total": self.board.lines_cleared_total,
            "settled_pieces": len(self.board.settled),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        if seed is None:
            seed, self._initial_seed = self._initial_seed, None
        super().reset(seed=seed)
        self.board.reset(RandomShapeSampler(int(self.np_random.integers(0, 2**31 - 1))))
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = EnvAction(int(action))
        if action == EnvAction.LEFT:
            self.board.move(Direction.LEFT)
        elif action == EnvAction.RIGHT:
            self.board.move(Direction.RIGHT)
        elif action == EnvAction.ROTATE:
            self.board.rotate()
        self.board.tick()
        self._steps += 1

        terminated = bool(self.board.lost)
        truncated = not terminated and self._steps >= self.config.max_episode_steps
        reward = 0.0 if terminated else 1.0
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            # human rendering delegated to external UI; noop
            return None
        state = self.board.get_state()
        cell = 12
        h, w = state.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                color = _PALETTE.get(abs(int(state[y, x])), (200, 200, 200))
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
