from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    max_episode_steps: int = 10000
