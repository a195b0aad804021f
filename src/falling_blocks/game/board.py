from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .errors import InvalidDimensions
from .pieces import Piece, Position, RandomShapeSampler, ShapeSampler


logger = logging.getLogger(__name__)


class Direction(IntEnum):
    LEFT = -1
    RIGHT = 1


class Board:
    """Fixed-size playfield holding one falling piece and the settled ones.

    Blocked moves and rotations are silently ignored. Once `lost` is set the
    board no longer changes; queries keep answering with the final state.
    """

    def __init__(self, width: int, height: int, sampler: Optional[ShapeSampler] = None) -> None:
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise InvalidDimensions(width, height)
        self.width = int(width)
        self.height = int(height)
        self.sampler: ShapeSampler = sampler or RandomShapeSampler()
        self.settled: List[Piece] = []
        self.lost = False
        self.lines_cleared_total = 0
        self.active = self._spawn()

    @classmethod
    def from_config(cls, config: GameConfig, sampler: Optional[ShapeSampler] = None) -> "Board":
        return cls(config.width, config.height, sampler or RandomShapeSampler(config.random_seed))

    def reset(self, sampler: Optional[ShapeSampler] = None) -> None:
        if sampler is not None:
            self.sampler = sampler
        self.settled = []
        self.lost = False
        self.lines_cleared_total = 0
        self.active = self._spawn()

    def _spawn(self) -> Piece:
        piece = Piece.random(self.sampler).translated((self.width // 2, 0))
        logger.debug("spawned %s at %s", piece.kind.name, piece.anchor)
        return piece

    # Queries

    def iter_positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    def get(self, pos: Tuple[int, int]) -> Optional[str]:
        if self.active.has_position(pos):
            return self.active.label
        for piece in self.settled:
            if piece.has_position(pos):
                return piece.label
        return None

    def is_out_of_bounds(self, piece: Piece) -> bool:
        return not all(0 <= x < self.width and 0 <= y < self.height for x, y in piece.positions())

    def is_colliding(self, piece: Piece) -> bool:
        return any(settled.collides_with(piece) for settled in self.settled)

    def is_line_full(self, y: int) -> bool:
        row = {pos for piece in self.settled for pos in piece.positions() if pos.y == y}
        return len(row) == self.width

    def get_state(self) -> np.ndarray:
        """Grid snapshot: 0 empty, kind value for settled cells, negative kind for the falling piece."""
        state = np.zeros((self.height, self.width), dtype=np.int8)
        for piece in self.settled:
            for x, y in piece.positions():
                if 0 <= y < self.height and 0 <= x < self.width:
                    state[y, x] = int(piece.kind)
        for x, y in self.active.positions():
            if 0 <= y < self.height and 0 <= x < self.width:
                state[y, x] = -int(self.active.kind)
        return state

    # Commands

    def _try_apply(self, candidate: Piece) -> bool:
        if self.is_out_of_bounds(candidate) or self.is_colliding(candidate):
            return False
        self.active = candidate
        return True

    def move(self, direction: Direction) -> None:
        if self.lost:
            return
        self._try_apply(self.active.translated((int(Direction(direction)), 0)))

    def rotate(self) -> None:
        if self.lost:
            return
        self._try_apply(self.active.rotated())

    def tick(self) -> None:
        if self.lost:
            return
        dropped = self.active.translated((0, 1))
        if not self.is_out_of_bounds(dropped) and not self.is_colliding(dropped):
            self.active = dropped
            return
        self._freeze()

    def _freeze(self) -> None:
        frozen, self.active = self.active, self._spawn()
        self.settled.append(frozen)
        logger.debug("froze %s with cells %s", frozen.kind.name, sorted(frozen.positions()))
        self._remove_full_lines()
        if self.is_colliding(self.active):
            self.lost = True
            logger.info("game lost after %d settled pieces", len(self.settled))

    def _remove_full_lines(self) -> int:
        # Rows are removed as soon as they are found; later rows see the shifted board.
        removed = 0
        for y in range(self.height):
            if self.is_line_full(y):
                self.settled = [piece.remove_line(y) for piece in self.settled]
                removed += 1
        if removed:
            self.lines_cleared_total += removed
            logger.info("cleared %d line(s), %d total", removed, self.lines_cleared_total)
        return removed
