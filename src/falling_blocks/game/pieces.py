from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Protocol, Sequence, Tuple

import numpy as np

from .errors import EmptyShapeSequence, InvalidShapeIndex


class Position(NamedTuple):
    x: int
    y: int

    def offset(self, delta: Tuple[int, int]) -> "Position":
        return Position(self.x + delta[0], self.y + delta[1])


class ShapeKind(IntEnum):
    I = 1
    O = 2
    T = 3
    J = 4
    L = 5
    S = 6
    Z = 7


@dataclass(frozen=True)
class ShapeSpec:
    cells: Tuple[Tuple[int, int], ...]
    anchor: Tuple[int, int]
    label: str


SHAPES: Dict[ShapeKind, ShapeSpec] = {
    ShapeKind.I: ShapeSpec(((0, 0), (1, 0), (2, 0), (3, 0)), (1, 0), "🟥"),
    ShapeKind.O: ShapeSpec(((0, 0), (1, 0), (0, 1), (1, 1)), (0, 0), "🟨"),
    ShapeKind.T: ShapeSpec(((0, 0), (1, 0), (2, 0), (1, 1)), (0, 0), "🟨"),
    ShapeKind.J: ShapeSpec(((0, 0), (0, 1), (0, 2), (-1, 2)), (0, 1), "🟪"),
    ShapeKind.L: ShapeSpec(((0, 0), (0, 1), (0, 2), (1, 2)), (0, 1), "🟧"),
    ShapeKind.S: ShapeSpec(((0, 0), (1, 0), (0, 1), (-1, 1)), (0, 0), "🟩"),
    ShapeKind.Z: ShapeSpec(((0, 0), (-1, 0), (0, 1), (1, 1)), (0, 0), "🟥"),
}

# Index order used by samplers: 0=I 1=O 2=T 3=J 4=L 5=S 6=Z
SHAPE_ORDER: Tuple[ShapeKind, ...] = tuple(ShapeKind)


class ShapeSampler(Protocol):
    def next_shape_index(self) -> int:
        ...


class RandomShapeSampler:
    """Uniform draw over the seven shapes, optionally seeded."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def next_shape_index(self) -> int:
        return int(math.floor(self.rng.random() * len(SHAPE_ORDER)))


class SequenceShapeSampler:
    """Replays a fixed sequence of shape indices, cycling when exhausted."""

    def __init__(self, indices: Sequence[int]) -> None:
        if not indices:
            raise EmptyShapeSequence()
        self.indices = [_check_index(index) for index in indices]
        self._cursor = 0

    def next_shape_index(self) -> int:
        index = self.indices[self._cursor % len(self.indices)]
        self._cursor += 1
        return index


def _check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)) or not 0 <= index < len(SHAPE_ORDER):
        raise InvalidShapeIndex(index)
    return int(index)


@dataclass(frozen=True)
class Piece:
    """A set of occupied cells plus the anchor it rotates around.

    Pieces are values: every transform returns a new piece. A live piece
    has four cells; settled pieces lose cells as rows are cleared.
    """

    kind: ShapeKind
    label: str
    positions_set: FrozenSet[Position]
    anchor: Position

    @classmethod
    def from_kind(cls, kind: ShapeKind) -> "Piece":
        spec = SHAPES[ShapeKind(kind)]
        return cls(
            kind=ShapeKind(kind),
            label=spec.label,
            positions_set=frozenset(Position(x, y) for x, y in spec.cells),
            anchor=Position(*spec.anchor),
        )

    @classmethod
    def from_cells(cls, kind: ShapeKind, cells: Iterable[Tuple[int, int]], anchor: Tuple[int, int] = (0, 0)) -> "Piece":
        """Build a piece with arbitrary cells, keeping the label of `kind`."""
        return cls(
            kind=ShapeKind(kind),
            label=SHAPES[ShapeKind(kind)].label,
            positions_set=frozenset(Position(x, y) for x, y in cells),
            anchor=Position(*anchor),
        )

    @classmethod
    def random(cls, sampler: Optional[ShapeSampler] = None) -> "Piece":
        sampler = sampler or RandomShapeSampler()
        index = _check_index(sampler.next_shape_index())
        return cls.from_kind(SHAPE_ORDER[index])

    def positions(self) -> List[Position]:
        return list(self.positions_set)

    def has_position(self, pos: Tuple[int, int]) -> bool:
        return pos in self.positions_set

    def translated(self, delta: Tuple[int, int]) -> "Piece":
        return Piece(
            kind=self.kind,
            label=self.label,
            positions_set=frozenset(p.offset(delta) for p in self.positions_set),
            anchor=self.anchor.offset(delta),
        )

    def rotated(self) -> "Piece":
        a, b = self.anchor
        return Piece(
            kind=self.kind,
            label=self.label,
            positions_set=frozenset(Position(-y + b + a, x - a + b) for x, y in self.positions_set),
            anchor=self.anchor,
        )

    def remove_line(self, y: int) -> "Piece":
        """Drop row `y` and move the cells above it down by one row."""
        kept = set()
        for p in self.positions_set:
            if p.y == y:
                continue
            kept.add(Position(p.x, p.y + 1) if p.y < y else p)
        return Piece(kind=self.kind, label=self.label, positions_set=frozenset(kept), anchor=self.anchor)

    def collides_with(self, other: "Piece") -> bool:
        return not self.positions_set.isdisjoint(other.positions_set)

    def is_empty(self) -> bool:
        return not self.positions_set
