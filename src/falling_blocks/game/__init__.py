"""Game module for Falling Blocks.

Exports the rule engine and supporting classes:
- Piece: Tetromino cells with translation, rotation and line removal
- Position, ShapeKind: Cell coordinates and the seven shape kinds
- RandomShapeSampler, SequenceShapeSampler: Sources of the next shape
- Board: Falling piece, settled pieces, line clearing and loss detection
- GameConfig: Board size and seed configuration
"""

from .errors import EmptyShapeSequence, FallingBlocksError, InvalidDimensions, InvalidShapeIndex
from .pieces import (
    SHAPES,
    SHAPE_ORDER,
    Piece,
    Position,
    RandomShapeSampler,
    SequenceShapeSampler,
    ShapeKind,
    ShapeSampler,
)
from .config import GameConfig
from .board import Board, Direction

__all__ = [
    "EmptyShapeSequence",
    "FallingBlocksError",
    "InvalidDimensions",
    "InvalidShapeIndex",
    "SHAPES",
    "SHAPE_ORDER",
    "Piece",
    "Position",
    "RandomShapeSampler",
    "SequenceShapeSampler",
    "ShapeKind",
    "ShapeSampler",
    "GameConfig",
    "Board",
    "Direction",
]
