"""Falling Blocks: a minimal falling-block puzzle rule engine."""

from .game import Board, Direction, GameConfig, Piece, Position, ShapeKind

__all__ = ["Board", "Direction", "GameConfig", "Piece", "Position", "ShapeKind"]
