from __future__ import annotations


class FallingBlocksError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidDimensions(FallingBlocksError, ValueError):
    def __init__(self, width: object, height: object) -> None:
        super().__init__(f"board dimensions must be positive integers, got width={width!r} height={height!r}")
        self.width = width
        self.height = height


class InvalidShapeIndex(FallingBlocksError, ValueError):
    def __init__(self, index: object) -> None:
        super().__init__(f"shape index must be in 0..6, got {index!r}")
        self.index = index


class EmptyShapeSequence(FallingBlocksError, ValueError):
    def __init__(self) -> None:
        super().__init__("a shape sequence needs at least one index")
