"""Precondition errors raised by the game engine."""

from __future__ import annotations


class GameRuleError(Exception):
    """Base class for calls the engine refuses to apply."""


class PhaseError(GameRuleError):
    """Operation is not allowed in the current phase."""

    def __init__(self, operation: str, phase: str) -> None:
        super().__init__(f"{operation} is not allowed during {phase}.")
        self.operation = operation
        self.phase = phase


class OutOfBoundsError(GameRuleError, ValueError):
    """Coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Coordinate ({row}, {col}) is outside the {size}x{size} grid.")
        self.row = row
        self.col = col
        self.size = size
