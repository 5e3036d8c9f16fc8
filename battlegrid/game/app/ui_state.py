"""Typed state exposed by the controller to presentation."""

from __future__ import annotations

from dataclasses import dataclass

from battlegrid.game.core.models import Cell, Phase

CellRows = tuple[tuple[Cell, ...], ...]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Why a player layout was refused at battle start."""

    message: str
    expected_lengths: tuple[int, ...]
    found_lengths: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class StartBattleResult:
    """Outcome of a start-battle request."""

    success: bool
    status: str
    error: ValidationError | None = None


@dataclass(frozen=True, slots=True)
class GameUIState:
    """View-ready state snapshot.

    ``opponent_cells`` only reports ``occupied`` for cells that were hit.
    """

    phase: Phase
    status: str
    expected_lengths: tuple[int, ...]
    player_cells: CellRows
    opponent_cells: CellRows
    opponent_defeated: bool
