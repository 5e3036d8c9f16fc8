"""UI state projection helpers for controller snapshots."""

from __future__ import annotations

from battlegrid.game.app.ui_state import CellRows, GameUIState
from battlegrid.game.core.board import Grid
from battlegrid.game.core.models import Cell
from battlegrid.game.core.rules import GameSession


def masked_opponent_cells(grid: Grid) -> CellRows:
    """Hide ship occupancy on cells the player has not attacked."""
    return tuple(
        tuple(Cell(occupied=cell.occupied and cell.hit, hit=cell.hit) for cell in row)
        for row in grid.rows()
    )


def build_ui_state(
    *,
    session: GameSession,
    status: str,
    expected_lengths: tuple[int, ...],
) -> GameUIState:
    """Build GameUIState from the session owned by the controller."""
    return GameUIState(
        phase=session.phase,
        status=status,
        expected_lengths=expected_lengths,
        player_cells=session.player_grid.rows(),
        opponent_cells=masked_opponent_cells(session.opponent_grid),
        opponent_defeated=session.opponent_grid.all_ships_sunk(),
    )
