"""Attack outcome evaluation (hit/miss/already attacked)."""

from __future__ import annotations

from battlegrid.game.core.board import Grid
from battlegrid.game.core.models import AttackOutcome


def attack(grid: Grid, row: int, col: int) -> tuple[Grid, AttackOutcome]:
    """Resolve an attack against a grid.

    A cell that was already hit returns the very same grid object, so
    repeated attacks change nothing.
    """
    grid.require_in_bounds(row, col)
    if grid.hit[row, col]:
        return grid, AttackOutcome.ALREADY_ATTACKED

    hit = grid.hit.copy()
    hit[row, col] = True
    outcome = AttackOutcome.HIT if grid.occupied[row, col] else AttackOutcome.MISS
    return Grid(occupied=grid.occupied, hit=hit), outcome
