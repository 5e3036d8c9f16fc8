"""Ship layout validation over occupied-cell connectivity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from battlegrid.game.core.board import Grid
from battlegrid.game.core.models import Coord

_NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True, slots=True)
class LayoutReport:
    """Outcome of inspecting a player layout."""

    valid: bool
    ship_lengths: tuple[int, ...]
    bent_ship: tuple[Coord, ...] | None = None


def _collect_component(grid: Grid, visited: np.ndarray, start: Coord) -> tuple[Coord, ...]:
    # Iterative flood fill; diagonal neighbours never connect.
    cells: list[Coord] = []
    stack = [start]
    visited[start.row, start.col] = True
    while stack:
        cell = stack.pop()
        cells.append(cell)
        for dr, dc in _NEIGHBOR_OFFSETS:
            rr = cell.row + dr
            cc = cell.col + dc
            if not grid.in_bounds(rr, cc):
                continue
            if visited[rr, cc] or not grid.occupied[rr, cc]:
                continue
            visited[rr, cc] = True
            stack.append(Coord(rr, cc))
    return tuple(sorted(cells, key=lambda c: (c.row, c.col)))


def _is_straight(cells: Sequence[Coord]) -> bool:
    first = cells[0]
    same_row = all(cell.row == first.row for cell in cells)
    same_col = all(cell.col == first.col for cell in cells)
    return same_row or same_col


def find_ships(grid: Grid) -> list[tuple[Coord, ...]]:
    """Return every 4-connected group of occupied cells, in row-major discovery order."""
    visited = np.zeros(grid.occupied.shape, dtype=bool)
    ships: list[tuple[Coord, ...]] = []
    for row in range(grid.size):
        for col in range(grid.size):
            if grid.occupied[row, col] and not visited[row, col]:
                ships.append(_collect_component(grid, visited, Coord(row, col)))
    return ships


def inspect_layout(grid: Grid, expected_lengths: Sequence[int]) -> LayoutReport:
    """Check that occupied cells form straight ships matching the expected lengths.

    Scanning stops at the first ship that is neither a single row nor a
    single column. Lengths are compared as sorted sequences, so duplicate
    expected lengths must be matched by the same number of ships.
    """
    visited = np.zeros(grid.occupied.shape, dtype=bool)
    found: list[int] = []
    for row in range(grid.size):
        for col in range(grid.size):
            if not grid.occupied[row, col] or visited[row, col]:
                continue
            component = _collect_component(grid, visited, Coord(row, col))
            if not _is_straight(component):
                return LayoutReport(valid=False, ship_lengths=tuple(sorted(found)), bent_ship=component)
            found.append(len(component))

    found_sorted = tuple(sorted(found))
    return LayoutReport(valid=found_sorted == tuple(sorted(expected_lengths)), ship_lengths=found_sorted)


def validate_layout(grid: Grid, expected_lengths: Sequence[int]) -> bool:
    """Return whether the grid holds exactly the expected straight ships."""
    return inspect_layout(grid, expected_lengths).valid
