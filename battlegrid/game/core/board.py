"""Grid state representation and copy-on-write mutation helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from battlegrid.game.core.errors import OutOfBoundsError
from battlegrid.game.core.models import BOARD_SIZE, Cell, Coord, ShipSpec, cells_for_spec


@dataclass(frozen=True, slots=True, eq=False)
class Grid:
    """Numpy-backed immutable grid of occupancy and hit flags.

    Both arrays are private read-only copies, so a grid value can be shared
    freely. Every mutation helper in this module returns a new grid.
    """

    occupied: np.ndarray
    hit: np.ndarray

    def __post_init__(self) -> None:
        occupied = np.array(self.occupied, dtype=bool)
        hit = np.array(self.hit, dtype=bool)
        if occupied.ndim != 2 or occupied.shape[0] != occupied.shape[1]:
            raise ValueError(f"Grid must be square, got shape {occupied.shape}.")
        if hit.shape != occupied.shape:
            raise ValueError("Occupied and hit layers must have the same shape.")
        occupied.setflags(write=False)
        hit.setflags(write=False)
        object.__setattr__(self, "occupied", occupied)
        object.__setattr__(self, "hit", hit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(
            np.array_equal(self.occupied, other.occupied) and np.array_equal(self.hit, other.hit)
        )

    @property
    def size(self) -> int:
        return int(self.occupied.shape[0])

    def in_bounds(self, row: int, col: int) -> bool:
        """Return whether the coordinate is in grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def require_in_bounds(self, row: int, col: int) -> None:
        """Raise OutOfBoundsError unless the coordinate is on the grid."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.size)

    def cell(self, row: int, col: int) -> Cell:
        """Return the flags of one cell."""
        self.require_in_bounds(row, col)
        return Cell(occupied=bool(self.occupied[row, col]), hit=bool(self.hit[row, col]))

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Return all cells, row-major."""
        return tuple(
            tuple(
                Cell(occupied=bool(occupied), hit=bool(hit))
                for occupied, hit in zip(occupied_row, hit_row)
            )
            for occupied_row, hit_row in zip(self.occupied, self.hit)
        )

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.occupied))

    def all_ships_sunk(self) -> bool:
        """Return whether the grid has ships and every ship cell was hit."""
        return bool(self.occupied.any() and not (self.occupied & ~self.hit).any())


def create_empty(size: int = BOARD_SIZE) -> Grid:
    """Create a size x size grid with no ships and no hits."""
    if size <= 0:
        raise ValueError(f"Grid size must be positive, got {size}.")
    return Grid(
        occupied=np.zeros((size, size), dtype=bool),
        hit=np.zeros((size, size), dtype=bool),
    )


def stamp_ships(grid: Grid, specs: Iterable[ShipSpec]) -> Grid:
    """Mark the cells of each ship spec as occupied.

    Specs are trusted: bounds and overlaps are checked when configuration
    is loaded, not here.
    """
    occupied = grid.occupied.copy()
    for spec in specs:
        for cell in cells_for_spec(spec):
            occupied[cell.row, cell.col] = True
    return Grid(occupied=occupied, hit=grid.hit)


def toggle_occupied(grid: Grid, row: int, col: int) -> Grid:
    """Flip the occupied flag of one cell."""
    grid.require_in_bounds(row, col)
    occupied = grid.occupied.copy()
    occupied[row, col] = not occupied[row, col]
    return Grid(occupied=occupied, hit=grid.hit)


def apply_damage(grid: Grid, coords: Iterable[Coord]) -> Grid:
    """Mark listed coordinates as hit where a ship is present."""
    hit = grid.hit.copy()
    for coord in coords:
        grid.require_in_bounds(coord.row, coord.col)
        if grid.occupied[coord.row, coord.col]:
            hit[coord.row, coord.col] = True
    return Grid(occupied=grid.occupied, hit=hit)
