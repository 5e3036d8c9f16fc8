import numpy as np
import pytest

from battlegrid.game.core.board import apply_damage, create_empty, stamp_ships, toggle_occupied
from battlegrid.game.core.errors import OutOfBoundsError
from battlegrid.game.core.models import Cell, Coord, Orientation, ShipSpec


def test_create_empty_has_no_ships_or_hits() -> None:
    grid = create_empty(10)
    assert grid.size == 10
    assert grid.occupied_count() == 0
    assert not grid.hit.any()
    assert all(cell == Cell() for row in grid.rows() for cell in row)


def test_create_empty_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        create_empty(0)


def test_grid_layers_are_read_only() -> None:
    grid = create_empty(4)
    with pytest.raises(ValueError):
        grid.occupied[0, 0] = True


def test_stamp_ships_horizontal_and_vertical() -> None:
    grid = stamp_ships(
        create_empty(10),
        [
            ShipSpec(2, 3, Orientation.HORIZONTAL, 3),
            ShipSpec(6, 7, Orientation.VERTICAL, 3),
        ],
    )
    occupied = {(int(r), int(c)) for r, c in np.argwhere(grid.occupied)}
    assert occupied == {(2, 3), (2, 4), (2, 5), (6, 7), (7, 7), (8, 7)}
    assert not grid.hit.any()


def test_toggle_occupied_is_copy_on_write() -> None:
    original = create_empty(10)
    toggled = toggle_occupied(original, 3, 4)

    assert toggled.cell(3, 4).occupied
    assert not original.cell(3, 4).occupied
    assert toggle_occupied(toggled, 3, 4) == original


def test_toggle_occupied_keeps_hit_flag() -> None:
    grid = apply_damage(toggle_occupied(create_empty(10), 1, 1), [Coord(1, 1)])
    cleared = toggle_occupied(grid, 1, 1)
    assert cleared.cell(1, 1) == Cell(occupied=False, hit=True)


def test_toggle_occupied_rejects_out_of_bounds() -> None:
    grid = create_empty(10)
    with pytest.raises(OutOfBoundsError):
        toggle_occupied(grid, -1, 0)
    with pytest.raises(OutOfBoundsError):
        toggle_occupied(grid, 0, 10)


def test_apply_damage_only_marks_occupied_cells() -> None:
    grid = toggle_occupied(create_empty(10), 2, 4)
    damaged = apply_damage(grid, [Coord(2, 4), Coord(7, 7)])

    assert damaged.cell(2, 4) == Cell(occupied=True, hit=True)
    assert damaged.cell(7, 7) == Cell(occupied=False, hit=False)
    assert np.array_equal(damaged.occupied, grid.occupied)


def test_all_ships_sunk_requires_ships() -> None:
    empty = create_empty(10)
    assert not empty.all_ships_sunk()

    grid = stamp_ships(empty, [ShipSpec(0, 0, Orientation.HORIZONTAL, 2)])
    assert not grid.all_ships_sunk()
    assert apply_damage(grid, [Coord(0, 0), Coord(0, 1)]).all_ships_sunk()


def test_grid_equality_compares_both_layers() -> None:
    a = toggle_occupied(create_empty(5), 0, 0)
    b = toggle_occupied(create_empty(5), 0, 0)
    assert a == b
    assert a != apply_damage(a, [Coord(0, 0)])
    assert a != create_empty(6)
