from __future__ import annotations

from collections.abc import Iterable

import pytest

from battlegrid.game.app.controller import GameController
from battlegrid.game.core.board import Grid, create_empty, toggle_occupied
from battlegrid.game.core.models import Coord, GameConfig, Orientation, ShipSpec

# Row 2 cols 3-5 (length 3) and col 7 rows 6-9 (length 4).
VALID_LAYOUT: tuple[tuple[int, int], ...] = (
    (2, 3),
    (2, 4),
    (2, 5),
    (6, 7),
    (7, 7),
    (8, 7),
    (9, 7),
)


def _make_grid(cells: Iterable[tuple[int, int]], size: int = 10) -> Grid:
    grid = create_empty(size)
    for row, col in cells:
        grid = toggle_occupied(grid, row, col)
    return grid


@pytest.fixture
def game_config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def single_ship_config() -> GameConfig:
    return GameConfig(
        board_size=10,
        ship_lengths=(3, 4),
        opponent_ships=(ShipSpec(2, 3, Orientation.HORIZONTAL, 3),),
        scripted_damage=(Coord(2, 4), Coord(7, 7)),
    )


@pytest.fixture
def controller_factory():
    def _make(config: GameConfig | None = None) -> GameController:
        return GameController(config)

    return _make


@pytest.fixture
def placed_controller(controller_factory) -> GameController:
    controller = controller_factory()
    for row, col in VALID_LAYOUT:
        controller.toggle_placement(row, col)
    return controller


@pytest.fixture
def grid_from_cells():
    return _make_grid


@pytest.fixture
def valid_layout() -> tuple[tuple[int, int], ...]:
    return VALID_LAYOUT
