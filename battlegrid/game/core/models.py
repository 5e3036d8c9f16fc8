"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class Phase(StrEnum):
    """Session lifecycle stage."""

    PLACEMENT = "PLACEMENT"
    BATTLE = "BATTLE"


class AttackOutcome(StrEnum):
    """Result of a single attack."""

    HIT = "HIT"
    MISS = "MISS"
    ALREADY_ATTACKED = "ALREADY_ATTACKED"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Cell:
    """Single grid cell state."""

    occupied: bool = False
    hit: bool = False


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Fixed opponent ship stamped at grid construction."""

    start_row: int
    start_col: int
    orientation: Orientation
    length: int


DEFAULT_SHIP_LENGTHS: tuple[int, ...] = (3, 4)

DEFAULT_OPPONENT_SHIPS: tuple[ShipSpec, ...] = (
    ShipSpec(2, 3, Orientation.HORIZONTAL, 3),
    ShipSpec(6, 7, Orientation.VERTICAL, 3),
)

DEFAULT_SCRIPTED_DAMAGE: tuple[Coord, ...] = (
    Coord(2, 4),
    Coord(7, 7),
)


def cells_for_spec(spec: ShipSpec) -> list[Coord]:
    """Compute occupied cells for a ship spec."""
    result: list[Coord] = []
    for i in range(spec.length):
        if spec.orientation is Orientation.HORIZONTAL:
            result.append(Coord(spec.start_row, spec.start_col + i))
        else:
            result.append(Coord(spec.start_row + i, spec.start_col))
    return result


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Fixed parameters of one game session."""

    board_size: int = BOARD_SIZE
    ship_lengths: tuple[int, ...] = DEFAULT_SHIP_LENGTHS
    opponent_ships: tuple[ShipSpec, ...] = DEFAULT_OPPONENT_SHIPS
    scripted_damage: tuple[Coord, ...] = DEFAULT_SCRIPTED_DAMAGE
