"""Status text shown to the player.

Coordinates in messages are 1-based.
"""

from __future__ import annotations

from collections.abc import Sequence

from battlegrid.game.core.layout import LayoutReport
from battlegrid.game.core.models import AttackOutcome, Coord

BATTLE_STARTED = "Battle started. Click the enemy board to fire."
OPPONENT_DEFEATED = "All enemy ships sunk."


def _join_lengths(lengths: Sequence[int]) -> str:
    values = [str(length) for length in lengths]
    if len(values) <= 1:
        return "".join(values)
    return ", ".join(values[:-1]) + " and " + values[-1]


def _ship_count(lengths: Sequence[int]) -> str:
    return f"{len(lengths)} ship" if len(lengths) == 1 else f"{len(lengths)} ships"


def placement_prompt(expected_lengths: Sequence[int]) -> str:
    """Instructions for the placement phase."""
    return (
        f"Place exactly {_ship_count(expected_lengths)}: lengths {_join_lengths(expected_lengths)}. "
        "Click cells to toggle."
    )


def invalid_placement(expected_lengths: Sequence[int], report: LayoutReport) -> str:
    """Rejection text for a layout that failed validation."""
    message = (
        f"Invalid ship placement. Place exactly {_ship_count(expected_lengths)} "
        f"of lengths: {_join_lengths(expected_lengths)}."
    )
    if report.bent_ship:
        first = report.bent_ship[0]
        message += f" Ship at ({first.row + 1}, {first.col + 1}) is not a straight line."
    return message


def attack_result(coord: Coord, outcome: AttackOutcome) -> str:
    where = f"({coord.row + 1}, {coord.col + 1})"
    if outcome is AttackOutcome.HIT:
        return f"Hit at {where}"
    if outcome is AttackOutcome.MISS:
        return f"Miss at {where}"
    return f"Already fired at {where}"
