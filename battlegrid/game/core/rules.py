"""Phase rules and session state transitions."""

from __future__ import annotations

from dataclasses import dataclass

from battlegrid.game.core.board import Grid, apply_damage, create_empty, stamp_ships, toggle_occupied
from battlegrid.game.core.errors import PhaseError
from battlegrid.game.core.layout import LayoutReport, inspect_layout
from battlegrid.game.core.models import AttackOutcome, GameConfig, Phase
from battlegrid.game.core.shot_resolution import attack


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    player_grid: Grid
    opponent_grid: Grid
    phase: Phase = Phase.PLACEMENT


def create_session(config: GameConfig) -> GameSession:
    """Create a session with an empty player grid and a stamped opponent grid."""
    opponent_grid = stamp_ships(create_empty(config.board_size), config.opponent_ships)
    return GameSession(
        player_grid=create_empty(config.board_size),
        opponent_grid=opponent_grid,
        phase=Phase.PLACEMENT,
    )


def _require_phase(session: GameSession, phase: Phase, operation: str) -> None:
    if session.phase is not phase:
        raise PhaseError(operation, session.phase.value)


def toggle_placement(session: GameSession, row: int, col: int) -> None:
    """Toggle a ship cell on the player grid during placement."""
    _require_phase(session, Phase.PLACEMENT, "toggle_placement")
    session.player_grid = toggle_occupied(session.player_grid, row, col)


def start_battle(session: GameSession, config: GameConfig) -> LayoutReport:
    """Validate the player layout and, when valid, enter the battle phase.

    A rejected layout leaves the session untouched. On success the scripted
    damage is applied to the player grid before the phase flips.
    """
    _require_phase(session, Phase.PLACEMENT, "start_battle")
    report = inspect_layout(session.player_grid, config.ship_lengths)
    if not report.valid:
        return report
    session.player_grid = apply_damage(session.player_grid, config.scripted_damage)
    session.phase = Phase.BATTLE
    return report


def player_fire(session: GameSession, row: int, col: int) -> AttackOutcome:
    """Resolve a player attack against the opponent grid."""
    _require_phase(session, Phase.BATTLE, "attack_opponent")
    session.opponent_grid, outcome = attack(session.opponent_grid, row, col)
    return outcome
