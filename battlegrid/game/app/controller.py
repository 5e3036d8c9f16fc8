"""Application controller owning one game session."""

from __future__ import annotations

import logging

from battlegrid.game.app.services.messages import (
    BATTLE_STARTED,
    OPPONENT_DEFEATED,
    attack_result,
    invalid_placement,
    placement_prompt,
)
from battlegrid.game.app.services.state_projection import build_ui_state, masked_opponent_cells
from battlegrid.game.app.ui_state import CellRows, GameUIState, StartBattleResult, ValidationError
from battlegrid.game.core.board import Grid
from battlegrid.game.core.errors import GameRuleError
from battlegrid.game.core.models import AttackOutcome, Coord, GameConfig, Phase
from battlegrid.game.core.rules import create_session, player_fire, start_battle, toggle_placement
from battlegrid.game.infra.config import check_game_config, load_game_config

logger = logging.getLogger(__name__)


class GameController:
    """Handles presentation requests and owns the session state.

    Calls that do not fit the current phase, or that target a cell outside
    the grid, raise a GameRuleError and leave the session unchanged.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        check_game_config(self._config)
        self._session = create_session(self._config)
        self._status = ""
        self._history: list[str] = []
        self._defeat_announced = False
        self._set_status(placement_prompt(self._config.ship_lengths))
        logger.info(
            "session_created size=%d ship_lengths=%s opponent_ships=%d",
            self._config.board_size,
            list(self._config.ship_lengths),
            len(self._config.opponent_ships),
        )

    @classmethod
    def from_env(cls) -> GameController:
        """Create a controller configured from BATTLEGRID_* env vars."""
        return cls(load_game_config())

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def phase(self) -> Phase:
        return self._session.phase

    @property
    def status(self) -> str:
        return self._status

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def player_grid(self) -> Grid:
        return self._session.player_grid

    def opponent_view(self) -> CellRows:
        """Return opponent cells with unattacked ships hidden."""
        return masked_opponent_cells(self._session.opponent_grid)

    def ui_state(self) -> GameUIState:
        """Return current view-ready state."""
        return build_ui_state(
            session=self._session,
            status=self._status,
            expected_lengths=self._config.ship_lengths,
        )

    def toggle_placement(self, row: int, col: int) -> None:
        """Toggle a ship cell on the player's grid."""
        try:
            toggle_placement(self._session, row, col)
        except GameRuleError as exc:
            logger.warning("toggle_placement_rejected row=%d col=%d reason=%s", row, col, exc)
            raise
        logger.debug(
            "placement_toggled row=%d col=%d occupied=%s",
            row,
            col,
            self._session.player_grid.cell(row, col).occupied,
        )

    def start_battle(self) -> StartBattleResult:
        """Validate the player's ships and move to battle when they are correct."""
        try:
            report = start_battle(self._session, self._config)
        except GameRuleError as exc:
            logger.warning("start_battle_rejected reason=%s", exc)
            raise

        if not report.valid:
            message = invalid_placement(self._config.ship_lengths, report)
            self._set_status(message)
            logger.info(
                "placement_invalid found=%s expected=%s bent=%s",
                list(report.ship_lengths),
                list(self._config.ship_lengths),
                report.bent_ship is not None,
            )
            return StartBattleResult(
                success=False,
                status=message,
                error=ValidationError(
                    message=message,
                    expected_lengths=tuple(self._config.ship_lengths),
                    found_lengths=report.ship_lengths,
                ),
            )

        self._set_status(BATTLE_STARTED)
        logger.info("phase=%s ship_lengths=%s", self._session.phase.name, list(report.ship_lengths))
        return StartBattleResult(success=True, status=BATTLE_STARTED)

    def attack_opponent(self, row: int, col: int) -> AttackOutcome:
        """Fire at the opponent grid and return the outcome."""
        try:
            outcome = player_fire(self._session, row, col)
        except GameRuleError as exc:
            logger.warning("attack_rejected row=%d col=%d reason=%s", row, col, exc)
            raise

        # Repeats only refresh the status line; history keeps the first report.
        self._set_status(
            attack_result(Coord(row, col), outcome),
            record=outcome is not AttackOutcome.ALREADY_ATTACKED,
        )
        logger.debug("attack row=%d col=%d outcome=%s", row, col, outcome.name)
        if (
            outcome is AttackOutcome.HIT
            and not self._defeat_announced
            and self._session.opponent_grid.all_ships_sunk()
        ):
            self._defeat_announced = True
            self._set_status(OPPONENT_DEFEATED)
            logger.info("opponent_defeated")
        return outcome

    def _set_status(self, status: str, *, record: bool = True) -> None:
        self._status = status
        if record:
            self._history.append(status)
