"""Application service-layer helpers."""

from battlegrid.game.app.services.messages import (
    BATTLE_STARTED,
    OPPONENT_DEFEATED,
    attack_result,
    invalid_placement,
    placement_prompt,
)
from battlegrid.game.app.services.state_projection import build_ui_state, masked_opponent_cells

__all__ = [
    "BATTLE_STARTED",
    "OPPONENT_DEFEATED",
    "attack_result",
    "build_ui_state",
    "invalid_placement",
    "masked_opponent_cells",
    "placement_prompt",
]
