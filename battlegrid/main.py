"""Engine bootstrap for presentation layers."""

import logging

from battlegrid.game.app.controller import GameController
from battlegrid.game.infra.app_data import resolve_app_data_root
from battlegrid.game.infra.config import load_default_env_files
from battlegrid.game.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def create_game() -> GameController:
    """Load env files, configure logging and return a fresh controller."""
    load_default_env_files()
    setup_logging()
    logger.info("app_data_root=%s", resolve_app_data_root())
    return GameController.from_env()
