"""Battlegrid app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("BATTLEGRID_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_project_root() / candidate
    return resolve_project_root() / "appdata"


def resolve_project_root() -> Path:
    """Resolve the directory holding the battlegrid package."""
    return Path(__file__).resolve().parents[3]


def resolve_logs_dir() -> Path:
    """Resolve logs directory, honoring BATTLEGRID_LOG_DIR."""
    configured = os.getenv("BATTLEGRID_LOG_DIR", "").strip()
    if not configured:
        return resolve_app_data_root() / "logs"
    candidate = Path(configured)
    if candidate.is_absolute():
        return candidate
    return resolve_app_data_root() / candidate
