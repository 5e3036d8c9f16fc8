"""Game configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from battlegrid.game.core.models import (
    BOARD_SIZE,
    DEFAULT_OPPONENT_SHIPS,
    DEFAULT_SCRIPTED_DAMAGE,
    DEFAULT_SHIP_LENGTHS,
    Coord,
    GameConfig,
    Orientation,
    ShipSpec,
    cells_for_spec,
)

_ORIENTATION_CODES = {
    "H": Orientation.HORIZONTAL,
    "HORIZONTAL": Orientation.HORIZONTAL,
    "V": Orientation.VERTICAL,
    "VERTICAL": Orientation.VERTICAL,
}


class ConfigError(ValueError):
    """Raised when game configuration values are malformed."""


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    Default order:
    1) appdata/config/.env
    2) appdata/config/.env.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config() -> GameConfig:
    """Build the session configuration from BATTLEGRID_* env vars."""
    board_size = _int_env("BATTLEGRID_BOARD_SIZE", BOARD_SIZE)
    if board_size <= 0:
        raise ConfigError(f"BATTLEGRID_BOARD_SIZE must be positive, got {board_size}.")

    raw_lengths = os.getenv("BATTLEGRID_SHIP_LENGTHS")
    ship_lengths = DEFAULT_SHIP_LENGTHS if raw_lengths is None else parse_ship_lengths(raw_lengths)

    raw_ships = os.getenv("BATTLEGRID_OPPONENT_SHIPS")
    opponent_ships = DEFAULT_OPPONENT_SHIPS if raw_ships is None else parse_ship_specs(raw_ships)

    raw_damage = os.getenv("BATTLEGRID_SCRIPTED_DAMAGE")
    scripted_damage = DEFAULT_SCRIPTED_DAMAGE if raw_damage is None else parse_coords(raw_damage)

    config = GameConfig(
        board_size=board_size,
        ship_lengths=ship_lengths,
        opponent_ships=opponent_ships,
        scripted_damage=scripted_damage,
    )
    check_game_config(config)
    return config


def check_game_config(config: GameConfig) -> None:
    """Reject opponent ships or damage coordinates that do not fit the board."""
    size = config.board_size
    if size <= 0:
        raise ConfigError(f"Board size must be positive, got {size}.")
    occupied: set[Coord] = set()
    for spec in config.opponent_ships:
        for cell in cells_for_spec(spec):
            if not (0 <= cell.row < size and 0 <= cell.col < size):
                raise ConfigError(f"Opponent ship {spec} does not fit a {size}x{size} board.")
            if cell in occupied:
                raise ConfigError(f"Opponent ship {spec} overlaps another ship.")
            occupied.add(cell)
    for coord in config.scripted_damage:
        if not (0 <= coord.row < size and 0 <= coord.col < size):
            raise ConfigError(f"Scripted damage ({coord.row}, {coord.col}) is off the board.")


def parse_ship_lengths(raw: str) -> tuple[int, ...]:
    """Parse a comma-separated list of positive ship lengths."""
    lengths: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        length = _to_int(part, "ship length")
        if length <= 0:
            raise ConfigError(f"Ship lengths must be positive, got {length}.")
        lengths.append(length)
    return tuple(lengths)


def parse_ship_specs(raw: str) -> tuple[ShipSpec, ...]:
    """Parse ``row:col:H|V:length`` entries separated by semicolons."""
    specs: list[ShipSpec] = []
    for entry in _entries(raw):
        parts = [part.strip() for part in entry.split(":")]
        if len(parts) != 4:
            raise ConfigError(f"Malformed opponent ship entry '{entry}'.")
        orientation = _ORIENTATION_CODES.get(parts[2].upper())
        if orientation is None:
            raise ConfigError(f"Unknown orientation '{parts[2]}' in '{entry}'.")
        length = _to_int(parts[3], "ship length")
        if length <= 0:
            raise ConfigError(f"Ship length must be positive in '{entry}'.")
        specs.append(
            ShipSpec(
                start_row=_to_int(parts[0], "row"),
                start_col=_to_int(parts[1], "col"),
                orientation=orientation,
                length=length,
            )
        )
    return tuple(specs)


def parse_coords(raw: str) -> tuple[Coord, ...]:
    """Parse ``row:col`` entries separated by semicolons."""
    coords: list[Coord] = []
    for entry in _entries(raw):
        parts = [part.strip() for part in entry.split(":")]
        if len(parts) != 2:
            raise ConfigError(f"Malformed coordinate entry '{entry}'.")
        coords.append(Coord(row=_to_int(parts[0], "row"), col=_to_int(parts[1], "col")))
    return tuple(coords)


def _entries(raw: str) -> list[str]:
    return [entry.strip() for entry in raw.split(";") if entry.strip()]


def _to_int(raw: str, label: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid {label} '{raw}'.") from exc


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return _to_int(raw.strip(), name)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
