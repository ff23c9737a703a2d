"""
Configuration loading for Minesweeper.

The board configuration file holds three whitespace-separated integers:
columns, rows and mine count.
"""
import logging
from pathlib import Path
from typing import Union

from .board import BoardConfig
from .errors import ConfigError

logger = logging.getLogger(__name__)


# ============================================================================
# Default Locations
# ============================================================================

DEFAULT_CONFIG_PATH = Path("files/config.cfg")
DEFAULT_LEADERBOARD_PATH = Path("files/leaderboard.txt")


def parse_config(text: str) -> BoardConfig:
    """
    Parse configuration text into a validated BoardConfig.

    Raises:
        ConfigError: On a wrong token count, a non-integer token, or
            values BoardConfig rejects.
    """
    tokens = text.split()
    if len(tokens) != 3:
        raise ConfigError(
            f"Expected columns, rows and mine count, got {len(tokens)} values"
        )
    try:
        columns, rows, mine_count = (int(token) for token in tokens)
    except ValueError as error:
        raise ConfigError(f"Configuration values must be integers: {error}") from error
    return BoardConfig(columns=columns, rows=rows, mine_count=mine_count)


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> BoardConfig:
    """
    Load the board configuration file.

    Raises:
        ConfigError: If the file cannot be read or its contents are invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise ConfigError(f"Could not open {path}: {error}") from error

    config = parse_config(text)
    logger.debug(
        "Loaded %dx%d board with %d mines from %s",
        config.columns, config.rows, config.mine_count, path,
    )
    return config
