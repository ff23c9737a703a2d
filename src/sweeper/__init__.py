"""
Minesweeper game core.

Provides the board model, cascading reveal, game sessions with
pause-aware timing, and the persistent leaderboard.
"""
from .errors import CellIndexError, ConfigError
from .cell import Cell, CellState
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .reveal import reveal, check_win
from .display import format_clock, parse_clock, format_counter
from .leaderboard import (
    Leaderboard,
    LeaderboardEntry,
    Standing,
    check_player_name,
    normalize_player_name,
)
from .session import GameSession, GameStatus, SessionView
from .config import load_config, parse_config
from .environment import MinesweeperEnv

__all__ = [
    "CellIndexError",
    "ConfigError",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "reveal",
    "check_win",
    "format_clock",
    "parse_clock",
    "format_counter",
    "Leaderboard",
    "LeaderboardEntry",
    "Standing",
    "check_player_name",
    "normalize_player_name",
    "GameSession",
    "GameStatus",
    "SessionView",
    "load_config",
    "parse_config",
    "MinesweeperEnv",
]
