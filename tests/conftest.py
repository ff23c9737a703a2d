"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

# Add src and the project root (for main.py) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

from sweeper import Board, BoardConfig, Cell, GameSession, Leaderboard


# ============================================================================
# Clock
# ============================================================================

class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen until advanced."""
    return FakeClock()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible layouts."""
    return np.random.default_rng(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

def build_board(
    config: BoardConfig, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Board with mines at fixed (column, row) positions."""
    board = Board(config)
    board.lay_mines(mines)
    board.compute_adjacency()
    return board


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory for boards with fixed mines."""
    return build_board


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return build_board(BoardConfig(3, 3, 1), [(2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return build_board(BoardConfig(5, 5, 5), [(2, row) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines for cascade testing."""
    return build_board(BoardConfig(5, 5, 0), [])


# ============================================================================
# Session Fixtures
# ============================================================================

SessionFactory = Callable[..., GameSession]


@pytest.fixture
def make_session(clock: FakeClock) -> SessionFactory:
    """Factory for sessions with fixed mines and the fake clock."""

    def factory(
        config: BoardConfig,
        mines: Iterable[Tuple[int, int]],
        leaderboard: Optional[Leaderboard] = None,
        player_name: str = "Tester",
    ) -> GameSession:
        session = GameSession(
            config,
            player_name=player_name,
            leaderboard=leaderboard,
            clock=clock,
        )
        session.board.lay_mines(mines)
        session.board.compute_adjacency()
        return session

    return factory


@pytest.fixture
def leaderboard(tmp_path: Path) -> Leaderboard:
    """Leaderboard backed by a file that does not exist yet."""
    return Leaderboard(tmp_path / "files" / "leaderboard.txt")


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True, adjacent_mines=-1)
