"""
Game session for Minesweeper.

Orchestrates the board lifecycle, flag counting, win/loss transitions,
pause-aware elapsed time and leaderboard submission on a win.
"""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, List, Optional

import numpy as np

from .board import Board, BoardConfig, Position
from .cell import COVERED_CODE
from .display import format_clock, format_counter
from .errors import ConfigError
from .leaderboard import Leaderboard, check_player_name
from .reveal import check_win, reveal

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Presentation Snapshot
# ============================================================================

@dataclass
class SessionView:
    """
    Everything the presentation layer needs to draw one frame.

    Attributes:
        status: Current game status.
        grid: (rows, columns) int8 display codes; all COVERED_CODE while
            paused.
        mines_remaining: Mine count minus flags placed; may be negative.
        counter: mines_remaining as counter text.
        elapsed_seconds: Elapsed play time net of pauses.
        clock: elapsed_seconds as MM:SS.
        paused: Whether the session is paused.
        debug_visible: Whether the debug mine overlay is on.
        debug_mines: Boolean mine mask when the overlay is on and the board
            is not covered, otherwise None.
        rank: 0-based leaderboard rank of this session's win, if any.
    """

    status: GameStatus
    grid: np.ndarray
    mines_remaining: int
    counter: str
    elapsed_seconds: int
    clock: str
    paused: bool
    debug_visible: bool
    debug_mines: Optional[np.ndarray] = None
    rank: Optional[int] = None


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    A single played game from setup to win or loss.

    The session exclusively owns its board. Cell operations take
    (column, row) and raise CellIndexError outside the board; gameplay
    edge cases (flagged or revealed cells, paused or finished games) are
    silent no-ops.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        player_name: str = "",
        leaderboard: Optional[Leaderboard] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the session and start the first game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            player_name: Name submitted to the leaderboard on a win; must
                not contain a comma or newline.
            leaderboard: Store that receives winning times, if any.
            clock: Monotonic time source in seconds.
            rng: Random generator for mine placement.
        """
        self.config = config or BoardConfig()
        self.player_name = player_name
        self.leaderboard = leaderboard
        self._clock = clock
        self._rng = rng if rng is not None else np.random.default_rng()
        self.board = Board(self.config)
        self.new_game()

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(self, config: Optional[BoardConfig] = None) -> None:
        """
        Start a fresh game, optionally with a new board configuration.

        Args:
            config: Replacement configuration; the current one is reused
                when omitted.
        """
        if config is not None and config != self.config:
            self.config = config
            self.board = Board(self.config)

        self.board.place_mines(self._rng)
        self.board.compute_adjacency()

        self.flag_count = 0
        self.status = GameStatus.IN_PROGRESS
        self.is_paused = False
        self.is_debug_visible = False
        self.start_time = self._clock()
        self.paused_duration = 0.0
        self.rank: Optional[int] = None
        self.final_seconds: Optional[int] = None
        self._pause_started: Optional[float] = None
        self._end_time: Optional[float] = None

        logger.info(
            "New game: %dx%d with %d mines",
            self.config.columns, self.config.rows, self.config.mine_count,
        )

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self.status != GameStatus.IN_PROGRESS

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        return self.config.mine_count - self.flag_count

    def _accepts_moves(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS and not self.is_paused

    @property
    def player_name(self) -> str:
        """Name submitted to the leaderboard on a win."""
        return self._player_name

    @player_name.setter
    def player_name(self, name: str) -> None:
        try:
            check_player_name(name)
        except ValueError as error:
            raise ConfigError(str(error)) from error
        self._player_name = name

    # ========================================================================
    # Player Actions
    # ========================================================================

    def toggle_flag(self, column: int, row: int) -> int:
        """
        Toggle the flag on a hidden cell.

        Returns:
            The mines-remaining counter after the toggle.
        """
        cell = self.board.cell(column, row)
        if not self._accepts_moves():
            return self.mines_remaining

        if cell.toggle_flag():
            self.flag_count += 1 if cell.is_flagged else -1
        return self.mines_remaining

    def reveal_at(self, column: int, row: int) -> List[Position]:
        """
        Reveal a cell, then resolve a loss or a win.

        Returns:
            Positions newly revealed by this action (before any end-of-game
            exposure of mines).
        """
        cell = self.board.cell(column, row)
        if not self._accepts_moves() or cell.is_flagged:
            return []

        revealed = reveal(self.board, column, row)
        if not revealed:
            return revealed

        if cell.is_mine:
            self._lose(column, row)
        elif check_win(self.board):
            self._win()
        return revealed

    def _lose(self, column: int, row: int) -> None:
        self.status = GameStatus.LOST
        self._end_time = self._clock()
        for position in self.board.mine_positions():
            self.board.cell(*position).expose()
        logger.info("Game lost on mine at (%d, %d)", column, row)

    def _win(self) -> None:
        self.status = GameStatus.WON
        self._end_time = self._clock()

        # Auto-flag every mine for the end-of-game display
        for position in self.board.mine_positions():
            self.board.cell(*position).is_flagged = True
        self.flag_count = self.config.mine_count

        self.final_seconds = self.elapsed_seconds()
        logger.info("Game won in %s", format_clock(self.final_seconds))

        if self.leaderboard is not None:
            self.rank = self.leaderboard.submit(self.final_seconds, self.player_name)

    def toggle_pause(self) -> bool:
        """
        Pause or resume an in-progress game.

        Returns:
            Whether the session is paused afterwards.
        """
        if self.status != GameStatus.IN_PROGRESS:
            return self.is_paused

        now = self._clock()
        if self.is_paused:
            self.paused_duration += now - self._pause_started
            self._pause_started = None
            self.is_paused = False
        else:
            self._pause_started = now
            self.is_paused = True
        logger.debug("Paused: %s", self.is_paused)
        return self.is_paused

    def toggle_debug(self) -> bool:
        """Toggle the debug mine overlay while the game is playable."""
        if self._accepts_moves():
            self.is_debug_visible = not self.is_debug_visible
        return self.is_debug_visible

    @contextmanager
    def suspended(self) -> Iterator[None]:
        """
        Pause a running game for the duration of the block.

        Used while another screen (such as the leaderboard) is shown. A game
        that was already paused or finished is left as it is.
        """
        should_pause = self._accepts_moves()
        if should_pause:
            self.toggle_pause()
        try:
            yield
        finally:
            if should_pause and self.is_paused:
                self.toggle_pause()

    # ========================================================================
    # Time and Views
    # ========================================================================

    def _effective_now(self) -> float:
        """Current time, frozen at game end or at the start of a pause."""
        if self._end_time is not None:
            return self._end_time
        if self._pause_started is not None:
            return self._pause_started
        return self._clock()

    def elapsed_seconds(self) -> int:
        """Whole seconds played, net of pauses."""
        elapsed = self._effective_now() - self.start_time - self.paused_duration
        return max(0, int(elapsed))

    def view(self) -> SessionView:
        """Snapshot of the session for the presentation layer."""
        if self.is_paused:
            grid = np.full(
                (self.config.rows, self.config.columns), COVERED_CODE, dtype=np.int8
            )
        else:
            grid = self.board.display_grid()

        debug_mines = None
        if self.is_debug_visible and not self.is_paused:
            debug_mines = self.board.mine_mask()

        elapsed = self.elapsed_seconds()
        return SessionView(
            status=self.status,
            grid=grid,
            mines_remaining=self.mines_remaining,
            counter=format_counter(self.mines_remaining),
            elapsed_seconds=elapsed,
            clock=format_clock(elapsed),
            paused=self.is_paused,
            debug_visible=self.is_debug_visible,
            debug_mines=debug_mines,
            rank=self.rank,
        )
