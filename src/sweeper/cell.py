"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their bookkeeping
(mine/flag/reveal flags) and the display state derived from it.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = -1

HIDDEN_CODE = -1
FLAGGED_CODE = -2
COVERED_CODE = -3
MINE_CODE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8),
            or MINE (-1) for a mine cell.
        is_flagged: Whether the player has flagged this cell.
        is_revealed: Whether this cell has been revealed.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    is_flagged: bool = False
    is_revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def expose(self) -> None:
        """Mark revealed regardless of flag, for end-of-game display."""
        self.is_revealed = True

    def clear(self) -> None:
        """Return the cell to an empty, hidden, unflagged state."""
        self.is_mine = False
        self.adjacent_mines = 0
        self.is_flagged = False
        self.is_revealed = False

    @property
    def state(self) -> CellState:
        """Display state; a revealed cell shows as revealed even if flagged."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    def to_code(self) -> int:
        """
        Convert cell to its display code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        state = self.state
        if state == CellState.HIDDEN:
            return HIDDEN_CODE
        if state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.is_mine:
            return MINE_CODE
        return self.adjacent_mines
