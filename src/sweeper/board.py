"""
Board module for Minesweeper game.

Implements the grid of cells, mine placement and adjacency counts.
Cells are addressed by (column, row); storage is a flat row-major list.
"""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, MINE
from .errors import CellIndexError, ConfigError


Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        columns: Number of columns.
        rows: Number of rows.
        mine_count: Total mines to place.
    """

    columns: int = 9
    rows: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.columns < 1 or self.rows < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.mine_count > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.columns * self.rows

    @property
    def safe_cells(self) -> int:
        """Number of cells that do not hold a mine."""
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, places mines and computes adjacency counts.
    Reveal and win logic live in the reveal module; game lifecycle lives
    in the session module.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._cells = [Cell() for _ in range(self.config.total_cells)]

    # ========================================================================
    # Addressing (Low-level)
    # ========================================================================

    def _index(self, column: int, row: int) -> int:
        """Convert (column, row) to flat row-major index."""
        return row * self.config.columns + column

    def _position(self, index: int) -> Position:
        """Convert flat row-major index to (column, row)."""
        return index % self.config.columns, index // self.config.columns

    def in_bounds(self, column: int, row: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= column < self.config.columns and 0 <= row < self.config.rows

    def _checked_index(self, column: int, row: int) -> int:
        if not self.in_bounds(column, row):
            raise CellIndexError(
                f"Cell ({column}, {row}) is outside a "
                f"{self.config.columns}x{self.config.rows} board"
            )
        return self._index(column, row)

    def neighbors(self, column: int, row: int) -> List[Position]:
        """
        Get valid neighboring cell positions (no wraparound).

        Args:
            column: Column index of center cell.
            row: Row index of center cell.

        Returns:
            List of (column, row) tuples for valid neighbors.
        """
        neighbors = []
        for delta_column in (-1, 0, 1):
            for delta_row in (-1, 0, 1):
                if delta_column == 0 and delta_row == 0:
                    continue
                new_column = column + delta_column
                new_row = row + delta_row
                if self.in_bounds(new_column, new_row):
                    neighbors.append((new_column, new_row))
        return neighbors

    # ========================================================================
    # Mine Placement (Mid-level)
    # ========================================================================

    def _clear(self) -> None:
        for cell in self._cells:
            cell.clear()

    def place_mines(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        Reset every cell and place mines uniformly at random.

        Draws indices in [0, total_cells) and skips ones that already hold
        a mine until exactly mine_count distinct mines are placed.

        Args:
            rng: Random generator (default: fresh unseeded generator).
        """
        if self.config.mine_count >= self.config.total_cells:
            raise ConfigError("Mine count must be below the number of cells")
        rng = rng if rng is not None else np.random.default_rng()

        self._clear()
        placed = 0
        while placed < self.config.mine_count:
            cell = self._cells[int(rng.integers(0, self.config.total_cells))]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def lay_mines(self, positions: Iterable[Position]) -> None:
        """
        Reset every cell and place mines at exactly the given positions.

        Args:
            positions: (column, row) positions of the mines.

        Raises:
            ValueError: If the distinct positions do not match mine_count.
        """
        indices = {self._checked_index(column, row) for column, row in positions}
        if len(indices) != self.config.mine_count:
            raise ValueError(
                f"Expected {self.config.mine_count} mine positions, "
                f"got {len(indices)}"
            )
        self._clear()
        for index in indices:
            self._cells[index].is_mine = True

    def compute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all cells; mines get MINE."""
        for index, cell in enumerate(self._cells):
            if cell.is_mine:
                cell.adjacent_mines = MINE
                continue
            column, row = self._position(index)
            cell.adjacent_mines = sum(
                1 for neighbor in self.neighbors(column, row)
                if self.cell(*neighbor).is_mine
            )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def cell(self, column: int, row: int) -> Cell:
        """Get cell at position; raises CellIndexError if out of range."""
        return self._cells[self._checked_index(column, row)]

    def positions(self) -> Iterator[Position]:
        """Iterate every (column, row) in row-major order."""
        for index in range(self.config.total_cells):
            yield self._position(index)

    def mine_positions(self) -> List[Position]:
        """Positions of every mine, row-major."""
        return [
            self._position(index)
            for index, cell in enumerate(self._cells)
            if cell.is_mine
        ]

    @property
    def total_cells(self) -> int:
        return self.config.total_cells

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(1 for cell in self._cells if cell.is_revealed)

    @property
    def flagged_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self._cells if cell.is_flagged)

    def display_grid(self) -> np.ndarray:
        """
        Get board state as a numpy array of display codes.

        Returns:
            Array of shape (rows, columns) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        codes = [cell.to_code() for cell in self._cells]
        return np.array(codes, dtype=np.int8).reshape(
            self.config.rows, self.config.columns
        )

    def mine_mask(self) -> np.ndarray:
        """Boolean (rows, columns) array marking mines, for debug overlays."""
        mines = [cell.is_mine for cell in self._cells]
        return np.array(mines, dtype=bool).reshape(
            self.config.rows, self.config.columns
        )
