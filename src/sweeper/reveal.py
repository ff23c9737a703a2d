"""
Reveal engine for Minesweeper.

Cascading reveal over zero-adjacency regions and the win check.
"""
from typing import List

from .board import Board, Position


def reveal(board: Board, column: int, row: int) -> List[Position]:
    """
    Reveal a cell and cascade across empty neighbors.

    A revealed or flagged target is left alone. A cell with zero adjacent
    mines expands to every non-mine neighbor, so the fill stops at the
    numbered cells bordering the empty region. Mines are only revealed
    when they are the target itself.

    Args:
        board: Board to mutate.
        column: Column of the target cell.
        row: Row of the target cell.

    Returns:
        Positions newly revealed, in visiting order.
    """
    revealed = []
    stack = [(column, row)]
    while stack:
        position = stack.pop()
        cell = board.cell(*position)
        if not cell.reveal():
            continue
        revealed.append(position)

        if cell.adjacent_mines != 0:
            continue
        for neighbor in reversed(board.neighbors(*position)):
            if not board.cell(*neighbor).is_mine:
                stack.append(neighbor)

    return revealed


def check_win(board: Board) -> bool:
    """Check if every non-mine cell is revealed; flags are ignored."""
    return board.revealed_count == board.config.safe_cells
