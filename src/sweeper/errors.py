"""
Exception types raised by the Minesweeper core.
"""


class ConfigError(ValueError):
    """Board configuration is invalid or could not be loaded."""


class CellIndexError(IndexError):
    """A cell operation was dispatched outside the board."""
