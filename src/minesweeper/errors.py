"""
Exceptions raised by the Minesweeper engine.

Each error also derives from the matching builtin so callers can catch
``ValueError`` or ``IndexError`` directly.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidBoardError(MinesweeperError, ValueError):
    """Board dimensions or mine count are not valid."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A row/col pair falls outside the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"invalid row and col pair ({row}, {col}) "
            f"for {height}x{width} board"
        )
        self.row = row
        self.col = col


class FlaggedCellError(MinesweeperError, ValueError):
    """A flagged cell was revealed without removing the flag first."""


class RevealedCellError(MinesweeperError, ValueError):
    """A revealed cell was flagged."""


class NotANumberError(MinesweeperError, ValueError):
    """The number of a mine cell was requested."""
