"""
Minesweeper rules engine.

Provides the board, its cells, and a per-game session context for
front ends.
"""
from .cell import BLANK, MINE, Blank, Cell, CellState, CellValue, Mine, Number
from .coordinate import Coordinate
from .board import (
    Board,
    BoardConfig,
    GameState,
    RevealResult,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .errors import (
    MinesweeperError,
    InvalidBoardError,
    OutOfBoundsError,
    FlaggedCellError,
    RevealedCellError,
    NotANumberError,
)
from .session import GameSession

__all__ = [
    "Cell",
    "CellState",
    "CellValue",
    "Mine",
    "Blank",
    "Number",
    "MINE",
    "BLANK",
    "Coordinate",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinesweeperError",
    "InvalidBoardError",
    "OutOfBoundsError",
    "FlaggedCellError",
    "RevealedCellError",
    "NotANumberError",
    "GameSession",
]
