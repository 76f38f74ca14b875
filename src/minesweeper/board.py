"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counts,
flagging, revealing with flood fill, and win detection.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import MINE, Cell, CellValue, value_for_count
from .coordinate import Coordinate, in_bounds, neighbors
from .errors import (
    FlaggedCellError,
    InvalidBoardError,
    OutOfBoundsError,
    RevealedCellError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """Outcome of a single reveal."""

    CONTINUE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 0 or self.height < 0:
            raise InvalidBoardError("width and height must be non-negative")
        if self.num_mines < 0:
            raise InvalidBoardError("Number of mines cannot be negative")
        if self.num_mines > self.cell_count:
            raise InvalidBoardError(
                f"Too many mines (max {self.cell_count})"
            )

    @property
    def cell_count(self) -> int:
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Mines are placed and numbers derived once,
    at construction; afterwards only flag and reveal state change.
    There is no reset: start a new round with a new Board.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mine_count: int,
        *,
        seed: Optional[int] = None,
        mines: Optional[Iterable[Tuple[int, int]]] = None,
    ) -> None:
        """
        Build a board and place its mines.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Total mines to place.
            seed: Seed for random mine placement.
            mines: Explicit (row, col) mine positions instead of random
                placement. Must hold exactly mine_count distinct cells.

        Raises:
            InvalidBoardError: If dimensions or mine count are invalid.
        """
        self.config = BoardConfig(width, height, mine_count)
        self._flag_count = 0

        if mines is None:
            mine_positions = self._random_mine_positions(random.Random(seed))
        else:
            mine_positions = self._explicit_mine_positions(mines)

        self._grid = self._build_grid(mine_positions)
        logger.debug(
            "Placed %d mines on %dx%d board", mine_count, width, height
        )

    @classmethod
    def from_config(
        cls, config: BoardConfig, seed: Optional[int] = None
    ) -> "Board":
        """Build a randomly mined board from a configuration."""
        return cls(config.width, config.height, config.num_mines, seed=seed)

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Tuple[int, int]]
    ) -> "Board":
        """Build a board with mines at the given positions."""
        positions = list(mines)
        return cls(width, height, len(positions), mines=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _all_positions(self) -> List[Coordinate]:
        """Get every position on the board in row-major order."""
        return [
            Coordinate(row, col)
            for row in range(self.height)
            for col in range(self.width)
        ]

    def _random_mine_positions(self, rng: random.Random) -> List[Coordinate]:
        """Sample mine_count distinct positions without replacement."""
        remaining = self._all_positions()
        placed = []
        while len(placed) < self.mine_count:
            index = rng.randrange(len(remaining))
            placed.append(remaining.pop(index))
        return placed

    def _explicit_mine_positions(
        self, mines: Iterable[Tuple[int, int]]
    ) -> List[Coordinate]:
        """Validate caller-supplied mine positions."""
        positions = [Coordinate(row, col) for row, col in mines]
        for coord in positions:
            if not in_bounds(coord.row, coord.col, self.height, self.width):
                raise InvalidBoardError(f"mine {coord} is off the board")
        if len(set(positions)) != len(positions):
            raise InvalidBoardError("mine positions must be distinct")
        if len(positions) != self.mine_count:
            raise InvalidBoardError(
                f"expected {self.mine_count} mines, got {len(positions)}"
            )
        return positions

    def _build_grid(
        self, mine_positions: List[Coordinate]
    ) -> List[List[Cell]]:
        """Create the cell grid with final values."""
        mine_set = set(mine_positions)
        grid = []
        for row in range(self.height):
            grid_row = []
            for col in range(self.width):
                coord = Coordinate(row, col)
                grid_row.append(Cell(self._value_at(coord, mine_set)))
            grid.append(grid_row)
        return grid

    def _value_at(
        self, coord: Coordinate, mine_set: Set[Coordinate]
    ) -> CellValue:
        """Compute the value of one cell given all mine positions."""
        if coord in mine_set:
            return MINE
        count = sum(
            1 for neighbor in neighbors(coord, self.height, self.width)
            if neighbor in mine_set
        )
        return value_for_count(count)

    # ========================================================================
    # Cell Access (Low-level)
    # ========================================================================

    def _check_position(self, row: int, col: int) -> Coordinate:
        """
        Validate a position before touching the grid.

        Raises:
            OutOfBoundsError: If row or col is outside the board.
        """
        if not in_bounds(row, col, self.height, self.width):
            raise OutOfBoundsError(row, col, self.height, self.width)
        return Coordinate(row, col)

    def _cell(self, coord: Coordinate) -> Cell:
        return self._grid[coord.row][coord.col]

    def _cell_at(self, row: int, col: int) -> Cell:
        return self._cell(self._check_position(row, col))

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def flag_count(self) -> int:
        """Number of currently flagged cells."""
        return self._flag_count

    @property
    def remaining_mines(self) -> int:
        """Mines not yet accounted for by a flag (may go negative)."""
        return self.mine_count - self._flag_count

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells, mines included."""
        return sum(1 for cell in self._cells() if cell.is_revealed)

    def is_mine(self, row: int, col: int) -> bool:
        return self._cell_at(row, col).is_mine

    def has_flag(self, row: int, col: int) -> bool:
        return self._cell_at(row, col).is_flagged

    def is_revealed(self, row: int, col: int) -> bool:
        return self._cell_at(row, col).is_revealed

    def is_blank(self, row: int, col: int) -> bool:
        return self._cell_at(row, col).is_blank

    def get_number(self, row: int, col: int) -> int:
        """
        Get the adjacent mine count of a safe cell.

        Raises:
            OutOfBoundsError: If the position is outside the board.
            NotANumberError: If the cell is a mine.
        """
        return self._cell_at(row, col).number

    def _cells(self) -> Iterator[Cell]:
        for grid_row in self._grid:
            yield from grid_row

    # ========================================================================
    # Game Actions
    # ========================================================================

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the cell is now flagged, False if the flag was removed.

        Raises:
            OutOfBoundsError: If the position is outside the board.
            RevealedCellError: If the cell is already revealed.
        """
        cell = self._cell_at(row, col)
        if not cell.toggle_flag():
            raise RevealedCellError(
                f"cell ({row}, {col}) is already revealed"
            )
        self._flag_count += 1 if cell.is_flagged else -1
        return cell.is_flagged

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        A mine ends the game. A numbered cell is revealed alone. A blank
        cell starts a flood fill over its blank region and the numbers
        bordering it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult.GAME_OVER if the cell is a mine, else CONTINUE.

        Raises:
            OutOfBoundsError: If the position is outside the board.
            FlaggedCellError: If the cell is flagged.
        """
        coord = self._check_position(row, col)
        cell = self._cell(coord)
        if cell.is_flagged:
            raise FlaggedCellError(
                f"cell {coord} is flagged, remove the flag first"
            )

        if cell.is_mine:
            cell.reveal()
            return RevealResult.GAME_OVER
        if not cell.is_blank:
            cell.reveal()
            return RevealResult.CONTINUE
        if cell.is_revealed:
            return RevealResult.CONTINUE

        revealed = self._flood_fill(coord)
        logger.debug(
            "Flood fill from %s revealed %d cells", coord, len(revealed)
        )
        return RevealResult.CONTINUE

    def _flood_fill(self, start: Coordinate) -> List[Coordinate]:
        """
        Reveal the blank region containing start and its coastline.

        Depth-first walk over orthogonally connected blank cells using an
        explicit stack. Each visit of the top cell reveals its numbered
        neighbors, then descends into the first unrevealed orthogonal
        blank neighbor in scan order, or backtracks if there is none.

        Returns:
            Coordinates revealed, in reveal order.
        """
        revealed = []
        self._force_reveal(start, revealed)
        stack = [start]

        while stack:
            current = stack[-1]
            next_blank = None
            for neighbor in neighbors(current, self.height, self.width):
                cell = self._cell(neighbor)
                if cell.is_mine:
                    continue
                if not cell.is_blank:
                    self._force_reveal(neighbor, revealed)
                elif (
                    next_blank is None
                    and not cell.is_revealed
                    and current.is_orthogonal_to(neighbor)
                ):
                    next_blank = neighbor

            if next_blank is None:
                stack.pop()
            else:
                self._force_reveal(next_blank, revealed)
                stack.append(next_blank)

        return revealed

    def _force_reveal(
        self, coord: Coordinate, revealed: List[Coordinate]
    ) -> None:
        """Reveal a cell during flood fill, overriding any flag."""
        cell = self._cell(coord)
        was_flagged = cell.is_flagged
        if cell.reveal(ignore_flag=True):
            revealed.append(coord)
            if was_flagged:
                self._flag_count -= 1

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def has_won(self) -> bool:
        """Check if all non-mine cells are revealed. Flags are ignored."""
        return all(
            cell.is_revealed for cell in self._cells() if not cell.is_mine
        )

    @property
    def game_state(self) -> GameState:
        """Derive the game state from the cells."""
        if any(cell.is_mine and cell.is_revealed for cell in self._cells()):
            return GameState.LOST
        if self.has_won():
            return GameState.WON
        return GameState.IN_PROGRESS

    def get_observation(self) -> np.ndarray:
        """
        Snapshot the player view of the board as a numpy array.

        Front ends can redraw the grid from one array instead of one
        query per cell. Only revealed cells expose their content.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for row in range(self.height):
            for col in range(self.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs
