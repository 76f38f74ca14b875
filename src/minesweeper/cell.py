"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/blank/number) and state (hidden/flagged/revealed).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from .errors import FlaggedCellError, NotANumberError


# ============================================================================
# Cell Values
# ============================================================================

@dataclass(frozen=True)
class Mine:
    """A cell holding a mine."""

    def as_int(self) -> int:
        return -1


@dataclass(frozen=True)
class Blank:
    """A safe cell with no adjacent mines."""

    def as_int(self) -> int:
        return 0


@dataclass(frozen=True)
class Number:
    """
    A safe cell touching at least one mine.

    Attributes:
        count: Adjacent mine count, 1-8.
    """

    count: int

    def __post_init__(self) -> None:
        if not 1 <= self.count <= 8:
            raise ValueError(f"Number must be 1-8, got {self.count}")

    def as_int(self) -> int:
        return self.count


CellValue = Union[Mine, Blank, Number]

MINE = Mine()
BLANK = Blank()


def value_for_count(count: int) -> CellValue:
    """Build the value of a safe cell from its adjacent mine count."""
    if count == 0:
        return BLANK
    return Number(count)


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    The value is fixed when the cell is created; only the state changes
    during play. Flag and reveal share one state field, so a cell is
    never flagged and revealed at once.

    Attributes:
        value: Mine, blank or number.
        state: Current visual state (hidden, flagged, or revealed).
    """

    value: CellValue = BLANK
    state: CellState = CellState.HIDDEN

    @property
    def is_mine(self) -> bool:
        """Check if cell is a mine."""
        return isinstance(self.value, Mine)

    @property
    def is_blank(self) -> bool:
        """Check if cell is safe with no adjacent mines."""
        return isinstance(self.value, Blank)

    @property
    def number(self) -> int:
        """
        Adjacent mine count of a safe cell.

        Raises:
            NotANumberError: If the cell is a mine.
        """
        if self.is_mine:
            raise NotANumberError("mines do not have a number")
        return self.value.as_int()

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def reveal(self, ignore_flag: bool = False) -> bool:
        """
        Reveal this cell.

        Args:
            ignore_flag: Reveal even if flagged, clearing the flag.

        Returns:
            True if the cell was newly revealed, False if it already was.

        Raises:
            FlaggedCellError: If the cell is flagged and ignore_flag is False.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.FLAGGED and not ignore_flag:
            raise FlaggedCellError("remove the flag before revealing")
        self.state = CellState.REVEALED
        return True

    def to_observation(self) -> int:
        """
        Encode what the player can see of this cell.

        Hidden content stays hidden, so front ends and solvers can read
        the player view without access to mine positions.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.value.as_int()
