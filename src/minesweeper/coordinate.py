"""
Coordinate module for Minesweeper game.

Provides the (row, col) position type and neighbor iteration used by
the board for mine counting and flood fill.
"""
from typing import Iterator, NamedTuple, Tuple


# ============================================================================
# Constants
# ============================================================================

# Fixed scan order: row offset outer, column offset inner
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if not (delta_row == 0 and delta_col == 0)
)


# ============================================================================
# Coordinate Type
# ============================================================================

class Coordinate(NamedTuple):
    """A cell position on the board."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def is_orthogonal_to(self, other: "Coordinate") -> bool:
        """Check if other shares a row or column and is one step away."""
        distance = abs(self.row - other.row) + abs(self.col - other.col)
        return distance == 1


def in_bounds(row: int, col: int, height: int, width: int) -> bool:
    """Check if position is within a height x width grid."""
    return 0 <= row < height and 0 <= col < width


def neighbors(
    coord: Coordinate, height: int, width: int
) -> Iterator[Coordinate]:
    """
    Yield the in-bounds neighbors of a cell in fixed scan order.

    Args:
        coord: Center cell.
        height: Number of rows in the grid.
        width: Number of columns in the grid.

    Yields:
        Up to 8 neighboring coordinates. Edges are clipped, never wrapped.
    """
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = coord.row + delta_row
        new_col = coord.col + delta_col
        if in_bounds(new_row, new_col, height, width):
            yield Coordinate(new_row, new_col)
