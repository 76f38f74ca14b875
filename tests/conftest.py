"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Number, MINE


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def beginner_board() -> Board:
    """Create a seeded beginner board (9x9, 10 mines)."""
    return Board(9, 9, 10, seed=1234)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def strip_board() -> Board:
    """Create a 1x3 board with no mines."""
    return Board(3, 1, 0)


@pytest.fixture
def split_board() -> Board:
    """
    Create a 4x4 board with two blank regions touching only diagonally.

    Layout (M = mine):
        0 0 1 M
        0 0 1 1
        1 1 0 0
        M 1 0 0
    """
    return Board.from_mines(4, 4, [(0, 3), (3, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden blank cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(MINE)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a hidden cell with three adjacent mines."""
    return Cell(Number(3))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """A 4x4 configuration with 3 mines."""
    return BoardConfig(4, 4, 3)
