"""
Unit tests for coordinates and neighbor iteration.
"""
from minesweeper import Coordinate
from minesweeper.coordinate import NEIGHBOR_OFFSETS, neighbors


class TestNeighbors:
    """Test bounded neighbor iteration."""

    def test_scan_order_is_row_major(self) -> None:
        """Offsets scan rows -1..1, then columns -1..1."""
        assert NEIGHBOR_OFFSETS == (
            (-1, -1), (-1, 0), (-1, 1),
            (0, -1), (0, 1),
            (1, -1), (1, 0), (1, 1),
        )

    def test_interior_cell_has_eight_neighbors(self) -> None:
        """Cells away from the edge have all 8 neighbors."""
        assert len(list(neighbors(Coordinate(1, 1), 3, 3))) == 8

    def test_corner_cell_is_clipped(self) -> None:
        """Corner cells have 3 neighbors and never wrap."""
        result = list(neighbors(Coordinate(0, 0), 3, 3))
        assert result == [Coordinate(0, 1), Coordinate(1, 0), Coordinate(1, 1)]

    def test_edge_cell_is_clipped(self) -> None:
        """Edge cells have 5 neighbors."""
        assert len(list(neighbors(Coordinate(0, 1), 3, 3))) == 5

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        """A 1x1 grid has nothing around its only cell."""
        assert list(neighbors(Coordinate(0, 0), 1, 1)) == []


class TestCoordinate:
    """Test the coordinate value type."""

    def test_equality_by_row_and_col(self) -> None:
        """Coordinates compare by value and match plain tuples."""
        assert Coordinate(2, 3) == Coordinate(2, 3)
        assert Coordinate(2, 3) == (2, 3)

    def test_str_format(self) -> None:
        """String form is (row, col)."""
        assert str(Coordinate(2, 3)) == "(2, 3)"

    def test_orthogonal_adjacency(self) -> None:
        """Only up/down/left/right steps are orthogonal."""
        center = Coordinate(1, 1)
        assert center.is_orthogonal_to(Coordinate(0, 1))
        assert center.is_orthogonal_to(Coordinate(1, 2))
        assert not center.is_orthogonal_to(Coordinate(0, 0))
        assert not center.is_orthogonal_to(Coordinate(1, 1))
