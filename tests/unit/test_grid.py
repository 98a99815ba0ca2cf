"""
Unit tests for the Grid model and its validation.
"""

import dataclasses

import pytest

from cloture.core.grid import Grid, GridProblem, InvalidGridError


class TestFromRows:
    """Tests for Grid.from_rows validation."""

    def test_valid_rows(self):
        grid = Grid.from_rows([[0, 1, 0], [1, 1, 0]])
        assert grid.width == 3
        assert grid.height == 2
        assert grid.rows == ((0, 1, 0), (1, 1, 0))

    def test_single_cell(self):
        grid = Grid.from_rows([[1]])
        assert (grid.width, grid.height) == (1, 1)

    def test_existing_grid_is_returned(self):
        grid = Grid.from_rows([[0, 1]])
        assert Grid.from_rows(grid) is grid

    def test_rows_are_copied(self):
        rows = [[0, 1], [1, 0]]
        grid = Grid.from_rows(rows)
        rows[0][0] = 1
        assert grid[0][0] == 0

    def test_no_rows_raises(self):
        with pytest.raises(InvalidGridError, match="empty"):
            Grid.from_rows([])

    def test_no_columns_raises(self):
        with pytest.raises(InvalidGridError, match="empty"):
            Grid.from_rows([[]])

    def test_ragged_rows_raise(self):
        with pytest.raises(InvalidGridError) as exc_info:
            Grid.from_rows([[0, 1, 0], [0, 1]])
        problems = exc_info.value.problems
        assert len(problems) == 1
        assert problems[0].row == 1
        assert "expected 3 columns, found 2" in str(exc_info.value)

    def test_invalid_value_raises(self):
        with pytest.raises(InvalidGridError) as exc_info:
            Grid.from_rows([[0, 2], [1, 0]])
        problem = exc_info.value.problems[0]
        assert (problem.row, problem.col) == (0, 1)
        assert "invalid cell value 2" in str(exc_info.value)

    def test_booleans_are_rejected(self):
        with pytest.raises(InvalidGridError):
            Grid.from_rows([[True, False]])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            Grid.from_rows([[3]])


class TestInvalidGridError:
    """Tests for the InvalidGridError report."""

    def test_lists_every_problem_up_to_ten(self):
        problems = [GridProblem(0, "bad", col) for col in range(3)]
        message = str(InvalidGridError(problems))
        assert "3 problem(s)" in message
        assert "Row 0, Col 2: bad" in message

    def test_truncates_long_reports(self):
        problems = [GridProblem(0, "bad", col) for col in range(15)]
        message = str(InvalidGridError(problems))
        assert "... and 5 more" in message
        assert "Col 10" not in message

    def test_row_problem_without_column(self):
        assert str(GridProblem(4, "too short")) == "Row 4: too short"


class TestGridQueries:
    """Tests for cell and neighbor queries."""

    def test_is_occupied(self):
        grid = Grid.from_rows([[0, 1], [1, 0]])
        assert grid.is_occupied(1, 0)
        assert not grid.is_occupied(0, 0)

    def test_neighbor_is_occupied(self):
        grid = Grid.from_rows([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        for direction in ("up", "down", "left", "right"):
            assert grid.neighbor_is_occupied(1, 1, direction)

    def test_neighbor_off_grid_is_not_occupied(self):
        grid = Grid.from_rows([[1, 1], [1, 1]])
        assert not grid.neighbor_is_occupied(0, 0, "up")
        assert not grid.neighbor_is_occupied(0, 0, "left")
        assert not grid.neighbor_is_occupied(1, 1, "down")
        assert not grid.neighbor_is_occupied(1, 1, "right")

    def test_to_layer_is_mutable_copy(self, square_grid):
        layer = square_grid.to_layer()
        layer[0][0] = 7
        assert square_grid[0][0] == 0

    def test_grid_is_frozen(self, square_grid):
        with pytest.raises(dataclasses.FrozenInstanceError):
            square_grid.rows = ()
