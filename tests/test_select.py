"""
Tests for row/column selection (lib/select.py).
"""
import pytest

from lib.errors import InvalidArgument, OutOfRange
from lib.select import filter_rows, slice_matrix, slice_cols, slice_rows, index


@pytest.fixture
def grid():
    return [
        ["id", "name", "grade"],
        ["1", "Alice", 10],
        ["2", "Bob", 11],
        ["3", "Carol", 10],
    ]


class TestFilterRows:
    """Tests for filter_rows function"""

    def test_example(self, sample_matrix):
        assert filter_rows(sample_matrix, 1, "c") == [["c", "d"]]

    def test_keeps_order(self, grid):
        result = filter_rows(grid, 3, 10)
        assert result == [grid[1], grid[3]]

    def test_numeric_string_matches_number(self, grid):
        assert filter_rows(grid, 3, "10") == [grid[1], grid[3]]
        assert filter_rows(grid, 1, 2) == [grid[2]]
        assert filter_rows(grid, 1, 2.0) == [grid[2]]

    def test_exact_not_pattern(self, grid):
        assert filter_rows(grid, 2, "Ali") == []
        assert filter_rows(grid, 2, "alice") == []

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_value_returns_everything(self, grid, value):
        result = filter_rows(grid, 2, value)
        assert result == grid
        assert result is not grid

    def test_short_rows_have_empty_cells(self):
        m = [["a", "x"], ["b"], None]
        assert filter_rows(m, 2, "x") == [["a", "x"]]

    def test_column_past_every_row(self, grid):
        assert filter_rows(grid, 9, "x") == []

    def test_boolean_cells(self):
        m = [[True, "a"], ["FALSE", "b"], ["true", "c"], [1, "d"]]
        assert filter_rows(m, 1, True) == [[True, "a"], ["true", "c"]]
        assert filter_rows(m, 1, False) == [["FALSE", "b"]]

    def test_column_zero_raises(self, grid):
        with pytest.raises(OutOfRange):
            filter_rows(grid, 0, "x")

    def test_bad_column_type_raises(self, grid):
        with pytest.raises(InvalidArgument):
            filter_rows(grid, "B", "x")

    def test_long_numeric_ids_compare_exactly(self):
        m = [["12345678901234567890", "a"], ["12345678901234567891", "b"]]
        assert filter_rows(m, 1, "12345678901234567891") == [["12345678901234567891", "b"]]
        assert filter_rows(m, 1, 12345678901234567890) == [["12345678901234567890", "a"]]


class TestSliceMatrix:
    """Tests for slice_matrix function"""

    def test_sub_matrix(self, grid):
        assert slice_matrix(grid, [2, 3], [2, 3]) == [["Alice", 10], ["Bob", 11]]

    def test_scalar_indices(self, grid):
        assert slice_matrix(grid, 2, 2) == [["Alice"]]

    def test_nested_host_arrays(self, grid):
        assert slice_matrix(grid, [[2, 4]], [[1], [2]]) == [["1", "Alice"], ["3", "Carol"]]

    def test_round_trip(self, grid):
        rows = list(range(1, len(grid) + 1))
        cols = [1, 2, 3]
        assert slice_matrix(grid, rows, cols, False) == grid

    def test_round_trip_with_ranges(self, grid):
        assert slice_matrix(grid, range(1, len(grid) + 1), range(1, 4), False) == grid

    def test_nested_ranges(self, grid):
        assert slice_matrix(grid, [range(2, 4)], 2) == [["Alice"], ["Bob"]]

    def test_reorder_and_duplicate(self, grid):
        assert slice_matrix(grid, [3, 3], [2, 1]) == [["Bob", "2"], ["Bob", "2"]]

    def test_missing_row_raises(self, grid):
        with pytest.raises(OutOfRange):
            slice_matrix(grid, [5], [1])

    def test_missing_row_ignored(self, grid):
        assert slice_matrix(grid, [2, 9], [1, 2], True) == [["1", "Alice"], ["", ""]]

    def test_absent_row_ignored(self):
        assert slice_matrix([None, ["a"]], [1, 2], [1], True) == [[""], ["a"]]

    def test_missing_cell_raises(self):
        with pytest.raises(OutOfRange):
            slice_matrix([["a"]], [1], [2])

    def test_missing_cell_ignored(self):
        assert slice_matrix([["a"]], [1], [1, 2], True) == [["a", ""]]

    def test_index_zero_raises(self, grid):
        with pytest.raises(OutOfRange):
            slice_matrix(grid, [0], [1], True)

    def test_non_integer_index_raises(self, grid):
        with pytest.raises(InvalidArgument):
            slice_matrix(grid, [1.5], [1])

    def test_empty_lists(self, grid):
        assert slice_matrix(grid, [], [1]) == []
        assert slice_matrix(grid, [1], []) == [[]]


class TestSliceCols:
    """Tests for slice_cols function"""

    def test_example(self, sample_matrix):
        assert slice_cols(sample_matrix, [2]) == [["b"], ["d"]]

    def test_scalar(self, sample_matrix):
        assert slice_cols(sample_matrix, 1) == [["a"], ["c"]]

    def test_reorder(self, grid):
        assert slice_cols(grid, [3, 1])[1] == [10, "1"]

    def test_short_rows_padded(self):
        assert slice_cols([["a", "b"], ["c"], None], [2]) == [["b"], [""], [""]]

    def test_column_zero_raises(self, grid):
        with pytest.raises(OutOfRange):
            slice_cols(grid, [1, 0])


class TestSliceRows:
    """Tests for slice_rows function"""

    def test_reorder(self, grid):
        assert slice_rows(grid, [3, 1]) == [grid[2], grid[0]]

    def test_duplicate(self, grid):
        assert slice_rows(grid, [1, 1]) == [grid[0], grid[0]]

    def test_range_indices(self, grid):
        assert slice_rows(grid, range(2, 0, -1)) == [grid[1], grid[0]]

    def test_scalar(self, grid):
        assert slice_rows(grid, 2) == [grid[1]]

    def test_rows_are_copies(self, grid):
        result = slice_rows(grid, [1])
        result[0][0] = "changed"
        assert grid[0][0] == "id"

    def test_absent_row_is_empty_list(self):
        assert slice_rows([None, ["a"]], [1, 2]) == [[], ["a"]]

    def test_past_end_raises(self, grid):
        with pytest.raises(OutOfRange):
            slice_rows(grid, [1, 5])

    def test_zero_raises(self, grid):
        with pytest.raises(OutOfRange):
            slice_rows(grid, 0)

    def test_bool_index_raises(self, grid):
        with pytest.raises(InvalidArgument):
            slice_rows(grid, [True])


class TestIndex:
    """Tests for index function"""

    def test_top_left(self, sample_matrix):
        assert index(sample_matrix, 1, 1) == "a"

    def test_bottom_right(self, sample_matrix):
        assert index(sample_matrix, 2, 2) == "d"

    def test_whole_float_indices(self, sample_matrix):
        assert index(sample_matrix, 2.0, 1.0) == "c"

    @pytest.mark.parametrize("row,col", [(0, 1), (1, 0), (3, 1), (1, 3), (-1, 1)])
    def test_out_of_range(self, sample_matrix, row, col):
        with pytest.raises(OutOfRange):
            index(sample_matrix, row, col)

    def test_short_row(self):
        with pytest.raises(OutOfRange):
            index([["a", "b"], ["c"]], 2, 2)

    def test_absent_row(self):
        with pytest.raises(OutOfRange):
            index([None], 1, 1)

    def test_out_of_range_is_index_error(self, sample_matrix):
        with pytest.raises(IndexError):
            index(sample_matrix, 9, 9)

    def test_non_integer_raises(self, sample_matrix):
        with pytest.raises(InvalidArgument):
            index(sample_matrix, "x", 1)
