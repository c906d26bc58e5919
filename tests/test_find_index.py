from __future__ import annotations

import logging

import numpy as np
import pytest

from arraykit.errors import IndexOutOfRangeError, InvalidArgumentError
from arraykit.find_index import _decode_position, find_index, find_index_with_rank
from arraykit.ranked import Dimension, RankedArray


def test_rank_one_lookup():
    values = [10, 20, 30]
    assert find_index(values, 20) == [1]
    assert find_index(values, 99) == [-1]


def test_rank_two_lookup():
    grid = [[0, 0, 0], [0, 0, "x"]]
    assert find_index(grid, "x") == [1, 2]


def test_first_match_in_row_major_order():
    assert find_index([[5, 1], [1, 5]], 1) == [0, 1]


def test_every_position_of_a_cube_decodes(cube):
    for value in range(cube.size):
        expected = [int(index) for index in np.unravel_index(value, cube.shape)]
        assert find_index(cube, value) == expected


@pytest.mark.parametrize("rank", [1, 2, 3, 4])
def test_missing_item_fills_every_slot(rank):
    array = np.zeros((2,) * rank)
    assert find_index(array, 7) == [-1] * rank


def test_lower_bounds_shift_coordinates():
    grid = RankedArray.from_nested([[1, 2, 3], [4, 5, 6]], lower_bounds=[1, -2])
    assert find_index(grid, 6) == [2, 0]
    assert find_index(grid, 1) == [1, -2]
    line = RankedArray.from_flat([7, 8, 9], [3], lower_bounds=[5])
    assert find_index(line, 9) == [7]
    assert find_index(line, 4) == [-1]


def test_rank_one_and_general_paths_agree_on_order():
    flat = [3, 1, 4, 1, 5, 9]
    grid = RankedArray.from_flat(flat, [2, 3])
    for value in set(flat):
        (position,) = find_index(flat, value)
        row, column = find_index(grid, value)
        assert row * 3 + column == position


def test_fortran_ordered_arrays_are_scanned_row_major():
    array = np.asfortranarray(np.arange(6).reshape(2, 3))
    assert find_index(array, 1) == [0, 1]
    assert find_index(array, 5) == [1, 2]


def test_numpy_scalars_compare_by_value():
    assert find_index(np.array([1.5, 2.5]), 2.5) == [1]


def test_find_index_with_rank(cube):
    result = find_index_with_rank(cube, 23)
    assert result.indexes == [1, 2, 3]
    assert result.rank == 3
    assert find_index_with_rank(cube, -5) == ([-1, -1, -1], 3)


def test_empty_dimension_never_matches():
    assert find_index([[], []], 0) == [-1, -1]


def test_missing_array():
    with pytest.raises(InvalidArgumentError, match="array"):
        find_index(None, 1)


def test_decode_position():
    dims = (Dimension(0, 2), Dimension(0, 3))
    assert _decode_position(5, dims) == [1, 2]
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        _decode_position(6, dims)
    assert isinstance(excinfo.value, IndexError)
    assert excinfo.value.dimension == 0
    assert excinfo.value.index == 2


def test_logs_flat_position(caplog):
    caplog.set_level(logging.DEBUG, logger="arraykit.find_index")
    find_index([[1, 2], [3, 4]], 4)
    assert "Searched rank-2 array of 4 elements; flat position 3" in caplog.text


def test_numpy_rows_count_as_a_dimension():
    rows = [np.array([1, 2]), np.array([3, 4])]
    assert find_index(rows, 4) == [1, 1]
    assert find_index(rows, 9) == [-1, -1]
