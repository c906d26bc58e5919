"""Locate an element's coordinates in an array of any rank."""

from __future__ import annotations

import logging
import math
from typing import Any, List, NamedTuple, Sequence

import numpy as np

from .config import NOT_FOUND
from .errors import IndexOutOfRangeError, InvalidArgumentError
from .ranked import Dimension, RankedArray

LOGGER = logging.getLogger(__name__)


class IndexWithRank(NamedTuple):
    indexes: List[int]
    rank: int


def _as_ranked(array: Any) -> RankedArray:
    if array is None:
        raise InvalidArgumentError("array")
    if isinstance(array, RankedArray):
        return array
    if isinstance(array, np.ndarray):
        return RankedArray.from_ndarray(array)
    return RankedArray.from_nested(array)


def _first_position(array: RankedArray, item: Any) -> int:
    for position, value in enumerate(array.iter_flat()):
        if bool(value == item):
            return position
    return NOT_FOUND


def _decode_position(position: int, dimensions: Sequence[Dimension]) -> List[int]:
    """Split a row-major flat position into one index per dimension (mixed radix)."""

    total_length = math.prod(dim.length for dim in dimensions)
    remainder = position
    indexes: List[int] = []
    for axis, dim in enumerate(dimensions):
        last_length = total_length // dim.length
        value = remainder // last_length
        remainder -= value * last_length
        index = value + dim.lower_bound
        if index > dim.upper_bound:
            raise IndexOutOfRangeError(axis, index, dim.lower_bound, dim.upper_bound)
        indexes.append(index)
        total_length = last_length
    return indexes


def find_index(array: Any, item: Any) -> List[int]:
    """Return the coordinates of the first element equal to ``item``.

    ``array`` may be a :class:`~arraykit.ranked.RankedArray`, a numpy array
    or rectangular nested lists.  Elements are visited in row-major order and
    compared with ``==``.  Coordinates include each dimension's lower bound.
    When nothing matches, every coordinate is ``-1``.

    >>> find_index([10, 20, 30], 20)
    [1]
    >>> find_index([[1, 2, 3], [4, 5, 6]], 6)
    [1, 2]
    """

    ranked = _as_ranked(array)
    position = _first_position(ranked, item)
    LOGGER.debug(
        "Searched rank-%d array of %d elements; flat position %d", ranked.rank, ranked.size, position
    )
    if position == NOT_FOUND:
        return [NOT_FOUND] * ranked.rank
    if ranked.rank == 1:
        return [position + ranked.dimensions[0].lower_bound]
    return _decode_position(position, ranked.dimensions)


def find_index_with_rank(array: Any, item: Any) -> IndexWithRank:
    """Like :func:`find_index` but also report the rank, handy for looping over the result."""

    indexes = find_index(array, item)
    return IndexWithRank(indexes, len(indexes))
