"""Arbitrary-rank arrays stored as a flat buffer plus per-dimension bounds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Dimension:
    """One axis of a :class:`RankedArray`.

    >>> Dimension(lower_bound=1, length=3).upper_bound
    3
    """

    lower_bound: int
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise InvalidArgumentError("length", f"must be non-negative, got {self.length}")

    @property
    def upper_bound(self) -> int:
        return self.lower_bound + self.length - 1


def _dimensions(lengths: Sequence[int], lower_bounds: Optional[Sequence[int]]) -> Tuple[Dimension, ...]:
    if lower_bounds is None:
        lower_bounds = [0] * len(lengths)
    elif len(lower_bounds) != len(lengths):
        raise InvalidArgumentError(
            "lower_bounds", f"must have one entry per dimension ({len(lengths)}), got {len(lower_bounds)}"
        )
    return tuple(Dimension(int(low), int(length)) for low, length in zip(lower_bounds, lengths))


def _is_level(node: Any) -> bool:
    if isinstance(node, np.ndarray):
        return node.ndim > 0
    return isinstance(node, (list, tuple))


def _nested_shape(data: Any) -> List[int]:
    lengths: List[int] = []
    level = data
    while _is_level(level):
        lengths.append(len(level))
        if len(level) == 0:
            break
        level = level[0]
    return lengths


def _flatten(node: Any, lengths: Sequence[int], depth: int, out: List[Any]) -> None:
    if depth == len(lengths):
        if _is_level(node):
            raise InvalidArgumentError("array", "is ragged: nesting depth varies between elements")
        out.append(node)
        return
    if not _is_level(node) or len(node) != lengths[depth]:
        raise InvalidArgumentError("array", f"is ragged along dimension {depth}")
    for child in node:
        _flatten(child, lengths, depth + 1, out)


@dataclass(frozen=True, slots=True)
class RankedArray:
    """Read-only N-dimensional array with optional non-zero lower bounds.

    ``values`` holds the elements in row-major order (the last dimension
    varies fastest).
    """

    values: Tuple[Any, ...]
    dimensions: Tuple[Dimension, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "dimensions", tuple(self.dimensions))
        if not self.dimensions:
            raise InvalidArgumentError("array", "must have at least one dimension")
        expected = math.prod(dim.length for dim in self.dimensions)
        if len(self.values) != expected:
            raise InvalidArgumentError(
                "array", f"holds {len(self.values)} values but its dimensions describe {expected}"
            )

    @classmethod
    def from_flat(
        cls,
        values: Iterable[Any],
        lengths: Sequence[int],
        lower_bounds: Optional[Sequence[int]] = None,
    ) -> "RankedArray":
        return cls(tuple(values), _dimensions(lengths, lower_bounds))

    @classmethod
    def from_nested(cls, data: Any, lower_bounds: Optional[Sequence[int]] = None) -> "RankedArray":
        """Build an array from rectangular nested lists or tuples (numpy rows allowed)."""

        if not isinstance(data, (list, tuple)):
            raise InvalidArgumentError("array", f"must be a nested list or tuple, got {type(data).__name__}")
        lengths = _nested_shape(data)
        values: List[Any] = []
        _flatten(data, lengths, 0, values)
        return cls.from_flat(values, lengths, lower_bounds)

    @classmethod
    def from_ndarray(cls, array: np.ndarray, lower_bounds: Optional[Sequence[int]] = None) -> "RankedArray":
        if array.ndim == 0:
            raise InvalidArgumentError("array", "must have at least one dimension")
        values = list(array.ravel(order="C"))
        return cls.from_flat(values, array.shape, lower_bounds)

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def lengths(self) -> Tuple[int, ...]:
        return tuple(dim.length for dim in self.dimensions)

    @property
    def lower_bounds(self) -> Tuple[int, ...]:
        return tuple(dim.lower_bound for dim in self.dimensions)

    @property
    def upper_bounds(self) -> Tuple[int, ...]:
        return tuple(dim.upper_bound for dim in self.dimensions)

    def iter_flat(self) -> Iterator[Any]:
        return iter(self.values)
