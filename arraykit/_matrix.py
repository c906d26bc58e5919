"""Light-weight helpers for two-dimensional numpy matrices."""

from __future__ import annotations

import decimal
from collections.abc import Sequence
from typing import Any, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidArgumentError
from .numeric import NumericKind

Matrix = NDArray[Any]

_COERCION_ERRORS = (TypeError, ValueError, OverflowError, decimal.InvalidOperation)


def _is_row(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Sequence, np.ndarray))


def ensure_rectangular(data: Sequence[Sequence[Any]], *, name: str = "matrix") -> Tuple[int, int]:
    """Return ``(rows, columns)`` for nested rows, rejecting ragged input."""

    if not _is_row(data):
        raise InvalidArgumentError(name, f"must be a two-dimensional array, got {type(data).__name__}")
    rows = len(data)
    if rows == 0:
        return 0, 0
    columns = None
    for row in data:
        if not _is_row(row):
            raise InvalidArgumentError(name, "must be two-dimensional")
        if columns is None:
            columns = len(row)
        elif len(row) != columns:
            raise InvalidArgumentError(name, "is ragged: every row must have the same length")
    return rows, int(columns or 0)


def shape(matrix: Matrix) -> Tuple[int, int]:
    rows, columns = matrix.shape
    return int(rows), int(columns)


def zeros(rows: int, columns: int, kind: NumericKind) -> Matrix:
    return np.full((rows, columns), kind.zero, dtype=kind.dtype)


def identity(n: int, kind: NumericKind) -> Matrix:
    eye = zeros(n, n, kind)
    for i in range(n):
        eye[i, i] = kind.one
    return eye


def as_matrix(data: Any, kind: NumericKind, *, name: str = "matrix") -> Matrix:
    """Coerce ``data`` into a 2-D array holding ``kind`` elements.

    Arrays that already carry the kind's dtype are returned as-is; every
    caller treats matrices as read-only.
    """

    if data is None:
        raise InvalidArgumentError(name)
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise InvalidArgumentError(name, f"must be two-dimensional, got {data.ndim} dimension(s)")
        if data.dtype == np.bool_:
            raise InvalidArgumentError(name, "must be numeric, got a boolean array")
        if kind.native and data.dtype == kind.dtype:
            return data
        if kind.native and data.dtype != object:
            return data.astype(kind.dtype)
        rows, columns = shape(data)
        cells: Any = data
    else:
        rows, columns = ensure_rectangular(data, name=name)
        cells = data

    out = np.empty((rows, columns), dtype=kind.dtype)
    try:
        for i in range(rows):
            row = cells[i]
            for j in range(columns):
                out[i, j] = kind.scalar(row[j])
    except _COERCION_ERRORS as exc:
        raise InvalidArgumentError(name, f"holds a value that is not a valid {kind.name}") from exc
    return out
