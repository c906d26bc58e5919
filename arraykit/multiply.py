"""Dense matrix multiplication over the registered numeric kinds.

The product is computed with the textbook triple loop.  Each output cell
starts from the kind's zero and accumulates ``left[i, k] * right[k, j]`` with
``k`` ascending, so float results match any reference loop bit for bit,
fixed-width integers wrap like native arithmetic and decimals keep their
context precision.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Union

from . import _matrix
from .errors import DimensionMismatchError, InvalidArgumentError
from .numeric import NumericKind, resolve_kind

LOGGER = logging.getLogger(__name__)

KindLike = Union[str, NumericKind, None]


class MatrixProduct(NamedTuple):
    """A product together with its shape."""

    product: _matrix.Matrix
    rows: int
    columns: int


def multiply_with_shape(left: Any, right: Any, *, kind: KindLike = None) -> MatrixProduct:
    """Multiply ``left`` by ``right`` and report the shape of the result.

    Parameters
    ----------
    left, right:
        2-D numpy arrays or rectangular nested sequences.
    kind:
        Name of a registered numeric kind (``"int32"``, ``"int64"``,
        ``"float32"``, ``"float64"``, ``"decimal"``) or a
        :class:`~arraykit.numeric.NumericKind`.  Inferred from ``left`` when
        omitted; both operands are coerced to it.

    Raises
    ------
    InvalidArgumentError
        If either operand is ``None`` or cannot be read as a matrix.
    DimensionMismatchError
        If ``left`` has a different number of columns than ``right`` has rows.
    """

    if left is None:
        raise InvalidArgumentError("left")
    if right is None:
        raise InvalidArgumentError("right")

    resolved = resolve_kind(kind, left, right)
    left_matrix = _matrix.as_matrix(left, resolved, name="left")
    right_matrix = _matrix.as_matrix(right, resolved, name="right")

    rows, inner = _matrix.shape(left_matrix)
    right_rows, columns = _matrix.shape(right_matrix)
    if inner != right_rows:
        raise DimensionMismatchError(inner, right_rows)

    LOGGER.debug(
        "Multiplying %dx%d by %dx%d matrices as %s", rows, inner, right_rows, columns, resolved.name
    )

    product = _matrix.zeros(rows, columns, resolved)
    add = resolved.add
    mul = resolved.multiply
    with resolved.arithmetic():
        for row_index in range(rows):
            left_row = left_matrix[row_index]
            for column_index in range(columns):
                total = resolved.zero
                for inner_index in range(inner):
                    total = add(total, mul(left_row[inner_index], right_matrix[inner_index, column_index]))
                product[row_index, column_index] = total
    return MatrixProduct(product, rows, columns)


def multiply(left: Any, right: Any, *, kind: KindLike = None) -> _matrix.Matrix:
    """Return the matrix product ``left @ right`` as a new array."""

    return multiply_with_shape(left, right, kind=kind).product
