"""Numeric kinds understood by the matrix routines.

A :class:`NumericKind` bundles everything the multiplication loop needs to
know about an element type: its storage dtype, its additive and
multiplicative identities, how to coerce a scalar into it, and the ``+`` and
``*`` operations.  Five kinds are registered:

``int32`` / ``int64``
    numpy fixed-width integers.  Overflow wraps around silently, exactly like
    native two's complement arithmetic.
``float32`` / ``float64``
    numpy IEEE floats.  Each addition and multiplication is rounded to the
    kind's precision, so results are reproducible bit for bit.
``decimal``
    :class:`decimal.Decimal` values held in an ``object`` array and combined
    through an explicit :class:`decimal.Context`.
"""

from __future__ import annotations

import contextlib
import decimal
import functools
import operator
from dataclasses import dataclass
from typing import Any, Callable, ContextManager, Dict, Iterator, List, Optional, Union

import numpy as np

from .config import DEFAULT_FLOAT_KIND, DEFAULT_INTEGER_KIND, DecimalSettings
from .errors import InvalidArgumentError

BinaryOp = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class NumericKind:
    """Arithmetic capabilities of a matrix element type."""

    name: str
    dtype: np.dtype
    zero: Any
    one: Any
    add: BinaryOp
    multiply: BinaryOp
    scalar: Callable[[Any], Any]
    native: bool = True

    def arithmetic(self) -> ContextManager[Any]:
        """Return the context inside which ``add``/``multiply`` are evaluated."""

        if self.native:
            return np.errstate(over="ignore", invalid="ignore")
        return contextlib.nullcontext()


def _native_scalar(scalar_type: type) -> Callable[[Any], Any]:
    def convert(value: Any) -> Any:
        if isinstance(value, (bool, np.bool_)):
            raise TypeError("booleans are not numeric values")
        return scalar_type(value)

    return convert


def _native_kind(name: str, scalar_type: type) -> NumericKind:
    return NumericKind(
        name=name,
        dtype=np.dtype(scalar_type),
        zero=scalar_type(0),
        one=scalar_type(1),
        add=operator.add,
        multiply=operator.mul,
        scalar=_native_scalar(scalar_type),
    )


def _to_decimal(value: Any) -> decimal.Decimal:
    if isinstance(value, decimal.Decimal):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("booleans are not decimal values")
    if isinstance(value, (int, np.integer)):
        return decimal.Decimal(int(value))
    if isinstance(value, (float, np.floating)):
        # Shortest repr keeps 0.1 as Decimal("0.1") instead of its binary expansion.
        return decimal.Decimal(repr(float(value)))
    if isinstance(value, str):
        return decimal.Decimal(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Decimal")


def decimal_kind(settings: Optional[DecimalSettings] = None) -> NumericKind:
    """Build a ``decimal`` kind evaluated with ``settings``."""

    context = (settings or DecimalSettings()).context()
    return NumericKind(
        name="decimal",
        dtype=np.dtype(object),
        zero=decimal.Decimal(0),
        one=decimal.Decimal(1),
        add=context.add,
        multiply=context.multiply,
        scalar=_to_decimal,
        native=False,
    )


_KINDS: Dict[str, NumericKind] = {
    "int32": _native_kind("int32", np.int32),
    "int64": _native_kind("int64", np.int64),
    "float32": _native_kind("float32", np.float32),
    "float64": _native_kind("float64", np.float64),
    "decimal": decimal_kind(),
}

_DTYPE_KINDS: Dict[np.dtype, str] = {
    np.dtype(np.int32): "int32",
    np.dtype(np.int64): "int64",
    np.dtype(np.float32): "float32",
    np.dtype(np.float64): "float64",
}


def available_kinds() -> List[str]:
    return sorted(_KINDS)


def get_kind(name: str) -> NumericKind:
    try:
        return _KINDS[name]
    except KeyError:
        raise InvalidArgumentError(
            "kind", f"must be one of {', '.join(available_kinds())}, got {name!r}"
        ) from None


def _kind_for_dtype(dtype: np.dtype) -> NumericKind:
    if dtype in _DTYPE_KINDS:
        return _KINDS[_DTYPE_KINDS[dtype]]
    if dtype.kind in "iu":
        return _KINDS[DEFAULT_INTEGER_KIND]
    if dtype.kind == "f":
        # float16 widens to single precision; anything wider stays double.
        return _KINDS["float32" if dtype.itemsize < 4 else DEFAULT_FLOAT_KIND]
    raise InvalidArgumentError("values", f"have unsupported dtype {dtype}")


def _iter_scalars(values: Any) -> Iterator[Any]:
    if isinstance(values, np.ndarray):
        values = values.tolist() if values.dtype != object else list(values.flat)
    if isinstance(values, (list, tuple)):
        for value in values:
            yield from _iter_scalars(value)
    else:
        yield values


def infer_kind(values: Any) -> NumericKind:
    """Pick the numeric kind for ``values``.

    numpy arrays are mapped through their dtype.  Nested Python data is
    classified element by element: all :class:`~decimal.Decimal` gives
    ``decimal``, all integers gives ``int64`` and any other real numbers give
    ``float64``.
    """

    if isinstance(values, np.ndarray) and values.dtype != object:
        return _kind_for_dtype(values.dtype)

    saw_float = False
    saw_integer = False
    saw_decimal = False
    numpy_dtypes = set()
    for value in _iter_scalars(values):
        if isinstance(value, (bool, np.bool_)):
            raise InvalidArgumentError("values", "must be numeric, got a boolean")
        if isinstance(value, decimal.Decimal):
            saw_decimal = True
        elif isinstance(value, (np.integer, np.floating)):
            numpy_dtypes.add(value.dtype)
        elif isinstance(value, int):
            saw_integer = True
        elif isinstance(value, float):
            saw_float = True
        else:
            raise InvalidArgumentError(
                "values", f"must be numeric, got {type(value).__name__}"
            )

    if saw_decimal:
        if saw_float or saw_integer or numpy_dtypes:
            raise InvalidArgumentError("values", "must not mix Decimal with other numbers")
        return _KINDS["decimal"]
    if len(numpy_dtypes) == 1 and not (saw_float or saw_integer):
        return _kind_for_dtype(numpy_dtypes.pop())
    if saw_float or any(dtype.kind == "f" for dtype in numpy_dtypes):
        return _KINDS[DEFAULT_FLOAT_KIND]
    if saw_integer or numpy_dtypes:
        return _KINDS[DEFAULT_INTEGER_KIND]
    return _KINDS[DEFAULT_FLOAT_KIND]


def promote_kinds(first: NumericKind, second: NumericKind) -> NumericKind:
    """Return the narrowest kind that holds values of both ``first`` and ``second``.

    Native kinds follow :func:`numpy.result_type`.  Integers widen into
    ``decimal``; floats and decimals do not mix.
    """

    if first.name == second.name:
        return first
    if first.name == "decimal" or second.name == "decimal":
        exact, other = (first, second) if first.name == "decimal" else (second, first)
        if other.dtype.kind in "iu":
            return exact
        raise InvalidArgumentError("values", "must not mix Decimal with floating point numbers")
    return _kind_for_dtype(np.result_type(first.dtype, second.dtype))


def resolve_kind(kind: Union[str, NumericKind, None], *operands: Any) -> NumericKind:
    """Return ``kind`` as a :class:`NumericKind`.

    When ``kind`` is omitted it is inferred from every operand and widened
    with :func:`promote_kinds`, so no operand loses precision.
    """

    if isinstance(kind, NumericKind):
        return kind
    if kind is not None:
        return get_kind(kind)
    if not operands:
        raise InvalidArgumentError("operands", "must not be empty when kind is omitted")
    return functools.reduce(promote_kinds, (infer_kind(values) for values in operands))
