"""Dense matrix products and rank-agnostic index lookup."""

from importlib import metadata

from .errors import ArrayKitError, DimensionMismatchError, IndexOutOfRangeError, InvalidArgumentError
from .find_index import IndexWithRank, find_index, find_index_with_rank
from .multiply import MatrixProduct, multiply, multiply_with_shape
from .numeric import NumericKind, available_kinds, decimal_kind, get_kind, infer_kind, promote_kinds
from .ranked import Dimension, RankedArray

__all__ = [
    "ArrayKitError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "IndexWithRank",
    "find_index",
    "find_index_with_rank",
    "MatrixProduct",
    "multiply",
    "multiply_with_shape",
    "NumericKind",
    "available_kinds",
    "decimal_kind",
    "get_kind",
    "infer_kind",
    "promote_kinds",
    "Dimension",
    "RankedArray",
]


def __getattr__(name: str):
    if name == "__version__":
        try:
            return metadata.version("arraykit")
        except metadata.PackageNotFoundError:  # pragma: no cover - best effort
            return "0"
    raise AttributeError(name)
