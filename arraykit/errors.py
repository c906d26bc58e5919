"""Exception types raised by arraykit.

Every error is a contract violation on the caller's side, so nothing here is
retried or recovered from.  Each concrete error also derives from the closest
builtin so that ``except ValueError`` style handlers keep working.
"""

from __future__ import annotations


class ArrayKitError(Exception):
    """Base class for all arraykit errors."""


class InvalidArgumentError(ArrayKitError, ValueError):
    """Raised when a required operand is missing or cannot be interpreted."""

    def __init__(self, argument: str, reason: str = "must not be None") -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} {reason}")


class DimensionMismatchError(ArrayKitError, ValueError):
    """Raised when the inner dimensions of a matrix product do not agree."""

    def __init__(self, left_columns: int, right_rows: int) -> None:
        self.left_columns = left_columns
        self.right_rows = right_rows
        super().__init__(
            "left matrix column count must equal right matrix row count "
            f"(got {left_columns} columns and {right_rows} rows)"
        )


class IndexOutOfRangeError(ArrayKitError, IndexError):
    """Raised when a decoded coordinate falls outside its dimension's bounds."""

    def __init__(self, dimension: int, index: int, lower_bound: int, upper_bound: int) -> None:
        self.dimension = dimension
        self.index = index
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        super().__init__(
            f"index {index} is outside [{lower_bound}, {upper_bound}] for dimension {dimension}"
        )
