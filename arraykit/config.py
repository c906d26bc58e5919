"""Configuration defaults for arraykit.

The module centralises defaults so that the numeric kinds, the decoder and the
tests agree on them.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass

DEFAULT_INTEGER_KIND = "int64"
DEFAULT_FLOAT_KIND = "float64"
DEFAULT_DECIMAL_PRECISION = 28
NOT_FOUND = -1


@dataclass(frozen=True, slots=True)
class DecimalSettings:
    """Arithmetic context used by the ``decimal`` numeric kind.

    Parameters
    ----------
    precision:
        Number of significant digits kept by every addition and
        multiplication.
    rounding:
        One of the :mod:`decimal` rounding mode constants.

    >>> DecimalSettings().describe()
    'precision=28 rounding=ROUND_HALF_EVEN'
    """

    precision: int = DEFAULT_DECIMAL_PRECISION
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError("precision must be a positive integer")

    def context(self) -> decimal.Context:
        return decimal.Context(prec=self.precision, rounding=self.rounding)

    def describe(self) -> str:
        return f"precision={self.precision} rounding={self.rounding}"
