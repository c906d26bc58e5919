from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture()
def square_pair() -> tuple[list[list[int]], list[list[int]]]:
    return [[1, 2], [3, 4]], [[5, 6], [7, 8]]


@pytest.fixture()
def cube() -> np.ndarray:
    return np.arange(24).reshape(2, 3, 4)
