from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest

from arraykit.config import DEFAULT_DECIMAL_PRECISION, DecimalSettings
from arraykit.errors import InvalidArgumentError
from arraykit.numeric import available_kinds, get_kind, infer_kind, promote_kinds, resolve_kind


@pytest.mark.parametrize(
    "values,expected",
    [
        (np.zeros((2, 2), dtype=np.int32), "int32"),
        (np.zeros((2, 2), dtype=np.int64), "int64"),
        (np.zeros((2, 2), dtype=np.int16), "int64"),
        (np.zeros((2, 2), dtype=np.float16), "float32"),
        (np.zeros((2, 2), dtype=np.float32), "float32"),
        (np.zeros((2, 2)), "float64"),
        ([[1, 2]], "int64"),
        ([[1, 2.5]], "float64"),
        ([[Decimal("1.5")]], "decimal"),
        ([[np.float32(1), np.float32(2)]], "float32"),
        ([[np.float32(1), 2]], "float64"),
        ([], "float64"),
    ],
)
def test_infer_kind(values, expected):
    assert infer_kind(values).name == expected


@pytest.mark.parametrize(
    "values",
    [
        [[True, False]],
        [[Decimal(1), 2]],
        [["1"]],
        np.array([[1 + 2j]]),
    ],
)
def test_infer_kind_rejects_non_numeric(values):
    with pytest.raises(InvalidArgumentError):
        infer_kind(values)


def test_registry():
    assert available_kinds() == ["decimal", "float32", "float64", "int32", "int64"]
    with pytest.raises(InvalidArgumentError, match="kind"):
        get_kind("int128")
    kind = get_kind("float32")
    assert resolve_kind(kind, [[1]]) is kind
    assert resolve_kind("int32", [[1.5]]).name == "int32"
    assert resolve_kind(None, [[1.5]]).name == "float64"


def test_identities_have_the_storage_type():
    for name in ("int32", "int64", "float32", "float64"):
        kind = get_kind(name)
        assert kind.zero.dtype == kind.dtype
        assert kind.one == 1
    assert get_kind("decimal").zero == Decimal(0)


def test_decimal_scalar_conversion():
    to_decimal = get_kind("decimal").scalar
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(np.int32(3)) == Decimal(3)
    assert to_decimal("2.50") == Decimal("2.50")
    with pytest.raises(TypeError):
        to_decimal(True)


def test_decimal_settings():
    settings = DecimalSettings()
    assert settings.precision == DEFAULT_DECIMAL_PRECISION
    assert settings.context().prec == DEFAULT_DECIMAL_PRECISION
    with pytest.raises(ValueError):
        DecimalSettings(precision=0)


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ("int32", "int32", "int32"),
        ("int32", "int64", "int64"),
        ("int64", "float32", "float64"),
        ("float32", "float64", "float64"),
        ("int64", "decimal", "decimal"),
    ],
)
def test_promote_kinds(first, second, expected):
    assert promote_kinds(get_kind(first), get_kind(second)).name == expected
    assert promote_kinds(get_kind(second), get_kind(first)).name == expected


def test_promote_kinds_refuses_float_with_decimal():
    with pytest.raises(InvalidArgumentError):
        promote_kinds(get_kind("float64"), get_kind("decimal"))


def test_resolve_kind_widens_across_operands():
    assert resolve_kind(None, [[1]], [[0.5]]).name == "float64"
    assert resolve_kind(None, np.zeros((1, 1), dtype=np.int32), [[1]]).name == "int64"


def test_native_scalars_reject_booleans():
    with pytest.raises(TypeError):
        get_kind("int64").scalar(True)
    assert get_kind("int32").scalar(7) == 7
