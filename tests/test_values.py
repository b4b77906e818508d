"""
Tests for the untagged value types: NumOrString, Dim and TruthyEnum.
"""

import datetime
import json
from enum import Enum

import pytest

from plotspec.serialize import serialize
from plotspec.values import (
    Dim,
    NumOrString,
    TruthyEnum,
    check_range,
    copy_iterable_to_vec,
    owned_string_vector,
    to_num_or_string_wrapper,
)


def _dumps(value):
    return json.dumps(serialize(value))


class _Switch(Enum):
    ON = 'true'
    OFF = 'false'
    LEGEND_ONLY = 'legendonly'
    CAPITALIZED = 'True'


class TestNumOrString:

    @pytest.mark.parametrize("value, expected, kind", [
        ("abc", '"abc"', 'string'),
        (1.5, '1.5', 'float'),
        (-3, '-3', 'int'),
        (42, '42', 'int'),
        (2 ** 64 - 1, '18446744073709551615', 'uint'),
    ])
    def test_serializes_bare_scalar(self, value, expected, kind):
        wrapped = NumOrString.of(value)
        assert _dumps(wrapped) == expected
        assert wrapped.kind == kind

    def test_conversion_is_idempotent(self):
        wrapped = NumOrString.of("x")
        assert NumOrString.of(wrapped) is wrapped

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            NumOrString.of(True)

    def test_rejects_non_scalar(self):
        with pytest.raises(TypeError):
            NumOrString.of([1, 2])

    def test_rejects_integer_beyond_64_bits(self):
        with pytest.raises(ValueError):
            NumOrString.of(2 ** 64)
        with pytest.raises(ValueError):
            NumOrString.of(-2 ** 63 - 1)

    def test_collection_preserves_order_and_kinds(self):
        values = to_num_or_string_wrapper([1, "two", 3.5])
        assert serialize(values) == [1, "two", 3.5]

    def test_numpy_scalars_are_unwrapped(self):
        np = pytest.importorskip("numpy")
        assert _dumps(NumOrString.of(np.int64(7))) == '7'
        assert _dumps(NumOrString.of(np.float32(0.5))) == '0.5'


class TestTruthyEnum:

    def test_true_and_false_become_booleans(self):
        assert serialize(TruthyEnum(_Switch.ON)) is True
        assert serialize(TruthyEnum(_Switch.OFF)) is False
        assert _dumps(TruthyEnum(_Switch.ON)) == 'true'
        assert _dumps(TruthyEnum(_Switch.OFF)) == 'false'

    def test_other_variants_stay_strings(self):
        assert _dumps(TruthyEnum(_Switch.LEGEND_ONLY)) == '"legendonly"'

    def test_match_is_case_sensitive(self):
        assert serialize(TruthyEnum(_Switch.CAPITALIZED)) == 'True'


class TestDim:

    def test_scalar_serializes_bare_value(self):
        assert _dumps(Dim.scalar("abc")) == '"abc"'
        assert Dim.scalar("abc").length() is None

    def test_vector_serializes_array_in_order(self):
        dim = Dim.vector(["a", "b"])
        assert serialize(dim) == ["a", "b"]
        assert dim.length() == 2

    def test_vector_keeps_duplicates(self):
        assert serialize(Dim.vector(v for v in ["a", "a", "b"])) == ["a", "a", "b"]

    def test_vector_of_enums(self):
        assert serialize(Dim.vector([_Switch.LEGEND_ONLY, _Switch.ON])) == ['legendonly', 'true']


def test_owned_string_vector_converts_to_str():
    assert owned_string_vector(["a", 1, 2.5]) == ["a", "1", "2.5"]


def test_copy_iterable_to_vec_accepts_generators():
    assert copy_iterable_to_vec(i * 2 for i in range(3)) == [0, 2, 4]


def test_check_range_bounds_are_inclusive():
    check_range('value', 0.0, 0.0, 1.0)
    check_range('value', 1.0, 0.0, 1.0)
    with pytest.raises(ValueError, match="value must be between"):
        check_range('value', 1.01, 0.0, 1.0)


def test_vector_rejects_single_string():
    with pytest.raises(TypeError):
        Dim.vector("ab")
    with pytest.raises(TypeError):
        owned_string_vector("ab")


@pytest.mark.parametrize("value", [float('nan'), float('inf'), float('-inf')])
def test_non_finite_floats_serialize_as_null(value):
    assert serialize(value) is None
    assert serialize(NumOrString.of(value)) is None
    assert serialize([1.0, value]) == [1.0, None]


def test_dates_serialize_as_iso_strings():
    assert serialize(datetime.date(2024, 1, 31)) == '2024-01-31'
    assert serialize(datetime.datetime(2024, 1, 31, 8, 0, 5)) == '2024-01-31T08:00:05'
    assert serialize(datetime.time(23, 59)) == '23:59:00'
