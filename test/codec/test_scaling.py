"""Tests for scale factor handling."""

import pytest

from regcodec.codec.scaling import apply_factor, is_scaling_enabled, scaled_value_type
from regcodec.model.enum.value_type_enum import ValueType


class TestApplyFactor:
    def test_when_decoding_with_factor_then_multiplies(self):
        assert apply_factor(100, 0.1) == pytest.approx(10.0)

    def test_when_encoding_with_factor_then_divides(self):
        assert apply_factor(10.0, 0.1, divide=True) == pytest.approx(100.0)

    def test_when_factor_zero_then_identity_in_both_directions(self):
        assert apply_factor(42, 0) == 42
        assert apply_factor(42, 0, divide=True) == 42

    def test_when_factor_none_then_identity(self):
        assert apply_factor(42, None) == 42

    def test_when_value_is_text_then_unchanged(self):
        assert apply_factor("ABC", 10) == "ABC"

    def test_when_value_is_boolean_then_unchanged(self):
        assert apply_factor(True, 10) is True

    def test_when_integer_factor_then_integer_result(self):
        result = apply_factor(7, 10)
        assert result == 70
        assert isinstance(result, int)

    def test_when_integer_divided_evenly_then_exact_integer(self):
        result = apply_factor(2**63 - 2, 2, divide=True)
        assert result == 2**62 - 1
        assert isinstance(result, int)

    def test_when_integer_divided_by_whole_float_factor_then_exact_integer(self):
        assert apply_factor(2**53 + 1, 1.0, divide=True) == 2**53 + 1

    def test_when_integer_division_leaves_remainder_then_float(self):
        result = apply_factor(7, 2, divide=True)
        assert result == 3.5
        assert isinstance(result, float)


class TestScaledValueType:
    def test_when_unsigned_without_factor_then_int(self):
        assert scaled_value_type(ValueType.UNSIGNED_INTEGER, 0) is int

    def test_when_integer_with_float_factor_then_float(self):
        assert scaled_value_type(ValueType.SIGNED_INTEGER, 0.01) is float
        assert scaled_value_type(ValueType.UNSIGNED_INTEGER, 2.0) is float

    def test_when_integer_with_integer_factor_then_int(self):
        assert scaled_value_type(ValueType.UNSIGNED_INTEGER, 10) is int

    def test_when_other_types_then_own_python_type(self):
        assert scaled_value_type(ValueType.BOOLEAN, 0.5) is bool
        assert scaled_value_type(ValueType.FLOAT, 0) is float
        assert scaled_value_type(ValueType.TEXT, 3) is str


def test_is_scaling_enabled():
    assert is_scaling_enabled(0.1)
    assert not is_scaling_enabled(0)
    assert not is_scaling_enabled(0.0)
    assert not is_scaling_enabled(None)
