import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zenlib.type_convert import (
    NumericType,
    float_to_string,
    int_to_string,
    safe_numeric_cast,
    string_to_float,
    string_to_int,
)

INTEGRAL = [t for t in NumericType if t.is_integral() and t is not NumericType.BOOL]


def test_numeric_type_limits_pinned():
    assert NumericType.UINT8.max_value() == 255
    assert NumericType.INT8.min_value() == -128


def test_floating_types_are_not_integral():
    assert not NumericType.FLOAT.is_integral()
    assert not NumericType.DOUBLE.is_integral()
    assert NumericType.FLOAT.max_value() < NumericType.DOUBLE.max_value()
    assert NumericType.DOUBLE.min_value() == -NumericType.DOUBLE.max_value()


@given(st.integers(min_value=-(2**63) + 1, max_value=2**63 - 1))
def test_int_string_round_trip(number):
    assert string_to_int(int_to_string(number)) == number


@pytest.mark.parametrize("numeric_type", INTEGRAL)
@given(data=st.data())
def test_cast_keeps_values_in_range(numeric_type, data):
    number = data.draw(
        st.integers(
            min_value=numeric_type.min_value(), max_value=numeric_type.max_value()
        )
    )
    assert safe_numeric_cast(number, numeric_type, NumericType.INT64) == number


@pytest.mark.parametrize(
    "value, to_type, from_type",
    [
        (-1, NumericType.UINT8, NumericType.INT32),
        (256, NumericType.UINT8, NumericType.INT32),
        (128, NumericType.INT8, NumericType.INT32),
        (2**63, NumericType.INT64, NumericType.UINT64),
        (70000, NumericType.UINT16, NumericType.UINT32),
        (1e20, NumericType.INT32, NumericType.DOUBLE),
        (float("nan"), NumericType.INT32, NumericType.DOUBLE),
    ],
)
def test_cast_overflow(value, to_type, from_type):
    with pytest.raises(OverflowError, match="safe_numeric_cast: overflow"):
        safe_numeric_cast(value, to_type, from_type)


def test_cast_from_bool_gives_one_or_zero():
    assert safe_numeric_cast(True, NumericType.INT32, NumericType.BOOL) == 1
    assert safe_numeric_cast(False, NumericType.DOUBLE, NumericType.BOOL) == 0


def test_cast_to_bool_tests_nonzero():
    assert safe_numeric_cast(5, NumericType.BOOL, NumericType.INT32) is True
    assert safe_numeric_cast(0, NumericType.BOOL, NumericType.INT32) is False


@given(st.floats(min_value=-1e9, max_value=1e9, allow_nan=False))
def test_float_to_int_truncates(value):
    assert safe_numeric_cast(value, NumericType.INT64, NumericType.DOUBLE) == math.trunc(value)


def test_cast_infers_source_type():
    assert safe_numeric_cast(255, NumericType.UINT8) == 255
    with pytest.raises(OverflowError):
        safe_numeric_cast(-5, NumericType.UINT32)


def test_cast_rejects_non_numbers():
    with pytest.raises(TypeError):
        safe_numeric_cast("7", NumericType.INT32)


def test_string_to_int_signs():
    assert string_to_int("+42") == 42
    assert string_to_int("-42") == -42
    assert string_to_int("-") == 0


@pytest.mark.parametrize("text", ["", "12a", "1 2", "--1", "0x10"])
def test_string_to_int_invalid(text):
    with pytest.raises(ValueError):
        string_to_int(text)


def test_string_to_int_overflow():
    with pytest.raises(OverflowError, match="string_to_int: overflow"):
        string_to_int("99999999999999999999")
    with pytest.raises(OverflowError):
        string_to_int("300", NumericType.INT8)
    with pytest.raises(OverflowError):
        string_to_int("-1", NumericType.UINT32)


def test_string_to_int_needs_integral_target():
    with pytest.raises(TypeError):
        string_to_int("1", NumericType.DOUBLE)


def test_string_to_int_into_bool():
    assert string_to_int("17", NumericType.BOOL) is True


@given(st.integers(min_value=-(10**6), max_value=10**6), st.integers(min_value=0, max_value=999))
def test_string_to_float_matches_decimal_text(whole, fraction):
    text = f"{whole}.{fraction:03d}"
    assert string_to_float(text) == pytest.approx(float(text), rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("text", ["1e3", "2.5E-2", "+7.25e+1", "-3.5"])
def test_string_to_float_exponents(text):
    assert string_to_float(text) == pytest.approx(float(text))


@pytest.mark.parametrize("text", ["", "1.2.3", "abc", "1e5x", "+-1"])
def test_string_to_float_invalid(text):
    with pytest.raises(ValueError):
        string_to_float(text)


def test_int_to_string_rejects_floats():
    with pytest.raises(TypeError):
        int_to_string(1.5)


def test_float_to_string_precision():
    text = float_to_string(3.14159, 2)
    assert len(text.split(".")[1]) == 2
    assert float(text) == pytest.approx(3.14159, abs=0.005)


def test_float_to_string_default_and_negative_precision():
    assert len(float_to_string(2.5).split(".")[1]) == 6
    assert float_to_string(2.5, -1) == float_to_string(2.5)


def test_float_to_string_is_cut_to_buffer():
    assert len(float_to_string(1e300)) == 63


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_float_to_string_round_trip(value):
    assert float(float_to_string(value, 6)) == pytest.approx(value, abs=1e-6)