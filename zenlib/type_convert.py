"""Checked conversions between numeric types and their text forms."""

from __future__ import annotations

import math
import re
import struct
import sys
from enum import Enum

__all__ = [
    "NumericType",
    "safe_numeric_cast",
    "string_to_int",
    "string_to_float",
    "int_to_string",
    "float_to_string",
]

_FLOAT32_MAX = 3.4028234663852886e38
_LLONG_MAX = 2**63 - 1
_FORMAT_LIMIT = 63  # longest text a 64-byte formatting buffer can hold

_FLOAT_PATTERN = re.compile(
    r"(?P<sign>[+-])?(?P<int>[0-9]*)"
    r"(?:\.(?P<frac>[0-9]*))?"
    r"(?:[eE](?P<esign>[+-])?(?P<exp>[0-9]*))?"
)


class NumericType(Enum):
    """Fixed-width numeric types that values can be converted between."""

    BOOL = ("bool", 1, False, True)
    INT8 = ("int8", 8, True, True)
    INT16 = ("int16", 16, True, True)
    INT32 = ("int32", 32, True, True)
    INT64 = ("int64", 64, True, True)
    UINT8 = ("uint8", 8, False, True)
    UINT16 = ("uint16", 16, False, True)
    UINT32 = ("uint32", 32, False, True)
    UINT64 = ("uint64", 64, False, True)
    FLOAT = ("float", 32, True, False)
    DOUBLE = ("double", 64, True, False)

    def __init__(self, label: str, bits: int, signed: bool, integral: bool) -> None:
        self.label = label
        self.bits = bits
        self._signed = signed
        self._integral = integral

    def is_signed(self) -> bool:
        """Whether the type can hold negative values."""
        return self._signed

    def is_integral(self) -> bool:
        """Whether the type holds whole numbers only."""
        return self._integral

    def min_value(self) -> int | float:
        """Lowest finite value the type can hold."""
        if not self._integral:
            return -self.max_value()
        if self is NumericType.BOOL or not self._signed:
            return 0
        return -(2 ** (self.bits - 1))

    def max_value(self) -> int | float:
        """Highest finite value the type can hold."""
        if self is NumericType.FLOAT:
            return _FLOAT32_MAX
        if self is NumericType.DOUBLE:
            return sys.float_info.max
        if self is NumericType.BOOL:
            return 1
        if self._signed:
            return 2 ** (self.bits - 1) - 1
        return 2**self.bits - 1


def _infer_type(value: object) -> NumericType:
    if isinstance(value, bool):
        return NumericType.BOOL
    if isinstance(value, int):
        return NumericType.INT64
    if isinstance(value, float):
        return NumericType.DOUBLE
    raise TypeError(f"not an arithmetic value: {value!r}")


def _coerce(value: int | float, to_type: NumericType) -> bool | int | float:
    if to_type is NumericType.BOOL:
        return bool(value)
    if to_type.is_integral():
        return int(value)
    result = float(value)
    if to_type is NumericType.FLOAT:
        result = struct.unpack("f", struct.pack("f", result))[0]
    return result


def safe_numeric_cast(
    value: int | float,
    to_type: NumericType,
    from_type: NumericType | None = None,
) -> bool | int | float:
    """Convert ``value`` to ``to_type``, raising OverflowError if it does not fit.

    ``from_type`` defaults to BOOL, INT64 or DOUBLE depending on the value.
    """
    if not isinstance(value, (int, float)):
        raise TypeError(f"not an arithmetic value: {value!r}")
    if from_type is None:
        from_type = _infer_type(value)

    if to_type is from_type:
        return _coerce(value, to_type)
    if from_type is NumericType.BOOL:
        return _coerce(1 if value else 0, to_type)
    if to_type is NumericType.BOOL:
        return value != 0

    if isinstance(value, float) and math.isnan(value):
        raise OverflowError("safe_numeric_cast: overflow")
    if value < to_type.min_value() or value > to_type.max_value():
        raise OverflowError("safe_numeric_cast: overflow")
    return _coerce(value, to_type)


def string_to_int(text: str, to_type: NumericType = NumericType.INT64) -> bool | int:
    """Parse a decimal integer with an optional sign into ``to_type``."""
    if not to_type.is_integral():
        raise TypeError("string_to_int: target type must be integral")
    if not text:
        raise ValueError("string_to_int: empty string")

    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text

    result = 0
    for char in digits:
        if not "0" <= char <= "9":
            raise ValueError("string_to_int: invalid character")
        digit = ord(char) - ord("0")
        if result > (_LLONG_MAX - digit) // 10:
            raise OverflowError("string_to_int: overflow")
        result = result * 10 + digit

    if negative:
        result = -result
    return safe_numeric_cast(result, to_type, NumericType.INT64)


def string_to_float(text: str) -> float:
    """Parse a decimal number with optional fraction and exponent."""
    if not text:
        raise ValueError("string_to_float: empty string")
    match = _FLOAT_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError("string_to_float: invalid character")

    result = 0.0
    for char in match["int"]:
        result = result * 10 + (ord(char) - ord("0"))

    fraction = 0.1
    for char in match["frac"] or "":
        result += (ord(char) - ord("0")) * fraction
        fraction *= 0.1

    exponent = int(match["exp"] or "0")
    if match["esign"] == "-":
        exponent = -exponent
    for _ in range(abs(exponent)):
        if result == 0.0 or math.isinf(result):
            break
        result = result * 10 if exponent > 0 else result / 10

    return -result if match["sign"] == "-" else result


def int_to_string(value: int) -> str:
    """Decimal text of an integer."""
    if not isinstance(value, int):
        raise TypeError("int_to_string: value must be integral")
    return str(int(value))


def float_to_string(value: float, precision: int = 6) -> str:
    """Fixed-point text of ``value`` with ``precision`` decimals.

    A negative precision means the default of six; the text is cut to
    63 characters.
    """
    if not isinstance(value, (int, float)):
        raise TypeError("float_to_string: value must be a number")
    if precision < 0:
        precision = 6
    return f"{float(value):.{precision}f}"[:_FORMAT_LIMIT]