# zenlib

zenlib is a small library of type utilities. It has no dependencies outside the standard library and runs on Python 3.10 and later.

## Modules

### `zenlib.type_convert`

This module converts between numeric types and text, and it checks bounds as it goes.

- `NumericType` is an enum of fixed-width targets: `BOOL`, `INT8` to `INT64`, `UINT8` to `UINT64`, `FLOAT` (32-bit) and `DOUBLE`. Each member has four methods: `is_signed()`, `is_integral()`, `min_value()` and `max_value()`.
- `safe_numeric_cast(value, to_type, from_type=None)` converts `value` to `to_type`. It raises `OverflowError` if the value is out of range or is NaN.
  - If `from_type` is not given, it is worked out from the value: `BOOL`, `INT64` or `DOUBLE`.
  - A cast to `BOOL` tests the value against zero.
  - A cast to `FLOAT` rounds the value to single precision.
- `string_to_int(text, to_type=NumericType.INT64)` reads a decimal integer that may start with a sign.
  - It raises `ValueError` if the text is empty or holds a character that is not valid.
  - It raises `OverflowError` if the value goes past the 64-bit signed range, or past the range of the target type.
- `string_to_float(text)` reads digits that may have a sign, a fraction and an exponent, such as `-1.5e3`. It raises `ValueError` if the text is empty or holds a character that is not valid.
- `int_to_string(value)` returns the decimal text of an integer.
- `float_to_string(value, precision=6)` returns the value in fixed-point form.
  - A negative precision is treated as 6.
  - The text is cut to 63 characters.

### `zenlib.concepts`

This module has checks that run at runtime.

- `is_arithmetic`, `is_integral`, `is_floating_point`, `is_class` and `is_enum` take a type.
- `is_function` takes an object. It is true for functions, methods and built-in routines.
- `is_equality_comparable`, `is_ordered` and `is_iterable` take a value and try the operation on it.
- `is_invocable(func, *args)` tells whether `func` looks callable with that many positional arguments. It does not call `func`.
- `requires(condition, message="Type constraint violated")` raises `ConstraintError` when `condition` is false. `ConstraintError` is a subclass of `TypeError`.

### `zenlib.ranges`

`RangeView` is a view over an iterable that you can walk more than once. A one-shot iterator is read in full when the view is built. A view supports:

- `len()` and iteration;
- `filter(predicate)` and `transform(func)`, which each return a new view that holds its results;
- `for_each(func)`;
- `count_if(predicate)`;
- `empty()`.

Four helpers work on any iterable: `view(iterable)`, `filter_view(iterable, predicate)`, `transform_view(iterable, func)` and `for_each(iterable, func)`.

### `zenlib.type_erasure`

The module has three holders.

- `AnyFunction(func)` owns a copy of a callable.
  - `get(expected_type)` returns the callable if its type is exactly `expected_type`. Otherwise it raises `TypeError`.
  - Calling the holder itself raises `RuntimeError`, or `TypeError` when it is empty.
  - `copy()` returns an independent holder.
- `FunctionView(func)` holds a reference to a callable and calls it. Calling an empty view raises `TypeError`.
- `Any(value)` holds a copy of any one value.
  - `has_value()` tells whether a value is held.
  - `type()` returns the type of the held value, or `NoneType` when the holder is empty.
  - `get(expected_type)` returns the value if its type is exactly `expected_type`. Otherwise it raises `TypeError`.
  - `reset()`, `swap(other)` and `copy()` are also provided.

## Examples

```python
from zenlib.type_convert import NumericType, safe_numeric_cast, string_to_int

safe_numeric_cast(200, NumericType.UINT8, NumericType.INT32)   # 200
safe_numeric_cast(-1, NumericType.UINT8, NumericType.INT32)    # raises OverflowError
string_to_int("-42", NumericType.INT16)                        # -42
```

```python
from zenlib.ranges import view

evens_squared = view([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).transform(lambda x: x * x)
list(evens_squared)   # [4, 16]
```

```python
from zenlib.type_erasure import Any, FunctionView

box = Any(3)
box.get(int)     # 3
box.get(str)     # raises TypeError

FunctionView(len)("abc")   # 3
```

## What it does not do

zenlib is a library only. It has no command-line program. It does not include containers, logging, networking or threading utilities.

## Running the tests

```
pip install ".[test]"
pytest
```