"""Runtime checks for the capabilities of types and values."""

from __future__ import annotations

import enum
import types
from typing import Any, Callable

__all__ = [
    "ConstraintError",
    "is_arithmetic",
    "is_integral",
    "is_floating_point",
    "is_class",
    "is_enum",
    "is_function",
    "is_equality_comparable",
    "is_ordered",
    "is_iterable",
    "is_invocable",
    "requires",
]

_CO_VARARGS = 0x04

_ROUTINE_TYPES = (
    types.FunctionType,
    types.LambdaType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.BuiltinMethodType,
    types.WrapperDescriptorType,
    types.MethodWrapperType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
)


class ConstraintError(TypeError):
    """A type constraint was not met."""


def _is_type(tp: object) -> bool:
    return isinstance(tp, type)


def is_integral(tp: object) -> bool:
    """Whether ``tp`` is an integer type (``bool`` included)."""
    return _is_type(tp) and issubclass(tp, int)


def is_floating_point(tp: object) -> bool:
    """Whether ``tp`` is a floating-point type."""
    return _is_type(tp) and issubclass(tp, float)


def is_arithmetic(tp: object) -> bool:
    """Whether ``tp`` is an integer or floating-point type."""
    return is_integral(tp) or is_floating_point(tp)


def is_enum(tp: object) -> bool:
    """Whether ``tp`` is an enumeration."""
    return _is_type(tp) and issubclass(tp, enum.Enum)


def is_class(tp: object) -> bool:
    """Whether ``tp`` is a class that is neither arithmetic nor an enumeration."""
    return _is_type(tp) and not is_arithmetic(tp) and not is_enum(tp)


def is_function(obj: object) -> bool:
    """Whether ``obj`` is a function, method or built-in routine."""
    return isinstance(obj, _ROUTINE_TYPES)


def is_equality_comparable(value: object) -> bool:
    """Whether ``==`` and ``!=`` can be applied to ``value``."""
    try:
        value == value  # noqa: B015
        value != value  # noqa: B015
    except TypeError:
        return False
    return True


def is_ordered(value: object) -> bool:
    """Whether ``<``, ``<=``, ``>`` and ``>=`` can be applied to ``value``."""
    try:
        value < value  # noqa: B015
        value <= value  # noqa: B015
        value > value  # noqa: B015
        value >= value  # noqa: B015
    except TypeError:
        return False
    return True


def is_iterable(value: object) -> bool:
    """Whether ``value`` can be iterated over."""
    try:
        iter(value)  # type: ignore[call-overload]
    except TypeError:
        return False
    return True


def _function_accepts(func: types.FunctionType, count: int, bound: int) -> bool:
    """Whether a Python function takes ``count`` positional arguments after ``bound``."""
    code = func.__code__
    total = code.co_argcount - bound
    defaults = len(func.__defaults__ or ())
    required = max(code.co_argcount - defaults - bound, 0)
    kwdefaults = func.__kwdefaults__ or {}
    kwonly = code.co_varnames[code.co_argcount : code.co_argcount + code.co_kwonlyargcount]
    if any(name not in kwdefaults for name in kwonly):
        return False
    if count < required:
        return False
    return bool(code.co_flags & _CO_VARARGS) or count <= total


def _accepts(func: object, count: int) -> bool | None:
    """Whether ``func`` takes ``count`` positional arguments, or None if unknown."""
    if isinstance(func, types.MethodType):
        inner = func.__func__
        if isinstance(inner, types.FunctionType):
            return _function_accepts(inner, count, 1)
        return None
    if isinstance(func, types.FunctionType):
        return _function_accepts(func, count, 0)
    if isinstance(func, type):
        init = func.__init__
        if isinstance(init, types.FunctionType):
            return _function_accepts(init, count, 1)
        new = func.__new__
        if init is object.__init__ and new is object.__new__:
            return count == 0
        return None
    call = getattr(type(func), "__call__", None)
    if isinstance(call, types.FunctionType):
        return _function_accepts(call, count, 1)
    return None


def is_invocable(func: Callable[..., Any] | object, *args: object) -> bool:
    """Whether ``func`` could be called with ``args``, without calling it."""
    if not callable(func):
        return False
    verdict = _accepts(func, len(args))
    return True if verdict is None else verdict


def requires(condition: bool, message: str = "Type constraint violated") -> None:
    """Raise ConstraintError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise ConstraintError(message)