"""Type-erased holders for callables and arbitrary values."""

from __future__ import annotations

import copy as _copy
from typing import Any as _AnyType
from typing import Callable

__all__ = ["AnyFunction", "FunctionView", "Any"]

_EMPTY = object()


class AnyFunction:
    """Owns a copy of a callable whose signature is not known.

    The callable can be recovered with ``get`` but not called through this
    holder; use ``FunctionView`` to call.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[..., _AnyType] | AnyFunction | None = None) -> None:
        if isinstance(func, AnyFunction):
            self._func = None if func._func is None else _copy.copy(func._func)
        else:
            self._func = func

    def __bool__(self) -> bool:
        return self._func is not None

    def __call__(self, *args: _AnyType, **kwargs: _AnyType) -> _AnyType:
        if self._func is None:
            raise TypeError("bad function call")
        raise RuntimeError(
            "any_function cannot be invoked directly, use function_view instead"
        )

    def get(self, expected_type: type) -> Callable[..., _AnyType]:
        """The held callable, if it is exactly of ``expected_type``."""
        if self._func is None or type(self._func) is not expected_type:
            raise TypeError("bad cast")
        return self._func

    def copy(self) -> AnyFunction:
        """An independent holder with a copy of the callable."""
        return AnyFunction(self)

    __copy__ = copy


class FunctionView:
    """A non-owning, callable reference to a callable."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[..., _AnyType] | FunctionView | None = None) -> None:
        if isinstance(func, FunctionView):
            self._func = func._func
            return
        if func is not None and not callable(func):
            raise TypeError(f"not callable: {func!r}")
        self._func = func

    def __bool__(self) -> bool:
        return self._func is not None

    def __call__(self, *args: _AnyType, **kwargs: _AnyType) -> _AnyType:
        if self._func is None:
            raise TypeError("bad function call")
        return self._func(*args, **kwargs)


class Any:
    """Holds a single value of any type, with value semantics on copy."""

    __slots__ = ("_value",)

    def __init__(self, *args: _AnyType) -> None:
        if len(args) > 1:
            raise TypeError(f"Any takes at most one value, got {len(args)}")
        if not args:
            self._value = _EMPTY
        elif isinstance(args[0], Any):
            other = args[0]
            self._value = _EMPTY if other._value is _EMPTY else _copy.copy(other._value)
        else:
            self._value = _copy.copy(args[0])

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "Any()"
        return f"Any({self._value!r})"

    def has_value(self) -> bool:
        """Whether a value is held."""
        return self._value is not _EMPTY

    def type(self) -> type:
        """Type of the held value, or ``NoneType`` when empty."""
        return type(None) if self._value is _EMPTY else type(self._value)

    def reset(self) -> None:
        """Drop the held value."""
        self._value = _EMPTY

    def get(self, expected_type: type) -> _AnyType:
        """The held value, if it is exactly of ``expected_type``."""
        if self._value is _EMPTY or type(self._value) is not expected_type:
            raise TypeError("bad cast")
        return self._value

    def swap(self, other: Any) -> None:
        """Exchange contents with ``other``."""
        self._value, other._value = other._value, self._value

    def copy(self) -> Any:
        """An independent holder with a copy of the value."""
        return Any(self)

    __copy__ = copy