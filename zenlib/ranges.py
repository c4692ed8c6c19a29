"""Chainable views over iterables: filter, transform, visit and count."""

from __future__ import annotations

from collections.abc import Iterator, Sized
from typing import Callable, Generic, Iterable, TypeVar

__all__ = [
    "RangeView",
    "view",
    "filter_view",
    "transform_view",
    "for_each",
]

T = TypeVar("T")
U = TypeVar("U")


class RangeView(Generic[T]):
    """A re-iterable view over a sequence of elements.

    One-shot iterators are read once, up front, so that the view can be
    walked as often as needed. ``filter`` and ``transform`` produce new
    views holding their results.
    """

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        if isinstance(iterable, RangeView):
            items: Iterable[T] = iterable._items
        elif isinstance(iterable, Iterator):
            items = tuple(iterable)
        else:
            iter(iterable)  # raises TypeError for non-iterables
            items = iterable
        self._items = items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        if isinstance(self._items, Sized):
            return len(self._items)
        return sum(1 for _ in self._items)

    def __repr__(self) -> str:
        return f"RangeView({list(self._items)!r})"

    def filter(self, predicate: Callable[[T], object]) -> RangeView[T]:
        """A view of the elements for which ``predicate`` is true."""
        return RangeView([item for item in self._items if predicate(item)])

    def transform(self, func: Callable[[T], U]) -> RangeView[U]:
        """A view of ``func`` applied to every element, in order."""
        return RangeView([func(item) for item in self._items])

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on every element, in order."""
        for item in self._items:
            func(item)

    def count_if(self, predicate: Callable[[T], object]) -> int:
        """Number of elements for which ``predicate`` is true."""
        return sum(1 for item in self._items if predicate(item))

    def empty(self) -> bool:
        """Whether the view holds no elements."""
        for _ in self._items:
            return False
        return True


def view(iterable: Iterable[T]) -> RangeView[T]:
    """A view over ``iterable``."""
    return RangeView(iterable)


def filter_view(iterable: Iterable[T], predicate: Callable[[T], object]) -> RangeView[T]:
    """A view of the elements of ``iterable`` that satisfy ``predicate``."""
    return view(iterable).filter(predicate)


def transform_view(iterable: Iterable[T], func: Callable[[T], U]) -> RangeView[U]:
    """A view of ``func`` applied to every element of ``iterable``."""
    return view(iterable).transform(func)


def for_each(iterable: Iterable[T], func: Callable[[T], object]) -> None:
    """Call ``func`` on every element of ``iterable``, in order."""
    view(iterable).for_each(func)