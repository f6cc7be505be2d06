"""
fluentstr Option Type.

An ``Option`` holds either ``Some(value)`` or ``Nothing()``. Lookups that
may fail (index of a substring, character at a position, first element of
a list) return an Option instead of a sentinel such as ``-1`` or ``None``.

Example:
    first_index_of("abc", "b") -> Some(1)
    first_index_of("abc", "z") -> Nothing()
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from fluentstr.utils.errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Base class for Option variants."""

    __slots__ = ()

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return not self.is_some()

    def unwrap(self) -> T:
        """Return the contained value, or raise ``UnwrapError`` on Nothing."""
        if isinstance(self, Some):
            return self.value
        raise UnwrapError("called unwrap() on an empty Option", "unwrap")

    def unwrap_or(self, default: T) -> T:
        if isinstance(self, Some):
            return self.value
        return default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        if isinstance(self, Some):
            return self.value
        return func()

    def map(self, func: Callable[[T], U]) -> Option[U]:
        """
        Apply a function to the contained value.

        Example:
            Some(2).map(lambda x: x * 2) -> Some(4)
            Nothing().map(lambda x: x * 2) -> Nothing()
        """
        if isinstance(self, Some):
            return Some(func(self.value))
        return Nothing()

    def and_then(self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a lookup that itself returns an Option."""
        if isinstance(self, Some):
            return func(self.value)
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if isinstance(self, Some) and predicate(self.value):
            return self
        return Nothing()

    def __bool__(self) -> bool:
        return self.is_some()

    def __iter__(self) -> Iterator[T]:
        if isinstance(self, Some):
            yield self.value


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Option):
    def __repr__(self) -> str:
        return "Nothing()"


def some(value: T) -> Option[T]:
    """Wrap a present value."""
    return Some(value)


def none() -> Option:
    """Return the empty Option."""
    return Nothing()


def maybe(value: T | None) -> Option[T]:
    """
    Wrap a value that may be ``None``.

    Example:
        maybe(0) -> Some(0)
        maybe(None) -> Nothing()
    """
    if value is None:
        return Nothing()
    return Some(value)
