"""
fluentstr Sequence Wrapper.

``ArrayWrapper`` is the ordered list of string fragments returned by the
split-like operations of ``StringWrapper`` (``explode``, ``split``,
``chunks``, ``chars``).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, overload

from fluentstr.option import Nothing, Option, Some

if TYPE_CHECKING:
    from fluentstr.wrapper import StringWrapper


class ArrayWrapper:
    """
    A mutable, ordered list of strings.

    ``pop_front`` and ``pop_back`` change the list; ``map`` and ``filter``
    return new wrappers.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = list(items)

    def get(self) -> list[str]:
        """Return a copy of the items as a plain list."""
        return list(self._items)

    def length(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def at(self, index: int) -> Option[str]:
        """Return the item at index, Nothing outside ``[0, length)``."""
        if 0 <= index < len(self._items):
            return Some(self._items[index])
        return Nothing()

    def first(self) -> Option[str]:
        return self.at(0)

    def last(self) -> Option[str]:
        return self.at(len(self._items) - 1)

    def pop_front(self) -> Option[str]:
        """Remove and return the first item."""
        if self._items:
            return Some(self._items.pop(0))
        return Nothing()

    def pop_back(self) -> Option[str]:
        """Remove and return the last item."""
        if self._items:
            return Some(self._items.pop())
        return Nothing()

    def implode(self, glue: str = "") -> StringWrapper:
        """
        Join the items into a ``StringWrapper``.

        Example:
            ArrayWrapper(["a", "b"]).implode(",") -> StringWrapper("a,b")
        """
        from fluentstr.wrapper import StringWrapper

        return StringWrapper(glue.join(self._items))

    def map(self, func: Callable[[str], str]) -> ArrayWrapper:
        return ArrayWrapper(func(item) for item in self._items)

    def filter(self, predicate: Callable[[str], bool]) -> ArrayWrapper:
        return ArrayWrapper(item for item in self._items if predicate(item))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> ArrayWrapper: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ArrayWrapper(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayWrapper):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArrayWrapper({self._items!r})"
