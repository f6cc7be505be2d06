"""
fluentstr String Wrapper.

``StringWrapper`` holds one text value and exposes chainable methods for
searching, slicing, casing, trimming, replacing and splitting it.

Every transformation returns a new wrapper and leaves the receiver
untouched. To transform a wrapper in place, go through its ``inplace``
view, which stores each resulting value back into the wrapper:

    name = StringWrapper("  Hello World  ")
    name.trim().slugify().get()        -> "hello-world"   (name unchanged)
    name.inplace.trim().to_upper_case()                   (name is "HELLO WORLD")

Lookups that can fail return an ``Option``:

    StringWrapper("abc").first_index_of("c") -> Some(2)
    StringWrapper("abc").at(5)               -> Nothing()
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, Optional, Union

from fluentstr import text
from fluentstr.option import Nothing, Option, Some
from fluentstr.sequence import ArrayWrapper
from fluentstr.utils.errors import FormatArgumentsError, InvalidArgumentError

Pattern = Union[str, re.Pattern]

_WHITESPACE_RUN = re.compile(r"\s+")
_INNER_UPPER = re.compile(r"\B([A-Z])", re.ASCII)
_CAMEL_BOUNDARY = re.compile(r"[-_.]([a-z])", re.IGNORECASE | re.ASCII)
_NON_SLUG_RUN = re.compile(r"[^a-z0-9-]+", re.IGNORECASE | re.ASCII)


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def _groups(match: re.Match[str]) -> list[str]:
    """Whole match followed by every capture group, unmatched groups as ''."""
    return [match.group(0)] + [group if group is not None else "" for group in match.groups()]


class StringWrapper:
    """
    A fluent wrapper around a single string value.

    The wrapped value may be ``None``, which is distinct from the empty
    string for ``is_null()`` but is read as ``""`` by every other
    operation.

    Attributes:
        value: The wrapped string, or None
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value

    # =========================================================================
    # Basic Access
    # =========================================================================

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def inplace(self) -> InPlace:
        """View of this wrapper whose transformations update it in place."""
        return InPlace(self)

    def get(self) -> str:
        """Return the wrapped string, or '' when it is None."""
        return self._value if self._value is not None else ""

    def copy(self) -> StringWrapper:
        return StringWrapper(self._value)

    def length(self) -> int:
        """Return the number of code points."""
        return len(self.get())

    def is_empty(self) -> bool:
        return not self._value

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def is_null(self) -> bool:
        return self._value is None

    def is_not_null(self) -> bool:
        return self._value is not None

    def is_equal_to(self, other: str) -> bool:
        return self._value == other

    def at(self, index: int) -> Option[str]:
        """Return the character at index, Nothing outside ``[0, length)``."""
        if 0 <= index < self.length():
            return Some(self.get()[index])
        return Nothing()

    # =========================================================================
    # Searching & Predicates
    # =========================================================================

    def begins_with(self, prefix: str) -> bool:
        return self.get().startswith(prefix)

    def ends_with(self, suffix: str) -> bool:
        return self.get().endswith(suffix)

    def first_index_of(self, needle: str, offset: int = 0) -> Option[int]:
        """
        Find the first occurrence of needle at or after offset.

        A negative offset counts from the end of the string.

        Example:
            StringWrapper("abcabc").first_index_of("b") -> Some(1)
            StringWrapper("abcabc").first_index_of("b", 2) -> Some(4)
            StringWrapper("abcabc").first_index_of("x") -> Nothing()
        """
        index = text.find_first(self.get(), needle, offset)
        return Some(index) if index >= 0 else Nothing()

    def last_index_of(self, needle: str, offset: int = 0) -> Option[int]:
        """
        Find the last occurrence of needle.

        With a non-negative offset the match must start at or after it;
        with a negative offset it must start at or before
        ``length() + offset``.
        """
        index = text.find_last(self.get(), needle, offset)
        return Some(index) if index >= 0 else Nothing()

    def contains(self, needle: str) -> bool:
        return self.first_index_of(needle).is_some()

    def match(self, pattern: Pattern, matches: Optional[list[str]] = None) -> bool:
        """
        Test whether pattern matches anywhere in the string.

        Args:
            pattern: Regular expression, as a string or compiled pattern
            matches: Optional list that is cleared and, on success, filled
                with the whole match followed by the capture groups

        Returns:
            True if the pattern matched
        """
        found = _compile(pattern).search(self.get())
        if matches is not None:
            matches.clear()
            if found is not None:
                matches.extend(_groups(found))
        return found is not None

    def similarity(self, other: Union[str, StringWrapper]) -> tuple[int, float]:
        """
        Compare with another string by recursive longest common substring.

        Returns:
            ``(common, percent)`` where common is the number of matched
            characters and percent is ``2 * common / total length * 100``
        """
        return text.similar_text(self.get(), str(other))

    def is_alpha_numeric(self) -> bool:
        return text.is_alnum(self.get())

    def is_alpha(self) -> bool:
        return text.is_alpha(self.get())

    def is_control(self) -> bool:
        return text.is_control(self.get())

    def is_digit(self) -> bool:
        return text.is_digit(self.get())

    def is_lower_case(self) -> bool:
        return text.is_lower(self.get())

    def is_upper_case(self) -> bool:
        return text.is_upper(self.get())

    def is_punctuation(self) -> bool:
        return text.is_punct(self.get())

    def is_space(self) -> bool:
        return text.is_space(self.get())

    def is_hexadecimal(self) -> bool:
        return text.is_xdigit(self.get())

    # =========================================================================
    # Slicing & Extraction
    # =========================================================================

    def substring(self, offset: int, length: Optional[int] = None) -> StringWrapper:
        """
        Return ``length`` characters starting at ``offset``.

        Negative offsets count from the end; a negative length leaves that
        many characters off the end. See ``fluentstr.text.substr``.
        """
        return StringWrapper(text.substr(self.get(), offset, length))

    def slice(self, lhs: int, rhs: int) -> StringWrapper:
        return self.substring(lhs, rhs - lhs)

    def before(self, value: str) -> StringWrapper:
        """Text before the first occurrence of value, or the whole string."""
        index = self.first_index_of(value)
        if index.is_some():
            return self.substring(0, index.unwrap())
        return StringWrapper(self.get())

    def until(self, value: str) -> StringWrapper:
        return self.before(value)

    def after(self, value: str) -> StringWrapper:
        """Text after the first occurrence of value, or ''."""
        index = self.first_index_of(value)
        if index.is_some():
            return self.substring(index.unwrap() + len(value))
        return StringWrapper("")

    def from_(self, value: str) -> StringWrapper:
        """Text from the first occurrence of value onwards, or ''."""
        index = self.first_index_of(value)
        if index.is_some():
            return self.substring(index.unwrap())
        return StringWrapper("")

    def between(self, left: str, right: str) -> StringWrapper:
        """
        Return the trimmed text between left and the next right after it.

        Example:
            StringWrapper("text[ inner ]more").between("[", "]") -> "inner"
        """
        start = self.first_index_of(left).map(lambda index: index + len(left))
        end = start.and_then(lambda index: self.first_index_of(right, index))
        if start.is_none() or end.is_none():
            return StringWrapper("")

        return self.slice(start.unwrap(), end.unwrap()).trim()

    def from_first_occurrence_of(
        self, needle: str, include_needle: bool = False
    ) -> Option[StringWrapper]:
        """Tail after (or, with include_needle, from) the first needle."""
        value = self.get()
        return self.first_index_of(needle).map(
            lambda index: StringWrapper(value[index if include_needle else index + len(needle) :])
        )

    def from_last_occurrence_of(
        self, needle: str, include_needle: bool = False
    ) -> Option[StringWrapper]:
        """Tail after (or, with include_needle, from) the last needle."""
        value = self.get()
        return self.last_index_of(needle).map(
            lambda index: StringWrapper(value[index if include_needle else index + len(needle) :])
        )

    # =========================================================================
    # Case, Trimming & Formatting
    # =========================================================================

    def to_upper_case(self) -> StringWrapper:
        return StringWrapper(self.get().upper())

    def to_lower_case(self) -> StringWrapper:
        return StringWrapper(self.get().lower())

    def upper_case_first(self) -> StringWrapper:
        return StringWrapper(text.upper_first(self.get()))

    def lower_case_first(self) -> StringWrapper:
        return StringWrapper(text.lower_first(self.get()))

    def to_ascii(self) -> StringWrapper:
        return StringWrapper(text.to_ascii(self.get()))

    def trim(self, mask: Optional[str] = None) -> StringWrapper:
        """
        Strip mask characters from both ends.

        The default mask is space, tab, newline, carriage return, NUL and
        vertical tab. Masks may contain ranges such as ``a..z``.
        """
        return StringWrapper(text.trim(self.get(), mask))

    def left_trim(self, mask: Optional[str] = None) -> StringWrapper:
        return StringWrapper(text.trim_left(self.get(), mask))

    def right_trim(self, mask: Optional[str] = None) -> StringWrapper:
        return StringWrapper(text.trim_right(self.get(), mask))

    def underscored(self) -> StringWrapper:
        """
        Remove whitespace and put '_' before inner uppercase letters.

        Example:
            StringWrapper("FooBar Baz").underscored() -> "Foo_Bar_Baz"
        """
        return self.regex_replace({_WHITESPACE_RUN: "", _INNER_UPPER: r"_\1"})

    def dasherize(self) -> StringWrapper:
        """Remove whitespace and put '-' before inner uppercase letters."""
        return self.regex_replace({_WHITESPACE_RUN: "", _INNER_UPPER: r"-\1"})

    def camelize(self) -> StringWrapper:
        """
        Join words separated by whitespace, '-', '_' or '.' in camel case.

        Example:
            StringWrapper("foo_bar-baz").camelize() -> "fooBarBaz"
        """
        return (
            self.trim()
            .regex_replace({_WHITESPACE_RUN: "_"})
            .regex_replace_callback(_CAMEL_BOUNDARY, lambda groups: groups[1].upper())
        )

    def slugify(self, delimiter: str = "-") -> StringWrapper:
        """
        Turn the string into a lower-case URL slug.

        Example:
            StringWrapper("Hello, World!").slugify() -> "hello-world"
        """
        slug = text.trim(self.get())
        slug = _NON_SLUG_RUN.sub(" ", slug)
        slug = _WHITESPACE_RUN.sub(lambda _: delimiter, slug)
        return StringWrapper(slug.lower()).trim(delimiter)

    def format(self, *args: Any, **kwargs: Any) -> StringWrapper:
        """
        Substitute printf-style placeholders.

        Positional arguments fill ``%s``/``%d`` placeholders, keyword
        arguments fill ``%(name)s`` placeholders. Positional arguments
        beyond the template's placeholders are ignored. Without arguments
        the string is returned unchanged.
        """
        if args and kwargs:
            raise FormatArgumentsError(
                "positional and keyword arguments cannot be mixed", "format"
            )
        if kwargs:
            return StringWrapper(self.get() % kwargs)
        if args:
            return StringWrapper(self.get() % args[: text.count_conversions(self.get())])
        return StringWrapper(self.get())

    def repeat(self, times: int) -> StringWrapper:
        return StringWrapper(self.get() * max(times, 0))

    def reverse(self) -> StringWrapper:
        return StringWrapper(self.get()[::-1])

    def encode(self) -> StringWrapper:
        """HTML-escape ``& < > " '``."""
        return StringWrapper(text.escape_html(self.get()))

    def prefix(self, value: str) -> StringWrapper:
        return StringWrapper(value + self.get())

    def suffix(self, value: str) -> StringWrapper:
        return StringWrapper(self.get() + value)

    def default(self, value: str) -> StringWrapper:
        """Return value if this wrapper is empty, otherwise a copy."""
        if self.is_empty():
            return StringWrapper(value)
        return StringWrapper(self.get())

    def apply(self, func: Callable[[str], str]) -> StringWrapper:
        return StringWrapper(func(self.get()))

    # =========================================================================
    # Replacement
    # =========================================================================

    def replace(self, mapping: Mapping[str, str]) -> StringWrapper:
        """
        Replace every needle in one pass over the original string.

        Replaced text is never searched again, and where needles overlap
        the longest one wins.

        Example:
            StringWrapper("abc").replace({"a": "1", "b": "2"}) -> "12c"
        """
        return StringWrapper(text.replace_all(self.get(), mapping))

    def replace_sequential(self, mapping: Mapping[str, str]) -> StringWrapper:
        """
        Replace needles one pair after another.

        Each pair runs on the output of the previous one.

        Example:
            StringWrapper("ab").replace_sequential({"a": "b", "b": "c"}) -> "cc"
        """
        return StringWrapper(text.replace_sequential(self.get(), mapping))

    def replace_first(self, mapping: Mapping[str, str]) -> StringWrapper:
        value = self.get()
        for needle, replacement in mapping.items():
            index = text.find_first(value, needle)
            if index >= 0:
                value = value[:index] + replacement + value[index + len(needle) :]
        return StringWrapper(value)

    def replace_last(self, mapping: Mapping[str, str]) -> StringWrapper:
        value = self.get()
        for needle, replacement in mapping.items():
            index = text.find_last(value, needle)
            if index >= 0:
                value = value[:index] + replacement + value[index + len(needle) :]
        return StringWrapper(value)

    def regex_replace(self, mapping: Mapping[Pattern, str]) -> StringWrapper:
        """
        Replace all matches of each pattern, one pattern after another.

        Replacements may reference groups as ``\\1`` or ``\\g<name>``.
        """
        value = self.get()
        for pattern, replacement in mapping.items():
            value = _compile(pattern).sub(replacement, value)
        return StringWrapper(value)

    def regex_replace_callback(
        self, pattern: Pattern, callback: Callable[[list[str]], str]
    ) -> StringWrapper:
        """
        Replace all matches with the result of callback.

        The callback receives the whole match followed by the capture
        groups, e.g. ``["-b", "b"]`` for pattern ``-(\\w)`` on ``"a-b"``.
        """
        return StringWrapper(_compile(pattern).sub(lambda m: callback(_groups(m)), self.get()))

    # =========================================================================
    # Splitting & Chunking
    # =========================================================================

    def explode(self, delimiter: str, limit: Optional[int] = None) -> ArrayWrapper:
        """
        Split on a literal delimiter.

        Args:
            delimiter: Non-empty separator
            limit: If positive, at most this many fragments, the last one
                holding the rest of the string. If negative, all fragments
                except the last ``-limit``. Zero acts as one.

        Raises:
            InvalidArgumentError: If delimiter is empty
        """
        if not delimiter:
            raise InvalidArgumentError("delimiter must not be empty", "explode")

        value = self.get()
        if limit is None:
            parts = value.split(delimiter)
        elif limit > 0:
            parts = value.split(delimiter, limit - 1)
        elif limit == 0:
            parts = [value]
        else:
            parts = value.split(delimiter)[:limit]
        return ArrayWrapper(parts)

    def split(self, pattern: Pattern, limit: Optional[int] = None) -> ArrayWrapper:
        """
        Split on a regular expression, dropping empty fragments.

        A positive limit caps the number of fragments; the last one holds
        the rest of the string.
        """
        value = self.get()
        bounded = limit is not None and limit > 0
        parts: list[str] = []
        position = 0

        for found in _compile(pattern).finditer(value):
            if bounded and len(parts) >= limit - 1:
                break
            piece = value[position : found.start()]
            if piece:
                parts.append(piece)
            position = found.end()

        tail = value[position:]
        if tail:
            parts.append(tail)
        return ArrayWrapper(parts)

    def chunks(self, size: int) -> ArrayWrapper:
        """Split into pieces of ``size`` characters, the last may be shorter."""
        return ArrayWrapper(text.chunk(self.get(), size))

    def chars(self) -> ArrayWrapper:
        return self.chunks(1)

    def chunk_split(self, length: int = 76, end: str = "\r\n") -> StringWrapper:
        """
        Break the string into lines of ``length`` characters.

        Every line, including the last, is followed by ``end``.
        """
        if length < 1:
            raise InvalidArgumentError(f"chunk length must be at least 1, got {length}", "chunk_split")

        pieces = text.chunk(self.get(), length)
        if not pieces:
            return StringWrapper(end)
        return StringWrapper("".join(piece + end for piece in pieces))

    def pop_front(self, delimiter: str) -> StringWrapper:
        """Drop the first delimited fragment."""
        parts = self.explode(delimiter)
        parts.pop_front()
        return parts.implode(delimiter)

    def pop_back(self, delimiter: str) -> StringWrapper:
        """Drop the last delimited fragment."""
        parts = self.explode(delimiter)
        parts.pop_back()
        return parts.implode(delimiter)

    # =========================================================================
    # Python Protocol
    # =========================================================================

    def __str__(self) -> str:
        return self.get()

    def __repr__(self) -> str:
        return f"StringWrapper({self._value!r})"

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, needle: str) -> bool:
        return self.contains(needle)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringWrapper):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class InPlace:
    """
    In-place view of a ``StringWrapper``.

    Calling a wrapper method through the view stores the resulting value
    back into the wrapper and returns the view, so calls keep chaining.
    Methods that do not produce a wrapper (``length``, ``first_index_of``,
    ``explode``...) return their result unchanged.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: StringWrapper) -> None:
        self._owner = owner

    @property
    def wrapper(self) -> StringWrapper:
        return self._owner

    def get(self) -> str:
        return self._owner.get()

    def set(self, value: Optional[str]) -> InPlace:
        """Replace the wrapped value."""
        self._owner._value = value
        return self

    def __getattr__(self, name: str) -> Any:
        attribute = getattr(self._owner, name)
        if not callable(attribute):
            return attribute

        def forward(*args: Any, **kwargs: Any) -> Any:
            result = attribute(*args, **kwargs)
            if isinstance(result, StringWrapper):
                self._owner._value = result._value
                return self
            return result

        return forward

    def __repr__(self) -> str:
        return f"InPlace({self._owner!r})"
