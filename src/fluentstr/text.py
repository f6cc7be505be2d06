"""
fluentstr Text Functions.

Plain-function string helpers used by ``StringWrapper``. They operate on
``str`` values directly and follow the semantics of the PHP string
functions the wrapper API is modelled on (``substr``, ``trim`` masks,
``similar_text``, ``ctype_*``, ``strtr``).
"""

from __future__ import annotations

import html
import logging
import re
import string
import unicodedata
from collections.abc import Mapping
from typing import List, Optional, Tuple

import numpy as np

from fluentstr.utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# Characters stripped by trim() when no mask is given
WHITESPACE = " \t\n\r\0\x0b"

_ASCII_SPACE = frozenset(" \t\n\r\x0b\x0c")
_ASCII_ALPHA = frozenset(string.ascii_letters)
_ASCII_DIGITS = frozenset(string.digits)
_ASCII_HEX = frozenset(string.hexdigits)
_ASCII_PUNCT = frozenset(string.punctuation)
_ASCII_LOWER = frozenset(string.ascii_lowercase)
_ASCII_UPPER = frozenset(string.ascii_uppercase)

_CONVERSION = re.compile(
    r"%(?:\([^)]*\))?[#0\- +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?(?P<type>[diouxXeEfFgGcrsa%])"
)


# =============================================================================
# Slicing
# =============================================================================


def substr(s: str, offset: int, length: Optional[int] = None) -> str:
    """
    Return ``length`` characters of ``s`` starting at ``offset``.

    A negative offset counts from the end of the string. A negative length
    leaves that many characters off the end. An offset past the end gives
    an empty string.

    Example:
        substr("abcdef", 1, 3) -> "bcd"
        substr("abcdef", -2) -> "ef"
        substr("abcdef", 1, -2) -> "bcd"
    """
    size = len(s)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset > size:
        return ""

    if length is None:
        end = size
    elif length < 0:
        end = size + length
        if end < offset:
            return ""
    else:
        end = min(offset + length, size)

    return s[offset:end]


def find_first(s: str, needle: str, offset: int = 0) -> int:
    """Find first index of needle at or after offset, -1 if not found."""
    if offset > len(s) or offset < -len(s):
        return -1
    return s.find(needle, offset)


def find_last(s: str, needle: str, offset: int = 0) -> int:
    """
    Find last index of needle, -1 if not found.

    A non-negative offset requires the match to start at or after
    ``offset``. A negative offset requires it to start at or before
    ``len(s) + offset``.
    """
    size = len(s)
    if offset > size or offset < -size:
        return -1
    if offset >= 0:
        return s.rfind(needle, offset)
    return s.rfind(needle, 0, size + offset + len(needle))


def chunk(s: str, size: int) -> List[str]:
    """Split string into pieces of at most ``size`` characters."""
    if size < 1:
        raise InvalidArgumentError(f"chunk size must be at least 1, got {size}", "chunks")
    return [s[i : i + size] for i in range(0, len(s), size)]


# =============================================================================
# Trimming
# =============================================================================


def expand_mask(mask: str) -> str:
    """
    Expand ``a..z`` style ranges in a trim mask.

    Example:
        expand_mask("a..e_") -> "abcde_"
    """
    result: List[str] = []
    i = 0
    while i < len(mask):
        if i + 3 < len(mask) and mask[i + 1 : i + 3] == ".." and mask[i] <= mask[i + 3]:
            result.extend(chr(c) for c in range(ord(mask[i]), ord(mask[i + 3]) + 1))
            i += 4
        else:
            result.append(mask[i])
            i += 1
    return "".join(result)


def trim(s: str, mask: Optional[str] = None) -> str:
    """Remove mask characters from both ends."""
    return s.strip(WHITESPACE if mask is None else expand_mask(mask))


def trim_left(s: str, mask: Optional[str] = None) -> str:
    """Remove leading mask characters."""
    return s.lstrip(WHITESPACE if mask is None else expand_mask(mask))


def trim_right(s: str, mask: Optional[str] = None) -> str:
    """Remove trailing mask characters."""
    return s.rstrip(WHITESPACE if mask is None else expand_mask(mask))


# =============================================================================
# Character Classes
# =============================================================================


def _all_in(s: str, charset: frozenset) -> bool:
    return bool(s) and all(c in charset for c in s)


def is_alnum(s: str) -> bool:
    """Check if string contains only ASCII letters and digits."""
    return _all_in(s, _ASCII_ALPHA | _ASCII_DIGITS)


def is_alpha(s: str) -> bool:
    """Check if string contains only ASCII letters."""
    return _all_in(s, _ASCII_ALPHA)


def is_control(s: str) -> bool:
    """Check if string contains only control characters."""
    return bool(s) and all(ord(c) < 32 or ord(c) == 127 for c in s)


def is_digit(s: str) -> bool:
    """Check if string contains only the digits 0-9."""
    return _all_in(s, _ASCII_DIGITS)


def is_lower(s: str) -> bool:
    """Check if string contains only lowercase ASCII letters."""
    return _all_in(s, _ASCII_LOWER)


def is_upper(s: str) -> bool:
    """Check if string contains only uppercase ASCII letters."""
    return _all_in(s, _ASCII_UPPER)


def is_punct(s: str) -> bool:
    """Check if string contains only ASCII punctuation."""
    return _all_in(s, _ASCII_PUNCT)


def is_space(s: str) -> bool:
    """Check if string contains only whitespace."""
    return _all_in(s, _ASCII_SPACE)


def is_xdigit(s: str) -> bool:
    """Check if string contains only hexadecimal digits."""
    return _all_in(s, _ASCII_HEX)


# =============================================================================
# Conversion
# =============================================================================


def to_ascii(s: str) -> str:
    """
    Fold a string to ASCII.

    Characters are decomposed (NFKD) so accents separate from their base
    letter, then every non-ASCII code point is dropped.

    Example:
        to_ascii("Crème brûlée") -> "Creme brulee"
    """
    decomposed = unicodedata.normalize("NFKD", s)
    return decomposed.encode("ascii", "ignore").decode("ascii")


def escape_html(s: str) -> str:
    """
    Escape ``& < > " '`` for embedding in markup.

    The single quote becomes ``&#x27;`` (PHP's htmlspecialchars writes
    ``&#039;``; both are the same character reference).
    """
    return html.escape(s, quote=True)


def count_conversions(template: str) -> int:
    """
    Count the positional arguments a printf-style template consumes.

    ``%%`` consumes nothing; a ``*`` width or precision consumes one
    argument of its own.

    Example:
        count_conversions("%s is %5.*f %%") -> 3
    """
    consumed = 0
    for found in _CONVERSION.finditer(template):
        if found.group("type") == "%":
            continue
        consumed += 1 + found.group(0).count("*")
    return consumed


def upper_first(s: str) -> str:
    """Uppercase the first character."""
    return s[:1].upper() + s[1:]


def lower_first(s: str) -> str:
    """Lowercase the first character."""
    return s[:1].lower() + s[1:]


# =============================================================================
# Replacement
# =============================================================================


def replace_all(s: str, mapping: Mapping[str, str]) -> str:
    """
    Replace every needle of ``mapping`` in a single pass.

    The string is scanned once from left to right. At each position the
    longest needle that matches is replaced, and the replacement text is
    not scanned again.

    Example:
        replace_all("abc", {"a": "1", "b": "2"}) -> "12c"
        replace_all("ab", {"a": "b", "b": "a"}) -> "ba"
    """
    needles = [needle for needle in mapping if needle]
    if len(needles) < len(mapping):
        logger.debug("Ignoring empty needle in replacement mapping")
    if not needles or not s:
        return s

    needles.sort(key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(needle) for needle in needles))
    return pattern.sub(lambda m: mapping[m.group(0)], s)


def replace_sequential(s: str, mapping: Mapping[str, str]) -> str:
    """
    Replace each needle of ``mapping`` in turn.

    Later pairs see the output of earlier ones.

    Example:
        replace_sequential("ab", {"a": "b", "b": "c"}) -> "cc"
    """
    for needle, replacement in mapping.items():
        if not needle:
            logger.debug("Ignoring empty needle in replacement mapping")
            continue
        s = s.replace(needle, replacement)
    return s


# =============================================================================
# Similarity
# =============================================================================


def _code_points(s: str) -> np.ndarray:
    # ord() rather than encode(): lone surrogates are valid in a str
    return np.fromiter(map(ord, s), dtype=np.uint32, count=len(s))


def longest_common_substring(a: str, b: str) -> Tuple[int, int, int]:
    """
    Find the longest common substring of ``a`` and ``b``.

    Returns ``(start_a, start_b, length)``. On ties the match that starts
    earliest in ``a`` wins, then the one earliest in ``b``. The length is
    0 when the strings share no character.
    """
    if not a or not b:
        return 0, 0, 0

    left = _code_points(a)
    right = _code_points(b)

    # Two rows of the run-length table: row[j] is the length of the common
    # run ending at a[i - 1], b[j - 1]
    previous_row = np.zeros(len(b) + 1, dtype=np.int64)
    current_row = np.zeros(len(b) + 1, dtype=np.int64)
    best_length, best_end_a, best_end_b = 0, 0, 0

    for i in range(len(a)):
        current_row[1:] = np.where(left[i] == right, previous_row[:-1] + 1, 0)

        # Strictly greater keeps the smallest end in a, then argmax the
        # smallest end in b; starts follow the same order at equal length.
        row_best = int(current_row.max())
        if row_best > best_length:
            best_length = row_best
            best_end_a = i + 1
            best_end_b = int(np.argmax(current_row))

        previous_row, current_row = current_row, previous_row

    if best_length == 0:
        return 0, 0, 0
    return best_end_a - best_length, best_end_b - best_length, best_length


def similar_chars(a: str, b: str) -> int:
    """
    Count matching characters by recursive longest common substring.

    The longest common substring is matched first, then the parts to its
    left and to its right are compared the same way. Pending pairs are
    kept on an explicit stack, so long inputs do not hit the recursion
    limit.
    """
    total = 0
    pending: List[Tuple[str, str]] = [(a, b)]

    while pending:
        left, right = pending.pop()
        start_a, start_b, length = longest_common_substring(left, right)
        if length == 0:
            continue

        total += length
        if start_a and start_b:
            pending.append((left[:start_a], right[:start_b]))
        if start_a + length < len(left) and start_b + length < len(right):
            pending.append((left[start_a + length :], right[start_b + length :]))
    return total


def similar_text(a: str, b: str) -> Tuple[int, float]:
    """
    Return the similarity of two strings as ``(common, percent)``.

    Example:
        similar_text("World", "Word") -> (4, 88.88888888888889)
    """
    common = similar_chars(a, b)
    total = len(a) + len(b)
    percent = common * 2 * 100 / total if total else 0.0
    return common, percent
