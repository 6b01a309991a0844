"""String manipulation utilities.

This module provides the comparison-aware string operations used to
compare and extend file paths. Case-insensitive matching uses a
length-preserving per-character fold so that match offsets found in the
folded text are valid offsets into the original text.
"""

from __future__ import annotations

from enum import Enum

from localhistory.core.errors import InvalidArgumentError, require


class StringComparison(Enum):
    """How two strings are compared when searching or matching prefixes."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"


def _fold_char(c: str) -> str:
    folded = c.casefold()
    if len(folded) == 1:
        return folded
    lowered = c.lower()
    if len(lowered) == 1:
        return lowered
    return c


def _fold(s: str, comparison: StringComparison) -> str:
    if comparison is StringComparison.ORDINAL:
        return s
    return "".join(_fold_char(c) for c in s)


def _coerce_comparison(comparison: StringComparison | str) -> StringComparison:
    try:
        return StringComparison(comparison)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown string comparison: {comparison!r}"
        ) from e


def index_of(
    value: str,
    needle: str,
    start: int,
    comparison: StringComparison | str,
) -> int:
    """Find the first occurrence of needle at or after start.

    Args:
        value: String to search in.
        needle: Substring to search for.
        start: Index to start searching from.
        comparison: Comparison mode used for matching.

    Returns:
        Index of the match in value, or -1 if not found.

    Raises:
        InvalidArgumentError: If start is negative or past the end of value.

    Example:
        >>> index_of("aAbB", "b", 0, StringComparison.ORDINAL_IGNORE_CASE)
        2
    """
    require(value, "value")
    require(needle, "needle")
    if start < 0 or start > len(value):
        raise InvalidArgumentError(
            f"start {start} is outside the range 0..{len(value)}"
        )
    mode = _coerce_comparison(comparison)
    return _fold(value, mode).find(_fold(needle, mode), start)


def starts_with(
    value: str,
    prefix: str,
    comparison: StringComparison | str,
) -> bool:
    """Check if value starts with prefix under the given comparison.

    Example:
        >>> starts_with("C:/Foo/bar", "c:/foo", "ordinal_ignore_case")
        True
    """
    require(value, "value")
    require(prefix, "prefix")
    mode = _coerce_comparison(comparison)
    return _fold(value, mode).startswith(_fold(prefix, mode))


def right(value: str, length: int) -> str:
    """Get the rightmost characters of a string.

    Args:
        value: String to take the characters from.
        length: Number of trailing characters to return.

    Returns:
        The last ``length`` characters, or value itself when length is
        greater than or equal to its length.

    Raises:
        NullInputError: If value is None.
        InvalidArgumentError: If length is negative.

    Example:
        >>> right("hello", 3)
        'llo'
        >>> right("hi", 10)
        'hi'
    """
    require(value, "value")
    if length < 0:
        raise InvalidArgumentError(f"Length is less than zero: {length}")
    if length < len(value):
        return value[len(value) - length :]
    return value


def with_ending(value: str | None, ending: str) -> str:
    """Append the minimal tail of ending so that value ends with it.

    Trailing characters already present in value are reused, so
    ``with_ending("hel", "llo")`` appends only ``"lo"``.

    Args:
        value: Base string, or None.
        ending: Required suffix.

    Returns:
        The shortest ``value + right(ending, i)`` that ends with ending,
        or ending itself when value is None.

    Raises:
        NullInputError: If ending is None.

    Example:
        >>> with_ending("hel", "llo")
        'hello'
        >>> with_ending("hello", "lo")
        'hello'
    """
    require(ending, "ending")
    if value is None:
        return ending

    # i == len(ending) always matches, so it is left to the return below
    for i in range(len(ending)):
        candidate = value + right(ending, i)
        if candidate.endswith(ending):
            return candidate
    return value + ending


def replace_with_comparison(
    text: str,
    old_value: str,
    new_value: str,
    comparison: StringComparison | str,
) -> str:
    """Replace all occurrences of old_value using the given comparison.

    Matches are found greedily left to right and never overlap. After a
    replacement the scan resumes just past the matched span of the
    original text, so new_value is never rescanned.

    Args:
        text: Source string.
        old_value: Substring to replace. Must not be empty.
        new_value: Replacement string.
        comparison: Comparison mode used to find old_value.

    Returns:
        New string with every match replaced.

    Raises:
        NullInputError: If text, old_value or new_value is None.
        InvalidArgumentError: If old_value is empty or comparison is unknown.

    Example:
        >>> replace_with_comparison("aAbB", "a", "X", "ordinal_ignore_case")
        'XXbB'
        >>> replace_with_comparison("abcabc", "bc", "Z", StringComparison.ORDINAL)
        'aZaZ'
    """
    require(text, "text")
    require(old_value, "old_value")
    require(new_value, "new_value")
    if not old_value:
        raise InvalidArgumentError("old_value must not be empty")

    mode = _coerce_comparison(comparison)
    haystack = _fold(text, mode)
    needle = _fold(old_value, mode)

    parts: list[str] = []
    cursor = 0
    index = haystack.find(needle)
    while index != -1:
        parts.append(text[cursor:index])
        parts.append(new_value)
        cursor = index + len(old_value)
        index = haystack.find(needle, cursor)

    parts.append(text[cursor:])
    return "".join(parts)
