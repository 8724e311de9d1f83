"""Cleanup helpers for removing unwanted characters and substrings.

Every function in this module returns a missing (`None`) or empty source
unchanged.
"""

__docformat__ = 'google'

__all__ = [
    'remove_diacritics',
    'remove_spaces',
    'remove_instances_of_string',
    'remove_trailing_instance_of_string',
    'remove_trailing_instances_of_string',
    'truncate_multiple_occurrences_of_char',
    'truncate_multiple_spaces'
]

import unicodedata
from typing import Iterable, List, Optional
from stringext.patterns import (
    SPACE,
    EMPTY,
    NON_ASCII_PATTERN,
    NONSPACING_MARK,
    DECOMPOSED_FORM
)

def remove_diacritics(source: Optional[str]) -> Optional[str]:
    """
    Reduce accented Latin letters to their ASCII base letter and drop everything else above U+007F.

    The string is decomposed to NFD, combining non-spacing marks are
    discarded, then any remaining non-ASCII code point is removed. Letters
    from non-Latin scripts are therefore removed entirely.

    Args:
        source: String to clean, or None

    Returns:
        ASCII-only string, or `source` unchanged if it is None or empty

    Example:
        >>> remove_diacritics('Crème Brûlée')
        'Creme Brulee'
        >>> remove_diacritics('Ångström')
        'Angstrom'
        >>> remove_diacritics('Tōkyō 東京')
        'Tokyo '
    """
    if not source:
        return source

    decomposed = unicodedata.normalize(DECOMPOSED_FORM, source)
    unmarked = EMPTY.join(
        char for char in decomposed
        if unicodedata.category(char) != NONSPACING_MARK
    )
    return NON_ASCII_PATTERN.sub(EMPTY, unmarked)

def remove_spaces(source: Optional[str]) -> Optional[str]:
    """
    Remove every space character. Tabs, newlines and other whitespace are kept.

    Example:
        >>> remove_spaces('T4 R3 WELS')
        'T4R3WELS'
        >>> remove_spaces('a\\tb c')
        'a\\tbc'
    """
    if not source:
        return source

    return source.replace(SPACE, EMPTY)

def remove_instances_of_string(source: Optional[str], values: Iterable[str]) -> Optional[str]:
    """
    Remove every occurrence of each value, one value at a time.

    Values are applied in iteration order and each removal operates on the
    result of the previous one, so removing one value can create a new
    occurrence of a later value.

    Args:
        source: String to clean, or None
        values: Substrings to remove

    Returns:
        String with all occurrences removed, or `source` unchanged if it is None or empty

    Example:
        >>> remove_instances_of_string('Mount Chase Twp.', [' Twp', '.'])
        'Mount Chase'
        >>> remove_instances_of_string('aabb', ['ab', 'ab'])
        ''
    """
    if not source:
        return source

    result = source
    for value in filter(None, values):
        result = result.replace(value, EMPTY)
    return result

def remove_trailing_instance_of_string(source: Optional[str], to_remove: Optional[str]) -> Optional[str]:
    """
    Cut a string at the last occurrence of `to_remove` if the string ends with it.

    Trailing whitespace is ignored when checking whether `source` ends
    with `to_remove`, but is not itself removed unless it follows the cut.

    Args:
        source: String to shorten, or None
        to_remove: Suffix to remove

    Returns:
        `source` truncated at the last occurrence of `to_remove`, or
        `source` unchanged if it does not end with `to_remove`

    Example:
        >>> remove_trailing_instance_of_string('report_final_final', '_final')
        'report_final'
        >>> remove_trailing_instance_of_string('Eustis Plt  ', ' Plt')
        'Eustis'
        >>> remove_trailing_instance_of_string('report_final_v2', '_final')
        'report_final_v2'
    """
    if not source or not to_remove:
        return source

    if not source.rstrip().endswith(to_remove):
        return source

    return source[:source.rfind(to_remove)]

def remove_trailing_instances_of_string(source: Optional[str], values: Iterable[str]) -> Optional[str]:
    """
    Remove whichever suffix in `values` starts earliest in the string.

    Of all values that `source` ends with, the one whose last occurrence
    has the smallest index wins, which in practice is the longest matching
    suffix.

    Args:
        source: String to shorten, or None
        values: Candidate suffixes

    Returns:
        `source` truncated at the chosen suffix, or `source` unchanged if
        no candidate is a suffix (including when `values` is empty)

    Example:
        >>> remove_trailing_instances_of_string('Big Twenty Twp', [' Twp', 'Twenty Twp'])
        'Big '
        >>> remove_trailing_instances_of_string('Big Twenty Twp', [' Plt'])
        'Big Twenty Twp'
        >>> remove_trailing_instances_of_string('Big Twenty Twp', [])
        'Big Twenty Twp'
    """
    if not source:
        return source

    offsets: List[int] = [
        source.rfind(value) for value in filter(None, values)
        if source.endswith(value)
    ]

    if not offsets:
        return source
    else:
        return source[:min(offsets)]

def truncate_multiple_occurrences_of_char(source: Optional[str], c: str) -> Optional[str]:
    """
    Collapse every run of two or more consecutive `c` characters into one.

    Args:
        source: String to clean, or None
        c: Single character to collapse

    Returns:
        String with runs of `c` collapsed, or `source` unchanged if it is None or empty

    Raises:
        ValueError: If `c` is not exactly one character

    Example:
        >>> truncate_multiple_occurrences_of_char('T4--R3---WELS', '-')
        'T4-R3-WELS'
        >>> truncate_multiple_occurrences_of_char('a\\a\\ab', '\\a')
        'a\\x07b'
    """
    if len(c) != 1:
        raise ValueError(f"c must be a single character, got {c!r}")

    if not source:
        return source

    chars = []
    previous = None
    for char in source:
        if char == c and previous == c:
            continue
        chars.append(char)
        previous = char
    return EMPTY.join(chars)

def truncate_multiple_spaces(source: Optional[str]) -> Optional[str]:
    """
    Collapse every run of spaces into a single space.

    Example:
        >>> truncate_multiple_spaces('a   b  c')
        'a b c'
    """
    return truncate_multiple_occurrences_of_char(source, SPACE)
