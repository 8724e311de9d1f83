"""Trimming of trailing whitespace and punctuation.

Punctuation follows the Unicode general categories listed in
`stringext.patterns.PUNCTUATION_CATEGORIES`, so currency and math symbols
are never trimmed.
"""

__docformat__ = 'google'

__all__ = [
    'is_punctuation',
    'trim_whitespace_and_punctuation'
]

import unicodedata
from typing import Iterable, Optional
from stringext.patterns import EMPTY, PUNCTUATION_CATEGORIES

def is_punctuation(char: str) -> bool:
    """
    Check if a single character is Unicode punctuation.

    Example:
        >>> is_punctuation('!')
        True
        >>> is_punctuation('$')
        False
        >>> is_punctuation('»')
        True
    """
    return unicodedata.category(char) in PUNCTUATION_CATEGORIES

def trim_whitespace_and_punctuation(source: Optional[str], allowed_punctuation: Optional[Iterable[str]] = None) -> str:
    """
    Strip whitespace and punctuation from the end of a string.

    Scanning stops at the first character from the right that is neither
    whitespace nor removable punctuation. The start of the string is never
    modified.

    Args:
        source: String to trim, or None
        allowed_punctuation: Punctuation characters to keep. Accepts any
            iterable of characters, including a plain string or a preset
            from `stringext.presets.punctuation_preset`.

    Returns:
        Trimmed string. Empty if `source` is None, empty, whitespace only,
        or made entirely of removable characters.

    Example:
        >>> trim_whitespace_and_punctuation('Hello, world!  ')
        'Hello, world'
        >>> trim_whitespace_and_punctuation('Is it done?!', '?')
        'Is it done?'
        >>> trim_whitespace_and_punctuation('  (T17 R5).', ')')
        '  (T17 R5)'
    """
    if not source or source.isspace():
        return EMPTY

    allowed = frozenset(allowed_punctuation or EMPTY)

    def removable(char: str) -> bool:
        if char.isspace():
            return True
        return is_punctuation(char) and char not in allowed

    end = len(source)
    while end > 0 and removable(source[end - 1]):
        end -= 1

    return source[:end]
