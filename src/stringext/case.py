"""Case transforms: title case and initials.

Both functions split on the single space character only, so runs of
spaces produce empty words that are carried through unchanged.
"""

__docformat__ = 'google'

__all__ = [
    'to_title_case',
    'get_initials'
]

from typing import Optional
from stringext.patterns import SPACE, EMPTY

def _upper_char(char: str) -> str:
    # only when the uppercase form is one character ("ß" stays "ß")
    upper = char.upper()
    return upper if len(upper) == 1 else char

def _title_word(word: str) -> str:
    if not word:
        return word
    elif len(word) == 1:
        return _upper_char(word)
    else:
        return _upper_char(word[0]) + word[1:].lower()

def _initial(word: str) -> str:
    if not word:
        return EMPTY
    else:
        return _upper_char(word[0])

def to_title_case(source: Optional[str]) -> Optional[str]:
    """
    Capitalize the first letter of every space-delimited word and lowercase the rest.

    Spacing is reproduced exactly, including leading, trailing and
    repeated spaces.

    Args:
        source: String to transform, or None

    Returns:
        Title-cased string, or `source` unchanged if it is None or empty

    Example:
        >>> to_title_case('jOHN sMITH')
        'John Smith'
        >>> to_title_case('CROSS  LAKE twp')
        'Cross  Lake Twp'
        >>> to_title_case('a b')
        'A B'
    """
    if not source:
        return source

    return SPACE.join(map(_title_word, source.split(SPACE)))

def get_initials(source: str) -> str:
    """
    Concatenate the uppercased first letter of every space-delimited word.

    Unlike the other helpers, a missing value is not accepted.

    Args:
        source: String to abbreviate

    Returns:
        Uppercased initials with no separator

    Raises:
        TypeError: If `source` is None

    Example:
        >>> get_initials('John Smith')
        'JS'
        >>> get_initials('dover  foxcroft')
        'DF'
        >>> get_initials('')
        ''
    """
    if source is None:
        raise TypeError("get_initials() requires a string, not None")

    return EMPTY.join(map(_initial, source.split(SPACE)))
