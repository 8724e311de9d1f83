"""Fixed-width padding and truncation.

Both functions accept an absent (`None`) source and return a string made
entirely of padding in that case.
"""

__docformat__ = 'google'

__all__ = [
    'fixed_width',
    'take_first_characters'
]

from typing import Optional
from stringext.patterns import SPACE

def _check_length(name: str, value: int):
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

def _check_char(name: str, value: str):
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")

def fixed_width(source: Optional[str], width: int) -> str:
    """
    Pad a string on the right with spaces until it is `width` characters long.

    Strings that are already `width` characters or longer are returned
    as-is. They are never truncated.

    Args:
        source: String to pad, or None
        width: Minimum length of the result

    Returns:
        `source` padded with spaces, or `width` spaces if `source` is None

    Raises:
        ValueError: If `width` is negative

    Example:
        >>> fixed_width('ab', 5)
        'ab   '
        >>> fixed_width('abcdef', 3)
        'abcdef'
        >>> fixed_width(None, 3)
        '   '
    """
    _check_length('width', width)

    if source is None:
        return SPACE * width
    else:
        return source.ljust(width)

def take_first_characters(source: Optional[str], count: int, padding: str = SPACE) -> str:
    """
    Return exactly `count` characters, truncating or padding as needed.

    Args:
        source: String to truncate or pad, or None
        count: Exact length of the result
        padding: Single character used to fill short strings

    Returns:
        The first `count` characters of `source`, right-padded with
        `padding` when `source` is shorter than `count`

    Raises:
        ValueError: If `count` is negative or `padding` is not one character

    Example:
        >>> take_first_characters('Portland', 4)
        'Port'
        >>> take_first_characters('ab', 4, '.')
        'ab..'
        >>> take_first_characters(None, 3, '*')
        '***'
    """
    _check_length('count', count)
    _check_char('padding', padding)

    if not source:
        return padding * count
    elif len(source) < count:
        return source.ljust(count, padding)
    else:
        return source[:count]
