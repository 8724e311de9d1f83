"""Text before or after the last occurrence of a delimiter.
"""

__docformat__ = 'google'

__all__ = [
    'substring_from_last_index_of',
    'substring_to_last_index_of'
]

from typing import Optional
from stringext.patterns import EMPTY

def _last_index_of(source: str, value: str) -> int:
    if not value:
        raise ValueError("value must be a non-empty string")
    return source.rfind(value)

def substring_from_last_index_of(source: Optional[str], value: str) -> Optional[str]:
    """
    Get the text after the last occurrence of `value`.

    Args:
        source: String to search, or None
        value: Delimiter to locate, usually a single character

    Returns:
        Text following the last `value`, an empty string if `value` does
        not occur, or `source` unchanged if it is None or empty

    Example:
        >>> substring_from_last_index_of('data/towns/townships.yaml', '/')
        'townships.yaml'
        >>> substring_from_last_index_of('townships.yaml', '/')
        ''
    """
    if not source:
        return source

    index = _last_index_of(source, value)
    if index < 0:
        return EMPTY
    return source[index + len(value):]

def substring_to_last_index_of(source: Optional[str], value: str) -> Optional[str]:
    """
    Get the text before the last occurrence of `value`.

    Args:
        source: String to search, or None
        value: Delimiter to locate, usually a single character

    Returns:
        Text preceding the last `value`, or `source` unchanged if `value`
        does not occur or `source` is None or empty

    Example:
        >>> substring_to_last_index_of('data/towns/townships.yaml', '/')
        'data/towns'
        >>> substring_to_last_index_of('townships.yaml', '/')
        'townships.yaml'
    """
    if not source:
        return source

    index = _last_index_of(source, value)
    if index < 0:
        return source
    return source[:index]
