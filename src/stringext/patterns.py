"""Shared constants and compiled patterns used by the string helpers.
"""

__docformat__ = 'google'

import re
from typing import FrozenSet

SPACE: str = ' '
"""The single space character (U+0020). Other whitespace is never treated as a space."""

EMPTY: str = ''
"""@private"""

NON_ASCII_PATTERN: re.Pattern = re.compile('[^\\u0000-\\u007F]+')
"""Pattern matching any run of code points above U+007F.

Used in `stringext.cleanup.remove_diacritics`."""

NONSPACING_MARK: str = 'Mn'
"""Unicode general category of combining non-spacing marks (accents, umlauts, etc.).

Used in `stringext.cleanup.remove_diacritics`."""

DECOMPOSED_FORM: str = 'NFD'
"""Canonical decomposition form applied before combining marks are dropped."""

PUNCTUATION_CATEGORIES: FrozenSet[str] = frozenset(['Pc', 'Pd', 'Ps', 'Pe', 'Pi', 'Pf', 'Po'])
"""Unicode general categories that count as punctuation.

Connector, dash, open, close, initial quote, final quote and other
punctuation. Symbols such as '$' (Sc) or '+' (Sm) are not punctuation.

Used in `stringext.trim.is_punctuation`."""
