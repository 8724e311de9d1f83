"""
String manipulation helpers for cleaning and formatting text.

Every helper is a pure function of its arguments. Functions are grouped by
purpose into submodules and re-exported here:

    - `stringext.padding`: fixed-width padding and truncation
    - `stringext.case`: title case and initials
    - `stringext.cleanup`: diacritics, spaces, substrings and repeated characters
    - `stringext.trim`: trailing whitespace and punctuation
    - `stringext.substrings`: text before or after the last delimiter

Importing the package also registers the `strext` accessor on
`pandas.Series` (see `stringext.series`).

See individual module documentation for detailed information.
"""
import logging

from . import patterns
from . import presets
from .padding import *
from .case import *
from .cleanup import *
from .trim import *
from .substrings import *
from .presets import punctuation_preset
from . import series

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Padding/truncation
    'fixed_width',
    'take_first_characters',
    # Case
    'to_title_case',
    'get_initials',
    # Cleanup
    'remove_diacritics',
    'remove_spaces',
    'remove_instances_of_string',
    'remove_trailing_instance_of_string',
    'remove_trailing_instances_of_string',
    'truncate_multiple_occurrences_of_char',
    'truncate_multiple_spaces',
    # Trim
    'is_punctuation',
    'trim_whitespace_and_punctuation',
    # Substrings
    'substring_from_last_index_of',
    'substring_to_last_index_of',
    # Configuration
    'punctuation_preset',
    # Modules
    'patterns',
    'presets',
    'series'
]
