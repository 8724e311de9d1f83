"""pandas integration.

Importing `stringext` registers a `strext` accessor on `pandas.Series`, so
every helper can be applied to a column of strings:

    >>> import pandas as pd
    >>> towns = pd.Series(['cROSS lAKE twp', 'eustis   plt'])
    >>> towns.strext.truncate_multiple_spaces().strext.to_title_case().tolist()
    ['Cross Lake Twp', 'Eustis Plt']

Missing values (None, NaN, pd.NA) are treated as absent strings. Helpers
with a documented default for absent input produce that default; all
others return the missing value untouched.
"""

__docformat__ = 'google'

__all__ = [
    'StringExtAccessor'
]

from typing import Callable, Iterable, Optional
import pandas as pd

from stringext.patterns import SPACE
from stringext import padding as _padding
from stringext import case, cleanup, trim, substrings

def is_missing(value) -> bool:
    return pd.api.types.is_scalar(value) and pd.isna(value)

@pd.api.extensions.register_series_accessor('strext')
class StringExtAccessor:
    """Element-wise access to the `stringext` helpers on a Series.

    Every method returns a new Series with the same index and name.
    """
    def __init__(self, series: pd.Series):
        self._series = series

    def _map(self, func: Callable, *args, fill_missing: bool = False) -> pd.Series:
        def apply(value):
            if is_missing(value):
                return func(None, *args) if fill_missing else value
            return func(value, *args)
        return self._series.map(apply)

    # Padding/truncation
    def fixed_width(self, width: int) -> pd.Series:
        return self._map(_padding.fixed_width, width, fill_missing=True)

    def take_first_characters(self, count: int, padding: str = SPACE) -> pd.Series:
        return self._map(_padding.take_first_characters, count, padding, fill_missing=True)

    # Case
    def to_title_case(self) -> pd.Series:
        return self._map(case.to_title_case)

    def get_initials(self) -> pd.Series:
        """Initials of each value. Missing values stay missing rather than raising."""
        return self._map(case.get_initials)

    # Cleanup
    def remove_diacritics(self) -> pd.Series:
        return self._map(cleanup.remove_diacritics)

    def remove_spaces(self) -> pd.Series:
        return self._map(cleanup.remove_spaces)

    def remove_instances_of_string(self, values: Iterable[str]) -> pd.Series:
        return self._map(cleanup.remove_instances_of_string, list(values))

    def remove_trailing_instance_of_string(self, to_remove: str) -> pd.Series:
        return self._map(cleanup.remove_trailing_instance_of_string, to_remove)

    def remove_trailing_instances_of_string(self, values: Iterable[str]) -> pd.Series:
        return self._map(cleanup.remove_trailing_instances_of_string, list(values))

    def truncate_multiple_occurrences_of_char(self, c: str) -> pd.Series:
        return self._map(cleanup.truncate_multiple_occurrences_of_char, c)

    def truncate_multiple_spaces(self) -> pd.Series:
        return self._map(cleanup.truncate_multiple_spaces)

    # Trim
    def trim_whitespace_and_punctuation(self, allowed_punctuation: Optional[Iterable[str]] = None) -> pd.Series:
        allowed = frozenset(allowed_punctuation or '')
        return self._map(trim.trim_whitespace_and_punctuation, allowed, fill_missing=True)

    # Substrings
    def substring_from_last_index_of(self, value: str) -> pd.Series:
        return self._map(substrings.substring_from_last_index_of, value)

    def substring_to_last_index_of(self, value: str) -> pd.Series:
        return self._map(substrings.substring_to_last_index_of, value)
