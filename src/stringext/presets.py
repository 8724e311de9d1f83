"""This module loads the named punctuation allow-lists shipped with the
package, for use with `stringext.trim.trim_whitespace_and_punctuation`.
"""

__docformat__ = 'google'

__all__ = [
    'PunctuationPresets',
    'punctuation_preset'
]

import logging
from importlib import resources
from functools import cache, cached_property
from typing import Dict, FrozenSet, List
import yaml

logger = logging.getLogger(__name__)

class PunctuationDataSource:
    @classmethod
    def yaml_path(cls):
        return resources.files('stringext.data').joinpath('punctuation.yaml')

class PunctuationPresets(PunctuationDataSource):
    """Named sets of punctuation characters that survive trimming.

    The table is read from `stringext/data/punctuation.yaml` on first
    access and validated: every preset must be a string of characters.

    Example:
        >>> presets = PunctuationPresets()
        >>> sorted(presets['sentence'])
        ['!', '.', '?']
        >>> 'closing' in presets.names
        True
    """
    def __init__(self, file_path = None):
        self.file_path = file_path or self.yaml_path()

    @cached_property
    def data(self) -> Dict[str, FrozenSet[str]]:
        logger.debug("Loading punctuation presets from %s", self.file_path)

        with self.file_path.open('r', encoding='utf-8') as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Punctuation presets file must be a mapping, got {type(raw).__name__}")

        presets = raw.get('presets') or {}
        if not isinstance(presets, dict):
            raise ValueError(f"'presets' must be a mapping of names to strings, got {type(presets).__name__}")

        for name, chars in presets.items():
            if not isinstance(chars, str):
                raise ValueError(f"Punctuation preset '{name}' must be a string, got {type(chars).__name__}")

        logger.debug("Loaded %d punctuation presets", len(presets))
        return {name: frozenset(chars) for name, chars in presets.items()}

    @property
    def names(self) -> List[str]:
        return sorted(self.data)

    def __getitem__(self, name: str) -> FrozenSet[str]:
        try:
            return self.data[name]
        except KeyError:
            raise KeyError(f"Unknown punctuation preset '{name}'. Available presets: {', '.join(self.names)}") from None

    def __contains__(self, name: str) -> bool:
        return name in self.data

@cache
def _default_presets() -> PunctuationPresets:
    return PunctuationPresets()

def punctuation_preset(name: str) -> FrozenSet[str]:
    """
    Look up a named punctuation allow-list.

    Args:
        name: Preset name, e.g. 'sentence' or 'closing'

    Returns:
        Frozen set of punctuation characters

    Raises:
        KeyError: If no preset has that name

    Example:
        >>> sorted(punctuation_preset('abbreviation'))
        ['.']
        >>> punctuation_preset('none')
        frozenset()
    """
    return _default_presets()[name]
