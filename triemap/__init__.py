"""String-keyed mapping stored as a character-indexed prefix tree.

Keys that share a prefix share the nodes spelling it, so lookup, insertion
and removal cost O(length of key) however many entries are stored.

Example:
    from triemap import TrieMap

    morse = TrieMap()
    morse.put(".-", "A")
    morse.put("-...", "B")
    morse.get(".-")       # "A"
    morse.remove("-...")  # "B"

Code tables can be loaded from YAML with ``triemap.yaml``.
"""

from .exceptions import (
    TrieMapError,
    InvalidKeyError,
    InvalidValueError,
    UnsupportedOperationError,
    CodeTableError,
)
from .trie import TrieMap

__all__ = [
    # Data structure
    'TrieMap',
    # Errors
    'TrieMapError',
    'InvalidKeyError',
    'InvalidValueError',
    'UnsupportedOperationError',
    'CodeTableError',
]
