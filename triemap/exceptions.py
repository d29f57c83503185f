"""Exceptions raised by triemap."""


class TrieMapError(Exception):
    """Base class for all triemap errors."""
    pass


class InvalidKeyError(TrieMapError, ValueError):
    """Key is None, not a string, or empty.

    Not a KeyError: a malformed key is a caller error, not a missing entry.
    """
    pass


class InvalidValueError(TrieMapError, ValueError):
    """Value probe is None."""
    pass


class UnsupportedOperationError(TrieMapError, NotImplementedError):
    """Operation is part of the mapping contract but not implemented."""
    pass


class CodeTableError(TrieMapError):
    """Error parsing, validating or applying a code table."""
    pass
