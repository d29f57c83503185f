"""Convert parsed code tables into tries and apply them to text.

This module builds a TrieMap from a CodeTable and uses it to decode
separator-delimited messages, or the inverted table to encode text.
"""

from typing import Any, Dict, Optional

from triemap.exceptions import CodeTableError
from triemap.trie import TrieMap

from .parser import CodeTable


def table_to_trie(table: CodeTable) -> TrieMap:
    """Build a trie holding every entry of the table.

    Args:
        table: Parsed code table

    Returns:
        TrieMap from code to symbol
    """
    return TrieMap(table.entries)


def decode(
    table: CodeTable,
    message: str,
    trie: Optional[TrieMap] = None,
) -> str:
    """Decode a message made of codes.

    The message is split on the table's separator; empty tokens (from
    repeated separators) are skipped. Tokens with no entry become the
    table's ``unknown`` placeholder.

    Args:
        table: Parsed code table
        message: Codes separated by ``config['separator']``
        trie: Prebuilt trie for the table, to avoid rebuilding it per call

    Returns:
        Decoded symbols joined with ``config['joiner']``

    Example:
        With entries {".-": "A", "-...": "B", "/": " "}:
        decode(table, ".- -... / .-")  # "AB A"
    """
    if trie is None:
        trie = table_to_trie(table)

    unknown = table.config['unknown']
    symbols = []
    for token in message.split(table.config['separator']):
        if not token:
            continue
        symbol = trie.get(token, unknown)
        symbols.append(str(symbol))
    return table.config['joiner'].join(symbols)


def encode(table: CodeTable, text: str) -> str:
    """Encode text by matching the longest symbol at each position.

    Symbols may be longer than one character (e.g. "CH"); where several
    symbols match, the longest wins. Where several codes map to the same
    symbol, the first in the table is used.

    Args:
        table: Parsed code table
        text: Text to encode

    Returns:
        Codes joined with ``config['separator']``

    Raises:
        CodeTableError: If no symbol matches at some position
    """
    inverted = _invert(table.entries)
    longest = max(map(len, inverted), default=0)
    codes = []
    pos = 0
    while pos < len(text):
        for length in range(min(longest, len(text) - pos), 0, -1):
            code = inverted.get(text[pos:pos + length])
            if code is not None:
                codes.append(code)
                pos += length
                break
        else:
            raise CodeTableError(f"No code for character {text[pos]!r}")
    return table.config['separator'].join(codes)


def _invert(entries: Dict[str, Any]) -> Dict[str, str]:
    inverted: Dict[str, str] = {}
    for code, symbol in entries.items():
        text = str(symbol)
        if text:
            inverted.setdefault(text, code)
    return inverted
