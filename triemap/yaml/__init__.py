"""YAML code tables backed by a trie.

This module loads prefix-coded tables (morse code and the like) from YAML
into a TrieMap, and decodes or encodes text with them.

Example morse.yaml:
    config:
      separator: " "
      unknown: "?"

    entries:
      ".-": A
      "-...": B
      "/": " "

Usage:
    from triemap.yaml import load_trie
    morse = load_trie('morse.yaml')
    morse.get('.-')  # "A"

CLI:
    python -m triemap.yaml morse.yaml .-
"""

from .parser import (
    CodeTable,
    parse_code_table_file,
    parse_code_table_string,
)
from .converter import table_to_trie, decode, encode
from .runner import load_trie, main

__all__ = [
    'CodeTable',
    'parse_code_table_file',
    'parse_code_table_string',
    'table_to_trie',
    'decode',
    'encode',
    'load_trie',
    'main',
]
