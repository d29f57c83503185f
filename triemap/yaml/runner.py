"""Command line runner for code tables.

This module provides the entry point for looking up, decoding and encoding
with a code table loaded from YAML.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from triemap.trie import TrieMap

from .converter import decode, encode, table_to_trie
from .parser import parse_code_table_file

logger = logging.getLogger(__name__)


def load_trie(path: Union[str, Path]) -> TrieMap:
    """Load a code table file into a trie.

    Args:
        path: Path to the YAML file

    Returns:
        TrieMap from code to symbol

    Example:
        morse = load_trie('morse.yaml')
        morse.get('.-')  # "A"
    """
    table = parse_code_table_file(path)
    trie = table_to_trie(table)
    logger.debug("Loaded %d entries from %s", len(trie), path)
    return trie


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point for code tables.

    Usage:
        python -m triemap.yaml [options] table.yaml [key ...]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure or absent keys)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Look up, decode or encode with a YAML code table',
        prog='python -m triemap.yaml',
    )
    parser.add_argument(
        'table',
        help='Path to the code table YAML file',
    )
    parser.add_argument(
        'keys',
        nargs='*',
        help='Codes to look up',
    )
    parser.add_argument(
        '--decode',
        metavar='MESSAGE',
        default=None,
        help='Decode a separator-delimited message',
    )
    parser.add_argument(
        '--encode',
        metavar='TEXT',
        default=None,
        help='Encode text character by character',
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='Print every entry, sorted by code',
    )
    parser.add_argument(
        '--size',
        action='store_true',
        help='Print the number of entries',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging',
    )

    parsed = parser.parse_args(args)

    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        table = parse_code_table_file(parsed.table)
        trie = table_to_trie(table)
        logger.debug("Built trie with %d entries", len(trie))

        if parsed.size:
            print(trie.size())

        if parsed.list:
            for key in sorted(trie):
                print(f"{key}\t{trie[key]}")

        if parsed.decode is not None:
            print(decode(table, parsed.decode, trie=trie))

        if parsed.encode is not None:
            print(encode(table, parsed.encode))

        missing = 0
        for key in parsed.keys:
            if key in trie:
                print(f"{key}\t{trie[key]}")
            else:
                print(f"{key}\t(absent)")
                missing += 1

        if missing:
            logger.debug("%d of %d key(s) absent", missing, len(parsed.keys))
            return 1
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
