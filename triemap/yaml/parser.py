"""YAML parsing and validation for code tables.

A code table maps codes (non-empty strings) to the symbols they stand for,
plus a few options controlling how messages are split and joined.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from triemap.exceptions import CodeTableError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, str] = {
    'separator': ' ',
    'joiner': '',
    'unknown': '?',
}

_SCALAR_TYPES = (str, int, float, bool)


@dataclass
class CodeTable:
    """Parsed code table.

    Attributes:
        config: Options, with defaults filled in for missing keys.
        entries: Code -> symbol, in document order.
    """
    config: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CONFIG))
    entries: Dict[str, Any] = field(default_factory=dict)


def parse_code_table_file(path: Union[str, Path]) -> CodeTable:
    """Parse and validate a code table file.

    Args:
        path: Path to the YAML file

    Returns:
        CodeTable with validated config and entries

    Raises:
        CodeTableError: If the file is invalid or malformed
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Code table not found: {path}")

    with open(path, encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CodeTableError(f"Invalid YAML syntax in {path}: {e}")

    table = _validate_data(data)
    logger.debug("Parsed code table %s: %d entries", path, len(table.entries))
    return table


def parse_code_table_string(content: str) -> CodeTable:
    """Parse a code table from a string.

    Args:
        content: YAML content as string

    Returns:
        CodeTable with validated config and entries
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise CodeTableError(f"Invalid YAML syntax: {e}")

    return _validate_data(data)


def _validate_data(data: Any) -> CodeTable:
    """Validate a loaded YAML document.

    Raises:
        CodeTableError: If validation fails
    """
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise CodeTableError("YAML root must be a mapping")

    unknown_sections = set(data) - {'config', 'entries'}
    if unknown_sections:
        raise CodeTableError(
            f"Unknown top-level section(s): {sorted(map(str, unknown_sections))}"
        )

    config = data.get('config')
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise CodeTableError("'config' must be a mapping")

    entries = data.get('entries')
    if entries is None:
        entries = {}
    if not isinstance(entries, dict):
        raise CodeTableError("'entries' must be a mapping")

    config = _validate_config(config)
    return CodeTable(
        config=config,
        entries=_validate_entries(entries, config['separator']),
    )


def _validate_config(config: Dict[Any, Any]) -> Dict[str, str]:
    """Check option names and types, filling in defaults.

    Raises:
        CodeTableError: If an option is unknown or has the wrong type
    """
    for name, value in config.items():
        if name not in DEFAULT_CONFIG:
            raise CodeTableError(
                f"Unknown config option '{name}'. "
                f"Valid options: {sorted(DEFAULT_CONFIG)}"
            )
        if not isinstance(value, str):
            raise CodeTableError(f"Config option '{name}' must be a string")

    if config.get('separator') == '':
        raise CodeTableError("Config option 'separator' must not be empty")

    merged = dict(DEFAULT_CONFIG)
    merged.update(config)
    return merged


def _validate_entries(entries: Dict[Any, Any], separator: str) -> Dict[str, Any]:
    """Check every code is a non-empty string mapped to a scalar.

    Codes containing the separator are rejected since decoding splits
    messages on it and could never reach them.

    Raises:
        CodeTableError: If an entry is malformed
    """
    for code, symbol in entries.items():
        if not isinstance(code, str):
            # Unquoted YAML like `1: x` yields an int key
            raise CodeTableError(
                f"Entry code {code!r} must be a string (quote it in YAML)"
            )
        if not code:
            raise CodeTableError("Entry code must not be empty")
        if separator in code:
            raise CodeTableError(
                f"Entry code {code!r} contains the separator {separator!r}"
            )
        if symbol is None:
            raise CodeTableError(f"Entry '{code}' has no value")
        if not isinstance(symbol, _SCALAR_TYPES):
            raise CodeTableError(
                f"Entry '{code}' must map to a scalar, got {type(symbol).__name__}"
            )
    return dict(entries)
