"""CLI entry point for triemap.yaml module.

Usage:
    python -m triemap.yaml [options] table.yaml [key ...]

Example:
    python -m triemap.yaml morse.yaml .- ...
    python -m triemap.yaml morse.yaml -- -... -.-.
    python -m triemap.yaml --decode='-... --- ...' morse.yaml
    python -m triemap.yaml --list --size morse.yaml
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
