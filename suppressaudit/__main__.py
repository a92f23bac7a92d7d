"""
Entry point for running the suppression audit as a module.

Usage:
    python -m suppressaudit scan ./src
    python -m suppressaudit --help
"""

import sys
from suppressaudit.cli import main

if __name__ == "__main__":
    sys.exit(main())
