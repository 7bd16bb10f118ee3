"""
Entry point for running textsalvage as a module.

Usage:
    python -m textsalvage [options] file.pdf
"""

import sys

from textsalvage.main import main

if __name__ == "__main__":
    sys.exit(main())
