"""
Main entry point for ``python -m nag_parser``.
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
