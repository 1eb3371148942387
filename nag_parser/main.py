"""
Main entry point for the NAG Fortran parser.

This module provides the main function for command-line usage and can be run as a script.
"""

import sys

from .utils.cli import main_cli


def main():
    """Main entry point for the NAG Fortran parser."""
    return main_cli()


if __name__ == "__main__":
    sys.exit(main())
