"""
Utility modules for the NAG Fortran parser.

This module provides CLI support and logging setup.
"""

from .cli import parse_args, main_cli
from .logging_config import setup_logging

__all__ = [
    'parse_args',
    'main_cli',
    'setup_logging'
]
