"""
Core module for the NAG Fortran parser.

This module contains the fundamental data structures, enums and exceptions used
throughout the parser system.
"""

from .enums import CompilerType, OutputFormat, Priority
from .data_structures import UNDEFINED, Issue, Report
from .exceptions import (
    NagParserError,
    UnmappedCategoryError,
    UnsupportedCompilerError,
    UnsupportedFormatError,
)

__all__ = [
    "CompilerType",
    "OutputFormat",
    "Priority",
    "UNDEFINED",
    "Issue",
    "Report",
    "NagParserError",
    "UnmappedCategoryError",
    "UnsupportedCompilerError",
    "UnsupportedFormatError",
]
