"""
Widget modules for the NAG Fortran parser.

This module provides widgets for processing, formatting, and exporting reports.
"""

from .formatter import ConsoleFormatterWidget
from .processor import ReportProcessorWidget, log_internal_error
from .main_widget import NagParserWidget

__all__ = [
    'ConsoleFormatterWidget',
    'ReportProcessorWidget',
    'NagParserWidget',
    'log_internal_error'
]
