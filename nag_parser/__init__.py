"""
NAG Fortran Compiler Output Parser

This package turns the diagnostics printed by the NAG Fortran compiler into
structured issues. Each issue carries its file, line, category, priority and
message text, including messages that span several lines.

Features:
- Header recognition for every NAG message kind (Info through Panic)
- Multi-line message aggregation
- Category to priority mapping (HIGH, NORMAL, LOW)
- Reports with priority histograms, filtering and combination
- JSON, CSV and XML export, concurrent file processing and a CLI
"""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from .core import (
    CompilerType,
    OutputFormat,
    Priority,
    Issue,
    Report,
    NagParserError,
    UnmappedCategoryError,
    UnsupportedCompilerError,
    UnsupportedFormatError,
)

from .config import ParserConfig

from .parsers import (
    CompilerOutputParser,
    Grammar,
    GrammarRegistry,
    NagFortranParser,
    ParserFactory,
)

from .writers import OutputWriter, WriterFactory

from .widgets import (
    ConsoleFormatterWidget,
    ReportProcessorWidget,
    NagParserWidget,
)

from .utils import parse_args, main_cli, setup_logging


def parse(output: str) -> Report:
    """Parse NAG Fortran compiler output into a Report."""
    return NagFortranParser().parse(output)


def parse_compiler_output(
    output: str, filter_priorities: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """
    Parse compiler output and return structured data.

    Args:
        output: The raw compiler output string to parse
        filter_priorities: Optional list of priorities to include (high, normal, low)

    Returns:
        Dictionary with the parsed issues and a summary
    """
    widget = NagParserWidget(ParserConfig(priorities=filter_priorities))
    return widget.parse_from_string(output).to_dict()


def parse_compiler_file(
    file_path: Union[str, Path],
    filter_priorities: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """
    Parse compiler output from a file and return structured data.

    Args:
        file_path: Path to the file containing compiler output
        filter_priorities: Optional list of priorities to include (high, normal, low)

    Returns:
        Dictionary with the parsed issues and a summary
    """
    widget = NagParserWidget(ParserConfig(priorities=filter_priorities))
    return widget.parse_from_file(file_path).to_dict()


__all__ = [
    "CompilerType",
    "OutputFormat",
    "Priority",
    "Issue",
    "Report",
    "NagParserError",
    "UnmappedCategoryError",
    "UnsupportedCompilerError",
    "UnsupportedFormatError",
    "ParserConfig",
    "CompilerOutputParser",
    "Grammar",
    "GrammarRegistry",
    "NagFortranParser",
    "ParserFactory",
    "OutputWriter",
    "WriterFactory",
    "ConsoleFormatterWidget",
    "ReportProcessorWidget",
    "NagParserWidget",
    "parse_args",
    "main_cli",
    "setup_logging",
    "parse",
    "parse_compiler_output",
    "parse_compiler_file",
]
