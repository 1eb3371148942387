"""
Main parser widget.

This module provides the widget that orchestrates the whole pipeline: parse,
filter, combine, export and display.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from ..config import ParserConfig
from ..core.data_structures import Report
from ..core.enums import OutputFormat
from ..writers.factory import WriterFactory
from .formatter import ConsoleFormatterWidget
from .processor import ReportProcessorWidget


class NagParserWidget:
    """Main widget for orchestrating compiler output parsing and processing."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the main parser widget."""
        self.config = config or ParserConfig()
        self.processor = ReportProcessorWidget(self.config)
        self.formatter = ConsoleFormatterWidget()

    def parse_from_string(self, output: str) -> Report:
        """Parse compiler output from a string and apply configured filters."""
        report = self.processor.process_string(output)
        return self.processor.filter_report(report)

    def parse_from_file(self, file_path: Union[str, Path]) -> Report:
        """Parse compiler output from a file and apply configured filters."""
        report = self.processor.process_file(file_path)
        return self.processor.filter_report(report)

    def parse_from_files(
        self,
        file_paths: Sequence[Union[str, Path]],
        combine_outputs: bool = True,
    ) -> Union[Report, List[Report]]:
        """Parse compiler output from multiple files."""
        reports = [
            self.processor.filter_report(report)
            for report in self.processor.process_files(file_paths)
        ]

        if combine_outputs:
            return self.processor.combine_reports(reports)
        return reports

    def write_output(
        self,
        report: Report,
        output_format: Union[OutputFormat, str],
        output_path: Union[str, Path],
    ) -> None:
        """Write a report to a file in the specified format."""
        writer = WriterFactory.create_writer(output_format)
        writer.write(report, Path(output_path))

    def display_output(self, report: Report, colorize: bool = True) -> None:
        """Display a report on the console."""
        if colorize:
            self.formatter.colorize_output(report)
        else:
            print(self.formatter.get_formatted_output(report))

    def generate_statistics(self, reports: Sequence[Report]) -> Dict[str, Any]:
        """Generate statistics from reports."""
        return self.processor.generate_statistics(reports)

    def process_and_export(
        self,
        input_files: Sequence[Union[str, Path]],
        output_format: Union[OutputFormat, str],
        output_path: Union[str, Path],
        display_stats: bool = False,
        display_output: bool = False,
        colorize: bool = True,
    ) -> Report:
        """Complete processing pipeline: parse, filter, combine, and export."""
        reports = self.parse_from_files(input_files, combine_outputs=False)
        combined = self.processor.combine_reports(reports)
        logger.info(
            f"Parsed {len(reports)} of {len(input_files)} files, {len(combined)} issues"
        )

        self.write_output(combined, output_format, output_path)

        if display_stats:
            stats = self.generate_statistics(reports)
            print("\nStatistics:")
            print(json.dumps(stats, indent=4))

        if display_output:
            self.display_output(combined, colorize=colorize)

        return combined
