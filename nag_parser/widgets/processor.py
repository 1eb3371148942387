"""
Report processor widget.

This module provides functionality to parse compiler output strings and files,
with filtering, statistics generation and concurrent file processing.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from ..config import ParserConfig
from ..core.data_structures import Report
from ..core.enums import Priority
from ..core.exceptions import UnmappedCategoryError
from ..parsers.base import CompilerOutputParser
from ..parsers.factory import ParserFactory


def log_internal_error(error: UnmappedCategoryError) -> None:
    """Report an issue dropped because its category has no priority."""
    logger.error(f"Dropped issue: {error}")


class ReportProcessorWidget:
    """Widget for turning compiler output into reports."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the processor widget with optional configuration."""
        self.config = config or ParserConfig()
        self._parser: CompilerOutputParser = ParserFactory.create_parser(
            self.config.compiler, on_internal_error=log_internal_error
        )

    @property
    def parser(self) -> CompilerOutputParser:
        return self._parser

    def process_string(self, output: str) -> Report:
        """Process a string containing compiler output."""
        return self._parser.parse(output)

    def process_file(self, file_path: Union[str, Path]) -> Report:
        """Process a single file containing compiler output."""
        file_path = Path(file_path)
        logger.info(f"Processing file: {file_path}")

        try:
            output = file_path.read_text(encoding=self.config.encoding)
        except FileNotFoundError:
            logger.error(f"File not found: {file_path}")
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file {file_path}: {e}")
            raise

        report = self._parser.parse(output)
        logger.debug(f"{file_path}: {len(report)} issues")
        return report

    def process_files(
        self,
        file_paths: Sequence[Union[str, Path]],
        concurrency: Optional[int] = None,
    ) -> List[Report]:
        """
        Process several files concurrently.

        Reports come back in the order of ``file_paths``. Files that cannot be
        read are logged and left out.
        """
        workers = concurrency or self.config.concurrency
        paths = [Path(p) for p in file_paths]
        results: List[Report] = []

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.process_file, path) for path in paths]

            for path, future in zip(paths, futures):
                try:
                    results.append(future.result())
                    logger.info(f"Successfully processed {path}")
                except (OSError, UnicodeDecodeError) as e:
                    logger.error(f"Failed to process {path}: {e}")

        return results

    def filter_report(
        self,
        report: Report,
        priorities: Optional[Sequence[Priority]] = None,
        file_pattern: Optional[str] = None,
        categories: Optional[Sequence[str]] = None,
    ) -> Report:
        """Filter issues, falling back to the configured filters."""
        return report.filter(
            priorities=priorities or self.config.priorities,
            file_pattern=file_pattern or self.config.file_pattern,
            categories=categories or self.config.categories,
        )

    def combine_reports(self, reports: Sequence[Report]) -> Report:
        """Combine multiple reports into a single report."""
        return Report.combine(reports)

    def generate_statistics(self, reports: Sequence[Report]) -> Dict[str, Any]:
        """Generate statistics from a list of reports."""
        stats: Dict[str, Any] = {
            "total_files": len(reports),
            "total_issues": 0,
            "by_priority": {priority.value: 0 for priority in Priority},
            "by_category": {},
            "files_with_errors": 0,
        }

        for report in reports:
            high, normal, low = report.priorities
            stats["total_issues"] += len(report)
            stats["by_priority"][Priority.HIGH.value] += high
            stats["by_priority"][Priority.NORMAL.value] += normal
            stats["by_priority"][Priority.LOW.value] += low

            if high > 0:
                stats["files_with_errors"] += 1

            for issue in report:
                by_category = stats["by_category"]
                by_category[issue.category] = by_category.get(issue.category, 0) + 1

        return stats
