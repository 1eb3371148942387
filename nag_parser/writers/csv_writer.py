"""
CSV report writer.

One row per issue. Multi-line messages stay in a single quoted cell.
"""

import csv
from pathlib import Path

from loguru import logger

from ..core.data_structures import Report

FIELDNAMES = [
    "file_name",
    "line_start",
    "line_end",
    "column_start",
    "column_end",
    "priority",
    "category",
    "package_name",
    "message",
    "description",
]


class CsvWriter:
    """Writer for CSV output format."""

    def write(self, report: Report, output_path: Path) -> None:
        """Write the report issues to a CSV file."""
        with output_path.open("w", newline="", encoding="utf-8") as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=FIELDNAMES)
            writer.writeheader()
            writer.writerows(issue.to_dict() for issue in report)
        logger.info(f"CSV report written to {output_path} ({len(report)} rows)")
