"""
JSON report writer.
"""

import json
from pathlib import Path

from loguru import logger

from ..core.data_structures import Report


class JsonWriter:
    """Writer for JSON output format."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def write(self, report: Report, output_path: Path) -> None:
        """Write the report, issues and summary, to a JSON file."""
        with output_path.open("w", encoding="utf-8") as json_file:
            json.dump(report.to_dict(), json_file, indent=self.indent)
        logger.info(f"JSON report written to {output_path}")
