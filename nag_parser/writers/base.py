"""
Report writer interface.
"""

from pathlib import Path
from typing import Protocol

from ..core.data_structures import Report


class OutputWriter(Protocol):
    """Serializes a Report to a file; one implementation per OutputFormat."""

    def write(self, report: Report, output_path: Path) -> None:
        """Write every issue of ``report`` to ``output_path``, replacing the file."""
        ...
