"""
Lookup of report writers by output format.
"""

from typing import Callable, Dict, Union

from ..core.enums import OutputFormat
from ..core.exceptions import UnsupportedFormatError
from .base import OutputWriter
from .csv_writer import CsvWriter
from .json_writer import JsonWriter
from .xml_writer import XmlWriter

_WRITERS: Dict[OutputFormat, Callable[[], OutputWriter]] = {
    OutputFormat.JSON: JsonWriter,
    OutputFormat.CSV: CsvWriter,
    OutputFormat.XML: XmlWriter,
}


class WriterFactory:
    """Creates the writer matching a format name or OutputFormat member."""

    @staticmethod
    def create_writer(format_type: Union[OutputFormat, str]) -> OutputWriter:
        """
        Build a fresh writer.

        Raises:
            UnsupportedFormatError: If no writer handles the format
        """
        if isinstance(format_type, str):
            try:
                format_type = OutputFormat.from_string(format_type)
            except ValueError as e:
                raise UnsupportedFormatError(str(e)) from None

        writer_class = _WRITERS.get(format_type)
        if writer_class is None:
            raise UnsupportedFormatError(f"No writer for output format: {format_type}")
        return writer_class()
