"""
Writer modules for report output formats.

Reports can be written as JSON, CSV or XML.
"""

from .base import OutputWriter
from .json_writer import JsonWriter
from .csv_writer import CsvWriter
from .xml_writer import XmlWriter
from .factory import WriterFactory

__all__ = [
    'OutputWriter',
    'JsonWriter',
    'CsvWriter',
    'XmlWriter',
    'WriterFactory'
]
