"""
Parser interface shared by every registered grammar.
"""

from typing import Protocol

from ..core.data_structures import Report


class CompilerOutputParser(Protocol):
    """Anything that turns one blob of compiler output into a Report."""

    def parse(self, output: str) -> Report:
        """Return the issues found in ``output``; malformed text never raises."""
        ...
