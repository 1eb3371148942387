"""
Custom exceptions for the nag_parser package.
"""


class NagParserError(Exception):
    """Base exception for parser errors."""

    pass


class UnmappedCategoryError(NagParserError):
    """Raised when a recognized category has no entry in the priority table.

    This means the header patterns and the priority mapping of a grammar have
    drifted apart.
    """

    def __init__(self, category: str, grammar: str = ""):
        self.category = category
        self.grammar = grammar
        where = f" in grammar '{grammar}'" if grammar else ""
        super().__init__(f"No priority mapped for category '{category}'{where}")


class UnsupportedCompilerError(NagParserError, ValueError):
    """Raised when no grammar is registered for a compiler identifier."""

    pass


class UnsupportedFormatError(NagParserError, ValueError):
    """Raised when no writer exists for an output format."""

    pass
