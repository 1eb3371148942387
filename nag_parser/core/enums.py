"""
Enums for the NAG Fortran parser.

This module contains all the enumeration types used throughout the parser system.
"""

from enum import Enum, auto


class Priority(Enum):
    """Severity bucket of a parsed issue."""

    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @classmethod
    def from_string(cls, priority: str) -> "Priority":
        """Convert a priority name (case-insensitive) to an enum value."""
        normalized = priority.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown priority: {priority}")


class CompilerType(Enum):
    """Enumeration of supported compiler output grammars."""

    NAG_FORTRAN = auto()

    @classmethod
    def from_string(cls, compiler_name: str) -> "CompilerType":
        """Convert string compiler name to enum value."""
        name = compiler_name.upper().replace("-", "_")
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported compiler: {compiler_name}")


class OutputFormat(Enum):
    """Enumeration of supported output formats."""

    JSON = auto()
    CSV = auto()
    XML = auto()

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Convert string format name to enum value."""
        name = format_name.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported output format: {format_name}")
