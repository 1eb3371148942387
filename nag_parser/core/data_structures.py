"""
Data structures for the NAG Fortran parser.

This module contains the core data structures used to represent a single
compiler diagnostic (``Issue``) and the ordered collection produced by one
parse (``Report``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple

from .enums import Priority

UNDEFINED = "-"


@dataclass(frozen=True, slots=True)
class Issue:
    """
    Immutable record of one compiler diagnostic.

    Line and column numbers are 0 when the diagnostic carries no location.
    """

    file_name: str
    category: str
    priority: Priority
    message: str
    line_start: int = 0
    line_end: int = 0
    column_start: int = 0
    column_end: int = 0
    description: str = ""
    package_name: str = UNDEFINED

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("message must not be empty")
        if self.line_start < 0 or self.line_end < 0:
            raise ValueError("line numbers cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Issue to a dictionary."""
        return {
            "file_name": self.file_name,
            "category": self.category,
            "priority": self.priority.value,
            "message": self.message,
            "description": self.description,
            "package_name": self.package_name,
            "line_start": self.line_start,
            "line_end": self.line_end,
            "column_start": self.column_start,
            "column_end": self.column_end,
        }


class Report:
    """Ordered, read-only collection of issues from one parsed input."""

    __slots__ = ("_issues",)

    def __init__(self, issues: Iterable[Issue] = ()):
        self._issues: Tuple[Issue, ...] = tuple(issues)

    @classmethod
    def combine(cls, reports: Iterable[Report]) -> Report:
        """Concatenate several reports, keeping argument order."""
        return cls(issue for report in reports for issue in report)

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __getitem__(self, index: int) -> Issue:
        return self._issues[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Report):
            return NotImplemented
        return self._issues == other._issues

    def __hash__(self) -> int:
        return hash(self._issues)

    def __repr__(self) -> str:
        high, normal, low = self.priorities
        return f"Report(size={len(self)}, high={high}, normal={normal}, low={low})"

    def get(self, index: int) -> Issue:
        """Return the issue at the given position."""
        return self._issues[index]

    @property
    def issues(self) -> Tuple[Issue, ...]:
        return self._issues

    def is_empty(self) -> bool:
        return not self._issues

    def size_of(self, priority: Priority) -> int:
        """Count the issues with the given priority."""
        return sum(1 for issue in self._issues if issue.priority is priority)

    @property
    def priorities(self) -> Tuple[int, int, int]:
        """Priority histogram as ``(high, normal, low)``."""
        return (
            self.size_of(Priority.HIGH),
            self.size_of(Priority.NORMAL),
            self.size_of(Priority.LOW),
        )

    @property
    def files(self) -> Tuple[str, ...]:
        """File names in order of first appearance."""
        return tuple(dict.fromkeys(issue.file_name for issue in self._issues))

    @property
    def categories(self) -> Tuple[str, ...]:
        """Categories in order of first appearance."""
        return tuple(dict.fromkeys(issue.category for issue in self._issues))

    def filter(
        self,
        priorities: Optional[Sequence[Priority]] = None,
        file_pattern: Optional[str] = None,
        categories: Optional[Sequence[str]] = None,
    ) -> Report:
        """Return a new report with the issues matching every given criterion."""
        if not priorities and not file_pattern and not categories:
            return self

        pattern = re.compile(file_pattern) if file_pattern else None
        return Report(
            issue
            for issue in self._issues
            if (not priorities or issue.priority in priorities)
            and (not pattern or pattern.search(issue.file_name))
            and (not categories or issue.category in categories)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Report to a dictionary."""
        high, normal, low = self.priorities
        return {
            "issues": [issue.to_dict() for issue in self._issues],
            "summary": {
                "total": len(self._issues),
                "high": high,
                "normal": normal,
                "low": low,
            },
        }
