"""
NAG Fortran compiler output parser.

This module provides parsing functionality for diagnostics printed by the NAG
Fortran compiler (``nagfor``). Every message starts with a header line::

    Warning: C:/file2.f90, line 5: Procedure pointer F pointer-assigned but otherwise unused
    Error: file7.f90: Character function length 7 is not same as argument F ...
    Panic: file10.f90, line 1: User requested panic

File name and line number are optional. Any line that is not a header is a
continuation of the message opened by the previous header::

    Fatal Error: file9.f90, line 5: SAME_NAME is not a derived type
                 detected at ::@N
"""

from __future__ import annotations

import io
from typing import Callable, List, Optional

from ..core.data_structures import UNDEFINED, Issue, Report
from ..core.enums import CompilerType, Priority
from ..core.exceptions import UnmappedCategoryError
from .grammar import Grammar, HeaderMatch, header_kind, registry

GRAMMAR_NAME = "nag-fortran"

# "<file>, line <N>: " takes any file name; a bare "<file>: " needs an extension.
_FILE = r"(?P<file>[^\s,][^,]*?(?=, line \d+:)|[^\s,][^,]*?\.[^\s,:]+(?=:))"
_LOCATION = _FILE + r"(?:, line (?P<line>\d+))?:(?: +|$)"
_BODY = r"(?:" + _LOCATION + r")?(?P<message>.*?)\s*$"

# Longest markers first so that no shorter marker shadows one sharing its words.
CATEGORIES = (
    "Deleted feature used",
    "Runtime Error",
    "Questionable",
    "Obsolescent",
    "Fatal Error",
    "Extension",
    "Warning",
    "Error",
    "Panic",
    "Info",
)

PRIORITIES = {
    "Info": Priority.LOW,
    "Warning": Priority.NORMAL,
    "Questionable": Priority.NORMAL,
    "Extension": Priority.NORMAL,
    "Obsolescent": Priority.NORMAL,
    "Deleted feature used": Priority.NORMAL,
    "Error": Priority.HIGH,
    "Runtime Error": Priority.HIGH,
    "Fatal Error": Priority.HIGH,
    "Panic": Priority.HIGH,
}

NAG_FORTRAN_GRAMMAR = registry.register(
    Grammar(
        name=GRAMMAR_NAME,
        kinds=tuple(header_kind(category, _BODY) for category in CATEGORIES),
        priorities=PRIORITIES,
    )
)

InternalErrorHandler = Callable[[UnmappedCategoryError], None]


class _OpenIssue:
    """Message being accumulated between its header and the next one."""

    __slots__ = ("header", "parts", "ending")

    def __init__(self, header: HeaderMatch, ending: str):
        self.header = header
        self.parts = [header.message]
        self.ending = ending

    def append(self, content: str, ending: str) -> None:
        self.parts.append(self.ending or "\n")
        self.parts.append(content)
        self.ending = ending

    @property
    def message(self) -> str:
        return "".join(self.parts)


class NagFortranParser:
    """
    Line-oriented parser for NAG Fortran compiler output.

    The parser keeps no state between calls to ``parse``; one instance may be
    used from several threads at once.
    """

    def __init__(
        self,
        grammar: Grammar = NAG_FORTRAN_GRAMMAR,
        on_internal_error: Optional[InternalErrorHandler] = None,
    ):
        """
        Initialize the NAG Fortran parser.

        Args:
            grammar: Header table and priority mapping to parse with
            on_internal_error: Called with the error whenever an issue is dropped
                because its category has no priority
        """
        self.compiler_type = CompilerType.NAG_FORTRAN
        self.grammar = grammar
        self.on_internal_error = on_internal_error

    def parse(self, output: str) -> Report:
        """Parse NAG Fortran compiler output into a report."""
        issues: List[Issue] = []
        current: Optional[_OpenIssue] = None

        # newline="" keeps the original line endings for multi-line messages.
        for raw_line in io.StringIO(output, newline=""):
            content = raw_line.rstrip("\r\n")
            ending = raw_line[len(content):]

            header = self.grammar.recognize(content)
            if header is None:
                if current is not None:
                    current.append(content, ending)
                continue

            self._emit(current, issues)
            current = _OpenIssue(header, ending) if header.is_complete else None

        self._emit(current, issues)
        return Report(issues)

    def _emit(self, current: Optional[_OpenIssue], issues: List[Issue]) -> None:
        if current is None:
            return

        header = current.header
        try:
            priority = self.grammar.priority_of(header.category)
        except UnmappedCategoryError as error:
            if self.on_internal_error is not None:
                self.on_internal_error(error)
            return

        line = header.line_number or 0
        issues.append(
            Issue(
                file_name=header.file_name or UNDEFINED,
                category=header.category,
                priority=priority,
                message=current.message,
                line_start=line,
                line_end=line,
            )
        )
