"""
Header grammars and the grammar registry.

A grammar bundles the ordered header patterns of one compiler's diagnostic
format with the table that maps each category to a priority. Grammars are
immutable and compile their patterns once, so one instance can be shared
read-only by any number of parsers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Pattern, Tuple

from ..core.enums import Priority
from ..core.exceptions import UnmappedCategoryError, UnsupportedCompilerError


@dataclass(frozen=True)
class HeaderMatch:
    """Raw fields captured from a header line."""

    category: str
    message: str = ""
    file_name: Optional[str] = None
    line_number: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        """A header without a message body is malformed and gets dropped."""
        return bool(self.message)


@dataclass(frozen=True)
class HeaderKind:
    """
    One message kind of a grammar.

    ``marker`` decides whether a line is a header of this kind at all;
    ``pattern`` extracts its fields. A line that hits the marker but not the
    pattern is a malformed header.
    """

    category: str
    marker: Pattern[str]
    pattern: Pattern[str]

    def match(self, line: str) -> Optional[HeaderMatch]:
        if not self.marker.match(line):
            return None

        match = self.pattern.match(line)
        if match is None:
            return HeaderMatch(category=self.category)

        fields = match.groupdict()
        line_number = fields.get("line")
        return HeaderMatch(
            category=self.category,
            message=fields.get("message") or "",
            file_name=fields.get("file") or None,
            line_number=int(line_number) if line_number else None,
        )


@dataclass(frozen=True)
class Grammar:
    """Immutable header table plus category to priority mapping."""

    name: str
    kinds: Tuple[HeaderKind, ...]
    priorities: Mapping[str, Priority] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "priorities", MappingProxyType(dict(self.priorities)))

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(kind.category for kind in self.kinds)

    def recognize(self, line: str) -> Optional[HeaderMatch]:
        """
        Try each header kind in order and return the first hit.

        Returns None when the line is not a header.
        """
        for kind in self.kinds:
            header = kind.match(line)
            if header is not None:
                return header
        return None

    def priority_of(self, category: str) -> Priority:
        """
        Look up the priority of a category.

        Raises:
            UnmappedCategoryError: If the category is missing from the table
        """
        try:
            return self.priorities[category]
        except KeyError:
            raise UnmappedCategoryError(category, self.name) from None


class GrammarRegistry:
    """Registry of grammars keyed by identifier."""

    def __init__(self) -> None:
        self._grammars: Dict[str, Grammar] = {}

    def register(self, grammar: Grammar, replace: bool = False) -> Grammar:
        if grammar.name in self._grammars and not replace:
            raise ValueError(f"Grammar already registered: {grammar.name}")
        self._grammars[grammar.name] = grammar
        return grammar

    def get(self, name: str) -> Grammar:
        try:
            return self._grammars[name]
        except KeyError:
            raise UnsupportedCompilerError(f"Unknown grammar: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._grammars

    def __iter__(self) -> Iterator[str]:
        return iter(self._grammars)

    def __len__(self) -> int:
        return len(self._grammars)


def header_kind(category: str, body: str) -> HeaderKind:
    """
    Build a header kind for a category marker emitted at the start of a line.

    Args:
        category: Marker text, matched case-sensitively
        body: Regular expression for what follows ``"<category>: "``; must
            define a ``message`` group

    Returns:
        HeaderKind with both patterns compiled
    """
    marker = re.escape(category)
    return HeaderKind(
        category=category,
        marker=re.compile(rf"{marker}:(?:\s|$)"),
        pattern=re.compile(rf"{marker}: {body}"),
    )


registry = GrammarRegistry()
