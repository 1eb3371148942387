"""
Processing options for the NAG Fortran parser widgets and CLI.
"""

from __future__ import annotations

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.enums import CompilerType, Priority


class ParserConfig(BaseModel):
    """Options controlling how compiler output files are read and filtered."""

    model_config = ConfigDict(
        extra="forbid", validate_assignment=True, str_strip_whitespace=True
    )

    compiler: str = Field(
        default="nag_fortran", description="Identifier of the compiler grammar"
    )
    encoding: str = Field(
        default="utf-8", description="Text encoding of compiler output files"
    )
    concurrency: int = Field(
        default=4, ge=1, le=64, description="Number of files parsed in parallel"
    )
    priorities: Optional[List[Priority]] = Field(
        default=None, description="Keep only issues with these priorities"
    )
    file_pattern: Optional[str] = Field(
        default=None, description="Keep only issues whose file name matches"
    )
    categories: Optional[List[str]] = Field(
        default=None, description="Keep only issues with these categories"
    )

    @field_validator("compiler")
    @classmethod
    def validate_compiler(cls, v: str) -> str:
        """Reject compilers without a grammar."""
        CompilerType.from_string(v)
        return v

    @field_validator("priorities", mode="before")
    @classmethod
    def parse_priorities(cls, v):
        """Accept priority names as well as enum members."""
        if v is None:
            return v
        return [Priority.from_string(p) if isinstance(p, str) else p for p in v]

    @field_validator("file_pattern")
    @classmethod
    def validate_file_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Make sure the file pattern is a valid regular expression."""
        if v:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid file pattern '{v}': {e}") from None
        return v or None

    @property
    def has_filters(self) -> bool:
        return bool(self.priorities or self.file_pattern or self.categories)
