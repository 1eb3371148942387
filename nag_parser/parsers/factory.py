"""
Parser factory for creating appropriate parser instances.

This module provides a factory for creating compiler output parsers based on
the compiler type.
"""

from typing import Optional, Union

from ..core.enums import CompilerType
from ..core.exceptions import UnsupportedCompilerError
from .base import CompilerOutputParser
from .grammar import registry
from .nag_fortran import GRAMMAR_NAME, InternalErrorHandler, NagFortranParser


class ParserFactory:
    """Factory for creating appropriate compiler output parser instances."""

    @staticmethod
    def create_parser(
        compiler_type: Union[CompilerType, str],
        on_internal_error: Optional[InternalErrorHandler] = None,
    ) -> CompilerOutputParser:
        """Create and return the appropriate parser for the given compiler type."""
        if isinstance(compiler_type, str):
            try:
                compiler_type = CompilerType.from_string(compiler_type)
            except ValueError as e:
                raise UnsupportedCompilerError(str(e)) from None

        match compiler_type:
            case CompilerType.NAG_FORTRAN:
                return NagFortranParser(
                    registry.get(GRAMMAR_NAME), on_internal_error=on_internal_error
                )
            case _:
                raise UnsupportedCompilerError(
                    f"Unsupported compiler type: {compiler_type}"
                )
