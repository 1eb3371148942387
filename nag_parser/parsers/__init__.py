"""
Parser modules for compiler output grammars.

This module provides the grammar registry and the NAG Fortran parser.
"""

from .base import CompilerOutputParser
from .grammar import Grammar, GrammarRegistry, HeaderKind, HeaderMatch, registry
from .nag_fortran import NAG_FORTRAN_GRAMMAR, NagFortranParser
from .factory import ParserFactory

__all__ = [
    'CompilerOutputParser',
    'Grammar',
    'GrammarRegistry',
    'HeaderKind',
    'HeaderMatch',
    'registry',
    'NAG_FORTRAN_GRAMMAR',
    'NagFortranParser',
    'ParserFactory'
]
