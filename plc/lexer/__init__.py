"""
PLC Lexer Package

Hand-written lexical analyzer for the PLC teaching language. Converts a
source string into IDENTIFIER, INTEGER, DECIMAL, CHARACTER, STRING and
OPERATOR tokens, each tagged with its starting character offset.

Key Features:
- ASCII character classes composed as positional predicates
- Maximal munch for numbers, identifiers and two-character operators
- Exact failure offsets for malformed literals
- Line/column diagnostics computed on demand
"""

from .tokens import Token, TokenKind, SourceLocation, locate
from .cursor import Cursor
from .lexer import Lexer, lex, lex_token
from .errors import ParseFailure, Diagnostic

__all__ = [
    "Lexer",
    "Cursor",
    "Token",
    "TokenKind",
    "SourceLocation",
    "ParseFailure",
    "Diagnostic",
    "lex",
    "lex_token",
    "locate",
]
