"""
PLC Front End

Lexical analysis for the PLC teaching language. The token stream produced
here is consumed by a separately maintained parser and interpreter.

Architecture:
    plc/
    └── lexer/           # Tokenization and lexical analysis

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, ParseFailure, lex

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "ParseFailure",
    "lex",

    # Version info
    "__version__",
    "__license__",
]
