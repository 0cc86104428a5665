"""
Token definitions for the PLC lexer.

Every lexeme in a PLC source text falls into exactly one of a handful of
token kinds. Whitespace never produces a token, and keywords are not
distinguished from identifiers at this stage - the parser decides what
``LET`` or ``print`` mean.
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenKind(Enum):
    """Closed set of token kinds produced by the lexer."""

    IDENTIFIER = auto()             # getName, a-b-c, _tmp
    INTEGER = auto()                # 0, 42, -7, +123
    DECIMAL = auto()                # 1.5, -0.25, 7.000
    CHARACTER = auto()              # 'c', '\n'
    STRING = auto()                 # "", "Hello,\nWorld"
    OPERATOR = auto()               # ==, &&, (, ;, $


LITERAL_KINDS = frozenset({
    TokenKind.INTEGER,
    TokenKind.DECIMAL,
    TokenKind.CHARACTER,
    TokenKind.STRING,
})


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Only used for diagnostics; tokens themselves carry a bare offset.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its kind, the exact lexeme and where it starts.

    Two tokens are equal when kind, lexeme and offset all agree.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source, escapes unprocessed
    offset: int                     # Index of the first character in the input

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r})@{self.offset}"

    @property
    def end(self) -> int:
        """Offset one past the last character of the lexeme."""
        return self.offset + len(self.lexeme)

    @property
    def is_literal(self) -> bool:
        return self.kind in LITERAL_KINDS


def locate(source: str, offset: int, filename: str = "<string>") -> SourceLocation:
    """
    Convert a character offset into a 1-based line/column location.

    The offset may equal ``len(source)``, which is where end-of-input
    failures are reported.
    """
    if offset < 0 or offset > len(source):
        raise ValueError(f"Offset {offset} is outside the source (length {len(source)})")

    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return SourceLocation(filename, line, offset - line_start + 1, offset)
