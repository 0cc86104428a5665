"""
Position-tracked cursor over the lexer input.

The cursor owns the input text, a read index and a mark. Everything between
the mark and the index is the lexeme being built; ``emit`` turns that span
into a token and moves the mark forward.
"""

from typing import Union

from .charsets import CharPredicate, equals
from .tokens import Token, TokenKind

Pattern = Union[str, CharPredicate]


def _as_predicate(pattern: Pattern) -> CharPredicate:
    if isinstance(pattern, str):
        if len(pattern) != 1:
            raise ValueError(f"Character pattern must be a single character, got {pattern!r}")
        return equals(pattern)
    return pattern


class Cursor:
    """
    Read cursor with bounded lookahead.

    Invariant: ``0 <= mark <= index <= len(source)``.
    """

    def __init__(self, source: str):
        self._source = source
        self._index = 0
        self._mark = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def index(self) -> int:
        """Current read position."""
        return self._index

    @property
    def mark(self) -> int:
        """Offset of the first character not yet emitted."""
        return self._mark

    @property
    def remaining(self) -> bool:
        return self._index < len(self._source)

    def has(self, offset: int = 0) -> bool:
        """True if there is a character ``offset`` positions ahead."""
        return 0 <= self._index + offset < len(self._source)

    def peek_char(self, offset: int = 0) -> str:
        """Character ``offset`` positions ahead; callers check ``has`` first."""
        return self._source[self._index + offset]

    def advance(self) -> None:
        self._index += 1

    def reset_mark(self) -> None:
        """Drop the pending span, e.g. after skipping whitespace."""
        self._mark = self._index

    def emit(self, kind: TokenKind) -> Token:
        """Create a token from the pending span and reset the mark."""
        token = Token(kind, self._source[self._mark:self._index], self._mark)
        self.reset_mark()
        return token

    def peek(self, *patterns: Pattern) -> bool:
        """
        Check upcoming characters against positional patterns.

        Each pattern is either a character predicate or a single character.
        Returns False when input runs out before every pattern is checked.
        Never consumes input.
        """
        for offset, pattern in enumerate(patterns):
            if not self.has(offset):
                return False
            if not _as_predicate(pattern)(self.peek_char(offset)):
                return False
        return True

    def match(self, *patterns: Pattern) -> bool:
        """Like ``peek``, but consumes the matched characters on success."""
        if not self.peek(*patterns):
            return False
        for _ in patterns:
            self.advance()
        return True

    def __repr__(self) -> str:
        return f"Cursor(index={self._index}, mark={self._mark}, length={len(self._source)})"
