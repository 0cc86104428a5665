"""
PLC Lexer - turns source text into a flat list of tokens.

The work is split three ways:

- ``Lexer.lex`` skips whitespace and repeatedly calls ``lex_token``
- ``Lexer.lex_token`` looks ahead (without consuming) and dispatches to one
  routine per token kind
- ``Cursor`` tracks the read position and the span of the pending lexeme

Every routine tests and consumes input through ``Cursor.match``, so nothing
ever backtracks. The first malformed construct raises ``ParseFailure``.
"""

import logging
from typing import List, Optional, Union

from .charsets import (
    CHARACTER_ESCAPES, STRING_ESCAPES, LINE_BREAKS,
    is_whitespace, is_digit, is_nonzero_digit, is_sign,
    is_identifier_start, is_identifier_part, one_of, none_of,
)
from .cursor import Cursor
from .errors import ParseFailure, failure
from .tokens import Token, TokenKind

LOG = logging.getLogger("plc.lexer")

_CHARACTER_ESCAPE = one_of(CHARACTER_ESCAPES)
_STRING_ESCAPE = one_of(STRING_ESCAPES)

# Raw (unescaped) content allowed inside quoted literals
_CHARACTER_CONTENT = none_of(LINE_BREAKS | {"'", "\\"})
_STRING_CONTENT = none_of(LINE_BREAKS | {'"', "\\"})

# Two-character operators, tried in order before falling back to one character
MULTI_CHAR_OPERATORS = (
    (one_of("!=<>"), "="),
    ("&", "&"),
    ("|", "|"),
)


class Lexer:
    """
    Lexical analyzer for PLC source text.

    Built from a source string, ``lex`` always starts over from the
    beginning. Built around an existing cursor, it continues from wherever
    that cursor is, which is how tokens are lexed one at a time.
    """

    def __init__(self, source: Union[str, Cursor]):
        """
        Initialize the lexer.

        Args:
            source: Source text, or a cursor to continue lexing from
        """
        if isinstance(source, Cursor):
            self.source: Optional[str] = None
            self.cursor = source
        else:
            self.source = source
            self.cursor = Cursor(source)

    def lex(self) -> List[Token]:
        """
        Tokenize the input.

        Returns:
            Tokens in input order; whitespace produces none.

        Raises:
            ParseFailure: On the first invalid construct. No partial result
                is returned.
        """
        if self.source is not None:
            self.cursor = Cursor(self.source)
        chars = self.cursor
        tokens: List[Token] = []

        while chars.remaining:
            while chars.match(is_whitespace):
                chars.reset_mark()
            if chars.remaining:
                tokens.append(self.lex_token())

        LOG.debug("lexed %d tokens from %d characters", len(tokens), len(chars.source))
        return tokens

    def lex_token(self) -> Token:
        """
        Lex exactly one token starting at the cursor.

        Only looks ahead to pick a routine; the routine does the consuming.
        Whitespace cannot start a token, ``lex`` skips it before calling here.
        """
        chars = self.cursor
        if not chars.remaining:
            raise failure("L009", chars.index)
        if chars.peek(is_whitespace):
            raise failure("L010", chars.index)

        if chars.peek(is_identifier_start):
            return self.lex_identifier()
        elif chars.peek(is_digit) or chars.peek(is_sign, is_digit):
            return self.lex_number()
        elif chars.peek("'"):
            return self.lex_character()
        elif chars.peek('"'):
            return self.lex_string()
        else:
            return self.lex_operator()

    def lex_identifier(self) -> Token:
        """Identifiers: ``[A-Za-z_][A-Za-z0-9_-]*``."""
        chars = self.cursor
        if not chars.match(is_identifier_start):
            raise failure("L001", chars.index)
        while chars.match(is_identifier_part):
            pass
        return chars.emit(TokenKind.IDENTIFIER)

    def lex_number(self) -> Token:
        """
        Integers and decimals with an optional sign.

        The integer part is either a lone ``0`` or digits without a leading
        zero. A ``0`` followed by more digits ends the number after the
        ``0``; the digits become the next token.
        """
        chars = self.cursor
        chars.match(is_sign)

        if chars.match("0"):
            pass
        elif chars.match(is_nonzero_digit):
            while chars.match(is_digit):
                pass
        else:
            raise failure("L003", chars.index)

        if not chars.match("."):
            return chars.emit(TokenKind.INTEGER)

        if not chars.match(is_digit):
            raise failure("L004", chars.index)
        while chars.match(is_digit):
            pass
        return chars.emit(TokenKind.DECIMAL)

    def lex_character(self) -> Token:
        """A single character or escape between single quotes."""
        chars = self.cursor
        if not chars.match("'"):
            raise failure("L005", chars.index)

        if not chars.has(0):
            raise failure("L005", chars.index)
        if chars.peek("'"):
            raise failure("L007", chars.index)

        if chars.peek("\\"):
            self.lex_escape(_CHARACTER_ESCAPE)
        elif not chars.match(_CHARACTER_CONTENT):
            raise failure("L008", chars.index)

        if not chars.match("'"):
            raise failure("L005", chars.index)
        return chars.emit(TokenKind.CHARACTER)

    def lex_string(self) -> Token:
        """Double-quoted string on a single line; escapes are kept raw."""
        chars = self.cursor
        if not chars.match('"'):
            raise failure("L002", chars.index)

        while chars.has(0):
            if chars.match('"'):
                return chars.emit(TokenKind.STRING)
            if chars.peek("\\"):
                self.lex_escape(_STRING_ESCAPE)
            elif not chars.match(_STRING_CONTENT):
                raise failure("L002", chars.index)

        raise failure("L002", chars.index)

    def lex_escape(self, allowed=_STRING_ESCAPE) -> None:
        """Consume a backslash and one escape letter accepted by ``allowed``."""
        chars = self.cursor
        if not chars.match("\\"):
            raise failure("L006", chars.index)
        if not chars.match(allowed):
            raise failure("L006", chars.index)

    def lex_operator(self) -> Token:
        """
        Operators, longest match first.

        Anything without a two-character form is a one-character operator,
        including characters the language gives no meaning to.
        """
        chars = self.cursor
        for patterns in MULTI_CHAR_OPERATORS:
            if chars.match(*patterns):
                break
        else:
            chars.advance()
        return chars.emit(TokenKind.OPERATOR)


def lex(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        ParseFailure: If lexing fails
    """
    try:
        return Lexer(source).lex()
    except ParseFailure as e:
        LOG.debug("lexing failed with %s at index %d", e.code, e.offset)
        raise


def lex_token(cursor: Cursor) -> Token:
    """Lex a single token at ``cursor``, advancing it past the token."""
    return Lexer(cursor).lex_token()
