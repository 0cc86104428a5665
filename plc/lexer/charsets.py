"""
ASCII character classes used by the lexer.

Each class is a plain predicate ``str -> bool`` over a single character so
that the cursor can compose them positionally. Only ASCII is recognized;
any other character ends up in the operator catch-all.
"""

from functools import lru_cache
from typing import Callable

CharPredicate = Callable[[str], bool]

# Exactly these characters separate tokens (note: no form feed or vertical tab)
WHITESPACE = frozenset(" \b\n\r\t")

CHARACTER_ESCAPES = frozenset("bnrt'\"\\")
STRING_ESCAPES = CHARACTER_ESCAPES | {" "}

# Characters that may never appear raw inside a quoted literal
LINE_BREAKS = frozenset("\n\r")


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_letter(char: str) -> bool:
    return "A" <= char <= "Z" or "a" <= char <= "z"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_nonzero_digit(char: str) -> bool:
    return "1" <= char <= "9"


def is_sign(char: str) -> bool:
    return char == "+" or char == "-"


def is_identifier_start(char: str) -> bool:
    return is_letter(char) or char == "_"


def is_identifier_part(char: str) -> bool:
    return is_letter(char) or is_digit(char) or char == "_" or char == "-"


@lru_cache(maxsize=None)
def equals(expected: str) -> CharPredicate:
    """Predicate matching exactly one character."""
    def predicate(char: str) -> bool:
        return char == expected
    return predicate


def one_of(chars) -> CharPredicate:
    """Predicate matching any character from ``chars``."""
    allowed = frozenset(chars)

    def predicate(char: str) -> bool:
        return char in allowed
    return predicate


def none_of(chars) -> CharPredicate:
    """Predicate matching any character not in ``chars``."""
    excluded = frozenset(chars)

    def predicate(char: str) -> bool:
        return char not in excluded
    return predicate
