"""
Error handling for the PLC lexer.

The lexer has a single failure type, ``ParseFailure``, raised at the first
invalid construct. Its ``offset`` is the exact character index where lexing
became invalid; the message is for humans only.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation, locate


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid identifier start",
    "L002": "Unterminated string literal",
    "L003": "Invalid number",
    "L004": "Invalid decimal number",
    "L005": "Unterminated character literal",
    "L006": "Invalid escape sequence",
    "L007": "Empty character literal",
    "L008": "Invalid character in character literal",
    "L009": "Unexpected end of input",
    "L010": "Unexpected whitespace",
}

HELP_TEXT = {
    "L002": "String literals must be closed with a double quote on the same line.",
    "L003": "A + or - sign must be followed by a digit to start a number.",
    "L004": "A decimal point must be followed by at least one digit.",
    "L005": "Character literals hold exactly one character between single quotes.",
    "L006": "Valid escapes are \\b \\n \\r \\t \\' \\\" \\\\ (and \\<space> in strings).",
    "L007": "Use '\\'' for a single quote character.",
    "L008": "Escape quotes and backslashes; line breaks are not allowed.",
}


@dataclass
class Diagnostic:
    """Human-readable rendering of a lexer failure."""
    message: str
    location: SourceLocation
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        header = self.severity.upper()
        if self.code:
            header += f"[{self.code}]"
        result = f"{header}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class ParseFailure(Exception):
    """
    Exception raised when the input cannot be tokenized.

    ``offset`` is part of the contract; ``message`` is advisory.
    """

    def __init__(self, message: str, offset: int, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.code = code

    def diagnose(self, source: str, filename: str = "<string>") -> Diagnostic:
        """Build a diagnostic pointing at the failure in ``source``."""
        return Diagnostic(
            message=self.message,
            location=locate(source, self.offset, filename),
            code=self.code,
            help_text=HELP_TEXT.get(self.code),
        )

    def __str__(self) -> str:
        return f"{self.message} at index {self.offset}"

    def __repr__(self) -> str:
        return f"ParseFailure({self.message!r}, {self.offset})"


def failure(code: str, offset: int) -> ParseFailure:
    """Create a failure using the standard message for ``code``."""
    return ParseFailure(ERROR_CODES[code], offset, code)
