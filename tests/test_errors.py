"""
Tests for lexer failures, diagnostics and source locations.
"""

import unittest
import sys
import os

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from plc.lexer import ParseFailure, Diagnostic, SourceLocation, lex, locate
from plc.lexer.errors import ERROR_CODES, failure


class TestLocate(unittest.TestCase):

    def test_first_line(self):
        self.assertEqual(locate("abc", 1), SourceLocation("<string>", 1, 2, 1))

    def test_later_line(self):
        location = locate("ab\ncd\nef", 4, "main.plc")
        self.assertEqual((location.line, location.column), (2, 2))
        self.assertEqual(str(location), "main.plc:2:2")

    def test_end_of_input(self):
        self.assertEqual(locate("ab\n", 3), SourceLocation("<string>", 2, 1, 3))

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            locate("ab", 3)
        with self.assertRaises(ValueError):
            locate("ab", -1)


class TestParseFailure(unittest.TestCase):

    def test_fields(self):
        error = failure("L002", 13)
        self.assertEqual(error.offset, 13)
        self.assertEqual(error.code, "L002")
        self.assertEqual(error.message, ERROR_CODES["L002"])
        self.assertIn("13", str(error))

    def test_lone_sign_help_mentions_sign_only(self):
        from plc.lexer import Lexer
        with self.assertRaises(ParseFailure) as ctx:
            Lexer("-x").lex_number()
        help_text = ctx.exception.diagnose("-x").help_text
        self.assertIn("sign", help_text)
        self.assertNotIn("leading zero", help_text)

    def test_without_code(self):
        error = ParseFailure("Something odd", 0)
        self.assertIsNone(error.code)
        self.assertEqual(error.diagnose("x").help_text, None)

    def test_diagnose_points_at_offending_line(self):
        source = 'LET x = 1;\nprint("oops\n");'
        with self.assertRaises(ParseFailure) as ctx:
            lex(source)
        diagnostic = ctx.exception.diagnose(source, "demo.plc")
        self.assertIsInstance(diagnostic, Diagnostic)
        self.assertEqual(diagnostic.location, SourceLocation("demo.plc", 2, 12, 22))
        rendered = str(diagnostic)
        self.assertIn("ERROR[L002]: Unterminated string literal", rendered)
        self.assertIn("--> demo.plc:2:12", rendered)
        self.assertIn("help:", rendered)

    def test_is_logged_and_reraised(self):
        with self.assertLogs("plc.lexer", level="DEBUG") as logs:
            with self.assertRaises(ParseFailure):
                lex("'\\q'")
        self.assertIn("L006", logs.output[-1])

    def test_success_is_logged(self):
        with self.assertLogs("plc.lexer", level="DEBUG") as logs:
            lex("a b")
        self.assertIn("lexed 2 tokens", logs.output[-1])


if __name__ == "__main__":
    unittest.main()
