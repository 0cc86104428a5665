#!/usr/bin/env python3
"""
Main test runner for the PLC lexer tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Lex a small program end to end and show the tokens."""

    print("PLC Lexer Test Suite")
    print("=" * 60)

    try:
        from plc.lexer import lex, ParseFailure
        print("✅ Lexer modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    code = 'LET greeting = "Hello,\\nWorld!";\nIF count >= -1.5 && ok DO print(greeting); END'

    print("Lexing sample program...")
    try:
        tokens = lex(code)
    except ParseFailure as e:
        print(f"❌ Lexing failed:\n{e.diagnose(code, '<sample>')}")
        return False

    print(f"  Generated {len(tokens)} tokens")
    for token in tokens:
        print(f"    {token}")
    print()

    print("Checking failure reporting...")
    broken = 'print("unterminated);'
    try:
        lex(broken)
    except ParseFailure as e:
        print(e.diagnose(broken, "<broken>"))
    else:
        print("❌ Expected an unterminated string failure")
        return False

    return True


def run_all_tests():
    """Run the smoke test and every unittest module under tests/."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
