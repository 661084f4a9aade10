#!/usr/bin/env python3
"""
Main test runner for the sums parser tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_checks():
    """Parse a few known expressions before running the full suite."""

    print("🚀 sums Test Suite")
    print("=" * 60)

    try:
        from sums.lexer.lexer import Lexer
        from sums.parser.parser import parse_string
        from sums.lexer.errors import LexerError
        from sums.parser.errors import ParseError

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import modules: {e}")
        return False

    print("Testing simple parse pipeline...")
    for source in ["3 + 5 * (7-3)", "23+4", "1-2-3", "(34)"]:
        try:
            tokens = Lexer(source).tokenize()
            ast = parse_string(source)
        except (LexerError, ParseError) as e:
            print(f"  ❌ {source!r} FAILED:\n{e}")
            return False
        print(f"  ✅ {source!r}: {len(tokens)} tokens -> {ast!r}")

    print()
    print("Testing error handling...")
    for source in ["(34", "34)", "#"]:
        try:
            parse_string(source)
        except (LexerError, ParseError) as e:
            first_line = str(e).splitlines()[0]
            print(f"  ✅ {source!r}: {first_line}")
            continue
        print(f"  ❌ {source!r}: expected an error but parsing succeeded")
        return False

    print()
    return True


def run_all_tests():
    """Run all sums tests."""
    if not run_smoke_checks():
        return False

    suite = unittest.TestLoader().discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print("✅ All tests passed!")
    else:
        print("❌ Some tests failed.")
        print(f"Failures: {len(result.failures)}")
        print(f"Errors: {len(result.errors)}")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
