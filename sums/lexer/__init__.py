"""
sums Lexer Package

Character-level tokenizer for arithmetic expressions.

Key Features:
- Integers, + - * /, and round brackets
- Whitespace (space, tab, newline) skipped between tokens
- Immutable cursors that can be re-read from any saved position
- Overflow-checked integer literals
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, Cursor, scan_token, tokenize_string, DEFAULT_INTEGER_BITS
from .errors import Diagnostic, LexerError, InvalidCharacterError, NumericConversionError

__all__ = [
    "Lexer",
    "Cursor",
    "Token",
    "TokenType",
    "SourceLocation",
    "scan_token",
    "tokenize_string",
    "DEFAULT_INTEGER_BITS",
    "Diagnostic",
    "LexerError",
    "InvalidCharacterError",
    "NumericConversionError",
]
