"""
sums - arithmetic expression parser

Parses integer arithmetic (+ - * / and brackets) into an abstract
syntax tree.

Architecture:
    sums/
    ├── lexer/           # Tokenization
    └── parser/          # Recursive descent parsing and AST

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Cursor, LexerError, InvalidCharacterError, NumericConversionError
from .parser import Parser, ParserOptions, ParseError, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Cursor",
    "Parser",
    "ParserOptions",
    "parse_string",

    # Errors
    "LexerError",
    "InvalidCharacterError",
    "NumericConversionError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
