"""
sums Parser Package

Hand-written recursive descent parser for arithmetic expressions.
Produces immutable ASTs with source spans.

Key Features:
- One grammar method per precedence level
- Backtracking between alternatives via immutable cursors
- Structural equality on AST nodes
- Diagnostics with error codes, help text and suggestions

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Expression, Number, Bracketed, BinaryOp,
    Operator, SourceSpan, TOKEN_OPERATORS, op
)
from .parser import Parser, ParserOptions, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "ParserOptions",
    "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Expression",
    "Number", "Bracketed", "BinaryOp", "Operator", "SourceSpan",
    "TOKEN_OPERATORS", "op",

    # Error handling
    "ParseError",
]
