"""
Token definitions for the sums lexer.

The arithmetic language is deliberately tiny: integers, the four
arithmetic operators and round brackets. Everything else is an error.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types."""

    # Literals
    INTEGER = auto()                # 42, 034

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # Brackets
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and for the spans attached to AST nodes.
    Line and column are only worked out when asked for, since most
    locations never end up in a diagnostic.
    """
    filename: str
    offset: int  # Character offset from start of source
    source: str = field(default="", compare=False, repr=False)

    @property
    def line(self) -> int:
        return self.source.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        return self.offset - self.source.rfind("\n", 0, self.offset)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value
    and source location.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # int for INTEGER, None otherwise
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and str(self.value) != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is an integer literal."""
        return self.type == TokenType.INTEGER

    @property
    def is_operator(self) -> bool:
        """Check if this token is one of the four arithmetic operators."""
        return self.type in ARITHMETIC_OPERATORS

    @property
    def end_offset(self) -> int:
        """Offset just past the last character of this token."""
        return self.location.offset + len(self.lexeme)


def describe_token(token: Optional[Token]) -> str:
    """Short human-readable description used in diagnostics."""
    if token is None:
        return "end of input"
    if token.type == TokenType.INTEGER:
        return f"number {token.lexeme}"
    return f"'{token.lexeme}'"


# Single-character tokens
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

ARITHMETIC_OPERATORS = {
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
}

# Only these are skipped between tokens; '\r' and friends are errors
WHITESPACE = {" ", "\t", "\n"}

DIGITS = "0123456789"
