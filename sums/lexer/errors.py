"""
Error handling for the sums lexer.

Provides error reporting with source location information and
short suggestions for the handful of things that can go wrong while
turning text into tokens.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidCharacterError(LexerError):
    """A character that is not whitespace, a digit, a bracket or an operator."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(f"Invalid character: '{char}'", location, **kwargs)
        self.char = char


class NumericConversionError(LexerError):
    """A digit run that does not fit the target integer width."""

    def __init__(self, lexeme: str, location: SourceLocation, integer_bits: int, **kwargs):
        super().__init__(f"Number literal overflow: '{lexeme}'", location, **kwargs)
        self.lexeme = lexeme
        self.integer_bits = integer_bits


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L007": "Number literal overflow",
}


# Things people tend to type when they mean one of our operators
OPERATOR_ALTERNATIVES = {
    "×": ["*"],
    "·": ["*"],
    "÷": ["/"],
    "−": ["-"],
    "[": ["("],
    "]": [")"],
    "{": ["("],
    "}": [")"],
}


def create_invalid_character_error(char: str, location: SourceLocation) -> InvalidCharacterError:
    """Create an error for an invalid character."""
    suggestions = OPERATOR_ALTERNATIVES.get(char, [])

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an arithmetic expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return InvalidCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_numeric_conversion_error(lexeme: str, location: SourceLocation,
                                    integer_bits: int) -> NumericConversionError:
    """Create an error for an integer literal that overflows."""
    limit = 2 ** (integer_bits - 1) - 1
    return NumericConversionError(
        lexeme,
        location,
        integer_bits,
        code="L007",
        help_text=f"Integer literals must not exceed {limit} ({integer_bits}-bit signed).",
        suggestions=["Use a smaller number"]
    )
