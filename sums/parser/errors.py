"""
Error handling for the sums parser.

Syntax errors carry the same Diagnostic as lexer errors, plus the token
the parser choked on and a description of what it wanted instead.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation, describe_token
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when a grammar rule cannot match.

    The grammar functions use it to back out of an alternative, so it is
    only fatal once it reaches the top-level caller.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        expected: Optional[str] = None,
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
        self.token = token
        self.expected = expected

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P004": "Unclosed delimiter",
    "P006": "Unexpected trailing input",
    "P010": "Unexpected end of input",
    "P011": "Expression nested too deeply",
}

# Tokens a grammar rule can demand on its own
TOKEN_DESCRIPTIONS = {
    TokenType.INTEGER: "number",
    TokenType.LEFT_PAREN: "'('",
}

OPERAND_EXPECTED = "number or '('"


def suggest_missing_token(expected: str) -> List[str]:
    """Suggest what token might be missing."""
    if expected == OPERAND_EXPECTED:
        return ["Check that every operator has an operand on both sides"]
    return []


def create_unexpected_token_error(expected: str, found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    found_str = describe_token(found)

    return ParseError(
        message=f"Expected {expected}, found {found_str}",
        location=found.location,
        token=found,
        expected=expected,
        code="P001",
        help_text=f"The parser expected to see {expected} at this position, but found {found_str} instead.",
        suggestions=suggest_missing_token(expected)
    )


def create_unexpected_eof_error(expected: str, location: SourceLocation) -> ParseError:
    """Create an error for unexpected end of input."""
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        location=location,
        expected=expected,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected}.",
        suggestions=suggest_missing_token(expected)
    )


def create_unclosed_delimiter_error(open_location: SourceLocation, current_location: SourceLocation,
                                    found: Optional[Token] = None) -> ParseError:
    """Create an error for a '(' that is never closed."""
    return ParseError(
        message=f"Unclosed delimiter '(', found {describe_token(found)}",
        location=current_location,
        token=found,
        expected="')'",
        code="P004",
        help_text=f"The opening '(' at {open_location} was never closed.",
        suggestions=["Add a closing ')'", "Check for missing delimiters"]
    )


def create_trailing_input_error(found: Token) -> ParseError:
    """Create an error for tokens left over after a complete expression."""
    return ParseError(
        message=f"Unexpected trailing input: {describe_token(found)}",
        location=found.location,
        token=found,
        expected="end of input",
        code="P006",
        help_text="A complete expression was parsed but the input continues.",
        suggestions=["Remove the extra input", "Check for an unbalanced ')'"]
    )


def create_nesting_too_deep_error(location: SourceLocation) -> ParseError:
    """Create an error for brackets nested past what the parser can follow."""
    return ParseError(
        message="Expression nested too deeply",
        location=location,
        code="P011",
        help_text="Brackets are nested deeper than the parser can follow.",
        suggestions=["Remove redundant brackets", "Split the expression into smaller parts"]
    )
