"""
sums lexer - turns arithmetic text into tokens

Unlike a classic stateful scanner, everything here is a pure function of
(source, offset). The parser backtracks by holding on to old cursors, so
a cursor must never be able to observe what a later read did.

xwest
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple

from .tokens import Token, TokenType, SourceLocation, OPERATORS, WHITESPACE, DIGITS
from .errors import create_invalid_character_error, create_numeric_conversion_error

logger = logging.getLogger(__name__)

# Literals are stored as 64-bit signed integers unless told otherwise
DEFAULT_INTEGER_BITS = 64


def location_at(source: str, offset: int, filename: str = "<string>") -> SourceLocation:
    """Location of an offset; line/column are derived on demand."""
    return SourceLocation(filename, offset, source)


def skip_whitespace(source: str, offset: int) -> int:
    """Return the first offset at or after `offset` that is not whitespace."""
    while offset < len(source) and source[offset] in WHITESPACE:
        offset += 1
    return offset


def scan_token(
    source: str,
    offset: int = 0,
    filename: str = "<string>",
    integer_bits: int = DEFAULT_INTEGER_BITS
) -> Optional[Tuple[Token, int]]:
    """
    Scan one token starting at `offset`.

    Args:
        source: Source text (never modified)
        offset: Where to start; leading whitespace is skipped
        filename: Name used in source locations
        integer_bits: Width of the signed integer type literals must fit

    Returns:
        (token, offset just past the token), or None at end of input

    Raises:
        InvalidCharacterError: On a character no token can start with
        NumericConversionError: On an integer literal that overflows
    """
    pos = skip_whitespace(source, offset)
    if pos >= len(source):
        return None

    char = source[pos]

    if char in OPERATORS:
        location = location_at(source, pos, filename)
        return Token(OPERATORS[char], char, None, location), pos + 1

    if char in DIGITS:
        return _scan_integer(source, pos, filename, integer_bits)

    raise create_invalid_character_error(char, location_at(source, pos, filename))


def _scan_integer(source: str, start: int, filename: str, integer_bits: int) -> Tuple[Token, int]:
    """Greedily consume a run of ASCII digits."""
    pos = start
    value = 0
    while pos < len(source) and source[pos] in DIGITS:
        value = value * 10 + (ord(source[pos]) - ord("0"))
        pos += 1

    lexeme = source[start:pos]
    location = location_at(source, start, filename)

    if value > 2 ** (integer_bits - 1) - 1:
        raise create_numeric_conversion_error(lexeme, location, integer_bits)

    return Token(TokenType.INTEGER, lexeme, value, location), pos


@dataclass(frozen=True)
class Cursor:
    """
    Immutable position in the source text.

    Reading a token never changes a cursor, it hands back a new one.
    Keep the old one around and you can read the same token again.
    """
    source: str
    offset: int = 0
    filename: str = "<string>"
    integer_bits: int = DEFAULT_INTEGER_BITS

    def advance(self) -> Optional[Tuple[Token, "Cursor"]]:
        """Read the next token; None at end of input."""
        scanned = scan_token(self.source, self.offset, self.filename, self.integer_bits)
        if scanned is None:
            return None
        token, offset = scanned
        return token, replace(self, offset=offset)

    def peek(self) -> Optional[Token]:
        """The next token, without moving."""
        scanned = scan_token(self.source, self.offset, self.filename, self.integer_bits)
        return scanned[0] if scanned else None

    def at_end(self) -> bool:
        return skip_whitespace(self.source, self.offset) >= len(self.source)

    def location(self) -> SourceLocation:
        """Where the next token (or end of input) starts."""
        return location_at(self.source, skip_whitespace(self.source, self.offset), self.filename)


class Lexer:
    """
    Lexical analyzer for arithmetic expressions.

    Iterating a Lexer produces tokens lazily. `tokenize()` collects
    them all at once.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 integer_bits: int = DEFAULT_INTEGER_BITS):
        """
        Initialize the lexer with source text.

        Args:
            source: Source text
            filename: Name of source for error reporting
            integer_bits: Width of the signed integer type for literals
        """
        self.source = source
        self.filename = filename
        self.integer_bits = integer_bits

    def cursor(self) -> Cursor:
        """Cursor at the start of the source."""
        return Cursor(self.source, 0, self.filename, self.integer_bits)

    def __iter__(self) -> Iterator[Token]:
        cursor = self.cursor()
        while True:
            step = cursor.advance()
            if step is None:
                return
            token, cursor = step
            yield token

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens (no end-of-input marker)

        Raises:
            LexerError: On the first invalid character or literal
        """
        tokens = list(self)
        logger.debug("Tokenized %s into %d tokens", self.filename, len(tokens))
        return tokens


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()
