"""
sums Recursive Descent Parser

One method per grammar rule, loosest-binding first:

    subtraction    := addition ( '-' addition )*
    addition       := multiplication ( '+' multiplication )*
    multiplication := division ( '*' division )*
    division       := item ( '/' item )*
    item           := bracketed | number
    bracketed      := '(' subtraction ')'
    number         := digit+

Each rule takes a Cursor and returns (new cursor, expression) or raises
ParseError. Cursors are immutable, so a failed rule leaves nothing behind
and `parse_item` can simply retry from the cursor it was given.

Chains at one level lean right: 1-2-3 is 1-(2-3). The binary levels read
their whole chain in a loop and fold it afterwards, so only brackets
cost stack depth.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..lexer.lexer import Cursor, DEFAULT_INTEGER_BITS, location_at
from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expression, Number, Bracketed, SourceSpan, TOKEN_OPERATORS, op
from .errors import (
    ParseError, TOKEN_DESCRIPTIONS, OPERAND_EXPECTED, create_unexpected_token_error,
    create_unexpected_eof_error, create_unclosed_delimiter_error,
    create_trailing_input_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

ParseResult = Tuple[Cursor, Expression]

# Binary operators, loosest-binding first
PRECEDENCE_LEVELS = (TokenType.MINUS, TokenType.PLUS, TokenType.MULTIPLY, TokenType.DIVIDE)


@dataclass
class ParserOptions:
    """Configuration parameters for the parser"""

    # Input boundary: when False, anything after a complete expression is an error
    allow_trailing_input: bool = False

    # Width of the signed integer type number literals are stored in
    integer_bits: int = DEFAULT_INTEGER_BITS


@dataclass(frozen=True)
class _Operand:
    """One item of a chain and the cursors either side of it."""
    start: Cursor
    end: Cursor
    expression: Expression


class Parser:
    """
    Recursive descent parser with backtracking.

    Stateless apart from its options, so one instance can parse any
    number of inputs.
    """

    def __init__(self, options: Optional[ParserOptions] = None):
        self.options = options or ParserOptions()

    def parse(self, source: str, filename: str = "<string>") -> Expression:
        """
        Parse a complete expression.

        Returns:
            Expression AST

        Raises:
            LexerError: If the text contains an invalid character or literal
            ParseError: If the tokens do not form an expression, or brackets
                nest deeper than the interpreter stack allows
        """
        cursor = Cursor(source, 0, filename, self.options.integer_bits)
        try:
            cursor, expression = self.parse_subtraction(cursor)
        except RecursionError:
            raise create_nesting_too_deep_error(cursor.location()) from None

        if not self.options.allow_trailing_input:
            leftover = cursor.peek()
            if leftover is not None:
                raise create_trailing_input_error(leftover)

        logger.debug("Parsed %s (%d characters)", filename, len(source))
        return expression

    # ------------------------------------------------------------------
    # Binary levels
    # ------------------------------------------------------------------

    def parse_subtraction(self, cursor: Cursor) -> ParseResult:
        return self._parse_chain(cursor, 0)

    def parse_addition(self, cursor: Cursor) -> ParseResult:
        return self._parse_chain(cursor, 1)

    def parse_multiplication(self, cursor: Cursor) -> ParseResult:
        return self._parse_chain(cursor, 2)

    def parse_division(self, cursor: Cursor) -> ParseResult:
        return self._parse_chain(cursor, 3)

    def _parse_chain(self, cursor: Cursor, level: int) -> ParseResult:
        """
        Read `item (operator item)*` for every operator at `level` or tighter.

        A looser operator ends the chain without being consumed, which is
        what lets e.g. parse_addition stop in front of a '-'.
        """
        accepted = PRECEDENCE_LEVELS[level:]
        operands: List[_Operand] = []
        operators: List[TokenType] = []

        start = cursor
        while True:
            end, expression = self.parse_item(start)
            operands.append(_Operand(start, end, expression))

            step = end.advance()
            if step is None or step[0].type not in accepted:
                return end, self._fold(operands, operators, level)

            operators.append(step[0].type)
            start = step[1]

    def _fold(self, operands: List[_Operand], operators: List[TokenType], level: int) -> Expression:
        """
        Build the tree for a chain, splitting on the loosest operator first.

        `operators[i]` sits between `operands[i]` and `operands[i + 1]`.
        """
        if len(operands) == 1:
            return operands[0].expression

        operator = PRECEDENCE_LEVELS[level]

        # Split into runs of tighter-binding operations
        groups: List[Tuple[List[_Operand], List[TokenType]]] = [([operands[0]], [])]
        for token_type, operand in zip(operators, operands[1:]):
            if token_type == operator:
                groups.append(([operand], []))
            else:
                groups[-1][0].append(operand)
                groups[-1][1].append(token_type)

        folded = [
            _Operand(group[0].start, group[-1].end, self._fold(group, group_operators, level + 1))
            for group, group_operators in groups
        ]

        # Right fold: a op (b op (c ...))
        end = folded[-1].end
        result = folded[-1].expression
        for left in reversed(folded[:-1]):
            result = op(TOKEN_OPERATORS[operator], left.expression, result, self._span(left.start, end))
        return result

    # ------------------------------------------------------------------
    # Operands
    # ------------------------------------------------------------------

    def parse_item(self, cursor: Cursor) -> ParseResult:
        """A bracketed group, or failing that a number, from the same cursor."""
        try:
            return self.parse_bracketed(cursor)
        except ParseError as bracket_error:
            if bracket_error.location.offset > cursor.location().offset:
                # Got past the '(' so this really was meant to be a group
                raise

        logger.debug("No bracketed group at offset %d, trying a number", cursor.offset)
        try:
            return self.parse_number(cursor)
        except ParseError:
            raise self._expected(cursor, OPERAND_EXPECTED)

    def parse_bracketed(self, cursor: Cursor) -> ParseResult:
        open_token, after_open = self._expect(cursor, TokenType.LEFT_PAREN)
        after_inner, inner = self.parse_subtraction(after_open)

        step = after_inner.advance()
        if step is None or step[0].type != TokenType.RIGHT_PAREN:
            found = step[0] if step else None
            raise create_unclosed_delimiter_error(open_token.location, after_inner.location(), found)

        after_close = step[1]
        return after_close, Bracketed(inner, self._span(cursor, after_close))

    def parse_number(self, cursor: Cursor) -> ParseResult:
        token, after = self._expect(cursor, TokenType.INTEGER)
        return after, Number(token.value, self._span(cursor, after))

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    def _expect(self, cursor: Cursor, token_type: TokenType) -> Tuple[Token, Cursor]:
        """Consume a token of the given type or raise."""
        step = cursor.advance()
        if step is None or step[0].type != token_type:
            raise self._expected(cursor, TOKEN_DESCRIPTIONS[token_type])
        return step

    def _expected(self, cursor: Cursor, expected: str) -> ParseError:
        found = cursor.peek()
        if found is None:
            return create_unexpected_eof_error(expected, cursor.location())
        return create_unexpected_token_error(expected, found)

    def _span(self, start: Cursor, end: Cursor) -> SourceSpan:
        return SourceSpan(start.location(), location_at(end.source, end.offset, end.filename))


def parse_string(source: str, filename: str = "<string>",
                 options: Optional[ParserOptions] = None) -> Expression:
    """
    Convenience function to parse an expression string.

    Args:
        source: Source text
        filename: Filename for error reporting
        options: Parser configuration; defaults reject trailing input

    Returns:
        Expression AST

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    return Parser(options).parse(source, filename)
