"""
Abstract Syntax Tree node definitions for sums.

Three expression shapes: a number, a bracketed group and a binary
operation. Nodes are frozen dataclasses, so two trees compare equal when
they have the same structure. Source spans ride along but are ignored by
equality.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from ..lexer.tokens import SourceLocation, TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    NUMBER = "Number"
    BRACKETED = "Bracketed"
    BINARY_OP = "BinaryOp"


class Operator(Enum):
    """Binary arithmetic operators."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# Which token spells which operator
TOKEN_OPERATORS = {
    TokenType.PLUS: Operator.ADD,
    TokenType.MINUS: Operator.SUBTRACT,
    TokenType.MULTIPLY: Operator.MULTIPLY,
    TokenType.DIVIDE: Operator.DIVIDE,
}


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor:
    """
    Visitor for traversing AST nodes.

    Subclasses implement visit_number, visit_bracketed and
    visit_binary_op; anything missing falls through to generic_visit.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{node.node_type.name.lower()}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} cannot visit {node.node_type.value}")


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def walk(self) -> Iterator['ASTNode']:
        """Yield this node and every descendant, parents first."""
        pending = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.children()))


class Expression(ASTNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class Number(Expression):
    """Integer literal."""
    value: int
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.NUMBER

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class Bracketed(Expression):
    """An explicitly parenthesized subexpression."""
    inner: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.BRACKETED

    def children(self) -> List[ASTNode]:
        return [self.inner]


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation."""
    operator: Operator
    left: Expression
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


def op(operator: Operator, left: Expression, right: Expression,
       span: Optional[SourceSpan] = None) -> BinaryOp:
    """Shorthand for building a BinaryOp."""
    return BinaryOp(operator, left, right, span)
