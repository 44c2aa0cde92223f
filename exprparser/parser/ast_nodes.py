"""
Abstract Syntax Tree node definitions for arithmetic expressions.

The tree is strictly binary: a Literal leaf holds an integer and a
BinaryOp owns its two operands. Nodes are immutable and compare
structurally; source spans are informational and ignored by equality.
Parentheses never appear in the tree.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional

from ..lexer.tokens import SourceLocation, TokenType, ARITHMETIC_OPERATORS, SYMBOL_LEXEMES


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    BINARY_OP = "BinaryOp"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """
    Visitor interface for traversing expression trees.

    Subclasses implement one method per node type; visit() dispatches
    through the node's accept().
    """

    def visit(self, node: 'Expression') -> Any:
        return node.accept(self)

    @abstractmethod
    def visit_literal(self, node: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_binary_op(self, node: 'BinaryOp') -> Any:
        pass


class Expression(ABC):
    """Base class for all expression nodes."""
    node_type: ClassVar[ASTNodeType]

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""

    def walk(self):
        """Yield this node and every descendant, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))


@dataclass(frozen=True, repr=False)
class Literal(Expression):
    """Integer literal expression."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    value: int
    span: Optional[SourceSpan] = field(default=None, compare=False)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_literal(self)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


@dataclass(frozen=True, repr=False)
class BinaryOp(Expression):
    """Binary arithmetic operation expression."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_OP

    left: Expression
    operator: TokenType
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False)

    def __post_init__(self):
        if self.operator not in ARITHMETIC_OPERATORS:
            raise ValueError(f"{self.operator.name} is not an arithmetic operator")

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    @property
    def symbol(self) -> str:
        return SYMBOL_LEXEMES[self.operator]

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"

    def __repr__(self) -> str:
        return f"BinaryOp({self.left!r}, {self.operator.name}, {self.right!r})"
