"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed: Binary, Unary, Grouping, Literal and Variable.
Nodes are immutable, own their children and keep no parent links. Line
information lives only on the operator/name tokens they hold.

Traversal uses the visitor pattern: ``node.accept(visitor)`` hands the node
to ``visitor.visit``, which dispatches on the node's type tag.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Union
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token, TokenType, BINARY_OPERATORS, UNARY_OPERATORS


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    BINARY = "Binary"
    UNARY = "Unary"
    GROUPING = "Grouping"
    LITERAL = "Literal"
    VARIABLE = "Variable"


class LiteralType(Enum):
    """Tag of a literal value, fixed when the node is built."""
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    NIL = "nil"


LiteralValue = Union[bool, float, str, None]


class ASTVisitor(ABC):
    """
    Visitor interface for traversing expressions.

    ``visit`` selects exactly one ``visit_*`` method from the node's tag and
    returns its result unchanged. Implementations recurse into children by
    calling ``child.accept(self)``.
    """

    _HANDLERS = {
        ASTNodeType.BINARY: "visit_binary",
        ASTNodeType.UNARY: "visit_unary",
        ASTNodeType.GROUPING: "visit_grouping",
        ASTNodeType.LITERAL: "visit_literal",
        ASTNodeType.VARIABLE: "visit_variable",
    }

    def visit(self, node: 'Expression') -> Any:
        """Dispatch to the handler for this node's type."""
        handler = self._HANDLERS.get(getattr(node, "node_type", None))
        if handler is None:
            raise TypeError(f"Not an expression node: {node!r}")
        return getattr(self, handler)(node)

    @abstractmethod
    def visit_binary(self, node: 'Binary') -> Any:
        pass

    @abstractmethod
    def visit_unary(self, node: 'Unary') -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, node: 'Grouping') -> Any:
        pass

    @abstractmethod
    def visit_literal(self, node: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_variable(self, node: 'Variable') -> Any:
        pass


class Expression(ABC):
    """Base class for expressions."""
    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class Binary(Expression):
    """Binary operation expression."""
    left: Expression
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY

    def __post_init__(self):
        if self.operator.type not in BINARY_OPERATORS:
            raise ValueError(f"{self.operator.type.name} is not a binary operator")

    def children(self) -> List[Expression]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operation expression (! or -)."""
    operator: Token
    operand: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY

    def __post_init__(self):
        if self.operator.type not in UNARY_OPERATORS:
            raise ValueError(f"{self.operator.type.name} is not a unary operator")

    def children(self) -> List[Expression]:
        return [self.operand]


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING

    def children(self) -> List[Expression]:
        return [self.expression]


_LITERAL_CHECKS = {
    LiteralType.BOOLEAN: lambda v: isinstance(v, bool),
    LiteralType.NUMBER: lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    LiteralType.STRING: lambda v: isinstance(v, str),
    LiteralType.NIL: lambda v: v is None,
}


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value expression."""
    value: LiteralValue
    literal_type: LiteralType

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    def __post_init__(self):
        if not _LITERAL_CHECKS[self.literal_type](self.value):
            raise ValueError(
                f"{self.value!r} is not a valid {self.literal_type.value} literal"
            )

    @classmethod
    def boolean(cls, value: bool) -> 'Literal':
        return cls(value, LiteralType.BOOLEAN)

    @classmethod
    def number(cls, value: float) -> 'Literal':
        return cls(value, LiteralType.NUMBER)

    @classmethod
    def string(cls, value: str) -> 'Literal':
        return cls(value, LiteralType.STRING)

    @classmethod
    def nil(cls) -> 'Literal':
        return cls(None, LiteralType.NIL)

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Variable(Expression):
    """Reference to a name. Nothing resolves it yet."""
    name: Token

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE

    def __post_init__(self):
        if self.name.type != TokenType.IDENTIFIER:
            raise ValueError(f"{self.name.type.name} is not an identifier")

    def children(self) -> List[Expression]:
        return []
