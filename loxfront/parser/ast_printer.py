"""
Parenthesized prefix printer for expression trees.

    (+ 1 (* 2 3))      Binary
    (- x)              Unary
    (group (+ 1 2))    Grouping
"""

from typing import Union

from ..lexer.tokens import format_literal
from .ast_nodes import (
    ASTVisitor, Binary, Expression, Grouping, Literal, LiteralType, Unary, Variable,
)


def format_number(value: Union[int, float]) -> str:
    """Decimal form of a number; integral values drop the fractional part."""
    text = format_literal(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


class AstPrinter(ASTVisitor):
    """Renders an expression as a Lisp-like string."""

    def print(self, expr: Expression) -> str:
        return expr.accept(self)

    def visit_binary(self, node: Binary) -> str:
        return self._parenthesize(node.operator.lexeme, node.left, node.right)

    def visit_unary(self, node: Unary) -> str:
        return self._parenthesize(node.operator.lexeme, node.operand)

    def visit_grouping(self, node: Grouping) -> str:
        return self._parenthesize("group", node.expression)

    def visit_literal(self, node: Literal) -> str:
        if node.literal_type == LiteralType.BOOLEAN:
            return "true" if node.value else "false"
        if node.literal_type == LiteralType.NUMBER:
            return format_number(node.value)
        if node.literal_type == LiteralType.NIL:
            return "nil"
        return node.value

    def visit_variable(self, node: Variable) -> str:
        return node.name.lexeme

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"
