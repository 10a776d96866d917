"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions. Produces an
immutable AST with a closed set of node types and a visitor interface for
traversing it.

Key Features:
- Precedence climbing, one method per grammar level
- Left-associative binary operators, right-recursive unary operators
- Explicit ParseResult instead of placeholder nodes
- Reference AST printer

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, Expression,
    Binary, Unary, Grouping, Literal, LiteralType, Variable,
)
from .parser import Parser, ParseResult, parse, parse_string, parse_file
from .errors import ParseError, InvalidASTError
from .ast_printer import AstPrinter

__all__ = [
    # Core parser
    "Parser",
    "ParseResult",
    "parse",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "Expression",
    "Binary", "Unary", "Grouping", "Literal", "LiteralType", "Variable",
    "AstPrinter",

    # Error handling
    "ParseError", "InvalidASTError",
]
