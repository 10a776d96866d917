"""
Error handling for the Lox parser.

Syntax errors carry the same one-line diagnostic as lexer errors, plus the
token the parser was looking at when it gave up.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token, location_of
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    ``Parser.parse`` catches it and returns it inside the ``ParseResult``.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            where=location_of(token),
            severity="error",
            code=code,
        )
        self.token = token

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidASTError(Exception):
    """Raised when the expression of a failed parse is accessed."""


# Helper functions for creating common parser errors

def create_expect_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError(
        message="Expect expression.",
        token=found,
        code="P001",
    )


def create_unclosed_group_error(found: Token) -> ParseError:
    """Create an error for a grouping missing its ')'."""
    return ParseError(
        message="Expect ')' after expression.",
        token=found,
        code="P002",
    )


def create_nesting_too_deep_error(found: Token) -> ParseError:
    """Create an error for an expression nested past the recursion limit."""
    return ParseError(
        message="Expression nesting too deep.",
        token=found,
        code="P003",
    )
