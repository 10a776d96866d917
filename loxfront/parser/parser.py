"""
Lox Recursive Descent Parser

Builds an expression AST from the token list produced by the lexer.
One method per grammar rule, lowest precedence first:

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | IDENTIFIER | "true" | "false" | "nil"
                | "(" expression ")"

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Union

from ..lexer.tokens import Token, TokenType, make_eof
from ..lexer.errors import Diagnostic, LexerError
from ..lexer.lexer import Lexer
from .ast_nodes import Binary, Expression, Grouping, Literal, Unary, Variable
from .errors import (
    ParseError, InvalidASTError, create_expect_expression_error,
    create_unclosed_group_error, create_nesting_too_deep_error,
)

logger = logging.getLogger(__name__)

# Each grouping or unary operator costs about a dozen Python frames in the
# recursive descent; this keeps deep input well under the interpreter limit.
MAX_NESTING_DEPTH = 64


@dataclass
class ParseResult:
    """
    Outcome of a parse: either an expression or the errors that prevented it.

    Accessing ``expression`` on a failed result raises ``InvalidASTError``.
    """
    _expression: Optional[Expression] = None
    errors: List[Union[LexerError, ParseError]] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    @property
    def expression(self) -> Expression:
        if self.had_error or self._expression is None:
            raise InvalidASTError("parse failed; no expression was produced")
        return self._expression

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [error.diagnostic for error in self.errors]


class Parser:
    """
    Lox expression parser.

    Single forward cursor with one token of lookahead. The first syntax
    error ends the parse; there is no statement boundary to resync to.
    """

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
        """
        self.tokens = list(tokens)
        self.current = 0
        self.depth = 0
        self.errors: List[ParseError] = []

    def parse(self) -> ParseResult:
        """
        Parse the token stream into an expression.

        Returns:
            ParseResult holding the expression, or the syntax error
        """
        self.current = 0
        self.depth = 0
        self.errors = []

        try:
            expr = self._parse_expression()
        except ParseError as e:
            logger.debug("parse failed: %s", e)
            self.errors.append(e)
            return ParseResult(None, list(self.errors))

        return ParseResult(expr, [])

    def has_errors(self) -> bool:
        """Check if the last parse reported an error."""
        return len(self.errors) > 0

    # Grammar rules

    def _parse_expression(self) -> Expression:
        return self._parse_equality()

    def _parse_equality(self) -> Expression:
        return self._parse_binary_level(
            self._parse_comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL
        )

    def _parse_comparison(self) -> Expression:
        return self._parse_binary_level(
            self._parse_term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def _parse_term(self) -> Expression:
        return self._parse_binary_level(self._parse_factor, TokenType.MINUS, TokenType.PLUS)

    def _parse_factor(self) -> Expression:
        return self._parse_binary_level(self._parse_unary, TokenType.SLASH, TokenType.STAR)

    def _parse_binary_level(self, operand: Callable[[], Expression],
                            *operators: TokenType) -> Expression:
        """Parse a left-associative chain: operand (op operand)*."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _parse_unary(self) -> Expression:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            self._enter_nesting()
            operand = self._parse_unary()
            self.depth -= 1
            return Unary(operator, operand)

        return self._parse_primary()

    def _parse_primary(self) -> Expression:
        if self._match(TokenType.FALSE):
            return Literal.boolean(False)
        if self._match(TokenType.TRUE):
            return Literal.boolean(True)
        if self._match(TokenType.NIL):
            return Literal.nil()

        if self._match(TokenType.NUMBER):
            return Literal.number(self._previous().literal)
        if self._match(TokenType.STRING):
            return Literal.string(self._previous().literal)

        if self._match(TokenType.IDENTIFIER):
            return Variable(self._previous())

        if self._match(TokenType.LEFT_PAREN):
            self._enter_nesting()
            expr = self._parse_expression()
            self._consume(TokenType.RIGHT_PAREN, create_unclosed_group_error)
            self.depth -= 1
            return Grouping(expr)

        raise create_expect_expression_error(self._peek())

    # Utility methods

    def _enter_nesting(self) -> None:
        """Count one level of grouping or unary nesting."""
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise create_nesting_too_deep_error(self._peek())

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it is one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Missing EOF: synthesize one on the last known line
        line = self.tokens[-1].line if self.tokens else 1
        return make_eof(line)

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType,
                 error_factory: Callable[[Token], ParseError]) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()
        raise error_factory(self._peek())


def parse(tokens: Sequence[Token]) -> ParseResult:
    """Parse a token list into a ParseResult."""
    return Parser(tokens).parse()


def parse_string(source: str, filename: str = "<string>") -> ParseResult:
    """
    Convenience function to scan and parse a source string.

    Lexical errors are returned in the result and the parse is skipped.

    Args:
        source: Source code string
        filename: Filename for log messages

    Returns:
        ParseResult
    """
    scan_result = Lexer(source, filename).scan()
    if scan_result.had_error:
        return ParseResult(None, list(scan_result.errors))
    return Parser(scan_result.tokens).parse()


def parse_file(filepath: str) -> ParseResult:
    """
    Convenience function to scan and parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        ParseResult

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath)
