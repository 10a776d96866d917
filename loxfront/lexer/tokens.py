"""
Token definitions for the Lox lexer.

This module defines all token types produced by the scanner:
- Single-character punctuation
- One- and two-character operators
- Literals (strings, numbers, identifiers)
- Reserved keywords

Author: xwest
"""

import math
from decimal import Decimal
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Member names are the spelling used by the ``tokenize`` command output.
    """

    # ========================================================================
    # Single-character punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # ========================================================================
    # One or two character operators
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # foo, _bar, camelCase
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 123, 45.67

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


LiteralValue = Union[float, str, None]


def format_literal(value: LiteralValue) -> str:
    """
    Render a decoded token literal in its canonical textual form.

    Numbers are written in plain decimal notation and always carry a
    fractional part (``123`` -> ``123.0``, ``1e-7`` -> ``0.0000001``),
    strings are rendered as their raw content, and a missing literal is
    ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        text = format(Decimal(repr(value)), "f")
        return text if "." in text else text + ".0"
    return str(value)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), decoded literal value
    and the line of the token's first character.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: LiteralValue           # float for NUMBER, str for STRING
    line: int                       # 1-based source line

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {format_literal(self.literal)}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")


# Lookup tables used by the lexer for fast keyword/operator recognition

KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by '='
# Maps first char -> (single kind, combined kind)
EQUAL_SUFFIX_OPERATORS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

BINARY_OPERATORS = frozenset({
    TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.MINUS, TokenType.PLUS,
    TokenType.SLASH, TokenType.STAR,
})

UNARY_OPERATORS = frozenset({TokenType.BANG, TokenType.MINUS})


def make_eof(line: int) -> Token:
    """Build the synthetic end-of-input token."""
    return Token(TokenType.EOF, "", None, line)


def location_of(token: Optional[Token]) -> str:
    """Describe where a diagnostic points: ' at end' or " at '<lexeme>'"."""
    if token is None or token.type == TokenType.EOF:
        return " at end"
    return f" at '{token.lexeme}'"
