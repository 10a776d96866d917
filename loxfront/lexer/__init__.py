"""
Lox Lexer Package

Implements the lexical scanner for the Lox language: source text in,
ordered token list terminated by an EOF token out.

Key Features:
- Maximal-munch recognition of one- and two-character operators
- Multi-line string literals and // line comments
- Floating-point number literals with canonical textual form
- Error accumulation: every bad character is reported in one scan

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, format_literal
from .lexer import Lexer, ScanResult, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "ScanResult",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "format_literal",
    "Diagnostic",
    "LexerError",
]
