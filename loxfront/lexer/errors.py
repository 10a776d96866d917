"""
Error handling for the Lox lexer.

Provides the diagnostic record shared by the lexer and the parser, and
the exception raised when the scanner meets input it cannot tokenize.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single reported problem (error or warning) tied to a source line."""
    message: str
    line: int
    where: str = ""  # location suffix, e.g. " at end" or " at '+'"
    severity: str = "error"
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] {self.severity.capitalize()}{self.where}: {self.message}"


class LexerError(Exception):
    """
    Exception raised when the lexer encounters invalid input.

    The lexer catches these itself and keeps scanning, so a single scan can
    collect several of them.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
        )

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    return LexerError(
        message=f"Unexpected character: {char}",
        line=line,
        code="L001",
    )


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return LexerError(
        message="Unterminated string.",
        line=line,
        code="L002",
    )
