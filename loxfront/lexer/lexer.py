"""
Lox Lexer - turns source text into a token stream

Single left-to-right pass over the source. Lexical errors don't stop the
scan: they get recorded and the cursor moves on, so one run reports every
bad character in the file.

xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_OPERATORS,
    make_eof,
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error,
)

logger = logging.getLogger(__name__)

WHITESPACE = (' ', '\r', '\t')


@dataclass
class ScanResult:
    """Tokens produced by one scan together with the errors it recorded."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by an EOF
    token, collecting lexical errors along the way.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file, used in log messages only
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token
        """
        self.pos = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while self.pos < len(self.source):
            try:
                self._skip_whitespace_and_comments()

                if self.pos >= len(self.source):
                    break

                token = self._next_token()
                if token:
                    self.tokens.append(token)

            except LexerError as e:
                logger.debug("%s: %s", self.filename, e)
                self.errors.append(e)
                # Skip the offending character and keep going
                self._advance()

        self.tokens.append(make_eof(self.line))

        logger.debug("%s: scanned %d tokens, %d errors",
                     self.filename, len(self.tokens), len(self.errors))
        return self.tokens

    def scan(self) -> ScanResult:
        """Tokenize and return the tokens with the recorded errors."""
        tokens = self.tokenize()
        return ScanResult(list(tokens), list(self.errors))

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        start_line = self.line
        current_char = self.source[self.pos]

        if current_char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[current_char], current_char, None, start_line)

        # ! = < > with an optional trailing '='
        if current_char in EQUAL_SUFFIX_OPERATORS:
            single, combined = EQUAL_SUFFIX_OPERATORS[current_char]
            self._advance()
            if self._current() == '=':
                self._advance()
                return Token(combined, current_char + '=', None, start_line)
            return Token(single, current_char, None, start_line)

        # Comments were already skipped, so this is division
        if current_char == '/':
            self._advance()
            return Token(TokenType.SLASH, '/', None, start_line)

        if current_char == '"':
            return self._tokenize_string(start_line)

        if _is_digit(current_char):
            return self._tokenize_number(start_line)

        if _is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(start_line)

        raise create_unexpected_character_error(current_char, start_line)

    def _tokenize_string(self, line: int) -> Token:
        """Tokenize a string literal. Newlines are allowed inside."""
        start_pos = self.pos
        self._advance()  # Skip opening quote

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unterminated_string_error(self.line)

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], line)

    def _tokenize_number(self, line: int) -> Token:
        """Tokenize a number: digits, optionally '.' followed by more digits."""
        start_pos = self.pos

        while _is_digit(self._current()):
            self._advance()

        # A trailing '.' is left for the next token
        if self._current() == '.' and _is_digit(self._peek()):
            self._advance()
            while _is_digit(self._current()):
                self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.NUMBER, lexeme, float(lexeme), line)

    def _tokenize_identifier_or_keyword(self, line: int) -> Token:
        """Tokenize an identifier or keyword."""
        start_pos = self.pos

        # First character is already validated as identifier start
        self._advance()

        while self.pos < len(self.source) and _is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return Token(token_type, lexeme, None, line)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace, newlines and // line comments."""
        while self.pos < len(self.source):
            char = self.source[self.pos]

            if char in WHITESPACE or char == '\n':
                self._advance()
                continue

            # Line comment runs up to (not including) the newline
            if char == '/' and self._peek() == '/':
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            break

    def _advance(self):
        """Advance position by one character, updating the line counter."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
            self.pos += 1

    def _current(self) -> str:
        """Character under the cursor, or '\\0' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_identifier_start(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def _is_identifier_continue(char: str) -> bool:
    return char.isalnum() or char == '_'


def scan(source: str, filename: str = "<string>") -> ScanResult:
    """
    Scan a source string.

    Never raises for bad input; check ``had_error`` on the result.
    """
    return Lexer(source, filename).scan()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for log messages

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
