"""
Test suite for the Lox expression parser.

Tests cover:
- Operator precedence and associativity
- Literals, identifiers and grouping
- Syntax error reporting and the ParseResult contract

Author: xwest
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.lexer.tokens import Token, TokenType
from loxfront.lexer.errors import LexerError
from loxfront.parser.parser import (
    MAX_NESTING_DEPTH, Parser, ParseResult, parse, parse_string, parse_file,
)
from loxfront.parser.ast_nodes import (
    Binary, Grouping, Literal, LiteralType, Unary, Variable,
)
from loxfront.parser.ast_printer import AstPrinter
from loxfront.parser.errors import ParseError, InvalidASTError


def tok(token_type: TokenType, lexeme: str, literal=None, line: int = 1) -> Token:
    return Token(token_type, lexeme, literal, line)


def num(text: str, line: int = 1) -> Token:
    return tok(TokenType.NUMBER, text, float(text), line)


def eof(line: int = 1) -> Token:
    return tok(TokenType.EOF, "", None, line)


class TestParser(unittest.TestCase):
    """Test cases for the parser."""

    def setUp(self):
        self.printer = AstPrinter()

    def _print(self, source: str) -> str:
        result = parse_string(source)
        self.assertFalse(result.had_error, f"Unexpected errors: {result.errors}")
        return self.printer.print(result.expression)

    def test_precedence_from_tokens(self):
        tokens = [
            num("1"),
            tok(TokenType.PLUS, "+"),
            num("2"),
            tok(TokenType.STAR, "*"),
            num("3"),
            eof(),
        ]
        result = Parser(tokens).parse()
        self.assertEqual(self.printer.print(result.expression), "(+ 1 (* 2 3))")

    def test_grouping_from_tokens(self):
        tokens = [
            tok(TokenType.LEFT_PAREN, "("),
            num("1"),
            tok(TokenType.PLUS, "+"),
            num("2"),
            tok(TokenType.RIGHT_PAREN, ")"),
            eof(),
        ]
        result = parse(tokens)
        self.assertEqual(self.printer.print(result.expression), "(group (+ 1 2))")

    def test_left_associative_term(self):
        self.assertEqual(self._print("1 - 2 - 3"), "(- (- 1 2) 3)")

    def test_left_associative_factor(self):
        self.assertEqual(self._print("8 / 4 * 2"), "(* (/ 8 4) 2)")

    def test_comparison_binds_tighter_than_equality(self):
        self.assertEqual(self._print("1 < 2 == 3 >= 4"), "(== (< 1 2) (>= 3 4))")

    def test_all_binary_levels(self):
        self.assertEqual(
            self._print("1 != 2 + 3 * -4 > 5"),
            "(!= 1 (> (+ 2 (* 3 (- 4))) 5))",
        )

    def test_nested_unary(self):
        result = parse_string("- - x")
        expr = result.expression
        self.assertIsInstance(expr, Unary)
        self.assertIsInstance(expr.operand, Unary)
        self.assertIsInstance(expr.operand.operand, Variable)
        self.assertEqual(self.printer.print(expr), "(- (- x))")

    def test_bang_unary(self):
        self.assertEqual(self._print("!true"), "(! true)")

    def test_literals(self):
        self.assertEqual(parse_string("true").expression, Literal.boolean(True))
        self.assertEqual(parse_string("false").expression, Literal.boolean(False))
        self.assertEqual(parse_string("nil").expression, Literal.nil())
        self.assertEqual(parse_string("12.5").expression, Literal.number(12.5))
        self.assertEqual(parse_string('"hi"').expression, Literal.string("hi"))

    def test_literal_types(self):
        self.assertEqual(parse_string("nil").expression.literal_type, LiteralType.NIL)
        self.assertEqual(parse_string("3").expression.literal_type, LiteralType.NUMBER)

    def test_identifier_is_variable(self):
        expr = parse_string("answer").expression
        self.assertIsInstance(expr, Variable)
        self.assertEqual(expr.name.lexeme, "answer")

    def test_nested_groups(self):
        self.assertEqual(self._print("((1))"), "(group (group 1))")

    def test_grouping_changes_precedence(self):
        expr = parse_string("(1 + 2) * 3").expression
        self.assertIsInstance(expr, Binary)
        self.assertIsInstance(expr.left, Grouping)
        self.assertEqual(expr.operator.type, TokenType.STAR)

    def test_trailing_tokens_are_ignored(self):
        self.assertEqual(self._print("1 2"), "1")

    def test_missing_operand_in_group(self):
        tokens = [
            tok(TokenType.LEFT_PAREN, "("),
            tok(TokenType.NUMBER, "92", 92.0),
            tok(TokenType.PLUS, "+"),
            tok(TokenType.RIGHT_PAREN, ")"),
            eof(),
        ]
        parser = Parser(tokens)
        result = parser.parse()
        self.assertTrue(result.had_error)
        self.assertTrue(parser.has_errors())
        self.assertEqual(str(result.errors[0]), "[line 1] Error at ')': Expect expression.")
        with self.assertRaises(InvalidASTError):
            result.expression

    def test_missing_closing_paren(self):
        result = parse_string("(1 + 2")
        self.assertTrue(result.had_error)
        error = result.errors[0]
        self.assertIsInstance(error, ParseError)
        self.assertEqual(str(error), "[line 1] Error at end: Expect ')' after expression.")
        self.assertEqual(error.diagnostic.code, "P002")

    def test_error_reports_offending_line(self):
        result = parse_string("1 +\n\n*")
        self.assertEqual(str(result.errors[0]), "[line 3] Error at '*': Expect expression.")

    def test_empty_input(self):
        result = parse_string("")
        self.assertTrue(result.had_error)
        self.assertEqual(str(result.errors[0]), "[line 1] Error at end: Expect expression.")

    def test_only_first_error_reported(self):
        result = parse_string("(+ (*")
        self.assertEqual(len(result.errors), 1)

    def test_lexical_errors_skip_parse(self):
        result = parse_string("1 + @")
        self.assertTrue(result.had_error)
        self.assertIsInstance(result.errors[0], LexerError)
        self.assertEqual(result.diagnostics[0].message, "Unexpected character: @")

    def test_parser_is_reusable(self):
        parser = Parser([num("7"), eof()])
        first = parser.parse()
        second = parser.parse()
        self.assertEqual(first.expression, second.expression)

    def test_deeply_nested_groups_report_error(self):
        result = parse_string("(" * 500 + "1" + ")" * 500)
        self.assertTrue(result.had_error)
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].message, "Expression nesting too deep.")
        self.assertEqual(result.errors[0].diagnostic.code, "P003")

    def test_deeply_nested_unary_reports_error(self):
        result = parse_string("-" * 2000 + "1")
        self.assertTrue(result.had_error)
        self.assertEqual(result.errors[0].message, "Expression nesting too deep.")

    def test_nesting_at_limit_parses(self):
        depth = MAX_NESTING_DEPTH
        source = "(" * depth + "1" + ")" * depth
        self.assertEqual(self._print(source), "(group " * depth + "1" + ")" * depth)

    def test_nesting_depth_resets_between_siblings(self):
        group = "(" * 40 + "1" + ")" * 40
        result = parse_string(" + ".join([group] * 5))
        self.assertFalse(result.had_error)

    def test_small_number_prints_plainly(self):
        self.assertEqual(self._print("0.0000001"), "0.0000001")

    def test_missing_eof_token(self):
        result = Parser([num("1"), tok(TokenType.PLUS, "+")]).parse()
        self.assertEqual(str(result.errors[0]), "[line 1] Error at end: Expect expression.")

    def test_parse_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "expr.lox")
            with open(path, 'w', encoding='utf-8') as f:
                f.write("// header\n-(2.5 >= x)\n")
            result = parse_file(path)
        self.assertEqual(self.printer.print(result.expression), "(- (group (>= 2.5 x)))")

    def test_empty_result_is_invalid(self):
        with self.assertRaises(InvalidASTError):
            ParseResult().expression


if __name__ == '__main__':
    unittest.main()
