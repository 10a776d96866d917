"""
End-to-end tests for the loxfront command line.

Author: xwest
"""

import unittest
import sys
import os
import io
import logging
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxfront.cli import main, EXIT_OK, EXIT_DATA_ERROR, EXIT_NO_INPUT


class TestCli(unittest.TestCase):
    """Run main() against temporary source files."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root_handlers = list(logging.getLogger().handlers)
        self.package_level = logging.getLogger("loxfront").level

    def tearDown(self):
        self.tmp.cleanup()
        root = logging.getLogger()
        for handler in root.handlers[:]:
            if handler not in self.root_handlers:
                root.removeHandler(handler)
        logging.getLogger("loxfront").setLevel(self.package_level)

    def _run(self, command: str, source: str, *options: str):
        path = os.path.join(self.tmp.name, "test.lox")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(source)
        return self._run_path(command, path, *options)

    def _run_path(self, command: str, path: str, *options: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main([*options, command, path])
        return code, out.getvalue(), err.getvalue()

    def test_tokenize(self):
        code, out, err = self._run("tokenize", '(1.50 "hi")\nvar')
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.splitlines(), [
            "LEFT_PAREN ( null",
            "NUMBER 1.50 1.5",
            'STRING "hi" hi',
            "RIGHT_PAREN ) null",
            "VAR var null",
            "EOF  null",
        ])
        self.assertEqual(err, "")

    def test_tokenize_empty_file(self):
        code, out, _ = self._run("tokenize", "")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "EOF  null\n")

    def test_tokenize_with_errors(self):
        code, out, err = self._run("tokenize", ",$\n\"open")
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(out.splitlines(), ["COMMA , null", "EOF  null"])
        self.assertEqual(err.splitlines(), [
            "[line 1] Error: Unexpected character: $",
            "[line 2] Error: Unterminated string.",
        ])

    def test_parse(self):
        code, out, err = self._run("parse", "1 + 2 * 3")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "(+ 1 (* 2 3))\n")
        self.assertEqual(err, "")

    def test_parse_syntax_error(self):
        code, out, err = self._run("parse", "(92 +)")
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(out, "")
        self.assertEqual(err, "[line 1] Error at ')': Expect expression.\n")

    def test_parse_lexical_error(self):
        code, out, err = self._run("parse", "1 + #")
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(out, "")
        self.assertIn("Unexpected character: #", err)

    def test_parse_multiline_unterminated_string(self):
        code, out, err = self._run("parse", '1 + "abc\ndef')
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(out, "")
        self.assertEqual(err, "[line 2] Error: Unterminated string.\n")

    def test_parse_deeply_nested_group(self):
        code, out, err = self._run("parse", "(" * 500 + "1" + ")" * 500)
        self.assertEqual(code, EXIT_DATA_ERROR)
        self.assertEqual(out, "")
        self.assertIn("Expression nesting too deep.", err)

    def test_verbose_enables_debug_logging(self):
        code, out, _ = self._run("tokenize", "1", "-v")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.splitlines(), ["NUMBER 1 1.0", "EOF  null"])
        self.assertEqual(logging.getLogger("loxfront").level, logging.DEBUG)
        self.assertTrue(
            logging.getLogger("loxfront.lexer.lexer").isEnabledFor(logging.DEBUG)
        )

    def test_default_log_level_is_warning(self):
        code, _, err = self._run("tokenize", "1")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(err, "")
        self.assertEqual(logging.getLogger("loxfront").level, logging.WARNING)

    def test_missing_file(self):
        missing = os.path.join(self.tmp.name, "nope.lox")
        code, out, err = self._run_path("tokenize", missing)
        self.assertEqual(code, EXIT_NO_INPUT)
        self.assertEqual(out, "")
        self.assertIn("Failed to read file", err)

    def test_unknown_command(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            main(["evaluate", "x.lox"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
