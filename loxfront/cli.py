#!/usr/bin/env python3
"""
loxfront command line interface
===============================

Usage:
    loxfront tokenize <filename>    Print one token per line
    loxfront parse <filename>       Print the parsed expression tree

Options:
    -v, --verbose   Enable debug logging on stderr

Exit status is 0 on success, 65 when the source has lexical or syntax
errors and 66 when the input file cannot be read.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from . import __version__
from .lexer.errors import Diagnostic
from .lexer.lexer import Lexer
from .parser.parser import Parser
from .parser.ast_printer import AstPrinter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66


def _read_source(filename: str) -> Optional[str]:
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("reading %s failed: %s", filename, e)
        print(f"Failed to read file {filename}", file=sys.stderr)
        return None


def _report(diagnostics: Iterable[Diagnostic]):
    for diagnostic in diagnostics:
        print(diagnostic, file=sys.stderr)


def run_tokenize(filename: str) -> int:
    """Scan a file and print its tokens."""
    source = _read_source(filename)
    if source is None:
        return EXIT_NO_INPUT

    result = Lexer(source, filename).scan()
    _report(error.diagnostic for error in result.errors)
    for token in result.tokens:
        print(token)

    return EXIT_DATA_ERROR if result.had_error else EXIT_OK


def run_parse(filename: str) -> int:
    """Scan and parse a file and print the expression tree."""
    source = _read_source(filename)
    if source is None:
        return EXIT_NO_INPUT

    scan_result = Lexer(source, filename).scan()
    if scan_result.had_error:
        _report(error.diagnostic for error in scan_result.errors)
        return EXIT_DATA_ERROR

    parse_result = Parser(scan_result.tokens).parse()
    if parse_result.had_error:
        _report(parse_result.diagnostics)
        return EXIT_DATA_ERROR

    print(AstPrinter().print(parse_result.expression))
    return EXIT_OK


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxfront",
        description="Scan and parse Lox expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxfront tokenize test.lox     # Token stream, one per line
    loxfront parse test.lox        # (+ 1 (* 2 3))
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest='command', required=True)
    for name, help_text in (('tokenize', 'Print the token stream'),
                            ('parse', 'Print the expression tree')):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('filename', help='Lox source file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the loxfront command."""
    args = build_arg_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("loxfront").setLevel(level)

    if args.command == 'tokenize':
        return run_tokenize(args.filename)
    return run_parse(args.filename)


if __name__ == "__main__":
    sys.exit(main())
