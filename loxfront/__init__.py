"""
loxfront - Lox Front End Package

Scanner and expression parser for the Lox scripting language, the first
stages of a tree-walking interpreter.

Architecture:
    loxfront/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Expression parsing, AST nodes, AST printer
    └── cli.py           # tokenize / parse command line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, scan
from .parser import Parser, parse, AstPrinter

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "AstPrinter",
    "scan",
    "parse",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
