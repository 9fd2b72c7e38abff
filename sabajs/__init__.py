"""Scripting core of the saba browser.

Script text extracted from a document flows through three passes: the
:class:`~sabajs.lexer.Lexer` produces tokens, the
:class:`~sabajs.parser.Parser` builds an immutable AST, and the
:class:`~sabajs.interpreter.Interpreter` walks it. :func:`run_script` runs
all three for one document and recovers from script failures.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from sabajs.config import EngineConfig
from sabajs.interpreter import Interpreter
from sabajs.lexer import Lexer, Token, tokenize
from sabajs.page import parse_script, run_script
from sabajs.parser import Parser

__all__ = [
    "EngineConfig",
    "Interpreter",
    "Lexer",
    "Parser",
    "Token",
    "parse_script",
    "run_script",
    "tokenize",
]
