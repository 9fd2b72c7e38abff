"""
Utility functions shared across the saba scripting core tests.
"""
from pathlib import Path
import sys

from sabajs.host import Console
from sabajs.interpreter import Interpreter
from sabajs.lexer import Lexer
from sabajs.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the program.
    """
    parser = Parser(Lexer(source, "<test>"), "<test>")
    return parser.parse()


def run_source(source: str, **host_globals) -> Interpreter:
    """
    Run source code with a console available and return the interpreter.
    """
    host_globals.setdefault("console", Console())
    interpreter = Interpreter("<test>", host_globals)
    interpreter.execute(parse_source(source))
    return interpreter
