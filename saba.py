"""
Saba Script Runner

This is the command-line entry point for the saba scripting core. It runs a
script outside the browser with a ``console`` object available, which makes
it easy to try scripts before embedding them in a page.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating every top-level node in order.

Set ``SABAJS_DEBUG=1`` to print the tokens and AST before execution.


File: saba.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import logging
import sys

from sabajs.config import EngineConfig
from sabajs.exceptions import ScriptException, StructuralParseException
from sabajs.host import Console
from sabajs.interpreter import Interpreter
from sabajs.lexer import tokenize
from sabajs.page import parse_script, run_script


def print_usage():
    """
    Print usage.
    """
    print()
    print("Saba Script Runner")
    print()
    print("Usage:")
    print("    saba <script.js>")
    print()
    print("Arguments:")
    print("    <script.js>")
    print("        Path to a script to execute. A `console` object with a")
    print("        `log` method is available to the script.")
    print()
    print("Example:")
    print("    saba hello.js")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    SABAJS_DEBUG, SABAJS_MAX_STEPS, SABAJS_MAX_CALL_DEPTH")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_file(script_name: str, config: EngineConfig) -> int:
    """
    Run a script file. Returns the process exit code.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    if config.debug:
        try:
            debug_print_tokens_ast(tokenize(code, script_name), parse_script(code, script_name))
        except ScriptException as e:
            print(f"{type(e).__name__}: {e}")

    interpreter = run_script(code, {"console": Console()}, config, script_name)
    return 0 if interpreter is not None else 1


def run_repl(config: EngineConfig):
    """
    Run the interactive REPL
    """
    print("Saba Script Runner - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>", {"console": Console()}, config)
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                program = parse_script(source, "<stdin>")
                interpreter.execute(program)
                buffer.clear()
            except StructuralParseException as e:
                # Running out of input inside a function means the input is incomplete
                if e.found is None:
                    continue
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
            except ScriptException as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = (sys.argv if argv is None else argv)[1:]
    config = EngineConfig.from_env()
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args:
        run_repl(config)
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_file(args[0], config)
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
