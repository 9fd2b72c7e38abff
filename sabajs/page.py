"""Running a document's script.

The renderer calls :func:`run_script` once per document with the inline
script text it extracted. A script that fails to lex, parse or run must not
take the renderer down with it, so every :class:`ScriptException` is logged
and swallowed here. Whatever the script changed on host objects before the
failure stays changed.


File: page.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Any, Optional

from sabajs.config import EngineConfig
from sabajs.exceptions import ScriptException
from sabajs.interpreter import Interpreter
from sabajs.lexer import Lexer
from sabajs.nodes import Program
from sabajs.parser import Parser

logger = logging.getLogger(__name__)


def parse_script(source: str, file: str = "<script>") -> Program:
    """
    Lex and parse script text into a program.

    Raises:
        LexError: On characters the lexer does not accept.
        ParseError: On malformed function declarations.
    """
    return Parser(Lexer(source, file), file).parse()


def run_script(
    source: str,
    host_globals: Optional[dict[str, Any]] = None,
    config: Optional[EngineConfig] = None,
    file: str = "<script>",
) -> Optional[Interpreter]:
    """
    Parse and execute one document's script.

    Parameters:
        source (str): The script text.
        host_globals (dict): Host objects exposed to the script as globals.
        config (EngineConfig): Limits and debug settings.
        file (str): Script name used in messages.

    Returns:
        Interpreter: The interpreter after a successful run, or None if the
        script failed and execution stopped.
    """
    config = config or EngineConfig()
    interpreter = Interpreter(file, host_globals, config)
    try:
        program = parse_script(source, file)
        if config.debug:
            logger.debug("Parsed %d top-level node(s) from %s: %r", len(program), file, program)
        interpreter.execute(program)
    except ScriptException as e:
        logger.warning("Script in %s stopped: %s: %s", file, type(e).__name__, e)
        return None
    return interpreter
