"""Engine configuration.

Settings are plain dataclass fields with defaults suitable for running page
scripts. :meth:`EngineConfig.from_env` reads overrides from the environment:

- ``SABAJS_DEBUG``: any value other than empty, ``0`` or ``false`` enables
  debug output (token and AST dumps, DEBUG logging).
- ``SABAJS_MAX_STEPS``: evaluation step budget per script.
- ``SABAJS_MAX_CALL_DEPTH``: maximum nesting of script function calls.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_CALL_DEPTH = 64


def _env_int(environ: Mapping[str, str], key: str) -> Optional[int]:
    raw = environ.get(key, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


@dataclass
class EngineConfig:
    """Settings for lexing, parsing and running one script."""

    max_steps: Optional[int] = None
    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
        """
        Build a configuration from environment variables.

        Raises:
            ValueError: If a numeric setting is not a positive integer.
        """
        environ = os.environ if environ is None else environ
        depth = _env_int(environ, "SABAJS_MAX_CALL_DEPTH")
        return cls(
            max_steps=_env_int(environ, "SABAJS_MAX_STEPS"),
            max_call_depth=DEFAULT_MAX_CALL_DEPTH if depth is None else depth,
            debug=environ.get("SABAJS_DEBUG", "").strip().lower() not in ("", "0", "false"),
        )
