"""Interactive read-eval-print loop.

Each line is read and evaluated in the session's root environment. A failing
form is reported and the loop moves on to the next line.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from conslisp.interpreter import Interpreter
from conslisp.printer import to_string
from conslisp.types.errors import ConsLispError

logger = logging.getLogger(__name__)

PROMPT = "> "


def eval_line(interp: Interpreter, line: str) -> str | None:
    """Evaluate one line; return the text to echo, or None for a blank line."""
    if not line.strip():
        return None
    try:
        values = interp.eval_all(line)
    except (ConsLispError, RecursionError) as ex:
        logger.debug("evaluation failed", exc_info=True)
        return f"Error: {ex}"
    if not values:
        return None
    return "\n".join(to_string(v) for v in values)


def repl(
    interp: Interpreter | None = None,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> None:
    """Run until end of input (or until the `exit` primitive ends the process)."""
    interp = interp or Interpreter()
    out = out or sys.stdout
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            out.write("\n")
            break
        echo = eval_line(interp, line)
        if echo is not None:
            out.write(echo + "\n")
