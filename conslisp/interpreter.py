from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from conslisp import LispValue
from conslisp.config import get_prelude_paths, get_recursion_limit
from conslisp.evaluation.evaluator import evaluate
from conslisp.reader.parser import parse_all
from conslisp.types.environment import Environment
from conslisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating conslisp code.
    Keeps one root Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        raise_recursion_limit(get_recursion_limit())
        self.env: Environment = Environment.new_root()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            for path in get_prelude_paths():
                if path.is_file():
                    self.load_file(path)
                else:
                    logger.debug("prelude %s not found, skipping", path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in parse_all(code):
            evaluate(expr, self.env)

    def load_file(self, path: str | Path) -> LispValue:
        """Evaluate every form in a source file; returns the last value."""
        logger.debug("loading %s", path)
        return self.eval(Path(path).read_text(encoding='utf-8'))

    def eval_all(self, code: str) -> list[LispValue]:
        return [evaluate(expr, self.env) for expr in parse_all(code)]

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the value of the last one."""
        result: LispValue = Nil
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result


def raise_recursion_limit(limit: int) -> None:
    """Let the host stack hold deep Lisp recursion; never lowers the limit."""
    if sys.getrecursionlimit() < limit:
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)
