"""Application engine for conslisp.

Centralizes how a function value meets its argument list:
- Closures get a fresh child frame of their captured environment, with each
  parameter bound positionally; the body is evaluated there.
- Primitives are resolved by name in the primitive table and handed the
  argument list.
Anything else cannot be applied.
"""

from __future__ import annotations

import logging

from conslisp import LispValue, EvaluatorFn
from conslisp.builtin.primitives import PRIMITIVES
from conslisp.printer import to_string
from conslisp.types.closure import Closure
from conslisp.types.errors import InternalError, NotAFunction
from conslisp.types.primitive import Primitive

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments.

    Raises ArityError unless the argument count matches the parameter count
    exactly. The new frame outlives the call only if a closure created during
    the body captured it.
    """
    frame = fn.extend_env(args)
    logger.debug("apply closure %s to %s", fn.params, args)
    return evaluate_fn(fn.body, frame)


def apply_primitive(fn: Primitive, args: LispValue) -> LispValue:
    native = PRIMITIVES.get(fn.name)
    if native is None:
        raise InternalError(f"No primitive named {fn.name}")
    return native(args)


def apply(fn: LispValue, args: LispValue, evaluate_fn: EvaluatorFn | None = None) -> LispValue:
    """Apply either a Closure or a Primitive to a Lisp list of arguments.

    Raises NotAFunction for any other value.
    """
    if isinstance(fn, Closure):
        if evaluate_fn is None:
            from conslisp.evaluation.evaluator import evaluate as evaluate_fn
        return apply_closure(fn, args, evaluate_fn)
    if isinstance(fn, Primitive):
        return apply_primitive(fn, args)
    raise NotAFunction(f"{to_string(fn)} is not a function")
