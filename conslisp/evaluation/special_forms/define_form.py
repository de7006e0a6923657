import logging

from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.evaluation.special_forms.operands import operands
from conslisp.types.environment import Environment
from conslisp.types.errors import NotASymbol
from conslisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only and returns the bound value.
    """
    name, val_expr = operands("define", tail, 2)
    if not isinstance(name, Symbol):
        raise NotASymbol(f"Cannot define {name}: not a symbol")

    value = evaluate_fn(val_expr, env)
    logger.debug("define %s", name)
    return env.define(name, value)
