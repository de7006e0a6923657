from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.evaluation.special_forms.operands import operands
from conslisp.types.closure import Closure
from conslisp.types.environment import Environment
from conslisp.types.errors import NotASymbol
from conslisp.types.pair import iterate
from conslisp.types.symbol import Symbol


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body) with exactly one body expression; neither part
    # is evaluated here.
    params, body = operands("lambda", tail, 2)

    for param in iterate(params):
        if not isinstance(param, Symbol):
            raise NotASymbol(f"Lambda parameter {param} is not a symbol")

    return Closure(params, body, env)
