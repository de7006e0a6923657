from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.evaluation.special_forms.operands import operands
from conslisp.types.environment import Environment


def quote_form(
    tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    (expr,) = operands("quote", tail, 1)
    return expr
