from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.evaluation.special_forms.operands import operands
from conslisp.types.environment import Environment
from conslisp.types.nil import Nil


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test then else): only the chosen arm is evaluated."""
    test, then_expr, else_expr = operands("if", tail, 3)

    # Lisp truthiness: anything but Nil is true, 0.0 included
    if evaluate_fn(test, env) is not Nil:
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
