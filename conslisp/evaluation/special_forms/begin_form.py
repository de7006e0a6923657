from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.types.environment import Environment
from conslisp.types.errors import ArityError
from conslisp.types.nil import Nil
from conslisp.types.pair import Pair, length


def begin_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(begin e1 ... en): evaluate in order, return the value of en."""
    if tail is Nil:
        raise ArityError("at least 1", 0, "begin")
    length(tail)

    node = tail
    result: LispValue = Nil
    while isinstance(node, Pair):
        result = evaluate_fn(node.car, env)
        node = node.cdr
    return result
