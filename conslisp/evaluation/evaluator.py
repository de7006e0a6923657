"""Core evaluator for the conslisp interpreter.

Implements special-form dispatch and ordinary application. Evaluation is
plain recursion on the host stack: every call finishes, or raises, before its
caller resumes.
"""

from __future__ import annotations

from conslisp import SExpression, LispValue
from conslisp.evaluation.apply import apply
from conslisp.evaluation.special_forms import SPECIAL_FORMS
from conslisp.types.environment import Environment
from conslisp.types.errors import NotAProperList
from conslisp.types.nil import Nil
from conslisp.types.pair import Pair, reverse_in_place
from conslisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env`."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case Pair(car=head, cdr=tail):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)
            fn = evaluate(head, env)
            args = evaluate_list(tail, env)
            return apply(fn, args, evaluate)

    # --- Nil, numbers, primitives and closures evaluate to themselves ---
    return expr


def evaluate_list(exprs: SExpression, env: Environment) -> LispValue:
    """Evaluate each element of a proper list, left to right, into a new list.

    Results are consed onto the front as they come, then the finished chain is
    reversed in place to restore the original order.
    """
    results: LispValue = Nil
    node = exprs
    while isinstance(node, Pair):
        results = Pair(evaluate(node.car, env), results)
        node = node.cdr
    if node is not Nil:
        raise NotAProperList(f"Argument list {exprs} is not a proper list")
    return reverse_in_place(results)
