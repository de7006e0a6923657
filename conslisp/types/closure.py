"""Closure representation and argument binding for conslisp."""

from __future__ import annotations

from conslisp import SExpression, LispValue
from conslisp.types.environment import Environment
from conslisp.types.errors import ArityError, NotASymbol
from conslisp.types.pair import length, iterate
from conslisp.types.symbol import Symbol


class Closure:
    """A user function: parameter list, single body expression, defining frame."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        # Shared, not copied: later defines in `env` are visible to the body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return length(self.params)

    # Closures are never equal, not even to themselves
    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return "#<Anonymous Function>"

    def __repr__(self) -> str:
        return f"Closure(params={self.params}, body={self.body})"

    def extend_env(self, args: LispValue) -> Environment:
        """
        Bind the argument list positionally to this closure's parameters and
        return the new frame for evaluating the body. The frame's parent is the
        captured environment, not the caller's.
        """
        expected = length(self.params)
        actual = length(args)
        if expected != actual:
            raise ArityError(expected, actual)
        frame = Environment.new_child(self.env)
        for param, arg in zip(iterate(self.params), iterate(args)):
            if not isinstance(param, Symbol):
                raise NotASymbol(f"Parameter {param} is not a symbol")
            frame.define(param, arg)
        return frame
