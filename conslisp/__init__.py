# Core type aliases for the conslisp data model.
# Code and data share one representation: Nil, Symbol, float, Pair, Primitive
# and Closure. Lists are chains of Pair cells terminated by Nil.
#
# Naming guidance:
# - SExpression: use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
