"""Native functions backing the Primitive values of the root environment.

Each function takes the already-evaluated argument list (a Lisp list) and
returns a Lisp value. Functions check their own arity and operand types and
never see, let alone keep, the caller's environment.
"""
from __future__ import annotations

import logging
import sys
from types import MappingProxyType
from typing import Callable

from conslisp import LispValue
from conslisp.types.errors import ArityError, LispTypeError, LispZeroDivisionError
from conslisp.types.nil import Nil
from conslisp.types.pair import car, cdr, cons, length, reverse_in_place, iterate
from conslisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

NativeFn = Callable[[LispValue], LispValue]

TRUE = Symbol("t")


def _args(name: str, args: LispValue, expected: int) -> list[LispValue]:
    """Unpack exactly `expected` arguments or raise ArityError."""
    actual = length(args)
    if actual != expected:
        raise ArityError(expected, actual, name)
    return list(iterate(args))


def _number(name: str, value: LispValue) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LispTypeError(f"{name}: {value} is not a number")
    return float(value)


def _truth(flag: bool) -> LispValue:
    return TRUE if flag else Nil


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: LispValue) -> LispValue:
    a, b = _args("+", args, 2)
    return _number("+", a) + _number("+", b)


def sub(args: LispValue) -> LispValue:
    a, b = _args("-", args, 2)
    return _number("-", a) - _number("-", b)


def mul(args: LispValue) -> LispValue:
    a, b = _args("*", args, 2)
    return _number("*", a) * _number("*", b)


def div(args: LispValue) -> LispValue:
    a, b = _args("/", args, 2)
    divisor = _number("/", b)
    if divisor == 0.0:
        raise LispZeroDivisionError("/: division by zero")
    return _number("/", a) / divisor


# -------------------------------
# Comparison and logic
# -------------------------------
def lt(args: LispValue) -> LispValue:
    a, b = _args("<", args, 2)
    return _truth(_number("<", a) < _number("<", b))


def gt(args: LispValue) -> LispValue:
    a, b = _args(">", args, 2)
    return _truth(_number(">", a) > _number(">", b))


def equals(args: LispValue) -> LispValue:
    """Structural equality; closures are never equal."""
    a, b = _args("=", args, 2)
    return _truth(a == b)


def logical_not(args: LispValue) -> LispValue:
    (value,) = _args("not", args, 1)
    return _truth(value is Nil)


# -------------------------------
# List operations
# -------------------------------
def cons_builtin(args: LispValue) -> LispValue:
    a, b = _args("cons", args, 2)
    return cons(a, b)


def car_builtin(args: LispValue) -> LispValue:
    (value,) = _args("car", args, 1)
    return car(value)


def cdr_builtin(args: LispValue) -> LispValue:
    (value,) = _args("cdr", args, 1)
    return cdr(value)


def list_builtin(args: LispValue) -> LispValue:
    # The evaluator builds a fresh argument list per call, so it can be returned as is
    return args


def length_builtin(args: LispValue) -> LispValue:
    (value,) = _args("length", args, 1)
    return float(length(value))


def reverse_builtin(args: LispValue) -> LispValue:
    """(reverse! xs): reverse xs in place; other handles on its cells see the change."""
    (value,) = _args("reverse!", args, 1)
    return reverse_in_place(value)


# -------------------------------
# Session
# -------------------------------
def quit_builtin(args: LispValue) -> LispValue:
    _args("exit", args, 0)
    logger.info("exit called, terminating")
    print("Exiting session.")
    sys.exit(0)


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: MappingProxyType[str, NativeFn] = MappingProxyType({
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    ">": gt,
    "=": equals,
    "not": logical_not,
    "cons": cons_builtin,
    "car": car_builtin,
    "cdr": cdr_builtin,
    "list": list_builtin,
    "length": length_builtin,
    "reverse!": reverse_builtin,
    "exit": quit_builtin,
})
