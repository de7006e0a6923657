"""Render Lisp values as text.

The output is the interchange form of the interpreter: any list made only of
Symbols and Numbers reads back, via `conslisp.reader.parser`, to an equal list.
"""

from __future__ import annotations

from io import StringIO

from conslisp import LispValue
from conslisp.types.nil import Nil
from conslisp.types.pair import Pair


def format_number(x: float) -> str:
    """Shortest repr, with integral values printed without a trailing `.0`."""
    text = repr(float(x))
    if text.endswith(".0"):
        return text[:-2]
    return text


def to_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, Pair):
        buffer.write("(")
        _write(value.car, buffer)
        node = value.cdr
        while isinstance(node, Pair):
            buffer.write(" ")
            _write(node.car, buffer)
            node = node.cdr
        if node is not Nil:
            buffer.write(" . ")
            _write(node, buffer)
        buffer.write(")")
    elif isinstance(value, float) or (isinstance(value, int) and not isinstance(value, bool)):
        buffer.write(format_number(value))
    else:
        # Nil, Symbol, Primitive and Closure all print themselves
        buffer.write(str(value))
