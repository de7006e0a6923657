"""Runtime environment for conslisp.

An Environment is one frame of bindings from Symbols to Lisp values, with an
optional `outer` link to the enclosing frame. Frames are shared by reference:
every closure created inside a call keeps that call's frame alive, and a
`define` through any handle on a frame is seen through all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from conslisp import LispValue
from conslisp.builtin.primitives import PRIMITIVES
from conslisp.types.errors import NotASymbol, UnboundSymbol
from conslisp.types.primitive import Primitive
from conslisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def new_child(cls, parent: Environment) -> Environment:
        """An empty frame whose lookups fall back to `parent`."""
        return cls(outer=parent)

    @classmethod
    def new_root(cls) -> Environment:
        """A parentless frame with every primitive bound under its own name."""
        env = cls()
        env.update({Symbol(name): Primitive(name) for name in PRIMITIVES})
        return env

    def define(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame only and return `value`.

        Raises NotASymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise NotASymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises UnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    # Frames are never equal, so comparing closures can never walk into
    # (possibly cyclic) captured environments.
    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
