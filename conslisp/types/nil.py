from __future__ import annotations


class NilType:
    """The empty list. Also the one and only false value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "Nil"

    # Python truthiness mirrors Lisp truth for Nil only; never test Lisp
    # values with `if value:` since 0.0 is a true Lisp value.
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
