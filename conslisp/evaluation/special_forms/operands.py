from conslisp import SExpression
from conslisp.types.errors import ArityError
from conslisp.types.pair import length, iterate


def operands(form: str, tail: SExpression, expected: int) -> list[SExpression]:
    """Unpack exactly `expected` operands of a special form."""
    actual = length(tail)
    if actual != expected:
        raise ArityError(expected, actual, form)
    return list(iterate(tail))
