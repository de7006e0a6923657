"""Cons cells and the list operations built on them.

A Pair is a mutable two-slot cell. Values hold Pairs by reference, so two
values may alias the same cell and observe each other's mutations. This is
what makes `reverse_in_place` visible through every handle on the list.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from conslisp import LispValue
from conslisp.types.errors import NotAPair, NotAProperList
from conslisp.types.nil import Nil


class Pair:
    """A cons cell: `car` holds the element, `cdr` the rest of the list."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = Nil):
        self.car: LispValue = car
        self.cdr: LispValue = cdr

    def __eq__(self, other: object) -> bool:
        # Recurse on car, iterate along cdr so long lists do not eat the stack
        if not isinstance(other, Pair):
            return False
        a: LispValue = self
        b: LispValue = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if not a.car == b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None  # mutable

    def __iter__(self) -> Iterator[LispValue]:
        return iterate(self)

    def __str__(self) -> str:
        from conslisp.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)


def is_pair(value: LispValue) -> bool:
    return isinstance(value, Pair)


def cons(a: LispValue, b: LispValue) -> Pair:
    return Pair(a, b)


def car(value: LispValue) -> LispValue:
    if isinstance(value, Pair):
        return value.car
    if value is Nil:
        return Nil
    raise NotAPair(f"{_show(value)} is not a pair")


def cdr(value: LispValue) -> LispValue:
    if isinstance(value, Pair):
        return value.cdr
    if value is Nil:
        return Nil
    raise NotAPair(f"{_show(value)} is not a pair")


def cadr(value: LispValue) -> LispValue:
    return car(cdr(value))


def length(value: LispValue) -> int:
    """Number of elements in a proper list. Raises NotAProperList otherwise."""
    count = 0
    node = value
    while isinstance(node, Pair):
        count += 1
        node = node.cdr
    if node is not Nil:
        raise NotAProperList(f"{_show(value)} is not a proper list")
    return count


def last_element(value: LispValue) -> LispValue:
    """The car of the final cell of a proper list."""
    if not isinstance(value, Pair):
        raise NotAPair(f"{_show(value)} is not a pair")
    node = value
    while isinstance(node.cdr, Pair):
        node = node.cdr
    if node.cdr is not Nil:
        raise NotAProperList(f"{_show(value)} is not a proper list")
    return node.car


def reverse_in_place(value: LispValue) -> LispValue:
    """Destructively reverse a proper list and return its new head.

    Each cell's cdr is swapped with an accumulator, so no new cells are
    allocated. The list is checked before the first cell is touched; an
    improper list is left exactly as it was.
    """
    length(value)
    reversed_head: LispValue = Nil
    node = value
    while node is not Nil:
        next_node = node.cdr
        node.cdr = reversed_head
        reversed_head = node
        node = next_node
    return reversed_head


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list of `items`, ending in `tail` (Nil for a proper list)."""
    head: LispValue = Nil
    for item in items:
        head = Pair(item, head)
    if head is Nil:
        return tail
    # The cell pushed last holds the final item and becomes the tail once reversed
    last = head
    head = reverse_in_place(head)
    last.cdr = tail
    return head


def iterate(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list."""
    node = value
    while isinstance(node, Pair):
        yield node.car
        node = node.cdr
    if node is not Nil:
        raise NotAProperList(f"{_show(value)} is not a proper list")


def _show(value: LispValue) -> str:
    from conslisp.printer import to_string
    return to_string(value)
