import pytest

from conslisp.builtin.primitives import PRIMITIVES, TRUE
from conslisp.types.errors import ArityError, LispTypeError, LispZeroDivisionError, NotAPair
from conslisp.types.nil import Nil
from conslisp.types.pair import make_list
from conslisp.types.symbol import Symbol


def call(name, *args):
    return PRIMITIVES[name](make_list(args))


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVES["new"] = lambda args: Nil


@pytest.mark.parametrize(
    "name,a,b,expected",
    [
        ("+", 1.0, 2.0, 3.0),
        ("-", 1.0, 2.0, -1.0),
        ("*", 1.5, 2.0, 3.0),
        ("/", 1.0, 4.0, 0.25),
    ],
)
def test_arithmetic(name, a, b, expected):
    assert call(name, a, b) == expected


@pytest.mark.parametrize("name", ["+", "-", "*", "/", "<", ">", "=", "cons"])
def test_binary_arity(name):
    with pytest.raises(ArityError) as exc:
        call(name, 1.0)
    assert exc.value.expected == 2
    assert exc.value.actual == 1
    assert name in str(exc.value)


@pytest.mark.parametrize("name", ["+", "-", "*", "/", "<", ">"])
def test_numeric_type_error(name):
    with pytest.raises(LispTypeError):
        call(name, Symbol("a"), 1.0)
    with pytest.raises(LispTypeError):
        call(name, 1.0, make_list([1.0]))


def test_division_by_zero():
    with pytest.raises(LispZeroDivisionError):
        call("/", 1.0, 0.0)


def test_comparisons():
    assert call("<", 1.0, 2.0) is TRUE
    assert call("<", 2.0, 1.0) is Nil
    assert call(">", 2.0, 1.0) is TRUE
    assert call(">", 1.0, 1.0) is Nil
    assert call("=", make_list([1.0, Symbol("a")]), make_list([1.0, Symbol("a")])) is TRUE
    assert call("=", 1.0, 2.0) is Nil


def test_not():
    assert call("not", Nil) is TRUE
    assert call("not", 0.0) is Nil
    assert call("not", TRUE) is Nil
    with pytest.raises(ArityError):
        call("not")


def test_list_operations():
    pair = call("cons", 1.0, Nil)
    assert pair == make_list([1.0])
    assert call("car", pair) == 1.0
    assert call("cdr", pair) is Nil
    assert call("car", Nil) is Nil
    with pytest.raises(NotAPair):
        call("car", 1.0)
    assert call("list", 1.0, 2.0) == make_list([1.0, 2.0])
    assert call("list") is Nil
    assert call("length", make_list([1.0, 2.0])) == 2.0


def test_reverse_bang_through_lisp(run):
    run("(define xs (list 1 2 3))")
    assert run("(reverse! xs)") == make_list([3.0, 2.0, 1.0])
    # xs still names the old head cell, now the tail of the reversed list
    assert run("xs") == make_list([1.0])


def test_shared_cells_through_lisp(run):
    run("(define shared (list 2 3))")
    run("(define a (cons 1 shared))")
    run("(define b (cons 0 shared))")
    run("(reverse! shared)")
    assert run("a") == make_list([1.0, 2.0])
    assert run("b") == make_list([0.0, 2.0])


def test_exit(run, capsys):
    with pytest.raises(SystemExit) as exc:
        run("(exit)")
    assert exc.value.code == 0
    assert "Exiting session." in capsys.readouterr().out


def test_exit_arity():
    with pytest.raises(ArityError):
        call("exit", 1.0)
