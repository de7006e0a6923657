import pytest

from conslisp.evaluation.special_forms import SPECIAL_FORMS
from conslisp.types.closure import Closure
from conslisp.types.errors import ArityError, NotASymbol, NotAProperList, UnboundSymbol
from conslisp.types.nil import Nil
from conslisp.types.pair import make_list
from conslisp.types.symbol import Symbol


def test_registry_is_closed():
    assert set(SPECIAL_FORMS) == {Symbol(n) for n in ("if", "quote", "define", "lambda", "begin")}


# ------------------ quote ------------------

def test_quote_list(run):
    assert run("(quote (1 2 3))") == make_list([1.0, 2.0, 3.0])


def test_quote_unbound_symbol(run):
    assert run("(quote undefined_var)") == Symbol("undefined_var")


def test_quote_shorthand(run):
    assert run("'(a (b))") == make_list([Symbol("a"), make_list([Symbol("b")])])


def test_quote_arity(run):
    with pytest.raises(ArityError):
        run("(quote a b)")


# ------------------ if ------------------

def test_if_nil_takes_else(run):
    assert run("(if () 1 2)") == 2.0


def test_if_zero_is_true(run):
    assert run("(if 0 1 2)") == 1.0


def test_if_untaken_arm_not_evaluated(run):
    assert run("(if 1 2 undefined_var)") == 2.0
    assert run("(if () undefined_var 3)") == 3.0


def test_if_test_error_propagates(run):
    with pytest.raises(UnboundSymbol):
        run("(if undefined_var 1 2)")


@pytest.mark.parametrize("source", ["(if 1 2)", "(if 1 2 3 4)", "(if)"])
def test_if_requires_two_arms(run, source):
    with pytest.raises(ArityError):
        run(source)


# ------------------ define ------------------

def test_define_returns_value(run):
    assert run("(define x 5)") == 5.0
    assert run("x") == 5.0


def test_define_non_symbol(run):
    with pytest.raises(NotASymbol):
        run("(define 5 6)")
    with pytest.raises(NotASymbol):
        run("(define (f) 6)")


def test_define_arity(run):
    with pytest.raises(ArityError):
        run("(define x)")


# ------------------ lambda ------------------

def test_lambda_builds_closure(env, run):
    closure = run("(lambda (a b) (+ a b))")
    assert isinstance(closure, Closure)
    assert closure.params == make_list([Symbol("a"), Symbol("b")])
    assert closure.env is env
    assert closure.arity == 2


def test_lambda_body_not_evaluated(run):
    assert isinstance(run("(lambda () undefined_var)"), Closure)


def test_lambda_no_params(run):
    assert run("((lambda () 7))") == 7.0


@pytest.mark.parametrize("source", ["(lambda (a 1) a)", "(lambda (a (b)) a)"])
def test_lambda_params_must_be_symbols(run, source):
    with pytest.raises(NotASymbol):
        run(source)


def test_lambda_params_must_be_proper(run):
    with pytest.raises(NotAProperList):
        run("(lambda (a . b) a)")


def test_lambda_single_body(run):
    with pytest.raises(ArityError):
        run("(lambda (a) a a)")


# ------------------ begin ------------------

def test_begin_returns_last(run):
    assert run("(begin (define a 10) (define b 20) (+ a b))") == 30.0


def test_begin_single(run):
    assert run("(begin 1)") == 1.0


def test_begin_empty_is_error(run):
    with pytest.raises(ArityError):
        run("(begin)")


def test_begin_stops_at_first_error(run):
    with pytest.raises(UnboundSymbol):
        run("(begin (define a 1) undefined_var (define a 2))")
    assert run("a") == 1.0


def test_special_form_name_wins_over_binding(run):
    run("(define quote 5)")
    assert run("(quote x)") == Symbol("x")


def test_non_operator_symbols_still_evaluate(run):
    run("(define if-not (lambda (c a b) (if c b a)))")
    assert run("(if-not () 1 2)") == 1.0
    assert run("(if-not 0 1 2)") == 2.0
    assert run("(if-not () (quote yes) (quote no))") == Symbol("yes")
    assert Nil is run("(if 0 () 1)")
