import pytest

from schemer.errors import SchemeArityError, SchemeShapeError, SchemeUnboundSymbol
from schemer.types.quit import Quit
from schemer.types.symbol import Symbol


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond (else 42))", 42),
        ("(cond (#f 1) (#t 2))", 2),
        ("(cond (#f 1) (else 3))", 3),
        ("(cond ((zero? 0) (quote yes)) (else (quote no)))", Symbol("yes")),
        # only #f counts as false
        ("(cond (0 (quote zero)) (else (quote other)))", Symbol("zero")),
        ("(cond ((quote ()) 1) (else 2))", 1),
    ]
)
def test_cond(itp, source, expected):
    assert itp.eval(source) == expected


def test_cond_without_a_true_question_fails(itp):
    with pytest.raises(SchemeShapeError):
        itp.eval("(cond (#f 1))")


def test_cond_skips_later_questions(itp):
    # the second question would fail if it were evaluated
    assert itp.eval("(cond (#t 1) ((car 1) 2))") == 1


def test_cond_rejects_malformed_clauses(itp):
    with pytest.raises(SchemeShapeError):
        itp.eval("(cond 1)")
    with pytest.raises(SchemeShapeError):
        itp.eval("(cond (#t 1 2))")


def test_cond_else_must_be_the_last_clause(itp, out):
    with pytest.raises(SchemeShapeError):
        itp.eval("(cond (else 1) (#t 2))")
    # checked before any question runs
    with pytest.raises(SchemeShapeError):
        itp.eval('(cond ((display "asked") 1) (else 2) (#f 3))')
    assert out.getvalue() == ""


# ------------------ and / or / not ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and #t #t)", True),
        ("(and #t #f)", False),
        ("(and 1 2 3)", 3),
        ("(and)", True),
        ("(or #f #f)", False),
        ("(or #f 5)", 5),
        ("(or (quote a) #f)", Symbol("a")),
        ("(or)", False),
        ("(not #f)", True),
        ("(not #t)", False),
        ("(not 3)", False),
        ("(not 0)", False),
        ("(not (quote ()))", False),
    ]
)
def test_boolean_forms(itp, source, expected):
    assert itp.eval(source) == expected


def test_and_short_circuits(itp):
    assert itp.eval("(and #f (car 1))") is False
    assert itp.eval("(and #f undefined-name)") is False


def test_or_short_circuits(itp):
    assert itp.eval("(or #t (car 1))") is True
    assert itp.eval("(or 7 undefined-name)") == 7


def test_and_evaluates_until_false(itp, out):
    itp.eval('(and (display "a") #f (display "b"))')
    assert out.getvalue() == "a"


def test_not_arity(itp):
    with pytest.raises(SchemeArityError):
        itp.eval("(not #t #f)")


# ------------------ begin ------------------

def test_begin_returns_last_value(itp, out):
    assert itp.eval('(begin (display "x") (display "y") 3)') == 3
    assert out.getvalue() == "xy"


def test_empty_begin_is_an_arity_error(itp):
    with pytest.raises(SchemeArityError):
        itp.eval("(begin)")


# ------------------ define ------------------

def test_define_returns_the_name(itp):
    assert itp.eval("(define x 5)") == Symbol("x")
    assert itp.eval("x") == 5
    assert itp.store.get(Symbol("x")) == 5


def test_define_rejects_bad_names(itp):
    with pytest.raises(SchemeShapeError):
        itp.eval("(define 5 1)")
    with pytest.raises(SchemeShapeError):
        itp.eval("(define car (lambda (x) x))")
    with pytest.raises(SchemeArityError):
        itp.eval("(define x)")


def test_define_evaluates_in_the_empty_environment(itp):
    # f is created inside a scope binding y, but define ignores that scope
    itp.eval("((lambda (y) (define f (lambda () y))) 1)")
    with pytest.raises(SchemeUnboundSymbol):
        itp.eval("(f)")


def test_redefinition_replaces_the_value(itp):
    itp.eval("(define x 1)")
    itp.eval("(define x 2)")
    assert itp.eval("x") == 2


# ------------------ quit ------------------

@pytest.mark.parametrize(
    "source",
    [
        "(quit)",
        "(+ 1 (quit))",
        "((quit) 1)",
        "(cond ((quit) 1) (else 2))",
        "(cond (#t (quit)))",
        "(and #t (quit) 3)",
        "(or #f (quit) 3)",
        "(not (quit))",
        "(begin (quit) (car 1))",
        "((lambda (x) (quit)) 1)",
        "(define x (quit))",
    ]
)
def test_quit_propagates_as_a_result(itp, source):
    assert itp.eval(source) is Quit


def test_quit_stops_later_forms(itp):
    assert itp.eval("(define a 1) (quit) (define b 2)") is Quit
    assert Symbol("a") in itp.store
    assert Symbol("b") not in itp.store


def test_quit_with_arguments_is_an_arity_error(itp):
    with pytest.raises(SchemeArityError):
        itp.eval("(quit 1)")


def test_quit_is_not_an_error_and_not_a_value(itp):
    result = itp.eval("(quit)")
    assert not isinstance(result, Exception)
    assert result != False  # noqa: E712
