import pytest
from hypothesis import given, strategies as st

from schemer.errors import SchemeArityError, SchemeShapeError, SchemeUnboundSymbol
from schemer.evaluation.evaluator import evaluate, value, apply_procedure
from schemer.runtime_context import RuntimeContext
from schemer.types.closure import Closure
from schemer.types.environment import EMPTY_ENV
from schemer.types.primitive import Primitive
from schemer.types.symbol import Symbol


# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    return EMPTY_ENV.extend([Symbol("x"), Symbol("y")], [42, 100])


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env, context):
    assert evaluate(1, env, context) == 1
    assert evaluate(-7, env, context) == -7
    assert evaluate(True, env, context) is True
    assert evaluate(False, env, context) is False
    assert evaluate("hello", env, context) == "hello"


@given(st.integers())
def test_integers_evaluate_to_themselves(n):
    assert evaluate(n, EMPTY_ENV, RuntimeContext()) == n


@given(st.booleans())
def test_booleans_evaluate_to_themselves(b):
    assert evaluate(b, EMPTY_ENV, RuntimeContext()) is b


def test_primitive_names_evaluate_to_primitive_references(env, context):
    assert evaluate(Symbol("car"), env, context) == Primitive("car")
    assert evaluate(Symbol("+"), env, context) == Primitive("+")


def test_symbol_lookup(env, context):
    assert evaluate(Symbol("x"), env, context) == 42
    assert evaluate(Symbol("y"), env, context) == 100
    with pytest.raises(SchemeUnboundSymbol):
        evaluate(Symbol("z"), env, context)


def test_symbol_lookup_falls_back_to_definition_store(env, context):
    context.store.put(Symbol("z"), 7)
    assert evaluate(Symbol("z"), env, context) == 7


def test_frames_shadow_definition_store(env, context):
    context.store.put(Symbol("x"), 0)
    assert evaluate(Symbol("x"), env, context) == 42


def test_quote(env, context):
    expr = [Symbol("quote"), [1, 2, 3]]
    assert evaluate(expr, env, context) == [1, 2, 3]


def test_quote_does_not_evaluate_parts(env, context):
    datum = [Symbol("undefined-thing"), [Symbol("car"), 1], Symbol("x")]
    assert evaluate([Symbol("quote"), datum], env, context) == datum


def test_quote_arity(env, context):
    with pytest.raises(SchemeArityError):
        evaluate([Symbol("quote"), 1, 2], env, context)


def test_simple_expression(env, context):
    expr = [Symbol("+"), Symbol("x"), 2]
    assert evaluate(expr, env, context) == 44


def test_lambda_captures_environment(env, context):
    expr = [Symbol("lambda"), [Symbol("a")], [Symbol("+"), Symbol("a"), Symbol("x")]]
    lam = evaluate(expr, env, context)
    assert isinstance(lam, Closure)
    assert lam.env is env
    # Applied from an environment where x means something else
    other = EMPTY_ENV.extend([Symbol("x"), Symbol("f")], [0, lam])
    assert evaluate([Symbol("f"), 1], other, context) == 43


def test_lambda_with_several_body_forms_is_an_implicit_begin(context, out):
    expr = [
        [Symbol("lambda"), [Symbol("a")], [Symbol("display"), Symbol("a")], [Symbol("add1"), Symbol("a")]],
        5,
    ]
    assert evaluate(expr, EMPTY_ENV, context) == 6
    assert out.getvalue() == "5"


def test_lambda_requires_symbol_formals(env, context):
    with pytest.raises(SchemeShapeError):
        evaluate([Symbol("lambda"), [1], 1], env, context)
    with pytest.raises(SchemeArityError):
        evaluate([Symbol("lambda"), [Symbol("a")]], env, context)


@given(st.one_of(st.integers(), st.booleans(), st.text(), st.lists(st.integers())))
def test_identity_closure_returns_its_argument(v):
    identity = Closure([Symbol("x")], Symbol("x"), EMPTY_ENV)
    assert apply_procedure(identity, [v], RuntimeContext()) == v


def test_closure_arity_mismatch(env, context):
    lam = [Symbol("lambda"), [Symbol("a"), Symbol("b")], Symbol("a")]
    with pytest.raises(SchemeArityError):
        evaluate([lam, 1], env, context)
    with pytest.raises(SchemeArityError):
        evaluate([lam, 1, 2, 3], env, context)


def test_applying_a_non_function(env, context):
    with pytest.raises(SchemeShapeError):
        evaluate([1, 2], env, context)
    with pytest.raises(SchemeShapeError):
        evaluate([[Symbol("quote"), Symbol("a")], 2], env, context)


def test_empty_application_is_a_shape_error(env, context):
    with pytest.raises(SchemeShapeError):
        evaluate([], env, context)


def test_non_expression_is_a_shape_error(env, context):
    with pytest.raises(SchemeShapeError):
        evaluate(1.5, env, context)


def test_operands_evaluated_left_to_right(context, out):
    expr = [Symbol("+"), [Symbol("begin"), [Symbol("display"), "a"], 1],
            [Symbol("begin"), [Symbol("display"), "b"], 2]]
    assert evaluate(expr, EMPTY_ENV, context) == 3
    assert out.getvalue() == "ab"


def test_value_uses_the_empty_environment():
    assert value([Symbol("add1"), 1]) == 2
    with pytest.raises(SchemeUnboundSymbol):
        value(Symbol("x"))


def test_value_sees_default_store_definitions():
    value([Symbol("define"), Symbol("answer"), 42])
    assert value(Symbol("answer")) == 42
