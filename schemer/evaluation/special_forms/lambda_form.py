from schemer.errors import SchemeArityError, SchemeShapeError
from schemer.types.closure import Closure

from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import Environment
from schemer.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    # (lambda (params) body...) needs at least one body form.
    # When there are several, the body is an implicit begin.
    if len(tail) < 2:
        raise SchemeArityError("lambda requires a parameter list and a body")

    params = tail[0]
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SchemeShapeError(f"lambda parameters must be a list of symbols, got {params!r}")
    body_forms = tail[1:]

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("begin"), *body_forms]

    return Closure(list(params), body, env)
