from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import SchemeArityError
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import Environment
from schemer.types.quit import Quit


def begin_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if not tail:
        raise SchemeArityError("begin requires at least 1 expression")
    for e in tail[:-1]:
        if evaluate_fn(e, env, context) is Quit:
            return Quit
    return evaluate_fn(tail[-1], env, context, is_tail_call)
