from schemer import SExpression, LispValue
from schemer.errors import SchemeArityError
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import Environment
from schemer.types.quit import Quit


def and_form(tail: list[SExpression], env: Environment, context: RuntimeContext, evaluate_fn, is_tail_call: bool=False) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and stops at the
    first #f, returning #f without evaluating the rest. Otherwise returns the
    value of the last operand. With zero operands, returns #t.
    """
    if not tail:
        return True

    last_index = len(tail) - 1
    for i, expr in enumerate(tail):
        if i == last_index:
            return evaluate_fn(expr, env, context, is_tail_call)
        val = evaluate_fn(expr, env, context)
        if val is Quit or val is False:
            return val
    return True


def or_form(tail: list[SExpression], env: Environment, context: RuntimeContext, evaluate_fn, is_tail_call: bool=False) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If every operand is #f, the last one's #f is
    returned. With zero operands, returns #f.
    """
    if not tail:
        return False

    last_index = len(tail) - 1
    for i, expr in enumerate(tail):
        if i == last_index:
            return evaluate_fn(expr, env, context, is_tail_call)
        val = evaluate_fn(expr, env, context)
        if val is not False:
            return val
    return False


def not_form(tail: list[SExpression], env: Environment, context: RuntimeContext, evaluate_fn, _: bool=False) -> LispValue:
    if len(tail) != 1:
        raise SchemeArityError("not requires exactly 1 argument")
    val = evaluate_fn(tail[0], env, context)
    if val is Quit:
        return val
    return val is False
