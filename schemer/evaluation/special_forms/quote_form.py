from schemer import SExpression, LispValue, EvaluatorFn
from schemer.errors import SchemeArityError


def quote_form(
    tail: list[SExpression], env, context, evaluate_fn: EvaluatorFn, _: bool
) -> LispValue:
    # The datum comes back as-is; none of its parts are evaluated.
    if len(tail) != 1:
        raise SchemeArityError("quote expects exactly 1 argument")
    return tail[0]
