from schemer import SExpression, LispValue, EvaluatorFn
from schemer.errors import SchemeArityError
from schemer.types.quit import Quit


def quit_form(tail: list[SExpression], env, context, evaluate_fn: EvaluatorFn, _: bool) -> LispValue:
    if tail:
        raise SchemeArityError("quit takes no arguments")
    return Quit
