import logging

from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.builtin.primitives import PRIMITIVE_NAMES
from schemer.errors import SchemeArityError, SchemeShapeError
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import Environment, EMPTY_ENV
from schemer.types.quit import Quit
from schemer.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (define name value)
    The value is evaluated in the empty environment, never the current one:
    a defined function closes over nothing but the definition store.
    """
    if len(tail) != 2:
        raise SchemeArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SchemeShapeError(f"Cannot define {name!r}: not a symbol")
    if name in PRIMITIVE_NAMES:
        raise SchemeShapeError(f"Cannot redefine primitive {name}")

    value = evaluate_fn(val_expr, EMPTY_ENV, context)
    if value is Quit:
        return value
    context.store.put(name, value)
    logger.debug("defined %s", name)
    return name
