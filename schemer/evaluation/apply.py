"""Application engine for schemer.

Centralizes calling an already evaluated operator on already evaluated
arguments:
- Primitives dispatch by name into the primitive library.
- Closures bind a fresh frame over their captured environment and evaluate
  the body there. In tail position the body is not evaluated here but handed
  back as a TailCall for the trampoline to resume.
"""

from __future__ import annotations

from schemer import LispValue, EvaluatorFn
from schemer.builtin.primitives import apply_primitive
from schemer.errors import SchemeShapeError
from schemer.printer import to_string
from schemer.runtime_context import RuntimeContext
from schemer.types.closure import Closure
from schemer.types.primitive import Primitive
from schemer.types.tail_call import TailCall


def run_trampoline(result: LispValue, context: RuntimeContext, evaluate_fn: EvaluatorFn) -> LispValue:
    """Resume TailCalls until a plain value (or Quit) comes back."""
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, context, True)
    return result


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool,
) -> LispValue | TailCall:
    """Apply a closure value.

    Arity mismatches raise SchemeArityError (see Closure.extend_env); there is
    no partial application and no silent truncation.
    """
    new_env = fn.extend_env(args)
    if is_tail_call:
        return TailCall(fn, new_env)
    # Not tail position: run the body to completion now.
    return run_trampoline(evaluate_fn(fn.body, new_env, context, True), context, evaluate_fn)


def apply(
    head: LispValue,
    args: list[LispValue],
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    tail: bool = False,
) -> LispValue | TailCall:
    """Apply either a primitive or a closure; anything else is a shape error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, context, evaluate_fn, tail)
    elif isinstance(head, Primitive):
        return apply_primitive(context, head, args)
    else:
        raise SchemeShapeError(f"Cannot apply non-function {to_string(head)}")
