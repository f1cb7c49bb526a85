"""Core evaluator and trampoline for the schemer interpreter.

evaluate0 classifies an expression with the dispatcher and runs the matching
action, recursing into subexpressions. Closure calls in tail position come
back as TailCall objects which evaluate keeps resuming, so tail recursion
in source programs does not grow the Python stack.

A (quit) anywhere yields the Quit signal as a result rather than raising.
Every consumer of a subevaluation below passes it straight back.
"""

from __future__ import annotations

from typing import Optional

from schemer import SExpression, LispValue
from schemer.errors import SchemeShapeError
from schemer.evaluation.apply import apply, run_trampoline
from schemer.evaluation.dispatch import Action, classify
from schemer.evaluation.special_forms import SPECIAL_FORMS
from schemer.runtime_context import RuntimeContext, get_default_context
from schemer.types.environment import Environment, EMPTY_ENV
from schemer.types.primitive import Primitive
from schemer.types.quit import Quit, QuitSignal
from schemer.types.tail_call import TailCall


def evaluate(
    expr: SExpression, env: Environment, context: RuntimeContext
) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    Returns a value, or the Quit signal.
    """
    result = evaluate0(expr, env, context, True)  # Start in 'tail' mode.
    return run_trampoline(result, context, evaluate0)


def value(expr: SExpression, context: Optional[RuntimeContext] = None) -> LispValue:
    """Evaluate a top-level expression in the empty environment."""
    return evaluate(expr, EMPTY_ENV, context if context is not None else get_default_context())


def evaluate0(
    expr: SExpression,
    env: Environment,
    context: RuntimeContext,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """
    Core evaluator: single-step evaluation with tail-call awareness.
    Returns a value, Quit, or (only when is_tail_call) a TailCall.
    """
    action = classify(expr)

    match action:
        case Action.CONSTANT:
            if isinstance(expr, (bool, int)):
                return expr
            return Primitive(expr.id)
        case Action.STRING:
            return expr
        case Action.IDENTIFIER:
            return env.lookup(expr, context.store)
        case Action.APPLICATION:
            return application(expr, env, context, is_tail_call)

    return SPECIAL_FORMS[action](expr[1:], env, context, evaluate0, is_tail_call)


def evlis(exprs: list[SExpression], env: Environment, context: RuntimeContext) -> list[LispValue] | QuitSignal:
    """Evaluate operands left to right; stops early with Quit."""
    values = []
    for e in exprs:
        val = evaluate0(e, env, context)
        if val is Quit:
            return Quit
        values.append(val)
    return values


def application(
    expr: SExpression, env: Environment, context: RuntimeContext, is_tail_call: bool = False
) -> LispValue | TailCall:
    if not isinstance(expr, list):
        raise SchemeShapeError(f"Cannot apply a dotted list {expr!r}")
    if not expr:
        raise SchemeShapeError("Cannot evaluate empty application ()")

    head, *tail_args = expr
    fn = evaluate0(head, env, context)
    if fn is Quit:
        return fn
    args = evlis(tail_args, env, context)
    if args is Quit:
        return args
    return apply(fn, args, context, evaluate0, is_tail_call)


def apply_procedure(
    fn: LispValue, args: list[LispValue], context: Optional[RuntimeContext] = None
) -> LispValue:
    """Call an evaluated operator on evaluated arguments and run it to a final value."""
    ctx = context if context is not None else get_default_context()
    return run_trampoline(apply(fn, list(args), ctx, evaluate0), ctx, evaluate0)
