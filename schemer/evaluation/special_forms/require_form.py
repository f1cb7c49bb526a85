from __future__ import annotations

from schemer import SExpression, LispValue, EvaluatorFn
from schemer.errors import SchemeArityError, SchemeModuleError, SchemeShapeError
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import Environment
from schemer.types.quit import Quit
from schemer.types.unspecified import Unspecified


def require_form(tail: list[SExpression], env: Environment, context: RuntimeContext, evaluate_fn: EvaluatorFn, _: bool) -> LispValue:
    """
    Usage:
        (require "module-name")
    Loads the module's definitions into the definition store.
    """
    if len(tail) != 1:
        raise SchemeArityError("require expects exactly 1 argument")
    module_name = tail[0]
    if not isinstance(module_name, str):
        raise SchemeShapeError(f"require expects a string literal, got {module_name!r}")
    if context.loader is None:
        raise SchemeModuleError(f"Cannot require {module_name!r}: no module loader configured")

    if context.loader.load(module_name, context) is Quit:
        return Quit
    return Unspecified
