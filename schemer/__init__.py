# Core type aliases for schemer's data model.
# Plain Python types represent both code (forms) and runtime values:
# int, bool, str, list for proper lists, (items, tail) tuples for dotted lists.
# No explicit Cons type is defined.
#
# Naming guidance:
# - SExpression: Use in reader/dispatcher code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: evaluate0(expr, env, context, is_tail_call)
EvaluatorFn = Callable[..., LispValue]
