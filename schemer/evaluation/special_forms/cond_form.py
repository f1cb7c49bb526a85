from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import SchemeShapeError
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import Environment
from schemer.types.quit import Quit
from schemer.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    context: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Multi-branch conditional.

    (cond (q1 a1) (q2 a2) ... (else an)) evaluates the questions left to right
    and evaluates the answer of the first one that is not #f. `else` always
    matches and may only head the last clause. Running out of clauses is an
    error, there is no default value.
    """
    for i, clause in enumerate(tail):
        if not isinstance(clause, list) or len(clause) != 2:
            raise SchemeShapeError(f"cond clause must be (question answer), got {clause!r}")
        if clause[0] == ELSE and i != len(tail) - 1:
            raise SchemeShapeError("cond: else clause must be last")

    for question, answer in tail:
        if question != ELSE:
            result = evaluate_fn(question, env, context)
            if result is Quit:
                return result
            if result is False:
                continue
        # Only the selected answer inherits the tail position
        return evaluate_fn(answer, env, context, is_tail_call)

    raise SchemeShapeError("cond: no true questions found")
