"""Classify an expression into the evaluation action that handles it.

classify is pure: it looks only at the shape of the expression, never at
bindings. That is why primitive and special-form names cannot be shadowed.
"""

from __future__ import annotations

from enum import Enum

from schemer import SExpression
from schemer.builtin.primitives import PRIMITIVE_NAMES
from schemer.errors import SchemeShapeError
from schemer.types.symbol import Symbol


class Action(Enum):
    CONSTANT = "constant"
    STRING = "string"
    IDENTIFIER = "identifier"
    QUOTE = "quote"
    LAMBDA = "lambda"
    COND = "cond"
    DEFINE = "define"
    AND = "and"
    OR = "or"
    NOT = "not"
    BEGIN = "begin"
    REQUIRE = "require"
    QUIT = "quit"
    APPLICATION = "application"


SPECIAL_FORM_ACTIONS: dict[Symbol, Action] = {
    Symbol("quote"): Action.QUOTE,
    Symbol("lambda"): Action.LAMBDA,
    Symbol("cond"): Action.COND,
    Symbol("define"): Action.DEFINE,
    Symbol("and"): Action.AND,
    Symbol("or"): Action.OR,
    Symbol("not"): Action.NOT,
    Symbol("begin"): Action.BEGIN,
    Symbol("require"): Action.REQUIRE,
    Symbol("quit"): Action.QUIT,
}


def classify(expr: SExpression) -> Action:
    match expr:
        case bool() | int():
            return Action.CONSTANT
        case str():
            return Action.STRING
        case Symbol():
            return Action.CONSTANT if expr in PRIMITIVE_NAMES else Action.IDENTIFIER
        case [Symbol() as head, *_] if head in SPECIAL_FORM_ACTIONS:
            return SPECIAL_FORM_ACTIONS[head]
        case list() | (list(), _):
            return Action.APPLICATION
    raise SchemeShapeError(f"Cannot evaluate {expr!r}: not an expression")
