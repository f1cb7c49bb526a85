"""Built-in primitive operations for the schemer runtime.

Every primitive is a plain function `fn(context, args)` over already evaluated
arguments. The catalog is closed: PRIMITIVES is the single registry the
dispatcher consults to recognise primitive names, and apply_primitive the
single entry point the applier calls.
"""
from __future__ import annotations
from typing import Callable, TYPE_CHECKING

from schemer import LispValue
from schemer.errors import SchemeArityError, SchemeShapeError, SchemeTypeError
from schemer.printer import to_string, unescape
from schemer.types.closure import Closure
from schemer.types.environment import Environment
from schemer.types.primitive import Primitive
from schemer.types.symbol import Symbol
from schemer.types.unspecified import Unspecified

if TYPE_CHECKING:
    from schemer.runtime_context import RuntimeContext

PrimitiveFn = Callable[["RuntimeContext", list[LispValue]], LispValue]


def _expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise SchemeArityError(f"{name} requires exactly {n} {plural}, got {len(args)}")


def is_number(v: LispValue) -> bool:
    # bool is an int subclass in Python but never a number here
    return isinstance(v, int) and not isinstance(v, bool)


def _expect_numbers(name: str, args: list[LispValue]) -> None:
    for v in args:
        if not is_number(v):
            raise SchemeTypeError(f"All arguments to {name} must be numbers, got {to_string(v)}")


def is_pair(v: LispValue) -> bool:
    return (isinstance(v, list) and len(v) > 0) or isinstance(v, tuple)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality for schemer values.

    Booleans never equal integers, proper lists never equal dotted ones, and
    closures are equal when their formals, bodies and captured frames are.
    """
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, tuple):
        return is_equal(a[0], b[0]) and is_equal(a[1], b[1])
    if isinstance(a, Closure):
        return (
            a.formals == b.formals
            and is_equal(a.body, b.body)
            and _env_equal(a.env, b.env)
        )
    return a == b


def _env_equal(a: Environment, b: Environment) -> bool:
    if a is b:
        return True
    if a.depth != b.depth:
        return False
    for fa, fb in zip(a.frames(), b.frames()):
        if fa.names != fb.names:
            return False
        if not all(is_equal(x, y) for x, y in zip(fa.values, fb.values)):
            return False
    return True


def eq(context: RuntimeContext, args: list[LispValue]) -> bool:
    """(eq? a b): #t if a and b are structurally equal values."""
    _expect_arity("eq?", args, 2)
    return is_equal(args[0], args[1])


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(context: RuntimeContext, args: list[LispValue]) -> LispValue:
    """(cons l r): r need not be a list, in which case the result is dotted."""
    _expect_arity("cons", args, 2)
    head, tail = args
    if isinstance(tail, list):
        return [head, *tail]
    if isinstance(tail, tuple):
        items, last = tail
        return [head, *items], last
    return [head], tail


def car(context: RuntimeContext, args: list[LispValue]) -> LispValue:
    _expect_arity("car", args, 1)
    v = args[0]
    if not is_pair(v):
        raise SchemeShapeError(f"car expects a pair, got {to_string(v)}")
    if isinstance(v, tuple):
        return v[0][0]
    return v[0]


def cdr(context: RuntimeContext, args: list[LispValue]) -> LispValue:
    _expect_arity("cdr", args, 1)
    v = args[0]
    if not is_pair(v):
        raise SchemeShapeError(f"cdr expects a pair, got {to_string(v)}")
    if isinstance(v, tuple):
        items, tail = v
        return (items[1:], tail) if len(items) > 1 else tail
    return v[1:]


def is_null(context: RuntimeContext, args: list[LispValue]) -> bool:
    _expect_arity("null?", args, 1)
    v = args[0]
    return isinstance(v, list) and not v


# -------------------------------
# Predicates
# -------------------------------
def is_atom(context: RuntimeContext, args: list[LispValue]) -> bool:
    """(atom? v): symbols, booleans and numbers are atoms; strings and pairs are not."""
    _expect_arity("atom?", args, 1)
    v = args[0]
    return isinstance(v, (Symbol, bool)) or is_number(v)


def is_zero(context: RuntimeContext, args: list[LispValue]) -> bool:
    _expect_arity("zero?", args, 1)
    v = args[0]
    return is_number(v) and v == 0


def number_p(context: RuntimeContext, args: list[LispValue]) -> bool:
    _expect_arity("number?", args, 1)
    return is_number(args[0])


# -------------------------------
# Arithmetic
# -------------------------------
def add1(context: RuntimeContext, args: list[LispValue]) -> int:
    _expect_arity("add1", args, 1)
    _expect_numbers("add1", args)
    return args[0] + 1


def sub1(context: RuntimeContext, args: list[LispValue]) -> int:
    _expect_arity("sub1", args, 1)
    _expect_numbers("sub1", args)
    return args[0] - 1


def add(context: RuntimeContext, args: list[LispValue]) -> int:
    """Left fold with seed 0."""
    _expect_numbers("+", args)
    result = 0
    for x in args:
        result += x
    return result


def mul(context: RuntimeContext, args: list[LispValue]) -> int:
    """Left fold with seed 1."""
    _expect_numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def sub(context: RuntimeContext, args: list[LispValue]) -> int:
    """Pairwise from the right: (- a b c) is a - (b - c)."""
    if not args:
        raise SchemeArityError("- requires at least 1 argument")
    _expect_numbers("-", args)
    result = args[-1]
    for x in reversed(args[:-1]):
        result = x - result
    return result


# -------------------------------
# Comparison
# -------------------------------
def gt(context: RuntimeContext, args: list[LispValue]) -> bool:
    _expect_arity(">", args, 2)
    _expect_numbers(">", args)
    return args[0] > args[1]


def lt(context: RuntimeContext, args: list[LispValue]) -> bool:
    _expect_arity("<", args, 2)
    _expect_numbers("<", args)
    return args[0] < args[1]


# -------------------------------
# Output
# -------------------------------
def display(context: RuntimeContext, args: list[LispValue]) -> LispValue:
    """Write the arguments, unescaped, to the context's output stream."""
    text = "".join(to_string(v, readable=False) for v in args)
    context.out.write(unescape(text))
    context.out.flush()
    return Unspecified


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, PrimitiveFn] = {
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'null?': is_null,
    'eq?': eq,
    'atom?': is_atom,
    'zero?': is_zero,
    'add1': add1,
    'sub1': sub1,
    'number?': number_p,
    '>': gt,
    '<': lt,
    '+': add,
    '*': mul,
    '-': sub,
    'display': display,
}

PRIMITIVE_NAMES: frozenset[Symbol] = frozenset(Symbol(name) for name in PRIMITIVES)


def apply_primitive(context: RuntimeContext, primitive: Primitive, args: list[LispValue]) -> LispValue:
    fn = PRIMITIVES.get(primitive.name)
    if fn is None:
        raise SchemeShapeError(f"No primitive matches {primitive.name}")
    return fn(context, args)
