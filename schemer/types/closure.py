"""Closure representation and argument binding for schemer."""

from __future__ import annotations

from io import StringIO

from schemer import SExpression, LispValue
from schemer.errors import SchemeArityError
from schemer.types.environment import Environment, EMPTY_ENV
from schemer.types.symbol import Symbol


class Closure:
    """A lambda bundled with the environment it was created in."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[Symbol], body: SExpression, env: Environment | None = None
    ):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env if env is not None else EMPTY_ENV

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure({self.formals!r}, {self.body!r})"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the argument values to this closure's formals, positionally, and
        return the captured environment extended with that frame.

        The caller's environment plays no part: that is what makes scoping lexical.
        """
        if len(args) != len(self.formals):
            raise SchemeArityError(
                f"{self} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        return self.env.extend(self.formals, args)
