from schemer.types.closure import Closure
from schemer.types.environment import Environment


class TailCall:
    """A closure body still to be evaluated, handed back to the trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Closure, env: Environment):
        self.fn = fn
        self.env = env
