"""Lexical environments for schemer.

An Environment is an immutable chain of Frames, innermost first. Each Frame
binds an ordered tuple of names to an ordered tuple of values, positionally,
as produced by zipping a closure's formals with its arguments at call time.

Extending an environment never touches the original: the new chain shares
the old one as its tail, which is what lets a closure keep a private view of
the scope it was created in. Lookup walks the frames front to back and then
falls through to the definition store, which is deliberately *not* a frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, Sequence, TYPE_CHECKING

from schemer import LispValue
from schemer.errors import SchemeUnboundSymbol
from schemer.types.symbol import Symbol

if TYPE_CHECKING:
    from schemer.definition_store import DefinitionStore


class Frame:
    """One call's worth of bindings: parallel tuples of names and values."""

    __slots__ = ("names", "values")

    def __init__(self, names: Sequence[Symbol], values: Sequence[LispValue]):
        names = tuple(names)
        values = tuple(values)
        assert len(names) == len(values), "frame names and values must have equal length"
        self.names: tuple[Symbol, ...] = names
        self.values: tuple[LispValue, ...] = values

    def find(self, name: Symbol) -> tuple[bool, LispValue]:
        """Return (found, value) for the first binding of `name` in this frame."""
        for key, value in zip(self.names, self.values):
            if key == name:
                return True, value
        return False, None

    def __len__(self) -> int:
        return len(self.names)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in zip(self.names, self.values)))
            buffer.write("}")
            return buffer.getvalue()


class Environment:
    """Persistent chain of frames; `outer` is None only for the empty environment."""

    __slots__ = ("frame", "outer", "depth")

    def __init__(self, frame: Optional[Frame] = None, outer: Optional[Environment] = None):
        self.frame: Optional[Frame] = frame
        self.outer: Optional[Environment] = outer
        self.depth: int = 0 if frame is None else 1 + (outer.depth if outer is not None else 0)

    @property
    def is_empty(self) -> bool:
        return self.frame is None

    def extend(self, names: Sequence[Symbol], values: Sequence[LispValue]) -> Environment:
        """Return a new environment with a frame binding `names` to `values` in front of this one."""
        return Environment(Frame(names, values), self)

    def frames(self) -> Iterator[Frame]:
        """Yield frames innermost first."""
        env: Optional[Environment] = self
        while env is not None and env.frame is not None:
            yield env.frame
            env = env.outer

    def lookup(self, name: Symbol, store: Optional[DefinitionStore] = None) -> LispValue:
        """Look up the value bound to `name`.

        Order of resolution:
        1) Frames, innermost first
        2) The definition store, if one is given
        Raises SchemeUnboundSymbol if not found.
        """
        for frame in self.frames():
            found, value = frame.find(name)
            if found:
                return value
        if store is not None:
            value = store.get(name)
            if value is not None:
                return value
        raise SchemeUnboundSymbol(f"Cannot lookup unbound symbol {name}")

    def __str__(self) -> str:
        if self.frame is None:
            return "{}"
        suffix = " -> ..." if self.outer is not None and not self.outer.is_empty else ""
        return f"{self.frame}{suffix}"

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(str(frame) for frame in self.frames()) or "{}")
            buffer.write(">")
            return buffer.getvalue()


EMPTY_ENV = Environment()
