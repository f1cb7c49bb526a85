from __future__ import annotations
import sys
from typing import Optional, Protocol, TextIO, TYPE_CHECKING

from schemer.definition_store import DefinitionStore, get_store

if TYPE_CHECKING:
    from schemer import LispValue


class ModuleLoader(Protocol):
    def load(self, name: str, context: RuntimeContext) -> LispValue: ...


class RuntimeContext:
    """Everything an evaluation needs besides the expression and its environment.

    Threaded explicitly through evaluate so that nothing reads process-wide
    state behind the caller's back.
    """

    __slots__ = ("store", "loader", "_out")

    def __init__(
        self,
        store: Optional[DefinitionStore] = None,
        loader: Optional[ModuleLoader] = None,
        out: Optional[TextIO] = None,
    ):
        self.store: DefinitionStore = store if store is not None else DefinitionStore()
        self.loader: Optional[ModuleLoader] = loader
        self._out = out

    @property
    def out(self) -> TextIO:
        # Resolved lazily so pytest's capsys and REPL redirections are honoured
        return self._out if self._out is not None else sys.stdout


# NOTE: process-global, used only by the value()/apply_procedure() conveniences.
_default_context: Optional[RuntimeContext] = None


def get_default_context() -> RuntimeContext:
    global _default_context
    if _default_context is None:
        from schemer.modules.library_loader import LibraryLoader
        _default_context = RuntimeContext(store=get_store(), loader=LibraryLoader())
    return _default_context


def set_default_context(context: Optional[RuntimeContext]) -> None:
    global _default_context
    _default_context = context
