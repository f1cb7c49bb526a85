from __future__ import annotations
import logging
from typing import Dict, Iterator, Optional

from schemer import LispValue
from schemer.types.symbol import Symbol

logger = logging.getLogger(__name__)


class DefinitionStore:
    """Name -> value table written by `define` and the module loader.

    Identifier lookup reaches it only after every lexical frame has missed,
    so a definition is visible from scopes that existed before it was made.
    Not thread safe: hosts sharing one store between evaluations must
    serialise the writers.
    """

    def __init__(self):
        self._definitions: Dict[Symbol, LispValue] = {}

    def put(self, name: Symbol, value: LispValue) -> None:
        if name in self._definitions:
            logger.debug("redefining %s", name)
        self._definitions[name] = value

    def get(self, name: Symbol) -> Optional[LispValue]:
        return self._definitions.get(name)

    def names(self) -> Iterator[Symbol]:
        return iter(list(self._definitions))

    def clear(self) -> None:
        self._definitions.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


# Module-level singleton
_store: Optional[DefinitionStore] = None

def get_store() -> DefinitionStore:
    global _store
    if _store is None:
        _store = DefinitionStore()
    return _store
