from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional, TextIO

from schemer import LispValue
from schemer.definition_store import DefinitionStore
from schemer.errors import SchemeRecursionError
from schemer.evaluation.evaluator import evaluate
from schemer.modules.library_loader import LibraryLoader
from schemer.reader.parser import lex, TokenStream
from schemer.runtime_context import RuntimeContext
from schemer.types.environment import EMPTY_ENV
from schemer.types.quit import Quit
from schemer.types.unspecified import Unspecified


class Interpreter:
    """
    Orchestrates reading and evaluating schemer code.
    Keeps one definition store across calls, so definitions persist.

    A (quit) while loading the prelude halts the interpreter: the remaining
    prelude modules are skipped and eval/load_file return Quit straight away.
    """

    def __init__(
        self,
        store: Optional[DefinitionStore] = None,
        *,
        library_paths: Optional[Iterable[Path]] = None,
        out: Optional[TextIO] = None,
        prelude: Optional[Iterable[str]] = None,
    ):
        self.loader = LibraryLoader(library_paths)
        self.context = RuntimeContext(store=store, loader=self.loader, out=out)
        self.halted = False

        for module_name in prelude or ():
            if self._guarded(self.loader.load, module_name, self.context) is Quit:
                self.halted = True
                break

    @property
    def store(self) -> DefinitionStore:
        return self.context.store

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value.

        Returns Quit as soon as a form quits; later forms are not evaluated.
        Recursion deeper than the Python stack allows raises SchemeRecursionError.
        """
        if self.halted:
            return Quit
        stream = TokenStream(lex(code))
        result: LispValue = Unspecified
        while (expr := stream.parse_expr()) is not None:
            result = self._guarded(evaluate, expr, EMPTY_ENV, self.context)
            if result is Quit:
                return Quit
        return result

    def load_file(self, path: str | Path) -> LispValue:
        if self.halted:
            return Quit
        return self._guarded(self.loader.load_path, Path(path), self.context)

    @staticmethod
    def _guarded(fn, *args) -> LispValue:
        try:
            return fn(*args)
        except RecursionError:
            raise SchemeRecursionError("recursion too deep") from None
