from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, TYPE_CHECKING

from schemer import LispValue
from schemer.config import MODULE_SUFFIX, get_library_roots
from schemer.errors import SchemeModuleError
from schemer.types.quit import Quit
from schemer.types.unspecified import Unspecified

if TYPE_CHECKING:
    from schemer.runtime_context import RuntimeContext

logger = logging.getLogger(__name__)


# Map a dotted module name to a .scm file underneath a set of roots

def _name_to_relpath(name: str) -> Path:
    if name.endswith(MODULE_SUFFIX):
        return Path(name)
    return Path(*name.split('.')).with_suffix(MODULE_SUFFIX)


class LibraryLoader:
    """Resolves `(require "name")` to a source file and evaluates its forms
    into the definition store of the requiring context."""

    def __init__(self, roots: Optional[Iterable[Path]] = None):
        self._roots: Optional[list[Path]] = [Path(r) for r in roots] if roots is not None else None
        self._loading: set[Path] = set()

    @property
    def roots(self) -> list[Path]:
        # Read lazily so SCHEMER_PATH changes apply to the default loader
        return self._roots if self._roots is not None else get_library_roots()

    def resolve(self, name: str) -> Optional[Path]:
        rel = _name_to_relpath(name)
        if rel.is_absolute():
            return rel if rel.is_file() else None
        for root in self.roots:
            candidate = root / rel
            logger.debug("trying %s for module %r", candidate, name)
            if candidate.is_file():
                return candidate
        return None

    def load(self, name: str, context: RuntimeContext) -> LispValue:
        path = self.resolve(name)
        if path is None:
            roots = ", ".join(str(r) for r in self.roots)
            raise SchemeModuleError(f"Cannot find module '{name}' in SCHEMER_PATH ({roots})")
        return self.load_path(path, context)

    def load_path(self, path: Path, context: RuntimeContext) -> LispValue:
        """Evaluate every form of the file at `path`; stops early on Quit."""
        # Lazy imports to avoid circular imports with the evaluator
        from schemer.evaluation.evaluator import value
        from schemer.reader.parser import lex, TokenStream

        path = Path(path).resolve()
        if path in self._loading:
            raise SchemeModuleError(f"Circular require of {path}")

        logger.info("loading module %s", path)
        self._loading.add(path)
        try:
            stream = TokenStream(lex(path.read_text(encoding='utf-8')))
            for expr in stream.parse_all():
                if value(expr, context) is Quit:
                    return Quit
        finally:
            self._loading.discard(path)
        return Unspecified
