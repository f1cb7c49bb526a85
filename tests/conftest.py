import io
import sys

import pytest

from schemer.interpreter import Interpreter
from schemer.modules.library_loader import LibraryLoader
from schemer.runtime_context import RuntimeContext, set_default_context


# Every test gets its own definition store: nothing defined in one test is
# visible in the next, including through the process-wide default context.


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def context(out):
    return RuntimeContext(loader=LibraryLoader(), out=out)


@pytest.fixture
def itp(out):
    return Interpreter(out=out)


@pytest.fixture(autouse=True)
def _fresh_default_context(monkeypatch):
    monkeypatch.delenv("SCHEMER_PATH", raising=False)
    set_default_context(RuntimeContext(loader=LibraryLoader()))
    yield
    set_default_context(None)


@pytest.fixture(autouse=True)
def _restore_recursion_limit():
    # schemer.__main__.main raises the limit for the whole process
    limit = sys.getrecursionlimit()
    yield
    sys.setrecursionlimit(limit)
