from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (schemer package directory)
_SCHEMER_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_LIBRARY_DIRS = [_SCHEMER_DIR / 'library']
_DEFAULT_LOG_LEVEL = 'WARNING'
# Each non-tail call costs several Python frames
_DEFAULT_RECURSION_LIMIT = 10000

MODULE_SUFFIX = '.scm'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_library_roots() -> List[Path]:
    return paths_from_env('SCHEMER_PATH', _DEFAULT_LIBRARY_DIRS)


def get_log_level() -> str:
    return os.environ.get('SCHEMER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    return int(os.environ.get('SCHEMER_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT))
