from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (conslisp package directory)
_CONSLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILES = [_CONSLISP_DIR / 'prelude' / 'core.lisp']
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 20000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    return paths_from_env('CONSLISP_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_log_level() -> str:
    return os.environ.get('CONSLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    # Each Lisp call costs several Python frames; the default limit of 1000
    # stops ordinary recursion around 150 calls deep.
    raw = os.environ.get('CONSLISP_RECURSION_LIMIT')
    return int(raw) if raw else _DEFAULT_RECURSION_LIMIT
