from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (jlisp package directory)
_JLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _JLISP_DIR / 'prelude' / 'core.jlsp'
_DEFAULT_LOAD_DIRS = [_JLISP_DIR / 'prelude']
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    """Directories named by `var` (split on os.pathsep), else `defaults`.

    Entries are whitespace-trimmed and `~` is expanded; empty entries are
    dropped, so `JLISP_LOAD_PATH=":/opt/lib"` searches only /opt/lib.
    """
    entries = [p.strip() for p in os.environ.get(var, "").split(os.pathsep)]
    entries = [p for p in entries if p]
    if not entries:
        return [Path(p) for p in defaults]
    return [Path(p).expanduser() for p in entries]


def get_load_roots() -> List[Path]:
    return paths_from_env('JLISP_LOAD_PATH', _DEFAULT_LOAD_DIRS)


def get_prelude_path() -> Path:
    return paths_from_env('JLISP_PRELUDE_PATH', [_DEFAULT_PRELUDE])[0]


def get_log_level() -> str:
    return os.environ.get('JLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
