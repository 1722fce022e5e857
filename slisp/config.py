from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (slisp package directory)
_SLISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_LIB_DIRS = [_SLISP_DIR / 'lib']

# Standard libraries in load order: (namespace, file name)
STDLIB_FILES = [
    ('core', 'core.sl'),
    ('math', 'math.sl'),
    ('string', 'string.sl'),
]

DEFAULT_NAMESPACE = 'user'
CORE_NAMESPACE = 'core'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_lib_roots() -> List[Path]:
    return paths_from_env('SLISP_LIB_PATH', _DEFAULT_LIB_DIRS)


def find_lib_file(name: str) -> Path | None:
    """Return the first library file called `name` under the configured roots."""
    for root in get_lib_roots():
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None
