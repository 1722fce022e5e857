"""Loading SLisp source files.

Files are loaded through the language's own bootstrap convention: the
contents are slurped, wrapped as `(do <forms>)`, read back with `read-string`
and evaluated in a root environment of the target namespace. While a file is
loading its directory sits on top of the working-directory stack so relative
paths inside it resolve next to the file; the stack is popped on every exit
path.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List

from slisp import LispValue
from slisp.errors import GeneralError
from slisp.printer import print_term
from slisp.reader.parser import read_one
from slisp.types.environment import Environment
from slisp.types.namespace import Namespace

if TYPE_CHECKING:
    from slisp.evaluation.evaluator import Evaluator

logger = logging.getLogger(__name__)


class WorkingDirectoryStack:
    """Stack of directories used to resolve relative paths during nested loads."""

    def __init__(self, root: Path | None = None):
        self._stack: List[Path] = [root if root is not None else Path.cwd()]

    @property
    def current(self) -> Path:
        return self._stack[-1]

    def resolve(self, path: str | Path) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.current / p

    def push(self, directory: Path) -> None:
        self._stack.append(directory)

    def pop(self) -> Path:
        if len(self._stack) == 1:
            raise IndexError("Cannot pop the root working directory")
        return self._stack.pop()

    @contextmanager
    def pushed(self, directory: Path) -> Iterator[Path]:
        self.push(directory)
        try:
            yield directory
        finally:
            self.pop()

    def __len__(self) -> int:
        return len(self._stack)


def load_form(path: Path) -> str:
    """Source of the bootstrap expression that reads `path` as one (do ...) form."""
    # The closing paren goes on its own line so a trailing comment cannot swallow it
    return f'(core/read-string (core/str "(do " (core/slurp {print_term(str(path))}) "\\n)"))'


def load_file(evaluator: Evaluator, path: str | Path, namespace: Namespace) -> LispValue:
    """Evaluate every form of the file at `path` into `namespace`."""
    resolved = evaluator.cwd_stack.resolve(path)
    if not resolved.is_file():
        raise GeneralError(f"File {path} not found.")
    logger.debug("Loading %s into namespace %s", resolved, namespace.name)
    with evaluator.cwd_stack.pushed(resolved.parent):
        env = Environment(namespace=namespace)
        form, _ = evaluator.eval(read_one(load_form(resolved)), env)
        value, _ = evaluator.eval(form, env)
    return value
