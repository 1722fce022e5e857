from __future__ import annotations

import logging
from pathlib import Path

from slisp import LispValue, SExpression
from slisp.builtin import register_builtins
from slisp.config import DEFAULT_NAMESPACE, STDLIB_FILES, find_lib_file
from slisp.errors import SLispError, format_error
from slisp.evaluation.evaluator import Evaluator
from slisp.loader import WorkingDirectoryStack, load_file
from slisp.reader.parser import read_all, read_one
from slisp.types.environment import Environment
from slisp.types.namespace import Namespace, NamespaceRegistry
from slisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Hosts one SLisp process: owns the namespace registry and the evaluator,
    wires in the native builtins, loads the standard libraries and keeps the
    top-level environment that successive `eval` calls share.
    """

    def __init__(self, stdlib: bool = True, cwd: Path | None = None):
        self.registry = NamespaceRegistry()
        self.evaluator = Evaluator(self.registry, WorkingDirectoryStack(cwd))
        register_builtins(self.registry)

        if stdlib:
            self.load_stdlib()

        self.env = Environment(namespace=self.registry.create_or_get(DEFAULT_NAMESPACE))

    @property
    def current_namespace(self) -> Namespace:
        return self.env.namespace

    def load_stdlib(self) -> None:
        for ns_name, file_name in STDLIB_FILES:
            path = find_lib_file(file_name)
            if path is None:
                logger.warning("Standard library %s not found on the library path", file_name)
                print(f"{ns_name.capitalize()} library implementation could not be loaded!")
                continue
            try:
                load_file(self.evaluator, path, self.registry.create_or_get(ns_name))
            except SLispError as e:
                logger.warning("Failed to load standard library %s: %s", path, e)
                print(f"{ns_name.capitalize()} library implementation could not be loaded!")
                print(format_error(e))

    def read(self, code: str) -> SExpression:
        """Read the first form of `code`; may raise ReaderIncomplete."""
        return read_one(code)

    def eval_form(self, form: SExpression) -> LispValue:
        value, self.env = self.evaluator.eval(form, self.env)
        return value

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form of `code` and return the last value."""
        result: LispValue = Nil
        for form in read_all(code):
            result = self.eval_form(form)
        return result

    def load_file(self, path: str | Path) -> LispValue:
        """Evaluate a source file into the current namespace."""
        return load_file(self.evaluator, path, self.current_namespace)
