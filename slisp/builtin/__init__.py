"""Native builtin registration.

Each builtin module owns a BuiltinTable for one namespace. Its callbacks
follow the native signature `(args, evaluator, env) -> value`, where `args`
are already evaluated. The host wires every table into its namespace's root
bindings before any user code runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from slisp import LispValue, NativeFn
from slisp.errors import GeneralError
from slisp.types.function import Function
from slisp.types.namespace import NamespaceRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuiltinDef:
    body: NativeFn
    docstring: str = ""
    is_macro: bool = False


class BuiltinTable:
    """Name -> BuiltinDef mapping for one namespace, filled in by `define`."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        self.builtins: Dict[str, BuiltinDef] = {}

    def define(self, name: str, doc: str = "") -> Callable[[NativeFn], NativeFn]:
        def decorator(fn: NativeFn) -> NativeFn:
            self.builtins[name] = BuiltinDef(fn, doc)
            return fn
        return decorator

    def __contains__(self, name: str) -> bool:
        return name in self.builtins

    def __len__(self) -> int:
        return len(self.builtins)


def check_arg_count(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        plural = "argument" if expected == 1 else "arguments"
        raise GeneralError(f"'{name}' expects {expected} {plural}. Got {len(args)}.")


def check_min_args(name: str, args: list[LispValue], minimum: int) -> None:
    if len(args) < minimum:
        plural = "argument" if minimum == 1 else "arguments"
        raise GeneralError(f"'{name}' requires at least {minimum} {plural}.")


def all_tables() -> list[BuiltinTable]:
    from slisp.builtin import collection_builtin, core_builtin, math_builtin, string_builtin

    return [
        core_builtin.builtins,
        collection_builtin.builtins,
        math_builtin.builtins,
        string_builtin.builtins,
    ]


def register_builtins(registry: NamespaceRegistry) -> None:
    """Bind every native builtin into the root bindings of its namespace."""
    for table in all_tables():
        ns = registry.create_or_get(table.namespace)
        for name, bdef in table.builtins.items():
            fn = Function.builtin(bdef.body, bdef.docstring, namespace=ns)
            ns.bind(name, fn.as_macro() if bdef.is_macro else fn)
        logger.debug("Registered %d builtins into namespace %s", len(table), ns.name)
