"""Lexical environments for SLisp.

An Environment is one frame of local bindings with a link to its parent
frame and to the namespace that governs free-symbol lookup. Lookup walks
the frame chain outward, then the namespace root bindings, then the
namespace's wholesale imports. Qualified names `ns/name` go straight to the
aliased or registered namespace.
"""

from __future__ import annotations

from typing import Optional

from slisp import LispValue
from slisp.errors import GeneralError, LispRuntimeError
from slisp.types.namespace import Namespace
from slisp.types.symbol import Symbol


def split_qualified(name: str) -> tuple[Optional[str], str]:
    """Split `ns/name` on the first slash.

    A name starting with '/' (the division builtin, for one) is never split.
    """
    if name.startswith("/") or "/" not in name:
        return None, name
    ns_name, binding = name.split("/", 1)
    return ns_name, binding


def _name_of(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise GeneralError(f"Values can only be bound to symbols. Got {name!r}")


class Environment:
    """Parent-linked frame of local bindings layered on a namespace."""

    __slots__ = ("bindings", "parent", "namespace")

    def __init__(self, parent: Optional[Environment] = None, namespace: Optional[Namespace] = None):
        self.bindings: dict[str, LispValue] = {}
        self.parent: Environment | None = parent
        if namespace is None:
            if parent is None:
                raise ValueError("A root Environment requires a namespace")
            namespace = parent.namespace
        self.namespace: Namespace = namespace

    def child(self) -> Environment:
        return Environment(parent=self)

    def bind_local(self, name: Symbol | str, value: LispValue) -> None:
        self.bindings[_name_of(name)] = value

    def bind_global(self, name: Symbol | str, value: LispValue) -> Symbol:
        """Bind in the governing namespace's root bindings; returns the qualified name."""
        if not isinstance(name, (Symbol, str)):
            raise LispRuntimeError(f"Values can only be bound to symbols. Got {name!r}")
        return Symbol(self.namespace.bind(_name_of(name), value))

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name` locally."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.bindings:
                return env
            env = env.parent
        return None

    def set_value(self, name: Symbol | str, value: LispValue) -> LispValue:
        """Mutate an existing local binding; namespace globals are not reachable here."""
        key = _name_of(name)
        env = self.find(key)
        if env is None:
            raise LispRuntimeError(f"Unable to set value {key} as it can't be found")
        env.bindings[key] = value
        return value

    def lookup(self, name: Symbol | str) -> LispValue:
        key = _name_of(name)
        ns_name, binding = split_qualified(key)

        if ns_name is not None:
            ns = self.namespace.resolve_namespace(ns_name)
            if ns is not None and binding in ns.root_bindings:
                return ns.root_bindings[binding]
            raise LispRuntimeError(f"Value {key} not found.")

        env = self.find(key)
        if env is not None:
            return env.bindings[key]

        ns = self.namespace
        if key in ns.root_bindings:
            return ns.root_bindings[key]
        for imported in ns.imports:
            if key in imported.root_bindings:
                return imported.root_bindings[key]

        raise LispRuntimeError(f"Value {key} not found.")

    def change_namespace(self, ns: Namespace) -> None:
        """Switch the governing namespace for this frame and every ancestor that shared it."""
        old = self.namespace
        env: Optional[Environment] = self
        while env is not None and env.namespace is old:
            env.namespace = ns
            env = env.parent

    def __repr__(self) -> str:
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return f"<Environment ns={self.namespace.name} depth={depth} {self.bindings!r}>"
