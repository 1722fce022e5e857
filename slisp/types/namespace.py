from __future__ import annotations
from typing import Dict, List, Optional

from slisp import LispValue
from slisp.config import CORE_NAMESPACE
from slisp.errors import GeneralError


class Namespace:
    """A named global scope: root bindings, explicit aliases and wholesale imports."""

    __slots__ = ("name", "registry", "root_bindings", "aliases", "imports")

    def __init__(self, name: str, registry: NamespaceRegistry):
        self.name = name
        self.registry = registry
        self.root_bindings: Dict[str, LispValue] = {}
        self.aliases: Dict[str, Namespace] = {}
        # Ordered so lookups through imports are deterministic
        self.imports: List[Namespace] = []

    def bind(self, name: str, value: LispValue) -> str:
        """Bind `name` globally and return its qualified name."""
        self.root_bindings[name] = value
        return f"{self.name}/{name}"

    def import_namespace(self, other: Namespace) -> None:
        if other is not self and other not in self.imports:
            self.imports.append(other)

    def add_alias(self, alias: str, other: Namespace) -> None:
        self.aliases[alias] = other

    def resolve_namespace(self, name: str) -> Optional[Namespace]:
        """Resolve an alias local to this namespace, then a registered namespace name."""
        ns = self.aliases.get(name)
        if ns is not None:
            return ns
        return self.registry.get(name)

    def __repr__(self) -> str:
        return f"<Namespace {self.name}>"


class NamespaceRegistry:
    """Process-wide set of namespaces, owned by the interpreter and passed by reference."""

    def __init__(self, core_imports: Optional[List[str]] = None):
        self._namespaces: Dict[str, Namespace] = {}
        self.core_imports: List[str] = core_imports if core_imports is not None else [CORE_NAMESPACE]

    def get(self, name: str) -> Optional[Namespace]:
        return self._namespaces.get(name)

    def require(self, name: str) -> Namespace:
        ns = self._namespaces.get(name)
        if ns is None:
            raise GeneralError(f"Invalid namespace: '{name}'")
        return ns

    def create_or_get(self, name: str) -> Namespace:
        ns = self._namespaces.get(name)
        if ns is not None:
            return ns
        ns = Namespace(name, self)
        self._namespaces[name] = ns
        for core_name in self.core_imports:
            if core_name != name:
                ns.import_namespace(self.create_or_get(core_name))
        return ns
