"""Function terms: native callbacks and interpreted closures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from slisp import NativeFn, SExpression
from slisp.errors import GeneralError
from slisp.types.symbol import Symbol

if TYPE_CHECKING:
    from slisp.types.environment import Environment
    from slisp.types.namespace import Namespace

VARIADIC_MARKER = Symbol("&")


def parse_parameters(params: list[SExpression]) -> tuple[list[Symbol], Optional[Symbol]]:
    """Split a parameter list into fixed names and an optional rest name.

    `&` may appear at most once and must be the second-to-last entry.
    """
    names: list[Symbol] = []
    for p in params:
        if not isinstance(p, Symbol):
            raise GeneralError(f"Function parameters must be symbols, got {p!r}")
        names.append(p)

    if VARIADIC_MARKER not in names:
        return names, None

    if names.count(VARIADIC_MARKER) > 1:
        raise GeneralError("Function parameters may contain only one '&'")
    if names.index(VARIADIC_MARKER) != len(names) - 2:
        raise GeneralError("'&' must be the second-to-last function parameter")
    return names[:-2], names[-1]


class Function:
    """A first-class function value.

    Exactly one of `native` or `body` is meaningful. Interpreted functions
    carry their fixed parameter names, an optional rest name, the body forms,
    the namespace they were defined in and the environment they close over.
    """

    __slots__ = ("native", "params", "rest", "body", "docstring", "is_macro", "namespace", "env")

    def __init__(
        self,
        native: NativeFn | None = None,
        params: list[Symbol] | None = None,
        rest: Symbol | None = None,
        body: list[SExpression] | None = None,
        docstring: str | None = None,
        is_macro: bool = False,
        namespace: Namespace | None = None,
        env: Environment | None = None,
    ):
        self.native = native
        self.params: list[Symbol] = params or []
        self.rest = rest
        self.body: list[SExpression] = body or []
        self.docstring = docstring
        self.is_macro = is_macro
        self.namespace = namespace
        self.env = env

    @classmethod
    def builtin(cls, fn: NativeFn, docstring: str | None = None, namespace: Namespace | None = None) -> Function:
        return cls(native=fn, docstring=docstring, namespace=namespace)

    @property
    def is_native(self) -> bool:
        return self.native is not None

    def as_macro(self) -> Function:
        """Return a copy of this function flagged as a macro."""
        return Function(
            native=self.native,
            params=list(self.params),
            rest=self.rest,
            body=list(self.body),
            docstring=self.docstring,
            is_macro=True,
            namespace=self.namespace,
            env=self.env,
        )

    def __repr__(self) -> str:
        return "#<macro>" if self.is_macro else "#<function>"
