from __future__ import annotations

from slisp import LispValue
from slisp.errors import LispRuntimeError
from slisp.types.environment import Environment
from slisp.types.function import Function


def bind_arguments(fn: Function, supplied: list[LispValue]) -> Environment:
    """
    Single source of truth for parameter binding, shared by function calls
    (which pass evaluated values) and macro expansion (which passes forms).

    Returns a new Environment whose parent is the closure environment and whose
    governing namespace is the function's defining namespace.
    """
    fixed = len(fn.params)
    if fn.rest is None:
        if len(supplied) != fixed:
            raise LispRuntimeError(
                f"Invalid number of args: {len(supplied)}. Expected {fixed}."
            )
    elif len(supplied) < fixed:
        raise LispRuntimeError(
            f"Invalid number of args: {len(supplied)}. Expected at least {fixed}."
        )

    local_env = Environment(parent=fn.env, namespace=fn.namespace)
    for name, value in zip(fn.params, supplied):
        local_env.bind_local(name, value)
    if fn.rest is not None:
        local_env.bind_local(fn.rest, list(supplied[fixed:]))
    return local_env
