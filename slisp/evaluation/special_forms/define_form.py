from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError, LispRuntimeError
from slisp.types.environment import Environment, split_qualified
from slisp.types.symbol import Symbol


def def_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    """
    (def name value)
    Binds globally in the current namespace and returns the qualified name.
    """
    if len(args) != 2:
        raise LispRuntimeError("'def' requires 2 arguments")

    name, value_form = args
    if not isinstance(name, Symbol):
        raise LispRuntimeError(f"Values can only be bound to symbols. Got {name!r}")
    if split_qualified(name.id)[0] is not None:
        raise GeneralError(f"Cannot def a qualified name: {name.id}")

    value = evaluator.eval_form(value_form, env)
    return env.bind_global(name, value)
