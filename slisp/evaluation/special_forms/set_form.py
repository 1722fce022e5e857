from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol


def set_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    """(set! name value): mutate an existing local binding and return the value."""
    if len(args) != 2:
        raise GeneralError("'set!' requires 2 arguments")
    name, value_form = args
    if not isinstance(name, Symbol):
        raise GeneralError(f"'set!' requires the first argument to be a symbol, got {name!r}")
    value = evaluator.eval_form(value_form, env)
    return env.set_value(name, value)
